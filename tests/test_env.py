import gymnasium as gym
import numpy as np
import pytest

import tris_engine.env  # noqa: F401
from tris_engine.env.tris_env import TrisEnv
from tris_engine.game import Action, Piece, TetrominoType
from tris_engine.rl.random_agent import run_random


@pytest.fixture
def env():
    e = TrisEnv(frame_ms=50.0, render_mode="rgb_array")
    yield e
    e.close()


def test_reset_observation_in_space(env):
    obs, info = env.reset(seed=3)
    assert env.observation_space.contains(obs)
    assert obs["grid"].shape == (20, 10)
    assert (obs["grid"] < 0).sum() == 4
    assert info["score"] == 0
    assert info["level"] == 1


def test_noop_steps_let_gravity_act(env):
    env.reset(seed=3)
    y0 = env.game.piece.y
    # 21 frames of 50ms pushes the gravity counter past 1000ms
    for _ in range(21):
        env.step(env.ACTIONS.index(Action.NONE))
    assert env.game.piece.y == y0 + 1


def test_reward_is_score_delta(env):
    env.reset(seed=3)
    game = env.game
    grid = game.state.grid.grid
    grid[19, 2:] = 1
    piece = Piece.spawn(TetrominoType.O)
    game.state.piece = Piece(piece.kind, piece.matrix, 0, 18)
    _, reward, terminated, truncated, info = env.step(env.ACTIONS.index(Action.SOFT_DROP))
    assert reward == 100.0
    assert info["lines_cleared"] == 1
    assert not terminated and not truncated


def test_truncates_at_step_limit():
    env = TrisEnv(max_episode_steps=3)
    env.reset(seed=0)
    results = [env.step(env.ACTIONS.index(Action.NONE)) for _ in range(3)]
    assert [r[3] for r in results] == [False, False, True]


def test_game_over_terminates(env):
    env.reset(seed=3)
    game = env.game
    game.state.grid.grid[0:3, 3:7] = 1
    piece = Piece.spawn(TetrominoType.O)
    game.state.piece = Piece(piece.kind, piece.matrix, 0, 18)
    _, _, terminated, _, _ = env.step(env.ACTIONS.index(Action.SOFT_DROP))
    assert terminated


def test_render_rgb_array(env):
    env.reset(seed=1)
    img = env.render()
    assert img.shape == (240, 120, 3)
    assert img.dtype == np.uint8


def test_registered_env_runs():
    e = gym.make("Tris-10x20-v0")
    obs, _ = e.reset(seed=5)
    for _ in range(10):
        obs, reward, terminated, truncated, info = e.step(e.action_space.sample())
        assert reward >= 0
    e.close()


def test_random_agent_summary():
    result = run_random(steps=300, seed=0)
    assert set(result) == {"total_reward", "episodes", "best_score"}
    assert result["best_score"] >= 0
