from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from tris_engine.game import Action, GameConfig, ScoringRules, TetrominoType, TrisGame, color_for_value


class TrisEnv(gym.Env):
    """Step-per-frame environment around `TrisGame`.

    Each step applies one `Action` (pause is not offered to agents) and then
    advances the game clock by `frame_ms`, so gravity keeps acting while the
    agent shuffles the piece around. Reward is the engine score delta.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 20}

    # Agent-facing actions, in Discrete index order
    ACTIONS = (Action.LEFT, Action.RIGHT, Action.ROTATE, Action.SOFT_DROP, Action.NONE)

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        render_mode: Optional[str] = None,
        frame_ms: float = 50.0,
        max_episode_steps: int = 10000,
        terminal_penalty: float = 0.0,
    ) -> None:
        super().__init__()
        if frame_ms < 0:
            raise ValueError("frame_ms must be non-negative")
        self.game = TrisGame(config, rules)
        self.render_mode = render_mode
        self.frame_ms = float(frame_ms)
        self.max_episode_steps = int(max_episode_steps)
        self.terminal_penalty = float(terminal_penalty)

        h, w = self.game.config.height, self.game.config.width
        n_kinds = len(TetrominoType)
        self.observation_space = spaces.Dict(
            {
                # settled cells are positive type ids, the falling piece negative
                "grid": spaces.Box(low=-n_kinds, high=n_kinds, shape=(h, w), dtype=np.int8),
                "next_piece": spaces.Discrete(n_kinds + 1),
            }
        )
        self.action_space = spaces.Discrete(len(self.ACTIONS))

        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        return {
            "grid": self.game.get_state().astype(np.int8),
            "next_piece": int(self.game.next_kind),
        }

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "lines_cleared": self.game.lines_cleared,
            "level": self.game.level,
            "max_height": self.game.state.grid.get_max_height(),
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.reset(seed)
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        score_before = self.game.score
        self.game.step(self.ACTIONS[int(action)])
        self.game.advance(self.frame_ms)
        self._steps += 1

        terminated = self.game.is_game_over
        truncated = not terminated and self._steps >= self.max_episode_steps
        reward = float(self.game.score - score_before)
        if terminated:
            reward += self.terminal_penalty
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            # human rendering lives in tris_engine.visualization; noop
            return None
        grid = self.game.get_state()
        cell = 12
        h, w = grid.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_value(int(grid[y, x]))
        return img

    def close(self) -> None:
        pass
