from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import gymnasium as gym

import tris_engine.env  # noqa: F401


def run_random(steps: int = 2000, seed: Optional[int] = None, frame_ms: float = 50.0) -> dict:
    env = gym.make("Tris-10x20-v0", frame_ms=frame_ms)
    env.action_space.seed(seed)
    obs, info = env.reset(seed=seed)
    total_reward = 0.0
    episodes = 0
    best_score = 0
    for _ in range(steps):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total_reward += float(reward)
        best_score = max(best_score, int(info["score"]))
        if terminated or truncated:
            episodes += 1
            obs, info = env.reset()
    env.close()
    return {"total_reward": total_reward, "episodes": episodes, "best_score": best_score}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Run a uniformly random agent on Tris")
    p.add_argument("--steps", type=int, default=2000)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--frame_ms", type=float, default=50.0)
    p.add_argument("--log-level", type=str, default="WARNING")
    return p


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())
    result = run_random(args.steps, args.seed, args.frame_ms)
    print(
        f"Random agent total reward: {result['total_reward']:.2f} "
        f"over {result['episodes']} finished episode(s), best score {result['best_score']}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
