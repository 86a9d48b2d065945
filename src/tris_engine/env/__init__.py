"""Gymnasium environments for Tris."""

from __future__ import annotations

from gymnasium.envs.registration import register

# One action per frame on the classic 10x20 board
register(
    id="Tris-10x20-v0",
    entry_point="tris_engine.env.tris_env:TrisEnv",
)

__all__ = ["Tris-10x20-v0"]
