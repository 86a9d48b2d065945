"""Tris: a falling-block puzzle rules engine with pygame and gymnasium front-ends."""

from .game import GameConfig, ScoringRules, TrisGame

__all__ = ["GameConfig", "ScoringRules", "TrisGame"]
