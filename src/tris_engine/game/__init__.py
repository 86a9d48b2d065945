"""Game module for Tris.

Exports the rules engine and supporting classes:
- GameGrid: Settled cells, collision, merge and row sweep
- Piece: Falling tetromino with clockwise rotation
- TetrominoType: Enum of available piece types
- resolve_rotation: Rotation with wall-kick resolution
- ScoringRules: Scoring table and speed curve
- TrisGame: Piece lifecycle, gravity and game state
"""

from .grid import GameGrid
from .pieces import BASE_SHAPES, COLORS, EMPTY_RGB, PIECE_NAMES, Piece, TetrominoType, color_for_value, hex_to_rgb
from .kicks import WALL_KICKS, resolve_rotation
from .rules import ScoringRules
from .core import Action, GameConfig, GameSnapshot, GameState, GameStatus, TrisGame

__all__ = [
    "GameGrid",
    "BASE_SHAPES",
    "COLORS",
    "EMPTY_RGB",
    "PIECE_NAMES",
    "Piece",
    "TetrominoType",
    "color_for_value",
    "hex_to_rgb",
    "WALL_KICKS",
    "resolve_rotation",
    "ScoringRules",
    "Action",
    "GameConfig",
    "GameSnapshot",
    "GameState",
    "GameStatus",
    "TrisGame",
]
