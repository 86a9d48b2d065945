from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7


Shape = np.ndarray


def _frozen(rows: List[List[int]]) -> Shape:
    arr = np.array(rows, dtype=np.int8)
    arr.setflags(write=False)
    return arr


BASE_SHAPES: Dict[TetrominoType, Shape] = {
    TetrominoType.I: _frozen([[0, 0, 0, 0], [1, 1, 1, 1], [0, 0, 0, 0], [0, 0, 0, 0]]),
    TetrominoType.J: _frozen([[1, 0, 0], [1, 1, 1], [0, 0, 0]]),
    TetrominoType.L: _frozen([[0, 0, 1], [1, 1, 1], [0, 0, 0]]),
    TetrominoType.O: _frozen([[1, 1], [1, 1]]),
    TetrominoType.S: _frozen([[0, 1, 1], [1, 1, 0], [0, 0, 0]]),
    TetrominoType.T: _frozen([[0, 1, 0], [1, 1, 1], [0, 0, 0]]),
    TetrominoType.Z: _frozen([[1, 1, 0], [0, 1, 1], [0, 0, 0]]),
}

COLORS: Dict[TetrominoType, str] = {
    TetrominoType.I: "#a04800",  # orange
    TetrominoType.J: "#8a2a2e",  # red
    TetrominoType.L: "#2a7000",  # green
    TetrominoType.O: "#5030a0",  # purple
    TetrominoType.S: "#1048a0",  # blue
    TetrominoType.T: "#3080a0",  # cyan
    TetrominoType.Z: "#a08000",  # yellow
}

EMPTY_RGB: Tuple[int, int, int] = (20, 20, 26)

PIECE_NAMES: Dict[TetrominoType, str] = {kind: f"{kind.name}-BLOCK" for kind in TetrominoType}


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    value = int(color.lstrip("#"), 16)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def color_for_value(v: int) -> Tuple[int, int, int]:
    """RGB for a grid value; 0 is empty and negative values are the falling piece."""
    if v == 0:
        return EMPTY_RGB
    return hex_to_rgb(COLORS[TetrominoType(abs(v))])


@dataclass(frozen=True, eq=False)
class Piece:
    """A falling tetromino: its current rotation matrix anchored at (x, y).

    Pieces are values. Moving or rotating produces a new piece and never
    checks legality; that is the grid's job.
    """

    kind: TetrominoType
    matrix: Shape
    x: int = 0
    y: int = 0

    @classmethod
    def spawn(cls, kind: TetrominoType, width: int = 10) -> "Piece":
        base = BASE_SHAPES[kind]
        n = base.shape[0]
        return cls(kind=kind, matrix=base, x=width // 2 - n // 2, y=0)

    @property
    def color(self) -> str:
        return COLORS[self.kind]

    @property
    def name(self) -> str:
        return PIECE_NAMES[self.kind]

    @property
    def size(self) -> int:
        return int(self.matrix.shape[0])

    def rotated(self) -> "Piece":
        # rotated[i][j] == matrix[N-1-j][i]
        return Piece(self.kind, np.rot90(self.matrix, 1, axes=(1, 0)), self.x, self.y)

    def moved(self, dx: int, dy: int) -> "Piece":
        return Piece(self.kind, self.matrix, self.x + dx, self.y + dy)

    def cells(self) -> List[Tuple[int, int]]:
        cells: List[Tuple[int, int]] = []
        for r, c in zip(*np.nonzero(self.matrix)):
            cells.append((self.x + int(c), self.y + int(r)))
        return cells

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return (
            self.kind == other.kind
            and self.x == other.x
            and self.y == other.y
            and np.array_equal(self.matrix, other.matrix)
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.x, self.y, self.matrix.shape, self.matrix.tobytes()))
