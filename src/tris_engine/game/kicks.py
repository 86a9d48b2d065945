from __future__ import annotations

from typing import Optional, Tuple

from .grid import GameGrid
from .pieces import Piece

# Offsets tried, in order, when a plain rotation collides.
WALL_KICKS: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, -1), (2, 0), (-2, 0))


def resolve_rotation(grid: GameGrid, piece: Piece) -> Optional[Piece]:
    """Rotate `piece` clockwise, kicking it off walls and stacks if needed.

    Returns the accepted piece, or None when the base rotation and every kick
    collide. Neither `grid` nor `piece` is modified.
    """
    candidate = piece.rotated()
    if not grid.collide(candidate):
        return candidate
    for dx, dy in WALL_KICKS:
        kicked = candidate.moved(dx, dy)
        if not grid.collide(kicked):
            return kicked
    return None
