from __future__ import annotations

import logging

import numpy as np

from .pieces import Piece

logger = logging.getLogger(__name__)


class GameGrid:
    """Settled blocks of a falling-block board.

    The grid uses 0 for empty cells and positive integers for settled cells.
    The integer is the tetromino type that settled there and doubles as the
    color token. Row 0 is the top of the board; cells above it (negative y)
    are legal for a falling piece but are never stored.
    """

    def __init__(self, width: int = 10, height: int = 20) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def collide(self, piece: Piece) -> bool:
        for x, y in piece.cells():
            if x < 0 or x >= self.width or y >= self.height:
                return True
            if y >= 0 and self.grid[y, x] != 0:
                return True
        return False

    def merge(self, piece: Piece) -> None:
        value = int(piece.kind)
        for x, y in piece.cells():
            if y >= 0:
                self.grid[y, x] = value

    def sweep(self) -> int:
        """Remove full rows bottom-up, shifting everything above down.

        Returns the number of rows removed.
        """
        cleared = 0
        row = self.height - 1
        while row >= 0:
            if np.all(self.grid[row] != 0):
                # Shift rows [0, row) down by one and open an empty row on top;
                # the same index is checked again since it now holds the row above.
                self.grid[1 : row + 1] = self.grid[0:row].copy()
                self.grid[0] = 0
                cleared += 1
            else:
                row -= 1
        if cleared:
            logger.debug("swept %d row(s)", cleared)
        return cleared

    def get_max_height(self) -> int:
        # y=0 is top; find first non-empty from top
        non_empty_rows = np.where(np.any(self.grid != 0, axis=1))[0]
        if non_empty_rows.size == 0:
            return 0
        return self.height - int(non_empty_rows[0])

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
