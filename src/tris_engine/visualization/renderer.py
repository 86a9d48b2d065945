from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pygame

from tris_engine.game import BASE_SHAPES, EMPTY_RGB, GameSnapshot, TetrominoType, color_for_value

RGB = Tuple[int, int, int]

PREVIEW_COLOR: RGB = (136, 136, 136)


def lighten(color: RGB, percent: float) -> RGB:
    amt = round(2.55 * percent)
    r, g, b = (min(255, max(0, c + amt)) for c in color)
    return r, g, b


class Renderer:
    """Draws a `GameSnapshot`: board, falling piece, next preview and stats."""

    def __init__(self, cell_size: int = 30, margin: int = 20, preview_cell: int = 18) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.preview_cell = preview_cell
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, width: int, height: int) -> Tuple[int, int]:
        side_panel_w = 6 * self.cell_size
        return (
            self.margin * 3 + width * self.cell_size + side_panel_w,
            self.margin * 2 + height * self.cell_size,
        )

    def _block(self, surf: pygame.Surface, x: int, y: int, color: RGB, size: int) -> None:
        rect = pygame.Rect(x, y, size - 1, size - 1)
        pygame.draw.rect(surf, color, rect, border_radius=max(1, int(size * 0.15)))
        # Top/left highlight
        pygame.draw.line(surf, lighten(color, 40), rect.topleft, rect.topright, 2)
        pygame.draw.line(surf, lighten(color, 40), rect.topleft, rect.bottomleft, 2)

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                v = int(state[y, x])
                if v == 0:
                    rect = pygame.Rect(x * self.cell_size, y * self.cell_size, self.cell_size - 1, self.cell_size - 1)
                    pygame.draw.rect(surf, EMPTY_RGB, rect)
                else:
                    self._block(surf, x * self.cell_size, y * self.cell_size, color_for_value(v), self.cell_size)
        return surf

    def _overlay_piece(self, state: np.ndarray, snapshot: GameSnapshot) -> np.ndarray:
        piece = snapshot.piece
        if piece is None:
            return state
        h, w = state.shape
        for x, y in piece.cells():
            if 0 <= y < h and 0 <= x < w:
                state[y, x] = int(piece.kind)
        return state

    def _draw_preview(self, screen: pygame.Surface, kind: TetrominoType, x0: int, y0: int) -> None:
        shape = BASE_SHAPES[kind]
        for py in range(shape.shape[0]):
            for px in range(shape.shape[1]):
                if shape[py, px]:
                    self._block(
                        screen,
                        x0 + px * self.preview_cell,
                        y0 + py * self.preview_cell,
                        PREVIEW_COLOR,
                        self.preview_cell,
                    )

    def draw(self, screen: pygame.Surface, snapshot: GameSnapshot) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 28)
        state = self._overlay_piece(snapshot.grid.copy(), snapshot)
        screen.fill((10, 10, 14))
        screen.blit(self._grid_surface(state), (self.margin, self.margin))

        x0 = self.margin * 2 + state.shape[1] * self.cell_size
        y0 = self.margin
        screen.blit(self._font.render("NEXT", True, (220, 220, 220)), (x0, y0))
        self._draw_preview(screen, snapshot.next_kind, x0, y0 + 30)
        lines = (
            f"SCORE {snapshot.score}",
            f"LEVEL {snapshot.level}",
            f"LINES {snapshot.lines_cleared}",
        )
        for i, text in enumerate(lines):
            screen.blit(self._font.render(text, True, (220, 220, 220)), (x0, y0 + 120 + i * 30))

        banner = None
        if snapshot.is_game_over:
            banner = f"GAME OVER - {snapshot.score} - R to restart"
        elif snapshot.is_paused:
            banner = "PAUSED - Space to resume"
        if banner is not None:
            text = self._font.render(banner, True, (255, 255, 255))
            rect = text.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
            screen.blit(text, rect)
        pygame.display.flip()
