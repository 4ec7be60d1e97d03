from __future__ import annotations

from typing import Optional

import numpy as np
import pygame

from cup_tetris.game import GameState, shape_for
from .palette import color_for


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20, panel_cells: int = 6) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_cells = panel_cells
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, state: GameState) -> tuple[int, int]:
        width = self.margin * 3 + (state.config.width + self.panel_cells) * self.cell_size
        height = self.margin * 2 + state.config.height * self.cell_size
        return width, height

    def _font_obj(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 26)
        return self._font

    def _grid_surface(self, grid: np.ndarray) -> pygame.Surface:
        h, w = grid.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color_for(int(grid[y, x])), rect)
        return surf

    def _draw_panel(self, screen: pygame.Surface, state: GameState) -> None:
        font = self._font_obj()
        x0 = self.margin * 2 + state.config.width * self.cell_size
        y0 = self.margin
        screen.blit(font.render(f"score: {state.score}", True, (230, 230, 230)), (x0, y0))
        screen.blit(font.render(f"lines: {state.lines_cleared_total}", True, (230, 230, 230)), (x0, y0 + 24))
        screen.blit(font.render(f"next: {state.next_kind.label}", True, (230, 230, 230)), (x0, y0 + 48))

        # Preview cells are centred on the piece's local origin
        origin_x = x0 + 2 * self.cell_size
        origin_y = y0 + 96 + 2 * self.cell_size
        for p in shape_for(state.next_kind).points:
            rect = pygame.Rect(
                origin_x + p.x * self.cell_size,
                origin_y + p.y * self.cell_size,
                self.cell_size - 1,
                self.cell_size - 1,
            )
            pygame.draw.rect(screen, color_for(state.next_kind), rect)

        if state.game_over:
            over = font.render("Game Over - R to restart", True, (255, 100, 100))
            screen.blit(over, (x0, origin_y + 3 * self.cell_size))

    def draw(self, screen: pygame.Surface, state: GameState) -> None:
        screen.fill((10, 10, 14))
        screen.blit(self._grid_surface(state.render_grid()), (self.margin, self.margin))
        self._draw_panel(screen, state)
        pygame.display.flip()
