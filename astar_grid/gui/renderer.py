"""Renderer for drawing a grid, its endpoints and search paths."""

from __future__ import annotations

from typing import Callable, Sequence

import pygame

from ..core.grid import Cell, Coord, Grid

# Define colors for cells
BACKGROUND_COLOR = (255, 255, 255)
GRID_LINE_COLOR = (0, 0, 0)
BLOCKED_COLOR = (0, 0, 0)
ENDPOINT_COLOR = (0, 0, 0)
LABEL_COLOR = (90, 90, 90)


class Renderer:
    """Draws onto any ``pygame.Surface``.

    Row ``i`` is drawn top to bottom and column ``j`` left to right, each cell
    a square of :attr:`cell_size` pixels.
    """

    def __init__(self, surface: pygame.Surface, grid_size: int, *, labels: bool = False) -> None:
        if grid_size <= 0:
            raise ValueError("grid_size must be positive")
        self.surface = surface
        self.grid_size = grid_size
        width, height = surface.get_size()
        self.cell_size = max(1, min(width, height) // grid_size)
        self.labels = labels
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, max(8, self.cell_size // 3))
        return self._font

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    def cell_rect(self, i: int, j: int) -> pygame.Rect:
        return pygame.Rect(j * self.cell_size, i * self.cell_size, self.cell_size, self.cell_size)

    def cell_center(self, i: int, j: int) -> tuple[int, int]:
        return self.cell_rect(i, j).center

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------
    def draw_grid(self, grid: Grid) -> None:
        """Draw blocked cells filled and open cells as outlined squares."""

        self.surface.fill(BACKGROUND_COLOR)
        for cell in grid:
            rect = self.cell_rect(cell.i, cell.j)
            if cell.blocked:
                pygame.draw.rect(self.surface, BLOCKED_COLOR, rect)
            else:
                pygame.draw.rect(self.surface, GRID_LINE_COLOR, rect, 1)
                if self.labels:
                    text = self._get_font().render(repr(cell), True, LABEL_COLOR)
                    self.surface.blit(text, text.get_rect(center=rect.center))

    def draw_endpoints(self, start: Coord, goal: Coord) -> None:
        """Mark ``start`` and ``goal`` with circles."""

        radius = max(1, self.cell_size // 2 - 1)
        for i, j in (start, goal):
            pygame.draw.circle(self.surface, ENDPOINT_COLOR, self.cell_center(i, j), radius, 2)

    def draw_path(
        self,
        path: Sequence[Cell],
        colour: str | tuple[int, int, int],
        on_segment: Callable[[], None] | None = None,
    ) -> int:
        """Draw a line through the centres of ``path``.

        ``on_segment`` is called after each segment so callers can animate.
        Returns the number of segments drawn.
        """

        rgb = pygame.Color(colour)
        width = max(1, self.cell_size // 10)
        segments = 0
        for a, b in zip(path, path[1:]):
            pygame.draw.line(self.surface, rgb, self.cell_center(a.i, a.j), self.cell_center(b.i, b.j), width)
            segments += 1
            if on_segment is not None:
                on_segment()
        return segments


__all__ = ["Renderer"]
