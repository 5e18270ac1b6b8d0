"""ASCII terminal renderer for occupancy grids and paths."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence, TextIO

from ...core.grid import Cell, Coord, Grid


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

OPEN_GLYPH = "."
BLOCKED_GLYPH = "#"
PATH_GLYPH = "*"


class TerminalView:
    """Minimal grid viewer using ANSI colours."""

    def __init__(self, colour: bool = True, stream: TextIO | None = None) -> None:
        self.colour = colour
        self.stream = stream

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def draw(
        self,
        grid: Grid,
        start: Coord | None = None,
        goal: Coord | None = None,
        paths: Iterable[tuple[Sequence[Cell], str]] = (),
    ) -> str:
        """Return the grid as text.

        ``paths`` holds ``(path, colour)`` pairs; later paths are drawn over
        earlier ones. ``start`` and ``goal`` are marked ``A`` and ``B``.
        """

        overlay: dict[Coord, str] = {}
        for path, colour in paths:
            for cell in path:
                overlay[cell.coord] = colour

        lines: list[str] = []
        for row in grid.cells:
            glyphs: list[str] = []
            for cell in row:
                glyph, colour = _cell_glyph_colour(cell, overlay)
                if cell.coord == start:
                    glyph, colour = "A", "yellow"
                elif cell.coord == goal:
                    glyph, colour = "B", "yellow"
                glyphs.append(self._paint(glyph, colour))
            lines.append(" ".join(glyphs))
        return "\n".join(lines)

    def render(self, grid: Grid, **kwargs) -> None:
        """Write :meth:`draw` output to the configured stream or ``stdout``."""

        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(self.draw(grid, **kwargs) + "\n")
        stream.flush()

    def _paint(self, glyph: str, colour: str) -> str:
        if not self.colour or colour == "reset":
            return glyph
        return f"{_COLOURS.get(colour, '')}{glyph}{_COLOURS['reset']}"


# ----------------------------------------------------------------------
# Helper functions
# ----------------------------------------------------------------------


def _cell_glyph_colour(cell: Cell, overlay: dict[Coord, str]) -> tuple[str, str]:
    if cell.blocked:
        return BLOCKED_GLYPH, "reset"
    colour = overlay.get(cell.coord)
    if colour is not None:
        return PATH_GLYPH, colour
    return OPEN_GLYPH, "reset"


__all__ = ["TerminalView"]
