"""Plain-text tables of per-cell search scores."""

from __future__ import annotations

from typing import Iterable, Sequence

from ...core.grid import Cell, Grid
from ...core.metric import Metric


BLOCKED_GLYPH = "-----"

_TITLES = {
    "h": "Node H values according to {metric} distance",
    "g": "Node G values",
    "f": "Node F values",
}


def format_score(value: float) -> str:
    """Return ``value`` zero-padded to five characters, e.g. ``03.40``."""

    return f"{value:05.2f}"


def score_table(grid: Grid, score: str) -> str:
    """Return the ``score`` (``"g"``, ``"h"`` or ``"f"``) of each cell.

    Blocked cells are shown as ``-----``.
    """

    if score not in _TITLES:
        raise ValueError(f"unknown score {score!r}; expected one of g, h, f")
    lines = []
    for row in grid.cells:
        parts = [
            BLOCKED_GLYPH if cell.blocked else format_score(getattr(cell, score))
            for cell in row
        ]
        lines.append(" ".join(parts))
    return "\n".join(lines)


def score_report(grid: Grid, metric: Metric | str) -> str:
    """Return H, G and F tables for the last search, each with a heading."""

    metric = Metric.parse(metric)
    sections = []
    for score in ("h", "g", "f"):
        title = _TITLES[score].format(metric=metric)
        sections.append(f"{title}\n\n{score_table(grid, score)}")
    return "\n\n".join(sections)


def format_path(path: Sequence[Cell]) -> str:
    """Return ``path`` as ``[(0,0), (0,1), ...]``."""

    return "[" + ", ".join(repr(cell) for cell in path) + "]"


def format_matrix(matrix: Iterable[Sequence[bool]]) -> str:
    """Return an occupancy matrix as rows of ``1`` (open) and ``0`` (blocked)."""

    return "\n".join(" ".join("1" if v else "0" for v in row) for row in matrix)


__all__ = [
    "BLOCKED_GLYPH",
    "format_matrix",
    "format_path",
    "format_score",
    "score_report",
    "score_table",
]
