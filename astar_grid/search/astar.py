"""A* shortest-path search over an occupancy :class:`Grid`."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set, Tuple

from ..core.grid import Cell, Coord, Grid
from ..core.metric import Metric
from .open_set import OpenSet

logger = logging.getLogger(__name__)


# Neighbour offsets in expansion order. Diagonals only apply when the
# metric allows them.
_ORTHOGONAL: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
_DIAGONAL: Tuple[Coord, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


@dataclass
class _Scratch:
    """Per-search record for one discovered cell."""

    g: float
    h: float
    parent: Optional[Coord] = None


@dataclass
class SearchResult:
    """Outcome of :func:`search`."""

    metric: Metric
    path: List[Cell] = field(default_factory=list)
    cost: float = 0.0
    expanded: int = 0
    found: bool = False


def _neighbours(grid: Grid, coord: Coord, metric: Metric) -> List[Tuple[Coord, float]]:
    """Return open, in-bounds neighbours of ``coord`` with their step cost."""

    offsets: List[Tuple[Coord, float]] = [(d, metric.orthogonal_cost) for d in _ORTHOGONAL]
    if metric.diagonal_cost is not None:
        offsets.extend((d, metric.diagonal_cost) for d in _DIAGONAL)

    i, j = coord
    result: List[Tuple[Coord, float]] = []
    for (di, dj), cost in offsets:
        ni, nj = i + di, j + dj
        if grid.in_bounds(ni, nj) and not grid.cells[ni][nj].blocked:
            result.append(((ni, nj), cost))
    return result


def _reconstruct(scratch: Dict[Coord, _Scratch], goal: Coord) -> List[Coord]:
    path = [goal]
    parent = scratch[goal].parent
    while parent is not None:
        path.append(parent)
        parent = scratch[parent].parent
    path.reverse()
    return path


def _publish(grid: Grid, scratch: Dict[Coord, _Scratch]) -> None:
    """Copy the final scores of this search onto the grid's cells."""

    grid.reset_scratch()
    for (i, j), record in scratch.items():
        cell = grid.cells[i][j]
        cell.g = record.g
        cell.h = record.h
        if record.parent is not None:
            cell.parent = grid.cells[record.parent[0]][record.parent[1]]


def search(
    grid: Grid, start: Coord, goal: Coord, metric: Metric | str
) -> SearchResult:
    """Run A* from ``start`` to ``goal`` and return a :class:`SearchResult`.

    An empty ``path`` means either that ``start == goal`` (``found`` is
    ``True``) or that the goal cannot be reached (``found`` is ``False``).
    After the call every cell touched by the search exposes its final
    ``g``, ``h`` and ``parent``; all other cells are reset.
    """

    metric = Metric.parse(metric)
    start_cell = grid.get(*start)
    goal_cell = grid.get(*goal)
    start, goal = start_cell.coord, goal_cell.coord

    logger.debug("A* %s search from %s to %s", metric, start, goal)

    if start == goal:
        grid.reset_scratch()
        return SearchResult(metric=metric, found=True)
    if start_cell.blocked or goal_cell.blocked:
        logger.debug("Start %s or goal %s is blocked; no path", start, goal)
        grid.reset_scratch()
        return SearchResult(metric=metric)

    scratch: Dict[Coord, _Scratch] = {
        start: _Scratch(g=0.0, h=metric.heuristic(start, goal))
    }
    open_set = OpenSet()
    open_set.push(start, 0.0, scratch[start].h)
    closed: Set[Coord] = set()

    while open_set:
        current = open_set.pop()
        closed.add(current)

        if current == goal:
            coords = _reconstruct(scratch, goal)
            _publish(grid, scratch)
            path = [grid.cells[i][j] for i, j in coords]
            cost = scratch[goal].g
            logger.debug(
                "A* %s found path of %d cells, cost %.2f, %d expanded",
                metric,
                len(path),
                cost,
                len(closed),
            )
            return SearchResult(
                metric=metric,
                path=path,
                cost=cost,
                expanded=len(closed),
                found=True,
            )

        current_g = scratch[current].g
        for neighbour, step in _neighbours(grid, current, metric):
            if neighbour in closed:
                continue
            tentative_g = current_g + step
            record = scratch.get(neighbour)
            if record is None:
                record = _Scratch(
                    g=tentative_g,
                    h=metric.heuristic(neighbour, goal),
                    parent=current,
                )
                scratch[neighbour] = record
                open_set.push(neighbour, record.g, record.h)
            elif tentative_g < record.g:
                record.g = tentative_g
                record.parent = current
                open_set.push(neighbour, record.g, record.h)

    logger.debug("A* %s exhausted %d cells without reaching %s", metric, len(closed), goal)
    _publish(grid, scratch)
    return SearchResult(metric=metric, expanded=len(closed))


def find_path(
    grid: Grid, start: Coord, goal: Coord, metric: Metric | str
) -> List[Cell]:
    """Return the cells from ``start`` to ``goal`` inclusive.

    The list is empty when ``start == goal`` or when no path exists; callers
    that need to tell those apart should compare ``start`` and ``goal``
    themselves.
    """

    return search(grid, start, goal, metric).path


def path_cost(path: Sequence[Cell], metric: Metric | str) -> float:
    """Return the summed step cost of ``path`` under ``metric``."""

    metric = Metric.parse(metric)
    return sum(
        (metric.step_cost(a.coord, b.coord) for a, b in zip(path, path[1:])),
        0.0,
    )


__all__ = ["SearchResult", "find_path", "path_cost", "search"]
