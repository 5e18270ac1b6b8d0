"""Percolation checks on an open-cell matrix.

A matrix percolates when some open cell in the bottom row can be reached
from an open cell in the top row through orthogonally adjacent open cells.
"""

from __future__ import annotations

from typing import List, Sequence


Matrix = Sequence[Sequence[bool]]


def flow(open_cells: Matrix) -> List[List[bool]]:
    """Return the matrix of open cells reachable from the top row."""

    n = len(open_cells)
    full = [[False] * n for _ in range(n)]
    # Flood fill from every top-row cell.
    stack = [(0, j) for j in range(n - 1, -1, -1)]
    while stack:
        i, j = stack.pop()
        if not (0 <= i < n and 0 <= j < n):
            continue
        if not open_cells[i][j] or full[i][j]:
            continue
        full[i][j] = True
        stack.extend(((i - 1, j), (i, j - 1), (i, j + 1), (i + 1, j)))
    return full


def percolates(open_cells: Matrix) -> bool:
    """Return ``True`` if the bottom row is reachable from the top row."""

    n = len(open_cells)
    if n == 0:
        return False
    return any(flow(open_cells)[n - 1])


def percolates_direct(open_cells: Matrix) -> bool:
    """Return ``True`` if some column is full from top to bottom."""

    n = len(open_cells)
    if n == 0:
        return False
    full = flow(open_cells)
    return any(all(full[i][j] for i in range(n)) for j in range(n))


__all__ = ["flow", "percolates", "percolates_direct"]
