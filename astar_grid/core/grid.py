"""Occupancy grid and the cells searched over."""

from __future__ import annotations

from typing import Callable, Iterator, List, Optional, Sequence, Tuple, Union


Coord = Tuple[int, int]
BlockedSource = Union[Callable[[int, int], bool], Sequence[Sequence[bool]]]


class InvalidCoordinateError(IndexError):
    """Raised when a coordinate falls outside the grid."""


class Cell:
    """One grid square.

    ``i``, ``j`` and ``blocked`` are fixed for the life of the grid. ``parent``,
    ``g`` and ``h`` hold the scores of the most recent search.
    """

    __slots__ = ("i", "j", "blocked", "parent", "g", "h")

    def __init__(self, i: int, j: int, blocked: bool = False) -> None:
        self.i = i
        self.j = j
        self.blocked = bool(blocked)
        self.parent: Optional[Cell] = None
        self.g: float = 0.0
        self.h: float = 0.0

    @property
    def f(self) -> float:
        return self.g + self.h

    @property
    def coord(self) -> Coord:
        return (self.i, self.j)

    def reset(self) -> None:
        self.parent = None
        self.g = 0.0
        self.h = 0.0

    def __repr__(self) -> str:
        return f"({self.i},{self.j})"


class Grid:
    """Square ``size`` × ``size`` grid owning all of its cells."""

    def __init__(self, size: int, blocked: BlockedSource) -> None:
        if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
            raise ValueError("size must be a positive integer")
        self.size = size
        predicate = _as_predicate(size, blocked)
        self.cells: List[List[Cell]] = [
            [Cell(i, j, predicate(i, j)) for j in range(size)] for i in range(size)
        ]

    @classmethod
    def from_open_matrix(cls, matrix: Sequence[Sequence[bool]]) -> "Grid":
        """Build a grid from a matrix where ``True`` marks an *open* cell."""

        return cls(len(matrix), [[not value for value in row] for row in matrix])

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    def in_bounds(self, i: int, j: int) -> bool:
        return 0 <= i < self.size and 0 <= j < self.size

    def get(self, i: int, j: int) -> Cell:
        """Return the cell at ``(i, j)``."""

        if not self.in_bounds(i, j):
            raise InvalidCoordinateError(
                f"({i},{j}) is outside a {self.size}x{self.size} grid"
            )
        return self.cells[i][j]

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def open_cells(self) -> Iterator[Cell]:
        return (cell for cell in self if not cell.blocked)

    def to_matrix(self) -> List[List[bool]]:
        """Return the occupancy as booleans, ``True`` meaning open."""

        return [[not cell.blocked for cell in row] for row in self.cells]

    # ------------------------------------------------------------------
    # Search scratch
    # ------------------------------------------------------------------
    def reset_scratch(self) -> None:
        """Clear ``g``, ``h`` and ``parent`` on every cell."""

        for cell in self:
            cell.reset()


def _as_predicate(size: int, blocked: BlockedSource) -> Callable[[int, int], bool]:
    if callable(blocked):
        return blocked
    if len(blocked) != size or any(len(row) != size for row in blocked):
        raise ValueError(f"occupancy matrix must be {size}x{size}")
    return lambda i, j: bool(blocked[i][j])


def create_grid(size: int, blocked: BlockedSource) -> Grid:
    """Return a new :class:`Grid`.

    ``blocked`` is either a predicate ``blocked(i, j)`` or a ``size`` × ``size``
    matrix in which ``True`` marks a blocked cell.
    """

    return Grid(size, blocked)


__all__ = ["Cell", "Coord", "Grid", "InvalidCoordinateError", "create_grid"]
