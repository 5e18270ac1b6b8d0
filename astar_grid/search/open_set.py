"""Priority queue of discovered cells awaiting expansion."""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Tuple

from ..core.grid import Coord


_Key = Tuple[float, float, int]


class OpenSet:
    """Binary heap keyed by ``(f, h, rank)`` with a side index.

    ``rank`` is the order in which a cell first entered the set, so ties on
    ``f`` and ``h`` go to the earliest-discovered cell. Lowering a cell's key
    keeps its rank; the superseded heap entry is skipped when popped.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, float, int, Coord]] = []
        self._index: Dict[Coord, _Key] = {}
        self._ranks = count()

    def __contains__(self, coord: Coord) -> bool:
        return coord in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __bool__(self) -> bool:
        return bool(self._index)

    def push(self, coord: Coord, g: float, h: float) -> None:
        """Insert ``coord`` or lower its key if it is already open."""

        current = self._index.get(coord)
        rank = current[2] if current is not None else next(self._ranks)
        key = (g + h, h, rank)
        self._index[coord] = key
        heappush(self._heap, (*key, coord))

    def pop(self) -> Coord:
        """Remove and return the open cell with the lowest key."""

        while self._heap:
            f, h, rank, coord = heappop(self._heap)
            if self._index.get(coord) == (f, h, rank):
                del self._index[coord]
                return coord
        raise KeyError("pop from an empty open set")


__all__ = ["OpenSet"]
