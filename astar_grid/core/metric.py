"""Distance metrics used for both the heuristic and per-move costs."""

from __future__ import annotations

import math
from enum import Enum

from .grid import Coord


class UnsupportedMetricError(ValueError):
    """Raised when a metric name is not one of the known metrics."""


class Metric(Enum):
    """Closed set of supported metrics.

    Each member carries ``(label, orthogonal_cost, diagonal_cost)``. A
    ``diagonal_cost`` of ``None`` means diagonal moves are not allowed.
    """

    MANHATTAN = ("Manhattan", 1.0, None)
    EUCLIDEAN = ("Euclidean", 1.0, 1.4)
    CHEBYSHEV = ("Chebyshev", 1.0, 1.0)

    def __init__(
        self, label: str, orthogonal_cost: float, diagonal_cost: float | None
    ) -> None:
        self.label = label
        self.orthogonal_cost = orthogonal_cost
        self.diagonal_cost = diagonal_cost

    def __str__(self) -> str:
        return self.label

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------
    @classmethod
    def parse(cls, value: "Metric | str") -> "Metric":
        """Return the :class:`Metric` for ``value``.

        ``value`` may already be a member or a case-insensitive name such as
        ``"Manhattan"``. Anything else raises :class:`UnsupportedMetricError`.
        """

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.label.lower() == key:
                    return member
        raise UnsupportedMetricError(f"unsupported metric: {value!r}")

    # ------------------------------------------------------------------
    # Costs
    # ------------------------------------------------------------------
    @property
    def allows_diagonal(self) -> bool:
        return self.diagonal_cost is not None

    def heuristic(self, a: Coord, b: Coord) -> float:
        """Return the estimated distance between ``a`` and ``b``."""

        di = abs(a[0] - b[0])
        dj = abs(a[1] - b[1])
        if self is Metric.MANHATTAN:
            return float(di + dj)
        if self is Metric.EUCLIDEAN:
            return math.sqrt(di * di + dj * dj)
        return float(max(di, dj))

    def step_cost(self, a: Coord, b: Coord) -> float:
        """Return the cost of a single move from ``a`` to adjacent ``b``.

        Raises ``ValueError`` if the move is not legal for this metric.
        """

        di = abs(a[0] - b[0])
        dj = abs(a[1] - b[1])
        if di + dj == 1:
            return self.orthogonal_cost
        if di == 1 and dj == 1 and self.diagonal_cost is not None:
            return self.diagonal_cost
        raise ValueError(f"illegal {self.label} move from {a} to {b}")


__all__ = ["Coord", "Metric", "UnsupportedMetricError"]
