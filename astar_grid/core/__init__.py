"""core package."""

from .grid import Cell, Grid, InvalidCoordinateError, create_grid
from .metric import Metric, UnsupportedMetricError

__all__ = [
    "Cell",
    "Grid",
    "InvalidCoordinateError",
    "Metric",
    "UnsupportedMetricError",
    "create_grid",
]
