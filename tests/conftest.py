# tests/conftest.py
import os

# Headless pygame for renderer tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from astar_grid.core.grid import Grid, create_grid


def grid_from_rows(rows: list[str]) -> Grid:
    """Build a grid from strings where ``#`` marks a blocked cell."""
    return create_grid(len(rows), [[ch == "#" for ch in row] for row in rows])


@pytest.fixture
def make_grid():
    return grid_from_rows


@pytest.fixture
def open_grid_3() -> Grid:
    return create_grid(3, lambda i, j: False)
