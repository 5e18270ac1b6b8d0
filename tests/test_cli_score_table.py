import pytest

from astar_grid.core.metric import Metric
from astar_grid.search.astar import find_path
from astar_grid.utils.cli.score_table import (
    format_matrix,
    format_path,
    format_score,
    score_report,
    score_table,
)


@pytest.fixture
def searched(make_grid):
    grid = make_grid([".#", ".."])
    path = find_path(grid, (0, 0), (1, 1), Metric.MANHATTAN)
    return grid, path


def test_format_score_pads_to_five() -> None:
    assert format_score(3.4) == "03.40"
    assert format_score(12.5) == "12.50"
    assert format_score(0) == "00.00"


def test_score_tables(searched) -> None:
    grid, _ = searched
    assert score_table(grid, "h") == "02.00 -----\n01.00 00.00"
    assert score_table(grid, "g") == "00.00 -----\n01.00 02.00"
    assert score_table(grid, "f") == "02.00 -----\n02.00 02.00"


def test_score_table_rejects_unknown_score(searched) -> None:
    grid, _ = searched
    with pytest.raises(ValueError):
        score_table(grid, "x")


def test_score_report_headings(searched) -> None:
    grid, _ = searched
    report = score_report(grid, "manhattan")
    assert "Node H values according to Manhattan distance" in report
    assert "Node G values" in report
    assert report.index("Node G values") < report.index("Node F values")


def test_format_path(searched) -> None:
    _, path = searched
    assert format_path(path) == "[(0,0), (1,0), (1,1)]"
    assert format_path([]) == "[]"


def test_format_matrix() -> None:
    assert format_matrix([[True, False], [False, True]]) == "1 0\n0 1"
