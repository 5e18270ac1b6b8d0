import math

import pytest

from astar_grid.core.metric import Metric, UnsupportedMetricError


def test_heuristics() -> None:
    a, b = (0, 0), (3, 4)
    assert Metric.MANHATTAN.heuristic(a, b) == 7.0
    assert Metric.EUCLIDEAN.heuristic(a, b) == 5.0
    assert Metric.CHEBYSHEV.heuristic(a, b) == 4.0
    assert Metric.EUCLIDEAN.heuristic((1, 1), (0, 0)) == pytest.approx(math.sqrt(2))


def test_cost_constants() -> None:
    assert Metric.MANHATTAN.orthogonal_cost == 1.0
    assert not Metric.MANHATTAN.allows_diagonal
    assert Metric.EUCLIDEAN.diagonal_cost == 1.4
    assert Metric.CHEBYSHEV.diagonal_cost == 1.0


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Manhattan", Metric.MANHATTAN),
        ("euclidean", Metric.EUCLIDEAN),
        (" CHEBYSHEV ", Metric.CHEBYSHEV),
        (Metric.CHEBYSHEV, Metric.CHEBYSHEV),
    ],
)
def test_parse(name, expected) -> None:
    assert Metric.parse(name) is expected


@pytest.mark.parametrize("bad", ["Minkowski", "", None, 3])
def test_parse_rejects_unknown(bad) -> None:
    with pytest.raises(UnsupportedMetricError):
        Metric.parse(bad)


def test_unsupported_metric_is_value_error() -> None:
    assert issubclass(UnsupportedMetricError, ValueError)


def test_step_cost() -> None:
    assert Metric.MANHATTAN.step_cost((0, 0), (0, 1)) == 1.0
    assert Metric.EUCLIDEAN.step_cost((1, 1), (0, 0)) == 1.4
    assert Metric.CHEBYSHEV.step_cost((1, 1), (2, 0)) == 1.0
    with pytest.raises(ValueError):
        Metric.MANHATTAN.step_cost((0, 0), (1, 1))
    with pytest.raises(ValueError):
        Metric.CHEBYSHEV.step_cost((0, 0), (0, 2))


def test_str_uses_label() -> None:
    assert str(Metric.EUCLIDEAN) == "Euclidean"
