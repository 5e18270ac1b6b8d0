from astar_grid.utils.percolation import flow, percolates, percolates_direct

T, F = True, False


def test_straight_column_percolates_directly() -> None:
    matrix = [
        [T, F, F],
        [T, F, F],
        [T, T, T],
    ]
    assert percolates(matrix)
    assert percolates_direct(matrix)


def test_winding_path_percolates_but_not_directly() -> None:
    matrix = [
        [F, T, F],
        [F, T, T],
        [F, F, T],
    ]
    assert flow(matrix) == matrix
    assert percolates(matrix)
    assert not percolates_direct(matrix)


def test_flow_ignores_cells_cut_off_from_top() -> None:
    matrix = [
        [T, F, F],
        [F, F, T],
        [F, F, T],
    ]
    assert flow(matrix) == [[T, F, F], [F, F, F], [F, F, F]]
    assert not percolates(matrix)


def test_blocked_bottom_row() -> None:
    assert not percolates([[T, T], [F, F]])
    assert not percolates_direct([[T, T], [F, F]])


def test_empty_matrix() -> None:
    assert not percolates([])
    assert not percolates_direct([])
