import io

from astar_grid.core.metric import Metric
from astar_grid.search.astar import find_path
from astar_grid.utils.cli.terminal_view import TerminalView


def test_draw_marks_endpoints_path_and_walls(make_grid) -> None:
    grid = make_grid(["..#", "...", "#.."])
    path = find_path(grid, (0, 0), (2, 2), Metric.MANHATTAN)
    view = TerminalView(colour=False)
    text = view.draw(grid, start=(0, 0), goal=(2, 2), paths=[(path, "red")])
    lines = text.splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("A")
    assert lines[2].endswith("B")
    assert lines[0].endswith("#") and lines[2].startswith("#")
    assert text.count("*") == len(path) - 2


def test_colour_codes_wrap_path_glyphs(open_grid_3) -> None:
    path = find_path(open_grid_3, (0, 0), (2, 2), Metric.CHEBYSHEV)
    text = TerminalView().draw(open_grid_3, paths=[(path, "blue")])
    assert text.count("\x1b[34m*\x1b[0m") == 3


def test_render_writes_to_stream(open_grid_3) -> None:
    out = io.StringIO()
    TerminalView(colour=False, stream=out).render(open_grid_3)
    assert out.getvalue() == ". . .\n. . .\n. . .\n"
