# astar_grid/main.py
"""Driver: build a random grid, run A* with each metric and show the paths."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .config import CONFIG, Config, load_config
from .core.grid import Coord, Grid, InvalidCoordinateError
from .core.metric import Metric, UnsupportedMetricError
from .gui.renderer import Renderer
from .gui.window import Window
from .search.astar import SearchResult, search
from .utils.cli.score_table import format_matrix, format_path, score_report
from .utils.cli.terminal_view import TerminalView
from .utils.generation import random_matrix
from .utils.percolation import percolates, percolates_direct

logger = logging.getLogger(__name__)


def configure_logging(cfg: Config) -> None:
    """Apply the root and per-module log levels from ``cfg``."""

    numeric_level = getattr(logging, cfg.logging.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Apply per-module levels if defined
    for module_name, level_str in cfg.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="A* search on a random occupancy grid.")
    parser.add_argument("--config", type=Path, default=None, help="Path to a config.yaml file.")
    parser.add_argument("--size", type=int, default=None, help="Grid side length.")
    parser.add_argument(
        "--open-probability", type=float, default=None,
        help="Probability that a cell is open; lower values block more cells.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for grid generation.")
    parser.add_argument("--start", type=int, nargs=2, metavar=("I", "J"), default=None)
    parser.add_argument("--goal", type=int, nargs=2, metavar=("I", "J"), default=None)
    parser.add_argument(
        "--metric", action="append", default=None,
        help="Metric to run (Manhattan, Euclidean, Chebyshev). Repeatable.",
    )
    parser.add_argument("--scores", action="store_true", help="Print H/G/F tables for each search.")
    parser.add_argument("--gui", action="store_true", help="Draw the paths in a pygame window.")
    return parser


def prompt_coord(label: str, read: Optional[Callable[[str], str]] = None) -> Coord:
    """Ask for the row and column of point ``label``."""

    if read is None:
        read = input
    i = int(read(f"Enter i for {label} (Row number) > "))
    j = int(read(f"Enter j for {label} (Column number) > "))
    return (i, j)


def run_searches(
    grid: Grid, start: Coord, goal: Coord, metrics: Sequence[Metric], show_scores: bool = False
) -> List[SearchResult]:
    """Search with each metric in turn and print the outcome."""

    results: List[SearchResult] = []
    for metric in metrics:
        began = time.perf_counter()
        result = search(grid, start, goal, metric)
        elapsed = time.perf_counter() - began
        logger.info(
            "%s: %d cells, cost %.2f, %d expanded in %.4fs",
            metric, len(result.path), result.cost, result.expanded, elapsed,
        )
        print(f"\n {metric} path followed - {format_path(result.path)}")
        if not result.found:
            print(f" No path from {start} to {goal}.")
        if show_scores:
            print()
            print(score_report(grid, metric))
        results.append(result)
    return results


def show_gui(grid: Grid, start: Coord, goal: Coord, results: Sequence[SearchResult], cfg: Config) -> None:
    window = Window(cfg.gui.window_size)
    renderer = Renderer(window.surface, grid.size, labels=True)
    renderer.draw_grid(grid)
    renderer.draw_endpoints(start, goal)
    window.refresh()

    def step() -> None:
        window.refresh()
        window.wait(cfg.gui.step_delay_ms)

    for result in results:
        colour = cfg.gui.path_colours.get(result.metric.label, "red")
        renderer.draw_path(result.path, colour, on_segment=step)
    window.wait_for_close()
    window.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    cfg = load_config(args.config) if args.config is not None else CONFIG
    configure_logging(cfg)

    size = args.size if args.size is not None else cfg.grid.size
    probability = args.open_probability if args.open_probability is not None else cfg.grid.open_probability
    seed = args.seed if args.seed is not None else cfg.grid.seed

    try:
        metrics = [Metric.parse(m) for m in args.metric] if args.metric else cfg.search.metrics
        matrix = random_matrix(size, probability, seed)
        grid = Grid.from_open_matrix(matrix)

        print(format_matrix(matrix))
        print(f"\nThe system percolates: {percolates(matrix)}")
        print(f"\nThe system percolates directly: {percolates_direct(matrix)}\n")

        start = tuple(args.start) if args.start else prompt_coord("A")
        goal = tuple(args.goal) if args.goal else prompt_coord("B")
        goal_cell = grid.get(*goal)
        print(f"\n Goal Node co-ordinates are ( i - {goal_cell.i}) , ( j - {goal_cell.j} )")

        TerminalView().render(grid, start=start, goal=goal)
        results = run_searches(grid, start, goal, metrics, show_scores=args.scores)
    except (InvalidCoordinateError, UnsupportedMetricError, ValueError) as exc:
        logger.error("%s", exc)
        return 2

    TerminalView().render(
        grid, start=start, goal=goal,
        paths=[(r.path, cfg.gui.path_colours.get(r.metric.label, "red")) for r in results],
    )

    if args.gui:
        show_gui(grid, start, goal, results, cfg)
    return 0


if __name__ == "__main__":
    sys.exit(main())
