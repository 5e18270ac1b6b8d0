"""Simple configuration loader for astar_grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .core.metric import Metric


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"

_DEFAULT_METRICS = ["Manhattan", "Euclidean", "Chebyshev"]
_DEFAULT_COLOURS = {"Manhattan": "red", "Euclidean": "green", "Chebyshev": "blue"}


@dataclass
class GridConfig:
    """Configuration values for generated grids."""

    size: int = 10
    open_probability: float = 0.8
    seed: int | None = None


@dataclass
class SearchConfig:
    """Metrics to run, in order."""

    metrics: List[Metric] = field(
        default_factory=lambda: [Metric.parse(m) for m in _DEFAULT_METRICS]
    )


@dataclass
class LoggingConfig:
    """Root log level plus optional per-module overrides."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class GUIConfig:
    """Configuration for the ``pygame`` path viewer."""

    window_size: tuple[int, int] = (600, 600)
    step_delay_ms: int = 150
    path_colours: Dict[str, str] = field(default_factory=lambda: dict(_DEFAULT_COLOURS))


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig
    search: SearchConfig
    logging: LoggingConfig
    gui: GUIConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    grid_data = data.get("grid", {})
    seed = grid_data.get("seed")
    grid = GridConfig(
        size=int(grid_data.get("size", 10)),
        open_probability=float(grid_data.get("open_probability", 0.8)),
        seed=int(seed) if seed is not None else None,
    )

    search_data = data.get("search", {})
    search = SearchConfig(
        metrics=[Metric.parse(m) for m in search_data.get("metrics", _DEFAULT_METRICS)]
    )

    logging_data = data.get("logging", {})
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    gui_data = data.get("gui", {})
    colours = dict(_DEFAULT_COLOURS)
    colours.update(gui_data.get("path_colours") or {})
    gui = GUIConfig(
        window_size=tuple(gui_data.get("window_size", [600, 600])),
        step_delay_ms=int(gui_data.get("step_delay_ms", 150)),
        path_colours=colours,
    )

    return Config(grid=grid, search=search, logging=logging_cfg, gui=gui)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "GridConfig",
    "SearchConfig",
    "LoggingConfig",
    "GUIConfig",
    "load_config",
]
