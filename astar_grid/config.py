"""Simple configuration loader for astar_grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class GridConfig:
    """Terrain costs for :class:`~astar_grid.graph.square_grid.SquareGrid`."""

    default_cost: float = 1.0
    forest_cost: float = 5.0


@dataclass
class SearchConfig:
    """Engine defaults."""

    prefer_forward: bool = False
    frontier: str = "heap"


@dataclass
class LoggingConfig:
    """Root and per-module log levels."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig
    search: SearchConfig
    logging: LoggingConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    grid_data = data.get("grid") or {}
    grid = GridConfig(
        default_cost=float(grid_data.get("default_cost", 1.0)),
        forest_cost=float(grid_data.get("forest_cost", 5.0)),
    )

    search_data = data.get("search") or {}
    search = SearchConfig(
        prefer_forward=bool(search_data.get("prefer_forward", False)),
        frontier=str(search_data.get("frontier", "heap")),
    )

    logging_data = data.get("logging") or {}
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(grid=grid, search=search, logging=log_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
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
    "load_config",
]
