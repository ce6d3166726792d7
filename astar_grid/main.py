"""Logging bootstrap and a one-shot path query from the command line."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .config import CONFIG, Config, load_config
from .errors import AStarError
from .graph.square_grid import Coord, SquareGrid
from .search.astar import AStar
from .search.frontier import make_frontier

logger = logging.getLogger(__name__)

USAGE = (
    "usage: python -m astar_grid.main WIDTH HEIGHT SX,SY GX,GY "
    "[--forward] [--wall X,Y,W,H]... [--config PATH]"
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(cfg: Config = CONFIG) -> None:
    """Apply the root and per-module log levels from ``cfg``."""

    numeric_level = getattr(logging, cfg.logging.global_level, logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, force=True)

    for module_name, level_str in cfg.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning(
                "Invalid log level '%s' for module '%s' in config.", level_str, module_name
            )


def _parse_coord(text: str) -> Coord:
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(f"expected X,Y but got {text!r}")
    return (int(parts[0]), int(parts[1]))


Rect = Tuple[int, int, int, int]


def _parse_rect(text: str) -> Rect:
    parts = text.split(",")
    if len(parts) != 4:
        raise ValueError(f"expected X,Y,W,H but got {text!r}")
    x, y, w, h = (int(p) for p in parts)
    return (x, y, w, h)


def _parse_args(
    argv: List[str],
) -> Tuple[int, int, Coord, Coord, bool, List[Rect], Optional[Path]]:
    forward = False
    walls: List[Rect] = []
    config_path: Optional[Path] = None
    positional: List[str] = []
    it = iter(argv)
    for arg in it:
        if arg == "--forward":
            forward = True
        elif arg == "--wall":
            try:
                walls.append(_parse_rect(next(it)))
            except StopIteration:
                raise ValueError("--wall needs X,Y,W,H") from None
        elif arg == "--config":
            try:
                config_path = Path(next(it))
            except StopIteration:
                raise ValueError("--config needs a path") from None
        else:
            positional.append(arg)
    if len(positional) != 4:
        raise ValueError("expected WIDTH HEIGHT START GOAL")
    width, height = int(positional[0]), int(positional[1])
    start, goal = _parse_coord(positional[2]), _parse_coord(positional[3])
    return width, height, start, goal, forward, walls, config_path


def main(argv: Optional[List[str]] = None) -> int:
    """Run one query on a grid and print the route.

    Returns ``0`` when a path exists, ``1`` when it does not and ``2`` for
    bad arguments or invalid locations.
    """

    args = sys.argv[1:] if argv is None else argv
    try:
        width, height, start, goal, forward, walls, config_path = _parse_args(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 2

    cfg = load_config(config_path) if config_path is not None else CONFIG
    configure_logging(cfg)

    try:
        grid = SquareGrid(
            width,
            height,
            default_cost=cfg.grid.default_cost,
            forest_cost=cfg.grid.forest_cost,
        )
        for rect in walls:
            grid.add_walls_rect(*rect)
        engine: AStar[Coord] = AStar(
            grid,
            prefer_forward=cfg.search.prefer_forward or forward,
            frontier=make_frontier(cfg.search.frontier),
        )
        engine.search(grid, start, goal)
    except (AStarError, ValueError) as exc:
        logger.error("Query failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    path = engine.extract_path(start, goal)
    if not path:
        print("no path")
        return 1

    print(" ".join(f"{x},{y}" for x, y in path))
    print(f"cost: {engine.cost_to(goal):g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
