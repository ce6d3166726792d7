# tests/conftest.py
import logging

import pytest

from astar_grid.graph.square_grid import SquareGrid
from astar_grid.search.astar import AStar


@pytest.fixture
def open_grid() -> SquareGrid:
    return SquareGrid(10, 10)


@pytest.fixture
def engine(open_grid: SquareGrid) -> AStar:
    return AStar(open_grid)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """``configure_logging`` replaces root handlers; put them back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
