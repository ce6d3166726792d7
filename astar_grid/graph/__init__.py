"""graph package."""

from .base import WeightedGraph
from .square_grid import Coord, DIRS, SquareGrid

__all__ = ["WeightedGraph", "Coord", "DIRS", "SquareGrid"]
