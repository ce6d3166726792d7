"""Reference four-directional grid with walls and forest terrain."""

from __future__ import annotations

from typing import Iterable, List, Set, Tuple

from .base import WeightedGraph

Coord = Tuple[int, int]

# Neighbour order: +x, -y, -x, +y
DIRS: Tuple[Coord, ...] = ((1, 0), (0, -1), (-1, 0), (0, 1))


class SquareGrid(WeightedGraph[Coord]):
    """Rectangular grid graph.

    Walls are never returned as neighbours. Moving *into* a forest cell
    costs ``forest_cost``; every other move costs ``default_cost``.
    """

    def __init__(
        self,
        width: int,
        height: int,
        walls: Iterable[Coord] | None = None,
        forests: Iterable[Coord] | None = None,
        default_cost: float = 1.0,
        forest_cost: float = 5.0,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        if default_cost < 0 or forest_cost < 0:
            raise ValueError("terrain costs must be non-negative")
        self.width = width
        self.height = height
        self.default_cost = float(default_cost)
        self.forest_cost = float(forest_cost)
        self.walls: Set[Coord] = set(walls or ())
        self.forests: Set[Coord] = set(forests or ())

    @property
    def total_size(self) -> int:
        return self.width * self.height

    @property
    def min_cost(self) -> float:
        return min(self.default_cost, self.forest_cost)

    # ------------------------------------------------------------------
    # Terrain editing
    # ------------------------------------------------------------------
    def _rect_cells(self, x: int, y: int, width: int, height: int) -> List[Coord]:
        return [
            (cx, cy)
            for cx in range(x, x + width)
            for cy in range(y, y + height)
            if self.in_bounds((cx, cy))
        ]

    def add_walls_rect(self, x: int, y: int, width: int, height: int) -> None:
        """Mark every in-bounds cell of the rectangle as a wall."""
        self.walls.update(self._rect_cells(x, y, width, height))

    def add_forests_rect(self, x: int, y: int, width: int, height: int) -> None:
        """Mark every in-bounds cell of the rectangle as forest."""
        self.forests.update(self._rect_cells(x, y, width, height))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def in_bounds(self, location: Coord) -> bool:
        x, y = location
        return 0 <= x < self.width and 0 <= y < self.height

    def passable(self, location: Coord) -> bool:
        return location not in self.walls

    def contains(self, location: Coord) -> bool:
        return self.in_bounds(location) and self.passable(location)

    def cost(self, a: Coord, b: Coord) -> float:
        return self.forest_cost if b in self.forests else self.default_cost

    def fill_neighbors(self, out: List[Coord], location: Coord) -> None:
        out.clear()
        x, y = location
        for dx, dy in DIRS:
            nxt = (x + dx, y + dy)
            if self.in_bounds(nxt) and self.passable(nxt):
                out.append(nxt)


__all__ = ["Coord", "DIRS", "SquareGrid"]
