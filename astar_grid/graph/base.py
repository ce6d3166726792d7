"""Abstract weighted graph consumed by the search engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

L = TypeVar("L")


class WeightedGraph(ABC, Generic[L]):
    """Abstract base class for graphs the A* engine can search.

    Locations are opaque hashable values. A* only needs neighbour
    enumeration and edge costs, so grids, hex maps and waypoint graphs
    can all implement this interface.
    """

    @property
    @abstractmethod
    def total_size(self) -> int:
        """Upper bound on the number of distinct locations."""
        raise NotImplementedError

    @abstractmethod
    def cost(self, a: L, b: L) -> float:
        """Return the non-negative cost of moving from ``a`` to ``b``.

        Only called for ``b`` that :meth:`fill_neighbors` returned for ``a``.
        """
        raise NotImplementedError

    @abstractmethod
    def fill_neighbors(self, out: List[L], location: L) -> None:
        """Clear ``out`` and append the traversable neighbours of ``location``.

        The order must be deterministic; it decides which of several
        equal-cost paths the engine records.
        """
        raise NotImplementedError

    def neighbors(self, location: L) -> List[L]:
        """Return the neighbours of ``location`` in a fresh list."""

        out: List[L] = []
        self.fill_neighbors(out, location)
        return out

    @property
    def min_cost(self) -> float:
        """Lower bound on any edge cost; scales the default grid heuristic."""

        return 1.0

    def contains(self, location: L) -> bool:
        """Return ``True`` if ``location`` is a valid, traversable node."""

        return True


__all__ = ["WeightedGraph"]
