"""A* search engine over a :class:`WeightedGraph`."""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Sequence, TypeVar

from ..errors import InvalidLocationError, NegativeCostError
from ..graph.base import WeightedGraph
from .frontier import LinearScanQueue, PriorityQueue
from .heuristics import prefer_first, project_forward, scaled_manhattan
from .path import reconstruct_path

logger = logging.getLogger(__name__)

L = TypeVar("L")

Heuristic = Callable[[Any, Any], float]
Projection = Callable[[Any, Any], Optional[Any]]


class SearchState(Enum):
    """Lifecycle of a single query."""

    IDLE = "idle"
    RUNNING = "running"
    DONE = "done"


class AStar(Generic[L]):
    """Reusable A* engine.

    One engine owns one set of search buffers (frontier, cost map and
    predecessor map). They are cleared, not reallocated, at the start of
    every :meth:`search`, so a single engine can serve a query per frame.
    Engines are not safe for concurrent queries; use one per thread.

    Parameters
    ----------
    graph:
        Graph used to size the engine. Queries may pass any graph of the
        same size or smaller; call :meth:`reset_size` otherwise.
    prefer_forward:
        Default for the straight-ahead tie-break in :meth:`search`.
    frontier:
        Priority queue to use. Defaults to a binary-heap
        :class:`PriorityQueue`.
    heuristic:
        Admissible, consistent estimate of remaining cost. When ``None``
        the engine uses Manhattan distance scaled by the graph's
        :attr:`~astar_grid.graph.base.WeightedGraph.min_cost`, which
        assumes ``(x, y)`` tuple locations.
    forward:
        Returns the location continuing the line ``prev -> current``, or
        ``None``. Only used when the tie-break is enabled; ``None`` turns
        the tie-break off. The default assumes ``(x, y)`` tuples.

    Graphs whose locations are not coordinate tuples must pass their own
    ``heuristic`` (e.g. :func:`~astar_grid.search.heuristics.zero_heuristic`)
    and either their own ``forward`` or ``forward=None``.
    """

    def __init__(
        self,
        graph: WeightedGraph[L],
        prefer_forward: bool = False,
        frontier: PriorityQueue[L] | LinearScanQueue[L] | None = None,
        heuristic: Optional[Heuristic] = None,
        forward: Optional[Projection] = project_forward,
    ) -> None:
        self.prefer_forward = prefer_forward
        self.heuristic = heuristic
        self.forward = forward
        self._frontier = frontier if frontier is not None else PriorityQueue()
        self._came_from: Dict[L, L] = {}
        self._cost_so_far: Dict[L, float] = {}
        self._neighbors: List[L] = []
        self._ordered: List[L] = []
        self._capacity = 0
        self.state = SearchState.IDLE
        self.start: Optional[L] = None
        self.goal: Optional[L] = None
        self.expanded = 0
        self.reset_size(graph.total_size)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def reset_size(self, total_size: int) -> None:
        """Resize the engine for a graph with ``total_size`` locations.

        Drops any results of the previous query.
        """

        if total_size < 0:
            raise ValueError("total_size must be non-negative")
        self._capacity = total_size
        self._came_from = {}
        self._cost_so_far = {}
        self._frontier.clear()
        self.state = SearchState.IDLE
        self.start = None
        self.goal = None
        self.expanded = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def search(
        self,
        graph: WeightedGraph[L],
        start: L,
        goal: L,
        prefer_forward: Optional[bool] = None,
    ) -> None:
        """Run A* from ``start`` to ``goal`` and populate the result maps.

        Success is reported by :meth:`reached` (``goal`` present in the
        predecessor map), not by the return value.
        """

        if not graph.contains(start):
            logger.error("[AStar] Rejected start %s: not a traversable node", start)
            raise InvalidLocationError("start", start)
        if not graph.contains(goal):
            logger.error("[AStar] Rejected goal %s: not a traversable node", goal)
            raise InvalidLocationError("goal", goal)
        if prefer_forward is None:
            prefer_forward = self.prefer_forward
        if graph.total_size > self._capacity:
            logger.debug(
                "[AStar] Growing capacity %d -> %d", self._capacity, graph.total_size
            )
            self._capacity = graph.total_size

        came_from = self._came_from
        cost_so_far = self._cost_so_far
        frontier = self._frontier
        neighbors = self._neighbors
        heuristic = self.heuristic
        if heuristic is None:
            heuristic = scaled_manhattan(graph.min_cost)

        came_from.clear()
        cost_so_far.clear()
        frontier.clear()
        self.start = start
        self.goal = goal
        self.expanded = 0
        self.state = SearchState.RUNNING
        logger.debug(
            "[AStar] Search %s -> %s (prefer_forward=%s)", start, goal, prefer_forward
        )

        frontier.insert(start, 0)
        came_from[start] = start
        cost_so_far[start] = 0.0

        while not frontier.is_empty():
            current = frontier.extract_min()
            self.expanded += 1

            if current == goal:
                break

            graph.fill_neighbors(neighbors, current)
            candidates: Sequence[L] = neighbors
            if prefer_forward and self.forward is not None:
                candidates = self._forward_first(neighbors, current)

            current_cost = cost_so_far[current]
            for nxt in candidates:
                step = graph.cost(current, nxt)
                if step < 0:
                    self.state = SearchState.DONE
                    logger.error(
                        "[AStar] Graph returned negative cost %s for %s -> %s",
                        step, current, nxt,
                    )
                    raise NegativeCostError(current, nxt, step)
                new_cost = current_cost + step
                if nxt not in cost_so_far or new_cost < cost_so_far[nxt]:
                    cost_so_far[nxt] = new_cost
                    came_from[nxt] = current
                    frontier.insert(nxt, new_cost + heuristic(nxt, goal))

        self.state = SearchState.DONE
        if goal in came_from:
            logger.debug(
                "[AStar] Reached %s at cost %s after %d expansions",
                goal, cost_so_far[goal], self.expanded,
            )
        else:
            logger.debug(
                "[AStar] No path %s -> %s; frontier exhausted after %d expansions",
                start, goal, self.expanded,
            )

    def _forward_first(self, neighbors: List[L], current: L) -> Sequence[L]:
        previous = self._came_from[current]
        if previous == current:
            return neighbors
        preferred = self.forward(previous, current)
        return prefer_first(neighbors, preferred, self._ordered)

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------
    @property
    def came_from(self) -> Mapping[L, L]:
        """Read-only view of the predecessor map."""
        return MappingProxyType(self._came_from)

    @property
    def cost_so_far(self) -> Mapping[L, float]:
        """Read-only view of the cumulative cost map."""
        return MappingProxyType(self._cost_so_far)

    def reached(self, location: L) -> bool:
        return location in self._came_from

    def cost_to(self, location: L) -> Optional[float]:
        return self._cost_so_far.get(location)

    def predecessor(self, location: L) -> Optional[L]:
        return self._came_from.get(location)

    def extract_path(self, start: L, goal: L) -> List[L]:
        """Return the route ``start`` .. ``goal`` found by the last search.

        Empty when ``goal`` was not reached.
        """

        return reconstruct_path(self._came_from, start, goal, self._capacity)

    def fill_path(self, out: List[L], start: L, goal: L) -> None:
        """Clear ``out`` and fill it with :meth:`extract_path`'s result."""

        out.clear()
        out.extend(self.extract_path(start, goal))


def a_star(
    graph: WeightedGraph[L],
    start: L,
    goal: L,
    prefer_forward: bool = False,
    heuristic: Optional[Heuristic] = None,
    forward: Optional[Projection] = project_forward,
) -> List[L]:
    """Return the cheapest path from ``start`` to ``goal`` on ``graph``.

    Builds a throwaway :class:`AStar`; reuse an engine for repeated queries.
    """

    engine: AStar[L] = AStar(graph, heuristic=heuristic, forward=forward)
    engine.search(graph, start, goal, prefer_forward=prefer_forward)
    return engine.extract_path(start, goal)


__all__ = ["AStar", "SearchState", "a_star"]
