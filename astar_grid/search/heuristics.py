"""Heuristic and tie-break helpers for grid coordinates."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

L = TypeVar("L")

Coord = Tuple[int, int]


def manhattan(a: Coord, b: Coord) -> float:
    """Return the Manhattan distance between ``a`` and ``b``.

    Admissible and consistent for a four-neighbour grid whose cheapest
    edge costs at least 1.
    """

    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def scaled_manhattan(scale: float) -> Callable[[Coord, Coord], float]:
    """Return Manhattan distance multiplied by ``scale``.

    Stays admissible and consistent on a grid whose cheapest edge costs
    ``scale``. A scale of 1 returns :func:`manhattan` itself.
    """

    if scale == 1:
        return manhattan

    def heuristic(a: Coord, b: Coord) -> float:
        return scale * (abs(a[0] - b[0]) + abs(a[1] - b[1]))

    return heuristic


def zero_heuristic(a: object, b: object) -> float:
    """Heuristic that turns A* into Dijkstra's algorithm."""

    return 0.0


def project_forward(previous: Coord, current: Coord) -> Optional[Coord]:
    """Return the cell continuing the line from ``previous`` through ``current``."""

    if previous == current:
        return None
    return (2 * current[0] - previous[0], 2 * current[1] - previous[1])


def prefer_first(
    neighbors: Sequence[L],
    preferred: Optional[L],
    out: Optional[List[L]] = None,
) -> Sequence[L]:
    """Return ``neighbors`` with ``preferred`` moved to the front.

    The relative order of the other entries is kept and ``neighbors`` is
    never modified. When no move is needed ``neighbors`` itself is
    returned; otherwise the result is written into ``out`` (cleared first)
    or a new list.
    """

    if preferred is None or preferred not in neighbors or neighbors[0] == preferred:
        return neighbors
    target: List[L] = out if out is not None else []
    target.clear()
    target.append(preferred)
    target.extend(n for n in neighbors if n != preferred)
    return target


__all__ = [
    "manhattan",
    "scaled_manhattan",
    "zero_heuristic",
    "project_forward",
    "prefer_first",
]
