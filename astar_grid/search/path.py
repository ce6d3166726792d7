"""Rebuild a route from a predecessor map."""

from __future__ import annotations

import logging
from typing import List, Mapping, TypeVar

from ..errors import PathIntegrityError

logger = logging.getLogger(__name__)

L = TypeVar("L")

_MISSING = object()


def reconstruct_path(
    came_from: Mapping[L, L], start: L, goal: L, limit: int
) -> List[L]:
    """Return the route from ``start`` to ``goal`` including both ends.

    An unreachable ``goal`` (absent from ``came_from``) yields ``[]``.
    The walk is capped at ``limit`` steps; exceeding it or hitting a
    location without a predecessor raises :class:`PathIntegrityError`.
    """

    if goal not in came_from:
        return []

    path = [goal]
    current = goal
    steps = 0
    while current != start:
        prev = came_from.get(current, _MISSING)
        if prev is _MISSING or prev == current:
            logger.error(
                "[Path] Predecessor chain from %s broke at %s before reaching %s",
                goal, current, start,
            )
            raise PathIntegrityError(
                f"predecessor chain from {goal!r} ends at {current!r}, not {start!r}"
            )
        steps += 1
        if steps > limit:
            logger.error(
                "[Path] Walk from %s exceeded %d steps; predecessor map has a cycle",
                goal, limit,
            )
            raise PathIntegrityError(
                f"predecessor walk from {goal!r} exceeded {limit} steps"
            )
        path.append(prev)
        current = prev

    path.reverse()
    return path


__all__ = ["reconstruct_path"]
