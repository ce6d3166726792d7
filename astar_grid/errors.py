"""Exceptions raised by the search engine and graphs."""

from __future__ import annotations


class AStarError(Exception):
    """Base class for errors raised by :mod:`astar_grid`."""


class InvalidLocationError(AStarError, ValueError):
    """A start or goal location is out of bounds or blocked."""

    def __init__(self, role: str, location: object) -> None:
        super().__init__(f"{role} location {location!r} is not a traversable node")
        self.role = role
        self.location = location


class NegativeCostError(AStarError, ValueError):
    """A graph reported a negative edge cost."""

    def __init__(self, a: object, b: object, cost: float) -> None:
        super().__init__(f"negative edge cost {cost!r} from {a!r} to {b!r}")
        self.a = a
        self.b = b
        self.cost = cost


class PathIntegrityError(AStarError, RuntimeError):
    """The predecessor map is cyclic or broken."""


__all__ = [
    "AStarError",
    "InvalidLocationError",
    "NegativeCostError",
    "PathIntegrityError",
]
