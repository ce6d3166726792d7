"""search package."""

from .astar import AStar, SearchState, a_star
from .frontier import LinearScanQueue, PriorityQueue, make_frontier
from .heuristics import manhattan, scaled_manhattan, zero_heuristic
from .path import reconstruct_path

__all__ = [
    "AStar",
    "SearchState",
    "a_star",
    "LinearScanQueue",
    "PriorityQueue",
    "make_frontier",
    "manhattan",
    "scaled_manhattan",
    "zero_heuristic",
    "reconstruct_path",
]
