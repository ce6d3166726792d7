"""Priority queues used as the A* frontier."""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Generic, Iterator, List, Tuple, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Binary min-heap with first-in-first-out ordering among equal priorities.

    Duplicate items are allowed; each :meth:`insert` adds a new entry.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, T]] = []
        self._seq: Iterator[int] = count()

    @property
    def count(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def insert(self, item: T, priority: float) -> None:
        heappush(self._heap, (priority, next(self._seq), item))

    def extract_min(self) -> T:
        """Remove and return the item with the smallest priority.

        Raises ``IndexError`` when the queue is empty.
        """
        if not self._heap:
            raise IndexError("extract_min from an empty priority queue")
        return heappop(self._heap)[2]

    def clear(self) -> None:
        self._heap.clear()
        self._seq = count()


class LinearScanQueue(Generic[T]):
    """Unsorted list with linear-scan extraction.

    O(n) per :meth:`extract_min`. Pops in the same order as
    :class:`PriorityQueue`: the first-inserted entry wins a tie.
    """

    def __init__(self) -> None:
        self._elements: List[Tuple[T, float]] = []

    @property
    def count(self) -> int:
        return len(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def is_empty(self) -> bool:
        return not self._elements

    def insert(self, item: T, priority: float) -> None:
        self._elements.append((item, priority))

    def extract_min(self) -> T:
        if not self._elements:
            raise IndexError("extract_min from an empty priority queue")
        best = 0
        for i in range(1, len(self._elements)):
            if self._elements[i][1] < self._elements[best][1]:
                best = i
        return self._elements.pop(best)[0]

    def clear(self) -> None:
        self._elements.clear()


FRONTIER_KINDS = {
    "heap": PriorityQueue,
    "linear": LinearScanQueue,
}


def make_frontier(kind: str = "heap") -> PriorityQueue | LinearScanQueue:
    """Return an empty frontier of the named ``kind``."""

    try:
        factory = FRONTIER_KINDS[kind]
    except KeyError:
        raise ValueError(
            f"unknown frontier kind {kind!r}; expected one of {sorted(FRONTIER_KINDS)}"
        ) from None
    return factory()


__all__ = ["PriorityQueue", "LinearScanQueue", "FRONTIER_KINDS", "make_frontier"]
