"""Frontier containers for the search strategies."""

from __future__ import annotations

import heapq
import itertools
from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class Frontier(Generic[T]):
    """Min-priority queue; equal keys come out in insertion order."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, T]] = []
        self._counter = itertools.count()

    def push(self, item: T, key: int) -> None:
        heapq.heappush(self._heap, (key, next(self._counter), item))

    def pop(self) -> T:
        """Remove and return the item with the smallest key."""
        return heapq.heappop(self._heap)[2]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)


class FifoFrontier(Generic[T]):
    """Level-order frontier: with unit move costs, insertion order is key order."""

    def __init__(self) -> None:
        self._queue: deque[T] = deque()

    def push(self, item: T, key: int = 0) -> None:
        self._queue.append(item)

    def pop(self) -> T:
        return self._queue.popleft()

    def is_empty(self) -> bool:
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)
