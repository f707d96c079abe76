"""Min-priority frontier for the A* search."""

from __future__ import annotations

import heapq
from itertools import count


class Frontier:
    """Binary min-heap of ``(key, priority)`` entries.

    Entries with equal priority come out in insertion order. There is no
    decrease-key: callers push a fresh entry and skip stale ones on pop.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, int]] = []
        self._counter = count()

    def push(self, key: int, priority: int) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), key))

    def pop(self) -> tuple[int, int] | None:
        """Remove and return the lowest-priority ``(key, priority)``, or ``None``."""
        if not self._heap:
            return None
        priority, _, key = heapq.heappop(self._heap)
        return key, priority

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
