"""Queue-like containers: a queue on two stacks, a recent-call counter, a number set."""

from __future__ import annotations

import heapq
from bisect import bisect_left

RECENT_WINDOW = 3000
SMALLEST_SET_LIMIT = 1000


class StackQueue:
    """A first-in first-out queue built from two stacks."""

    def __init__(self) -> None:
        self._inbox: list[int] = []
        self._outbox: list[int] = []

    def push(self, x: int) -> None:
        """Add ``x`` at the back."""
        self._inbox.append(x)

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())

    def pop(self) -> int:
        """Remove and return the front item."""
        self._refill()
        if not self._outbox:
            raise IndexError("pop from an empty queue")
        return self._outbox.pop()

    def peek(self) -> int:
        """Return the front item without removing it."""
        self._refill()
        if not self._outbox:
            raise IndexError("peek at an empty queue")
        return self._outbox[-1]

    def empty(self) -> bool:
        """Tell whether the queue holds nothing."""
        return not self._inbox and not self._outbox


class RecentCounter:
    """Counts the pings within the last 3000 time units, bounds included."""

    def __init__(self) -> None:
        self._pings: list[int] = []

    def ping(self, t: int) -> int:
        """Record a ping at time ``t`` and return how many fall in ``[t - 3000, t]``."""
        self._pings.append(t)
        del self._pings[: bisect_left(self._pings, t - RECENT_WINDOW)]
        return len(self._pings)


class SmallestInfiniteSet:
    """The positive integers up to 1000, popped smallest first, with add-back."""

    def __init__(self) -> None:
        self._popped = 0
        self._heap: list[int] = []
        self._added: set[int] = set()

    def pop_smallest(self) -> int:
        """Remove and return the smallest number in the set."""
        if self._heap:
            smallest = heapq.heappop(self._heap)
            self._added.discard(smallest)
            return smallest
        if self._popped >= SMALLEST_SET_LIMIT:
            raise IndexError("no numbers left in the set")
        self._popped += 1
        return self._popped

    def add_back(self, num: int) -> None:
        """Put ``num`` back if it was taken out and is not back already."""
        if num <= self._popped and num not in self._added:
            heapq.heappush(self._heap, num)
            self._added.add(num)