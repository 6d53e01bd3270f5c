"""Queue exercises: sliding windows, two-stack queue, reversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Any


def sum_of_window_extremes(values: Iterable[int], k: int) -> int:
    """Sum of max + min over every contiguous window of length k."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError("window size must be between 1 and the number of items")
    highs: deque[int] = deque()
    lows: deque[int] = deque()
    total = 0
    for index, value in enumerate(items):
        while highs and items[highs[-1]] <= value:
            highs.pop()
        highs.append(index)
        while lows and items[lows[-1]] >= value:
            lows.pop()
        lows.append(index)
        if highs[0] <= index - k:
            highs.popleft()
        if lows[0] <= index - k:
            lows.popleft()
        if index >= k - 1:
            total += items[highs[0]] + items[lows[0]]
    return total


class StackQueue:
    """First-in first-out queue built from two stacks."""

    def __init__(self) -> None:
        self._inbox: list = []
        self._outbox: list = []

    def enqueue(self, value: Any) -> None:
        self._inbox.append(value)

    def dequeue(self) -> Any:
        """Remove and return the oldest value."""
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("dequeue from an empty queue")
        return self._outbox.pop()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


def reverse_groups(queue: Iterable[Any], k: int) -> deque:
    """Reverse each full group of k items; a shorter tail keeps its order."""
    if k < 1:
        raise ValueError("group size must be positive")
    items = list(queue)
    full = len(items) - len(items) % k
    result: deque = deque()
    for start in range(0, full, k):
        result.extend(reversed(items[start : start + k]))
    result.extend(items[full:])
    return result


def reverse_queue(queue: Iterable[Any]) -> deque:
    """A new queue holding the items in reverse order."""
    return deque(reversed(list(queue)))