"""Fenwick tree and segment tree for prefix and range sums."""

from __future__ import annotations

from collections.abc import Iterable


class FenwickTree:
    """Binary indexed tree over one-based positions."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._size = len(items)
        self._tree = [0] * (self._size + 1)
        for position, value in enumerate(items, 1):
            self.add(position, value)

    def add(self, index: int, delta: int) -> None:
        """Add delta to the item at one-based index."""
        if not 1 <= index <= self._size:
            raise IndexError(f"position {index} out of range")
        while index <= self._size:
            self._tree[index] += delta
            index += index & -index

    def prefix_sum(self, index: int) -> int:
        """Sum of the first index items."""
        if not 0 <= index <= self._size:
            raise IndexError(f"prefix length {index} out of range")
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total

    def lower_bound(self, target: int) -> int:
        """Smallest one-based index whose prefix sum reaches target.

        Assumes non-negative items; returns len + 1 when the total falls short.
        """
        position = 0
        running = 0
        step = 1 << (self._size.bit_length() - 1) if self._size else 0
        while step:
            candidate = position + step
            if candidate <= self._size and running + self._tree[candidate] < target:
                position = candidate
                running += self._tree[candidate]
            step >>= 1
        return position + 1


class SegmentTree:
    """Sum segment tree over zero-based positions."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if not items:
            raise ValueError("segment tree needs at least one value")
        self._size = len(items)
        self._tree = [0] * (4 * self._size)
        self._build(items, 0, 0, self._size - 1)

    def _build(self, items: list[int], node: int, low: int, high: int) -> None:
        if low == high:
            self._tree[node] = items[low]
            return
        mid = (low + high) // 2
        self._build(items, 2 * node + 1, low, mid)
        self._build(items, 2 * node + 2, mid + 1, high)
        self._tree[node] = self._tree[2 * node + 1] + self._tree[2 * node + 2]

    def _query(self, node: int, low: int, high: int, left: int, right: int) -> int:
        if left <= low and high <= right:
            return self._tree[node]
        if high < left or low > right:
            return 0
        mid = (low + high) // 2
        return self._query(2 * node + 1, low, mid, left, right) + self._query(
            2 * node + 2, mid + 1, high, left, right
        )

    def query(self, left: int, right: int) -> int:
        """Sum of the items at positions left through right inclusive."""
        if not 0 <= left <= right < self._size:
            raise IndexError(f"range [{left}, {right}] out of bounds")
        return self._query(0, 0, self._size - 1, left, right)

    def update(self, index: int, value: int) -> None:
        """Replace the item at index with value."""
        if not 0 <= index < self._size:
            raise IndexError(f"position {index} out of range")
        node, low, high = 0, 0, self._size - 1
        path = []
        while low != high:
            path.append(node)
            mid = (low + high) // 2
            if index <= mid:
                node, high = 2 * node + 1, mid
            else:
                node, low = 2 * node + 2, mid + 1
        self._tree[node] = value
        for parent in reversed(path):
            self._tree[parent] = self._tree[2 * parent + 1] + self._tree[2 * parent + 2]