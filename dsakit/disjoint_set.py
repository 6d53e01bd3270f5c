"""Union-find over the integers 0..n."""

from __future__ import annotations


class DisjointSet:
    """Disjoint sets with path compression and union by rank or by size."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)
        self._size = [1] * (n + 1)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._parent):
            raise IndexError(f"node {node} out of range")

    def find(self, node: int) -> int:
        """Representative of node's set, compressing the path on the way."""
        self._check(node)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union_by_rank(self, u: int, v: int) -> bool:
        """Join the sets of u and v; False when they were already joined."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        if self._rank[root_u] < self._rank[root_v]:
            self._parent[root_u] = root_v
        elif self._rank[root_v] < self._rank[root_u]:
            self._parent[root_v] = root_u
        else:
            self._parent[root_v] = root_u
            self._rank[root_u] += 1
        return True

    def union_by_size(self, u: int, v: int) -> bool:
        """Join the sets of u and v; False when they were already joined."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        if self._size[root_u] < self._size[root_v]:
            self._parent[root_u] = root_v
            self._size[root_v] += self._size[root_u]
        else:
            self._parent[root_v] = root_u
            self._size[root_u] += self._size[root_v]
        return True

    def connected(self, u: int, v: int) -> bool:
        """True when u and v are in the same set."""
        return self.find(u) == self.find(v)