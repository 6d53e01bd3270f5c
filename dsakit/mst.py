"""Minimum spanning tree weights by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

from .disjoint_set import DisjointSet


def kruskal_mst(vertex_count: int, edges: Iterable[Sequence[int]]) -> int:
    """Total weight of a minimum spanning forest; edges are (u, v, weight)."""
    ordered = sorted((weight, u, v) for u, v, weight in edges)
    components = DisjointSet(vertex_count)
    total = 0
    for weight, u, v in ordered:
        if not components.connected(u, v):
            total += weight
            components.union_by_rank(u, v)
    return total


def prim_mst(vertex_count: int, adjacency: Sequence[Iterable[Sequence[int]]]) -> int:
    """Total weight of a minimum spanning tree of the component holding node 0.

    adjacency[u] lists (v, weight) pairs for every edge at u.
    """
    if vertex_count == 0:
        return 0
    if len(adjacency) < vertex_count:
        raise ValueError("adjacency must have an entry for every vertex")
    in_tree = [False] * vertex_count
    total = 0
    pending = [(0, 0)]
    while pending:
        weight, node = heapq.heappop(pending)
        if in_tree[node]:
            continue
        in_tree[node] = True
        total += weight
        for nbr, edge_weight in adjacency[node]:
            if not in_tree[nbr]:
                heapq.heappush(pending, (edge_weight, nbr))
    return total