"""Single-source and all-pairs shortest paths over weighted graphs."""

from __future__ import annotations

import heapq
import math
from collections.abc import Hashable, Iterable
from dataclasses import dataclass

from .graph import Graph

INF = math.inf


@dataclass(frozen=True)
class BellmanFordResult:
    """Distances from the source, with inf for unreachable nodes, and the cycle verdict."""

    distances: list
    has_negative_cycle: bool


def _check_node(node: Hashable, count: int) -> None:
    if node not in range(count):
        raise ValueError(f"node {node!r} is outside 0..{count - 1}")


def _edges(graph: Graph, count: int) -> list[tuple[int, int, int]]:
    """Every edge of graph, checking that its ends lie in 0..count-1."""
    edges = []
    for node in graph:
        for nbr, weight in graph.neighbours(node):
            _check_node(node, count)
            _check_node(nbr, count)
            edges.append((node, nbr, weight))
    return edges


def bellman_ford(graph: Graph, source: int, count: int) -> BellmanFordResult:
    """Bellman-Ford distances from source over nodes 0..count-1."""
    _check_node(source, count)
    edges = _edges(graph, count)
    distances = [INF] * count
    distances[source] = 0
    for _ in range(count - 1):
        for u, v, weight in edges:
            if distances[u] != INF and distances[u] + weight < distances[v]:
                distances[v] = distances[u] + weight
    negative_cycle = any(
        distances[u] != INF and distances[u] + weight < distances[v]
        for u, v, weight in edges
    )
    return BellmanFordResult(distances, negative_cycle)


def dijkstra(graph: Graph, source: int, count: int) -> list:
    """Dijkstra distances from source over nodes 0..count-1; inf when unreachable."""
    _check_node(source, count)
    _edges(graph, count)
    distances = [INF] * count
    distances[source] = 0
    pending = [(0, source)]
    while pending:
        distance, node = heapq.heappop(pending)
        if distance > distances[node]:
            continue
        for nbr, weight in graph.neighbours(node):
            candidate = distance + weight
            if candidate < distances[nbr]:
                distances[nbr] = candidate
                heapq.heappush(pending, (candidate, nbr))
    return distances


def floyd_warshall(graph: Graph, count: int) -> list[list]:
    """Matrix of shortest distances between all pairs of nodes 0..count-1."""
    distances = [[0 if i == j else INF for j in range(count)] for i in range(count)]
    for u, v, weight in _edges(graph, count):
        distances[u][v] = min(distances[u][v], weight)
    for helper in range(count):
        through = distances[helper]
        for row in distances:
            to_helper = row[helper]
            if to_helper == INF:
                continue
            for v, onward in enumerate(through):
                candidate = to_helper + onward
                if candidate < row[v]:
                    row[v] = candidate
    return distances


def _topological_order(graph: Graph, source: Hashable) -> list:
    """Nodes reachable from source in topological order; raises on a cycle."""
    seen = {source}
    on_path = {source}
    finish = []
    stack = [(source, iter(graph.neighbours(source)))]
    while stack:
        node, pending = stack[-1]
        for nbr, _ in pending:
            if nbr in on_path:
                raise ValueError("graph has a cycle reachable from the source")
            if nbr not in seen:
                seen.add(nbr)
                on_path.add(nbr)
                stack.append((nbr, iter(graph.neighbours(nbr))))
                break
        else:
            stack.pop()
            on_path.discard(node)
            finish.append(node)
    finish.reverse()
    return finish


def _dag_relax(graph: Graph, source: Hashable) -> tuple[dict, dict]:
    order = _topological_order(graph, source)
    distances = {node: INF for node in order}
    distances[source] = 0
    parent: dict = {source: None}
    for node in order:
        for nbr, weight in graph.neighbours(node):
            candidate = distances[node] + weight
            if candidate < distances[nbr]:
                distances[nbr] = candidate
                parent[nbr] = node
    return distances, parent


def dag_shortest_paths(graph: Graph, source: Hashable) -> dict:
    """Shortest distances from source to every node it reaches in a directed acyclic graph."""
    return _dag_relax(graph, source)[0]


def dag_path_to(graph: Graph, source: Hashable, destination: Hashable) -> list:
    """Shortest path from source to destination in a directed acyclic graph."""
    parent = _dag_relax(graph, source)[1]
    if destination not in parent:
        raise ValueError(f"{destination!r} is not reachable from {source!r}")
    path = []
    node = destination
    while node is not None:
        path.append(node)
        node = parent[node]
    path.reverse()
    return path


def shortest_routes(node_count: int, edges: Iterable[tuple[int, int, int]]) -> list:
    """Distances from node 1 to nodes 1..node_count over undirected weighted edges."""
    if node_count < 1:
        raise ValueError("node_count must be positive")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(node_count + 1)]
    for u, v, weight in edges:
        for end in (u, v):
            if end not in range(1, node_count + 1):
                raise ValueError(f"node {end!r} is outside 1..{node_count}")
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    distances = [INF] * (node_count + 1)
    distances[1] = 0
    pending = [(0, 1)]
    while pending:
        distance, node = heapq.heappop(pending)
        if distance > distances[node]:
            continue
        for nbr, weight in adjacency[node]:
            candidate = distance + weight
            if candidate < distances[nbr]:
                distances[nbr] = candidate
                heapq.heappush(pending, (candidate, nbr))
    return distances[1:]