"""Adjacency-list graph with traversals, cycle checks, bridges and components."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Callable, Hashable, Iterable, Iterator, Sequence
from itertools import count as counter

Node = Hashable


def _walk(
    start: Node, targets: Callable[[Node], Iterable[Node]], visited: set
) -> tuple[list, list]:
    """Depth-first walk from start; returns (preorder, postorder) of newly seen nodes."""
    visited.add(start)
    pre = [start]
    post = []
    stack = [(start, iter(targets(start)))]
    while stack:
        node, pending = stack[-1]
        for nbr in pending:
            if nbr not in visited:
                visited.add(nbr)
                pre.append(nbr)
                stack.append((nbr, iter(targets(nbr))))
                break
        else:
            stack.pop()
            post.append(node)
    return pre, post


class Graph:
    """A graph stored as node -> list of (neighbour, weight) pairs, in insertion order."""

    def __init__(self) -> None:
        self._adjacency: dict[Node, list[tuple[Node, int]]] = {}

    def add_edge(self, u: Node, v: Node, weight: int = 0, directed: bool = False) -> None:
        """Add an edge u -> v, and v -> u as well unless directed."""
        self._adjacency.setdefault(u, []).append((v, weight))
        targets = self._adjacency.setdefault(v, [])
        if not directed:
            targets.append((u, weight))

    def neighbours(self, node: Node) -> list[tuple[Node, int]]:
        """The (neighbour, weight) pairs leaving node."""
        return list(self._adjacency.get(node, ()))

    def __iter__(self) -> Iterator[Node]:
        return iter(self._adjacency)

    def _targets(self, node: Node) -> Iterator[Node]:
        return (nbr for nbr, _ in self._adjacency.get(node, ()))

    def format_adjacency(self, count: int) -> str:
        """One line per node 0..count-1 in the form ``u->(v,w),(v,w),``."""
        return "\n".join(
            f"{node}->" + "".join(f"({nbr},{weight})," for nbr, weight in self.neighbours(node))
            for node in range(count)
        )

    def bfs(self, source: Node) -> list[Node]:
        """Nodes reachable from source in breadth-first order."""
        order = []
        visited = {source}
        pending = deque([source])
        while pending:
            node = pending.popleft()
            order.append(node)
            for nbr in self._targets(node):
                if nbr not in visited:
                    visited.add(nbr)
                    pending.append(nbr)
        return order

    def dfs(self, count: int) -> list[Node]:
        """Depth-first order over nodes 0..count-1, covering every component."""
        visited: set = set()
        order: list = []
        for node in range(count):
            if node not in visited:
                order.extend(_walk(node, self._targets, visited)[0])
        return order

    def shortest_path_unweighted(self, source: Node, destination: Node) -> list[Node]:
        """Fewest-edge path from source to destination, both ends included."""
        parent: dict[Node, Node | None] = {source: None}
        pending = deque([source])
        while pending:
            node = pending.popleft()
            for nbr in self._targets(node):
                if nbr not in parent:
                    parent[nbr] = node
                    pending.append(nbr)
        if destination not in parent:
            raise ValueError(f"{destination!r} is not reachable from {source!r}")
        path = []
        node: Node | None = destination
        while node is not None:
            path.append(node)
            node = parent[node]
        path.reverse()
        return path

    def has_undirected_cycle_bfs(self, count: int) -> bool:
        """Breadth-first cycle check of an undirected graph over nodes 0..count-1."""
        visited: set = set()
        for start in range(count):
            if start in visited:
                continue
            visited.add(start)
            parent: dict[Node, Node | None] = {start: None}
            pending = deque([start])
            while pending:
                node = pending.popleft()
                for nbr in self._targets(node):
                    if nbr not in visited:
                        visited.add(nbr)
                        parent[nbr] = node
                        pending.append(nbr)
                    elif nbr != parent[node]:
                        return True
        return False

    def has_undirected_cycle_dfs(self, count: int) -> bool:
        """Depth-first cycle check of an undirected graph over nodes 0..count-1."""
        visited: set = set()
        for start in range(count):
            if start in visited:
                continue
            visited.add(start)
            stack = [(start, None, iter(self._targets(start)))]
            while stack:
                node, parent, pending = stack[-1]
                for nbr in pending:
                    if nbr not in visited:
                        visited.add(nbr)
                        stack.append((nbr, node, iter(self._targets(nbr))))
                        break
                    if nbr != parent:
                        return True
                else:
                    stack.pop()
        return False

    def has_directed_cycle(self, count: int) -> bool:
        """True when a directed cycle (self-loops included) is reachable from 0..count-1."""
        visited: set = set()
        for start in range(count):
            if start in visited:
                continue
            visited.add(start)
            on_path = {start}
            stack = [(start, iter(self._targets(start)))]
            while stack:
                node, pending = stack[-1]
                for nbr in pending:
                    if nbr not in visited:
                        visited.add(nbr)
                        on_path.add(nbr)
                        stack.append((nbr, iter(self._targets(nbr))))
                        break
                    if nbr in on_path:
                        return True
                else:
                    stack.pop()
                    on_path.discard(node)
        return False

    def bridges(self, source: Node) -> list[tuple[Node, Node]]:
        """Bridges of the undirected component holding source, in the order found."""
        discovered: dict[Node, int] = {}
        low: dict[Node, int] = {}
        found: list[tuple[Node, Node]] = []
        timer = counter(1)

        def visit(node: Node, parent: Node | None) -> None:
            discovered[node] = low[node] = next(timer)
            for nbr in self._targets(node):
                if nbr == parent:
                    continue
                if nbr not in discovered:
                    visit(nbr, node)
                    low[node] = min(low[node], low[nbr])
                    if low[nbr] > discovered[node]:
                        found.append((node, nbr))
                else:
                    low[node] = min(low[node], discovered[nbr])

        visit(source, None)
        return found

    def strongly_connected_components(self, count: int) -> list[list[Node]]:
        """Kosaraju's components, starting from nodes 0..count-1."""
        visited: set = set()
        finish: list = []
        for node in range(count):
            if node not in visited:
                finish.extend(_walk(node, self._targets, visited)[1])

        transposed: dict[Node, list[Node]] = defaultdict(list)
        for node, edges in self._adjacency.items():
            for nbr, _ in edges:
                transposed[nbr].append(node)

        seen: set = set()
        components = []
        for node in reversed(finish):
            if node not in seen:
                components.append(_walk(node, lambda n: transposed.get(n, ()), seen)[0])
        return components


def topological_sort_dfs(adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Topological order of a DAG given as a list of successor lists."""
    visited: set = set()
    finish: list[int] = []
    for node in range(len(adjacency)):
        if node not in visited:
            finish.extend(_walk(node, lambda n: adjacency[n], visited)[1])
    finish.reverse()
    return finish


def topological_sort_kahn(adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Kahn's topological order; nodes on or behind a cycle are left out."""
    successors = [list(targets) for targets in adjacency]
    indegree = [0] * len(successors)
    for targets in successors:
        for nbr in targets:
            indegree[nbr] += 1
    pending = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order = []
    while pending:
        node = pending.popleft()
        order.append(node)
        for nbr in successors[node]:
            indegree[nbr] -= 1
            if indegree[nbr] == 0:
                pending.append(nbr)
    return order