"""Adjacency-list graphs with depth-first traversal."""

from __future__ import annotations

from collections.abc import Iterator


class _AdjacencyGraph:
    def _setup(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex count must not be negative, got {vertex_count}")
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
        self._edges = 0

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise ValueError(f"vertex {vertex} out of range")

    def _check_edge(self, src: int, dest: int) -> None:
        self._check_vertex(src)
        self._check_vertex(dest)
        if src == dest:
            raise ValueError(f"self-loop on vertex {src} is not allowed")

    def _walk(self, start: int, visited: set[int]) -> Iterator[tuple[int, int]]:
        """Yield (from, to) for each step into an unvisited vertex."""
        visited.add(start)
        stack = [(start, iter(self._adjacency[start]))]
        while stack:
            vertex, pending = stack[-1]
            for adjacent in pending:
                if adjacent not in visited:
                    visited.add(adjacent)
                    yield vertex, adjacent
                    stack.append((adjacent, iter(self._adjacency[adjacent])))
                    break
            else:
                stack.pop()


class UndirectedGraph(_AdjacencyGraph):
    """Undirected graph over vertices ``0 .. vertex_count - 1``."""

    def __init__(self, vertex_count: int) -> None:
        self._setup(vertex_count)

    def add_edge(self, src: int, dest: int) -> None:
        """Connect ``src`` and ``dest``; self-loops are rejected."""
        self._check_edge(src, dest)
        self._adjacency[src].append(dest)
        self._adjacency[dest].append(src)
        self._edges += 1

    def neighbors(self, vertex: int) -> list[int]:
        """Return the vertices adjacent to ``vertex`` in insertion order."""
        self._check_vertex(vertex)
        return list(self._adjacency[vertex])

    def edge_count(self) -> int:
        """Return the number of edges added."""
        return self._edges

    def dfs(self, start: int = 0) -> list[int]:
        """Return the vertices reached from ``start`` in depth-first order."""
        self._check_vertex(start)
        return [start] + [dest for _, dest in self._walk(start, set())]


class DirectedGraph(_AdjacencyGraph):
    """Directed graph over vertices ``0 .. vertex_count - 1``."""

    def __init__(self, vertex_count: int) -> None:
        self._setup(vertex_count)

    def add_edge(self, src: int, dest: int) -> None:
        """Add an edge from ``src`` to ``dest``; self-loops are rejected."""
        self._check_edge(src, dest)
        self._adjacency[src].append(dest)
        self._edges += 1

    def targets(self, vertex: int) -> list[int]:
        """Return the vertices ``vertex`` points to, in insertion order."""
        self._check_vertex(vertex)
        return list(self._adjacency[vertex])

    def edge_count(self) -> int:
        """Return the number of edges added."""
        return self._edges

    def dfs_edges(self) -> list[tuple[int, int]]:
        """Return the tree edges of a depth-first search started from every vertex in turn."""
        visited: set[int] = set()
        edges: list[tuple[int, int]] = []
        for vertex in range(len(self._adjacency)):
            edges.extend(self._walk(vertex, visited))
        return edges