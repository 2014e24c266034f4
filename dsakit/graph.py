"""An undirected graph stored as adjacency lists, with breadth- and depth-first search."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class AdjacencyListGraph:
    """Undirected graph on vertices 0..n-1.

    Each new edge goes to the front of both endpoints' adjacency lists, so
    neighbours are listed most recent first. Traversals follow that order.
    """

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._adj: list[list[int]] = [[] for _ in range(vertices)]

    @property
    def vertices(self) -> int:
        return len(self._adj)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adj):
            raise ValueError(f"invalid vertex number {vertex}")

    def add_edge(self, src: int, des: int) -> None:
        """Join src and des; self-loops and unknown vertices are rejected."""
        self._check(src)
        self._check(des)
        if src == des:
            raise ValueError("source and destination must differ")
        self._adj[src].insert(0, des)
        self._adj[des].insert(0, src)

    def neighbours(self, vertex: int) -> list[int]:
        """Vertices adjacent to vertex, most recently added first."""
        self._check(vertex)
        return list(self._adj[vertex])

    def bfs(self, start: int) -> list[int]:
        """Vertices reachable from start in breadth-first order."""
        self._check(start)
        visited = [False] * len(self._adj)
        visited[start] = True
        queue = deque([start])
        order: list[int] = []
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for other in self._adj[vertex]:
                if not visited[other]:
                    visited[other] = True
                    queue.append(other)
        return order

    def dfs(self, start: int) -> list[int]:
        """Vertices reachable from start, visited with an explicit stack.

        A vertex is marked when pushed, so it is pushed at most once.
        """
        self._check(start)
        visited = [False] * len(self._adj)
        visited[start] = True
        stack = [start]
        order: list[int] = []
        while stack:
            vertex = stack.pop()
            order.append(vertex)
            for other in self._adj[vertex]:
                if not visited[other]:
                    visited[other] = True
                    stack.append(other)
        return order

    def dfs_recursive(self, start: int) -> list[int]:
        """Vertices reachable from start in recursive depth-first order."""
        self._check(start)
        visited = [False] * len(self._adj)

        def visit(vertex: int) -> Iterator[int]:
            visited[vertex] = True
            yield vertex
            for other in self._adj[vertex]:
                if not visited[other]:
                    yield from visit(other)

        return list(visit(start))

    def format(self) -> str:
        """One line per vertex: ``i|`` followed by ``  v  ->`` for each neighbour."""
        return "\n".join(
            f"{vertex}|" + "".join(f"  {other}  ->" for other in others)
            for vertex, others in enumerate(self._adj)
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={self.vertices})"