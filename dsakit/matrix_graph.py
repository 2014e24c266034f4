"""An undirected graph stored as an adjacency matrix, with breadth-first search."""

from __future__ import annotations

from collections import deque


class AdjacencyMatrixGraph:
    """Undirected graph on vertices 0..n-1 held in an n-by-n matrix of 0 and 1."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._matrix: list[list[int]] = [[0] * vertices for _ in range(vertices)]

    @property
    def vertices(self) -> int:
        return len(self._matrix)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._matrix):
            raise ValueError(f"invalid vertex number {vertex}")

    def add_edge(self, src: int, des: int) -> None:
        """Join src and des; self-loops and unknown vertices are rejected."""
        self._check(src)
        self._check(des)
        if src == des:
            raise ValueError("source and destination must differ")
        self._matrix[src][des] = 1
        self._matrix[des][src] = 1

    def rows(self) -> list[list[int]]:
        """A copy of the adjacency matrix."""
        return [list(row) for row in self._matrix]

    def bfs(self, start: int) -> list[int]:
        """Vertices reachable from start in breadth-first order, lower numbers first."""
        self._check(start)
        visited = [False] * len(self._matrix)
        visited[start] = True
        queue = deque([start])
        order: list[int] = []
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for other, linked in enumerate(self._matrix[vertex]):
                if linked and not visited[other]:
                    visited[other] = True
                    queue.append(other)
        return order

    def format(self) -> str:
        """The matrix with a column header and a ``i:`` label on each row."""
        header = "    " + "".join(f"{i:5d}" for i in range(len(self._matrix)))
        lines = [header + "   ----------------------"]
        for i, row in enumerate(self._matrix):
            lines.append(f"{i}:  " + "".join(f"{cell:5d}" for cell in row))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={self.vertices})"