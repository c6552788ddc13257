"""Undirected graph kept both as an adjacency matrix and adjacency lists."""

from __future__ import annotations

from collections import deque

MAX_VERTICES = 100


class InvalidEdgeError(ValueError):
    """Raised when an edge names a vertex outside the graph."""


class Graph:
    """An undirected graph over vertices 0 .. vertex_count - 1."""

    def __init__(self, vertex_count: int) -> None:
        if not 0 <= vertex_count <= MAX_VERTICES:
            raise ValueError(f"vertex count must be between 0 and {MAX_VERTICES}")
        self.vertex_count = vertex_count
        self._matrix = [[0] * vertex_count for _ in range(vertex_count)]
        self._lists: list[deque[int]] = [deque() for _ in range(vertex_count)]

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, origin: int, destination: int) -> None:
        """Connect two vertices in both directions."""
        if not (0 <= origin < self.vertex_count and 0 <= destination < self.vertex_count):
            raise InvalidEdgeError(f"invalid edge ({origin}, {destination})")
        self._matrix[origin][destination] = 1
        self._matrix[destination][origin] = 1
        self._lists[origin].appendleft(destination)
        self._lists[destination].appendleft(origin)

    def adjacency_matrix(self) -> list[list[int]]:
        """A copy of the adjacency matrix."""
        return [row[:] for row in self._matrix]

    def adjacency_list(self) -> list[list[int]]:
        """Neighbours of each vertex, most recently added first."""
        return [list(neighbours) for neighbours in self._lists]

    def bfs(self, start: int) -> list[int]:
        """Vertices reachable from start in breadth-first order."""
        self._check_vertex(start)
        visited = [False] * self.vertex_count
        visited[start] = True
        order = []
        pending = deque([start])
        while pending:
            vertex = pending.popleft()
            order.append(vertex)
            for neighbour, connected in enumerate(self._matrix[vertex]):
                if connected and not visited[neighbour]:
                    visited[neighbour] = True
                    pending.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Vertices reachable from start in depth-first order."""
        self._check_vertex(start)
        visited = [False] * self.vertex_count
        visited[start] = True
        order = [start]
        stack = [(start, iter(range(self.vertex_count)))]
        while stack:
            vertex, candidates = stack[-1]
            for neighbour in candidates:
                if self._matrix[vertex][neighbour] and not visited[neighbour]:
                    visited[neighbour] = True
                    order.append(neighbour)
                    stack.append((neighbour, iter(range(self.vertex_count))))
                    break
            else:
                stack.pop()
        return order

    def reachable(self, start: int, target: int) -> bool:
        """Whether a breadth-first search from start finds target."""
        return target in self.bfs(start)

    def format_matrix(self) -> str:
        """The adjacency matrix as text, one row per line."""
        lines = ["Adjacency Matrix:"]
        lines.extend(" ".join(str(cell) for cell in row) for row in self._matrix)
        return "\n".join(lines)

    def format_list(self) -> str:
        """The adjacency lists as text, one vertex per line."""
        lines = ["Adjacency List:"]
        for vertex, neighbours in enumerate(self._lists):
            chain = "".join(f"{neighbour} -> " for neighbour in neighbours)
            lines.append(f"Vertex {vertex}: {chain}NULL")
        return "\n".join(lines)