"""An undirected weighted graph stored as adjacency lists."""

from __future__ import annotations

from collections import deque


class Graph:
    """An undirected graph over vertices ``0 .. num_vertices - 1``.

    Each vertex's neighbours are kept newest first, so traversals visit
    the most recently added edge of a vertex before older ones.
    """

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.num_vertices = num_vertices
        self._adj: list[list[tuple[int, int]]] = [[] for _ in range(num_vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.num_vertices:
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, src: int, dest: int, weight: int = 1) -> None:
        """Connect ``src`` and ``dest`` in both directions."""
        self._check(src)
        self._check(dest)
        self._adj[src].insert(0, (dest, weight))
        self._adj[dest].insert(0, (src, weight))

    def neighbors(self, vertex: int) -> list[tuple[int, int]]:
        """Return ``(neighbour, weight)`` pairs, newest edge first."""
        self._check(vertex)
        return list(self._adj[vertex])

    def _dfs_from(self, start: int, visited: list[bool]) -> list[int]:
        visited[start] = True
        order = [start]
        stack = [iter(self._adj[start])]
        while stack:
            for vertex, _ in stack[-1]:
                if not visited[vertex]:
                    visited[vertex] = True
                    order.append(vertex)
                    stack.append(iter(self._adj[vertex]))
                    break
            else:
                stack.pop()
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the vertices in depth-first order from ``start``."""
        self._check(start)
        return self._dfs_from(start, [False] * self.num_vertices)

    def _bfs_parents(self, start: int) -> tuple[list[int], dict[int, int | None]]:
        parents: dict[int, int | None] = {start: None}
        order: list[int] = []
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour, _ in self._adj[vertex]:
                if neighbour not in parents:
                    parents[neighbour] = vertex
                    queue.append(neighbour)
        return order, parents

    def bfs(self, start: int) -> list[int]:
        """Return the vertices in breadth-first order from ``start``."""
        self._check(start)
        return self._bfs_parents(start)[0]

    def shortest_path(self, start: int, end: int) -> list[int] | None:
        """Return a path with the fewest edges, or None if ``end`` is unreachable."""
        self._check(start)
        self._check(end)
        _, parents = self._bfs_parents(start)
        if end not in parents:
            return None
        path = []
        current: int | None = end
        while current is not None:
            path.append(current)
            current = parents[current]
        path.reverse()
        return path

    def count_components(self) -> int:
        """Return the number of connected components."""
        visited = [False] * self.num_vertices
        count = 0
        for vertex in range(self.num_vertices):
            if not visited[vertex]:
                self._dfs_from(vertex, visited)
                count += 1
        return count

    def has_cycle(self) -> bool:
        """Return True when some component contains a cycle."""
        visited = [False] * self.num_vertices
        for root in range(self.num_vertices):
            if visited[root]:
                continue
            visited[root] = True
            stack = [(root, -1, iter(self._adj[root]))]
            while stack:
                vertex, parent, edges = stack[-1]
                for neighbour, _ in edges:
                    if not visited[neighbour]:
                        visited[neighbour] = True
                        stack.append((neighbour, vertex, iter(self._adj[neighbour])))
                        break
                    if neighbour != parent:
                        return True
                else:
                    stack.pop()
        return False

    def render(self) -> str:
        """Return the adjacency lists as text, one line per vertex."""
        lines = ["Graph adjacency list:"]
        for vertex, edges in enumerate(self._adj):
            body = "".join(f"{v}(w={w}) -> " for v, w in edges)
            lines.append(f"[{vertex}]: {body}NULL")
        return "\n".join(lines)