"""Lowest common ancestors and path lengths in a weighted tree by binary lifting."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class WeightedTree:
    """Tree on vertices ``0..n-1`` rooted at ``root``."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int, int]], root: int = 0) -> None:
        if n < 1:
            raise ValueError("tree must have at least one vertex")
        if not 0 <= root < n:
            raise ValueError("root out of range")
        edge_list = list(edges)
        if len(edge_list) != n - 1:
            raise ValueError("a tree on n vertices has n - 1 edges")
        adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
        for u, v, w in edge_list:
            if not (0 <= u < n and 0 <= v < n):
                raise ValueError("edge endpoint out of range")
            adj[u].append((v, w))
            adj[v].append((u, w))
        parent = [-1] * n
        parent[root] = root
        depth = [0] * n
        dist = [0] * n
        queue = deque([root])
        while queue:
            x = queue.popleft()
            for y, w in adj[x]:
                if parent[y] == -1:
                    parent[y] = x
                    depth[y] = depth[x] + 1
                    dist[y] = dist[x] + w
                    queue.append(y)
        if -1 in parent:
            raise ValueError("edges do not connect every vertex")
        self._n = n
        self._depth = depth
        self._dist = dist
        self._up = [parent]
        for _ in range(max(1, n.bit_length())):
            prev = self._up[-1]
            self._up.append([prev[p] for p in prev])

    def _check(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError("vertex out of range")

    def lca(self, u: int, v: int) -> int:
        self._check(u)
        self._check(v)
        if self._depth[u] < self._depth[v]:
            u, v = v, u
        gap = self._depth[u] - self._depth[v]
        for level, up in enumerate(self._up):
            if gap >> level & 1:
                u = up[u]
        if u == v:
            return u
        for up in reversed(self._up):
            if up[u] != up[v]:
                u, v = up[u], up[v]
        return self._up[0][u]

    def distance(self, u: int, v: int) -> int:
        """Total edge weight on the path between ``u`` and ``v``."""
        ancestor = self.lca(u, v)
        return self._dist[u] + self._dist[v] - 2 * self._dist[ancestor]