"""Bipartiteness checking and topological ordering."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Optional


def is_bipartite(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Whether the undirected graph on vertices ``1..n`` is two-colourable."""
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    colour = [0] * (n + 1)
    for start in range(1, n + 1):
        if colour[start]:
            continue
        colour[start] = 1
        stack = [start]
        while stack:
            u = stack.pop()
            for v in adj[u]:
                if colour[v] == colour[u]:
                    return False
                if not colour[v]:
                    colour[v] = 3 - colour[u]
                    stack.append(v)
    return True


def topological_order(n: int, edges: Iterable[tuple[int, int]]) -> Optional[list[int]]:
    """Kahn order of the directed graph on ``1..n``, or None if it has a cycle."""
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    indegree = [0] * (n + 1)
    for u, v in edges:
        adj[u].append(v)
        indegree[v] += 1
    queue = deque(v for v in range(1, n + 1) if not indegree[v])
    order = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in adj[u]:
            indegree[v] -= 1
            if not indegree[v]:
                queue.append(v)
    return order if len(order) == n else None


def has_topological_order(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Whether the directed graph on ``1..n`` is acyclic."""
    return topological_order(n, edges) is not None