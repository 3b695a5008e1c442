"""Single-source and all-pairs shortest paths on undirected weighted graphs."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable


class NegativeCycleError(ValueError):
    """Raised when a negative cycle is reachable from the source."""


def _adjacency(n: int, edges: Iterable[tuple[int, int, float]]) -> list[list[tuple[int, float]]]:
    adj: list[list[tuple[int, float]]] = [[] for _ in range(n + 1)]
    for u, v, w in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError("edge endpoint out of range")
        adj[u].append((v, w))
        adj[v].append((u, w))
    return adj


def _check_source(n: int, source: int) -> None:
    if not 1 <= source <= n:
        raise ValueError("source out of range")


def dijkstra(n: int, edges: Iterable[tuple[int, int, float]], source: int) -> dict[int, float]:
    """Distance from ``source`` to each vertex ``1..n``; ``math.inf`` if unreachable."""
    _check_source(n, source)
    adj = _adjacency(n, edges)
    if any(w < 0 for row in adj for _, w in row):
        raise ValueError("negative edge weight")
    dist = [math.inf] * (n + 1)
    dist[source] = 0
    done = [False] * (n + 1)
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if done[u]:
            continue
        done[u] = True
        for v, w in adj[u]:
            if d + w < dist[v]:
                dist[v] = d + w
                heapq.heappush(heap, (dist[v], v))
    return {v: dist[v] for v in range(1, n + 1)}


def spfa(n: int, edges: Iterable[tuple[int, int, float]], source: int) -> dict[int, float]:
    """Queue-based Bellman-Ford; raises NegativeCycleError on a reachable negative cycle."""
    _check_source(n, source)
    adj = _adjacency(n, edges)
    dist = [math.inf] * (n + 1)
    hops = [0] * (n + 1)
    dist[source] = 0
    queue = deque([source])
    queued = {source}
    while queue:
        u = queue.popleft()
        queued.discard(u)
        for v, w in adj[u]:
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                hops[v] = hops[u] + 1
                if hops[v] >= n:
                    raise NegativeCycleError("negative cycle reachable from source")
                if v not in queued:
                    queued.add(v)
                    queue.append(v)
    return {v: dist[v] for v in range(1, n + 1)}


def floyd_warshall(n: int, edges: Iterable[tuple[int, int, float]]) -> list[list[float]]:
    """All-pairs distances; row ``i`` and column ``j`` stand for vertices ``i+1`` and ``j+1``."""
    d = [[math.inf] * n for _ in range(n)]
    for u, v, w in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError("edge endpoint out of range")
        d[u - 1][v - 1] = min(d[u - 1][v - 1], w)
        d[v - 1][u - 1] = min(d[v - 1][u - 1], w)
    for i, row in enumerate(d):
        row[i] = 0
    for k, dk in enumerate(d):
        for di in d:
            dik = di[k]
            if dik == math.inf:
                continue
            for j, dkj in enumerate(dk):
                if dik + dkj < di[j]:
                    di[j] = dik + dkj
    return d