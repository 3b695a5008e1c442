"""K-th shortest walk between two vertices by A* over exact distances to the target."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable
from typing import Optional


def kth_shortest_path(n: int, edges: Iterable[tuple[int, int, int]], source: int,
                      target: int, k: int) -> Optional[int]:
    """Length of the ``k``-th shortest walk from ``source`` to ``target``, or None.

    Edges are directed ``(u, v, weight)`` on vertices ``1..n`` with non-negative
    weights. When ``source == target`` the empty walk is not counted.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    if not (1 <= source <= n and 1 <= target <= n):
        raise ValueError("vertex out of range")
    forward: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    backward: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, w in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError("edge endpoint out of range")
        if w < 0:
            raise ValueError("negative edge weight")
        forward[u].append((v, w))
        backward[v].append((u, w))

    dist = [math.inf] * (n + 1)
    dist[target] = 0
    heap = [(0, target)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, w in backward[u]:
            if d + w < dist[v]:
                dist[v] = d + w
                heapq.heappush(heap, (dist[v], v))
    if dist[source] == math.inf:
        return None
    if source == target:
        k += 1

    pops = [0] * (n + 1)
    queue = [(dist[source], 0, source)]
    while queue:
        _, walked, v = heapq.heappop(queue)
        pops[v] += 1
        if v == target and pops[v] == k:
            return walked
        if pops[v] > k:
            continue
        for w, c in forward[v]:
            if dist[w] < math.inf:
                heapq.heappush(queue, (walked + c + dist[w], walked + c, w))
    return None