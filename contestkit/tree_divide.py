"""Counting close vertex pairs in a weighted tree by centroid decomposition."""

from __future__ import annotations

from collections.abc import Iterable


def count_close_pairs(n: int, edges: Iterable[tuple[int, int, int]], k: int) -> int:
    """Number of unordered pairs of vertices ``1..n`` at distance at most ``k``."""
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, w in edges:
        adj[u].append((v, w))
        adj[v].append((u, w))
    removed = [False] * (n + 1)

    def component(start: int) -> tuple[list[int], dict[int, int]]:
        order, parent = [start], {start: 0}
        for x in order:
            for y, _ in adj[x]:
                if y != parent[x] and not removed[y]:
                    parent[y] = x
                    order.append(y)
        return order, parent

    def centroid(start: int) -> int:
        order, parent = component(start)
        total = len(order)
        size = dict.fromkeys(order, 1)
        heaviest = dict.fromkeys(order, 0)
        for x in reversed(order):
            if parent[x]:
                size[parent[x]] += size[x]
                heaviest[parent[x]] = max(heaviest[parent[x]], size[x])
        return min(order, key=lambda x: max(heaviest[x], total - size[x]))

    def distances(start: int, base: int) -> list[int]:
        out, stack = [], [(start, 0, base)]
        while stack:
            x, par, d = stack.pop()
            out.append(d)
            stack.extend((y, x, d + w) for y, w in adj[x] if y != par and not removed[y])
        return out

    def pairs(ds: list[int]) -> int:
        ds.sort()
        count, lo, hi = 0, 0, len(ds) - 1
        while lo < hi:
            if ds[lo] + ds[hi] <= k:
                count += hi - lo
                lo += 1
            else:
                hi -= 1
        return count

    if n < 1:
        return 0
    answer = 0
    pending = [1]
    while pending:
        c = centroid(pending.pop())
        answer += pairs(distances(c, 0))
        removed[c] = True
        for y, w in adj[c]:
            if not removed[y]:
                answer -= pairs(distances(y, w))
                pending.append(y)
    return answer