"""Strongly connected components and the best cash route over the condensation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _tarjan(n: int, edges: Iterable[tuple[int, int]]) -> tuple[list[list[int]], list[list[int]]]:
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError("edge endpoint out of range")
        adj[u].append(v)
    index = [0] * (n + 1)
    low = [0] * (n + 1)
    on_stack = [False] * (n + 1)
    stack: list[int] = []
    components: list[list[int]] = []
    counter = 1
    for root in range(1, n + 1):
        if index[root]:
            continue
        index[root] = low[root] = counter
        counter += 1
        stack.append(root)
        on_stack[root] = True
        work = [(root, 0)]
        while work:
            v, i = work[-1]
            if i < len(adj[v]):
                work[-1] = (v, i + 1)
                w = adj[v][i]
                if not index[w]:
                    index[w] = low[w] = counter
                    counter += 1
                    stack.append(w)
                    on_stack[w] = True
                    work.append((w, 0))
                elif on_stack[w]:
                    low[v] = min(low[v], index[w])
                continue
            work.pop()
            if work:
                parent = work[-1][0]
                low[parent] = min(low[parent], low[v])
            if low[v] == index[v]:
                component = []
                while True:
                    w = stack.pop()
                    on_stack[w] = False
                    component.append(w)
                    if w == v:
                        break
                components.append(component)
    return components, adj


def strongly_connected_components(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Components of the directed graph on ``1..n`` in reverse topological order."""
    return _tarjan(n, edges)[0]


def best_route_cash(n: int, edges: Iterable[tuple[int, int]], cash: Sequence[int],
                    start: int, bars: Iterable[int]) -> int:
    """Most cash collectable on a walk from ``start`` that ends at a bar.

    ``cash[i - 1]`` is held at vertex ``i`` and is collected once. Returns 0 when
    no bar can be reached.
    """
    if len(cash) != n:
        raise ValueError("cash must have one entry per vertex")
    if not 1 <= start <= n:
        raise ValueError("start out of range")
    components, adj = _tarjan(n, edges)
    owner = [0] * (n + 1)
    for c, members in enumerate(components):
        for v in members:
            owner[v] = c
    worth = [sum(cash[v - 1] for v in members) for members in components]
    has_bar = [False] * len(components)
    for bar in bars:
        if not 1 <= bar <= n:
            raise ValueError("bar out of range")
        has_bar[owner[bar]] = True
    best: list[int | None] = [None] * len(components)
    best[owner[start]] = worth[owner[start]]
    for c in reversed(range(len(components))):
        if best[c] is None:
            continue
        for v in components[c]:
            for w in adj[v]:
                d = owner[w]
                if d != c:
                    candidate = best[c] + worth[d]
                    if best[d] is None or candidate > best[d]:
                        best[d] = candidate
    return max((b for b, bar in zip(best, has_bar) if bar and b is not None), default=0)