"""Maximum flow, minimum-cost flow and the problems built on them."""

from __future__ import annotations

import math
from bisect import bisect_right
from collections import deque
from collections.abc import Iterable, Sequence
from typing import Optional


class FlowNetwork:
    """Directed network on vertices ``0..size-1`` whose residual state persists between calls."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("network must have at least one vertex")
        self._size = size
        self._adj: list[list[int]] = [[] for _ in range(size)]
        self._to: list[int] = []
        self._cap: list[float] = []
        self._cost: list[float] = []
        self._initial: list[float] = []

    def __len__(self) -> int:
        return self._size

    def _check(self, v: int) -> None:
        if not 0 <= v < self._size:
            raise ValueError(f"vertex {v} out of range")

    def add_edge(self, u: int, v: int, capacity: float, cost: float = 0) -> int:
        """Add an arc ``u -> v``; return its index."""
        self._check(u)
        self._check(v)
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        index = len(self._to)
        self._to += [v, u]
        self._cap += [capacity, 0]
        self._cost += [cost, -cost]
        self._initial += [capacity, 0]
        self._adj[u].append(index)
        self._adj[v].append(index + 1)
        return index

    def _reset(self) -> None:
        self._cap = list(self._initial)

    def _levels(self, source: int) -> list[int]:
        level = [-1] * self._size
        level[source] = 0
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for e in self._adj[u]:
                to = self._to[e]
                if self._cap[e] > 0 and level[to] < 0:
                    level[to] = level[u] + 1
                    queue.append(to)
        return level

    def _augment(self, v: int, sink: int, limit: float, level: list[int], ptr: list[int]) -> float:
        if v == sink:
            return limit
        arcs = self._adj[v]
        while ptr[v] < len(arcs):
            e = arcs[ptr[v]]
            to = self._to[e]
            if self._cap[e] > 0 and level[to] == level[v] + 1:
                pushed = self._augment(to, sink, min(limit, self._cap[e]), level, ptr)
                if pushed:
                    self._cap[e] -= pushed
                    self._cap[e ^ 1] += pushed
                    return pushed
            ptr[v] += 1
        return 0

    def max_flow(self, source: int, sink: int) -> float:
        """Push as much additional flow as possible from ``source`` to ``sink`` (Dinic)."""
        self._check(source)
        self._check(sink)
        if source == sink:
            raise ValueError("source and sink must differ")
        total = 0
        while True:
            level = self._levels(source)
            if level[sink] < 0:
                return total
            ptr = [0] * self._size
            while pushed := self._augment(source, sink, math.inf, level, ptr):
                total += pushed

    def min_cost_flow(self, source: int, sink: int) -> tuple[float, float]:
        """Push maximum flow along cheapest paths; return ``(flow, cost)``."""
        self._check(source)
        self._check(sink)
        if source == sink:
            raise ValueError("source and sink must differ")
        flow = cost = 0
        while True:
            dist = [math.inf] * self._size
            prev = [-1] * self._size
            dist[source] = 0
            queue = deque([source])
            queued = {source}
            while queue:
                u = queue.popleft()
                queued.discard(u)
                for e in self._adj[u]:
                    to = self._to[e]
                    if self._cap[e] > 0 and dist[u] + self._cost[e] < dist[to]:
                        dist[to] = dist[u] + self._cost[e]
                        prev[to] = e
                        if to not in queued:
                            queued.add(to)
                            queue.append(to)
            if dist[sink] == math.inf:
                return flow, cost
            path = []
            v = sink
            while v != source:
                e = prev[v]
                path.append(e)
                v = self._to[e ^ 1]
            amount = min(self._cap[e] for e in path)
            for e in path:
                self._cap[e] -= amount
                self._cap[e ^ 1] += amount
            flow += amount
            cost += amount * dist[sink]

    def _reachable(self, source: int) -> set[int]:
        return {v for v, d in enumerate(self._levels(source)) if d >= 0}


def max_flow(n: int, edges: Iterable[tuple[int, int, float]], source: int = 1,
             sink: Optional[int] = None) -> float:
    """Maximum flow over directed edges ``(u, v, capacity)`` on vertices ``1..n``."""
    net = FlowNetwork(n + 1)
    for u, v, c in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError("edge endpoint out of range")
        net.add_edge(u, v, c)
    return net.max_flow(source, n if sink is None else sink)


def bipartite_matching(left_count: int, right_count: int,
                       pairs: Iterable[tuple[int, int]]) -> tuple[int, list[Optional[int]]]:
    """Maximum matching; returns its size and the partner of each left vertex (or None)."""
    source, sink = 0, left_count + right_count + 1
    net = FlowNetwork(sink + 1)
    arcs = []
    for x, y in pairs:
        if not (1 <= x <= left_count and 1 <= y <= right_count):
            raise ValueError("pair out of range")
        arcs.append((x, y, net.add_edge(x, left_count + y, 1)))
    for x in range(1, left_count + 1):
        net.add_edge(source, x, 1)
    for y in range(1, right_count + 1):
        net.add_edge(left_count + y, sink, 1)
    size = net.max_flow(source, sink)
    matches: list[Optional[int]] = [None] * left_count
    for x, y, index in arcs:
        if net._cap[index] == 0:
            matches[x - 1] = y
    return size, matches


def konig(n: int, edges: Iterable[tuple[int, int]]) -> tuple[int, int]:
    """For a bipartite graph on ``1..n``: (minimum vertex cover, maximum independent set)."""
    edge_list = list(edges)
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edge_list:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError("edge endpoint out of range")
        adj[u].append(v)
        adj[v].append(u)
    side = [-1] * (n + 1)
    for start in range(1, n + 1):
        if side[start] >= 0:
            continue
        side[start] = 0
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in adj[u]:
                if side[v] < 0:
                    side[v] = side[u] ^ 1
                    queue.append(v)
                elif side[v] == side[u]:
                    raise ValueError("graph is not bipartite")
    source, sink = 0, n + 1
    net = FlowNetwork(n + 2)
    for u, v in edge_list:
        if side[u]:
            net.add_edge(u, v, 1)
        else:
            net.add_edge(v, u, 1)
    for v in range(1, n + 1):
        if side[v]:
            net.add_edge(source, v, 1)
        else:
            net.add_edge(v, sink, 1)
    matching = net.max_flow(source, sink)
    return matching, n - matching


def expand_network(n: int, edges: Iterable[tuple[int, int, int, int]], k: int) -> tuple[int, int]:
    """Max flow from 1 to ``n``, and the least cost to raise it by ``k``.

    Each edge is ``(u, v, capacity, cost)`` where ``cost`` is paid per unit of
    extra capacity.
    """
    if k < 0:
        raise ValueError("k must be non-negative")
    edge_list = list(edges)
    net = FlowNetwork(n + 1)
    for u, v, capacity, _ in edge_list:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError("edge endpoint out of range")
        net.add_edge(u, v, capacity)
    flow = net.max_flow(1, n)
    for u, v, _, cost in edge_list:
        net.add_edge(u, v, k, cost)
    net.add_edge(0, 1, k)
    _, cost = net.min_cost_flow(0, n)
    return flow, cost


class GomoryHuCuts:
    """Minimum cut values between every pair of vertices of an undirected graph on ``1..n``."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int, int]]) -> None:
        if n < 1:
            raise ValueError("graph must have at least one vertex")
        net = FlowNetwork(n + 1)
        for u, v, c in edges:
            if not (1 <= u <= n and 1 <= v <= n):
                raise ValueError("edge endpoint out of range")
            net.add_edge(u, v, c)
            net.add_edge(v, u, c)
        cut = [[math.inf] * (n + 1) for _ in range(n + 1)]
        pending = [list(range(1, n + 1))]
        while pending:
            group = pending.pop()
            if len(group) < 2:
                continue
            net._reset()
            value = net.max_flow(group[0], group[-1])
            side = net._reachable(group[0])
            for i in range(1, n + 1):
                for j in range(i + 1, n + 1):
                    if (i in side) != (j in side) and value < cut[i][j]:
                        cut[i][j] = value
            pending.append([v for v in group if v in side])
            pending.append([v for v in group if v not in side])
        self._values = sorted(cut[i][j] for i in range(1, n + 1) for j in range(i + 1, n + 1))

    def count_pairs_at_most(self, limit: float) -> int:
        """Number of unordered pairs whose minimum cut is at most ``limit``."""
        return bisect_right(self._values, limit)


def _as_sequence(values: Sequence[int]) -> list[int]:
    return list(values)