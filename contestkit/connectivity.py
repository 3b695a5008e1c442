"""Articulation points, bridges and edge-biconnected blocks of undirected graphs."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class _Analysis:
    cut: list[int]
    bridges: list[tuple[int, int]]
    components: list[list[int]]


def _analyse(n: int, edges: Iterable[tuple[int, int]]) -> _Analysis:
    edge_list = list(edges)
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    loops: list[int] = []
    for eid, (u, v) in enumerate(edge_list):
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError("edge endpoint out of range")
        if u == v:
            loops.append(eid)
            continue
        adj[u].append((v, eid))
        adj[v].append((u, eid))

    dfn = [0] * (n + 1)
    low = [0] * (n + 1)
    counter = 1
    cut: set[int] = set()
    bridge_list: list[tuple[int, int]] = []
    components: list[list[int]] = []
    edge_stack: list[int] = []

    for root in range(1, n + 1):
        if dfn[root]:
            continue
        dfn[root] = low[root] = counter
        counter += 1
        root_children = 0
        work = [[root, -1, 0]]
        while work:
            frame = work[-1]
            u, parent_edge, i = frame
            if i < len(adj[u]):
                frame[2] += 1
                v, eid = adj[u][i]
                if eid == parent_edge:
                    continue
                if not dfn[v]:
                    dfn[v] = low[v] = counter
                    counter += 1
                    edge_stack.append(eid)
                    work.append([v, eid, 0])
                elif dfn[v] < dfn[u]:
                    edge_stack.append(eid)
                    low[u] = min(low[u], dfn[v])
                continue
            work.pop()
            if not work:
                continue
            p = work[-1][0]
            low[p] = min(low[p], low[u])
            if p == root:
                root_children += 1
            if low[u] >= dfn[p]:
                if p != root:
                    cut.add(p)
                block = []
                while True:
                    eid = edge_stack.pop()
                    block.append(eid + 1)
                    if eid == parent_edge:
                        break
                components.append(sorted(block))
            if low[u] > dfn[p]:
                bridge_list.append((min(p, u), max(p, u)))
        if root_children >= 2:
            cut.add(root)

    components.extend([eid + 1] for eid in loops)
    return _Analysis(sorted(cut), sorted(bridge_list), components)


def articulation_points(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Vertices of ``1..n`` whose removal disconnects their component, ascending."""
    return _analyse(n, edges).cut


def bridges(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Edges whose removal disconnects their component, as sorted ``(small, large)`` pairs."""
    return _analyse(n, edges).bridges


def biconnected_components(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Biconnected blocks as sorted lists of 1-based edge numbers, in discovery order."""
    return _analyse(n, edges).components


def component_representatives(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """For each edge, the smallest edge number in its biconnected block."""
    edge_list = list(edges)
    representative = [0] * len(edge_list)
    for block in _analyse(n, edge_list).components:
        smallest = block[0]
        for number in block:
            representative[number - 1] = smallest
    return representative