"""Minimum spanning trees under Manhattan distance via octant sweeps."""

from __future__ import annotations

from collections.abc import Sequence


def _distance(a: tuple[int, int], b: tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def candidate_edges(points: Sequence[tuple[int, int]]) -> list[tuple[int, int, int]]:
    """Edges ``(i, j, distance)`` on 0-based point indices containing some Manhattan MST."""
    pts = [(int(x), int(y)) for x, y in points]
    n = len(pts)
    xs = [p[0] for p in pts]
    ys = [p[1] for p in pts]
    edges: list[tuple[int, int, int]] = []
    for sweep in range(4):
        if sweep in (1, 3):
            xs, ys = ys, xs
        elif sweep == 2:
            xs = [-x for x in xs]
        order = sorted(range(n), key=lambda i: (xs[i], ys[i]), reverse=True)
        keys = sorted({ys[i] - xs[i] for i in range(n)})
        m = len(keys)
        rank = {key: m - pos for pos, key in enumerate(keys)}
        tree: list[tuple[int, int] | None] = [None] * (m + 1)
        for i in order:
            r = rank[ys[i] - xs[i]]
            best = None
            j = r
            while j:
                if tree[j] is not None and (best is None or tree[j] < best):
                    best = tree[j]
                j -= j & -j
            if best is not None:
                edges.append((i, best[1], _distance(pts[i], pts[best[1]])))
            item = (xs[i] + ys[i], i)
            j = r
            while j <= m:
                if tree[j] is None or item < tree[j]:
                    tree[j] = item
                j += j & -j
    return edges


def mst_edge_for_components(points: Sequence[tuple[int, int]], k: int) -> int:
    """Weight of the MST edge whose addition leaves exactly ``k`` components.

    Equivalently the ``k``-th largest edge of the Manhattan MST; ``k`` must lie
    in ``1..len(points) - 1``.
    """
    n = len(points)
    if not 1 <= k < n:
        raise ValueError("k must be between 1 and the number of points minus one")
    parent = list(range(n))

    def find(x: int) -> int:
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    count = n
    for i, j, w in sorted(candidate_edges(points), key=lambda e: e[2]):
        ri, rj = find(i), find(j)
        if ri != rj:
            parent[ri] = rj
            count -= 1
            if count == k:
                return w
    raise AssertionError("candidate edges did not connect the points")