"""Heavy-light decomposition with path maximum and sum queries, optionally per colour."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Sequence

from contestkit.segment_tree import MaxSegmentTree, SumSegmentTree


class _Decomposition:
    """Heavy-light chains of a tree on vertices ``1..n`` rooted at 1."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]]) -> None:
        if n < 1:
            raise ValueError("tree must have at least one vertex")
        edge_list = list(edges)
        if len(edge_list) != n - 1:
            raise ValueError("a tree on n vertices has n - 1 edges")
        adj: list[list[int]] = [[] for _ in range(n + 1)]
        for u, v in edge_list:
            if not (1 <= u <= n and 1 <= v <= n):
                raise ValueError("edge endpoint out of range")
            adj[u].append(v)
            adj[v].append(u)
        parent = [0] * (n + 1)
        depth = [0] * (n + 1)
        seen = [False] * (n + 1)
        seen[1] = True
        order = [1]
        for u in order:
            for v in adj[u]:
                if not seen[v]:
                    seen[v] = True
                    parent[v] = u
                    depth[v] = depth[u] + 1
                    order.append(v)
        if len(order) != n:
            raise ValueError("edges do not connect every vertex")
        size = [1] * (n + 1)
        heavy = [0] * (n + 1)
        for u in reversed(order[1:]):
            p = parent[u]
            size[p] += size[u]
        for u in order[1:]:
            p = parent[u]
            if heavy[p] == 0 or size[u] > size[heavy[p]]:
                heavy[p] = u
        head = [0] * (n + 1)
        pos = [0] * (n + 1)
        cursor = 1
        stack = [1]
        while stack:
            top = stack.pop()
            v = top
            while v:
                head[v] = top
                pos[v] = cursor
                cursor += 1
                for w in adj[v]:
                    if w != parent[v] and w != heavy[v]:
                        stack.append(w)
                v = heavy[v]
        self._n = n
        self._parent = parent
        self._depth = depth
        self._head = head
        self._pos = pos

    def _check(self, node: int) -> None:
        if not 1 <= node <= self._n:
            raise IndexError("vertex out of range")

    def _ranges(self, u: int, v: int) -> Iterator[tuple[int, int]]:
        self._check(u)
        self._check(v)
        head, pos, depth, parent = self._head, self._pos, self._depth, self._parent
        while head[u] != head[v]:
            if depth[head[u]] < depth[head[v]]:
                u, v = v, u
            yield pos[head[u]], pos[u]
            u = parent[head[u]]
        yield min(pos[u], pos[v]), max(pos[u], pos[v])


class HeavyLightTree(_Decomposition):
    """Tree with vertex weights supporting point updates and path max/sum queries."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]], weights: Sequence[int]) -> None:
        super().__init__(n, edges)
        if len(weights) != n:
            raise ValueError("weights must have one entry per vertex")
        self._weights = list(weights)
        laid_out = [0] * n
        for v in range(1, n + 1):
            laid_out[self._pos[v] - 1] = self._weights[v - 1]
        self._sum = SumSegmentTree(laid_out)
        self._max = MaxSegmentTree(laid_out)

    def update(self, node: int, value: int) -> None:
        """Set the weight of ``node``."""
        self._check(node)
        p = self._pos[node]
        self._sum.add(p, value - self._weights[node - 1])
        self._max.set(p, value)
        self._weights[node - 1] = value

    def path_max(self, u: int, v: int) -> int:
        return max(self._max.query(lo, hi) for lo, hi in self._ranges(u, v))

    def path_sum(self, u: int, v: int) -> int:
        return sum(self._sum.query(lo, hi) for lo, hi in self._ranges(u, v))


class _SparseSegments:
    """Point-assign segment tree over ``1..n`` storing only touched nodes; others are 0."""

    def __init__(self, n: int) -> None:
        self._n = n
        self._sum: dict[int, int] = {}
        self._max: dict[int, int] = {}

    def set(self, pos: int, value: int) -> None:
        node, lo, hi = 1, 1, self._n
        path = []
        while lo < hi:
            path.append(node)
            mid = (lo + hi) // 2
            if pos <= mid:
                node, hi = 2 * node, mid
            else:
                node, lo = 2 * node + 1, mid + 1
        self._sum[node] = value
        self._max[node] = value
        for node in reversed(path):
            a, b = 2 * node, 2 * node + 1
            self._sum[node] = self._sum.get(a, 0) + self._sum.get(b, 0)
            self._max[node] = max(self._max.get(a, 0), self._max.get(b, 0))

    def _query(self, table: dict[int, int], combine, node: int, lo: int, hi: int,
               left: int, right: int) -> int:
        if left <= lo and hi <= right or node not in table:
            return table.get(node, 0)
        mid = (lo + hi) // 2
        if right <= mid:
            return self._query(table, combine, 2 * node, lo, mid, left, right)
        if left > mid:
            return self._query(table, combine, 2 * node + 1, mid + 1, hi, left, right)
        return combine(self._query(table, combine, 2 * node, lo, mid, left, right),
                       self._query(table, combine, 2 * node + 1, mid + 1, hi, left, right))

    def total(self, left: int, right: int) -> int:
        return self._query(self._sum, lambda a, b: a + b, 1, 1, self._n, left, right)

    def largest(self, left: int, right: int) -> int:
        return self._query(self._max, max, 1, 1, self._n, left, right)


class ColoredPathTree(_Decomposition):
    """Weighted, coloured tree; path queries count only vertices of the first endpoint's colour.

    Vertices of other colours count as weight 0, so a path maximum is never below 0.
    """

    def __init__(self, n: int, edges: Iterable[tuple[int, int]], weights: Sequence[int],
                 colors: Sequence[Hashable]) -> None:
        super().__init__(n, edges)
        if len(weights) != n or len(colors) != n:
            raise ValueError("weights and colors must have one entry per vertex")
        self._weights = list(weights)
        self._colors = list(colors)
        self._trees: dict[Hashable, _SparseSegments] = {}
        for v in range(1, n + 1):
            self._tree(self._colors[v - 1]).set(self._pos[v], self._weights[v - 1])

    def _tree(self, color: Hashable) -> _SparseSegments:
        tree = self._trees.get(color)
        if tree is None:
            tree = self._trees[color] = _SparseSegments(self._n)
        return tree

    def change_color(self, node: int, color: Hashable) -> None:
        self._check(node)
        p = self._pos[node]
        self._tree(self._colors[node - 1]).set(p, 0)
        self._colors[node - 1] = color
        self._tree(color).set(p, self._weights[node - 1])

    def change_weight(self, node: int, weight: int) -> None:
        self._check(node)
        self._weights[node - 1] = weight
        self._tree(self._colors[node - 1]).set(self._pos[node], weight)

    def path_sum(self, u: int, v: int) -> int:
        """Total weight on the path of vertices sharing ``u``'s colour."""
        self._check(u)
        tree = self._tree(self._colors[u - 1])
        return sum(tree.total(lo, hi) for lo, hi in self._ranges(u, v))

    def path_max(self, u: int, v: int) -> int:
        """Largest weight on the path among vertices sharing ``u``'s colour."""
        self._check(u)
        tree = self._tree(self._colors[u - 1])
        return max(tree.largest(lo, hi) for lo, hi in self._ranges(u, v))