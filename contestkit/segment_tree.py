"""Segment trees over 1-based positions: sums, lazy range sums and maxima."""

from __future__ import annotations

from collections.abc import Sequence


def _check_range(n: int, left: int, right: int) -> None:
    if not 1 <= left <= right <= n:
        raise IndexError("range out of bounds")


def _check_pos(n: int, pos: int) -> None:
    if not 1 <= pos <= n:
        raise IndexError("position out of range")


def _require_values(values: Sequence[int]) -> int:
    if not values:
        raise ValueError("values must not be empty")
    return len(values)


class SumSegmentTree:
    """Point additions and range sums."""

    def __init__(self, values: Sequence[int]) -> None:
        n = self._n = _require_values(values)
        self._tree = [0] * n + list(values)
        for i in range(n - 1, 0, -1):
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]

    def add(self, pos: int, delta: int) -> None:
        _check_pos(self._n, pos)
        i = pos - 1 + self._n
        while i:
            self._tree[i] += delta
            i //= 2

    def query(self, left: int, right: int) -> int:
        """Sum of positions ``left..right`` inclusive."""
        _check_range(self._n, left, right)
        lo, hi = left - 1 + self._n, right + self._n
        total = 0
        while lo < hi:
            if lo & 1:
                total += self._tree[lo]
                lo += 1
            if hi & 1:
                hi -= 1
                total += self._tree[hi]
            lo //= 2
            hi //= 2
        return total


class RangeAddSegmentTree:
    """Range additions and range sums with lazy propagation."""

    def __init__(self, values: Sequence[int]) -> None:
        n = self._n = _require_values(values)
        self._sum = [0] * (4 * n)
        self._lazy = [0] * (4 * n)
        self._build(1, 1, n, values)

    def _build(self, node: int, lo: int, hi: int, values: Sequence[int]) -> None:
        if lo == hi:
            self._sum[node] = values[lo - 1]
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, values)
        self._build(2 * node + 1, mid + 1, hi, values)
        self._sum[node] = self._sum[2 * node] + self._sum[2 * node + 1]

    def _push(self, node: int, lo: int, mid: int, hi: int) -> None:
        pending = self._lazy[node]
        if pending:
            for child, a, b in ((2 * node, lo, mid), (2 * node + 1, mid + 1, hi)):
                self._lazy[child] += pending
                self._sum[child] += pending * (b - a + 1)
            self._lazy[node] = 0

    def _add(self, node: int, lo: int, hi: int, left: int, right: int, delta: int) -> None:
        if right < lo or hi < left:
            return
        if left <= lo and hi <= right:
            self._sum[node] += delta * (hi - lo + 1)
            self._lazy[node] += delta
            return
        mid = (lo + hi) // 2
        self._push(node, lo, mid, hi)
        self._add(2 * node, lo, mid, left, right, delta)
        self._add(2 * node + 1, mid + 1, hi, left, right, delta)
        self._sum[node] = self._sum[2 * node] + self._sum[2 * node + 1]

    def _query(self, node: int, lo: int, hi: int, left: int, right: int) -> int:
        if right < lo or hi < left:
            return 0
        if left <= lo and hi <= right:
            return self._sum[node]
        mid = (lo + hi) // 2
        self._push(node, lo, mid, hi)
        return self._query(2 * node, lo, mid, left, right) + self._query(
            2 * node + 1, mid + 1, hi, left, right
        )

    def add(self, left: int, right: int, delta: int) -> None:
        _check_range(self._n, left, right)
        self._add(1, 1, self._n, left, right, delta)

    def query(self, left: int, right: int) -> int:
        _check_range(self._n, left, right)
        return self._query(1, 1, self._n, left, right)


class MaxSegmentTree:
    """Point assignments and range maxima."""

    def __init__(self, values: Sequence[int]) -> None:
        n = self._n = _require_values(values)
        self._tree = [0] * n + list(values)
        for i in range(n - 1, 0, -1):
            self._tree[i] = max(self._tree[2 * i], self._tree[2 * i + 1])

    def set(self, pos: int, value: int) -> None:
        _check_pos(self._n, pos)
        i = pos - 1 + self._n
        self._tree[i] = value
        i //= 2
        while i:
            self._tree[i] = max(self._tree[2 * i], self._tree[2 * i + 1])
            i //= 2

    def query(self, left: int, right: int) -> int:
        """Maximum of positions ``left..right`` inclusive."""
        _check_range(self._n, left, right)
        lo, hi = left - 1 + self._n, right + self._n
        best = None
        while lo < hi:
            if lo & 1:
                best = self._tree[lo] if best is None else max(best, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                best = self._tree[hi] if best is None else max(best, self._tree[hi])
            lo //= 2
            hi //= 2
        return best