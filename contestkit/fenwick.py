"""Fenwick (binary indexed) trees: point update, range update and a 2-D toggle grid."""

from __future__ import annotations

from collections.abc import Sequence


class FenwickTree:
    """Prefix sums over positions ``1..size`` with point additions."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._tree = [0] * (size + 1)

    def __len__(self) -> int:
        return len(self._tree) - 1

    def add(self, index: int, delta: int) -> None:
        n = len(self)
        if not 1 <= index <= n:
            raise IndexError("index out of range")
        while index <= n:
            self._tree[index] += delta
            index += index & -index

    def prefix_sum(self, index: int) -> int:
        """Sum of positions ``1..index``; ``index`` may be 0."""
        if not 0 <= index <= len(self):
            raise IndexError("index out of range")
        total = 0
        while index:
            total += self._tree[index]
            index -= index & -index
        return total


class RangeFenwick:
    """Range additions and range sums over 1-based positions."""

    def __init__(self, values: Sequence[int]) -> None:
        self._n = len(values)
        self._base = [0]
        for v in values:
            self._base.append(self._base[-1] + v)
        self._delta = FenwickTree(self._n)
        self._weighted = FenwickTree(self._n)

    def _check(self, left: int, right: int) -> None:
        if not 1 <= left <= right <= self._n:
            raise IndexError("range out of bounds")

    def add(self, left: int, right: int, delta: int) -> None:
        self._check(left, right)
        self._delta.add(left, delta)
        self._weighted.add(left, delta * left)
        if right < self._n:
            self._delta.add(right + 1, -delta)
            self._weighted.add(right + 1, -delta * (right + 1))

    def _prefix(self, i: int) -> int:
        return self._base[i] + (i + 1) * self._delta.prefix_sum(i) - self._weighted.prefix_sum(i)

    def sum(self, left: int, right: int) -> int:
        self._check(left, right)
        return self._prefix(right) - self._prefix(left - 1)


class ToggleGrid:
    """An ``size`` x ``size`` grid of bits with rectangle flips and point reads."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._n = size
        self._tree = [[0] * (size + 1) for _ in range(size + 1)]

    def _flip(self, x: int, y: int) -> None:
        n = self._n
        if x > n or y > n:
            return
        i = x
        while i <= n:
            row = self._tree[i]
            j = y
            while j <= n:
                row[j] ^= 1
                j += j & -j
            i += i & -i

    def _check(self, x: int, y: int) -> None:
        if not (1 <= x <= self._n and 1 <= y <= self._n):
            raise IndexError("cell out of range")

    def toggle(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Flip every cell in the rectangle from ``(x1, y1)`` to ``(x2, y2)``."""
        self._check(x1, y1)
        self._check(x2, y2)
        if x1 > x2 or y1 > y2:
            raise ValueError("rectangle corners out of order")
        self._flip(x1, y1)
        self._flip(x2 + 1, y2 + 1)
        self._flip(x2 + 1, y1)
        self._flip(x1, y2 + 1)

    def get(self, x: int, y: int) -> int:
        self._check(x, y)
        result = 0
        i = x
        while i:
            row = self._tree[i]
            j = y
            while j:
                result ^= row[j]
                j -= j & -j
            i -= i & -i
        return result