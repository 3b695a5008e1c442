"""Sparse table for static range-minimum queries."""

from __future__ import annotations

from collections.abc import Sequence


class SparseTable:
    """Range minima over 1-based positions in constant time per query."""

    def __init__(self, values: Sequence[int]) -> None:
        if not values:
            raise ValueError("values must not be empty")
        n = len(values)
        self._levels = [list(values)]
        width = 1
        while 2 * width <= n:
            prev = self._levels[-1]
            self._levels.append([min(prev[i], prev[i + width]) for i in range(n - 2 * width + 1)])
            width *= 2

    def query(self, left: int, right: int) -> int:
        """Minimum of positions between ``left`` and ``right``, in either order."""
        if left > right:
            left, right = right, left
        if not 1 <= left <= right <= len(self._levels[0]):
            raise IndexError("range out of bounds")
        k = (right - left + 1).bit_length() - 1
        row = self._levels[k]
        return min(row[left - 1], row[right - (1 << k)])