"""Array-backed binary min-heap with a decrease-key operation."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class MinHeap:
    """Binary min-heap; ``decrease_key`` addresses the 0-based internal slot."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._data = list(items)
        for i in reversed(range(len(self._data) // 2)):
            self._sink(i)

    def __len__(self) -> int:
        return len(self._data)

    def _swim(self, i: int) -> None:
        data = self._data
        item = data[i]
        while i > 0:
            parent = (i - 1) // 2
            if not item < data[parent]:
                break
            data[i] = data[parent]
            i = parent
        data[i] = item

    def _sink(self, i: int) -> None:
        data = self._data
        n = len(data)
        item = data[i]
        while True:
            child = 2 * i + 1
            if child >= n:
                break
            if child + 1 < n and data[child + 1] < data[child]:
                child += 1
            if not data[child] < item:
                break
            data[i] = data[child]
            i = child
        data[i] = item

    def push(self, value: Any) -> None:
        self._data.append(value)
        self._swim(len(self._data) - 1)

    def peek(self) -> Any:
        if not self._data:
            raise IndexError("peek from an empty heap")
        return self._data[0]

    def pop(self) -> Any:
        """Remove and return the smallest item."""
        if not self._data:
            raise IndexError("pop from an empty heap")
        top = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sink(0)
        return top

    def decrease_key(self, index: int, value: Any) -> None:
        """Lower the item in slot ``index`` to ``value``."""
        if not 0 <= index < len(self._data):
            raise IndexError("heap index out of range")
        if self._data[index] < value:
            raise ValueError("new value is larger than the current one")
        self._data[index] = value
        self._swim(index)


def min_merge_cost(lengths: Iterable[int]) -> int:
    """Least total cost of joining pieces, each join costing the combined length."""
    heap = MinHeap(lengths)
    total = 0
    while len(heap) > 1:
        joined = heap.pop() + heap.pop()
        heap.push(joined)
        total += joined
    return total