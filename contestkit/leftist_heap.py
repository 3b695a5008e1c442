"""Mergeable leftist max-heap and the monkey duel simulation built on it."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Optional


class _Node:
    __slots__ = ("value", "left", "right", "dist")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        self.dist = 1


def _dist(node: Optional[_Node]) -> int:
    return node.dist if node is not None else 0


def _merge(a: Optional[_Node], b: Optional[_Node]) -> Optional[_Node]:
    if a is None:
        return b
    if b is None:
        return a
    if a.value < b.value:
        a, b = b, a
    a.right = _merge(a.right, b)
    if _dist(a.left) < _dist(a.right):
        a.left, a.right = a.right, a.left
    a.dist = _dist(a.right) + 1
    return a


class LeftistHeap:
    """Max-heap supporting merging of two heaps in logarithmic time."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.push(item)

    def __len__(self) -> int:
        return self._size

    def push(self, value: Any) -> None:
        self._root = _merge(self._root, _Node(value))
        self._size += 1

    def peek(self) -> Any:
        if self._root is None:
            raise IndexError("peek from an empty heap")
        return self._root.value

    def pop(self) -> Any:
        """Remove and return the largest item."""
        if self._root is None:
            raise IndexError("pop from an empty heap")
        top = self._root
        self._root = _merge(top.left, top.right)
        self._size -= 1
        return top.value

    def merge(self, other: "LeftistHeap") -> None:
        """Move every item of ``other`` into this heap, leaving ``other`` empty."""
        if other is self:
            raise ValueError("cannot merge a heap with itself")
        self._root = _merge(self._root, other._root)
        self._size += other._size
        other._root = None
        other._size = 0


def monkey_duels(strengths: Sequence[int], fights: Iterable[tuple[int, int]]) -> list[int]:
    """Outcome of each fight between the groups of monkeys ``a`` and ``b`` (1-based).

    Monkeys already in one group give -1. Otherwise each group's strongest
    halves its strength, the groups join, and the strongest strength remains.
    """
    parent = list(range(len(strengths)))
    heaps = [LeftistHeap([s]) for s in strengths]

    def find(x: int) -> int:
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    results = []
    for a, b in fights:
        ra, rb = find(a - 1), find(b - 1)
        if ra == rb:
            results.append(-1)
            continue
        for root in (ra, rb):
            heap = heaps[root]
            heap.push(heap.pop() // 2)
        parent[ra] = rb
        heaps[rb].merge(heaps[ra])
        results.append(heaps[rb].peek())
    return results