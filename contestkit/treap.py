"""Randomised treap multiset and an island network answering k-th smallest queries."""

from __future__ import annotations

import random
from collections.abc import Iterator, Sequence
from typing import Any, Optional


class _Node:
    __slots__ = ("value", "priority", "count", "size", "left", "right")

    def __init__(self, value: Any, priority: float) -> None:
        self.value = value
        self.priority = priority
        self.count = 1
        self.size = 1
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None

    def update(self) -> None:
        self.size = self.count + _size(self.left) + _size(self.right)


def _size(node: Optional[_Node]) -> int:
    return node.size if node is not None else 0


def _lift_left(node: _Node) -> _Node:
    child = node.left
    node.left = child.right
    child.right = node
    node.update()
    child.update()
    return child


def _lift_right(node: _Node) -> _Node:
    child = node.right
    node.right = child.left
    child.left = node
    node.update()
    child.update()
    return child


class Treap:
    """Ordered multiset kept balanced by random heap priorities."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)
        self._root: Optional[_Node] = None

    def __len__(self) -> int:
        return _size(self._root)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            for _ in range(node.count):
                yield node.value
            node = node.right

    def _insert(self, node: Optional[_Node], value: Any) -> _Node:
        if node is None:
            return _Node(value, self._rng.random())
        if value == node.value:
            node.count += 1
        elif value < node.value:
            node.left = self._insert(node.left, value)
            if node.left.priority < node.priority:
                node = _lift_left(node)
        else:
            node.right = self._insert(node.right, value)
            if node.right.priority < node.priority:
                node = _lift_right(node)
        node.update()
        return node

    def insert(self, value: Any) -> None:
        self._root = self._insert(self._root, value)

    def _remove(self, node: Optional[_Node], value: Any) -> Optional[_Node]:
        if node is None:
            raise KeyError(value)
        if value < node.value:
            node.left = self._remove(node.left, value)
        elif node.value < value:
            node.right = self._remove(node.right, value)
        elif node.count > 1:
            node.count -= 1
        elif node.left is not None and node.right is not None:
            if node.left.priority < node.right.priority:
                node = _lift_left(node)
                node.right = self._remove(node.right, value)
            else:
                node = _lift_right(node)
                node.left = self._remove(node.left, value)
        else:
            return node.left if node.left is not None else node.right
        node.update()
        return node

    def remove(self, value: Any) -> None:
        """Remove one copy of ``value``; KeyError if it is absent."""
        self._root = self._remove(self._root, value)

    def rank(self, value: Any) -> int:
        """Items smaller than ``value``, plus one if ``value`` is present."""
        result = 0
        node = self._root
        while node is not None:
            if value == node.value:
                return result + _size(node.left) + 1
            if value < node.value:
                node = node.left
            else:
                result += _size(node.left) + node.count
                node = node.right
        return result

    def kth(self, k: int) -> Any:
        """The ``k``-th smallest item, counting from 1."""
        if not 1 <= k <= len(self):
            raise IndexError("k out of range")
        node = self._root
        while True:
            left = _size(node.left)
            if k <= left:
                node = node.left
            elif k > left + node.count:
                k -= left + node.count
                node = node.right
            else:
                return node.value

    def predecessor(self, value: Any) -> Any:
        """Largest item strictly smaller than ``value``."""
        best = None
        node = self._root
        while node is not None:
            if node.value < value:
                best = node
                node = node.right
            else:
                node = node.left
        if best is None:
            raise ValueError(f"no item smaller than {value!r}")
        return best.value

    def successor(self, value: Any) -> Any:
        """Smallest item strictly larger than ``value``."""
        best = None
        node = self._root
        while node is not None:
            if value < node.value:
                best = node
                node = node.left
            else:
                node = node.right
        if best is None:
            raise ValueError(f"no item larger than {value!r}")
        return best.value


class IslandNetwork:
    """Islands ``1..n`` joined by bridges; query the k-th least important island."""

    def __init__(self, importance: Sequence[int]) -> None:
        n = len(importance)
        self._parent = list(range(n + 1))
        self._trees: list[Optional[Treap]] = [None]
        for island, value in enumerate(importance, start=1):
            tree = Treap(seed=island)
            tree.insert((value, island))
            self._trees.append(tree)

    def _check(self, island: int) -> None:
        if not 1 <= island < len(self._parent):
            raise IndexError("island out of range")

    def _find(self, x: int) -> int:
        while self._parent[x] != x:
            self._parent[x] = self._parent[self._parent[x]]
            x = self._parent[x]
        return x

    def connect(self, u: int, v: int) -> None:
        self._check(u)
        self._check(v)
        ru, rv = self._find(u), self._find(v)
        if ru == rv:
            return
        if len(self._trees[ru]) < len(self._trees[rv]):
            ru, rv = rv, ru
        large, small = self._trees[ru], self._trees[rv]
        for item in small:
            large.insert(item)
        self._parent[rv] = ru
        self._trees[rv] = None

    def kth_smallest(self, island: int, k: int) -> Optional[int]:
        """Island of ``k``-th smallest importance in ``island``'s group, or None."""
        self._check(island)
        tree = self._trees[self._find(island)]
        if not 1 <= k <= len(tree):
            return None
        return tree.kth(k)[1]