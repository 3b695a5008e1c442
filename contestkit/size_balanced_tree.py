"""Size balanced tree and the salary ledger built on it."""

from __future__ import annotations

from typing import Optional


class _Node:
    __slots__ = ("key", "left", "right", "size")

    def __init__(self, key: int) -> None:
        self.key = key
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        self.size = 1


def _size(node: Optional[_Node]) -> int:
    return node.size if node is not None else 0


def _resize(node: _Node) -> None:
    node.size = _size(node.left) + _size(node.right) + 1


def _rotate_right(x: _Node) -> _Node:
    y = x.left
    x.left = y.right
    y.right = x
    y.size = x.size
    _resize(x)
    return y


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    y.size = x.size
    _resize(x)
    return y


def _maintain(x: Optional[_Node], right_heavy: bool) -> Optional[_Node]:
    if x is None:
        return x
    if right_heavy:
        r = x.right
        if r is None:
            return x
        if _size(x.left) < _size(r.left):
            x.right = _rotate_right(r)
            x = _rotate_left(x)
        elif _size(x.left) < _size(r.right):
            x = _rotate_left(x)
        else:
            return x
    else:
        lft = x.left
        if lft is None:
            return x
        if _size(x.right) < _size(lft.right):
            x.left = _rotate_left(lft)
            x = _rotate_right(x)
        elif _size(x.right) < _size(lft.left):
            x = _rotate_right(x)
        else:
            return x
    x.left = _maintain(x.left, False)
    x.right = _maintain(x.right, True)
    x = _maintain(x, True)
    return _maintain(x, False)


def _insert(node: Optional[_Node], key: int) -> _Node:
    if node is None:
        return _Node(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    else:
        node.right = _insert(node.right, key)
    _resize(node)
    return _maintain(node, key >= node.key)


def _remove_below(node: Optional[_Node], key: int) -> tuple[Optional[_Node], int]:
    removed = 0
    while node is not None and node.key < key:
        removed += _size(node.left) + 1
        node = node.right
    if node is not None:
        node.left, more = _remove_below(node.left, key)
        removed += more
        _resize(node)
    return node, removed


class SizeBalancedTree:
    """Ordered multiset of keys balanced by subtree sizes."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def __len__(self) -> int:
        return _size(self._root)

    def insert(self, key: int) -> None:
        self._root = _insert(self._root, key)

    def remove_below(self, key: int) -> int:
        """Drop every key smaller than ``key``; return how many were dropped."""
        self._root, removed = _remove_below(self._root, key)
        return removed

    def kth_largest(self, k: int) -> int:
        """The ``k``-th largest key, counting from 1."""
        if not 1 <= k <= len(self):
            raise IndexError("k out of range")
        node = self._root
        while True:
            right = _size(node.right) + 1
            if k == right:
                return node.key
            if k < right:
                node = node.right
            else:
                k -= right
                node = node.left


class SalaryLedger:
    """Employees whose salaries move together; those below ``minimum`` leave."""

    def __init__(self, minimum: int) -> None:
        self.minimum = minimum
        self._tree = SizeBalancedTree()
        self._delta = 0
        self._departed = 0

    def hire(self, salary: int) -> bool:
        """Hire at ``salary`` unless it is below the minimum; report whether hired."""
        if salary < self.minimum:
            return False
        self._tree.insert(salary - self._delta)
        return True

    def raise_all(self, amount: int) -> None:
        self._delta += amount

    def cut_all(self, amount: int) -> None:
        """Lower every salary; employees falling below the minimum leave."""
        self._delta -= amount
        self._departed += self._tree.remove_below(self.minimum - self._delta)

    def kth_highest(self, k: int) -> Optional[int]:
        """The ``k``-th highest current salary, or None if there are fewer staff."""
        if not 1 <= k <= len(self._tree):
            return None
        return self._tree.kth_largest(k) + self._delta

    def departed(self) -> int:
        """How many employees have left because of pay cuts."""
        return self._departed