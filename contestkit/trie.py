"""Trie counting how many inserted words start with a prefix."""

from __future__ import annotations

from collections.abc import Iterable


class _Node:
    __slots__ = ("count", "children")

    def __init__(self) -> None:
        self.count = 0
        self.children: dict[str, _Node] = {}


class PrefixTrie:
    """Words stored so that prefix counts are answered in prefix-length time."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
            node.count += 1

    def count_prefix(self, prefix: str) -> int:
        """Number of inserted words beginning with a non-empty ``prefix``; 0 for ''."""
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return 0
        return node.count