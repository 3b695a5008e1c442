"""Aho-Corasick automaton counting which patterns occur in a text."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Optional


class _Node:
    __slots__ = ("children", "fail", "count", "index")

    def __init__(self, index: int) -> None:
        self.children: dict[str, _Node] = {}
        self.fail: Optional[_Node] = None
        self.count = 0
        self.index = index


class AhoCorasick:
    """Multi-pattern matcher; duplicated patterns count once per copy."""

    def __init__(self, patterns: Iterable[str]) -> None:
        self._nodes = [_Node(0)]
        root = self._nodes[0]
        for pattern in patterns:
            node = root
            for ch in pattern:
                nxt = node.children.get(ch)
                if nxt is None:
                    nxt = _Node(len(self._nodes))
                    self._nodes.append(nxt)
                    node.children[ch] = nxt
                node = nxt
            node.count += 1
        queue = deque([root])
        while queue:
            node = queue.popleft()
            for ch, child in node.children.items():
                f = node.fail
                while f is not None and ch not in f.children:
                    f = f.fail
                child.fail = f.children[ch] if f is not None else root
                queue.append(child)

    def count_matches(self, text: str) -> int:
        """Number of patterns occurring at least once in ``text``."""
        root = self._nodes[0]
        seen: set[int] = set()
        total = 0
        node = root
        for ch in text:
            while ch not in node.children and node is not root:
                node = node.fail
            node = node.children.get(ch, root)
            walker = node
            while walker is not root and walker.index not in seen:
                seen.add(walker.index)
                total += walker.count
                walker = walker.fail
        return total