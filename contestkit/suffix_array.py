"""Suffix array by prefix doubling and the LCP array by Kasai's algorithm."""

from __future__ import annotations

from collections.abc import Sequence


def suffix_array(text: str) -> list[int]:
    """0-based start positions of the suffixes of ``text`` in sorted order."""
    n = len(text)
    if n == 0:
        return []
    rank = [ord(ch) for ch in text]
    order = list(range(n))
    k = 1
    while True:
        def key(i: int, k: int = k, rank: list[int] = rank) -> tuple[int, int]:
            return rank[i], rank[i + k] if i + k < n else -1

        order.sort(key=key)
        new_rank = [0] * n
        for prev, cur in zip(order, order[1:]):
            new_rank[cur] = new_rank[prev] + (key(prev) != key(cur))
        rank = new_rank
        if rank[order[-1]] == n - 1:
            return order
        k *= 2


def lcp_array(text: str, sa: Sequence[int]) -> list[int]:
    """Longest common prefix of each pair of neighbouring suffixes in ``sa``.

    Entry ``i`` belongs to ``sa[i]`` and ``sa[i + 1]``; the result has
    ``len(text) - 1`` entries.
    """
    n = len(text)
    if len(sa) != n or sorted(sa) != list(range(n)):
        raise ValueError("sa is not a suffix array of text")
    rank = [0] * n
    for pos, start in enumerate(sa):
        rank[start] = pos
    lcp = [0] * max(n - 1, 0)
    h = 0
    for i in range(n):
        r = rank[i]
        if r == 0:
            h = 0
            continue
        j = sa[r - 1]
        while i + h < n and j + h < n and text[i + h] == text[j + h]:
            h += 1
        lcp[r - 1] = h
        if h:
            h -= 1
    return lcp