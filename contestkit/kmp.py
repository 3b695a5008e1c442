"""Knuth-Morris-Pratt pattern counting."""

from __future__ import annotations


def failure_table(pattern: str) -> list[int]:
    """Table ``d`` of length ``len(pattern) + 1``; ``d[i]`` is the border of ``pattern[:i]``."""
    m = len(pattern)
    d = [0] * (m + 1)
    for i in range(1, m):
        j = d[i]
        while j and pattern[i] != pattern[j]:
            j = d[j]
        d[i + 1] = j + 1 if pattern[i] == pattern[j] else 0
    return d


def optimized_failure_table(pattern: str) -> list[int]:
    """Failure table that skips borders followed by the same character."""
    m = len(pattern)
    d = [0] * (m + 1)

    def at(k: int):
        return pattern[k] if k < m else None

    j = 0
    for i in range(1, m):
        while j and pattern[i] != pattern[j]:
            j = d[j]
        if pattern[i] == pattern[j]:
            d[i + 1] = d[j + 1] if at(i + 1) == at(j + 1) else j + 1
            j += 1
        else:
            d[i + 1] = 0
    return d


def count_occurrences(pattern: str, text: str, optimized: bool = False) -> int:
    """Number of (possibly overlapping) occurrences of ``pattern`` in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    d = optimized_failure_table(pattern) if optimized else failure_table(pattern)
    m = len(pattern)
    count = j = 0
    for ch in text:
        while j and ch != pattern[j]:
            j = d[j]
        if ch == pattern[j]:
            j += 1
        if j == m:
            count += 1
            j = d[m]
    return count