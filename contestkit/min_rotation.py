"""Lexicographically smallest rotation of a string."""

from __future__ import annotations


def minimal_rotation(text: str) -> int:
    """Smallest 0-based start index of the least rotation of ``text``."""
    n = len(text)
    if n == 0:
        raise ValueError("text must not be empty")
    i, j, k = 0, 1, 0
    while i < n and j < n and k < n:
        a, b = text[(i + k) % n], text[(j + k) % n]
        if a == b:
            k += 1
            continue
        if a > b:
            i += k + 1
        else:
            j += k + 1
        if i == j:
            j += 1
        k = 0
    return min(i, j)