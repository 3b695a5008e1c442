"""Longest palindromic substring by Manacher's algorithm."""

from __future__ import annotations


def longest_palindrome_length(text: str) -> int:
    """Length of the longest palindromic substring of ``text``."""
    s = ["$", "#"]
    for ch in text:
        s += [ch, "#"]
    s.append("\0")
    n = len(s) - 1
    p = [0] * n
    right = centre = 0
    for i in range(1, n):
        p[i] = min(p[2 * centre - i], right - i) if right > i else 1
        while s[i + p[i]] == s[i - p[i]]:
            p[i] += 1
        if i + p[i] > right:
            right, centre = i + p[i], i
    return max(p) - 1 if text else 0