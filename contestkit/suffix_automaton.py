"""Suffix automaton and its use for the least rotation of a string."""

from __future__ import annotations


class SuffixAutomaton:
    """Deterministic automaton accepting every substring of the text fed to it."""

    def __init__(self, text: str = "") -> None:
        self._length = [0]
        self._link = [-1]
        self._next: list[dict[str, int]] = [{}]
        self._last = 0
        for ch in text:
            self.extend(ch)

    def _new_state(self, length: int, link: int, transitions: dict[str, int]) -> int:
        self._length.append(length)
        self._link.append(link)
        self._next.append(transitions)
        return len(self._length) - 1

    def extend(self, char: str) -> None:
        """Append one character to the text."""
        if len(char) != 1:
            raise ValueError("extend takes exactly one character")
        cur = self._new_state(self._length[self._last] + 1, -1, {})
        p = self._last
        while p != -1 and char not in self._next[p]:
            self._next[p][char] = cur
            p = self._link[p]
        if p == -1:
            self._link[cur] = 0
        else:
            q = self._next[p][char]
            if self._length[p] + 1 == self._length[q]:
                self._link[cur] = q
            else:
                clone = self._new_state(self._length[p] + 1, self._link[q], dict(self._next[q]))
                while p != -1 and self._next[p].get(char) == q:
                    self._next[p][char] = clone
                    p = self._link[p]
                self._link[q] = clone
                self._link[cur] = clone
        self._last = cur

    def contains(self, pattern: str) -> bool:
        """Whether ``pattern`` is a substring of the text."""
        state = 0
        for ch in pattern:
            state = self._next[state].get(ch, -1)
            if state == -1:
                return False
        return True

    def _smallest_walk(self, steps: int) -> int:
        state = 0
        for _ in range(steps):
            transitions = self._next[state]
            state = transitions[min(transitions)]
        return self._length[state]


def min_rotation_start(text: str) -> int:
    """Smallest 0-based start index of the least rotation of ``text``."""
    n = len(text)
    if n == 0:
        raise ValueError("text must not be empty")
    return SuffixAutomaton(text + text)._smallest_walk(n) - n