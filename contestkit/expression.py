"""Infix arithmetic evaluation with results reduced modulo 10000."""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Optional

_PRIORITY = {"+": 3, "-": 3, "*": 2, "/": 2, "^": 1, "(": 10}
_NUMBER = re.compile(r"\d+(?:\.\d*)?")


def _apply(op: str, x: float, y: float) -> float:
    if op == "+":
        return x + y
    if op == "-":
        return x - y
    if op == "*":
        return x * y
    if op == "/":
        return x / y
    if op == "^":
        return x ** y
    raise ValueError("unbalanced parentheses")


def evaluate(expression: str, variables: Optional[Mapping[str, float]] = None) -> float:
    """Evaluate ``expression``; every intermediate result is taken fmod 10000.

    Lower-case letters name variables (missing ones are 0). Operators of equal
    priority group to the left, ``^`` included. Unknown characters are ignored.
    """
    env = variables or {}
    nums: list[float] = []
    ops: list[str] = []

    def reduce_top() -> None:
        if len(nums) < 2:
            raise ValueError("missing operand")
        y, x = nums.pop(), nums.pop()
        nums.append(math.fmod(_apply(ops.pop(), x, y), 10000.0))

    last = ""
    i = 0
    while i < len(expression):
        ch = expression[i]
        if "a" <= ch <= "z":
            nums.append(float(env.get(ch, 0.0)))
        elif ch.isdigit():
            match = _NUMBER.match(expression, i)
            nums.append(float(match.group()))
            i = match.end() - 1
        elif ch == "(":
            ops.append(ch)
        elif ch == ")":
            while ops and ops[-1] != "(":
                reduce_top()
            if not ops:
                raise ValueError("unbalanced parentheses")
            ops.pop()
        elif ch == "-" and last in ("", "("):
            nums.append(0.0)
            ops.append("-")
        elif ch in _PRIORITY:
            while ops and _PRIORITY[ch] >= _PRIORITY[ops[-1]]:
                reduce_top()
            ops.append(ch)
        else:
            i += 1
            continue
        last = ch
        i += 1
    while ops:
        reduce_top()
    if not nums:
        raise ValueError("empty expression")
    return nums[-1]


def evaluate_truncated(expression: str, variables: Optional[Mapping[str, float]] = None) -> int:
    """Integer part of :func:`evaluate`, reduced modulo 10000 toward zero."""
    return int(math.fmod(int(evaluate(expression, variables)), 10000))