"""Discrete logarithms by baby-step giant-step."""

from __future__ import annotations

import math
from typing import Optional


def _giant_steps(base: int, target: int, modulus: int, start: int) -> Optional[int]:
    """Smallest ``y >= 0`` with ``start * base**y == target (mod modulus)``.

    ``base`` and ``start`` must both be coprime to ``modulus``.
    """
    m = math.isqrt(modulus) + 1
    baby: dict[int, int] = {}
    value = target
    for j in range(1, m + 1):
        value = value * base % modulus
        baby[value] = j
    giant = pow(base, m, modulus)
    current = start
    for i in range(1, m + 1):
        current = current * giant % modulus
        j = baby.get(current)
        if j is not None:
            return i * m - j
    return None


def discrete_log(base: int, target: int, modulus: int) -> Optional[int]:
    """Smallest ``x >= 0`` with ``base**x == target (mod modulus)`` for prime modulus."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    target %= modulus
    if target == 0:
        return None
    return _giant_steps(base % modulus, target, modulus, 1)


def discrete_log_general(base: int, target: int, modulus: int) -> Optional[int]:
    """Smallest ``x >= 0`` with ``base**x == target (mod modulus)`` for any modulus."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if modulus == 1:
        return 0
    base %= modulus
    target %= modulus
    if target == 1:
        return 0
    steps = 0
    factor = 1
    while (t := math.gcd(base, modulus)) != 1:
        if target % t:
            return None
        steps += 1
        target //= t
        modulus //= t
        factor = factor * (base // t) % modulus
        if target == factor:
            return steps
    rest = _giant_steps(base, target, modulus, factor)
    return None if rest is None else steps + rest