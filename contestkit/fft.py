"""Iterative radix-2 fast Fourier transform and polynomial multiplication."""

from __future__ import annotations

import cmath
import math
from collections.abc import Sequence


def fft(values: Sequence[complex], invert: bool = False) -> list[complex]:
    """Discrete Fourier transform of ``values``; its length must be a power of two.

    With ``invert`` set, the inverse transform (including the division by n).
    """
    a = [complex(v) for v in values]
    n = len(a)
    if n == 0 or n & (n - 1):
        raise ValueError("length must be a positive power of two")
    bits = n.bit_length() - 1
    rev = [0] * n
    for i in range(1, n):
        rev[i] = (rev[i >> 1] >> 1) | ((i & 1) << (bits - 1))
    for i, r in enumerate(rev):
        if i < r:
            a[i], a[r] = a[r], a[i]
    sign = -1 if invert else 1
    half = 1
    while half < n:
        root = cmath.rect(1.0, sign * math.pi / half)
        for start in range(0, n, 2 * half):
            w = 1 + 0j
            for k in range(start, start + half):
                x, y = a[k], w * a[k + half]
                a[k], a[k + half] = x + y, x - y
                w *= root
        half *= 2
    if invert:
        a = [v / n for v in a]
    return a


def multiply(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Coefficients of the product of two integer polynomials."""
    if not a or not b:
        return []
    length = len(a) + len(b) - 1
    size = 1
    while size < length:
        size <<= 1
    fa = fft(list(a) + [0] * (size - len(a)))
    fb = fft(list(b) + [0] * (size - len(b)))
    product = fft([x * y for x, y in zip(fa, fb)], invert=True)
    return [math.floor(v.real + 0.5) for v in product[:length]]