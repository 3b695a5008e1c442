"""Adaptive Simpson integration and the parabolic cable problem."""

from __future__ import annotations

import math
from collections.abc import Callable


def adaptive_simpson(func: Callable[[float], float], a: float, b: float, eps: float = 1e-5) -> float:
    """Integral of ``func`` over ``[a, b]`` to within about ``eps``."""

    def simpson(lo: float, hi: float) -> float:
        mid = lo + (hi - lo) / 2
        return (func(lo) + func(hi) + 4 * func(mid)) * (hi - lo) / 6.0

    def refine(lo: float, hi: float, tol: float, whole: float) -> float:
        mid = lo + (hi - lo) / 2
        left, right = simpson(lo, mid), simpson(mid, hi)
        if abs(left + right - whole) <= 15 * tol:
            return left + right + (left + right - whole) / 15.0
        return refine(lo, mid, tol / 2, left) + refine(mid, hi, tol / 2, right)

    return refine(a, b, eps, simpson(a, b))


def parabola_length(width: float, height: float) -> float:
    """Arc length of a parabola spanning ``width`` and sagging ``height``."""
    coef = 4.0 * height / (width * width)
    return 2 * adaptive_simpson(lambda x: math.sqrt(1 + 4 * coef * coef * x * x), 0, width / 2, 1e-5)


def cable_sag(spacing: int, height: float, bridge_length: int, cable_length: float) -> float:
    """Height above ground of the lowest cable point between equally spaced towers."""
    spans = (bridge_length + spacing - 1) // spacing
    span_width = bridge_length / spans
    span_cable = cable_length / spans
    lo, hi = 0.0, float(height)
    while hi - lo > 1e-5:
        mid = lo + (hi - lo) / 2
        if parabola_length(span_width, mid) < span_cable:
            lo = mid
        else:
            hi = mid
    return height - lo