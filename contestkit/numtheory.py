"""Elementary number theory: gcd, modular arithmetic, primes and roots."""

from __future__ import annotations

import math
import random
from typing import Optional


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    while b:
        a, b = b, a % b
    return a


def ext_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a * x + b * y == g == gcd(a, b)``."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def mod_inverse(a: int, modulus: int) -> int:
    """Smallest non-negative ``x`` with ``a * x == 1 (mod modulus)``."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    g, x, _ = ext_gcd(a % modulus, modulus)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {modulus}")
    return x % modulus


def solve_linear_congruence(a: int, b: int, modulus: int) -> Optional[int]:
    """Smallest non-negative ``x`` with ``a * x == b (mod modulus)``, or None."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    g, x, _ = ext_gcd(a % modulus, modulus)
    if b % g:
        return None
    step = modulus // g
    return (x * (b // g)) % step


def frog_meeting_time(x: int, y: int, m: int, n: int, length: int) -> Optional[int]:
    """Jumps until two frogs on a circle of ``length`` meet, or None if never.

    The frogs start at ``x`` and ``y`` and jump ``m`` and ``n`` per step.
    """
    if length <= 0:
        raise ValueError("length must be positive")
    return solve_linear_congruence(n - m, x - y, length)


def pow_mod(base: int, exponent: int, modulus: int) -> int:
    """``base ** exponent % modulus`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    result = 1
    square = base % modulus
    while exponent:
        if exponent & 1:
            result = result * square % modulus
        square = square * square % modulus
        exponent >>= 1
    return result


def round_position(n: int, m: int, k: int, x: int) -> int:
    """Seat of friend ``x`` after ``10 ** k`` rounds of ``m`` shifts among ``n`` seats."""
    return (x + m * pow_mod(10, k, n) % n) % n


def is_prime(n: int) -> bool:
    """Primality by trial division up to the square root."""
    if n < 2:
        return False
    return all(n % i for i in range(2, math.isqrt(n) + 1))


def primes_up_to(limit: int) -> list[int]:
    """All primes ``<= limit`` using a linear sieve."""
    if limit < 2:
        return []
    composite = bytearray(limit + 1)
    primes: list[int] = []
    for i in range(2, limit + 1):
        if not composite[i]:
            primes.append(i)
        for p in primes:
            if i * p > limit:
                break
            composite[i * p] = 1
            if i % p == 0:
                break
    return primes


def phi_table(limit: int) -> list[int]:
    """Euler's totient for every integer ``0..limit`` (``phi[0]`` is 0)."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    phi = [0] * (limit + 1)
    if limit >= 1:
        phi[1] = 1
    composite = bytearray(limit + 1)
    primes: list[int] = []
    for i in range(2, limit + 1):
        if not composite[i]:
            primes.append(i)
            phi[i] = i - 1
        for p in primes:
            if i * p > limit:
                break
            composite[i * p] = 1
            if i % p == 0:
                phi[i * p] = phi[i] * p
                break
            phi[i * p] = phi[i] * (p - 1)
    return phi


def euler_phi(n: int) -> int:
    """Euler's totient of a single ``n`` by trial factorisation."""
    if n < 1:
        raise ValueError("n must be positive")
    result = n
    rest = n
    i = 2
    while i * i <= rest:
        if rest % i == 0:
            result -= result // i
            while rest % i == 0:
                rest //= i
        i += 1
    if rest > 1:
        result -= result // rest
    return result


def visible_lattice_points(n: int) -> int:
    """Lattice points in ``[0, n]^2`` visible from the origin."""
    if n < 1:
        raise ValueError("n must be positive")
    return 3 + 2 * sum(phi_table(n)[2:])


def _prime_factors(n: int) -> list[int]:
    factors = []
    i = 2
    while i * i <= n:
        if n % i == 0:
            factors.append(i)
            while n % i == 0:
                n //= i
        i += 1
    if n != 1:
        factors.append(n)
    return factors


def primitive_root(p: int) -> int:
    """Smallest primitive root of the prime ``p``."""
    if not is_prime(p):
        raise ValueError(f"{p} is not prime")
    factors = _prime_factors(p - 1)
    g = 1
    while not all(pow_mod(g, (p - 1) // q, p) != 1 for q in factors):
        g += 1
    return g


def two_squares(p: int, rng: Optional[random.Random] = None) -> tuple[int, int]:
    """Write a prime ``p == 1 (mod 4)`` as ``x*x + y*y`` with ``x <= y``."""
    if p % 4 != 1 or not is_prime(p):
        raise ValueError(f"{p} is not a prime congruent to 1 modulo 4")
    source = rng if rng is not None else random
    quarter = (p - 1) // 4
    while True:
        a = pow_mod(source.randrange(1, p), quarter, p)
        if a * a % p == p - 1:
            break
    b = 1
    if (a * a + b * b) // p != 1:
        b = p
        while (a * a + b * b) // p != 1:
            if b > a:
                a, b = b, a
            a, b = b, a % b
    return (b, a) if b <= a else (a, b)