"""Binomial coefficients modulo a prime via Lucas's theorem."""

from __future__ import annotations

from .numtheory import is_prime


class _LucasBinomial:
    """Binomial coefficients modulo prime ``p`` for arguments up to ``limit``."""

    def __init__(self, limit: int, p: int) -> None:
        if not is_prime(p):
            raise ValueError(f"{p} is not prime")
        self.p = p
        size = min(limit, p - 1)
        fact = [1] * (size + 1)
        for i in range(1, size + 1):
            fact[i] = fact[i - 1] * i % p
        inv_fact = [1] * (size + 1)
        inv_fact[size] = pow(fact[size], p - 2, p)
        for i in range(size, 0, -1):
            inv_fact[i - 1] = inv_fact[i] * i % p
        self._fact = fact
        self._inv_fact = inv_fact

    def __call__(self, n: int, k: int) -> int:
        p = self.p
        result = 1
        while n or k:
            a, b = n % p, k % p
            if a < b:
                return 0
            result = result * self._fact[a] % p * self._inv_fact[b] % p
            result = result * self._inv_fact[a - b] % p
            n //= p
            k //= p
        return result


def binomial_mod(n: int, k: int, p: int) -> int:
    """``C(n, k) mod p`` for a prime ``p``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if k < 0 or k > n:
        return 0
    return _LucasBinomial(n, p)(n, k)


def heap_orderings(n: int, p: int) -> int:
    """Number of permutations of ``1..n`` forming a min-heap, modulo prime ``p``."""
    if n < 1:
        raise ValueError("n must be positive")
    choose = _LucasBinomial(n, p)
    size = [0] * (2 * n + 2)
    ways = [1] * (2 * n + 2)
    for i in range(n, 0, -1):
        left, right = 2 * i, 2 * i + 1
        size[i] = size[left] + size[right] + 1
        ways[i] = choose(size[i] - 1, size[left]) * ways[left] % p * ways[right] % p
    return ways[1]