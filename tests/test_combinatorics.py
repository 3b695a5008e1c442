import math
from itertools import permutations

import pytest
from hypothesis import given, strategies as st

from contestkit.combinatorics import binomial_mod, heap_orderings

PRIMES = [2, 3, 5, 7, 11, 13, 101, 1_000_003]


@given(st.integers(0, 400), st.integers(0, 400), st.sampled_from(PRIMES))
def test_binomial_matches_math(n, k, p):
    if k > n:
        assert binomial_mod(n, k, p) == 0
    else:
        assert binomial_mod(n, k, p) == math.comb(n, k) % p


def test_binomial_negative_k_is_zero():
    assert binomial_mod(5, -1, 7) == math.comb(5, 0) * 0


def test_binomial_rejects_composite_modulus():
    with pytest.raises(ValueError):
        binomial_mod(10, 3, 12)


def _brute_heaps(n):
    count = 0
    for perm in permutations(range(1, n + 1)):
        a = (0,) + perm
        if all(a[i // 2] < a[i] for i in range(2, n + 1)):
            count += 1
    return count


@pytest.mark.parametrize("n", range(1, 8))
@pytest.mark.parametrize("p", [2, 3, 5, 7, 11, 13, 1_000_003])
def test_heap_orderings_brute(n, p):
    assert heap_orderings(n, p) == _brute_heaps(n) % p


def test_heap_orderings_sample():
    assert heap_orderings(20, 23) == 16


def test_heap_orderings_rejects_empty():
    with pytest.raises(ValueError):
        heap_orderings(0, 7)