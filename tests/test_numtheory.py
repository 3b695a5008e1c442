import math
import random

import pytest
from hypothesis import given, strategies as st

from contestkit.numtheory import (
    euler_phi,
    ext_gcd,
    frog_meeting_time,
    gcd,
    is_prime,
    mod_inverse,
    phi_table,
    pow_mod,
    primes_up_to,
    primitive_root,
    round_position,
    solve_linear_congruence,
    two_squares,
    visible_lattice_points,
)


@given(st.integers(0, 10**12), st.integers(0, 10**12))
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)


@given(st.integers(-10**9, 10**9), st.integers(-10**9, 10**9))
def test_ext_gcd_identity(a, b):
    g, x, y = ext_gcd(a, b)
    assert a * x + b * y == g
    assert abs(g) == math.gcd(a, b)


@given(st.integers(1, 10**6), st.integers(2, 10**6))
def test_mod_inverse(a, m):
    if math.gcd(a, m) == 1:
        inv = mod_inverse(a, m)
        assert 0 <= inv < m
        assert a * inv % m == 1
    else:
        with pytest.raises(ValueError):
            mod_inverse(a, m)


@given(st.integers(-1000, 1000), st.integers(-1000, 1000), st.integers(1, 200))
def test_linear_congruence_is_minimal(a, b, m):
    result = solve_linear_congruence(a, b, m)
    solutions = [x for x in range(m) if (a * x - b) % m == 0]
    if solutions:
        assert result == solutions[0]
    else:
        assert result is None


def test_frog_sample():
    assert frog_meeting_time(1, 2, 3, 4, 5) == 4


def test_frog_never_meets_with_equal_speed():
    assert frog_meeting_time(1, 2, 2, 2, 10) is None


@given(
    st.integers(0, 50), st.integers(0, 50), st.integers(0, 20),
    st.integers(0, 20), st.integers(1, 60),
)
def test_frog_meets_at_first_common_point(x, y, m, n, length):
    result = frog_meeting_time(x, y, m, n, length)
    meetings = [t for t in range(length) if (x + m * t - y - n * t) % length == 0]
    assert result == (meetings[0] if meetings else None)


@given(st.integers(0, 10**9), st.integers(0, 10**6), st.integers(2, 10**9))
def test_pow_mod_matches_builtin(base, exponent, modulus):
    assert pow_mod(base, exponent, modulus) == pow(base, exponent, modulus)


def test_pow_mod_zero_exponent_keeps_one():
    assert pow_mod(5, 0, 1) == 1


def test_pow_mod_rejects_negative_exponent():
    with pytest.raises(ValueError):
        pow_mod(2, -1, 7)


def test_round_position_sample():
    assert round_position(10, 3, 4, 5) == 5


@given(st.integers(1, 100), st.integers(0, 100), st.integers(0, 6))
def test_round_position_in_range(n, m, k):
    x = m % n
    assert round_position(n, m, k, x) == (x + m * 10**k) % n


def test_sieve_agrees_with_trial_division():
    limit = 2000
    assert primes_up_to(limit) == [i for i in range(limit + 1) if is_prime(i)]


def test_primes_up_to_small_limit_is_empty():
    assert primes_up_to(1) == []


def test_phi_table_matches_single_phi():
    table = phi_table(500)
    assert table[1:] == [euler_phi(i) for i in range(1, 501)]


@given(st.integers(1, 3000))
def test_euler_phi_counts_coprimes(n):
    assert euler_phi(n) == sum(1 for j in range(1, n + 1) if math.gcd(n, j) == 1)


@pytest.mark.parametrize("n", [1, 2, 4, 5, 17, 40])
def test_visible_lattice_points_brute(n):
    expected = sum(
        1
        for x in range(n + 1)
        for y in range(n + 1)
        if (x, y) != (0, 0) and math.gcd(x, y) == 1
    )
    assert visible_lattice_points(n) == expected


def test_primitive_root_generates_group():
    for p in primes_up_to(200):
        g = primitive_root(p)
        assert {pow(g, e, p) for e in range(1, p)} == set(range(1, p))
        for h in range(1, g):
            assert len({pow(h, e, p) for e in range(1, p)}) < p - 1


def test_primitive_root_rejects_composite():
    with pytest.raises(ValueError):
        primitive_root(8)


def test_two_squares_decomposes():
    rng = random.Random(7)
    for p in primes_up_to(3000):
        if p % 4 == 1:
            x, y = two_squares(p, rng)
            assert x * x + y * y == p
            assert 0 < x <= y


@pytest.mark.parametrize("p", [3, 7, 21, 45])
def test_two_squares_rejects(p):
    with pytest.raises(ValueError):
        two_squares(p)