import math

import pytest

from contestkit.numtheory import (
    combination,
    common_step,
    expo,
    extended_gcd,
    gcd,
    mod_add,
    mod_div,
    mod_inverse,
    mod_inverse_prime,
    mod_mul,
    mod_sub,
    phi,
    prime_factors,
    sieve,
)

MOD = 1000000007
MOD1 = 998244353


def _is_prime(k):
    return k >= 2 and all(k % d for d in range(2, math.isqrt(k) + 1))


@pytest.mark.parametrize("a,b", [(12, 18), (18, 12), (0, 7), (7, 0), (17, 5), (100, 75)])
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,b,m", [(2, 10, MOD), (3, 0, 13), (123456, 789, MOD1), (5, 17, 7)])
def test_expo_matches_pow(a, b, m):
    assert expo(a, b, m) == pow(a, b, m)


def test_expo_zero_exponent_is_one():
    assert expo(5, 0, 1) == 1


@pytest.mark.parametrize("a,b", [(240, 46), (17, 5), (5, 17), (30, 0)])
def test_extended_gcd_bezout(a, b):
    x, y, g = extended_gcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


@pytest.mark.parametrize("a,m", [(3, 10), (7, 26), (17, 100)])
def test_mod_inverse(a, m):
    assert (a * mod_inverse(a, m)) % m == 1


@pytest.mark.parametrize("a", [2, 3, 12345, MOD - 1])
def test_mod_inverse_prime(a):
    assert a * mod_inverse_prime(a, MOD) % MOD == 1


def test_sieve_small():
    assert sieve(10) == [2, 3, 5, 7]


def test_sieve_below_two_is_empty():
    assert sieve(1) == []


def test_sieve_agrees_with_trial_division():
    assert sieve(200) == [k for k in range(201) if _is_prime(k)]


@pytest.mark.parametrize("a,b", [(-5, 3), (MOD + 4, MOD - 1), (-MOD * 3, 7), (10, -20)])
def test_mod_arithmetic_in_range(a, b):
    for result, expected in (
        (mod_add(a, b, MOD), (a + b) % MOD),
        (mod_sub(a, b, MOD), (a - b) % MOD),
        (mod_mul(a, b, MOD), (a * b) % MOD),
    ):
        assert 0 <= result < MOD
        assert result == expected


@pytest.mark.parametrize("a,b", [(10, 3), (1, 2), (-4, 9), (MOD + 6, 5)])
def test_mod_div_inverts_mod_mul(a, b):
    q = mod_div(a, b, MOD)
    assert 0 <= q < MOD
    assert mod_mul(q, b, MOD) == a % MOD


@pytest.mark.parametrize("n", [1, 2, 9, 10, 36, 97, 100, 210])
def test_phi_counts_coprimes(n):
    assert phi(n) == sum(1 for k in range(1, n + 1) if math.gcd(k, n) == 1)


def test_combination_matches_math_comb():
    limit = 20
    fact = [1] * (limit + 1)
    for i in range(1, limit + 1):
        fact[i] = fact[i - 1] * i % MOD
    ifact = [mod_inverse_prime(f, MOD) for f in fact]
    for n in range(limit + 1):
        for r in range(n + 1):
            assert combination(n, r, MOD, fact, ifact) == math.comb(n, r) % MOD


@pytest.mark.parametrize("n", [2, 12, 97, 360, 1024, 999983 * 2, 600851475143])
def test_prime_factors_multiply_back(n):
    factors = prime_factors(n)
    assert math.prod(factors) == n
    assert factors == sorted(factors)
    assert all(_is_prime(f) for f in factors)


def test_prime_factors_of_one_is_empty():
    assert prime_factors(1) == []


def test_common_step_all_equal():
    assert common_step([5, 5, 5, 5]) == -1


@pytest.mark.parametrize("values", [[1, 5, 3, 1], [-1, 0, 1, -1], [100, -1000, -1000, -1000], [4, 4, 10, 22]])
def test_common_step_divides_all_differences(values):
    step = common_step(values)
    low = min(values)
    assert step > 0
    assert all((v - low) % step == 0 for v in values)
    # no larger step works
    assert all(any((v - low) % bigger for v in values) for bigger in range(step + 1, max(values) - low + 1))


def test_common_step_needs_two_values():
    with pytest.raises(ValueError):
        common_step([3])