"""Number-theory helpers: gcd, modular arithmetic, sieving and factorisation."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative integers."""
    if b > a:
        a, b = b, a
    while b:
        a, b = b, a % b
    return a


def expo(a: int, b: int, mod: int) -> int:
    """Compute ``a ** b % mod`` by repeated squaring; a non-positive ``b`` yields 1."""
    result = 1
    while b > 0:
        if b & 1:
            result = result * a % mod
        a = a * a % mod
        b >>= 1
    return result


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(x, y, g)`` with ``a*x + b*y == g == gcd(a, b)``."""
    if b == 0:
        return 1, 0, a
    x, y, g = extended_gcd(b, a % b)
    return y, x - y * (a // b), g


def mod_inverse(a: int, b: int) -> int:
    """Inverse of ``a`` modulo ``b`` for any modulus coprime to ``a``.

    The result is the Bezout coefficient and may be negative.
    """
    x, _, _ = extended_gcd(a, b)
    return x


def mod_inverse_prime(a: int, b: int) -> int:
    """Inverse of ``a`` modulo the prime ``b`` via Fermat's little theorem."""
    return expo(a, b - 2, b)


def sieve(n: int) -> list[int]:
    """All primes up to and including ``n``."""
    if n < 2:
        return []
    composite = bytearray(n + 1)
    primes = []
    for i in range(2, n + 1):
        if not composite[i]:
            primes.append(i)
            composite[i * i :: i] = b"\x01" * len(range(i * i, n + 1, i))
    return primes


def mod_add(a: int, b: int, m: int) -> int:
    """``(a + b) mod m`` in the range ``[0, m)``."""
    return (a % m + b % m) % m


def mod_mul(a: int, b: int, m: int) -> int:
    """``(a * b) mod m`` in the range ``[0, m)``."""
    return (a % m) * (b % m) % m


def mod_sub(a: int, b: int, m: int) -> int:
    """``(a - b) mod m`` in the range ``[0, m)``."""
    return (a % m - b % m) % m


def mod_div(a: int, b: int, m: int) -> int:
    """``a / b`` modulo the prime ``m``."""
    return mod_mul(a, mod_inverse_prime(b % m, m), m)


def phi(n: int) -> int:
    """Euler's totient of ``n``, in O(sqrt(n))."""
    number = n
    if n % 2 == 0:
        number //= 2
        while n % 2 == 0:
            n //= 2
    i = 3
    while i * i <= n:
        if n % i == 0:
            while n % i == 0:
                n //= i
            number = number // i * (i - 1)
        i += 2
    if n > 1:
        number = number // n * (n - 1)
    return number


def combination(
    n: int, r: int, m: int, fact: Sequence[int], ifact: Sequence[int]
) -> int:
    """``C(n, r) mod m`` from precomputed factorials and inverse factorials."""
    return fact[n] * ifact[n - r] % m * ifact[r] % m


def prime_factors(n: int) -> list[int]:
    """Prime factors of ``n`` in ascending order, with multiplicity."""
    factors = []
    i = 2
    while i * i <= n:
        while n % i == 0:
            factors.append(i)
            n //= i
        i += 1
    if n != 1:
        factors.append(n)
    return factors


def common_step(values: Sequence[int]) -> int:
    """Largest step that can bring every value down to a common one.

    Returns -1 when all values are already equal, since any step works.
    """
    if len(values) < 2:
        raise ValueError("at least two values are required")
    ordered = sorted(values)
    if ordered[0] == ordered[-1]:
        return -1
    result = ordered[1] - ordered[0]
    for low, high in pairwise(ordered):
        if high != low:
            result = gcd(result, high - low)
    return result