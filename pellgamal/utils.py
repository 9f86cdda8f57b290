"""Number-theory helpers: primality, random primes, non-squares, square roots."""

from __future__ import annotations

import random

from .params import mod_more


def _sieve(limit: int) -> list[int]:
    flags = bytearray([1]) * limit
    flags[0:2] = b"\x00\x00"
    for i in range(2, int(limit**0.5) + 1):
        if flags[i]:
            flags[i * i :: i] = bytearray(len(flags[i * i :: i]))
    return [i for i, flag in enumerate(flags) if flag]


_SMALL_PRIMES = _sieve(1000)


def jacobi(a: int, n: int) -> int:
    """Jacobi symbol ``(a / n)`` for odd positive ``n``."""
    if n <= 0 or n % 2 == 0:
        raise ValueError("jacobi symbol needs an odd positive modulus")
    a %= n
    result = 1
    while a:
        while a % 2 == 0:
            a //= 2
            if n % 8 in (3, 5):
                result = -result
        a, n = n, a
        if a % 4 == 3 and n % 4 == 3:
            result = -result
        a %= n
    return result if n == 1 else 0


def is_probable_prime(n: int, rounds: int = 25) -> bool:
    """Miller-Rabin test with trial division by small primes first."""
    if n < 2:
        return False
    for sp in _SMALL_PRIMES:
        if n == sp:
            return True
        if n % sp == 0:
            return False
    if n < _SMALL_PRIMES[-1] ** 2:
        return True

    odd, shift = n - 1, 0
    while odd % 2 == 0:
        odd //= 2
        shift += 1

    for base in _SMALL_PRIMES[: max(1, min(rounds, len(_SMALL_PRIMES)))]:
        x = pow(base, odd, n)
        if x in (1, n - 1):
            continue
        for _ in range(shift - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def next_prime(n: int) -> int:
    """Smallest probable prime strictly greater than ``n``."""
    if n < 2:
        return 2
    candidate = n + 1
    if candidate % 2 == 0:
        candidate += 1
    while not is_probable_prime(candidate):
        candidate += 2
    return candidate


def prev_prime(n: int) -> int:
    """Largest probable prime strictly less than ``n``."""
    if n <= 2:
        raise ValueError("there is no prime below 2")
    if n == 3:
        return 2
    candidate = n - 1
    if candidate % 2 == 0:
        candidate -= 1
    while not is_probable_prime(candidate):
        candidate -= 2
    return candidate


def rand_range(rng: random.Random, low: int, high: int) -> int:
    """Uniform random integer in ``[low, high)``."""
    if high <= low:
        raise ValueError("empty range")
    return low + rng.randrange(high - low)


def rand_bit_size(rng: random.Random, bits: int) -> int:
    """Random integer in ``[2**(bits-1), 2**bits)``."""
    if bits < 1:
        raise ValueError("bit size must be positive")
    return rng.getrandbits(bits) | (1 << (bits - 1))


def rand_prime(rng: random.Random, bits: int) -> int:
    """Random probable prime with exactly ``bits`` bits."""
    prime = next_prime(rand_bit_size(rng, bits))
    if prime.bit_length() > bits:
        prime = prev_prime(prime)
    return prime


def rand_prime_q_p(rng: random.Random, bits: int) -> tuple[int, int]:
    """Random probable primes ``(q, p)`` with ``q = 2*p - 1`` and ``q`` of ``bits`` bits."""
    while True:
        p = rand_prime(rng, bits - 1)
        q = 2 * p - 1
        if is_probable_prime(q, 15):
            return q, p


def rand_non_square(rng: random.Random, q: int) -> int:
    """Random quadratic non-residue modulo ``q``."""
    while True:
        candidate = rng.randrange(q)
        if jacobi(candidate, q) == -1:
            return candidate


def smallest_non_square(q: int) -> int:
    """Smallest quadratic non-residue modulo ``q``, starting from 2."""
    candidate = 2
    while jacobi(candidate, q) != -1:
        candidate += 1
    return candidate


def is_primitive_root(g: int, d: int, q: int, p: int) -> bool:
    """True if ``g`` generates the hyperbola group of order ``q + 1 = 2*p``."""
    return not mod_more(g, 2, d, q).inf and not mod_more(g, p, d, q).inf


def rand_primitive_root(rng: random.Random, d: int, q: int, p: int) -> int:
    """Random generator of the hyperbola group of order ``q + 1``."""
    while True:
        candidate = rand_range(rng, 2, q)
        if is_primitive_root(candidate, d, q, p):
            return candidate


def smallest_primitive_root(d: int, q: int, p: int) -> int:
    """Smallest generator of the hyperbola group, starting from 2."""
    candidate = 2
    while not is_primitive_root(candidate, d, q, p):
        candidate += 1
    return candidate


def sqrt_mod(a: int, p: int) -> int:
    """A square root of ``a`` modulo the prime ``p`` (Tonelli-Shanks).

    Raises ``ValueError`` when ``a`` is not a quadratic residue.
    """
    a %= p
    if a == 0:
        return 0
    if p == 2:
        return a
    if jacobi(a, p) != 1:
        raise ValueError(f"{a} is not a square modulo {p}")
    if p % 4 == 3:
        return pow(a, (p + 1) // 4, p)

    odd, s = p - 1, 0
    while odd % 2 == 0:
        odd //= 2
        s += 1

    z = smallest_non_square(p)
    c = pow(z, odd, p)
    t = pow(a, odd, p)
    r = pow(a, (odd + 1) // 2, p)

    while True:
        tmp = t
        i = 0
        while i < s and tmp != 1:
            tmp = tmp * tmp % p
            i += 1
        if i == 0:
            return r
        b = pow(c, 1 << (s - i - 1), p)
        s = i
        c = b * b % p
        t = t * c % p
        r = r * b % p