"""ElGamal over the Pell hyperbola with per-message parameters (PISO).

A message is split into two coordinates ``(x, y)``.  They define a fresh
hyperbola ``x^2 - d1*y^2 = 1`` on which the message is a point.  Encryption
moves the public generator onto that hyperbola through a square root of
``d1 / d`` and then works as ordinary ElGamal in the group law.
"""

from __future__ import annotations

import random

from .ciphertext import CiphertextD
from .constants import primes_q_d_g_by_size, primes_q_p_by_size
from .keys import KeyPair, PublicKey
from .params import coord, mod_more, negate, op
from .utils import (
    jacobi,
    rand_prime_q_p,
    rand_primitive_root,
    rand_range,
    smallest_non_square,
    sqrt_mod,
)


class EncryptionError(ValueError):
    """Raised when a message cannot be encrypted under the given key."""


def padding(size: int) -> int:
    """Number of padding bits for a modulus of ``size`` bits."""
    if size < 512:
        return size // 8
    return size // 16


def _make_keys(q: int, d: int, g: int, rng: random.Random) -> KeyPair:
    sk = rand_range(rng, 2, q)
    h = mod_more(g, sk, d, q)
    return KeyPair(PublicKey(q, d, g, h), sk)


def piso_gen(n: int, rng: random.Random) -> KeyPair:
    """Generate a key pair whose modulus ``q = 2*p - 1`` has ``n`` bits.

    Precomputed primes are used for the standard sizes; other sizes are
    searched for at random.  ``d`` is the smallest non-square modulo ``q``
    and the generator is drawn at random.
    """
    known = primes_q_p_by_size(n)
    q, p = known if known is not None else rand_prime_q_p(rng, n)
    d = smallest_non_square(q)
    g = rand_primitive_root(rng, d, q, p)
    return _make_keys(q, d, g, rng)


def fast_piso_gen(n: int, rng: random.Random) -> KeyPair:
    """Like :func:`piso_gen`, but takes ``d`` and ``g`` from the table too."""
    known = primes_q_d_g_by_size(n)
    if known is not None:
        q, d, g = known
    else:
        q, p = rand_prime_q_p(rng, n)
        d = smallest_non_square(q)
        g = rand_primitive_root(rng, d, q, p)
    return _make_keys(q, d, g, rng)


def piso_enc(msg: int, pk: PublicKey, rng: random.Random) -> CiphertextD:
    """Encrypt the non-negative integer ``msg`` under ``pk``.

    Raises :class:`EncryptionError` when the message is too long, when no
    suitable hyperbola parameter is found within the padding, or when the
    public key's ``h`` is the point at infinity.
    """
    if msg < 0:
        raise ValueError("message must be non-negative")
    q = pk.q
    q_bits = q.bit_length()
    pad = padding(q_bits)
    if max(msg.bit_length(), 1) > 2 * (q_bits - 1) - pad:
        raise EncryptionError("message is too long")

    x = (msg >> (q_bits - 1)) << pad
    d1 = None
    for _ in range(pad):
        candidate = (x * x - 1) % q
        if jacobi(candidate, q) == -1:
            d1 = candidate
            break
        x += 1
    if d1 is None:
        raise EncryptionError("no non-square hyperbola parameter found")

    y = (msg & ((1 << (q_bits - 1)) - 1)) + 1
    try:
        y = pow(y, -1, q)
    except ValueError:
        raise EncryptionError(f"y ({y}) is not invertible") from None

    d1 = d1 * pow(y, 2, q) % q
    m = (x + 1) * y % q

    r = rand_range(rng, 2, q)
    s = sqrt_mod(pow(pk.d, -1, q) * d1 % q, q)

    c1 = mod_more(pk.g * s % q, r, d1, q)
    if pk.h.inf:
        raise EncryptionError("h is infinite")
    c2 = mod_more(pk.h.value * s % q, r, d1, q)
    c2 = op(c2, m, d1, q)
    return CiphertextD(c1, c2, d1)


def piso_dec(ct: CiphertextD, pk: PublicKey, sk: int) -> int:
    """Recover the message from ``ct`` with the secret exponent ``sk``."""
    q = pk.q
    n = q.bit_length()
    pad = padding(n)

    m = negate(mod_more(ct.c1, sk, ct.d, q), q)
    m = op(m, ct.c2, ct.d, q)

    x, y = coord(m, ct.d, q)
    return ((x >> pad) << (n - 1)) + y - 1