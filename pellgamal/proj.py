"""ElGamal over the parametrized Pell hyperbola (projective variant)."""

from __future__ import annotations

import random

from .ciphertext import Ciphertext
from .constants import primes_q_p_by_size
from .keys import KeyPair, PublicKey
from .params import mod_more, negate, op
from .piso import EncryptionError
from .utils import rand_non_square, rand_prime_q_p, rand_primitive_root, rand_range


def proj_gen(n: int, rng: random.Random) -> KeyPair:
    """Generate a key pair whose modulus ``q = 2*p - 1`` has ``n`` bits.

    ``d`` is a random non-square modulo ``q``.
    """
    known = primes_q_p_by_size(n)
    q, p = known if known is not None else rand_prime_q_p(rng, n)
    d = rand_non_square(rng, q)
    g = rand_primitive_root(rng, d, q, p)
    sk = rand_range(rng, 2, q)
    h = mod_more(g, sk, d, q)
    return KeyPair(PublicKey(q, d, g, h), sk)


def proj_enc(msg: int, pk: PublicKey, rng: random.Random) -> Ciphertext:
    """Encrypt ``msg``, an element of ``[0, q)``, under ``pk``.

    Raises :class:`EncryptionError` when ``msg`` is not below ``q``.
    """
    if msg < 0:
        raise ValueError("message must be non-negative")
    if msg >= pk.q:
        raise EncryptionError("message is too long")
    r = rand_range(rng, 2, pk.q)
    c1 = mod_more(pk.g, r, pk.d, pk.q)
    c2 = mod_more(pk.h, r, pk.d, pk.q)
    c2 = op(c2, msg, pk.d, pk.q)
    return Ciphertext(c1, c2)


def proj_dec(ct: Ciphertext, pk: PublicKey, sk: int) -> int:
    """Recover the message from ``ct`` with the secret exponent ``sk``."""
    shared = negate(mod_more(ct.c1, sk, pk.d, pk.q), pk.q)
    result = op(shared, ct.c2, pk.d, pk.q)
    if result.inf:
        raise ValueError("ciphertext decrypts to the point at infinity")
    return result.value