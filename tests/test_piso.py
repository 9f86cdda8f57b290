import random
from functools import lru_cache

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pellgamal.ciphertext import CiphertextD
from pellgamal.constants import primes_q_d_g_by_size, primes_q_p_by_size
from pellgamal.keys import KeyPair, PublicKey
from pellgamal.params import Param, mod_more
from pellgamal.piso import (
    EncryptionError,
    fast_piso_gen,
    padding,
    piso_dec,
    piso_enc,
    piso_gen,
)
from pellgamal.utils import jacobi, smallest_non_square


def _runs_number(rng: random.Random, bits: int) -> int:
    """Number of exactly ``bits`` bits made of long runs of ones and zeros."""
    value = 0
    remaining = bits
    bit = 1
    while remaining > 0:
        run = min(remaining, rng.randint(1, max(1, bits // 4)))
        value <<= run
        if bit:
            value |= (1 << run) - 1
        remaining -= run
        bit ^= 1
    return value


def _max_bits(size: int) -> int:
    return 2 * (size - 1) - padding(size) - 1


@lru_cache(maxsize=None)
def _keys_512() -> KeyPair:
    return fast_piso_gen(512, random.Random(512))


@pytest.mark.parametrize(
    "size, expected",
    [(8, 1), (128, 16), (256, 32), (511, 63), (512, 32), (1024, 64), (7680, 480)],
)
def test_padding(size, expected):
    assert padding(size) == expected


@pytest.mark.parametrize(
    "size, iterations",
    [(128, 3), (256, 1), (512, 4), (1024, 3), (1536, 2)],
)
def test_gen_enc_dec_round_trip(size, iterations):
    rng = random.Random(size)
    for _ in range(iterations):
        ks = piso_gen(size, rng)
        msg = _runs_number(rng, _max_bits(size))
        ct = piso_enc(msg, ks.pk, rng)
        assert piso_dec(ct, ks.pk, ks.sk) == msg


@pytest.mark.parametrize("size", [512, 1024, 1536, 3840, 7680])
def test_fast_gen_round_trip_known_sizes(size):
    rng = random.Random(size + 1)
    ks = fast_piso_gen(size, rng)
    msg = _runs_number(rng, _max_bits(size))
    ct = piso_enc(msg, ks.pk, rng)
    assert piso_dec(ct, ks.pk, ks.sk) == msg


def test_fast_gen_random_size_round_trip():
    rng = random.Random(99)
    ks = fast_piso_gen(128, rng)
    assert ks.pk.q.bit_length() == 128
    msg = 123456
    assert piso_dec(piso_enc(msg, ks.pk, rng), ks.pk, ks.sk) == msg


def test_piso_gen_uses_table_and_smallest_non_square():
    ks = piso_gen(512, random.Random(1))
    q, _ = primes_q_p_by_size(512)
    assert ks.pk.q == q
    assert ks.pk.d == smallest_non_square(q)
    assert 2 <= ks.sk < q
    assert ks.pk.h == mod_more(ks.pk.g, ks.sk, ks.pk.d, q)


def test_fast_piso_gen_uses_table_d_and_g():
    ks = fast_piso_gen(1024, random.Random(2))
    assert (ks.pk.q, ks.pk.d, ks.pk.g) == primes_q_d_g_by_size(1024)
    assert ks.pk.h == mod_more(ks.pk.g, ks.sk, ks.pk.d, ks.pk.q)


def test_random_size_modulus_is_q_equals_two_p_minus_one():
    ks = piso_gen(64, random.Random(7))
    assert ks.pk.q.bit_length() == 64
    assert jacobi(ks.pk.d, ks.pk.q) == -1


@pytest.mark.parametrize("msg", [0, 1, 123456, 24681214])
def test_small_messages(msg):
    ks = _keys_512()
    rng = random.Random(msg)
    assert piso_dec(piso_enc(msg, ks.pk, rng), ks.pk, ks.sk) == msg


def test_longest_allowed_message():
    ks = _keys_512()
    limit = 2 * 511 - padding(512)
    msg = (1 << limit) - 1
    assert piso_dec(piso_enc(msg, ks.pk, random.Random(3)), ks.pk, ks.sk) == msg


def test_message_one_bit_too_long():
    ks = _keys_512()
    limit = 2 * 511 - padding(512)
    with pytest.raises(EncryptionError, match="too long"):
        piso_enc(1 << limit, ks.pk, random.Random(4))


def test_message_with_zero_low_half():
    ks = _keys_512()
    msg = 0b11 << 600
    assert piso_dec(piso_enc(msg, ks.pk, random.Random(5)), ks.pk, ks.sk) == msg


def test_ciphertext_parameter_is_non_square():
    ks = _keys_512()
    ct = piso_enc(987654321 << 520, ks.pk, random.Random(6))
    assert jacobi(ct.d, ks.pk.q) == -1


def test_ciphertext_string_round_trip_decrypts():
    ks = _keys_512()
    msg = 31415926535
    ct = piso_enc(msg, ks.pk, random.Random(8))
    restored = CiphertextD.from_strings(*ct.to_strings())
    assert piso_dec(restored, ks.pk, ks.sk) == msg


def test_public_key_string_round_trip_encrypts():
    ks = _keys_512()
    pk = PublicKey.from_strings(*ks.pk.to_strings())
    msg = 2718281828
    assert piso_dec(piso_enc(msg, pk, random.Random(9)), ks.pk, ks.sk) == msg


def test_infinite_h_is_rejected():
    ks = _keys_512()
    pk = PublicKey(ks.pk.q, ks.pk.d, ks.pk.g, Param.infinity())
    with pytest.raises(EncryptionError, match="h is infinite"):
        piso_enc(42, pk, random.Random(10))


def test_no_padding_room_means_no_parameter():
    pk = PublicKey(7, 3, 2, Param(2))
    with pytest.raises(EncryptionError, match="non-square"):
        piso_enc(0, pk, random.Random(11))


def test_tiny_modulus_message_too_long():
    pk = PublicKey(7, 3, 2, Param(2))
    with pytest.raises(EncryptionError, match="too long"):
        piso_enc(16, pk, random.Random(12))


def test_negative_message_rejected():
    ks = _keys_512()
    with pytest.raises(ValueError):
        piso_enc(-1, ks.pk, random.Random(13))


@settings(max_examples=20, deadline=None)
@given(
    msg=st.integers(min_value=0, max_value=(1 << (2 * 511 - 32)) - 1),
    seed=st.integers(min_value=0, max_value=2**32),
)
def test_round_trip_property(msg, seed):
    ks = _keys_512()
    ct = piso_enc(msg, ks.pk, random.Random(seed))
    assert piso_dec(ct, ks.pk, ks.sk) == msg