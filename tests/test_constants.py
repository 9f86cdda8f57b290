import pytest

from pellgamal.constants import (
    KNOWN_SIZES,
    primes_q_d_g_by_size,
    primes_q_p_by_size,
)
from pellgamal.utils import is_primitive_root, is_probable_prime, jacobi

ALL_SIZES = [512, 1024, 1536, 3840, 7680]


def test_known_sizes_listed():
    found = [size for size in ALL_SIZES + [128, 256, 2048] if primes_q_p_by_size(size) is not None]
    assert found == ALL_SIZES
    assert list(KNOWN_SIZES) == found


@pytest.mark.parametrize("size", [0, 8, 128, 256, 2048])
def test_unknown_sizes_give_none(size):
    assert primes_q_p_by_size(size) is None
    assert primes_q_d_g_by_size(size) is None


@pytest.mark.parametrize("size", ALL_SIZES)
def test_q_is_two_p_minus_one(size):
    q, p = primes_q_p_by_size(size)
    assert q == 2 * p - 1


@pytest.mark.parametrize("size", ALL_SIZES)
def test_q_has_requested_bit_length(size):
    q, _ = primes_q_p_by_size(size)
    assert q.bit_length() == size


@pytest.mark.parametrize("size", ALL_SIZES)
def test_both_lookups_agree_on_q(size):
    q1, _ = primes_q_p_by_size(size)
    q2, _, _ = primes_q_d_g_by_size(size)
    assert q1 == q2


@pytest.mark.parametrize("size", ALL_SIZES)
def test_d_is_non_square(size):
    q, d, _ = primes_q_d_g_by_size(size)
    assert jacobi(d, q) == -1


@pytest.mark.parametrize("size,expected", [(512, 2), (1024, 2), (1536, 5), (3840, 2), (7680, 3)])
def test_d_values(size, expected):
    _, d, _ = primes_q_d_g_by_size(size)
    assert d == expected


@pytest.mark.parametrize("size", ALL_SIZES)
def test_g_in_field(size):
    q, _, g = primes_q_d_g_by_size(size)
    assert 2 <= g < q


@pytest.mark.parametrize("size", [512, 1024, 1536])
def test_q_and_p_are_prime(size):
    q, p = primes_q_p_by_size(size)
    assert is_probable_prime(q, 5)
    assert is_probable_prime(p, 5)


@pytest.mark.parametrize("size", [512, 1024, 1536])
def test_g_generates_group(size):
    q, p = primes_q_p_by_size(size)
    _, d, g = primes_q_d_g_by_size(size)
    assert is_primitive_root(g, d, q, p)


def test_7680_q_shape():
    q, p = primes_q_p_by_size(7680)
    assert q == 2**7679 + 14625
    assert p == 2**7678 + 7313