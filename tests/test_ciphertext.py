import pytest
from hypothesis import given
from hypothesis import strategies as st

from pellgamal.ciphertext import Ciphertext, CiphertextD
from pellgamal.params import Param

params = st.one_of(st.just(Param.infinity()), st.builds(Param, st.integers(min_value=0)))
naturals = st.integers(min_value=0, max_value=2**2048)


@given(params, params)
def test_ciphertext_round_trip(c1, c2):
    ct = Ciphertext(c1, c2)
    assert Ciphertext.from_strings(*ct.to_strings()) == ct


@given(params, params, naturals)
def test_ciphertext_d_round_trip(c1, c2, d):
    ct = CiphertextD(c1, c2, d)
    assert CiphertextD.from_strings(*ct.to_strings()) == ct


def test_ciphertext_strings():
    ct = Ciphertext(Param(0xDEAD), Param.infinity())
    assert ct.to_strings() == ("dead", "inf")


def test_ciphertext_str():
    ct = Ciphertext(Param(0x1A), Param(0x2B))
    assert str(ct) == "ciphertext:\nc1: 1a\nc2: 2b"


def test_ciphertext_d_str():
    ct = CiphertextD(Param.infinity(), Param(0x2B), 0xC)
    assert str(ct) == "ciphertext:\nc1: inf\nc2: 2b\nd: c"


def test_from_strings_parses_infinity():
    ct = Ciphertext.from_strings("inf", "ff")
    assert ct.c1.inf
    assert ct.c2 == Param(0xFF)


def test_ciphertext_rejects_bad_text():
    with pytest.raises(ValueError):
        Ciphertext.from_strings("xyz", "1")


def test_ciphertext_d_rejects_bad_d():
    with pytest.raises(ValueError):
        CiphertextD.from_strings("1", "2", "inf")