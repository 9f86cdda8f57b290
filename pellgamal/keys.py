"""Public and secret keys for the Pell-hyperbola ElGamal schemes."""

from __future__ import annotations

from dataclasses import dataclass

from .params import Param


def _hex(value: int) -> str:
    return format(value, "x")


@dataclass(frozen=True)
class PublicKey:
    """Group modulus ``q``, hyperbola parameter ``d``, generator ``g`` and ``h = g^sk``."""

    q: int
    d: int
    g: int
    h: Param

    def to_strings(self) -> tuple[str, str, str, str]:
        """Hexadecimal forms of ``q``, ``d``, ``g`` and ``h`` (``"inf"`` for infinity)."""
        return _hex(self.q), _hex(self.d), _hex(self.g), self.h.to_str(16)

    @classmethod
    def from_strings(cls, q: str, d: str, g: str, h: str) -> "PublicKey":
        """Build a key from the hexadecimal strings made by :meth:`to_strings`."""
        return cls(int(q, 16), int(d, 16), int(g, 16), Param.from_str(h, 16))

    def __str__(self) -> str:
        q, d, g, h = self.to_strings()
        return f"Public Key:\nq: {q}\nd: {d}\ng: {g}\nh: {h}"


@dataclass(frozen=True)
class KeyPair:
    """A public key together with its secret exponent."""

    pk: PublicKey
    sk: int

    def secret_hex(self) -> str:
        """The secret exponent in hexadecimal."""
        return _hex(self.sk)

    def __str__(self) -> str:
        return f"{self.pk}\nSecret key: {self.secret_hex()}"