"""Ciphertexts of the projective and PISO schemes."""

from __future__ import annotations

from dataclasses import dataclass

from .params import Param


@dataclass(frozen=True)
class Ciphertext:
    """A pair of hyperbola points ``(c1, c2)``."""

    c1: Param
    c2: Param

    def to_strings(self) -> tuple[str, str]:
        """Hexadecimal forms of ``c1`` and ``c2`` (``"inf"`` for infinity)."""
        return self.c1.to_str(16), self.c2.to_str(16)

    @classmethod
    def from_strings(cls, c1: str, c2: str) -> "Ciphertext":
        """Build a ciphertext from the strings made by :meth:`to_strings`."""
        return cls(Param.from_str(c1, 16), Param.from_str(c2, 16))

    def __str__(self) -> str:
        c1, c2 = self.to_strings()
        return f"ciphertext:\nc1: {c1}\nc2: {c2}"


@dataclass(frozen=True)
class CiphertextD:
    """A pair of hyperbola points together with the per-message parameter ``d``."""

    c1: Param
    c2: Param
    d: int

    def to_strings(self) -> tuple[str, str, str]:
        """Hexadecimal forms of ``c1``, ``c2`` and ``d``."""
        return self.c1.to_str(16), self.c2.to_str(16), format(self.d, "x")

    @classmethod
    def from_strings(cls, c1: str, c2: str, d: str) -> "CiphertextD":
        """Build a ciphertext from the strings made by :meth:`to_strings`."""
        return cls(Param.from_str(c1, 16), Param.from_str(c2, 16), int(d, 16))

    def __str__(self) -> str:
        c1, c2, d = self.to_strings()
        return f"ciphertext:\nc1: {c1}\nc2: {c2}\nd: {d}"