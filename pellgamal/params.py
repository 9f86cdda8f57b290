"""Elements of the parametrized Pell hyperbola over a prime field.

An element is either the point at infinity (the group identity) or a
number in ``F_q``.  The group law, exponentiation and the conversion back
to affine coordinates on ``x^2 - d*y^2 = 1`` live here.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_INF_TEXT = "inf"


class FactorFoundError(ArithmeticError):
    """Raised when exponentiation uncovers a non-trivial factor of the modulus."""

    def __init__(self, factor: int) -> None:
        super().__init__(f"{factor} is a factor of the modulus")
        self.factor = factor


def _int_to_str(value: int, base: int) -> str:
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, got {base}")
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    value = abs(value)
    digits = []
    while value:
        value, rem = divmod(value, base)
        digits.append(_DIGITS[rem])
    return sign + "".join(reversed(digits))


@dataclass(frozen=True)
class Param:
    """A point of the parametrized hyperbola: a field element or infinity."""

    value: int = 0
    inf: bool = False

    @classmethod
    def infinity(cls) -> "Param":
        """The point at infinity, identity of the group."""
        return cls(0, True)

    @classmethod
    def from_str(cls, text: str, base: int = 16) -> "Param":
        """Parse ``"inf"`` or a number written in ``base``."""
        if text == _INF_TEXT:
            return cls.infinity()
        return cls(int(text, base))

    def to_str(self, base: int = 16) -> str:
        """Render as ``"inf"`` or as a lower-case number in ``base``."""
        if self.inf:
            return _INF_TEXT
        return _int_to_str(self.value, base)

    def __str__(self) -> str:
        return self.to_str()


ParamLike = Union[Param, int]


def _as_param(m: ParamLike) -> Param:
    return m if isinstance(m, Param) else Param(m)


def negate(m: ParamLike, q: int) -> Param:
    """Group inverse: ``-m mod q``; infinity is its own inverse."""
    m = _as_param(m)
    if m.inf:
        return Param.infinity()
    return Param((-m.value) % q)


def op(m1: ParamLike, m2: ParamLike, d: int, q: int) -> Param:
    """Group law ``(m1*m2 + d) / (m1 + m2)`` in ``F_q``."""
    if isinstance(m2, Param):
        if m2.inf:
            return _as_param(m1)
        m2 = m2.value
    m1 = _as_param(m1)
    if m1.inf:
        return Param(m2)
    total = (m1.value + m2) % q
    if total == 0:
        return Param.infinity()
    return Param((m1.value * m2 + d) % q * pow(total, -1, q) % q)


def mod_more(m: ParamLike, e: int, d: int, q: int) -> Param:
    """Compute ``m`` raised to ``e`` under the group law.

    Raises :class:`FactorFoundError` when the final denominator shares a
    proper factor with ``q``.
    """
    if isinstance(m, Param):
        if m.inf:
            return Param.infinity()
        m = m.value
    if e < 0:
        raise ValueError("exponent must be non-negative")

    num, den = 1, 0
    for i in range(max(e.bit_length(), 1), -1, -1):
        num, den = (num * num + d * den * den) % q, (2 * num * den) % q
        if (e >> i) & 1:
            num, den = (num * m + d * den) % q, (num + den * m) % q

    g = math.gcd(den, q)
    if g == 1:
        return Param(num * pow(den, -1, q) % q)
    if g != q:
        raise FactorFoundError(g)
    return Param.infinity()


def coord(m: ParamLike, d: int, q: int) -> tuple[int, int]:
    """Affine point ``(x, y)`` on ``x^2 - d*y^2 = 1`` for the parameter ``m``."""
    m = _as_param(m)
    if m.inf:
        return 1, 0
    m_sqr = pow(m.value, 2, q)
    inv = pow(m_sqr - d, -1, q)
    x = (m_sqr + d) * inv % q
    y = 2 * m.value * inv % q
    return x, y