"""Exact rational numbers over Python's arbitrary-precision integers."""
from __future__ import annotations

from math import gcd
from typing import Union

from .errors import DivisionByZero, NonIntegerResult

RationalLike = Union["Rational", int]


class Rational:
    """Immutable fraction kept in lowest terms with a positive denominator.

    Every arithmetic operation returns a new normalized instance. Only integer
    operands are accepted; there is no float path, so nothing is ever rounded.
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        if not isinstance(numerator, int) or not isinstance(denominator, int):
            raise TypeError("Rational requires integer numerator and denominator")
        if denominator == 0:
            raise DivisionByZero(f"Zero denominator for numerator {numerator}")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        # gcd(0, d) == d, so 0/d collapses to 0/1
        divisor = gcd(abs(numerator), denominator)
        self._numerator = numerator // divisor
        self._denominator = denominator // divisor

    @classmethod
    def from_int(cls, value: int) -> "Rational":
        return cls(value, 1)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_integer(self) -> bool:
        return self._denominator == 1

    def to_int(self) -> int:
        """Return the integer value, raising ``NonIntegerResult`` for fractions."""

        if self._denominator != 1:
            raise NonIntegerResult(self)
        return self._numerator

    def add(self, other: RationalLike) -> "Rational":
        o = _coerce(other)
        return Rational(
            self._numerator * o._denominator + o._numerator * self._denominator,
            self._denominator * o._denominator,
        )

    def sub(self, other: RationalLike) -> "Rational":
        o = _coerce(other)
        return Rational(
            self._numerator * o._denominator - o._numerator * self._denominator,
            self._denominator * o._denominator,
        )

    def mul(self, other: RationalLike) -> "Rational":
        o = _coerce(other)
        return Rational(self._numerator * o._numerator, self._denominator * o._denominator)

    def div(self, other: RationalLike) -> "Rational":
        o = _coerce(other)
        if o._numerator == 0:
            raise DivisionByZero(f"Division of {self} by zero")
        return Rational(self._numerator * o._denominator, self._denominator * o._numerator)

    def negate(self) -> "Rational":
        return Rational(-self._numerator, self._denominator)

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = div
    __neg__ = negate

    def __radd__(self, other: int) -> "Rational":
        return _coerce(other).add(self)

    def __rsub__(self, other: int) -> "Rational":
        return _coerce(other).sub(self)

    def __rmul__(self, other: int) -> "Rational":
        return _coerce(other).mul(self)

    def __rtruediv__(self, other: int) -> "Rational":
        return _coerce(other).div(self)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, int):
            return self._denominator == 1 and self._numerator == other
        if isinstance(other, Rational):
            return self._numerator == other._numerator and self._denominator == other._denominator
        return NotImplemented

    def __hash__(self) -> int:
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"


ZERO = Rational(0)
ONE = Rational(1)


def _coerce(value: RationalLike) -> Rational:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int):
        return Rational(value, 1)
    raise TypeError(f"Unsupported operand for Rational: {type(value).__name__}")


__all__ = ["Rational", "RationalLike", "ZERO", "ONE"]
