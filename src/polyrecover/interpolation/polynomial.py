"""Polynomial value type over exact rationals."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..rational import ZERO, Rational, RationalLike


@dataclass(frozen=True, slots=True)
class Polynomial:
    """Coefficients stored highest degree first: ``[a_m, ..., a_1, a_0]``."""

    coefficients: Tuple[Rational, ...]

    @classmethod
    def from_coefficients(cls, coefficients: Sequence[RationalLike]) -> "Polynomial":
        if not coefficients:
            raise ValueError("Polynomial needs at least one coefficient")
        return cls(tuple(c if isinstance(c, Rational) else Rational(c) for c in coefficients))

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    @property
    def constant(self) -> Rational:
        return self.coefficients[-1]

    def evaluate(self, x: RationalLike) -> Rational:
        acc = ZERO
        for coefficient in self.coefficients:
            acc = acc * x + coefficient
        return acc

    def named_terms(self) -> List[Tuple[str, Rational]]:
        return [(f"a_{self.degree - i}", c) for i, c in enumerate(self.coefficients)]

    def __str__(self) -> str:
        return " + ".join(f"{c}*x^{self.degree - i}" for i, c in enumerate(self.coefficients))


__all__ = ["Polynomial"]
