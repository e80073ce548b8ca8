"""Solver interface shared by the interpolation strategies."""
from __future__ import annotations

from typing import List, Sequence

from ..models import Point
from ..rational import Rational


class Solver:
    """Protocol-like base class for interpolation strategies.

    A solver consumes exactly ``k`` points and reconstructs the unique
    polynomial of degree at most ``k - 1`` through them.
    """

    name: str = "abstract"

    def value_at_zero(self, points: Sequence[Point]) -> Rational:  # pragma: no cover - protocol
        raise NotImplementedError

    def coefficients(self, points: Sequence[Point]) -> List[Rational]:  # pragma: no cover - protocol
        raise NotImplementedError

    def constant_term(self, points: Sequence[Point]) -> int:
        """Return the secret as an integer; fractional results raise ``NonIntegerResult``."""

        return self.value_at_zero(points).to_int()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["Solver"]
