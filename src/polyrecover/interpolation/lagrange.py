"""Lagrange interpolation evaluated at a single point."""
from __future__ import annotations

from typing import List, Sequence

from ..models import Point
from ..rational import ONE, ZERO, Rational
from .base import Solver
from .vandermonde import interpolate_coefficients


def basis_at(points: Sequence[Point], i: int, x: int = 0) -> Rational:
    """Evaluate the ``i``-th Lagrange basis polynomial at ``x``.

    A repeated x-coordinate makes a denominator factor zero and raises
    ``DivisionByZero``.
    """

    xi = points[i].x
    numerator = ONE
    denominator = ONE
    for j, other in enumerate(points):
        if j == i:
            continue
        numerator = numerator * (x - other.x)
        denominator = denominator * (xi - other.x)
    return numerator / denominator


def lagrange_at(points: Sequence[Point], x: int = 0) -> Rational:
    total = ZERO
    for i, point in enumerate(points):
        total = total + basis_at(points, i, x) * point.y
    return total


class LagrangeSolver(Solver):
    name = "lagrange"

    def value_at_zero(self, points: Sequence[Point]) -> Rational:
        return lagrange_at(points, 0)

    def coefficients(self, points: Sequence[Point]) -> List[Rational]:
        # Basis expansion is only evaluated at a point; the full vector comes from elimination.
        return interpolate_coefficients(points)


__all__ = ["basis_at", "lagrange_at", "LagrangeSolver"]
