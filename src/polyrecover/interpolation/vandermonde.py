"""Gaussian elimination on generalized Vandermonde systems."""
from __future__ import annotations

from typing import List, Sequence

from ..errors import SingularSystem
from ..models import Point
from ..rational import ONE, ZERO, Rational
from .base import Solver

Matrix = List[List[Rational]]


def vandermonde_row(x: int, degree: int) -> List[Rational]:
    """Return ``[x^degree, ..., x^1, 1]`` as rationals."""

    return [Rational(x**power) for power in range(degree, 0, -1)] + [ONE]


def solve_linear_system(matrix: Sequence[Sequence[Rational]], rhs: Sequence[Rational]) -> List[Rational]:
    """Solve ``matrix @ x = rhs`` exactly.

    Pivoting picks the first row at or below the current one with a nonzero
    entry in the pivot column. The pivot row is scaled to a leading one before
    eliminating below it, so back-substitution needs no further division.
    """

    size = len(matrix)
    if len(rhs) != size or any(len(row) != size for row in matrix):
        raise ValueError("Linear system must be square with a matching right-hand side")
    augmented: Matrix = [list(row) + [rhs[i]] for i, row in enumerate(matrix)]

    for col in range(size):
        pivot = next((r for r in range(col, size) if not augmented[r][col].is_zero()), None)
        if pivot is None:
            raise SingularSystem(col)
        if pivot != col:
            augmented[col], augmented[pivot] = augmented[pivot], augmented[col]

        pivot_value = augmented[col][col]
        augmented[col] = [augmented[col][c] if c < col else augmented[col][c] / pivot_value for c in range(size + 1)]

        for r in range(col + 1, size):
            factor = augmented[r][col]
            if factor.is_zero():
                continue
            augmented[r] = [
                augmented[r][c] if c < col else augmented[r][c] - factor * augmented[col][c]
                for c in range(size + 1)
            ]

    solution = [ZERO] * size
    for r in range(size - 1, -1, -1):
        acc = ZERO
        for c in range(r + 1, size):
            acc = acc + augmented[r][c] * solution[c]
        solution[r] = augmented[r][size] - acc
    return solution


def interpolate_coefficients(points: Sequence[Point]) -> List[Rational]:
    """Return ``[a_{k-1}, ..., a_1, a_0]`` for the polynomial through ``points``."""

    degree = len(points) - 1
    matrix = [vandermonde_row(point.x, degree) for point in points]
    rhs = [Rational(point.y) for point in points]
    return solve_linear_system(matrix, rhs)


class GaussianSolver(Solver):
    name = "gauss"

    def value_at_zero(self, points: Sequence[Point]) -> Rational:
        return interpolate_coefficients(points)[-1]

    def coefficients(self, points: Sequence[Point]) -> List[Rational]:
        return interpolate_coefficients(points)


__all__ = ["Matrix", "vandermonde_row", "solve_linear_system", "interpolate_coefficients", "GaussianSolver"]
