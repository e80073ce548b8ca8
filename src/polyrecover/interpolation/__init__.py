"""Interpolation package exports."""
from .base import Solver
from .lagrange import LagrangeSolver, basis_at, lagrange_at
from .polynomial import Polynomial
from .registry import available_solvers, get_solver
from .vandermonde import GaussianSolver, interpolate_coefficients, solve_linear_system, vandermonde_row

__all__ = [
    "Solver",
    "LagrangeSolver",
    "GaussianSolver",
    "Polynomial",
    "basis_at",
    "lagrange_at",
    "interpolate_coefficients",
    "solve_linear_system",
    "vandermonde_row",
    "available_solvers",
    "get_solver",
]
