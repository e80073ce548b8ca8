"""Lookup of interpolation strategies by name."""
from __future__ import annotations

from typing import Callable, Dict, List

from .base import Solver
from .lagrange import LagrangeSolver
from .vandermonde import GaussianSolver

_FACTORIES: Dict[str, Callable[[], Solver]] = {
    "lagrange": LagrangeSolver,
    "gauss": GaussianSolver,
}

_ALIASES = {
    "gaussian": "gauss",
    "vandermonde": "gauss",
}


def available_solvers() -> List[str]:
    return sorted(_FACTORIES)


def get_solver(name: str) -> Solver:
    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    try:
        factory = _FACTORIES[key]
    except KeyError as exc:
        raise KeyError(f"Unknown solver: {name}") from exc
    return factory()


__all__ = ["available_solvers", "get_solver"]
