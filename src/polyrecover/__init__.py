"""Exact-rational secret reconstruction from threshold shares."""
from .combinatorics import combinations
from .errors import (
    DecodingError,
    DuplicateKey,
    DivisionByZero,
    NoConsistentSubset,
    NonIntegerResult,
    ReconstructionError,
    SingularSystem,
    UnknownKey,
    WrongSubsetSize,
)
from .interpolation import GaussianSolver, LagrangeSolver, Polynomial, Solver, get_solver
from .models import Point, ReconstructionMode, ReconstructionResult, ShareProblem
from .rational import Rational
from .reconstructor import Reconstructor, recover_secret
from .tally import Candidate, VoteTally
from .version import __version__

__all__ = [
    "Point",
    "ShareProblem",
    "ReconstructionMode",
    "ReconstructionResult",
    "Rational",
    "Polynomial",
    "Solver",
    "LagrangeSolver",
    "GaussianSolver",
    "get_solver",
    "combinations",
    "Candidate",
    "VoteTally",
    "Reconstructor",
    "recover_secret",
    "ReconstructionError",
    "DivisionByZero",
    "NonIntegerResult",
    "SingularSystem",
    "NoConsistentSubset",
    "WrongSubsetSize",
    "UnknownKey",
    "DecodingError",
    "DuplicateKey",
    "__version__",
]
