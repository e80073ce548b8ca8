"""Exception hierarchy for secret reconstruction."""
from __future__ import annotations

from typing import Any


class ReconstructionError(Exception):
    """Base exception for polyrecover"""


class DivisionByZero(ReconstructionError, ZeroDivisionError):
    """Raised when a rational would get a zero denominator"""


class NonIntegerResult(ReconstructionError, ArithmeticError):
    """Raised when an exact integer was required but the value is fractional"""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Non-integer result: {value}")
        self.value = value


class SingularSystem(ReconstructionError, ArithmeticError):
    """Raised when Gaussian elimination finds no pivot in a column"""

    def __init__(self, column: int) -> None:
        super().__init__(f"Singular system: no pivot in column {column}")
        self.column = column


class NoConsistentSubset(ReconstructionError):
    """Raised when voting finds no subset with an integral secret"""

    def __init__(self, n: int, k: int, tried: int) -> None:
        super().__init__(f"No consistent subset among {tried} subsets of size {k} from {n} points")
        self.n = n
        self.k = k
        self.tried = tried


class WrongSubsetSize(ReconstructionError, ValueError):
    """Raised when a direct-mode subset does not hold exactly k points"""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Expected exactly {expected} points, got {actual}")
        self.expected = expected
        self.actual = actual


class UnknownKey(ReconstructionError, LookupError):
    """Raised when a picked x-key matches no supplied point"""

    def __init__(self, key: int) -> None:
        super().__init__(f"No share with x = {key}")
        self.key = key

    def __str__(self) -> str:
        return self.args[0]


class DuplicateKey(ReconstructionError, ValueError):
    """Raised when a picked x-key is listed more than once"""

    def __init__(self, key: int) -> None:
        super().__init__(f"Share x = {key} picked more than once")
        self.key = key


class DecodingError(ReconstructionError, ValueError):
    """Raised when share input cannot be decoded"""


class ConfigError(ReconstructionError, ValueError):
    """Raised when a configuration file is invalid"""


# Failures local to one subset; voting discards these.
SubsetFailure = (DivisionByZero, NonIntegerResult, SingularSystem)


__all__ = [
    "ReconstructionError",
    "DivisionByZero",
    "NonIntegerResult",
    "SingularSystem",
    "NoConsistentSubset",
    "WrongSubsetSize",
    "UnknownKey",
    "DuplicateKey",
    "DecodingError",
    "ConfigError",
    "SubsetFailure",
]
