"""Shared domain models used across polyrecover."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

from .rational import Rational

if TYPE_CHECKING:
    from .tally import VoteTally


@dataclass(frozen=True, slots=True)
class Point:
    x: int
    y: int


@dataclass(slots=True)
class ShareProblem:
    """Decoded input: declared share count, threshold and points sorted by x."""

    n: int
    k: int
    points: List[Point] = field(default_factory=list)

    def keys(self) -> List[int]:
        return [point.x for point in self.points]


class ReconstructionMode(str, Enum):
    DIRECT = "direct"
    PICK = "pick"
    VOTE = "vote"


@dataclass(slots=True)
class ReconstructionResult:
    secret: int
    mode: ReconstructionMode
    witness: Tuple[int, ...]
    witness_points: Tuple[Point, ...]
    coefficients: List[Rational] = field(default_factory=list)
    tally: Optional["VoteTally"] = None

    def witness_keys(self) -> List[int]:
        return [point.x for point in self.witness_points]


__all__ = ["Point", "ShareProblem", "ReconstructionMode", "ReconstructionResult"]
