"""Vote bookkeeping for outlier-tolerant reconstruction."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from .combinatorics import Subset


@dataclass(slots=True)
class Candidate:
    value: int
    votes: int
    witness: Subset


class VoteTally:
    """Insertion-ordered map from candidate secret to its supporting votes.

    The first subset recorded for a value is kept as its witness. Ties in
    ``winner`` go to the value inserted first.
    """

    def __init__(self) -> None:
        self._candidates: Dict[int, Candidate] = {}

    def record(self, value: int, subset: Subset) -> Candidate:
        candidate = self._candidates.get(value)
        if candidate is None:
            candidate = Candidate(value=value, votes=0, witness=tuple(subset))
            self._candidates[value] = candidate
        candidate.votes += 1
        return candidate

    def merge(self, other: "VoteTally") -> "VoteTally":
        """Fold ``other`` into this tally; ``other`` must cover later subsets."""

        for value, incoming in other._candidates.items():
            existing = self._candidates.get(value)
            if existing is None:
                self._candidates[value] = Candidate(incoming.value, incoming.votes, incoming.witness)
            else:
                existing.votes += incoming.votes
        return self

    def winner(self) -> Optional[Candidate]:
        best: Optional[Candidate] = None
        for candidate in self._candidates.values():
            if best is None or candidate.votes > best.votes:
                best = candidate
        return best

    def get(self, value: int) -> Optional[Candidate]:
        return self._candidates.get(value)

    def summary(self) -> List[Tuple[int, int]]:
        return [(c.value, c.votes) for c in self._candidates.values()]

    def counts(self) -> Dict[int, int]:
        return {c.value: c.votes for c in self._candidates.values()}

    @property
    def total_votes(self) -> int:
        return sum(c.votes for c in self._candidates.values())

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self._candidates.values())

    def __len__(self) -> int:
        return len(self._candidates)

    def __contains__(self, value: object) -> bool:
        return value in self._candidates

    def __repr__(self) -> str:
        return f"VoteTally({self.summary()!r})"


__all__ = ["Candidate", "VoteTally"]
