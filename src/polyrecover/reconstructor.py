"""Secret reconstruction orchestration: direct, picked and voting modes."""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Sequence

import structlog

from .combinatorics import Subset, chunked, combinations, count_combinations
from .errors import DuplicateKey, NoConsistentSubset, SubsetFailure, UnknownKey, WrongSubsetSize
from .interpolation import LagrangeSolver, Solver
from .models import Point, ReconstructionMode, ReconstructionResult
from .tally import VoteTally

logger = structlog.get_logger(__name__)

_DEFAULT_CHUNK_SIZE = 64


class Reconstructor:
    """Recover the constant term of the polynomial hidden behind a set of shares.

    Direct and picked modes interpolate a single ``k``-subset and let any
    arithmetic failure propagate. Voting mode interpolates every ``k``-subset,
    discards the ones that fail or yield a fractional secret, and returns the
    value with the most supporting subsets.
    """

    def __init__(
        self,
        solver: Solver | None = None,
        *,
        workers: int = 1,
        chunk_size: int = _DEFAULT_CHUNK_SIZE,
    ) -> None:
        if workers < 1:
            raise ValueError("workers must be at least 1")
        self.solver = solver or LagrangeSolver()
        self.workers = workers
        self.chunk_size = chunk_size

    def reconstruct(
        self,
        points: Sequence[Point],
        k: int,
        *,
        pick: Sequence[int] | None = None,
        exhaustive: bool = False,
    ) -> ReconstructionResult:
        if pick is not None:
            return self.pick(points, k, pick)
        if len(points) < k:
            raise WrongSubsetSize(k, len(points))
        if exhaustive or len(points) > k:
            return self.vote(points, k)
        return self.direct(points, k)

    def direct(self, points: Sequence[Point], k: int) -> ReconstructionResult:
        if len(points) != k:
            raise WrongSubsetSize(k, len(points))
        selected = tuple(points)
        secret = self.solver.constant_term(selected)
        logger.info("reconstruct.direct", k=k, solver=self.solver.name)
        return ReconstructionResult(
            secret=secret,
            mode=ReconstructionMode.DIRECT,
            witness=tuple(range(k)),
            witness_points=selected,
            coefficients=self.solver.coefficients(selected),
        )

    def pick(self, points: Sequence[Point], k: int, keys: Sequence[int]) -> ReconstructionResult:
        """Interpolate exactly the points whose x-coordinates are ``keys``."""

        if len(keys) != k:
            raise WrongSubsetSize(k, len(keys))
        index_by_x = {point.x: index for index, point in enumerate(points)}
        indices: List[int] = []
        for key in keys:
            if key not in index_by_x:
                raise UnknownKey(key)
            if index_by_x[key] in indices:
                raise DuplicateKey(key)
            indices.append(index_by_x[key])
        selected = tuple(points[i] for i in indices)
        secret = self.solver.constant_term(selected)
        logger.info("reconstruct.pick", k=k, keys=list(keys), solver=self.solver.name)
        return ReconstructionResult(
            secret=secret,
            mode=ReconstructionMode.PICK,
            witness=tuple(indices),
            witness_points=selected,
            coefficients=self.solver.coefficients(selected),
        )

    def vote(
        self,
        points: Sequence[Point],
        k: int,
        subsets: Iterable[Subset] | None = None,
    ) -> ReconstructionResult:
        points = tuple(points)
        n = len(points)
        if subsets is None:
            if n < k:
                raise WrongSubsetSize(k, n)
            subsets = combinations(n, k)
            tried = count_combinations(n, k)
            logger.info(
                "reconstruct.vote.start",
                n=n,
                k=k,
                subsets=tried,
                solver=self.solver.name,
                workers=self.workers,
            )
        else:
            subsets = [tuple(subset) for subset in subsets]
            tried = len(subsets)

        tally = self.tally(points, subsets)
        best = tally.winner()
        if best is None:
            logger.info("reconstruct.vote.empty", n=n, k=k)
            raise NoConsistentSubset(n, k, tried)

        witness_points = tuple(points[i] for i in best.witness)
        logger.info(
            "reconstruct.vote.winner",
            secret=str(best.value),
            votes=best.votes,
            candidates=len(tally),
            witness=[p.x for p in witness_points],
        )
        return ReconstructionResult(
            secret=best.value,
            mode=ReconstructionMode.VOTE,
            witness=best.witness,
            witness_points=witness_points,
            coefficients=self.solver.coefficients(witness_points),
            tally=tally,
        )

    def tally(self, points: Sequence[Point], subsets: Iterable[Subset]) -> VoteTally:
        """Count one vote per subset whose interpolation yields an integral secret."""

        if self.workers == 1:
            return self._tally_chunk(points, subsets)

        tally = VoteTally()
        batches = chunked(subsets, self.chunk_size)
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            # map preserves submission order, so merged witnesses stay first-seen
            for partial in executor.map(lambda batch: self._tally_chunk(points, batch), batches):
                tally.merge(partial)
        return tally

    def _tally_chunk(self, points: Sequence[Point], subsets: Iterable[Subset]) -> VoteTally:
        tally = VoteTally()
        for subset in subsets:
            value = self._attempt(points, subset)
            if value is not None:
                tally.record(value, subset)
        return tally

    def _attempt(self, points: Sequence[Point], subset: Subset) -> Optional[int]:
        try:
            return self.solver.constant_term([points[i] for i in subset])
        except SubsetFailure as exc:
            logger.debug("reconstruct.vote.discard", subset=list(subset), reason=type(exc).__name__)
            return None


def recover_secret(
    points: Sequence[Point],
    k: int,
    *,
    solver: Solver | None = None,
    pick: Sequence[int] | None = None,
    exhaustive: bool = False,
) -> int:
    return Reconstructor(solver).reconstruct(points, k, pick=pick, exhaustive=exhaustive).secret


__all__ = ["Reconstructor", "recover_secret"]
