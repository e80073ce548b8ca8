from typing import List, Sequence

import pytest

from polyrecover.errors import (
    DivisionByZero,
    DuplicateKey,
    NoConsistentSubset,
    NonIntegerResult,
    UnknownKey,
    WrongSubsetSize,
)
from polyrecover.interpolation import GaussianSolver, LagrangeSolver
from polyrecover.models import Point, ReconstructionMode
from polyrecover.rational import Rational
from polyrecover.reconstructor import Reconstructor, recover_secret


class CountingSolver(LagrangeSolver):
    def __init__(self) -> None:
        self.calls = 0

    def value_at_zero(self, points: Sequence[Point]) -> Rational:
        self.calls += 1
        return super().value_at_zero(points)


def test_direct_mode_returns_true_constant(genuine_points: List[Point]) -> None:
    result = Reconstructor().reconstruct(genuine_points[:3], 3)
    assert result.mode is ReconstructionMode.DIRECT
    assert result.secret == 5
    assert result.coefficients == [3, 2, 5]
    assert result.tally is None


def test_direct_mode_surfaces_failures() -> None:
    with pytest.raises(DivisionByZero):
        Reconstructor().direct([Point(1, 5), Point(1, 9), Point(2, 13)], 3)
    with pytest.raises(NonIntegerResult):
        Reconstructor().direct([Point(1, 10), Point(2, 21), Point(6, 999)], 3)


def test_direct_mode_requires_exactly_k(genuine_points: List[Point]) -> None:
    with pytest.raises(WrongSubsetSize) as excinfo:
        Reconstructor().direct(genuine_points, 3)
    assert (excinfo.value.expected, excinfo.value.actual) == (3, 5)


def test_too_few_points(genuine_points: List[Point]) -> None:
    with pytest.raises(WrongSubsetSize):
        Reconstructor().reconstruct(genuine_points[:2], 3)


def test_pick_selects_by_key(outlier_points: List[Point]) -> None:
    result = Reconstructor().reconstruct(outlier_points, 3, pick=[5, 3, 1])
    assert result.mode is ReconstructionMode.PICK
    assert result.secret == 5
    assert result.witness == (4, 2, 0)
    assert result.witness_keys() == [5, 3, 1]


def test_pick_wrong_size_fails_before_arithmetic(outlier_points: List[Point]) -> None:
    solver = CountingSolver()
    with pytest.raises(WrongSubsetSize) as excinfo:
        Reconstructor(solver).pick(outlier_points, 3, [1, 2])
    assert (excinfo.value.expected, excinfo.value.actual) == (3, 2)
    assert solver.calls == 0


def test_pick_unknown_key(outlier_points: List[Point]) -> None:
    solver = CountingSolver()
    with pytest.raises(UnknownKey) as excinfo:
        Reconstructor(solver).pick(outlier_points, 3, [1, 2, 42])
    assert excinfo.value.key == 42
    assert "42" in str(excinfo.value)
    assert solver.calls == 0


def test_pick_repeated_key_fails_before_arithmetic(outlier_points: List[Point]) -> None:
    solver = CountingSolver()
    with pytest.raises(DuplicateKey) as excinfo:
        Reconstructor(solver).pick(outlier_points, 3, [1, 1, 2])
    assert excinfo.value.key == 1
    assert solver.calls == 0


def test_pick_including_outlier_surfaces_error(outlier_points: List[Point]) -> None:
    with pytest.raises(NonIntegerResult):
        Reconstructor().pick(outlier_points, 3, [1, 2, 6])


@pytest.mark.parametrize("solver", [LagrangeSolver(), GaussianSolver()])
def test_vote_outvotes_corrupted_point(outlier_points: List[Point], solver) -> None:
    result = Reconstructor(solver).reconstruct(outlier_points, 3)
    assert result.mode is ReconstructionMode.VOTE
    assert result.secret == 5
    assert result.tally is not None
    counts = result.tally.counts()
    assert counts[5] == 10
    assert all(votes < counts[5] for value, votes in counts.items() if value != 5)
    assert result.witness == (0, 1, 2)
    assert result.coefficients == [3, 2, 5]


def test_vote_discards_duplicate_x_subsets() -> None:
    points = [Point(1, 5), Point(1, 9), Point(2, 13), Point(3, 21)]
    result = Reconstructor().vote(points, 3)
    assert result.tally is not None
    assert result.tally.summary() == [(-3, 1), (9, 1)]
    assert result.secret == -3
    assert result.witness == (0, 2, 3)


def test_vote_with_hand_fed_subsets(outlier_points: List[Point]) -> None:
    result = Reconstructor().vote(outlier_points, 3, subsets=[(0, 1, 5), (0, 1, 2)])
    assert result.secret == 5
    assert result.witness == (0, 1, 2)
    assert result.tally is not None and result.tally.total_votes == 1


def test_vote_tie_goes_to_first_seen() -> None:
    result = Reconstructor().vote([Point(1, 7), Point(2, 9)], 1)
    assert result.secret == 7
    assert result.tally is not None and result.tally.summary() == [(7, 1), (9, 1)]


def test_all_outliers_fail_whole_run() -> None:
    points = [Point(1, 0), Point(3, 1), Point(7, 2)]
    with pytest.raises(NoConsistentSubset) as excinfo:
        Reconstructor().reconstruct(points, 2)
    assert excinfo.value.tried == 3


def test_duplicate_only_subset_casts_no_vote() -> None:
    with pytest.raises(NoConsistentSubset) as excinfo:
        Reconstructor().vote([Point(1, 5), Point(1, 9), Point(2, 13)], 3, subsets=[(0, 1, 2)])
    assert excinfo.value.tried == 1


def test_exhaustive_with_exactly_k_points(genuine_points: List[Point]) -> None:
    result = Reconstructor().reconstruct(genuine_points[:3], 3, exhaustive=True)
    assert result.mode is ReconstructionMode.VOTE
    assert result.secret == 5


def test_parallel_vote_matches_sequential(outlier_points: List[Point]) -> None:
    sequential = Reconstructor().vote(outlier_points, 3)
    parallel = Reconstructor(workers=3, chunk_size=2).vote(outlier_points, 3)
    assert parallel.secret == sequential.secret
    assert parallel.witness == sequential.witness
    assert parallel.tally.summary() == sequential.tally.summary()


def test_workers_must_be_positive() -> None:
    with pytest.raises(ValueError):
        Reconstructor(workers=0)


def test_recover_secret_helper(outlier_points: List[Point]) -> None:
    assert recover_secret(outlier_points, 3) == 5
    assert recover_secret(outlier_points, 3, solver=GaussianSolver(), pick=[2, 4, 5]) == 5
