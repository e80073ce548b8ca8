from polyrecover.tally import VoteTally


def test_record_keeps_first_witness() -> None:
    tally = VoteTally()
    tally.record(5, (0, 1, 2))
    tally.record(7, (0, 1, 3))
    tally.record(5, (1, 2, 3))
    candidate = tally.get(5)
    assert candidate is not None
    assert candidate.votes == 2
    assert candidate.witness == (0, 1, 2)
    assert tally.summary() == [(5, 2), (7, 1)]
    assert tally.total_votes == 3
    assert 7 in tally and 9 not in tally


def test_winner_breaks_ties_by_insertion() -> None:
    tally = VoteTally()
    tally.record(9, (2,))
    tally.record(4, (0,))
    winner = tally.winner()
    assert winner is not None and winner.value == 9


def test_winner_of_empty_tally_is_none() -> None:
    assert VoteTally().winner() is None
    assert len(VoteTally()) == 0


def test_merge_preserves_first_seen_order() -> None:
    early = VoteTally()
    early.record(3, (0, 1))
    late = VoteTally()
    late.record(8, (1, 2))
    late.record(3, (2, 3))
    late.record(3, (2, 4))
    merged = early.merge(late)
    assert merged is early
    assert merged.summary() == [(3, 3), (8, 1)]
    assert merged.get(3).witness == (0, 1)
    assert merged.counts() == {3: 3, 8: 1}
