"""Pruebas del escrutinio: totales, porcentajes y líder.

Tally tests: totals, percentages and leader.
"""

from __future__ import annotations

import pytest

from urna.core.tally import (
    compute_leader,
    compute_percent,
    compute_tally,
    compute_totals,
    format_vote_count,
)
from urna.errors import EmptyCandidateSetError

from factories import make_candidate


def test_compute_totals(candidate_factory):
    """Español: Suma los votos de todos los candidatos.

    English: Sums every candidate's votes.
    """
    assert compute_totals(candidate_factory(1250, 24000, 900000, 0)) == 925250
    assert compute_totals([]) == 0


def test_percent_is_zero_without_votes(candidate_factory):
    candidates = candidate_factory(0, 0, 0)
    assert [compute_percent(c, 0) for c in candidates] == [0, 0, 0]


def test_percent_single_candidate_with_all_votes():
    candidate = make_candidate("solo", 42)
    assert compute_percent(candidate, 42) == 100


@pytest.mark.parametrize(
    "votes, total, expected",
    [
        (1, 8, 13),  # 12.5 rounds up
        (1, 3, 33),
        (2, 3, 67),
        (1, 200, 1),  # 0.5 rounds up
        (1, 201, 0),
        (0, 10, 0),
    ],
)
def test_percent_rounds_half_up(votes, total, expected):
    assert compute_percent(make_candidate("x", votes), total) == expected


def test_percentages_may_not_sum_to_100(candidate_factory):
    """Español: El redondeo por candidato puede desviar la suma de 100.

    English: Per-candidate rounding may drift from 100.
    """
    candidates = candidate_factory(1, 1, 1)
    total = compute_totals(candidates)
    assert sum(compute_percent(c, total) for c in candidates) == 99


def test_leader_tie_breaks_by_list_order(candidate_factory):
    candidates = candidate_factory(10, 10, 5)
    assert compute_leader(candidates).candidate_id == "c1"


def test_leader_picks_maximum(candidate_factory):
    candidates = candidate_factory(1250, 24000, 900000, 0)
    assert compute_leader(candidates).candidate_id == "c3"


def test_leader_empty_raises():
    with pytest.raises(EmptyCandidateSetError):
        compute_leader([])


def test_compute_tally(candidate_factory):
    result = compute_tally(candidate_factory(3, 1))
    assert result.total_votes == 4
    assert result.percent_by_candidate == {"c1": 75, "c2": 25}
    assert result.percent("c1") == 75
    assert result.percent("missing") == 0
    assert result.leader.candidate_id == "c1"


def test_compute_tally_empty():
    result = compute_tally([])
    assert result.total_votes == 0
    assert result.percent_by_candidate == {}
    assert result.leader is None


@pytest.mark.parametrize(
    "votes, expected",
    [
        (0, "0"),
        (999, "999"),
        (1000, "1.0K"),
        (1150, "1.1K"),
        (1250, "1.3K"),
        (1350, "1.4K"),
        (24000, "24.0K"),
        (900000, "900.0K"),
        (2_500_000, "2.5M"),
        (1_000_000_000, "1.0B"),
    ],
)
def test_format_vote_count(votes, expected):
    assert format_vote_count(votes) == expected


def test_candidate_rejects_negative_votes():
    with pytest.raises(ValueError):
        make_candidate("neg", -1)


@pytest.mark.parametrize("votes", [1.5, True, "3"])
def test_candidate_rejects_non_integer_votes(votes):
    """Español: El conteo debe ser un entero real, no float ni bool.

    English: The count must be a real integer, neither float nor bool.
    """
    with pytest.raises(TypeError, match="vote_count must be an int"):
        make_candidate("odd", votes)
