"""Constructores de datos de prueba.

English:
    Test data builders.
"""

from __future__ import annotations

from urna.core.models import Candidate


def make_candidate(candidate_id: str, votes: int = 0) -> Candidate:
    return Candidate(
        candidate_id=candidate_id,
        display_name=f"Candidate {candidate_id}",
        party_name=f"Party {candidate_id}",
        party_code=candidate_id.upper(),
        vote_count=votes,
    )
