"""Urna Engine: sesión de votación, escrutinio y validación de acceso.

English:
    Urna Engine: voting session, tally and login validation.
"""

from urna.core.models import Candidate, SessionPhase, TallyResult
from urna.core.session import BallotSession, create_session
from urna.core.tally import compute_leader, compute_percent, compute_tally, compute_totals

__version__ = "0.1.0"

__all__ = [
    "BallotSession",
    "Candidate",
    "SessionPhase",
    "TallyResult",
    "compute_leader",
    "compute_percent",
    "compute_tally",
    "compute_totals",
    "create_session",
]
