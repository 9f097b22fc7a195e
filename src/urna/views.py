# Views Module
# AUTO-DOC-INDEX
#
# ES: Índice rápido
#   1) Propósito del módulo
#   2) Componentes principales
#   3) Puntos de extensión
#
# EN: Quick index
#   1) Module purpose
#   2) Main components
#   3) Extension points
#
# Secciones / Sections:
#   - Configuración / Configuration
#   - Lógica principal / Core logic
#   - Integraciones / Integrations

"""Proyecciones de solo lectura para las pantallas de votación y resultados.

Read-only projections for the ballot and results screens.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from urna.core.models import Candidate, SessionPhase
from urna.core.session import BallotSession
from urna.core.tally import compute_leader, compute_percent, compute_totals, format_vote_count

SUBTITLE_CLOSED = "Período de votação encerrado"
NOTE_CAST = "Voto registado. Obrigado por votar!"
NOTE_CLOSED = "Votação encerrada."
NOTE_PENDING = "Ainda não votou."
LABEL_CAST = "VOTADO"
LABEL_CLOSED = "Encerrado"
LABEL_CONFIRM = "Confirmar Voto"
LABEL_SELECT = "Selecione um candidato"


@dataclass(frozen=True)
class CandidateRow:
    """Fila de un candidato con su conteo y porcentaje.

    English: A candidate row with its count and percent.
    """

    candidate_id: str
    display_name: str
    party_name: str
    party_code: str
    party_color: Optional[str]
    vote_count: int
    percent: int
    votes_label: str
    selected: bool = False


@dataclass(frozen=True)
class BallotView:
    """Estado de la pantalla de votación.

    English: Ballot screen state.
    """

    phase: SessionPhase
    remaining: str
    subtitle: str
    has_cast: bool
    selected_candidate_id: Optional[str]
    rows: List[CandidateRow]
    total_votes: int
    footer_note: str
    confirm_label: str
    confirm_enabled: bool


@dataclass(frozen=True)
class ResultsView:
    """Estado de la pantalla de resultados.

    English: Results screen state.
    """

    phase: SessionPhase
    rows: List[CandidateRow]
    total_votes: int
    winner: Optional[Candidate]


@dataclass(frozen=True)
class Countdown:
    days: int
    hours: int
    minutes: int
    seconds: int


def countdown_breakdown(seconds: int) -> Countdown:
    """Descompone segundos en días, horas, minutos y segundos.

    English: Split seconds into days, hours, minutes and seconds.
    """
    remaining = max(0, int(seconds))
    days, remaining = divmod(remaining, 86_400)
    hours, remaining = divmod(remaining, 3_600)
    minutes, secs = divmod(remaining, 60)
    return Countdown(days=days, hours=hours, minutes=minutes, seconds=secs)


def _build_rows(
    candidates: Sequence[Candidate], total: int, selected_id: Optional[str] = None
) -> List[CandidateRow]:
    return [
        CandidateRow(
            candidate_id=candidate.candidate_id,
            display_name=candidate.display_name,
            party_name=candidate.party_name,
            party_code=candidate.party_code,
            party_color=candidate.party_color,
            vote_count=candidate.vote_count,
            percent=compute_percent(candidate, total),
            votes_label=format_vote_count(candidate.vote_count),
            selected=candidate.candidate_id == selected_id,
        )
        for candidate in candidates
    ]


def build_ballot_view(session: BallotSession) -> BallotView:
    """Proyecta la sesión para la pantalla de votación.

    La selección solo se resalta mientras todavía se puede votar.

    English:
        Project the session for the ballot screen.

        The selection is only highlighted while a vote can still be cast.
    """
    state = session.snapshot()
    candidates = state.candidates
    phase = state.phase
    has_cast = state.has_cast
    selected = state.selected_candidate_id
    remaining = state.remaining_formatted

    closed = phase is SessionPhase.CLOSED
    votable = not closed and not has_cast
    total = compute_totals(candidates)

    if has_cast:
        note, label = NOTE_CAST, LABEL_CAST
    elif closed:
        note, label = NOTE_CLOSED, LABEL_CLOSED
    else:
        note = NOTE_PENDING
        label = LABEL_CONFIRM if selected else LABEL_SELECT

    return BallotView(
        phase=phase,
        remaining=remaining,
        subtitle=SUBTITLE_CLOSED if closed else f"Tempo restante: {remaining}",
        has_cast=has_cast,
        selected_candidate_id=selected,
        rows=_build_rows(candidates, total, selected if votable else None),
        total_votes=total,
        footer_note=note,
        confirm_label=label,
        confirm_enabled=votable and selected is not None,
    )


def build_results_view(session: BallotSession) -> ResultsView:
    """Proyecta la sesión para la pantalla de resultados.

    El vencedor solo se anuncia con la sesión cerrada.

    English:
        Project the session for the results screen.

        The winner is only announced once the session is closed.
    """
    state = session.snapshot()
    candidates = state.candidates
    phase = state.phase

    total = compute_totals(candidates)
    winner = None
    if phase is SessionPhase.CLOSED and candidates:
        winner = compute_leader(candidates)
    return ResultsView(
        phase=phase,
        rows=_build_rows(candidates, total),
        total_votes=total,
        winner=winner,
    )
