"""Cálculo del escrutinio: totales, porcentajes y líder.

English:
    Tally computation: totals, percentages and leader.

Funciones puras sin estado; pueden llamarse concurrentemente sobre una copia
inmutable de los candidatos.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

from urna.core.models import Candidate, TallyResult
from urna.errors import EmptyCandidateSetError

_COMPACT_UNITS = (
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
)


def compute_totals(candidates: Iterable[Candidate]) -> int:
    """Suma los votos de todos los candidatos.

    English: Sum every candidate's votes.
    """
    return sum(candidate.vote_count for candidate in candidates)


def compute_percent(candidate: Candidate, total_votes: int) -> int:
    """Calcula el porcentaje entero de un candidato, redondeado hacia arriba en .5.

    Devuelve 0 cuando no hay votos para evitar la división por cero. Cada
    porcentaje se redondea por separado, por lo que la suma puede no ser 100.

    Args:
        candidate (Candidate): Candidato a evaluar.
        total_votes (int): Total de votos del escrutinio.

    Returns:
        int: Porcentaje entre 0 y 100.

    English:
        Compute a candidate's integer percent, rounding halves up.

        Returns 0 when there are no votes to avoid dividing by zero. Each
        percentage is rounded on its own, so the sum may differ from 100.

    Args:
        candidate (Candidate): Candidate to evaluate.
        total_votes (int): Tally total.

    Returns:
        int: Percent between 0 and 100.
    """
    if total_votes <= 0:
        return 0
    # round(100 * v / t) half-up, in integers
    return (200 * candidate.vote_count + total_votes) // (2 * total_votes)


def compute_leader(candidates: Sequence[Candidate]) -> Candidate:
    """Devuelve el candidato con más votos; en empate gana el primero de la lista.

    Raises:
        EmptyCandidateSetError: Si la lista está vacía.

    English:
        Return the candidate with most votes; ties go to the first in list order.

    Raises:
        EmptyCandidateSetError: If the list is empty.
    """
    if not candidates:
        raise EmptyCandidateSetError()
    leader = candidates[0]
    for candidate in candidates[1:]:
        if candidate.vote_count > leader.vote_count:
            leader = candidate
    return leader


def compute_tally(candidates: Sequence[Candidate]) -> TallyResult:
    """Construye el resultado completo del escrutinio.

    English: Build the full tally result.
    """
    total = compute_totals(candidates)
    return TallyResult(
        total_votes=total,
        percent_by_candidate={
            candidate.candidate_id: compute_percent(candidate, total) for candidate in candidates
        },
        leader=compute_leader(candidates) if candidates else None,
    )


def format_vote_count(votes: int) -> str:
    """Formatea un conteo de votos de forma compacta (``1.3K``, ``2.5M``).

    El cociente se calcula en coma flotante y se redondea sobre su valor
    binario exacto, igual que ``Number.prototype.toFixed(1)``: ``1150`` da
    ``1.1K`` porque 1.15 se almacena como 1.1499...

    English:
        Format a vote count compactly (``1.3K``, ``2.5M``).

        The ratio is a float rounded half-up on its exact binary value, as
        ``Number.prototype.toFixed(1)`` does: ``1150`` gives ``1.1K`` because
        1.15 is stored as 1.1499...
    """
    for threshold, suffix in _COMPACT_UNITS:
        if votes >= threshold:
            scaled = Decimal(votes / threshold).quantize(
                Decimal("0.1"), rounding=ROUND_HALF_UP
            )
            return f"{scaled}{suffix}"
    return str(votes)
