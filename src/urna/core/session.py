"""
======================== ÍNDICE / INDEX ========================
1. Descripción general / Overview
2. Componentes principales / Main components
3. Notas de mantenimiento / Maintenance notes

======================== ESPAÑOL ========================
Archivo: `src/urna/core/session.py`.
Este módulo forma parte de Urna Engine y está documentado para facilitar
la navegación, mantenimiento y auditoría técnica.

Componentes detectados:
  - BallotSession
  - create_session

Notas:
- Mantener esta cabecera sincronizada con cambios estructurales del archivo.
- Priorizar claridad operativa y trazabilidad del comportamiento.

======================== ENGLISH ========================
File: `src/urna/core/session.py`.
This module is part of Urna Engine and is documented to improve
navigation, maintenance, and technical auditability.

Detected components:
  - BallotSession
  - create_session

Notes:
- Keep this header in sync with structural changes in the file.
- Prioritize operational clarity and behavior traceability.
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Dict, Iterable, Optional, Tuple

from urna.core.models import (
    Candidate,
    SessionPhase,
    SessionSnapshot,
    TallyResult,
    format_remaining,
)
from urna.core.tally import compute_tally
from urna.errors import (
    AlreadyCastError,
    DuplicateCandidateError,
    NoSelectionError,
    SessionClosedError,
    UnknownCandidateError,
)

logger = logging.getLogger(__name__)


class BallotSession:
    """Sesión de votación con un único voto y ventana de tiempo acotada.

    Bilingual: Single-vote, time-bounded voting session.

    La sesión pasa de OPEN a CLOSED una sola vez, cuando el contador llega a
    cero o se cierra manualmente. ``has_cast`` es un cerrojo independiente de
    la fase: una vez en True no vuelve a False.

    Todas las operaciones toman el mismo ``RLock``, de modo que un ``tick``
    desde el hilo del reloj no puede intercalarse con la secuencia
    comprobar-incrementar-cerrar de ``cast_vote``.

    Args:
        candidates: Candidatos en orden de presentación.
        duration_seconds: Duración de la ventana de votación.
        session_id: Identificador opcional para trazas.

    Raises:
        ValueError: Si la duración es negativa.
        DuplicateCandidateError: Si dos candidatos comparten id.
    """

    def __init__(
        self,
        candidates: Iterable[Candidate],
        duration_seconds: int,
        *,
        session_id: Optional[str] = None,
    ) -> None:
        if duration_seconds < 0:
            raise ValueError("duration_seconds must be >= 0")
        roster = tuple(candidates)
        index: Dict[str, int] = {}
        for position, candidate in enumerate(roster):
            if candidate.candidate_id in index:
                raise DuplicateCandidateError(candidate.candidate_id)
            index[candidate.candidate_id] = position

        self.session_id = session_id or uuid.uuid4().hex
        self.duration_seconds = int(duration_seconds)
        self._candidates: Tuple[Candidate, ...] = roster
        self._index = index
        self._remaining = int(duration_seconds)
        self._phase = SessionPhase.OPEN if self._remaining > 0 else SessionPhase.CLOSED
        self._has_cast = False
        self._selected: Optional[str] = None
        self._lock = threading.RLock()

        logger.info(
            "ballot_session_created session=%s candidates=%d duration=%d phase=%s",
            self.session_id,
            len(roster),
            self.duration_seconds,
            self._phase.value,
        )

    # ------------------------------------------------------------------
    # Consultas / Queries
    # ------------------------------------------------------------------

    @property
    def candidates(self) -> Tuple[Candidate, ...]:
        with self._lock:
            return self._candidates

    @property
    def phase(self) -> SessionPhase:
        with self._lock:
            return self._phase

    @property
    def remaining_seconds(self) -> int:
        with self._lock:
            return self._remaining

    @property
    def has_cast(self) -> bool:
        with self._lock:
            return self._has_cast

    @property
    def selected_candidate_id(self) -> Optional[str]:
        with self._lock:
            return self._selected

    @property
    def is_open(self) -> bool:
        return self.phase is SessionPhase.OPEN

    @property
    def can_vote(self) -> bool:
        """True mientras la sesión está abierta y aún no se votó.

        English: True while the session is open and no vote has been cast.
        """
        with self._lock:
            return self._phase is SessionPhase.OPEN and not self._has_cast

    def candidate(self, candidate_id: str) -> Candidate:
        """Busca un candidato por id.

        English: Look up a candidate by id.

        Raises:
            UnknownCandidateError: If the id is not on the ballot.
        """
        with self._lock:
            position = self._index.get(candidate_id)
            if position is None:
                raise UnknownCandidateError(candidate_id)
            return self._candidates[position]

    def remaining_formatted(self) -> str:
        """Tiempo restante como ``MM:SS``.

        English: Remaining time as ``MM:SS``.
        """
        return format_remaining(self.remaining_seconds)

    def snapshot(self) -> SessionSnapshot:
        """Copia consistente del estado bajo un solo bloqueo.

        English: Consistent copy of the state taken under a single lock.
        """
        with self._lock:
            return SessionSnapshot(
                session_id=self.session_id,
                phase=self._phase,
                remaining_seconds=self._remaining,
                has_cast=self._has_cast,
                selected_candidate_id=self._selected,
                candidates=self._candidates,
            )

    def tally(self) -> TallyResult:
        """Escrutinio de los conteos actuales.

        English: Tally of the current counts.
        """
        return compute_tally(self.candidates)

    # ------------------------------------------------------------------
    # Comandos / Commands
    # ------------------------------------------------------------------

    def select_candidate(self, candidate_id: str) -> Optional[str]:
        """Selecciona un candidato; repetir la selección la deshace.

        Se ignora si la sesión está cerrada o ya se votó.

        Args:
            candidate_id: Candidato a seleccionar.

        Returns:
            Optional[str]: Selección resultante.

        Raises:
            UnknownCandidateError: Si el id no está en la papeleta y la
                selección todavía está permitida.

        English:
            Select a candidate; selecting it again clears the selection.

            Ignored once the session is closed or the vote has been cast,
            whatever the id.
        """
        with self._lock:
            if self._phase is SessionPhase.CLOSED or self._has_cast:
                logger.debug(
                    "ballot_select_ignored session=%s candidate=%s phase=%s has_cast=%s",
                    self.session_id,
                    candidate_id,
                    self._phase.value,
                    self._has_cast,
                )
                return self._selected
            if candidate_id not in self._index:
                raise UnknownCandidateError(candidate_id)
            self._selected = None if self._selected == candidate_id else candidate_id
            return self._selected

    def cast_vote(self) -> Candidate:
        """Registra el voto del candidato seleccionado.

        El cerrojo se comprueba primero: tras un voto exitoso la selección
        queda vacía y toda llamada posterior debe fallar con
        ``AlreadyCastError``. Ningún fallo modifica el estado.

        Returns:
            Candidate: Candidato actualizado con su nuevo conteo.

        Raises:
            AlreadyCastError: Si la sesión ya registró su voto.
            NoSelectionError: Si no hay candidato seleccionado.
            SessionClosedError: Si la ventana de votación terminó.

        English:
            Record the vote for the selected candidate.

            The latch is checked first: a successful cast clears the selection
            and every later call must fail with ``AlreadyCastError``. No
            failure mutates state.
        """
        with self._lock:
            if self._has_cast:
                raise AlreadyCastError()
            if self._selected is None:
                raise NoSelectionError()
            if self._phase is SessionPhase.CLOSED:
                raise SessionClosedError()

            position = self._index[self._selected]
            updated = self._candidates[position].with_vote()
            self._candidates = (
                self._candidates[:position] + (updated,) + self._candidates[position + 1 :]
            )
            self._has_cast = True
            self._selected = None

        logger.info(
            "ballot_vote_cast session=%s candidate=%s",
            self.session_id,
            updated.candidate_id,
        )
        return updated

    def tick(self) -> SessionPhase:
        """Avanza el contador un segundo y cierra la sesión al llegar a cero.

        English: Advance the countdown by one second, closing at zero.
        """
        with self._lock:
            if self._phase is SessionPhase.CLOSED:
                return self._phase
            self._remaining = max(0, self._remaining - 1)
            if self._remaining == 0:
                self._close_locked(reason="timeout")
            return self._phase

    def close(self) -> None:
        """Cierra la sesión antes de tiempo; idempotente.

        English: Close the session early; idempotent.
        """
        with self._lock:
            if self._phase is SessionPhase.CLOSED:
                return
            self._remaining = 0
            self._close_locked(reason="manual")

    def _close_locked(self, *, reason: str) -> None:
        self._phase = SessionPhase.CLOSED
        logger.info(
            "ballot_session_closed session=%s reason=%s has_cast=%s",
            self.session_id,
            reason,
            self._has_cast,
        )

    def __repr__(self) -> str:
        return (
            f"BallotSession(session_id={self.session_id!r}, phase={self.phase.value}, "
            f"remaining={self.remaining_formatted()}, has_cast={self.has_cast})"
        )


def create_session(candidates: Iterable[Candidate], duration_seconds: int) -> BallotSession:
    """Crea una sesión nueva para un intento de votación.

    English: Create a fresh session for one voting attempt.
    """
    return BallotSession(candidates, duration_seconds)
