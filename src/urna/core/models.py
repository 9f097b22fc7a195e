"""
======================== ÍNDICE / INDEX ========================
1. Descripción general / Overview
2. Componentes principales / Main components
3. Notas de mantenimiento / Maintenance notes

======================== ESPAÑOL ========================
Archivo: `src/urna/core/models.py`.
Este módulo forma parte de Urna Engine y está documentado para facilitar
la navegación, mantenimiento y auditoría técnica.

Componentes detectados:
  - SessionPhase
  - Candidate
  - TallyResult
  - SessionSnapshot

Notas:
- Mantener esta cabecera sincronizada con cambios estructurales del archivo.
- Priorizar claridad operativa y trazabilidad del comportamiento.

======================== ENGLISH ========================
File: `src/urna/core/models.py`.
This module is part of Urna Engine and is documented to improve
navigation, maintenance, and technical auditability.

Detected components:
  - SessionPhase
  - Candidate
  - TallyResult
  - SessionSnapshot

Notes:
- Keep this header in sync with structural changes in the file.
- Prioritize operational clarity and behavior traceability.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Optional, Tuple


def format_remaining(seconds: int) -> str:
    """Formatea segundos como ``MM:SS`` con ceros a la izquierda.

    English: Format seconds as zero-padded ``MM:SS``.
    """
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{secs:02d}"


class SessionPhase(str, Enum):
    """Fase de la sesión de votación.

    English: Voting session phase.
    """

    OPEN = "open"
    CLOSED = "closed"


@dataclass(frozen=True)
class Candidate:
    """Representa un candidato de la papeleta.

    Attributes:
        candidate_id (str): Identificador estable del candidato.
        display_name (str): Nombre mostrado en la papeleta.
        party_name (str): Nombre completo del partido.
        party_code (str): Sigla del partido.
        vote_count (int): Votos acumulados, nunca negativo.
        party_color (Optional[str]): Color del partido en hexadecimal.
        objective (Optional[str]): Propuesta mostrada en "Ver Detalhes".

    English:
        Represents a ballot candidate.

    Attributes:
        candidate_id (str): Stable candidate identifier.
        display_name (str): Name shown on the ballot.
        party_name (str): Full party name.
        party_code (str): Party acronym.
        vote_count (int): Accumulated votes, never negative.
        party_color (Optional[str]): Party colour as hex.
        objective (Optional[str]): Manifesto shown by "Ver Detalhes".
    """

    candidate_id: str
    display_name: str
    party_name: str
    party_code: str
    vote_count: int = 0
    party_color: Optional[str] = None
    objective: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.candidate_id:
            raise ValueError("candidate_id cannot be empty")
        if isinstance(self.vote_count, bool) or not isinstance(self.vote_count, int):
            raise TypeError(f"vote_count must be an int for {self.candidate_id}")
        if self.vote_count < 0:
            raise ValueError(f"vote_count must be >= 0 for {self.candidate_id}")

    def with_vote(self) -> "Candidate":
        """Devuelve una copia con un voto más.

        English: Return a copy carrying one more vote.
        """
        return replace(self, vote_count=self.vote_count + 1)


@dataclass(frozen=True)
class TallyResult:
    """Resultado derivado del escrutinio.

    Attributes:
        total_votes (int): Suma de votos de todos los candidatos.
        percent_by_candidate (Dict[str, int]): Porcentaje entero por candidato.
        leader (Optional[Candidate]): Candidato con más votos, o None sin candidatos.

    English:
        Derived tally result.

    Attributes:
        total_votes (int): Sum of every candidate's votes.
        percent_by_candidate (Dict[str, int]): Integer percent per candidate.
        leader (Optional[Candidate]): Candidate with most votes, or None when empty.
    """

    total_votes: int
    percent_by_candidate: Dict[str, int] = field(default_factory=dict)
    leader: Optional[Candidate] = None

    def percent(self, candidate_id: str) -> int:
        return self.percent_by_candidate.get(candidate_id, 0)


@dataclass(frozen=True)
class SessionSnapshot:
    """Copia consistente del estado de una sesión en un instante.

    English: Consistent copy of a session's state at one instant.
    """

    session_id: str
    phase: SessionPhase
    remaining_seconds: int
    has_cast: bool
    selected_candidate_id: Optional[str]
    candidates: Tuple[Candidate, ...]

    @property
    def remaining_formatted(self) -> str:
        return format_remaining(self.remaining_seconds)
