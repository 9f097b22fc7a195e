# Schemas Module
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

"""Esquemas Pydantic para validar la lista de candidatos.

Pydantic schemas to validate the candidate roster.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator, model_validator

from urna.core.models import Candidate
from urna.errors import RosterError

logger = logging.getLogger(__name__)


class CandidateSchema(BaseModel):
    """Esquema de un candidato en la lista.

    English: Roster candidate schema.
    """

    candidate_id: str = Field(min_length=1, validation_alias=AliasChoices("candidate_id", "id"))
    display_name: str = Field(min_length=1, validation_alias=AliasChoices("display_name", "nome"))
    party_name: str = Field(min_length=1, validation_alias=AliasChoices("party_name", "partido"))
    party_code: str = Field(min_length=1, validation_alias=AliasChoices("party_code", "sigla"))
    vote_count: int = Field(default=0, ge=0, validation_alias=AliasChoices("vote_count", "votos"))
    party_color: Optional[str] = Field(
        default=None,
        pattern=r"^#[0-9A-Fa-f]{6}$",
        validation_alias=AliasChoices("party_color", "partidoColor"),
    )
    objective: Optional[str] = Field(default=None, validation_alias=AliasChoices("objective", "objetivo"))

    @field_validator("candidate_id", "display_name", "party_name", "party_code")
    @classmethod
    def strip_text(cls, value: str) -> str:
        """Normaliza texto eliminando espacios y valida no vacío.

        English:
            Normalize text by trimming whitespace and validate non-empty.
        """
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("Field cannot be empty")
        return cleaned

    def to_candidate(self) -> Candidate:
        return Candidate(
            candidate_id=self.candidate_id,
            display_name=self.display_name,
            party_name=self.party_name,
            party_code=self.party_code,
            vote_count=self.vote_count,
            party_color=self.party_color,
            objective=self.objective,
        )


class RosterSchema(BaseModel):
    """Esquema de la lista completa.

    English: Full roster schema.
    """

    version: str = Field(default="1.0")
    candidates: List[CandidateSchema] = Field(default_factory=list)

    @model_validator(mode="after")
    def unique_ids(self) -> "RosterSchema":
        """Rechaza identificadores repetidos.

        English: Reject repeated identifiers.
        """
        seen = set()
        for candidate in self.candidates:
            if candidate.candidate_id in seen:
                raise ValueError(f"duplicate candidate id: {candidate.candidate_id}")
            seen.add(candidate.candidate_id)
        return self


def validate_roster(payload: Dict[str, Any]) -> List[Candidate]:
    """Valida un payload de lista y devuelve candidatos del dominio.

    English: Validate a roster payload and return domain candidates.

    Raises:
        RosterError: If the payload does not match the schema.
    """
    if not isinstance(payload, dict):
        raise RosterError("Roster payload must be a mapping")
    try:
        roster = RosterSchema.model_validate(payload)
    except ValidationError as exc:
        logger.error("roster_validation_failed errors=%s", exc.error_count())
        raise RosterError(f"Invalid roster: {exc}") from exc
    return [entry.to_candidate() for entry in roster.candidates]
