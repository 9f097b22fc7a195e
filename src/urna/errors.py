"""Errores de dominio de la urna electrónica.

English:
    Domain errors for the electronic ballot box.

Todos los errores son locales y recuperables: la capa de presentación muestra
``message`` al votante y usa ``code`` para decidir qué diálogo abrir.
"""

from __future__ import annotations

from typing import Optional


class UrnaError(Exception):
    """Error base de Urna.

    English: Base Urna error.
    """

    code = "urna_error"
    default_message = "Ocorreu um erro."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NoSelectionError(UrnaError):
    """Se intentó votar sin candidato seleccionado.

    English: A vote was attempted with no candidate selected.
    """

    code = "no_selection"
    default_message = "Por favor, escolha um candidato antes de confirmar."


class SessionClosedError(UrnaError):
    """La sesión ya está cerrada.

    English: The voting window has closed.
    """

    code = "session_closed"
    default_message = "O período de votação terminou."


class AlreadyCastError(UrnaError):
    """El voto de esta sesión ya fue registrado.

    English: This session's vote has already been cast.
    """

    code = "already_cast"
    default_message = "O seu voto já foi registado."


class EmptyCandidateSetError(UrnaError):
    """No hay candidatos sobre los que calcular.

    English: There are no candidates to compute over.
    """

    code = "empty_candidate_set"
    default_message = "Não existem candidatos."


class UnknownCandidateError(UrnaError, KeyError):
    """El identificador no pertenece a la papeleta.

    English: The identifier is not part of the ballot.
    """

    code = "unknown_candidate"
    default_message = "Candidato desconhecido."

    def __init__(self, candidate_id: str) -> None:
        self.candidate_id = candidate_id
        super().__init__(f"Candidato desconhecido: {candidate_id}")

    def __str__(self) -> str:
        return self.message


class DuplicateCandidateError(UrnaError, ValueError):
    """Dos candidatos comparten identificador.

    English: Two candidates share an identifier.
    """

    code = "duplicate_candidate"
    default_message = "Identificador de candidato duplicado."

    def __init__(self, candidate_id: str) -> None:
        self.candidate_id = candidate_id
        super().__init__(f"Identificador de candidato duplicado: {candidate_id}")


class RosterError(UrnaError, ValueError):
    """El archivo de candidatos no se pudo leer o validar.

    English: The roster file could not be read or validated.
    """

    code = "invalid_roster"
    default_message = "Lista de candidatos inválida."


class NotAuthenticatedError(UrnaError):
    """Se intentó abrir la votación sin un login aceptado.

    English: The ballot was requested without an accepted login.
    """

    code = "not_authenticated"
    default_message = "Por favor, inicie sessão antes de votar."
