"""Orquestación del flujo login → votación → resultados.

English:
    Orchestration of the login → ballot → results flow.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import structlog

from urna.clock import SessionClock
from urna.config import UrnaSettings, load_config
from urna.core.models import Candidate, SessionPhase
from urna.core.session import BallotSession, create_session
from urna.errors import NotAuthenticatedError, UrnaError
from urna.identity import LoginResult, check_login
from urna.logging import bind_context, setup_logging
from urna.roster import load_roster
from urna.views import BallotView, ResultsView, build_ballot_view, build_results_view


class VotingFlow:
    """Fachada que la capa de presentación usa para conducir una votación.

    English: Facade the presentation layer uses to drive one voting attempt.

    Args:
        settings: Configuración validada.
        candidates: Lista de candidatos; por defecto se lee ``ROSTER_PATH``.
        logger: Logger estructurado; por defecto ``structlog.get_logger()``.
    """

    def __init__(
        self,
        settings: UrnaSettings,
        candidates: Optional[List[Candidate]] = None,
        logger: Optional[structlog.BoundLogger] = None,
    ) -> None:
        self.settings = settings
        self.candidates = list(candidates) if candidates is not None else load_roster(settings.ROSTER_PATH)
        self.logger = logger or structlog.get_logger()
        self.session: Optional[BallotSession] = None
        self.clock: Optional[SessionClock] = None
        self._authenticated = False

    @property
    def authenticated(self) -> bool:
        return self._authenticated

    def login(self, national_id: str, password: str) -> LoginResult:
        result = check_login(national_id, password)
        self._authenticated = result.accepted
        if not result.accepted:
            self.logger.info("login_failed", reason=result.reason)
        return result

    def open_ballot(self, *, start_clock: bool = True) -> BallotSession:
        """Crea la sesión de votación y, opcionalmente, arranca su reloj.

        English: Create the ballot session and optionally start its clock.

        Raises:
            NotAuthenticatedError: If no login has been accepted.
        """
        if not self._authenticated:
            raise NotAuthenticatedError()
        self.close()
        self.session = create_session(self.candidates, self.settings.BALLOT_DURATION_SECONDS)
        log = bind_context(self.logger, session_id=self.session.session_id)
        self.clock = SessionClock(
            self.session,
            self.settings.TICK_INTERVAL_SECONDS,
            on_closed=lambda: log.info("ballot_closed", phase=SessionPhase.CLOSED.value),
        )
        if start_clock:
            self.clock.start()
        log.info("ballot_opened", duration=self.settings.BALLOT_DURATION_SECONDS)
        return self.session

    def _require_session(self) -> BallotSession:
        if self.session is None:
            raise NotAuthenticatedError("A votação ainda não foi aberta.")
        return self.session

    def select(self, candidate_id: str) -> Optional[str]:
        return self._require_session().select_candidate(candidate_id)

    def confirm_vote(self) -> Candidate:
        """Confirma el voto; los errores de dominio se registran y se propagan.

        English: Confirm the vote; domain errors are logged and propagated.
        """
        session = self._require_session()
        log = bind_context(self.logger, session_id=session.session_id)
        try:
            updated = session.cast_vote()
        except UrnaError as exc:
            log.warning("vote_rejected", code=exc.code)
            raise
        bind_context(log, candidate_id=updated.candidate_id).info("vote_confirmed")
        return updated

    def ballot_view(self) -> BallotView:
        return build_ballot_view(self._require_session())

    def results_view(self) -> ResultsView:
        return build_results_view(self._require_session())

    def close(self) -> None:
        """Detiene el reloj de la sesión actual.

        English: Stop the current session's clock.
        """
        if self.clock is not None:
            self.clock.stop()
            self.clock = None


def start_flow(candidates: Optional[List[Candidate]] = None) -> VotingFlow:
    """Ejemplo de arranque: configuración, logging y flujo listo.

    English: Startup example: configuration, logging and a ready flow.
    """
    settings = load_config(check_paths=candidates is None)
    logger = setup_logging(settings.LOG_LEVEL, settings.LOG_DIR)
    flow = VotingFlow(settings, candidates=candidates, logger=logger)
    logging.getLogger(__name__).debug("flow_ready candidates=%d", len(flow.candidates))
    return flow
