"""Fixtures compartidas de las pruebas de Urna.

English:
    Shared fixtures for the Urna tests.
"""

from __future__ import annotations

import logging
from typing import Callable, List

import pytest
import structlog

from urna.core.models import Candidate

from factories import make_candidate


@pytest.fixture
def candidate_factory() -> Callable[..., List[Candidate]]:
    """Construye listas de candidatos a partir de conteos.

    English: Build candidate lists from vote counts.
    """

    def build(*votes: int, prefix: str = "c") -> List[Candidate]:
        return [make_candidate(f"{prefix}{index + 1}", count) for index, count in enumerate(votes)]

    return build


@pytest.fixture
def two_candidates() -> List[Candidate]:
    return [make_candidate("A"), make_candidate("B")]


@pytest.fixture
def restore_logging():
    """Restaura handlers y nivel raíz tras configurar logging.

    English: Restore root handlers and level after configuring logging.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()
