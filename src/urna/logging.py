"""
======================== ÍNDICE / INDEX ========================
1. Descripción general / Overview
2. Componentes principales / Main components
3. Notas de mantenimiento / Maintenance notes

======================== ESPAÑOL ========================
Archivo: `src/urna/logging.py`.
Este módulo forma parte de Urna Engine y está documentado para facilitar
la navegación, mantenimiento y auditoría técnica.

Componentes detectados:
  - setup_logging
  - bind_context

Notas:
- Mantener esta cabecera sincronizada con cambios estructurales del archivo.
- Priorizar claridad operativa y trazabilidad del comportamiento.

======================== ENGLISH ========================
File: `src/urna/logging.py`.
This module is part of Urna Engine and is documented to improve
navigation, maintenance, and technical auditability.

Detected components:
  - setup_logging
  - bind_context

Notes:
- Keep this header in sync with structural changes in the file.
- Prioritize operational clarity and behavior traceability.
"""

from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, List, Optional

import structlog


def setup_logging(log_level: str, log_dir: Optional[Path] = None) -> structlog.BoundLogger:
    """Configura structlog y handlers de consola/archivo.

    El archivo rotativo solo se crea cuando se indica ``log_dir``.

    English:
        Configure structlog and console/file handlers.

        The rotating file is only created when ``log_dir`` is given.
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            TimedRotatingFileHandler(
                log_dir / "urna.log",
                when="midnight",
                backupCount=30,
                encoding="utf-8",
            )
        )

    logging.basicConfig(
        level=log_level.upper(),
        handlers=handlers,
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(log_level.upper())
        ),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger()


def bind_context(
    logger: structlog.BoundLogger,
    session_id: Optional[str] = None,
    candidate_id: Optional[str] = None,
    phase: Optional[str] = None,
) -> structlog.BoundLogger:
    """Adjunta contexto estándar al logger.

    English: Bind standard context to the logger.
    """
    context: dict[str, Any] = {}
    if session_id:
        context["session_id"] = session_id
    if candidate_id:
        context["candidate_id"] = candidate_id
    if phase:
        context["phase"] = phase
    return logger.bind(**context)
