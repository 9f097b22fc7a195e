# Config Module
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

"""Configuración validada de Urna.

Validated Urna configuration.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from urna.roster import DEFAULT_ROSTER_PATH

_ENV_PATH = Path(".env")
_ENV_LOCAL_PATH = Path(".env.local")
load_dotenv(_ENV_PATH, override=False)
load_dotenv(_ENV_LOCAL_PATH, override=False)

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class UrnaSettings(BaseSettings):
    """Variables de entorno y archivo .env para Urna.

    English: Environment variables and .env file for Urna.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    BALLOT_DURATION_SECONDS: int = Field(default=300, ge=0)
    TICK_INTERVAL_SECONDS: float = Field(default=1.0, gt=0)
    ROSTER_PATH: Path = DEFAULT_ROSTER_PATH
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[Path] = None

    @field_validator("LOG_LEVEL")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")
        return normalized

    def validate_paths(self) -> None:
        """/** Valida que las rutas críticas existan. / Validate that critical paths exist. **/"""
        if not self.ROSTER_PATH.exists():
            raise ValueError(f"ROSTER_PATH does not exist: {self.ROSTER_PATH}")
        if self.LOG_DIR is not None and self.LOG_DIR.exists() and not self.LOG_DIR.is_dir():
            raise ValueError(f"LOG_DIR is not a directory: {self.LOG_DIR}")


def load_config(*, check_paths: bool = True) -> UrnaSettings:
    """/** Carga y valida configuración, fallando con detalle. / Load and validate configuration, failing with details. **/"""
    try:
        settings = UrnaSettings()
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc
    if check_paths:
        settings.validate_paths()
    logging.getLogger(__name__).debug(
        "config_loaded duration=%s roster=%s", settings.BALLOT_DURATION_SECONDS, settings.ROSTER_PATH
    )
    return settings
