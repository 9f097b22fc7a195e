"""
======================== ÍNDICE / INDEX ========================
1. Descripción general / Overview
2. Componentes principales / Main components
3. Notas de mantenimiento / Maintenance notes

======================== ESPAÑOL ========================
Archivo: `tests/test_urna_config.py`.
Este módulo forma parte de Urna Engine y está documentado para facilitar
la navegación, mantenimiento y auditoría técnica.

Componentes detectados:
  - test_load_config_defaults
  - test_load_config_reads_environment
  - test_load_config_rejects_negative_duration
  - test_load_config_rejects_unknown_log_level
  - test_load_config_rejects_missing_roster

Notas:
- Mantener esta cabecera sincronizada con cambios estructurales del archivo.
- Priorizar claridad operativa y trazabilidad del comportamiento.

======================== ENGLISH ========================
File: `tests/test_urna_config.py`.
This module is part of Urna Engine and is documented to improve
navigation, maintenance, and technical auditability.

Detected components:
  - test_load_config_defaults
  - test_load_config_reads_environment
  - test_load_config_rejects_negative_duration
  - test_load_config_rejects_unknown_log_level
  - test_load_config_rejects_missing_roster

Notes:
- Keep this header in sync with structural changes in the file.
- Prioritize operational clarity and behavior traceability.
"""

from pathlib import Path

import pytest

from urna.config import load_config

_ENV_KEYS = (
    "BALLOT_DURATION_SECONDS",
    "TICK_INTERVAL_SECONDS",
    "ROSTER_PATH",
    "LOG_LEVEL",
    "LOG_DIR",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    """Aísla las pruebas del entorno y de cualquier .env local.

    English: Isolate tests from the environment and any local .env.
    """
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


def test_load_config_defaults():
    """Español: Valores por defecto sin variables de entorno.

    English: Defaults without environment variables.
    """
    settings = load_config(check_paths=False)

    assert settings.BALLOT_DURATION_SECONDS == 300
    assert settings.TICK_INTERVAL_SECONDS == 1.0
    assert settings.ROSTER_PATH == Path("config") / "roster.yaml"
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_DIR is None


def test_load_config_reads_environment(monkeypatch, tmp_path):
    roster = tmp_path / "roster.yaml"
    roster.write_text("candidates: []\n", encoding="utf-8")
    monkeypatch.setenv("BALLOT_DURATION_SECONDS", "60")
    monkeypatch.setenv("TICK_INTERVAL_SECONDS", "0.5")
    monkeypatch.setenv("ROSTER_PATH", str(roster))
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))

    settings = load_config()

    assert settings.BALLOT_DURATION_SECONDS == 60
    assert settings.TICK_INTERVAL_SECONDS == 0.5
    assert settings.ROSTER_PATH == roster
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_DIR == tmp_path / "logs"


def test_load_config_reads_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("BALLOT_DURATION_SECONDS=42\n", encoding="utf-8")

    settings = load_config(check_paths=False)

    assert settings.BALLOT_DURATION_SECONDS == 42


def test_load_config_rejects_negative_duration(monkeypatch):
    monkeypatch.setenv("BALLOT_DURATION_SECONDS", "-1")
    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config(check_paths=False)


def test_load_config_rejects_unknown_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config(check_paths=False)


def test_load_config_rejects_missing_roster(monkeypatch, tmp_path):
    monkeypatch.setenv("ROSTER_PATH", str(tmp_path / "missing.yaml"))
    with pytest.raises(ValueError, match="ROSTER_PATH does not exist"):
        load_config()
