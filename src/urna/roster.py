"""Carga de la lista de candidatos desde YAML.

English:
    Candidate roster loading from YAML.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

import yaml

from urna.core.models import Candidate
from urna.errors import RosterError
from urna.schemas import validate_roster

logger = logging.getLogger(__name__)

DEFAULT_ROSTER_PATH = Path("config") / "roster.yaml"


def load_roster(path: Union[str, Path] = DEFAULT_ROSTER_PATH) -> List[Candidate]:
    """Lee y valida un archivo YAML de candidatos.

    Las rutas relativas se resuelven contra el directorio de trabajo. Siempre
    usa ``yaml.safe_load``.

    Args:
        path: Ruta al archivo (por defecto ``config/roster.yaml``).

    Returns:
        List[Candidate]: Candidatos en el orden del archivo.

    Raises:
        RosterError: Si el archivo no existe, no es YAML válido o no cumple el esquema.

    English:
        Read and validate a YAML roster file.

        Relative paths resolve against the working directory. Always uses
        ``yaml.safe_load``.
    """
    resolved = Path(path)
    if not resolved.is_absolute():
        resolved = Path.cwd() / resolved

    if not resolved.exists():
        raise RosterError(f"Roster file not found / Archivo de candidatos no encontrado: {resolved}")

    try:
        payload = yaml.safe_load(resolved.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise RosterError(f"YAML syntax error in / Error de sintaxis YAML en {resolved}: {exc}") from exc

    if payload is None:
        logger.warning("roster_file_empty path=%s", resolved)
        payload = {}

    candidates = validate_roster(payload)
    logger.info("roster_loaded path=%s candidates=%d", resolved, len(candidates))
    return candidates
