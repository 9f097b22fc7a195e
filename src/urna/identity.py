"""
======================== ÍNDICE / INDEX ========================
1. Descripción general / Overview
2. Componentes principales / Main components
3. Notas de mantenimiento / Maintenance notes

======================== ESPAÑOL ========================
Archivo: `src/urna/identity.py`.
Este módulo forma parte de Urna Engine y está documentado para facilitar
la navegación, mantenimiento y auditoría técnica.

Componentes detectados:
  - validate_national_id
  - validate_password
  - normalize_national_id
  - mask_national_id
  - LoginResult
  - check_login

Notas:
- Mantener esta cabecera sincronizada con cambios estructurales del archivo.
- Las expresiones regulares deben coincidir exactamente con la pantalla de login.

======================== ENGLISH ========================
File: `src/urna/identity.py`.
This module is part of Urna Engine and is documented to improve
navigation, maintenance, and technical auditability.

Detected components:
  - validate_national_id
  - validate_password
  - normalize_national_id
  - mask_national_id
  - LoginResult
  - check_login

Notes:
- Keep this header in sync with structural changes in the file.
- The regular expressions must match the login screen exactly.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

NATIONAL_ID_LENGTH = 14
PASSWORD_SPECIAL_CHARS = "!@#$%&*?"

# 14 alphanumerics: exactly 12 digits and 2 letters, in any position
_NATIONAL_ID_RE = re.compile(r"^(?=(?:.*[A-Za-z]){2})(?=(?:.*\d){12})[A-Za-z0-9]{14}$", re.ASCII)
_PASSWORD_RE = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[!@#$%&*?])[A-Za-z\d!@#$%&*?]{1,12}$",
    re.ASCII,
)
_NON_ALNUM_RE = re.compile(r"[^0-9a-zA-Z]")

MSG_MISSING_FIELDS = "Por favor, preencha todos os campos."
MSG_INVALID_ID = (
    "O número do BI deve ter 14 caracteres: 12 dígitos e 2 letras (ex: 010065116LA049)."
)
MSG_WEAK_PASSWORD = (
    "A palavra-passe deve ter até 12 caracteres, contendo:\n\n"
    "• 1 letra maiúscula\n• 1 letra minúscula\n• 1 número\n• 1 caractere especial"
)


def validate_national_id(value: str) -> bool:
    """Valida el formato del BI: 14 caracteres, 12 dígitos y 2 letras.

    English: Validate the national-ID format: 14 characters, 12 digits, 2 letters.
    """
    # fullmatch so a trailing newline is not accepted by "$"
    return bool(value) and _NATIONAL_ID_RE.fullmatch(value) is not None


def validate_password(value: str) -> bool:
    """Valida la fuerza de la contraseña.

    1 a 12 caracteres del conjunto ``[A-Za-z0-9!@#$%&*?]`` con al menos una
    minúscula, una mayúscula, un dígito y un carácter especial.

    English:
        Validate credential strength.

        1 to 12 characters from ``[A-Za-z0-9!@#$%&*?]`` with at least one
        lowercase, one uppercase, one digit and one special character.
    """
    return bool(value) and _PASSWORD_RE.fullmatch(value) is not None


def normalize_national_id(raw: str) -> str:
    """Filtro del campo BI: solo alfanuméricos, mayúsculas, máximo 14.

    English: National-ID field filter: alphanumerics only, upper case, at most 14.
    """
    return _NON_ALNUM_RE.sub("", raw or "").upper()[:NATIONAL_ID_LENGTH]


def mask_national_id(value: str) -> str:
    if len(value) <= 4:
        return "*" * len(value)
    return f"{value[:2]}{'*' * (len(value) - 4)}{value[-2:]}"


@dataclass(frozen=True)
class LoginResult:
    """Resultado de la puerta de acceso.

    English: Login gate outcome.
    """

    accepted: bool
    reason: Optional[str] = None
    message: Optional[str] = None


def check_login(national_id: str, password: str) -> LoginResult:
    """Aplica las validaciones de la pantalla de login en orden.

    Campos vacíos, luego formato del BI, luego fuerza de la contraseña. La
    contraseña nunca se registra en logs; el BI se registra enmascarado.

    English:
        Apply the login screen checks in order.

        Empty fields, then national-ID format, then password strength. The
        password is never logged; the ID is logged masked.
    """
    if not national_id or not password:
        return LoginResult(False, "missing_fields", MSG_MISSING_FIELDS)
    if not validate_national_id(national_id):
        logger.info("login_rejected reason=invalid_national_id id=%s", mask_national_id(national_id))
        return LoginResult(False, "invalid_national_id", MSG_INVALID_ID)
    if not validate_password(password):
        logger.info("login_rejected reason=weak_password id=%s", mask_national_id(national_id))
        return LoginResult(False, "weak_password", MSG_WEAK_PASSWORD)
    logger.info("login_accepted id=%s", mask_national_id(national_id))
    return LoginResult(True)
