"""Configuración compartida de pytest.

English:
    Shared pytest configuration: puts ``src/`` on ``sys.path`` so the
    ``urna`` package imports without an editable install.
"""

from __future__ import annotations

from pathlib import Path
import sys

REPO_ROOT = Path(__file__).resolve().parent
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))
