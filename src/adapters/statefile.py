"""Lectura del statefile local (`.terraform/terraform.tfstate`).

Este módulo es I/O puro: lee y valida. La interpretación del bloque
`backend` vive en `core.services.backend_resolver`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from core.config import AppSettings
from core.domain.errors import StateParseError
from core.domain.models import Statefile

logger = logging.getLogger(__name__)


def statefile_path(project_abs_path: str | Path, settings: AppSettings | None = None) -> Path:
    settings = settings or AppSettings()
    return Path(project_abs_path) / settings.state_file_relpath


def read_statefile(project_abs_path: str | Path, settings: AppSettings | None = None) -> Statefile | None:
    """Carga el statefile del proyecto.

    Devuelve `None` si el fichero no existe (no es un error: Terraform aún no
    se inicializó o el backend es local sin `.terraform/`).
    """

    path = statefile_path(project_abs_path, settings)
    logger.debug("reading statefile %s to check if using TFE remote ops", path)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.warning("statefile %s does not exist, assuming not using remote ops", path)
        return None
    except UnicodeDecodeError as exc:
        raise StateParseError(f"statefile {path} is not valid UTF-8: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise StateParseError(f"parsing statefile {path}: {exc}") from exc

    try:
        return Statefile.model_validate(data)
    except ValidationError as exc:
        raise StateParseError(f"statefile {path} has an unexpected structure: {exc}") from exc
