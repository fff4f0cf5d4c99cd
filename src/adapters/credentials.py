"""Credenciales de la CLI de Terraform (`~/.terraformrc`).

Formato (HCL):

    credentials "app.terraform.io" {
      token = "xxxxxx.atlasv1.zzzzzz"
    }

Solo leemos; nunca escribimos ni cacheamos tokens.
"""

from __future__ import annotations

import logging
from pathlib import Path

import hcl
from pydantic import ValidationError

from core.config import CREDENTIALS_FILENAME, AppSettings
from core.domain.errors import (
    CredentialsFileError,
    CredentialsNotFoundError,
    CredentialsParseError,
    InvalidTokenError,
)
from core.domain.models import CredentialsFile

logger = logging.getLogger(__name__)


def credentials_file_path(settings: AppSettings | None = None) -> Path:
    settings = settings or AppSettings()
    if settings.cli_config_file is not None:
        return settings.cli_config_file
    try:
        home = Path.home()
    except RuntimeError as exc:
        raise CredentialsFileError(f"retrieving token from {CREDENTIALS_FILENAME} file: {exc}") from exc
    return home / CREDENTIALS_FILENAME


def load_credentials_file(path: Path) -> CredentialsFile:
    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise CredentialsParseError(f"parsing {path} to retrieve TFE token: not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise CredentialsFileError(f"retrieving token from {path}: {exc}") from exc

    try:
        obj = hcl.loads(raw)
    except ValueError as exc:
        raise CredentialsParseError(f"parsing {path} to retrieve TFE token: {exc}") from exc

    try:
        return CredentialsFile.model_validate(obj)
    except ValidationError as exc:
        raise CredentialsParseError(f"decoding {path} to retrieve TFE token: {exc}") from exc


def resolve_token(hostname: str, settings: AppSettings | None = None) -> str:
    """Token de API para `hostname`.

    Errores:
    - fichero ausente/ilegible -> `CredentialsFileError`
    - HCL inválido -> `CredentialsParseError`
    - sin bloque para el hostname o sin `token` -> `CredentialsNotFoundError`
    - `token` que no es texto -> `InvalidTokenError`
    """

    path = credentials_file_path(settings)
    logger.debug("retrieving TFE token from %s", path)
    rc_file = load_credentials_file(path)

    host_conf = rc_file.credentials.get(hostname)
    if host_conf is None:
        raise CredentialsNotFoundError(
            f"found no credentials config for hostname {hostname!r} in {str(path)!r}",
            hostname=hostname,
            path=str(path),
        )
    if "token" not in host_conf:
        raise CredentialsNotFoundError(
            f"found no token key in config for hostname {hostname!r} in {str(path)!r}",
            hostname=hostname,
            path=str(path),
        )

    token = host_conf["token"]
    if not isinstance(token, str):
        raise InvalidTokenError(
            f"token for hostname {hostname!r} in {str(path)!r} must be a string, got {type(token).__name__}"
        )

    logger.debug("successfully found token for hostname %r", hostname)
    return token
