"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/ficheros) lean config de forma consistente.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import DEFAULT_HOSTNAME

STATE_FILE_RELPATH = ".terraform/terraform.tfstate"
CREDENTIALS_FILENAME = ".terraformrc"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="TFE_REMOTE_OPS_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Deadline por llamada a la API de TFE (segundos).",
    )
    user_agent: str = Field(
        default="tfe-remote-ops/0.1",
        min_length=1,
        description="User-Agent para la API de TFE.",
    )
    default_hostname: str = Field(
        default=DEFAULT_HOSTNAME,
        min_length=1,
        description="Hostname usado cuando el backend remoto no declara `hostname`.",
    )
    tfe_address: str | None = Field(
        default=None,
        description="Base URL de la API (p.ej. https://tfe.internal). Por defecto https://<hostname>.",
    )
    cli_config_file: Path | None = Field(
        default=None,
        description="Ruta al fichero de credenciales. Por defecto ~/.terraformrc.",
    )
    state_file_relpath: str = Field(
        default=STATE_FILE_RELPATH,
        min_length=1,
        description="Ruta del statefile relativa al proyecto.",
    )
