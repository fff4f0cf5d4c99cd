"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- El statefile y las respuestas de TFE son JSON con campos opcionales; los
  modelos documentan qué campos importan y normalizan ausencias.
- Los objetos derivados (`RemoteBackendDescriptor`, `NotRemote`) son
  inmutables durante todo un chequeo.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

DEFAULT_HOSTNAME = "app.terraform.io"


class StateWorkspace(BaseModel):
    """Una entrada de `backend.config.workspaces`."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    prefix: str = ""

    @field_validator("name", "prefix", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class StateBackendConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    hostname: str | None = None
    organization: str | None = None
    workspaces: list[StateWorkspace] | None = None

    @field_validator("workspaces", mode="before")
    @classmethod
    def _single_block_as_list(cls, value: Any) -> Any:
        # Terraform >= 0.12 escribe el bloque como objeto, no como lista.
        if isinstance(value, dict):
            return [value]
        return value


class StateBackend(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str | None = None
    config: StateBackendConfig | None = None


class Statefile(BaseModel):
    """Subconjunto de `.terraform/terraform.tfstate` que nos interesa."""

    model_config = ConfigDict(extra="ignore")

    backend: StateBackend | None = None


@dataclass(frozen=True)
class RemoteBackendDescriptor:
    """Backend "remote" ya validado.

    Exactamente uno de `workspace_name` / `workspace_prefix` está en uso; si
    hay prefijo, gana el prefijo.
    """

    hostname: str
    organization: str
    workspace_name: str = ""
    workspace_prefix: str = ""

    def remote_workspace_name(self, local_workspace: str) -> str:
        """Nombre del workspace en TFE para el workspace local de la CLI."""

        if self.workspace_prefix:
            return self.workspace_prefix + local_workspace
        return self.workspace_name


@dataclass(frozen=True)
class NotRemote:
    """Resultado negativo legítimo: no hay backend remoto."""

    reason: str


BackendResolution = RemoteBackendDescriptor | NotRemote


class CredentialsFile(BaseModel):
    """Contenido relevante de `~/.terraformrc`.

    `credentials` mapea hostname -> bloque de claves. Solo se consume `token`.
    """

    model_config = ConfigDict(extra="ignore")

    credentials: dict[str, dict[str, Any]] = Field(default_factory=dict)


class _JsonApiAttributes(BaseModel):
    model_config = ConfigDict(extra="ignore")

    operations: bool = False


class Entitlements(BaseModel):
    """`entitlement-sets` de una organización."""

    model_config = ConfigDict(extra="ignore")

    organization: str
    operations: bool = False

    @classmethod
    def from_api_attributes(cls, organization: str, attributes: dict[str, Any]) -> "Entitlements":
        attrs = _JsonApiAttributes.model_validate(attributes)
        return cls(organization=organization, operations=attrs.operations)


class RemoteWorkspace(BaseModel):
    """Workspace remoto; `operations` indica si ejecuta en TFE."""

    model_config = ConfigDict(extra="ignore")

    organization: str
    name: str
    operations: bool = False
    execution_mode: str | None = None

    @classmethod
    def from_api_attributes(cls, organization: str, name: str, attributes: dict[str, Any]) -> "RemoteWorkspace":
        attrs = _JsonApiAttributes.model_validate(attributes)
        mode = attributes.get("execution-mode")
        return cls(
            organization=organization,
            name=name,
            operations=attrs.operations,
            execution_mode=mode if isinstance(mode, str) else None,
        )


class RemoteOpsReport(BaseModel):
    """Resumen de un chequeo completo (lo que la CLI imprime)."""

    project_path: str
    local_workspace: str
    backend_type: str | None = Field(
        default=None,
        description="Tipo de backend leído del statefile (None si no hay bloque).",
    )
    not_remote_reason: str | None = None
    hostname: str | None = None
    organization: str | None = None
    remote_workspace: str | None = Field(
        default=None,
        description="Nombre efectivo del workspace en TFE (prefijo + workspace local o nombre exacto).",
    )
    entitled: bool | None = Field(
        default=None,
        description="Entitlement `operations` de la organización (None si no se consultó).",
    )
    using_remote_ops: bool = False
