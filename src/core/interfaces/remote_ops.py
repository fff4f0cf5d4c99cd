"""Contratos del chequeo de remote ops.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el cliente HTTP de TFE por un fake en tests sin acoplar
  el Core a httpx.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Entitlements, RemoteWorkspace


@runtime_checkable
class TFEApi(Protocol):
    """Superficie mínima de la API de Terraform Cloud/Enterprise que usamos."""

    def read_entitlements(self, organization: str) -> Entitlements:
        """Entitlements de la organización."""

        ...

    def read_workspace(self, organization: str, workspace: str) -> RemoteWorkspace:
        """Workspace remoto por organización + nombre."""

        ...

    def close(self) -> None:
        ...


@runtime_checkable
class RemoteOpsChecker(Protocol):
    """Responde si un proyecto local ejecuta sus comandos en TFE.

    Reglas de diseño:
    - Síncrono: cada etapa bloquea en I/O antes de pasar a la siguiente.
    - Sin estado compartido; varias invocaciones pueden correr en paralelo.
    """

    def using_remote_ops(self, workspace: str, project_abs_path: str) -> bool:
        ...
