"""Detección de remote operations (Terraform Cloud/Enterprise).

Flujo (estrictamente secuencial, cada etapa puede terminar el chequeo):

1. statefile local -> sin fichero: `False`
2. bloque backend -> no remoto: `False`; remoto incompleto: error
3. token de `~/.terraformrc` para el hostname
4. entitlement `operations` de la organización -> sin entitlement: `False`
5. flag `operations` del workspace remoto -> resultado final

La CLI y otros entry-points solo llaman a `check_using_remote_ops` o a
`DefaultRemoteOpsChecker`; no hay estado compartido entre invocaciones.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from adapters.credentials import resolve_token
from adapters.statefile import read_statefile
from adapters.tfe_client import build_tfe_client
from core.config import AppSettings
from core.domain.models import NotRemote, RemoteOpsReport
from core.interfaces.remote_ops import TFEApi
from core.services.backend_resolver import resolve_backend

logger = logging.getLogger(__name__)

TFEClientFactory = Callable[[str, str, AppSettings], TFEApi]


def _default_client_factory(token: str, hostname: str, settings: AppSettings) -> TFEApi:
    return build_tfe_client(token, hostname, settings)


class DefaultRemoteOpsChecker:
    """Implementación por defecto de `RemoteOpsChecker`."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        client_factory: TFEClientFactory | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client_factory = client_factory or _default_client_factory

    def using_remote_ops(self, workspace: str, project_abs_path: str) -> bool:
        return self.inspect(workspace, project_abs_path).using_remote_ops

    def inspect(self, workspace: str, project_abs_path: str | Path) -> RemoteOpsReport:
        """Ejecuta el chequeo completo y devuelve el detalle de cada etapa."""

        report = RemoteOpsReport(project_path=str(project_abs_path), local_workspace=workspace)

        statefile = read_statefile(project_abs_path, self._settings)
        if statefile is None:
            report.not_remote_reason = "statefile does not exist"
            return report

        if statefile.backend is not None:
            report.backend_type = statefile.backend.type

        resolution = resolve_backend(statefile, self._settings.default_hostname)
        if isinstance(resolution, NotRemote):
            logger.debug("determined not using remote backend: %s", resolution.reason)
            report.not_remote_reason = resolution.reason
            return report

        backend = resolution
        report.hostname = backend.hostname
        report.organization = backend.organization

        token = resolve_token(backend.hostname, self._settings)

        logger.debug("calling TFE API to determine entitlements")
        client = self._client_factory(token, backend.hostname, self._settings)
        try:
            entitlements = client.read_entitlements(backend.organization)
            report.entitled = entitlements.operations
            if not entitlements.operations:
                logger.debug(
                    "organization %r does not have the operations entitlement so remote ops are not being used",
                    backend.organization,
                )
                report.not_remote_reason = "organization is not entitled to remote operations"
                return report

            remote_name = backend.remote_workspace_name(workspace)
            report.remote_workspace = remote_name
            logger.debug(
                "organization %r has the operations entitlement, checking if workspace %r has remote ops enabled",
                backend.organization,
                remote_name,
            )
            remote_workspace = client.read_workspace(backend.organization, remote_name)
        finally:
            client.close()

        logger.debug("workspace %r has remote ops set to %s", remote_name, remote_workspace.operations)
        report.using_remote_ops = remote_workspace.operations
        if not remote_workspace.operations:
            report.not_remote_reason = "workspace does not use remote operations"
        return report


def check_using_remote_ops(
    workspace_name: str,
    project_abs_path: str | Path,
    *,
    settings: AppSettings | None = None,
) -> bool:
    """Entry-point público: ¿se ejecutan los comandos de Terraform en TFE?"""

    checker = DefaultRemoteOpsChecker(settings=settings)
    return checker.using_remote_ops(workspace_name, str(project_abs_path))
