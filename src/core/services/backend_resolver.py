"""Resolución del bloque `backend` del statefile.

Devuelve un resultado etiquetado: `RemoteBackendDescriptor` cuando el
backend es "remote" y está completo, `NotRemote` cuando no aplica. Un
backend "remote" incompleto es un error de configuración, nunca un `False`
silencioso.
"""

from __future__ import annotations

import logging

from core.domain.errors import BackendConfigError
from core.domain.models import (
    DEFAULT_HOSTNAME,
    BackendResolution,
    NotRemote,
    RemoteBackendDescriptor,
    Statefile,
)

logger = logging.getLogger(__name__)

REMOTE_BACKEND_TYPE = "remote"


def resolve_backend(statefile: Statefile, default_hostname: str = DEFAULT_HOSTNAME) -> BackendResolution:
    backend = statefile.backend
    if backend is None:
        logger.debug("statefile had no backend block so remote ops are not being used")
        return NotRemote(reason="statefile has no backend block")

    if backend.type != REMOTE_BACKEND_TYPE:
        logger.debug("statefile backend type is %r, not %r so remote ops are not being used", backend.type, REMOTE_BACKEND_TYPE)
        return NotRemote(reason=f"backend type is {backend.type!r}")

    config = backend.config
    if config is None:
        raise BackendConfigError('statefile backend is of type "remote" but has no backend.config block')

    if not config.organization:
        raise BackendConfigError('statefile backend is of type "remote" but has no organization set')

    if not config.workspaces:
        raise BackendConfigError('statefile backend is of type "remote" but has no workspaces set')

    # Un statefile describe un único selector de workspace.
    workspace = config.workspaces[0]
    if len(config.workspaces) > 1:
        logger.debug("statefile declares %d workspace entries, only the first is used", len(config.workspaces))
    if not workspace.name and not workspace.prefix:
        raise BackendConfigError(
            'statefile backend is of type "remote" but workspace has neither name nor prefix set'
        )

    descriptor = RemoteBackendDescriptor(
        hostname=config.hostname or default_hostname,
        organization=config.organization,
        workspace_name=workspace.name,
        workspace_prefix=workspace.prefix,
    )
    logger.debug(
        "determined using remote backend with hostname: %r, org: %r, workspace name: %r, workspace prefix: %r",
        descriptor.hostname,
        descriptor.organization,
        descriptor.workspace_name,
        descriptor.workspace_prefix,
    )
    return descriptor
