"""Cliente de la API v2 de Terraform Cloud/Enterprise.

Endpoints usados:
- GET /api/v2/ping
- GET /api/v2/organizations/{org}/entitlement-set
- GET /api/v2/organizations/{org}/workspaces/{name}

Sin reintentos ni rate limiting: cualquier fallo se propaga como
`RemoteAPIError` y el llamador decide.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.errors import ClientError, RemoteAPIError, UnexpectedResponseError
from core.domain.models import Entitlements, RemoteWorkspace

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v2"


class TFEClient:
    """Implementación httpx de `core.interfaces.remote_ops.TFEApi`."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    def __enter__(self) -> "TFEClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _get_data(self, path: str, *, context: str) -> dict[str, Any]:
        try:
            resp = self._client.get(API_PREFIX + path)
        except httpx.HTTPError as exc:
            raise RemoteAPIError(f"{context}: {exc}") from exc

        if not resp.is_success:
            raise RemoteAPIError(
                f"{context}: GET {path} returned HTTP {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            payload = resp.json()
        except ValueError as exc:
            raise RemoteAPIError(f"{context}: response body is not JSON") from exc

        data = payload.get("data") if isinstance(payload, dict) else None
        if not data or not isinstance(data, dict):
            raise UnexpectedResponseError(f"{context}: got empty response from GET {path}")
        return data

    def ping(self) -> None:
        """Verifica que la API responde (usado por `doctor`)."""

        try:
            resp = self._client.get(API_PREFIX + "/ping")
        except httpx.HTTPError as exc:
            raise RemoteAPIError(f"pinging TFE API: {exc}") from exc
        if resp.status_code >= 400:
            raise RemoteAPIError(
                f"pinging TFE API: HTTP {resp.status_code}",
                status_code=resp.status_code,
            )

    def read_entitlements(self, organization: str) -> Entitlements:
        path = f"/organizations/{quote(organization, safe='')}/entitlement-set"
        data = self._get_data(path, context="determining remote ops entitlement")
        attributes = data.get("attributes")
        if not isinstance(attributes, dict):
            raise UnexpectedResponseError("determining remote ops entitlement: entitlement set has no attributes")
        return Entitlements.from_api_attributes(organization, attributes)

    def read_workspace(self, organization: str, workspace: str) -> RemoteWorkspace:
        path = f"/organizations/{quote(organization, safe='')}/workspaces/{quote(workspace, safe='')}"
        data = self._get_data(path, context="determining if workspace uses remote ops")
        attributes = data.get("attributes")
        if not isinstance(attributes, dict):
            raise UnexpectedResponseError("determining if workspace uses remote ops: workspace has no attributes")
        return RemoteWorkspace.from_api_attributes(organization, workspace, attributes)


def api_address(hostname: str, settings: AppSettings | None = None) -> str:
    settings = settings or AppSettings()
    if settings.tfe_address:
        return settings.tfe_address.rstrip("/")
    return f"https://{hostname}"


def build_tfe_client(
    token: str,
    hostname: str,
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> TFEClient:
    """Construye un `TFEClient` autenticado.

    Falla con `ClientError` si el token está vacío o la dirección no es una URL válida.
    """

    settings = settings or AppSettings()
    if not token:
        raise ClientError("creating TFE API client: token is empty")

    address = api_address(hostname, settings)
    try:
        client = build_client(settings, base_url=address, token=token, transport=transport)
    except (httpx.InvalidURL, ValueError) as exc:
        raise ClientError(f"creating TFE API client for {address!r}: {exc}") from exc

    logger.debug("created TFE API client for %s", address)
    return TFEClient(client)
