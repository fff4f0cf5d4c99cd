"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y autenticación para la API de TFE.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings

JSON_API_MEDIA_TYPE = "application/vnd.api+json"


def build_client(
    settings: AppSettings | None = None,
    *,
    base_url: str,
    token: str,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` autenticado con defaults seguros.

    El timeout es el deadline de cada llamada: la API nunca bloquea
    indefinidamente.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": JSON_API_MEDIA_TYPE,
        "Authorization": f"Bearer {token}",
    }
    return httpx.Client(
        base_url=base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
