"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y logging de todas las peticiones.
- Implementa `core.interfaces.transport.HTTPTransport`, de modo que el
  servicio de autenticación no conoce httpx y los tests pueden inyectar un
  `httpx.MockTransport` o un transporte propio.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import httpx

from core.config import AppSettings
from core.interfaces.transport import HTTPResponse, TransportError

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todos los requests se comporten igual.
    - `transport` permite sustituir la red en tests (`httpx.MockTransport`).
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpxTransport:
    """Transporte HTTP real: un `AsyncClient` por request, sin estado compartido."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def post(self, url: str, body: Mapping[str, str]) -> HTTPResponse:
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.post(url, json=dict(body))
        except httpx.HTTPError as exc:
            logger.warning("POST %s failed without response: %s", url, exc)
            raise TransportError(str(exc)) from exc

        logger.debug("POST %s -> HTTP %s", url, response.status_code)
        return HTTPResponse(
            status_code=response.status_code,
            headers=response.headers,
            body=response.content,
        )
