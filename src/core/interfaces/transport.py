"""Contrato del transporte HTTP usado por el servicio de autenticación.

Por qué Protocol:
- El servicio depende de una abstracción, no de httpx; los tests inyectan
  un transporte propio por instancia, sin estado global.
- Cualquier objeto con `post` asíncrono sirve (duck typing).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


class TransportError(Exception):
    """No se recibió respuesta HTTP (red caída, DNS, timeout...)."""


@dataclass(frozen=True)
class HTTPResponse:
    """Respuesta HTTP mínima: status, headers y cuerpo crudo."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""


@runtime_checkable
class HTTPTransport(Protocol):
    """Contrato mínimo de transporte.

    Reglas de diseño:
    - `post` es asíncrono y envía `body` como JSON.
    - Un fallo sin respuesta se señala con `TransportError`; cualquier
      status (incluidos 4xx/5xx) se devuelve como `HTTPResponse`.
    """

    async def post(self, url: str, body: Mapping[str, str]) -> HTTPResponse:
        ...
