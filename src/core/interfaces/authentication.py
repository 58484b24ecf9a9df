"""Contrato del servicio de autenticación consumido por el orquestador."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Investor


@runtime_checkable
class AuthenticationService(Protocol):
    """Autentica credenciales ya validadas.

    Devuelve el `Investor` decodificado o lanza
    `core.domain.errors.AuthenticationError` con un único `kind`.
    """

    async def authenticate(self, email: str, password: str) -> Investor:
        ...
