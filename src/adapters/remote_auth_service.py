"""Servicio de autenticación remota (`POST /users/auth/sign_in`).

Responsabilidades:
- Construir el body `{"email", "password"}` sin modificar los valores.
- Enviar exactamente un POST por llamada a través del transporte inyectado.
- Clasificar el resultado en un único `AuthenticationErrorKind` o decodificar
  el `Investor` (y, en `sign_in`, los tokens de sesión de los headers).

Sin reintentos ni caché: dos llamadas idénticas hacen dos POST y se
clasifican de forma independiente.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from pydantic import ValidationError

from core.domain.auth_state import AuthState, extract_auth_state
from core.domain.errors import AuthenticationError, AuthenticationErrorKind
from core.domain.models import Investor, InvestorEnvelope
from core.interfaces.transport import HTTPResponse, HTTPTransport, TransportError

logger = logging.getLogger(__name__)

_OK = 200


def build_login_body(email: str, password: str) -> dict[str, str]:
    return {"email": email, "password": password}


def decode_investor(data: bytes) -> Investor:
    """Decodifica el JSON de `sign_in`, con o sin el sobre `{"investor": ...}`.

    Lanza `ValueError` (JSON inválido) o `pydantic.ValidationError` (forma
    inválida); nunca devuelve un `Investor` parcial.
    """

    payload = json.loads(data)
    if isinstance(payload, dict) and "investor" in payload:
        return InvestorEnvelope.model_validate_json(data).investor
    return Investor.model_validate_json(data)


@dataclass(frozen=True)
class AuthenticatedSession:
    """Resultado completo de un login: inversor + tokens de sesión."""

    investor: Investor
    auth_state: AuthState


class RemoteAuthService:
    """Implementa `core.interfaces.authentication.AuthenticationService` sobre HTTP."""

    def __init__(self, endpoint_url: str, transport: HTTPTransport) -> None:
        self.endpoint_url = endpoint_url
        self._transport = transport

    async def authenticate(self, email: str, password: str) -> Investor:
        response = await self._post(email, password)
        return self._classify(response)

    async def sign_in(self, email: str, password: str) -> AuthenticatedSession:
        """Como `authenticate`, pero también devuelve el `AuthState` de los headers."""

        response = await self._post(email, password)
        investor = self._classify(response)
        auth_state = extract_auth_state(response.headers)
        if not auth_state.is_complete:
            logger.warning("sign_in succeeded without complete session headers")
        return AuthenticatedSession(investor=investor, auth_state=auth_state)

    async def _post(self, email: str, password: str) -> HTTPResponse:
        logger.debug("authenticating %s against %s", email, self.endpoint_url)
        try:
            return await self._transport.post(self.endpoint_url, build_login_body(email, password))
        except TransportError as exc:
            raise AuthenticationError(AuthenticationErrorKind.CONNECTIVITY, str(exc)) from exc

    def _classify(self, response: HTTPResponse) -> Investor:
        if response.status_code != _OK:
            kind = AuthenticationErrorKind.from_status_code(response.status_code)
            logger.info("authentication rejected: HTTP %s (%s)", response.status_code, kind.value)
            raise AuthenticationError(kind, f"HTTP {response.status_code}")

        try:
            return decode_investor(response.body)
        except (ValueError, ValidationError) as exc:
            logger.warning("undecodable sign_in payload: %s", exc)
            raise AuthenticationError(AuthenticationErrorKind.INVALID_DATA, str(exc)) from exc
