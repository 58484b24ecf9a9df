"""Tokens de sesión devueltos en los headers de `sign_in`.

La API (devise_token_auth) entrega `access-token`, `client` y `uid` en los
headers de la respuesta 200. Este módulo solo los lee; guardarlos es
responsabilidad de quien consume la sesión.
"""

from __future__ import annotations

from collections.abc import Mapping

import httpx
from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

ACCESS_TOKEN_HEADER = "access-token"
CLIENT_HEADER = "client"
UID_HEADER = "uid"


class AuthState(BaseModel):
    """Tokens opacos de sesión. Un header ausente queda como `None`."""

    model_config = ConfigDict(frozen=True)

    access_token: str | None = Field(default=None, description="Header `access-token`.")
    client: str | None = Field(default=None, description="Header `client`.")
    uid: str | None = Field(default=None, description="Header `uid` (email del inversor).")

    @property
    def is_complete(self) -> bool:
        return all((self.access_token, self.client, self.uid))

    def as_headers(self) -> dict[str, str]:
        """Headers para requests autenticados posteriores (solo los presentes)."""

        pairs = (
            (ACCESS_TOKEN_HEADER, self.access_token),
            (CLIENT_HEADER, self.client),
            (UID_HEADER, self.uid),
        )
        return {name: value for name, value in pairs if value is not None}


def extract_auth_state(headers: Mapping[str, str]) -> AuthState:
    """Extrae `AuthState` de los headers (búsqueda case-insensitive)."""

    normalized = headers if isinstance(headers, httpx.Headers) else httpx.Headers(dict(headers))
    return AuthState(
        access_token=normalized.get(ACCESS_TOKEN_HEADER),
        client=normalized.get(CLIENT_HEADER),
        uid=normalized.get(UID_HEADER),
    )
