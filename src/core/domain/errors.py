"""Errores y mensajes del flujo de login.

Por qué enums:
- Los conjuntos de errores son cerrados; un `Enum` hace explícito que cada
  intento fallido produce exactamente un tipo.
- Los mensajes para el usuario viven junto al error que los origina.
"""

from __future__ import annotations

from enum import Enum


class LoginMessage(str, Enum):
    """Mensajes mostrados al usuario (pt-BR, igual que la app móvil)."""

    EMPTY_EMAIL = "Email não pode ser vazio."
    INVALID_EMAIL = "Email inválido."
    EMPTY_PASSWORD = "Password não pode ser vazio."
    PASSWORD_WITH_WHITESPACE = "Password não pode conter espaços."
    AUTHENTICATION_FAILURE = "Falha na autenticação. Verifique email e password."


class CredentialIssue(str, Enum):
    """Motivo por el que unas credenciales no pasan la validación local."""

    EMPTY_EMAIL = "empty_email"
    INVALID_EMAIL = "invalid_email"
    EMPTY_PASSWORD = "empty_password"
    PASSWORD_WITH_WHITESPACE = "password_with_whitespace"

    @property
    def message(self) -> LoginMessage:
        return LoginMessage[self.name]


class AuthenticationErrorKind(str, Enum):
    """Clasificación del resultado fallido de una llamada de autenticación."""

    CONNECTIVITY = "connectivity"
    INVALID_DATA = "invalid_data"
    UNAUTHORIZED = "unauthorized"
    BAD_REQUEST = "bad_request"
    FORBIDDEN = "forbidden"
    GENERIC = "generic"

    @classmethod
    def from_status_code(cls, status_code: int) -> "AuthenticationErrorKind":
        """Map a non-200 HTTP status to its error kind."""

        return _STATUS_KINDS.get(status_code, cls.GENERIC)


_STATUS_KINDS: dict[int, AuthenticationErrorKind] = {
    400: AuthenticationErrorKind.BAD_REQUEST,
    401: AuthenticationErrorKind.UNAUTHORIZED,
    403: AuthenticationErrorKind.FORBIDDEN,
}


class AuthenticationError(Exception):
    """Fallo terminal de un intento de autenticación."""

    def __init__(self, kind: AuthenticationErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(detail or kind.value)
