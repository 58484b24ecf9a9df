"""Validación local de credenciales (antes de cualquier llamada de red).

Reglas, en orden de precedencia (la primera que falla gana):

1. email vacío
2. email sin forma `local@dominio.tld`
3. password vacío
4. password con espacios

No se recorta nada: `" "` es un email inválido, no vacío, y un password
`" "` reporta espacios, no vacío.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from core.domain.errors import CredentialIssue

_EMAIL_PATTERN = re.compile(r"[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,64}")


@dataclass(frozen=True)
class ValidationOutcome:
    """`valid` (sin `reason`) o `invalid(reason)`."""

    reason: CredentialIssue | None = None

    @property
    def is_valid(self) -> bool:
        return self.reason is None

    @classmethod
    def valid(cls) -> "ValidationOutcome":
        return cls()

    @classmethod
    def invalid(cls, reason: CredentialIssue) -> "ValidationOutcome":
        return cls(reason=reason)


def validate_email(email: str) -> CredentialIssue | None:
    if not email:
        return CredentialIssue.EMPTY_EMAIL
    if _EMAIL_PATTERN.fullmatch(email) is None:
        return CredentialIssue.INVALID_EMAIL
    return None


def validate_password(password: str) -> CredentialIssue | None:
    if not password:
        return CredentialIssue.EMPTY_PASSWORD
    if any(char.isspace() for char in password):
        return CredentialIssue.PASSWORD_WITH_WHITESPACE
    return None


def validate_credentials(email: str, password: str) -> ValidationOutcome:
    """Valida email y password; el email se evalúa primero."""

    issue = validate_email(email) or validate_password(password)
    if issue is None:
        return ValidationOutcome.valid()
    return ValidationOutcome.invalid(issue)
