"""Orquestación del login: validación → autenticación → notificación.

Es el "view model" de la pantalla de login sin bindings de UI. Las capas
de presentación se suscriben con callbacks (`LoginHooks`) o simplemente
esperan la `asyncio.Task` que devuelve `do_login`.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Callable

from core.domain.errors import (
    AuthenticationError,
    AuthenticationErrorKind,
    CredentialIssue,
    LoginMessage,
)
from core.domain.models import Investor
from core.interfaces.authentication import AuthenticationService
from core.services.credential_validator import validate_credentials

logger = logging.getLogger(__name__)


@dataclass
class LoginHooks:
    """Observers opcionales para la UI (un único aviso por `do_login`)."""

    validation_error: Callable[[str], None] | None = None
    authentication_error: Callable[[str], None] | None = None
    investor_login: Callable[[Investor], None] | None = None


@dataclass(frozen=True)
class LoginOutcome:
    """Resultado de un intento: o `investor`, o `message` con su causa."""

    investor: Investor | None = None
    message: str | None = None
    issue: CredentialIssue | None = None
    error_kind: AuthenticationErrorKind | None = None

    @property
    def succeeded(self) -> bool:
        return self.investor is not None


@dataclass
class LoginOrchestrator:
    authentication_service: AuthenticationService
    hooks: LoginHooks = field(default_factory=LoginHooks)

    @property
    def on_validation_error(self) -> Callable[[str], None] | None:
        return self.hooks.validation_error

    @on_validation_error.setter
    def on_validation_error(self, callback: Callable[[str], None] | None) -> None:
        self.hooks.validation_error = callback

    @property
    def on_authentication_error(self) -> Callable[[str], None] | None:
        return self.hooks.authentication_error

    @on_authentication_error.setter
    def on_authentication_error(self, callback: Callable[[str], None] | None) -> None:
        self.hooks.authentication_error = callback

    @property
    def on_investor_login(self) -> Callable[[Investor], None] | None:
        return self.hooks.investor_login

    @on_investor_login.setter
    def on_investor_login(self, callback: Callable[[Investor], None] | None) -> None:
        self.hooks.investor_login = callback

    def do_login(self, email: str, password: str) -> asyncio.Task[LoginOutcome]:
        """Programa un intento de login en el loop en ejecución.

        Devuelve antes de notificar: un observer asignado justo después de la
        llamada (antes de ceder el loop) recibe el resultado. Las llamadas
        sucesivas notifican en el mismo orden en que se hicieron.
        """

        return asyncio.get_running_loop().create_task(self.login(email, password))

    async def login(self, email: str, password: str) -> LoginOutcome:
        issue = validate_credentials(email, password).reason
        if issue is not None:
            message = issue.message.value
            logger.debug("login rejected locally: %s", issue.value)
            self._notify(self.hooks.validation_error, message)
            return LoginOutcome(message=message, issue=issue)

        try:
            investor = await self.authentication_service.authenticate(email, password)
        except AuthenticationError as exc:
            # Todos los tipos comparten el mismo mensaje para el usuario.
            message = LoginMessage.AUTHENTICATION_FAILURE.value
            logger.info("login failed: %s", exc.kind.value)
            self._notify(self.hooks.authentication_error, message)
            return LoginOutcome(message=message, error_kind=exc.kind)

        self._notify(self.hooks.investor_login, investor)
        return LoginOutcome(investor=investor)

    @staticmethod
    def _notify(callback: Callable | None, value: object) -> None:
        if callback is None:
            logger.debug("no observer attached; dropping notification")
            return
        callback(value)
