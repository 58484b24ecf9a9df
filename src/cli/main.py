"""CLI principal (Typer).

Comandos:
- `login`: valida, autentica y muestra el inversor.
- `validate`: solo validación local, sin red.
- `setup`: valida y guarda endpoint/timeout en el .env del usuario.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from adapters.http_client import HttpxTransport
from adapters.remote_auth_service import AuthenticatedSession, RemoteAuthService
from adapters.session_exporter import export_session_json
from cli.ui_components import build_investor_table, build_session_panel, print_banner
from core.config import AppSettings, save_connection_settings
from core.domain.models import Investor
from core.services.credential_validator import validate_credentials
from core.services.login_orchestrator import LoginOrchestrator, LoginOutcome

app = typer.Typer(no_args_is_help=True, help="Login de inversores contra la API Empresas.")

_console = Console()


def _configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


class _SessionRecorder:
    """Adapta `sign_in` al contrato `authenticate` y guarda la sesión obtenida."""

    def __init__(self, service: RemoteAuthService) -> None:
        self._service = service
        self.session: AuthenticatedSession | None = None

    async def authenticate(self, email: str, password: str) -> Investor:
        self.session = await self._service.sign_in(email, password)
        return self.session.investor


async def _run_login(
    orchestrator: LoginOrchestrator, email: str, password: str
) -> LoginOutcome:
    return await orchestrator.do_login(email, password)


@app.command()
def login(
    email: str = typer.Option(..., prompt=True, help="Email del inversor."),
    password: str = typer.Option(..., prompt=True, hide_input=True, help="Password."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Exporta inversor y sesión a JSON."),
    reveal_tokens: bool = typer.Option(
        False, "--reveal-tokens", help="Incluye access-token y client sin ocultar en el JSON."
    ),
    show_session: bool = typer.Option(False, "--show-session", help="Muestra los tokens de sesión."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Sin banner."),
) -> None:
    """Autentica y muestra el perfil del inversor."""

    settings = AppSettings()
    _configure_logging(settings)
    if not quiet:
        print_banner(_console)

    recorder = _SessionRecorder(
        RemoteAuthService(settings.auth_endpoint_url, HttpxTransport(settings))
    )
    orchestrator = LoginOrchestrator(recorder)
    orchestrator.on_validation_error = lambda message: _console.print(f"[red]{message}[/red]")
    orchestrator.on_authentication_error = lambda message: _console.print(f"[red]{message}[/red]")
    orchestrator.on_investor_login = lambda investor: _console.print(build_investor_table(investor))

    asyncio.run(_run_login(orchestrator, email, password))
    session = recorder.session
    if session is None:
        raise typer.Exit(code=1)

    if show_session:
        _console.print(build_session_panel(session.auth_state))
    if output is not None:
        path = export_session_json(session=session, output_path=output, reveal_tokens=reveal_tokens)
        _console.print(f"[green]Saved session to:[/green] {path}")


@app.command()
def validate(email: str, password: str) -> None:
    """Valida email y password sin llamar a la API."""

    outcome = validate_credentials(email, password)
    if outcome.reason is not None:
        _console.print(f"[red]{outcome.reason.message.value}[/red]")
        raise typer.Exit(code=1)
    _console.print("[green]OK[/green]")


@app.command()
def setup() -> None:
    """Configuración interactiva (se guarda en el .env del usuario)."""

    current = AppSettings()
    endpoint = typer.prompt("Auth endpoint URL", default=current.auth_endpoint_url).strip()
    timeout = typer.prompt("HTTP timeout (seconds)", default=current.http_timeout_seconds, type=float)

    try:
        env_path = save_connection_settings(endpoint, timeout)
    except ValidationError as exc:
        problems = "; ".join(error["msg"] for error in exc.errors())
        raise typer.BadParameter(problems) from exc
    _console.print(f"[green]Saved config to:[/green] {env_path}")


def run() -> None:
    app()
