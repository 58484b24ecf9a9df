"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.auth_state import AuthState
from core.domain.models import Investor


def print_banner(console: Console) -> None:
    title = Text("Empresas", style="bold cyan")
    subtitle = Text("Login de inversores", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_investor_table(investor: Investor) -> Table:
    """Tabla Rich con el perfil y el resumen del portafolio."""

    table = Table(title=investor.investor_name, show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("ID", str(investor.id))
    table.add_row("Email", investor.email)
    table.add_row("Location", f"{investor.city}, {investor.country}")
    table.add_row("Balance", f"{investor.balance:,.2f}")
    table.add_row("Portfolio value", f"{investor.portfolio_value:,.2f}")
    table.add_row("Enterprises", str(investor.portfolio.enterprises_number))
    for enterprise in investor.portfolio.enterprises:
        table.add_row("", f"- {enterprise.enterprise_name}")
    table.add_row("First access", "yes" if investor.first_access else "no")
    table.add_row("Super angel", "yes" if investor.super_angel else "no")
    return table


def build_session_panel(auth_state: AuthState) -> Panel:
    body = Text()
    body.append(f"uid: {auth_state.uid or '-'}\n")
    body.append(f"client: {auth_state.client or '-'}\n")
    body.append(f"access-token: {auth_state.access_token or '-'}")
    style = "green" if auth_state.is_complete else "yellow"
    return Panel(body, title=Text("Sesión", style=f"bold {style}"), border_style=style)
