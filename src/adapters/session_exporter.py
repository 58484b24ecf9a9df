"""Exportación del resultado de `sign_in` a JSON.

El perfil del inversor se exporta completo. De los tokens de sesión solo
queda el `uid`; `access-token` y `client` se reemplazan por un marcador,
salvo que se pidan explícitamente.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from adapters.remote_auth_service import AuthenticatedSession
from core.domain.auth_state import AuthState
from core.domain.models import Investor

REDACTED = "<redacted>"


class SessionSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    uid: str | None
    client: str | None
    access_token: str | None
    complete: bool

    @classmethod
    def from_auth_state(cls, auth_state: AuthState, *, reveal_tokens: bool) -> "SessionSummary":
        def mask(token: str | None) -> str | None:
            if token is None or reveal_tokens:
                return token
            return REDACTED

        return cls(
            uid=auth_state.uid,
            client=mask(auth_state.client),
            access_token=mask(auth_state.access_token),
            complete=auth_state.is_complete,
        )


class SessionExport(BaseModel):
    """Documento escrito por `login --output`."""

    investor: Investor
    session: SessionSummary


def export_session_json(
    *,
    session: AuthenticatedSession,
    output_path: Path,
    reveal_tokens: bool = False,
) -> Path:
    document = SessionExport(
        investor=session.investor,
        session=SessionSummary.from_auth_state(session.auth_state, reveal_tokens=reveal_tokens),
    )
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(document.model_dump_json(indent=2) + "\n", encoding="utf-8")
    return output_path
