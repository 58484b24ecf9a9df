"""Tests de la CLI (Typer `CliRunner`), sin red."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner

import cli.main as cli_main
from adapters.http_client import HttpxTransport
from adapters.session_exporter import REDACTED
from core.domain.errors import LoginMessage
from tests.helpers import SUCCESS_HEADERS

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("EMPRESAS_AUTH_ENDPOINT_URL", "https://api.test/sign_in")


def _mock_http(monkeypatch: pytest.MonkeyPatch, response: httpx.Response) -> list[httpx.Request]:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return response

    def factory(settings=None):
        return HttpxTransport(settings, transport=httpx.MockTransport(handler))

    monkeypatch.setattr(cli_main, "HttpxTransport", factory)
    return seen


def test_validate_ok():
    result = runner.invoke(cli_main.app, ["validate", "test@test.com", "12341234"])

    assert result.exit_code == 0
    assert "OK" in result.stdout


def test_validate_reports_message():
    result = runner.invoke(cli_main.app, ["validate", "test@test.com", " "])

    assert result.exit_code == 1
    assert LoginMessage.PASSWORD_WITH_WHITESPACE.value in result.stdout


def test_login_invalid_email_never_hits_network(monkeypatch: pytest.MonkeyPatch):
    seen = _mock_http(monkeypatch, httpx.Response(200))

    result = runner.invoke(
        cli_main.app, ["login", "--email", "a@test", "--password", "12341234", "-q"]
    )

    assert result.exit_code == 1
    assert LoginMessage.INVALID_EMAIL.value in result.stdout
    assert seen == []


def test_login_unauthorized(monkeypatch: pytest.MonkeyPatch):
    _mock_http(monkeypatch, httpx.Response(401))

    result = runner.invoke(
        cli_main.app, ["login", "--email", "test@test.com", "--password", "12341234", "-q"]
    )

    assert result.exit_code == 1
    assert "Falha na autenticação" in result.stdout


def test_login_success_exports_session_with_redacted_tokens(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, valid_json_data: bytes
):
    seen = _mock_http(
        monkeypatch, httpx.Response(200, headers=SUCCESS_HEADERS, content=valid_json_data)
    )
    output = tmp_path / "out" / "session.json"

    result = runner.invoke(
        cli_main.app,
        [
            "login",
            "--email",
            "testeapple@ioasys.com.br",
            "--password",
            "12341234",
            "--output",
            str(output),
            "--show-session",
            "-q",
        ],
    )

    assert result.exit_code == 0, result.stdout
    assert str(seen[0].url) == "https://api.test/sign_in"
    assert "Test Apple" in result.stdout
    assert "9RMMRW0AGQlY2LSlMom5IQ" in result.stdout
    exported = json.loads(output.read_text(encoding="utf-8"))
    assert exported["investor"]["investor_name"] == "Test Apple"
    assert exported["investor"]["portfolio"]["enterprises"] == []
    assert exported["session"] == {
        "uid": "testeapple@ioasys.com.br",
        "client": REDACTED,
        "access_token": REDACTED,
        "complete": True,
    }
    assert "fqnQtzqRNfDlDdo05IWfpQ" not in output.read_text(encoding="utf-8")


def test_setup_writes_user_env(tmp_path: Path):
    result = runner.invoke(cli_main.app, ["setup"], input="https://new.test/sign_in\n5\n")

    assert result.exit_code == 0, result.stdout
    env_text = (tmp_path / "config" / "empresas" / ".env").read_text(encoding="utf-8")
    assert "EMPRESAS_AUTH_ENDPOINT_URL=https://new.test/sign_in" in env_text
    assert "EMPRESAS_HTTP_TIMEOUT_SECONDS=5.0" in env_text


def test_login_failure_writes_no_output(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    _mock_http(monkeypatch, httpx.Response(200, content=b'{"investor": {"id": "1"}}'))
    output = tmp_path / "session.json"

    result = runner.invoke(
        cli_main.app,
        ["login", "--email", "test@test.com", "--password", "12341234", "-o", str(output), "-q"],
    )

    assert result.exit_code == 1
    assert not output.exists()


def test_setup_rejects_invalid_endpoint(tmp_path: Path):
    result = runner.invoke(cli_main.app, ["setup"], input="empresas.test/sign_in\n5\n")

    assert result.exit_code != 0
    assert not (tmp_path / "config" / "empresas" / ".env").exists()
