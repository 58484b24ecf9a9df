"""Fixtures compartidas.

Cada test recibe su propio transporte; no hay stubs globales.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from adapters.remote_auth_service import RemoteAuthService
from core.domain.models import Investor, Portfolio
from tests.helpers import ENDPOINT_URL, HTTPTransportSpy

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def transport() -> HTTPTransportSpy:
    return HTTPTransportSpy()


@pytest.fixture
def service(transport: HTTPTransportSpy) -> RemoteAuthService:
    return RemoteAuthService(endpoint_url=ENDPOINT_URL, transport=transport)


@pytest.fixture
def valid_json_data() -> bytes:
    return (FIXTURES / "valid_investor.json").read_bytes()


@pytest.fixture
def bare_investor_data(valid_json_data: bytes) -> bytes:
    """Mismo inversor sin el sobre `{"investor": ...}`."""
    return json.dumps(json.loads(valid_json_data)["investor"]).encode("utf-8")


@pytest.fixture
def valid_investor() -> Investor:
    return Investor(
        id=1,
        investor_name="Test Apple",
        email="testeapple@ioasys.com.br",
        city="BH",
        country="Brasil",
        balance=350000.0,
        photo="/uploads/investor/photo/1/cropped4991818370070749122.jpg",
        portfolio=Portfolio(enterprises_number=0, enterprises=()),
        portfolio_value=350000.0,
        first_access=False,
        super_angel=False,
    )
