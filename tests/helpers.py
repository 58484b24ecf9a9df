"""Dobles de prueba compartidos por los tests."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass, field

from core.interfaces.transport import HTTPResponse, TransportError

ENDPOINT_URL = "https://test-authentication.com"

SUCCESS_HEADERS = {
    "x-content-type-options": "nosniff",
    "access-token": "fqnQtzqRNfDlDdo05IWfpQ",
    "Vary": "Accept-Encoding",
    "client": "9RMMRW0AGQlY2LSlMom5IQ",
    "expiry": "1581782592",
    "Content-Type": "application/json; charset=utf-8",
    "Server": "nginx/1.13.12",
    "token-type": "Bearer",
    "uid": "testeapple@ioasys.com.br",
    "Cache-Control": "max-age=0, private, must-revalidate",
}


@dataclass
class PostRequest:
    url: str
    body: dict[str, str]
    result: asyncio.Future


@dataclass
class HTTPTransportSpy:
    """Transporte que queda pendiente hasta que el test lo completa."""

    requests: list[PostRequest] = field(default_factory=list)

    async def post(self, url: str, body: Mapping[str, str]) -> HTTPResponse:
        future: asyncio.Future[HTTPResponse] = asyncio.get_running_loop().create_future()
        self.requests.append(PostRequest(url=url, body=dict(body), result=future))
        return await future

    def complete_with_error(self, error: Exception | None = None, index: int = 0) -> None:
        self.requests[index].result.set_exception(error or TransportError("offline"))

    def complete_with_status(
        self,
        status_code: int,
        data: bytes = b"",
        headers: Mapping[str, str] | None = None,
        index: int = 0,
    ) -> None:
        self.requests[index].result.set_result(
            HTTPResponse(status_code=status_code, headers=dict(headers or {}), body=data)
        )
