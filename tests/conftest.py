"""Configuración del pytest para el SDK de Promptly.

`FakeApi` actúa como servidor: registra rutas por (método, path relativo al
tenant) y guarda cada request recibida para inspeccionarla en los asserts.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from promptly.client import Promptly
from promptly.core.config import ClientSettings

TENANT = "demo"
BASE_URL = "https://api.test"
PREFIX = f"/api/{TENANT}"

Responder = Callable[[httpx.Request], httpx.Response]


class FakeApi:
    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], Responder] = {}

    def add(
        self,
        method: str,
        path: str,
        *,
        json_body: Any = None,
        status: int = 200,
        text: str | None = None,
    ) -> None:
        def responder(_: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status, text=text)
            if json_body is None and status == 204:
                return httpx.Response(204)
            return httpx.Response(status, json=json_body)

        self._routes[(method, PREFIX + path)] = responder

    def add_handler(self, method: str, path: str, handler: Responder) -> None:
        self._routes[(method, PREFIX + path)] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self._routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"message": f"No route for {request.method} {request.url.path}"})
        return handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def last_query(self) -> dict[str, str]:
        return dict(self.last.url.params)


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(tenant_id=TENANT, base_url=BASE_URL, timeout=2_000, _env_file=None)


@pytest.fixture
def client(fake_api: FakeApi, settings: ClientSettings) -> Promptly:
    return Promptly(settings=settings, transport=httpx.MockTransport(fake_api))
