"""Facade principal del SDK.

Ejemplo:

    client = Promptly("my-site")
    posts = await client.blog.list()
    await client.auth.login({"email": "user@example.com", "password": "secret"})
    orders = await client.shop.list_orders()
"""

from __future__ import annotations

from typing import Any

import httpx

from promptly.adapters.http_client import HttpClient
from promptly.adapters.resources import (
    AuthResource,
    BlogResource,
    BoardsResource,
    EntitiesResource,
    FormsResource,
    MediaResource,
    ReservationResource,
    ShopResource,
)
from promptly.core.config import ClientSettings


def _build_settings(
    tenant_id: str | None,
    base_url: str | None,
    timeout: int | None,
) -> ClientSettings:
    # Los argumentos explícitos tienen prioridad sobre PROMPTLY_* y los .env.
    overrides: dict[str, Any] = {}
    if tenant_id is not None:
        overrides["tenant_id"] = tenant_id
    if base_url:
        overrides["base_url"] = base_url
    if timeout:
        overrides["timeout"] = timeout
    return ClientSettings(**overrides)


class Promptly:
    """Cliente del API de Promptly para un tenant.

    Todos los recursos comparten un único `HttpClient`, y con él el token.
    """

    def __init__(
        self,
        tenant_id: str | None = None,
        *,
        base_url: str | None = None,
        timeout: int | None = None,
        settings: ClientSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or _build_settings(tenant_id, base_url, timeout)
        self.http = HttpClient(self.settings, transport=transport)

        self.auth = AuthResource(self.http)
        self.boards = BoardsResource(self.http)
        self.blog = BlogResource(self.http)
        self.forms = FormsResource(self.http)
        self.shop = ShopResource(self.http)
        self.media = MediaResource(self.http)
        self.entities = EntitiesResource(self.http)
        self.reservation = ReservationResource(self.http)

    async def get_theme(self) -> dict[str, Any]:
        """Tema del sitio: `name`, `colors`, `fonts`."""

        return await self.http.get("/public/theme")

    async def get_settings(self) -> dict[str, Any]:
        return await self.http.get("/public/settings")

    def is_authenticated(self) -> bool:
        return self.auth.is_authenticated()

    def set_token(self, token: str | None) -> None:
        self.auth.set_token(token)

    def get_token(self) -> str | None:
        return self.auth.get_token()
