"""Contrato del transporte HTTP.

Por qué Protocol:
- Los recursos (auth, shop, ...) solo necesitan "llamar endpoint y recibir JSON".
- Permite sustituir `HttpClient` por un doble en tests sin herencia rígida.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, BinaryIO, Protocol, TypeVar, runtime_checkable

from promptly.core.domain.common import ListResponse

ItemT = TypeVar("ItemT")

FileInput = bytes | BinaryIO | Path


@runtime_checkable
class Transport(Protocol):
    """Contrato mínimo que consumen los recursos.

    Reglas de diseño:
    - Todas las llamadas de red son asíncronas.
    - Los fallos se elevan como `PromptlyError`; nunca se devuelve un error como valor.
    """

    def set_token(self, token: str | None) -> None: ...

    def get_token(self) -> str | None: ...

    def is_authenticated(self) -> bool: ...

    async def get(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any: ...

    async def get_list(
        self,
        endpoint: str,
        params: Mapping[str, Any] | None = None,
        *,
        model: type[ItemT] | None = None,
    ) -> ListResponse[Any]: ...

    async def post(self, endpoint: str, body: Mapping[str, Any] | None = None) -> Any: ...

    async def put(self, endpoint: str, body: Mapping[str, Any] | None = None) -> Any: ...

    async def patch(self, endpoint: str, body: Mapping[str, Any] | None = None) -> Any: ...

    async def delete(self, endpoint: str) -> Any: ...

    async def upload(
        self,
        endpoint: str,
        file: FileInput,
        field_name: str = "file",
        *,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> Any: ...
