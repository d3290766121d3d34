"""Wrapper de httpx para el API de Promptly.

Por qué un wrapper:
- Estandariza URL por tenant, headers, timeout y el mapeo de fallos a `PromptlyError`.
- Desenvuelve el sobre `{data, message}` para que los recursos reciban el payload.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.

Sin reintentos: cada llamada se intenta una sola vez.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypeVar

import httpx

from promptly.adapters.pagination import normalize_list_response
from promptly.core.config import ClientSettings
from promptly.core.domain.common import ListResponse
from promptly.core.errors import STATUS_TIMEOUT, STATUS_TRANSPORT, PromptlyError
from promptly.core.interfaces.transport import FileInput

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")


def build_async_client(
    settings: ClientSettings,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con los defaults del SDK.

    Por qué un builder:
    - Centraliza timeout/User-Agent para que todas las llamadas se comporten igual.
    - `transport` permite sustituir la red en tests.
    """

    headers: dict[str, str] = {"User-Agent": settings.user_agent}
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def _stringify(value: Any) -> str:
    # Mismo texto que produce el cliente web: `true`, `10` (no `10.0`), `1,2`.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else _stringify(item) for item in value)
    return str(value)


def _query_params(params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    if not params:
        return []
    return [(key, _stringify(value)) for key, value in params.items() if value is not None]


def _decode_json(response: httpx.Response) -> Any:
    if not response.content.strip():
        return None
    return response.json()


def _error_body(response: httpx.Response) -> dict[str, Any]:
    try:
        payload = _decode_json(response)
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


def _file_field(
    file: FileInput,
    filename: str | None,
    content_type: str | None,
) -> tuple[str, Any, str | None]:
    if isinstance(file, Path):
        return filename or file.name, file.read_bytes(), content_type
    if isinstance(file, (bytes, bytearray)):
        return filename or "upload", bytes(file), content_type
    name = filename or Path(str(getattr(file, "name", "upload"))).name
    return name, file, content_type


class HttpClient:
    """Transporte del SDK.

    Estado mutable único: el bearer token. Los headers se construyen en cada
    request, así que cambiar el token no afecta a llamadas ya enviadas.
    """

    def __init__(
        self,
        settings: ClientSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport
        self._token: str | None = None

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    def set_token(self, token: str | None) -> None:
        self._token = token

    def get_token(self) -> str | None:
        return self._token

    def is_authenticated(self) -> bool:
        return self._token is not None

    def build_url(self, endpoint: str, params: Mapping[str, Any] | None = None) -> str:
        """`{base_url}/api/{tenant_id}{endpoint}` + query (omite valores `None`)."""

        url = f"{self._settings.base_url}/api/{self._settings.tenant_id}{endpoint}"
        query = _query_params(params)
        if not query:
            return url
        return str(httpx.URL(url).copy_merge_params(query))

    def build_headers(self, custom_headers: Mapping[str, str] | None = None) -> dict[str, str]:
        headers: dict[str, str] = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if custom_headers:
            headers.update(custom_headers)
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def request(
        self,
        endpoint: str,
        *,
        method: str = "GET",
        body: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Ejecuta una llamada JSON y devuelve el payload desenvuelto.

        Raises:
            PromptlyError: status HTTP (no 2xx), 408 (timeout) o 0 (red/parseo).
        """

        url = self.build_url(endpoint, params)
        request_headers = self.build_headers(headers)
        send_kwargs: dict[str, Any] = {}
        if body is not None:
            send_kwargs["json"] = dict(body)

        return await self._execute(
            method,
            url,
            request_headers,
            failure_message="Request failed",
            timeout_message="Request timeout",
            **send_kwargs,
        )

    async def get(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self.request(endpoint, method="GET", params=params)

    async def get_list(
        self,
        endpoint: str,
        params: Mapping[str, Any] | None = None,
        *,
        model: type[ItemT] | None = None,
    ) -> ListResponse[Any]:
        """GET de listado: siempre devuelve `ListResponse` (data lista + meta completa)."""

        raw = await self.request(endpoint, method="GET", params=params)
        return normalize_list_response(raw, model)

    async def post(self, endpoint: str, body: Mapping[str, Any] | None = None) -> Any:
        return await self.request(endpoint, method="POST", body=body)

    async def put(self, endpoint: str, body: Mapping[str, Any] | None = None) -> Any:
        return await self.request(endpoint, method="PUT", body=body)

    async def patch(self, endpoint: str, body: Mapping[str, Any] | None = None) -> Any:
        return await self.request(endpoint, method="PATCH", body=body)

    async def delete(self, endpoint: str) -> Any:
        return await self.request(endpoint, method="DELETE")

    async def upload(
        self,
        endpoint: str,
        file: FileInput,
        field_name: str = "file",
        *,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> Any:
        """POST multipart con un único archivo.

        No se envía `Content-Type`: lo fija el encoder multipart (boundary).
        """

        url = self.build_url(endpoint)
        headers: dict[str, str] = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        try:
            files = {field_name: _file_field(file, filename, content_type)}
        except OSError as exc:
            raise PromptlyError(str(exc) or type(exc).__name__, STATUS_TRANSPORT) from exc

        return await self._execute(
            "POST",
            url,
            headers,
            failure_message="Upload failed",
            timeout_message="Upload timeout",
            files=files,
        )

    async def _send(self, method: str, url: str, headers: dict[str, str], **kwargs: Any) -> httpx.Response:
        async with build_async_client(self._settings, transport=self._transport) as client:
            return await client.request(method, url, headers=headers, **kwargs)

    async def _execute(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        *,
        failure_message: str,
        timeout_message: str,
        **kwargs: Any,
    ) -> Any:
        logger.debug("%s %s", method, url)
        try:
            response = await asyncio.wait_for(
                self._send(method, url, headers, **kwargs),
                timeout=self._settings.timeout_seconds,
            )
            return self._unwrap(response, failure_message)
        except PromptlyError:
            raise
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            logger.warning("%s %s timed out after %sms", method, url, self._settings.timeout)
            raise PromptlyError(timeout_message, STATUS_TIMEOUT) from exc
        except (httpx.HTTPError, ValueError, OSError) as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise PromptlyError(str(exc) or type(exc).__name__, STATUS_TRANSPORT) from exc

    def _unwrap(self, response: httpx.Response, failure_message: str) -> Any:
        if not response.is_success:
            body = _error_body(response)
            raw_errors = body.get("errors")
            errors = raw_errors if isinstance(raw_errors, dict) else None
            message = body.get("message") or failure_message
            logger.warning(
                "%s %s returned %s: %s",
                response.request.method,
                response.request.url,
                response.status_code,
                message,
            )
            raise PromptlyError(str(message), response.status_code, errors)

        payload = _decode_json(response)
        # Sobre `{data, message}`; endpoints sin sobre se devuelven tal cual.
        if isinstance(payload, dict) and "data" in payload:
            return payload["data"]
        return payload
