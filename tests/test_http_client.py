"""Tests del transporte HTTP (httpx.MockTransport, sin red)."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from promptly.adapters.http_client import HttpClient
from promptly.core.config import ClientSettings
from promptly.core.errors import PromptlyError
from promptly.core.interfaces.transport import Transport


def _client(handler, *, timeout: int = 2_000) -> HttpClient:
    settings = ClientSettings(tenant_id="demo", base_url="https://api.test/", timeout=timeout, _env_file=None)
    return HttpClient(settings, transport=httpx.MockTransport(handler))


def _json(status: int, payload) -> httpx.Response:
    return httpx.Response(status, json=payload)


class TestUrlAndHeaders:
    def test_url_includes_tenant_and_skips_none_params(self) -> None:
        http = _client(lambda r: _json(200, {}))
        url = http.build_url("/x", {"a": 1, "b": None, "c": None, "d": "x"})
        assert url == "https://api.test/api/demo/x?a=1&d=x"

    def test_url_without_params(self) -> None:
        http = _client(lambda r: _json(200, {}))
        assert http.build_url("/public/blog") == "https://api.test/api/demo/public/blog"
        assert http.build_url("/public/blog", {"page": None}) == "https://api.test/api/demo/public/blog"

    def test_booleans_are_lowercase(self) -> None:
        http = _client(lambda r: _json(200, {}))
        assert http.build_url("/public/blog", {"featured": True, "draft": False}).endswith(
            "?featured=true&draft=false"
        )

    def test_numbers_and_sequences_match_web_client(self) -> None:
        http = _client(lambda r: _json(200, {}))
        url = http.build_url("/public/products", {"min_price": 10.0, "max_price": 19.5, "ids": [1, 2]})
        params = httpx.URL(url).params

        assert params["min_price"] == "10"
        assert params["max_price"] == "19.5"
        assert params["ids"] == "1,2"

    def test_headers_without_token(self) -> None:
        http = _client(lambda r: _json(200, {}))
        headers = http.build_headers()
        assert headers == {"Content-Type": "application/json", "Accept": "application/json"}

    def test_headers_with_token_and_custom(self) -> None:
        http = _client(lambda r: _json(200, {}))
        http.set_token("abc")
        headers = http.build_headers({"X-Trace": "1"})
        assert headers["Authorization"] == "Bearer abc"
        assert headers["X-Trace"] == "1"

    def test_empty_token_sends_no_authorization(self) -> None:
        http = _client(lambda r: _json(200, {}))
        http.set_token("")
        assert "Authorization" not in http.build_headers()
        # Un token vacío sigue contando como "presente".
        assert http.is_authenticated() is True

    def test_token_lifecycle(self) -> None:
        http = _client(lambda r: _json(200, {}))
        assert http.is_authenticated() is False
        http.set_token("t1")
        assert http.get_token() == "t1"
        http.set_token(None)
        assert http.get_token() is None
        assert http.is_authenticated() is False

    def test_satisfies_transport_protocol(self) -> None:
        assert isinstance(_client(lambda r: _json(200, {})), Transport)


class TestRequest:
    @pytest.mark.asyncio
    async def test_envelope_is_unwrapped(self) -> None:
        http = _client(lambda r: _json(200, {"data": {"id": 1}, "message": "ok"}))
        assert await http.get("/x") == {"id": 1}

    @pytest.mark.asyncio
    async def test_body_without_envelope_is_returned_as_is(self) -> None:
        http = _client(lambda r: _json(200, {"id": 1}))
        assert await http.get("/x") == {"id": 1}

    @pytest.mark.asyncio
    async def test_null_data_and_bare_array(self) -> None:
        http = _client(lambda r: _json(200, {"data": None}))
        assert await http.get("/x") is None

        http = _client(lambda r: _json(200, [1, 2]))
        assert await http.get("/x") == [1, 2]

    @pytest.mark.asyncio
    async def test_empty_body_returns_none(self) -> None:
        http = _client(lambda r: httpx.Response(204))
        assert await http.delete("/posts/1") is None

    @pytest.mark.asyncio
    async def test_json_body_and_headers_are_sent(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return _json(201, {"data": {"ok": True}})

        http = _client(handler)
        http.set_token("abc")
        result = await http.post("/posts", {"title": "Hola"})

        assert result == {"ok": True}
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == "https://api.test/api/demo/posts"
        assert json.loads(request.content) == {"title": "Hola"}
        assert request.headers["Authorization"] == "Bearer abc"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["User-Agent"].startswith("promptly-sdk-python")

    @pytest.mark.asyncio
    async def test_put_patch_delete_methods(self) -> None:
        methods: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            methods.append(request.method)
            return _json(200, {"data": None})

        http = _client(handler)
        await http.put("/a", {"x": 1})
        await http.patch("/a", {"x": 2})
        await http.delete("/a")
        assert methods == ["PUT", "PATCH", "DELETE"]

    @pytest.mark.asyncio
    async def test_get_list_normalizes(self) -> None:
        http = _client(lambda r: _json(200, {"data": {"data": [{"id": 1}], "current_page": 2, "total": 1}}))
        page = await http.get_list("/x")
        assert page.data == [{"id": 1}]
        assert page.meta.current_page == 2
        assert page.meta.total == 1

    @pytest.mark.asyncio
    async def test_bare_paginator_body_loses_its_meta(self) -> None:
        """Sin sobre, `data` se desenvuelve y el meta del servidor no llega a normalizarse."""

        body = {"data": [{"id": 1}, {"id": 2}], "meta": {"current_page": 3, "last_page": 9, "total": 90}}
        http = _client(lambda r: _json(200, body))

        page = await http.get_list("/x")

        assert page.data == [{"id": 1}, {"id": 2}]
        assert page.meta.current_page == 1
        assert page.meta.last_page == 1
        assert page.meta.total == 2

    @pytest.mark.asyncio
    async def test_token_change_does_not_affect_in_flight_request(self) -> None:
        seen: list[httpx.Request] = []

        async def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return _json(200, {})

        http = _client(handler)
        http.set_token("old")
        task = asyncio.create_task(http.get("/x"))
        await asyncio.sleep(0)
        http.set_token("new")
        await task

        assert seen[0].headers["Authorization"] == "Bearer old"


class TestErrors:
    @pytest.mark.asyncio
    async def test_validation_error_carries_field_errors(self) -> None:
        payload = {"message": "The given data was invalid.", "errors": {"email": ["required"]}}
        http = _client(lambda r: _json(422, payload))

        with pytest.raises(PromptlyError) as exc_info:
            await http.post("/auth/register", {})

        err = exc_info.value
        assert err.status == 422
        assert err.message == "The given data was invalid."
        assert err.errors == {"email": ["required"]}

    @pytest.mark.asyncio
    async def test_error_without_message_uses_default(self) -> None:
        http = _client(lambda r: _json(500, {"errors": "not a dict"}))

        with pytest.raises(PromptlyError) as exc_info:
            await http.get("/x")

        assert exc_info.value.message == "Request failed"
        assert exc_info.value.status == 500
        assert exc_info.value.errors is None

    @pytest.mark.asyncio
    async def test_non_json_error_body_keeps_status(self) -> None:
        http = _client(lambda r: httpx.Response(502, text="<html>Bad gateway</html>"))

        with pytest.raises(PromptlyError) as exc_info:
            await http.get("/x")

        assert exc_info.value.status == 502
        assert exc_info.value.message == "Request failed"

    @pytest.mark.asyncio
    async def test_non_json_success_body_is_parse_error(self) -> None:
        http = _client(lambda r: httpx.Response(200, text="<html>"))

        with pytest.raises(PromptlyError) as exc_info:
            await http.get("/x")

        assert exc_info.value.status == 0
        assert exc_info.value.is_transport_error

    @pytest.mark.asyncio
    async def test_connection_error_is_status_zero(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        http = _client(handler)
        with pytest.raises(PromptlyError) as exc_info:
            await http.get("/x")

        assert exc_info.value.status == 0
        assert exc_info.value.message == "connection refused"

    @pytest.mark.asyncio
    async def test_slow_response_is_timeout(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(1)
            return _json(200, {})

        http = _client(handler, timeout=20)
        with pytest.raises(PromptlyError) as exc_info:
            await http.get("/x")

        assert exc_info.value.status == 408
        assert exc_info.value.message == "Request timeout"
        assert exc_info.value.is_timeout

    @pytest.mark.asyncio
    async def test_httpx_timeout_is_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("read timed out", request=request)

        http = _client(handler)
        with pytest.raises(PromptlyError) as exc_info:
            await http.get("/x")

        assert exc_info.value.status == 408


class TestUpload:
    @pytest.mark.asyncio
    async def test_multipart_without_json_content_type(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return _json(201, {"data": {"id": 9}})

        http = _client(handler)
        http.set_token("abc")
        result = await http.upload("/media", b"hello", filename="a.txt", content_type="text/plain")

        assert result == {"id": 9}
        request = seen[0]
        assert request.headers["Content-Type"].startswith("multipart/form-data")
        assert request.headers["Authorization"] == "Bearer abc"
        assert request.headers["Accept"] == "application/json"
        assert b'name="file"; filename="a.txt"' in request.content
        assert b"hello" in request.content

    @pytest.mark.asyncio
    async def test_custom_field_name_and_path_input(self, tmp_path) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return _json(201, {"id": 1})

        path = tmp_path / "photo.png"
        path.write_bytes(b"\x89PNG")
        http = _client(handler)
        await http.upload("/media", path, "image")

        assert b'name="image"; filename="photo.png"' in seen[0].content
        assert "Authorization" not in seen[0].headers

    @pytest.mark.asyncio
    async def test_missing_file_is_status_zero(self, tmp_path) -> None:
        seen: list[httpx.Request] = []
        http = _client(lambda r: seen.append(r) or _json(201, {}))

        with pytest.raises(PromptlyError) as exc_info:
            await http.upload("/media", tmp_path / "missing.png")

        assert exc_info.value.status == 0
        assert seen == []

    @pytest.mark.asyncio
    async def test_upload_error_defaults(self) -> None:
        http = _client(lambda r: _json(413, {}))

        with pytest.raises(PromptlyError) as exc_info:
            await http.upload("/media", b"x")

        assert exc_info.value.status == 413
        assert exc_info.value.message == "Upload failed"

    @pytest.mark.asyncio
    async def test_upload_error_uses_server_message(self) -> None:
        http = _client(lambda r: _json(413, {"message": "Too large"}))

        with pytest.raises(PromptlyError) as exc_info:
            await http.upload("/media", b"x")

        assert exc_info.value.message == "Too large"

    @pytest.mark.asyncio
    async def test_upload_timeout_message(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(1)
            return _json(201, {})

        http = _client(handler, timeout=20)
        with pytest.raises(PromptlyError) as exc_info:
            await http.upload("/media", b"x")

        assert exc_info.value.status == 408
        assert exc_info.value.message == "Upload timeout"
