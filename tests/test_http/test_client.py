"""Tests for the API client."""

import json

import httpx
import pytest

from boardadmin.auth.context import AuthContext
from boardadmin.config import Settings
from boardadmin.http.client import TOKEN_REFRESH_PATH, ApiClient
from boardadmin.http.errors import ApiError
from boardadmin.models.enums import ApiErrorType


@pytest.fixture
def settings():
    return Settings(api_base_url="http://backend.test")


def make_client(settings, handler, auth=None) -> ApiClient:
    return ApiClient(settings, auth or AuthContext(), transport=httpx.MockTransport(handler))


class TestApiClient:
    """Tests for ApiClient."""

    @pytest.mark.asyncio
    async def test_attaches_bearer_token(self, settings):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers.get("Authorization")
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json=[{"id": 1}])

        auth = AuthContext()
        auth.update(access_token="abc")

        async with make_client(settings, handler, auth) as client:
            data = await client.get("/api/blog/posts/", params={"status": "DRAFT"})

        assert data == [{"id": 1}]
        assert seen["auth"] == "Bearer abc"
        assert seen["params"] == {"status": "DRAFT"}

    @pytest.mark.asyncio
    async def test_no_token_no_header(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            assert "Authorization" not in request.headers
            return httpx.Response(200, json={})

        async with make_client(settings, handler) as client:
            await client.get("/api/blog/stats/")

    @pytest.mark.asyncio
    async def test_refreshes_once_on_401_and_replays(self, settings):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request.url.path)
            if request.url.path == TOKEN_REFRESH_PATH:
                assert json.loads(request.content) == {"refresh": "refresh-1"}
                return httpx.Response(200, json={"access": "fresh", "refresh": "refresh-2"})
            if request.headers.get("Authorization") == "Bearer fresh":
                return httpx.Response(200, json={"ok": True})
            return httpx.Response(401, json={"detail": "token expired"})

        auth = AuthContext()
        auth.update(access_token="stale", refresh_token="refresh-1")

        async with make_client(settings, handler, auth) as client:
            data = await client.get("/api/auth/profile/")

        assert data == {"ok": True}
        assert calls == ["/api/auth/profile/", TOKEN_REFRESH_PATH, "/api/auth/profile/"]
        assert auth.access_token == "fresh"
        assert auth.refresh_token == "refresh-2"

    @pytest.mark.asyncio
    async def test_failed_refresh_clears_credentials(self, settings, token_store):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"detail": "invalid"})

        auth = AuthContext(token_store)
        auth.update(access_token="stale", refresh_token="revoked", session_id=9, user={"username": "admin"})

        async with make_client(settings, handler, auth) as client:
            with pytest.raises(ApiError) as exc_info:
                await client.get("/api/auth/profile/")

        assert exc_info.value.status_code == 401
        assert auth.access_token is None
        assert auth.refresh_token is None
        assert token_store.db.all_values() == {}

    @pytest.mark.asyncio
    async def test_401_without_refresh_token(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401)

        async with make_client(settings, handler) as client:
            with pytest.raises(ApiError) as exc_info:
                await client.get("/api/auth/profile/")

        assert exc_info.value.error_type == ApiErrorType.UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_timeout_is_normalized(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        async with make_client(settings, handler) as client:
            with pytest.raises(ApiError) as exc_info:
                await client.get("/api/blog/stats/")

        assert exc_info.value.error_type == ApiErrorType.TIMEOUT
        assert not exc_info.value.has_response

    @pytest.mark.asyncio
    async def test_connection_error_is_normalized(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        async with make_client(settings, handler) as client:
            with pytest.raises(ApiError) as exc_info:
                await client.post("/api/auth/login/", {"login": "a", "password": "b"})

        assert exc_info.value.error_type == ApiErrorType.TRANSPORT

    @pytest.mark.asyncio
    async def test_empty_and_invalid_bodies(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "DELETE":
                return httpx.Response(204)
            return httpx.Response(200, text="<html>oops</html>")

        async with make_client(settings, handler) as client:
            assert await client.delete("/api/blog/posts/a/delete/") is None
            with pytest.raises(ApiError) as exc_info:
                await client.get("/api/blog/stats/")

        assert exc_info.value.error_type == ApiErrorType.DECODE

    @pytest.mark.asyncio
    async def test_multipart_upload(self, settings):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["content_type"] = request.headers["Content-Type"]
            seen["body"] = request.content
            return httpx.Response(201, json={"slug": "nouveau"})

        async with make_client(settings, handler) as client:
            data = await client.post(
                "/api/blog/posts/create/",
                data={"title": "Nouveau"},
                files={"featured_image": ("a.png", b"\x89PNG", "image/png")},
            )

        assert data == {"slug": "nouveau"}
        assert seen["content_type"].startswith("multipart/form-data")
        assert b'name="title"' in seen["body"]
        assert b'filename="a.png"' in seen["body"]
