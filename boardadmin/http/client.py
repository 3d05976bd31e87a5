"""Async REST client for the job-board backend."""

import logging
from typing import Any

import httpx

from boardadmin.auth.context import AuthContext
from boardadmin.config import Settings
from boardadmin.http.errors import ApiError
from boardadmin.models.enums import ApiErrorType

logger = logging.getLogger(__name__)

TOKEN_REFRESH_PATH = "/api/auth/token/refresh/"


class ApiClient:
    """HTTP client that attaches bearer credentials and normalizes failures."""

    DEFAULT_HEADERS = {
        "User-Agent": "boardadmin/0.1",
        "Accept": "application/json",
    }

    def __init__(
        self,
        settings: Settings | None = None,
        auth: AuthContext | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or Settings()
        self.auth = auth or AuthContext()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self):
        self._open()
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    def _open(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.settings.api_base_url,
                headers=self.DEFAULT_HEADERS,
                timeout=httpx.Timeout(self.settings.api_timeout),
                transport=self._transport,
            )
        return self._client

    async def aclose(self):
        if self._client:
            await self._client.aclose()
            self._client = None

    def _auth_headers(self) -> dict[str, str]:
        if self.auth.access_token:
            return {"Authorization": f"Bearer {self.auth.access_token}"}
        return {}

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        data: dict | None = None,
        files: dict | None = None,
        params: dict | None = None,
    ) -> Any:
        """
        Send a request and return the decoded JSON body.

        Args:
            method: HTTP method.
            path: Path relative to the API base URL.
            json: JSON body.
            data: Form fields, sent multipart when ``files`` is set.
            files: Multipart file parts.
            params: Query parameters.

        Returns:
            Parsed JSON, or None for an empty body.

        Raises:
            ApiError: On transport failure or non-2xx status.
        """
        response = await self._send(method, path, json=json, data=data, files=files, params=params)

        if response.status_code == 401 and self.auth.refresh_token and path != TOKEN_REFRESH_PATH:
            logger.info("Access token rejected on %s %s, refreshing", method, path)
            await self._refresh_access_token()
            response = await self._send(method, path, json=json, data=data, files=files, params=params)

        if response.is_error:
            raise ApiError.from_response(response)

        return self._decode(response)

    async def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        client = self._open()
        try:
            return await client.request(method.upper(), path, headers=self._auth_headers(), **kwargs)
        except httpx.TimeoutException as e:
            raise ApiError(
                f"Timeout on {method.upper()} {path}",
                error_type=ApiErrorType.TIMEOUT,
                details={"error": str(e)},
            ) from e
        except httpx.TransportError as e:
            raise ApiError(
                f"Network error on {method.upper()} {path}",
                error_type=ApiErrorType.TRANSPORT,
                details={"error": str(e)},
            ) from e

    async def _refresh_access_token(self):
        """Exchange the refresh token once. On failure the session is dropped."""
        client = self._open()
        try:
            response = await client.post(TOKEN_REFRESH_PATH, json={"refresh": self.auth.refresh_token})
            if response.is_error:
                raise ApiError.from_response(response)
            body = self._decode(response) or {}
            if not body.get("access"):
                raise ApiError(
                    "Refresh response carried no access token",
                    error_type=ApiErrorType.DECODE,
                )
        except (ApiError, httpx.TransportError) as e:
            logger.warning("Token refresh failed, clearing credentials: %s", e)
            self.auth.clear()
            if isinstance(e, httpx.TransportError):
                raise ApiError(
                    "Network error refreshing token",
                    error_type=ApiErrorType.TRANSPORT,
                    details={"error": str(e)},
                ) from e
            raise

        self.auth.update(access_token=body["access"], refresh_token=body.get("refresh"))

    def _decode(self, response: httpx.Response) -> Any:
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(
                f"Undecodable response from {response.request.url.path}",
                error_type=ApiErrorType.DECODE,
                status_code=None,
                details={"error": str(e)},
            ) from e

    async def get(self, path: str, params: dict | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None, **kwargs) -> Any:
        return await self.request("POST", path, json=json, **kwargs)

    async def put(self, path: str, json: Any = None, **kwargs) -> Any:
        return await self.request("PUT", path, json=json, **kwargs)

    async def patch(self, path: str, json: Any = None, **kwargs) -> Any:
        return await self.request("PATCH", path, json=json, **kwargs)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)
