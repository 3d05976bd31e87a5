"""Admin authentication operations."""

import logging
from typing import Any

from boardadmin.auth.context import AuthContext
from boardadmin.http.client import ApiClient
from boardadmin.http.errors import ApiError
from boardadmin.models.auth import LoginResponse
from boardadmin.services.base import BaseService, ServiceError, service_call
from boardadmin.services.token import is_token_expired

logger = logging.getLogger(__name__)


class AuthService(BaseService):
    """Login, logout and account verification endpoints."""

    def __init__(self, client: ApiClient, auth: AuthContext | None = None):
        super().__init__(client)
        self.auth = auth or client.auth

    @service_call
    async def login(self, credentials: dict[str, Any]) -> LoginResponse:
        """Log in and persist the returned credentials."""
        data = await self.client.post("/api/auth/login/", credentials)
        response = LoginResponse.model_validate(data or {})
        self.auth.update(
            access_token=response.access,
            refresh_token=response.refresh,
            session_id=response.session_id,
            user=response.user,
        )
        return response

    async def logout(self):
        """
        Invalidate the current session, best effort.

        Storage is cleared whether or not the backend call succeeds.
        """
        try:
            if self.auth.session_id:
                await self.client.post(f"/api/auth/sessions/{self.auth.session_id}/invalidate/")
        except ApiError as e:
            logger.warning("Session invalidation failed during logout: %s", e)
        finally:
            self.auth.clear()

    def is_authenticated(self) -> bool:
        """True when a non-expired access token is held."""
        return not is_token_expired(self.auth.access_token)

    @service_call
    async def get_current_user(self) -> dict[str, Any]:
        return await self.client.get("/api/auth/profile/")

    async def refresh_token(self) -> dict[str, Any]:
        """Exchange the refresh token for a new access token."""
        if not self.auth.refresh_token:
            raise ServiceError("Aucun token de rafraîchissement disponible")
        return await self._refresh()

    @service_call
    async def _refresh(self) -> dict[str, Any]:
        data = await self.client.post(
            "/api/auth/token/refresh/",
            {"refresh": self.auth.refresh_token},
        )
        data = data or {}
        if data.get("access"):
            self.auth.update(access_token=data["access"], refresh_token=data.get("refresh"))
        return data

    @service_call
    async def verify_email(self, email: str) -> Any:
        return await self.client.post("/api/auth/verify-email/", {"email": email})

    @service_call
    async def request_email_verification(self) -> Any:
        return await self.client.post("/api/auth/request-email-verification/")

    @service_call
    async def request_password_reset(self, email: str) -> Any:
        return await self.client.post("/api/auth/password/reset/", {"email": email})
