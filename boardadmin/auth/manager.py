"""Admin authentication lifecycle."""

import logging
from typing import Any

from boardadmin.config import Settings
from boardadmin.http.client import ApiClient
from boardadmin.services.auth import AuthService
from boardadmin.services.base import ServiceError
from boardadmin.services.profile import ProfileService
from boardadmin.services.session import SessionService
from boardadmin.services.token import TokenRefresher, TokenService

logger = logging.getLogger(__name__)


class AuthManager:
    """
    Owns the logged-in admin, the refresh task and the session operations.

    ``error`` and ``loading`` mirror what a screen would display while an
    operation is in flight.
    """

    def __init__(self, client: ApiClient, settings: Settings | None = None):
        self.client = client
        self.auth = client.auth
        settings = settings or client.settings
        self.auth_service = AuthService(client, self.auth)
        self.profile_service = ProfileService(client)
        self.session_service = SessionService(client)
        self.token_service = TokenService(
            self.auth_service,
            self.auth,
            margin=settings.refresh_margin_seconds,
        )
        self.refresher = TokenRefresher(
            self.token_service,
            margin=settings.refresh_margin_seconds,
            retry_interval=settings.refresh_retry_seconds,
        )
        self.user: dict[str, Any] | None = None
        self.loading = False
        self.error: str | None = None

    def initialize(self, start_refresher: bool = True) -> bool:
        """Restore the persisted admin. Returns True when a valid session exists."""
        try:
            self.auth.init()
            if self.auth.user and self.auth_service.is_authenticated():
                self.user = self.auth.user
                if start_refresher:
                    self.refresher.start()
                return True
            return False
        except Exception as e:
            logger.error("Corrupt auth storage, clearing: %s", e)
            self.auth.clear()
            return False

    async def login(self, credentials: dict[str, Any], start_refresher: bool = True):
        self.error = None
        self.loading = True
        try:
            response = await self.auth_service.login(credentials)
            self.user = response.user
            if start_refresher:
                self.refresher.start()
            return response
        except ServiceError as e:
            self.error = str(e)
            raise
        finally:
            self.loading = False

    async def logout(self):
        """Stop refreshing, then drop the session. Local state is always cleared."""
        self.loading = True
        self.refresher.stop()
        try:
            await self.auth_service.logout()
        except Exception as e:
            logger.error("Logout failed: %s", e)
            self.auth.clear()
        finally:
            self.user = None
            self.error = None
            self.loading = False

    async def _run(self, operation, *args, track_loading: bool = True):
        self.error = None
        if track_loading:
            self.loading = True
        try:
            return await operation(*args)
        except ServiceError as e:
            self.error = str(e)
            raise
        finally:
            if track_loading:
                self.loading = False

    async def update_profile(self, profile_data: dict[str, Any]) -> dict[str, Any]:
        updated = await self._run(self.profile_service.update_profile, profile_data)
        self.user = updated
        self.auth.update(user=updated)
        return updated

    async def change_password(self, password_data: dict[str, Any]):
        return await self._run(self.profile_service.change_password, password_data)

    async def request_password_reset(self, email: str):
        await self._run(self.auth_service.request_password_reset, email)

    async def get_sessions(self):
        return await self._run(self.session_service.get_sessions, track_loading=False)

    async def logout_all_sessions(self) -> dict[str, Any]:
        result = await self._run(self.session_service.logout_all_sessions)
        if result.get("force_logout"):
            self._drop_user()
        return result

    async def invalidate_session(self, session_id: int | str):
        return await self._run(self.session_service.invalidate_session, session_id, track_loading=False)

    async def force_logout(self) -> dict[str, Any]:
        result = await self._run(self.session_service.force_logout)
        if result.get("force_logout"):
            self._drop_user()
        return result

    def _drop_user(self):
        self.refresher.stop()
        self.user = None
        self.auth.clear()

    def is_admin(self) -> bool:
        return bool(self.user) and (
            self.user.get("user_type") == "ADMIN" or self.user.get("is_staff") is True
        )

    def is_authenticated(self) -> bool:
        return bool(self.user) and self.auth_service.is_authenticated()

    def clear_error(self):
        self.error = None
