"""Tests for authentication services and the auth manager."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from boardadmin.auth.context import AuthContext
from boardadmin.auth.manager import AuthManager
from boardadmin.config import Settings
from boardadmin.http.errors import ApiError
from boardadmin.models.enums import ApiErrorType
from boardadmin.services.auth import AuthService
from boardadmin.services.base import ServiceError
from boardadmin.storage import AUTH_KEYS


@pytest.fixture
def auth(token_store):
    return AuthContext(token_store).init()


@pytest.fixture
def mock_client(auth):
    client = MagicMock()
    client.auth = auth
    client.settings = Settings()
    client.get = AsyncMock()
    client.post = AsyncMock()
    client.put = AsyncMock()
    return client


@pytest.fixture
def login_response(make_token):
    return {
        "access": make_token(3600),
        "refresh": "refresh-token",
        "session_id": 31,
        "user": {"id": 1, "username": "admin", "user_type": "ADMIN"},
    }


class TestAuthService:
    """Tests for AuthService."""

    @pytest.mark.asyncio
    async def test_login_persists_credentials(self, mock_client, auth, token_store, login_response):
        mock_client.post.return_value = login_response

        response = await AuthService(mock_client, auth).login({"login": "admin", "password": "pw"})

        mock_client.post.assert_awaited_once_with(
            "/api/auth/login/", {"login": "admin", "password": "pw"}
        )
        assert response.session_id == 31
        stored = token_store.db.all_values()
        assert set(stored) == set(AUTH_KEYS)
        assert stored["session_id"] == "31"
        assert auth.user["username"] == "admin"

    @pytest.mark.asyncio
    async def test_login_failure(self, mock_client, auth, token_store):
        mock_client.post.side_effect = ApiError(
            "bad credentials", error_type=ApiErrorType.UNAUTHORIZED, status_code=401
        )

        with pytest.raises(ServiceError, match="Non autorisé"):
            await AuthService(mock_client, auth).login({"login": "admin", "password": "wrong"})

        assert token_store.db.all_values() == {}

    @pytest.mark.asyncio
    async def test_logout_invalidates_session(self, mock_client, auth, login_response):
        mock_client.post.return_value = login_response
        service = AuthService(mock_client, auth)
        await service.login({"login": "admin", "password": "pw"})

        await service.logout()

        mock_client.post.assert_awaited_with("/api/auth/sessions/31/invalidate/")
        assert auth.access_token is None

    @pytest.mark.asyncio
    async def test_logout_clears_storage_when_backend_fails(self, mock_client, auth, token_store, login_response):
        mock_client.post.return_value = login_response
        service = AuthService(mock_client, auth)
        await service.login({"login": "admin", "password": "pw"})
        mock_client.post.side_effect = ApiError("down", error_type=ApiErrorType.TRANSPORT)

        await service.logout()

        assert token_store.db.all_values() == {}
        assert AuthContext(token_store).init().refresh_token is None

    @pytest.mark.asyncio
    async def test_refresh_without_refresh_token(self, mock_client, auth):
        with pytest.raises(ServiceError, match="Aucun token de rafraîchissement disponible"):
            await AuthService(mock_client, auth).refresh_token()

        mock_client.post.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_refresh_updates_access_token(self, mock_client, auth):
        auth.update(access_token="old", refresh_token="r")
        mock_client.post.return_value = {"access": "new"}

        await AuthService(mock_client, auth).refresh_token()

        mock_client.post.assert_awaited_once_with("/api/auth/token/refresh/", {"refresh": "r"})
        assert auth.access_token == "new"
        assert auth.refresh_token == "r"

    def test_is_authenticated(self, mock_client, auth, make_token):
        service = AuthService(mock_client, auth)
        assert not service.is_authenticated()

        auth.update(access_token=make_token(-5))
        assert not service.is_authenticated()

        auth.update(access_token=make_token(60))
        assert service.is_authenticated()


class TestAuthManager:
    """Tests for AuthManager."""

    @pytest.mark.asyncio
    async def test_login_and_logout(self, mock_client, token_store, login_response):
        mock_client.post.return_value = login_response
        manager = AuthManager(mock_client)

        await manager.login({"login": "admin", "password": "pw"}, start_refresher=False)

        assert manager.is_admin()
        assert manager.is_authenticated()

        await manager.logout()

        assert manager.user is None
        assert not manager.loading
        assert token_store.db.all_values() == {}

    @pytest.mark.asyncio
    async def test_login_error_is_recorded(self, mock_client):
        mock_client.post.side_effect = ApiError("x", status_code=403)
        manager = AuthManager(mock_client)

        with pytest.raises(ServiceError):
            await manager.login({"login": "a", "password": "b"}, start_refresher=False)

        assert manager.error == "Accès refusé. Permissions insuffisantes."
        assert not manager.loading

    def test_initialize_restores_valid_session(self, mock_client, auth, make_token):
        auth.update(access_token=make_token(600), refresh_token="r", user={"username": "admin", "is_staff": True})
        manager = AuthManager(mock_client)

        assert manager.initialize(start_refresher=False)
        assert manager.user["username"] == "admin"
        assert manager.is_admin()

    def test_initialize_rejects_expired_session(self, mock_client, auth, make_token):
        auth.update(access_token=make_token(-60), user={"username": "admin"})
        manager = AuthManager(mock_client)

        assert not manager.initialize(start_refresher=False)
        assert manager.user is None

    @pytest.mark.asyncio
    async def test_force_logout_drops_user(self, mock_client, auth, token_store, login_response):
        mock_client.post.return_value = login_response
        manager = AuthManager(mock_client)
        await manager.login({"login": "admin", "password": "pw"}, start_refresher=False)
        mock_client.post.return_value = {"force_logout": True}

        await manager.logout_all_sessions()

        mock_client.post.assert_awaited_with("/api/auth/sessions/logout-all/", {"confirm": True})
        assert manager.user is None
        assert token_store.db.all_values() == {}

    @pytest.mark.asyncio
    async def test_update_profile_updates_stored_user(self, mock_client, token_store, login_response):
        mock_client.post.return_value = login_response
        mock_client.put.return_value = {"id": 1, "username": "admin", "first_name": "Jean"}
        manager = AuthManager(mock_client)
        await manager.login({"login": "admin", "password": "pw"}, start_refresher=False)

        await manager.update_profile({"first_name": "Jean"})

        assert manager.user["first_name"] == "Jean"
        assert token_store.get_user()["first_name"] == "Jean"
