"""Explicit authentication state shared by the client and services."""

import logging
from typing import Any

from boardadmin.storage.token_store import (
    ACCESS_TOKEN_KEY,
    REFRESH_TOKEN_KEY,
    SESSION_ID_KEY,
    TokenStore,
)

logger = logging.getLogger(__name__)


class AuthContext:
    """
    Holds the admin credentials for the lifetime of the process.

    Lifecycle is ``init()`` on load, ``update()`` on login or refresh and
    ``clear()`` on logout. Every change is written through to the token
    store when one is attached.
    """

    def __init__(self, store: TokenStore | None = None):
        self.store = store
        self.access_token: str | None = None
        self.refresh_token: str | None = None
        self.session_id: str | None = None
        self.user: dict[str, Any] | None = None

    def init(self) -> "AuthContext":
        """Load persisted credentials."""
        if self.store is not None:
            self.access_token = self.store.get(ACCESS_TOKEN_KEY)
            self.refresh_token = self.store.get(REFRESH_TOKEN_KEY)
            self.session_id = self.store.get(SESSION_ID_KEY)
            self.user = self.store.get_user()
        return self

    def update(
        self,
        access_token: str | None = None,
        refresh_token: str | None = None,
        session_id: str | int | None = None,
        user: dict[str, Any] | None = None,
    ):
        """Record new credentials. Arguments left as None keep their value."""
        if access_token:
            self.access_token = access_token
            self._persist(ACCESS_TOKEN_KEY, access_token)
        if refresh_token:
            self.refresh_token = refresh_token
            self._persist(REFRESH_TOKEN_KEY, refresh_token)
        if session_id is not None and session_id != "":
            self.session_id = str(session_id)
            self._persist(SESSION_ID_KEY, self.session_id)
        if user is not None:
            self.user = user
            if self.store is not None:
                self.store.set_user(user)

    def clear(self):
        """Forget every credential, in memory and on disk."""
        self.access_token = None
        self.refresh_token = None
        self.session_id = None
        self.user = None
        if self.store is not None:
            self.store.clear()
        logger.debug("Auth context cleared")

    @property
    def has_access_token(self) -> bool:
        return bool(self.access_token)

    def _persist(self, key: str, value: str):
        if self.store is not None:
            self.store.set(key, value)
