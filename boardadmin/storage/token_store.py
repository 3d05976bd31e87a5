"""Persisted credentials under fixed storage keys."""

import json
from typing import Any

from boardadmin.storage.database import Database

ACCESS_TOKEN_KEY = "access_token"
REFRESH_TOKEN_KEY = "refresh_token"
SESSION_ID_KEY = "session_id"
USER_KEY = "user"

AUTH_KEYS = [ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY, SESSION_ID_KEY, USER_KEY]


class TokenStore:
    """Reads and writes the four auth keys in the client database."""

    def __init__(self, db: Database):
        self.db = db

    def get(self, key: str) -> str | None:
        return self.db.get_value(key)

    def set(self, key: str, value: str):
        self.db.set_value(key, value)

    def get_user(self) -> dict[str, Any] | None:
        raw = self.db.get_value(USER_KEY)
        if not raw:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            return None

    def set_user(self, user: dict[str, Any]):
        self.db.set_value(USER_KEY, json.dumps(user, default=str))

    def clear(self):
        """Remove all auth keys together."""
        self.db.delete_values(AUTH_KEYS)
