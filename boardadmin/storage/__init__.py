"""Storage module."""

from boardadmin.storage.database import Database, StoredValueRecord
from boardadmin.storage.token_store import (
    ACCESS_TOKEN_KEY,
    AUTH_KEYS,
    REFRESH_TOKEN_KEY,
    SESSION_ID_KEY,
    USER_KEY,
    TokenStore,
)

__all__ = [
    "Database",
    "StoredValueRecord",
    "TokenStore",
    "ACCESS_TOKEN_KEY",
    "REFRESH_TOKEN_KEY",
    "SESSION_ID_KEY",
    "USER_KEY",
    "AUTH_KEYS",
]
