"""Shared test fixtures."""

import base64
import json
import time

import pytest

from boardadmin.storage import Database, TokenStore


def _b64url(data: dict) -> str:
    return base64.urlsafe_b64encode(json.dumps(data).encode()).rstrip(b"=").decode()


@pytest.fixture
def make_token():
    """Build an unsigned JWT whose ``exp`` is ``expires_in`` seconds from now."""

    def _make(expires_in: float | None = 3600, now: float | None = None, **claims) -> str:
        payload = dict(claims)
        if expires_in is not None:
            payload["exp"] = int((now if now is not None else time.time()) + expires_in)
        return f"{_b64url({'alg': 'HS256', 'typ': 'JWT'})}.{_b64url(payload)}.signature"

    return _make


@pytest.fixture
def database(tmp_path):
    """Client storage database in a temporary directory."""
    db = Database(tmp_path / "boardadmin.db")
    db.create_tables()
    return db


@pytest.fixture
def token_store(database):
    return TokenStore(database)
