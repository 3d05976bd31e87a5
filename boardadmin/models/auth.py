"""Authentication and session models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class TokenPair(BaseModel):
    """Access/refresh credential pair."""

    access: str
    refresh: str | None = None


class LoginResponse(BaseModel):
    """Payload returned by the login endpoint."""

    model_config = ConfigDict(extra="allow")

    access: str | None = None
    refresh: str | None = None
    session_id: str | int | None = None
    user: dict[str, Any] | None = None


class Session(BaseModel):
    """Active admin session."""

    model_config = ConfigDict(extra="allow")

    id: str | int
    user: Any = None
    created_at: datetime | None = None
    last_activity: datetime | None = None
    ip_address: str | None = None
    user_agent: str | None = None
    is_active: bool = True
    is_current: bool = False
