"""Domain services, one per backend area."""

from boardadmin.services.base import BaseService, ServiceError, service_call
from boardadmin.services.auth import AuthService
from boardadmin.services.blog import BlogService
from boardadmin.services.profile import ProfileService
from boardadmin.services.recruiter import RecruiterService
from boardadmin.services.session import SessionService
from boardadmin.services.stats import STAT_ENDPOINTS, StatsService
from boardadmin.services.token import (
    TokenRefresher,
    TokenService,
    decode_token_payload,
    is_token_expired,
    should_refresh_token,
)

__all__ = [
    "BaseService",
    "ServiceError",
    "service_call",
    "AuthService",
    "BlogService",
    "ProfileService",
    "RecruiterService",
    "SessionService",
    "StatsService",
    "STAT_ENDPOINTS",
    "TokenRefresher",
    "TokenService",
    "decode_token_payload",
    "is_token_expired",
    "should_refresh_token",
]
