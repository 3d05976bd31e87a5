"""HTTP layer."""

from boardadmin.http.client import ApiClient
from boardadmin.http.errors import ApiError, handle_api_error
from boardadmin.http.query import build_query

__all__ = ["ApiClient", "ApiError", "handle_api_error", "build_query"]
