"""Common service plumbing."""

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from boardadmin.http.client import ApiClient
from boardadmin.http.errors import ApiError, handle_api_error

logger = logging.getLogger(__name__)

T = TypeVar("T")

INVALID_RESPONSE_MESSAGE = "Réponse du serveur invalide"


class ServiceError(Exception):
    """Service failure carrying a message ready for display."""


def service_call(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
    """Rethrow client failures and malformed payloads as ServiceError."""

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return await func(*args, **kwargs)
        except (ApiError, httpx.HTTPError) as e:
            raise ServiceError(handle_api_error(e)) from e
        except ValidationError as e:
            logger.error("Unexpected payload in %s: %s", func.__qualname__, e)
            raise ServiceError(INVALID_RESPONSE_MESSAGE) from e

    return wrapper


class BaseService:
    """Stateless set of backend operations sharing one API client."""

    def __init__(self, client: ApiClient):
        self.client = client
