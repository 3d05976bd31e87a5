"""Access-token inspection and refresh scheduling."""

import asyncio
import base64
import json
import logging
import time
from typing import Any

from boardadmin.auth.context import AuthContext

logger = logging.getLogger(__name__)

REFRESH_MARGIN_SECONDS = 300
REFRESH_RETRY_SECONDS = 240


def _b64url_decode(data: str) -> bytes:
    padding = 4 - (len(data) % 4)
    if padding != 4:
        data += "=" * padding
    return base64.urlsafe_b64decode(data)


def decode_token_payload(token: str | None) -> dict[str, Any] | None:
    """
    Read the JWT payload without checking the signature.

    The backend is the only verifier; this is used for expiry checks only.
    """
    if not token:
        return None
    parts = token.split(".")
    if len(parts) < 2:
        return None
    try:
        payload = json.loads(_b64url_decode(parts[1]))
    except (ValueError, UnicodeDecodeError):
        return None
    return payload if isinstance(payload, dict) else None


def get_token_expiry(token: str | None) -> float | None:
    """Return the ``exp`` claim as a timestamp, or None."""
    payload = decode_token_payload(token)
    if payload is None:
        return None
    exp = payload.get("exp")
    if isinstance(exp, bool) or not isinstance(exp, (int, float)):
        return None
    return float(exp)


def is_token_expired(token: str | None, now: float | None = None) -> bool:
    """True when the token is missing, unreadable or past its ``exp``."""
    exp = get_token_expiry(token)
    if exp is None:
        return True
    current = time.time() if now is None else now
    return exp <= current


def should_refresh_token(
    token: str | None,
    now: float | None = None,
    margin: float = REFRESH_MARGIN_SECONDS,
) -> bool:
    """True when the token is unreadable or expires in less than ``margin`` seconds."""
    exp = get_token_expiry(token)
    if exp is None:
        return True
    current = time.time() if now is None else now
    return exp - current < margin


class TokenService:
    """Refreshes the access token through the auth service when it is close to expiry."""

    def __init__(self, auth_service, auth: AuthContext, margin: float = REFRESH_MARGIN_SECONDS):
        self.auth_service = auth_service
        self.auth = auth
        self.margin = margin

    def get_token_payload(self) -> dict[str, Any] | None:
        return decode_token_payload(self.auth.access_token)

    async def refresh_token_if_needed(self) -> bool:
        """
        Refresh when needed.

        Returns:
            False if a refresh was attempted and failed, True otherwise.
        """
        if not should_refresh_token(self.auth.access_token, margin=self.margin):
            return True
        try:
            await self.auth_service.refresh_token()
            return True
        except Exception as e:
            logger.error("Token refresh failed: %s", e)
            return False


class TokenRefresher:
    """
    Background task that refreshes the access token shortly before it expires.

    The next wake-up is computed from the token's own ``exp`` claim. After
    a failed refresh the task tries again after ``retry_interval``. The
    task is cancelled on logout.
    """

    def __init__(
        self,
        token_service: TokenService,
        margin: float = REFRESH_MARGIN_SECONDS,
        retry_interval: float = REFRESH_RETRY_SECONDS,
    ):
        self.token_service = token_service
        self.margin = margin
        self.retry_interval = retry_interval
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def delay_until_refresh(self, now: float | None = None) -> float:
        """Seconds to sleep before the next refresh attempt."""
        exp = get_token_expiry(self.token_service.auth.access_token)
        if exp is None:
            return 0.0
        current = time.time() if now is None else now
        return max(0.0, exp - self.margin - current)

    def start(self):
        """Start the refresh loop. A running loop is restarted."""
        self.stop()
        self._task = asyncio.create_task(self._run(), name="token-refresher")

    def stop(self):
        """Cancel the refresh loop if it is running."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _run(self):
        while self.token_service.auth.refresh_token:
            await asyncio.sleep(self.delay_until_refresh())
            ok = await self.token_service.refresh_token_if_needed()
            if not ok:
                logger.warning("Retrying token refresh in %ss", self.retry_interval)
                await asyncio.sleep(self.retry_interval)
            elif self.delay_until_refresh() == 0:
                # Fresh token is already inside the margin
                await asyncio.sleep(self.retry_interval)
        logger.debug("No refresh token, refresher stopped")
