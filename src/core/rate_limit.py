"""Per-client request limits for the profile directory, using slowapi."""

import structlog
from fastapi import Request
from fastapi.responses import ORJSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from core.config import Settings, settings
from core.exceptions import ErrorCode

logger = structlog.get_logger()

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.rate_limit_enabled,
)

# Route decorators bind at import time, so they take the providers below and
# the limit strings are looked up per request.
_limits = {
    "read": settings.read_rate_limit,
    "write": settings.write_rate_limit,
}


def read_limit() -> str:
    """Browsing routes: list, detail, selection reads, polling."""
    return _limits["read"]


def write_limit() -> str:
    """Routes that change state: profile mutations and selection changes."""
    return _limits["write"]


def configure_rate_limits(app_settings: Settings) -> None:
    """Apply an application's limits to the process-wide limiter.

    The limiter is shared, so the most recently created app's settings win.
    """
    limiter.enabled = app_settings.rate_limit_enabled
    _limits["read"] = app_settings.read_rate_limit
    _limits["write"] = app_settings.write_rate_limit


async def rate_limit_exceeded_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Reply 429 in the shared error body format."""
    limit = exc.detail if isinstance(exc, RateLimitExceeded) else str(exc)
    logger.warning(
        "rate_limit_exceeded",
        client=get_remote_address(request),
        path=request.url.path,
        limit=limit,
    )
    return ORJSONResponse(
        status_code=429,
        content={
            "error_code": ErrorCode.RATE_LIMIT_EXCEEDED.value,
            "message": f"Too many requests for {request.url.path}: {limit}",
            "details": {"limit": limit},
        },
    )
