"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client rate limit on every
endpoint. Protects against denial-of-service and resource abuse.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

DEFAULT_RATE_LIMIT = "60/minute"


def build_limiter(default_limit: str = DEFAULT_RATE_LIMIT, enabled: bool = True) -> Limiter:
    """Create a limiter keyed by client address.

    Args:
        default_limit: Limit applied to every route, e.g. "60/minute".
        enabled: When False, requests are never limited.

    Returns:
        A configured slowapi Limiter.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[default_limit],
        enabled=enabled,
    )


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Kept synchronous: SlowAPIMiddleware calls it without awaiting.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
