"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-client rate limits.
Protects the user endpoints against brute-force and resource abuse.
SlowAPIMiddleware applies the default limit to every route and calls
the handler below synchronously, so it must not be a coroutine.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import settings

HTTP_429 = 429

limiter = Limiter(
    key_func=get_remote_address, default_limits=[settings.rate_limit_default]
)


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with the standard envelope.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=HTTP_429,
        content={
            "status": HTTP_429,
            "message": f"Rate limit exceeded: {exc.detail}",
        },
    )
