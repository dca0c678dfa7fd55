"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client limit on every route.
Each application instance gets its own Limiter so that limits and
counters follow the settings it was built with.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

DEFAULT_RATE_LIMIT = "60/minute"


def build_limiter(default_limit: str = DEFAULT_RATE_LIMIT) -> Limiter:
    """Create a Limiter keyed by client address.

    Args:
        default_limit: slowapi limit string applied to every route,
            e.g. "60/minute".
    """
    return Limiter(key_func=get_remote_address, default_limits=[default_limit])


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Kept synchronous: SlowAPIMiddleware calls it directly and returns
    its result as the response.

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
