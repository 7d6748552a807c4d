"""
Per-client request throttling.

All routes draw from one shared per-client budget set in settings; login
also has its own stricter budget. Exhausted budgets answer 429 in the
response envelope.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from app.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

LOGIN_RATE_LIMIT = "5 per 15 minutes"

GENERAL_LIMIT_MESSAGE = "Too many requests from this IP, please try again later"
LOGIN_LIMIT_MESSAGE = "Too many login attempts, please try again later"


def general_rate_limit(settings: Settings) -> str:
    window_seconds = max(settings.RATE_LIMIT_WINDOW_MS // 1000, 1)
    return f"{settings.RATE_LIMIT_MAX} per {window_seconds} seconds"


_settings = get_settings()

limiter = Limiter(
    key_func=get_remote_address,
    application_limits=[general_rate_limit(_settings)],
    enabled=_settings.RATE_LIMIT_ENABLED,
)


# Must stay sync: SlowAPIMiddleware calls registered handlers without awaiting them
def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    is_login = request.url.path.endswith("/auth/login")
    logger.warning(f"Rate limit hit: {request.method} {request.url.path} - IP: {get_remote_address(request)}")
    return JSONResponse(
        status_code=429,
        content={
            "success": False,
            "message": LOGIN_LIMIT_MESSAGE if is_login else GENERAL_LIMIT_MESSAGE,
            "data": None,
        },
    )
