"""
Per-IP rate limiting of the HTTP surface using slowapi.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from state_law_guidance.config import AppSettings, get_settings

logger = logging.getLogger(__name__)


def build_limiter(settings: AppSettings) -> Limiter:
    """Limiter applying the configured per-minute limit to every route."""
    return Limiter(
        key_func=get_remote_address,
        default_limits=[f"{settings.rate_limit_per_minute}/minute"],
        enabled=settings.rate_limit_enabled,
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Handle rate limit exceeded with user-friendly message."""
    request_id = getattr(request.state, "request_id", "unknown")
    logger.warning(
        f"Rate limit exceeded for {get_remote_address(request)}",
        extra={"request_id": request_id},
    )
    response = JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={
            "error": "Too many requests. Please try again later.",
            "request_id": request_id,
        },
    )
    response.headers["Retry-After"] = "60"
    response.headers["X-RateLimit-Limit"] = str(exc.detail)
    response.headers["X-RateLimit-Remaining"] = "0"
    return response


def setup_rate_limiter(app: FastAPI, settings: AppSettings | None = None) -> None:
    """Attach the limiter, its middleware and the 429 handler to `app`."""
    settings = settings or get_settings()
    if not settings.rate_limit_enabled:
        logger.info("Rate limiting is disabled")
        return

    app.state.limiter = build_limiter(settings)
    # Sync handler: slowapi's middleware calls it without awaiting
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
    logger.info(f"Rate limiting enabled: {settings.rate_limit_per_minute} req/min per IP")
