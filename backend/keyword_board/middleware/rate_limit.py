"""
Rate Limit Middleware Module

Implements per-client API rate limiting based on IP address.
Supports configurable rate limits for the keyword API and other endpoints.
"""

import logging
import time
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from keyword_board.config import get_settings

logger = logging.getLogger(__name__)

_UNIT_SECONDS = {
    "second": 1,
    "seconds": 1,
    "minute": 60,
    "minutes": 60,
    "hour": 3600,
    "hours": 3600,
    "day": 86400,
    "days": 86400,
}

_STATIC_SUFFIXES = (".js", ".css", ".html", ".png", ".jpg", ".ico", ".svg", ".woff", ".woff2")


def parse_rate_limit(limit: str) -> tuple[int, int]:
    """
    Parse rate limit string to requests count and window seconds.

    Args:
        limit: Rate limit string like "100/minute", "100/15 minutes", "20/hour"

    Returns:
        Tuple of (requests_count, window_seconds)

    Raises:
        ValueError: If rate limit format is invalid
    """
    parts = limit.lower().split("/")
    if len(parts) != 2:
        raise ValueError(f"Invalid rate limit format: {limit}")

    try:
        count = int(parts[0])
    except ValueError as exc:
        raise ValueError(f"Invalid request count in rate limit: {limit}") from exc

    window = parts[1].split()
    if len(window) == 1:
        multiplier, unit = 1, window[0]
    elif len(window) == 2:
        try:
            multiplier = int(window[0])
        except ValueError as exc:
            raise ValueError(f"Invalid window size in rate limit: {limit}") from exc
        unit = window[1]
    else:
        raise ValueError(f"Invalid rate limit format: {limit}")

    if unit not in _UNIT_SECONDS:
        raise ValueError(f"Unknown time unit in rate limit: {unit}")
    if multiplier < 1:
        raise ValueError(f"Invalid window size in rate limit: {limit}")

    return count, multiplier * _UNIT_SECONDS[unit]


class InMemoryRateLimiter:
    """
    In-memory rate limiter using sliding window algorithm.

    State is per process; multiple workers each keep their own counters.
    """

    def __init__(self) -> None:
        # Structure: {key: [timestamp, ...]}
        self._requests: dict[str, list[float]] = {}

    def is_allowed(self, key: str, max_requests: int, window_seconds: int) -> tuple[bool, int, int]:
        """
        Check if request is allowed under rate limit.

        Args:
            key: Unique identifier (client IP)
            max_requests: Maximum requests allowed in window
            window_seconds: Time window in seconds

        Returns:
            Tuple of (is_allowed, remaining_requests, retry_after_seconds)
        """
        current_time = time.time()
        window_start = current_time - window_seconds

        # Drop entries outside the window
        hits = [ts for ts in self._requests.get(key, []) if ts > window_start]
        self._requests[key] = hits

        if len(hits) >= max_requests:
            oldest = min(hits) if hits else current_time
            retry_after = int(oldest + window_seconds - current_time) + 1
            return False, 0, max(1, retry_after)

        hits.append(current_time)
        remaining = max_requests - len(hits)

        return True, remaining, 0

    def cleanup_expired(self, max_age_seconds: int = 3600) -> None:
        """Remove keys whose latest request is older than max_age_seconds."""
        cutoff = time.time() - max_age_seconds
        self._requests = {
            k: v for k, v in self._requests.items()
            if v and max(v) > cutoff
        }


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Rate Limit Middleware

    Enforces rate limits per client IP address.

    Different limits apply to different endpoint types:
    - Keyword API endpoints (/api/*): RATE_LIMIT_API
    - Other endpoints: RATE_LIMIT_DEFAULT
    Health checks, docs and static assets are not limited.
    """

    def __init__(self, app: ASGIApp) -> None:
        super().__init__(app)
        settings = get_settings()
        self.enabled = settings.RATE_LIMIT_ENABLED
        self.api_limit = settings.RATE_LIMIT_API
        self.default_limit = settings.RATE_LIMIT_DEFAULT

        self._limiter = InMemoryRateLimiter()

        self._api_max, self._api_window = parse_rate_limit(self.api_limit)
        self._default_max, self._default_window = parse_rate_limit(self.default_limit)
        self._max_window = max(self._api_window, self._default_window)
        self._last_cleanup = time.time()

        logger.info(
            f"Rate limit middleware initialized: enabled={self.enabled}, "
            f"api={self.api_limit}, default={self.default_limit}"
        )

    def _get_client_ip(self, request: Request) -> str:
        """Extract client IP address from request."""
        # Check X-Forwarded-For header (for reverse proxy setups)
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            # Take the first IP (original client)
            return forwarded.split(",")[0].strip()

        real_ip = request.headers.get("x-real-ip")
        if real_ip:
            return real_ip.strip()

        if request.client:
            return request.client.host

        return "unknown"

    def _get_endpoint_limits(self, path: str) -> tuple[str, int, int]:
        """
        Get rate limits for the endpoint.

        Returns:
            Tuple of (tier, max_requests, window_seconds)
        """
        if path.startswith("/api/"):
            return "api", self._api_max, self._api_window
        return "default", self._default_max, self._default_window

    def _is_excluded_path(self, path: str) -> bool:
        """Check if path should be excluded from rate limiting."""
        if path == "/":
            return True
        excluded_prefixes = [
            "/health",
            "/docs",
            "/openapi.json",
            "/redoc",
            "/favicon.ico",
        ]
        if any(path.startswith(prefix) for prefix in excluded_prefixes):
            return True
        return path.endswith(_STATIC_SUFFIXES)

    def _maybe_cleanup(self) -> None:
        """Drop idle clients once per window."""
        now = time.time()
        if now - self._last_cleanup < self._max_window:
            return
        self._limiter.cleanup_expired(max_age_seconds=self._max_window)
        self._last_cleanup = now
        logger.debug("Rate limit cleanup completed")

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request through rate limiter."""
        if not self.enabled:
            return await call_next(request)

        path = request.url.path
        if self._is_excluded_path(path):
            return await call_next(request)

        self._maybe_cleanup()

        ip = self._get_client_ip(request)
        tier, max_requests, window_seconds = self._get_endpoint_limits(path)
        key = f"{tier}:ip:{ip}"

        is_allowed, remaining, retry_after = self._limiter.is_allowed(
            key, max_requests, window_seconds
        )

        if not is_allowed:
            logger.warning(
                f"Rate limit exceeded: key={key}, path={path}, "
                f"limit={max_requests}/{window_seconds}s"
            )
            return JSONResponse(
                status_code=429,
                content={
                    "message": "Too many requests, please try again later.",
                    "type": "rate_limit_error",
                    "code": "rate_limit_exceeded",
                },
                headers={
                    "X-RateLimit-Limit": str(max_requests),
                    "X-RateLimit-Remaining": "0",
                    "X-RateLimit-Reset": str(retry_after),
                    "Retry-After": str(retry_after),
                },
            )

        response = await call_next(request)

        response.headers["X-RateLimit-Limit"] = str(max_requests)
        response.headers["X-RateLimit-Remaining"] = str(remaining)
        response.headers["X-RateLimit-Reset"] = str(window_seconds)

        return response
