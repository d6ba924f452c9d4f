"""
Security Headers Middleware Module

Adds a conservative set of HTTP security headers to every response.
"""

from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from keyword_board.config import get_settings

# The page loads its script and stylesheet from the same origin only
CONTENT_SECURITY_POLICY = "; ".join(
    [
        "default-src 'self'",
        "base-uri 'self'",
        "font-src 'self' https: data:",
        "form-action 'self'",
        "frame-ancestors 'self'",
        "img-src 'self' data:",
        "object-src 'none'",
        "script-src 'self'",
        "script-src-attr 'none'",
        "style-src 'self' https: 'unsafe-inline'",
    ]
)

SECURITY_HEADERS = {
    "Content-Security-Policy": CONTENT_SECURITY_POLICY,
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Security Headers Middleware

    Headers already set by a route are left untouched. The interactive docs
    pull their assets from a CDN, so they are skipped.
    """

    def __init__(self, app: ASGIApp) -> None:
        super().__init__(app)
        self.enabled = get_settings().SECURITY_HEADERS_ENABLED

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        if not self.enabled or request.url.path.startswith(("/docs", "/redoc")):
            return response

        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response
