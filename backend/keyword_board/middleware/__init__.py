"""
Middleware Package

Contains application middleware components.
"""

from keyword_board.middleware.rate_limit import RateLimitMiddleware
from keyword_board.middleware.security_headers import SecurityHeadersMiddleware

__all__ = ["RateLimitMiddleware", "SecurityHeadersMiddleware"]
