"""Security headers middleware for rendered investor-relations pages.

Adds OWASP Secure Headers Project recommendations to every response. The
Content-Security-Policy allows inline styles (theme tokens are emitted
inline) and HTTPS images and fonts (tenant logos, brand fonts), and blocks
scripts entirely since rendered pages carry none.
"""

from __future__ import annotations

import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from irsite.config import settings

CSP_DIRECTIVES = [
    "default-src 'self'",
    "script-src 'none'",
    "style-src 'self' 'unsafe-inline' https://fonts.googleapis.com",
    "font-src 'self' https://fonts.gstatic.com",
    "img-src 'self' data: https:",
    "connect-src 'self'",
    "frame-ancestors 'none'",
    "base-uri 'self'",
    "form-action 'self'",
]

SECURITY_HEADERS = {
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains; preload",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Content-Security-Policy": "; ".join(CSP_DIRECTIVES),
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": (
        "accelerometer=(), camera=(), geolocation=(), gyroscope=(), "
        "magnetometer=(), microphone=(), payment=(), usb=()"
    ),
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers and an ``X-Request-ID`` to all responses.

    Usage:
        app.add_middleware(SecurityHeadersMiddleware)
    """

    def __init__(self, app: Callable, enabled: bool = True):
        super().__init__(app)
        self.enabled = enabled and settings.enable_security_headers

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)

        # Request ID is added even when the other headers are disabled
        response.headers["X-Request-ID"] = request_id
        if self.enabled:
            for name, value in SECURITY_HEADERS.items():
                response.headers[name] = value
        return response


def parse_cors_origins(origins_string: str) -> list[str]:
    """Parse CORS origins from comma-separated string.

    Example:
        >>> parse_cors_origins("https://ir.acme.com, https://acme.com")
        ['https://ir.acme.com', 'https://acme.com']

        >>> parse_cors_origins("*")
        ['*']
    """
    if origins_string == "*":
        return ["*"]

    return [origin.strip() for origin in origins_string.split(",") if origin.strip()]
