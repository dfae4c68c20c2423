"""Response hardening middleware."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable


SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware adding hardening headers to every response."""

    async def dispatch(self, request: Request, call_next: Callable):
        response = await call_next(request)

        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)

        # Redirect targets must not be cached by intermediaries
        if 300 <= response.status_code < 400:
            response.headers["Cache-Control"] = "no-store"

        return response
