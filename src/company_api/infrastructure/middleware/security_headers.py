# src/company_api/infrastructure/middleware/security_headers.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Security headers for a JSON API.

Routes may set any of these themselves; the middleware only fills gaps.
HSTS is sent only when ``hsts_max_age`` is positive.
"""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

DEFAULT_SECURITY_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Cache-Control": "no-store",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, *, hsts_max_age: int = 0) -> None:
        super().__init__(app)
        self._headers = dict(DEFAULT_SECURITY_HEADERS)
        if hsts_max_age > 0:
            hsts = f"max-age={hsts_max_age}; includeSubDomains"
            self._headers["Strict-Transport-Security"] = hsts

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        for name, value in self._headers.items():
            response.headers.setdefault(name, value)
        return response
