# src/company_api/infrastructure/middleware/access_log.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""One ``http_access`` log line per request.

Fields: ``method``, ``path``, ``query``, ``status``, ``elapsed_ms``,
``client_ip`` and ``ok``. ``ok`` is false and ``status`` is 500 when the
downstream app raised.
"""

from __future__ import annotations

import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from company_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)


class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        status, ok = 500, False
        try:
            response = await call_next(request)
            status, ok = response.status_code, True
            return response
        finally:
            logger.info(
                "http_access",
                extra={
                    "extra": {
                        "method": request.method,
                        "path": request.url.path,
                        "query": request.url.query,
                        "status": status,
                        "elapsed_ms": round((time.perf_counter() - started) * 1000, 2),
                        "client_ip": request.client.host if request.client else None,
                        "ok": ok,
                    }
                },
            )
