# src/company_api/infrastructure/middleware/request_metrics.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Prometheus request latency.

Observes ``http_server_request_duration_seconds{method,handler,status}``.
``handler`` is the route template (``/api/companies/{company_id}``) when the
request matched a route, so path parameters never become label values.
"""

from __future__ import annotations

import time

from prometheus_client import Histogram
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from company_api.infrastructure.observability.metrics import get_or_create_hist

LATENCY_BUCKETS = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)


def get_http_server_request_duration_seconds() -> Histogram:
    return get_or_create_hist(
        "http_server_request_duration_seconds",
        "Server-side request duration in seconds.",
        labelnames=("method", "handler", "status"),
        buckets=LATENCY_BUCKETS,
    )


def _handler_label(request: Request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path_format", None) or request.url.path


class RequestLatencyMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp) -> None:
        super().__init__(app)
        self._histogram = get_http_server_request_duration_seconds()

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            self._histogram.labels(request.method, _handler_label(request), str(status)).observe(
                time.perf_counter() - started
            )
