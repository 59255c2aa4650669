# src/company_api/infrastructure/middleware/correlation.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Correlation id middlewares.

``RequestIdMiddleware`` owns ``X-Request-ID`` and ``TraceIdMiddleware`` owns
``x-trace-id``. Both reuse a well-formed inbound value, otherwise mint a
UUID4, then store it on ``request.state``, bind it to the logging context
and echo it on the response. Error envelopes read ``request.state.trace_id``.
"""

from __future__ import annotations

import re
import uuid
from typing import Final

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from company_api.infrastructure.logging.logger import set_request_context

REQUEST_ID_HEADER: Final = "X-Request-ID"
TRACE_HEADER: Final = "x-trace-id"

_REQUEST_ID_RE: Final = re.compile(r"[A-Za-z0-9._:@-]{1,128}")
_MAX_TRACE_LEN: Final = 128


def _request_id_from(raw: str | None) -> str:
    if raw and _REQUEST_ID_RE.fullmatch(raw):
        return raw
    return str(uuid.uuid4())


def _trace_id_from(raw: str | None) -> str:
    value = (raw or "").strip()
    if 0 < len(value) <= _MAX_TRACE_LEN:
        return value
    return str(uuid.uuid4())


class RequestIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = _request_id_from(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id
        set_request_context(request_id=request_id)

        response = await call_next(request)
        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
        return response


class TraceIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        trace_id = _trace_id_from(request.headers.get(TRACE_HEADER))
        request.state.trace_id = trace_id
        set_request_context(trace_id=trace_id)

        response = await call_next(request)
        response.headers.setdefault(TRACE_HEADER, trace_id)
        return response
