# src/company_api/adapters/presenters/base_presenter.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Presenter primitives shared by resource presenters.

A presenter turns use-case output into a :class:`PresentResult` (body,
headers, optional status). Routers then copy the headers onto the FastAPI
``Response`` with :meth:`BasePresenter.apply_headers`, or turn an error
result into a standalone ``JSONResponse``.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from fastapi import Response
from fastapi.responses import JSONResponse

from company_api.adapters.schemas.http.envelopes import ErrorEnvelope, ErrorObject

T = TypeVar("T")


def compute_quoted_etag(payload: Any) -> str:
    """Strong ETag: quoted SHA-256 of ``payload`` serialized with sorted keys."""
    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    return '"' + hashlib.sha256(canonical.encode()).hexdigest() + '"'


@dataclass(slots=True)
class PresentResult(Generic[T]):
    body: T
    headers: dict[str, str] = field(default_factory=dict)
    status_code: int | None = None


class BasePresenter:
    @staticmethod
    def _correlation_headers(request_id: str | None) -> dict[str, str]:
        return {"X-Request-ID": request_id} if request_id else {}

    def present_error(
        self,
        *,
        code: str,
        http_status: int,
        message: str,
        request_id: str | None = None,
        trace_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> PresentResult[ErrorEnvelope]:
        error = ErrorObject(
            code=code, http_status=http_status, message=message, details=details, trace_id=trace_id
        )
        return PresentResult(
            ErrorEnvelope(error=error), self._correlation_headers(request_id), http_status
        )

    @staticmethod
    def apply_headers(result: PresentResult[Any], response: Response) -> None:
        for name, value in result.headers.items():
            response.headers[name] = value
        if result.status_code is not None:
            response.status_code = result.status_code

    @staticmethod
    def to_error_response(result: PresentResult[ErrorEnvelope]) -> JSONResponse:
        """Render an error result; ``None`` fields are left out of the body."""
        return JSONResponse(
            result.body.model_dump_http(exclude_none=True),
            status_code=result.status_code or 400,
            headers=result.headers,
        )
