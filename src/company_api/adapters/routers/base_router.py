# src/company_api/adapters/routers/base_router.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""``APIRouter`` for a REST resource mounted at ``/api/<resource>``.

Adds accessors for the correlation ids the middlewares put on
``request.state`` and the error responses every resource route documents.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from fastapi import APIRouter, Request

from company_api.adapters.schemas.http.envelopes import ErrorEnvelope

_ERROR_DESCRIPTIONS: dict[int, str] = {
    400: "Validation failure or business rule violation.",
    401: "Missing or invalid bearer token.",
    403: "Token lacks the required scope.",
    404: "Resource not found.",
    500: "Unexpected server error.",
}


class BaseRouter(APIRouter):
    def __init__(
        self,
        *,
        resource: str,
        base_path: str = "/api",
        tags: Sequence[str] | None = None,
        dependencies: Sequence[Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            prefix=f"{base_path.rstrip('/')}/{resource.strip('/')}",
            tags=list(tags or [resource]),
            dependencies=list(dependencies or []),
            **kwargs,
        )

    @staticmethod
    def request_id(request: Request) -> str | None:
        return getattr(request.state, "request_id", None)

    @staticmethod
    def trace_id(request: Request) -> str | None:
        return getattr(request.state, "trace_id", None)

    @staticmethod
    def std_error_responses() -> dict[int | str, dict[str, Any]]:
        """OpenAPI ``responses`` entries for the envelope-shaped errors."""
        return {
            code: {"model": ErrorEnvelope, "description": text}
            for code, text in _ERROR_DESCRIPTIONS.items()
        }
