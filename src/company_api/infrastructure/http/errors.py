# src/company_api/infrastructure/http/errors.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Exception handlers producing the error envelope.

Every error leaves the service in the same shape::

    {"error": {"code", "http_status", "message", "details"?, "trace_id"?}}

Mapping:
    * RequestValidationError      -> 400 VALIDATION_ERROR
    * EntityNotFoundError         -> 404 NOT_FOUND
    * other DomainError           -> 400 with the error's own code
    * HTTPException               -> its status, HTTP_ERROR
    * anything else               -> 500 INTERNAL_ERROR, details stay in the log
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from company_api.domain.exceptions.base import DomainError
from company_api.domain.exceptions.company import EntityNotFoundError
from company_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


def error_envelope(
    *,
    code: str,
    http_status: int,
    message: str,
    details: Mapping[str, Any] | None = None,
    trace_id: str | None = None,
) -> dict[str, Any]:
    """Build the envelope, leaving out ``details``/``trace_id`` when absent."""
    optional = {"details": details, "trace_id": trace_id}
    body = {"code": code, "http_status": http_status, "message": message}
    body.update({k: v for k, v in optional.items() if v is not None})
    return {"error": body}


def _respond(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    details: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    trace_id = getattr(getattr(request, "state", None), "trace_id", None)
    return JSONResponse(
        error_envelope(
            code=code,
            http_status=status_code,
            message=message,
            details=details,
            trace_id=trace_id,
        ),
        status_code=status_code,
        headers=dict(headers) if headers else None,
    )


def domain_error_status(exc: DomainError) -> int:
    return 404 if isinstance(exc, EntityNotFoundError) else 400


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = jsonable_encoder(exc.errors())
    details = {"errors": errors}
    return _respond(request, 400, "VALIDATION_ERROR", "Request validation failed", details)


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code = domain_error_status(exc)
    logger.info(
        "domain_error",
        extra={"extra": {"code": exc.code, "status": status_code, "path": request.url.path}},
    )
    return _respond(request, status_code, exc.code, exc.message, exc.details or None)


async def handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:
    if isinstance(exc.detail, str):
        message, details = exc.detail, None
    else:
        message, details = "HTTP error", {"detail": exc.detail}
    return _respond(request, exc.status_code, "HTTP_ERROR", message, details, exc.headers)


async def handle_unhandled_exception(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled_exception",
        exc_info=exc,
        extra={"extra": {"method": request.method, "path": request.url.path}},
    )
    return _respond(request, 500, "INTERNAL_ERROR", UNEXPECTED_ERROR_MESSAGE)
