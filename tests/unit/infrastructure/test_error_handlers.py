# tests/unit/infrastructure/test_error_handlers.py
from __future__ import annotations

import json
from types import SimpleNamespace
from uuid import uuid4

import pytest
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException

from company_api.domain.exceptions.company import BusinessRuleError, EntityNotFoundError
from company_api.infrastructure.http.errors import (
    UNEXPECTED_ERROR_MESSAGE,
    handle_domain_error,
    handle_http_exception,
    handle_unhandled_exception,
    handle_validation_error,
)


def _request(trace_id: str | None = "tid-1") -> SimpleNamespace:
    return SimpleNamespace(
        state=SimpleNamespace(trace_id=trace_id),
        url=SimpleNamespace(path="/api/companies"),
        method="POST",
    )


def _body(response) -> dict:  # type: ignore[no-untyped-def]
    return json.loads(response.body)


@pytest.mark.asyncio
async def test_business_rule_maps_to_400_with_code() -> None:
    exc = BusinessRuleError.unique_constraint_violation("ISIN", "US0378331005")
    response = await handle_domain_error(_request(), exc)  # type: ignore[arg-type]

    body = _body(response)["error"]
    assert response.status_code == 400
    assert body["code"] == "UniqueISIN"
    assert body["message"] == "The ISIN 'US0378331005' already exists and must be unique"
    assert body["trace_id"] == "tid-1"


@pytest.mark.asyncio
async def test_not_found_maps_to_404() -> None:
    response = await handle_domain_error(_request(), EntityNotFoundError("Company", uuid4()))  # type: ignore[arg-type]
    assert response.status_code == 404
    assert _body(response)["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_validation_error_maps_to_400() -> None:
    exc = RequestValidationError([{"loc": ("body", "name"), "msg": "bad", "type": "value_error"}])
    response = await handle_validation_error(_request(None), exc)  # type: ignore[arg-type]

    body = _body(response)["error"]
    assert response.status_code == 400
    assert body["code"] == "VALIDATION_ERROR"
    assert body["details"]["errors"][0]["msg"] == "bad"
    assert "trace_id" not in body


@pytest.mark.asyncio
async def test_http_exception_keeps_status_and_headers() -> None:
    exc = HTTPException(status_code=401, detail="Invalid token", headers={"WWW-Authenticate": "Bearer"})
    response = await handle_http_exception(_request(), exc)  # type: ignore[arg-type]

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"
    assert _body(response)["error"]["message"] == "Invalid token"


@pytest.mark.asyncio
async def test_unhandled_exception_hides_internal_detail() -> None:
    response = await handle_unhandled_exception(_request(), RuntimeError("db password=hunter2"))  # type: ignore[arg-type]

    body = _body(response)["error"]
    assert response.status_code == 500
    assert body["message"] == UNEXPECTED_ERROR_MESSAGE
    assert "hunter2" not in response.body.decode()
