# src/company_api/adapters/routers/health_router.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Liveness and readiness endpoints.

``GET /health`` answers without touching anything. ``GET /health/readiness``
runs ``SELECT 1`` and answers 503 when the database is unreachable. The
probe comes from ``probe_provider``, which tests replace through
``app.dependency_overrides``.
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Annotated, Literal, Protocol

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from company_api.adapters.schemas.http.base import BaseHTTPSchema
from company_api.infrastructure.database.session import get_db_session
from company_api.infrastructure.logging.logger import get_json_logger
from company_api.infrastructure.observability.metrics import get_readyz_db_latency_seconds

logger = get_json_logger(__name__)
router = APIRouter()


class HealthState(str, Enum):
    OK = "ok"
    DEGRADED = "degraded"


class CheckResult(BaseHTTPSchema):
    name: str
    status: Literal["ok", "down"]
    detail: str | None = None
    duration_ms: float


class ReadinessResponse(BaseHTTPSchema):
    status: HealthState
    checks: list[CheckResult]


class LivenessResponse(BaseHTTPSchema):
    status: Literal["ok"] = "ok"


class HealthProbe(Protocol):
    async def db(self) -> tuple[bool, str | None]:
        """Return ``(reachable, failure reason)``."""
        ...


class DatabaseProbe:
    async def db(self) -> tuple[bool, str | None]:
        try:
            async with get_db_session() as session:
                await session.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as exc:
            return False, type(exc).__name__
        return True, None


class ProbeProvider:
    """Dependency returning the probe; its identity is the override key."""

    def __call__(self) -> HealthProbe:
        return DatabaseProbe()


probe_provider = ProbeProvider()


@router.get("", summary="Liveness", response_model=LivenessResponse)
async def liveness() -> LivenessResponse:
    return LivenessResponse()


@router.get(
    "/readiness",
    summary="Readiness",
    response_model=ReadinessResponse,
    responses={503: {"model": ReadinessResponse, "description": "Database unreachable."}},
)
async def readiness(
    response: Response,
    probe: Annotated[HealthProbe, Depends(probe_provider, use_cache=False)],
) -> ReadinessResponse:
    started = time.perf_counter()
    ok, detail = await probe.db()
    elapsed = time.perf_counter() - started
    get_readyz_db_latency_seconds().observe(elapsed)

    if not ok:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    result = ReadinessResponse(
        status=HealthState.OK if ok else HealthState.DEGRADED,
        checks=[
            CheckResult(
                name="db",
                status="ok" if ok else "down",
                detail=detail,
                duration_ms=round(elapsed * 1000, 3),
            )
        ],
    )
    logger.info(
        "readiness_probe",
        extra={"extra": {"status": result.status.value, "db_ok": ok, "detail": detail}},
    )
    return result
