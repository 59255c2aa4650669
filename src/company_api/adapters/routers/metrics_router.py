# src/company_api/adapters/routers/metrics_router.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Prometheus scrape endpoint (`/metrics`).

Exposes the default registry in text format. Histograms are created before
the first scrape so their series exist on a cold start.

Layer:
    adapters/routers
"""

from __future__ import annotations

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from company_api.infrastructure.middleware.request_metrics import (
    get_http_server_request_duration_seconds,
)
from company_api.infrastructure.observability.metrics import get_readyz_db_latency_seconds

router = APIRouter()


@router.get("/metrics", include_in_schema=False)
async def metrics_probe() -> Response:
    """Expose Prometheus metrics."""
    get_readyz_db_latency_seconds()
    get_http_server_request_duration_seconds()
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
