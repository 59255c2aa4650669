# src/company_api/adapters/routers/api_router.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""API Router Aggregator (Adapters Layer).

Purpose:
    Compose the top-level `router` that includes all feature routers.

Responsibilities:
    • Mount health endpoints under `/health`.
    • Mount the OAuth2 token endpoint under `/connect`.
    • Mount company endpoints under `/api/companies`.

Layer:
    adapters/routers
"""

from __future__ import annotations

from fastapi import APIRouter

from company_api.adapters.routers.auth_router import router as auth_router
from company_api.adapters.routers.companies_router import router as companies_router
from company_api.adapters.routers.health_router import router as health_router

router = APIRouter()

router.include_router(health_router, prefix="/health", tags=["Health"])
router.include_router(auth_router)
router.include_router(companies_router)
