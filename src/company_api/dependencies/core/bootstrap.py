# src/company_api/dependencies/core/bootstrap.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Startup and shutdown of shared infrastructure.

:func:`bootstrap` is entered by the FastAPI lifespan. It builds the database
engine, optionally seeds the reference companies (``SEED_ON_STARTUP``) and
always disposes the engine on the way out.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from fastapi import FastAPI

from company_api.config.settings import Settings, get_settings
from company_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)


@dataclass
class BootstrapState:
    settings: Settings
    seeded: int = 0


async def _seed() -> int:
    from company_api.adapters.dependencies.companies_uow import get_companies_uow
    from company_api.application.use_cases.companies.seed_companies import SeedCompaniesUseCase

    return await SeedCompaniesUseCase(get_companies_uow()).execute()


@asynccontextmanager
async def bootstrap(app: FastAPI) -> AsyncIterator[BootstrapState]:
    """Yield the resolved settings while the engine is up.

    Args:
        app: Application being started; unused for now but kept so the
            lifespan signature stays stable.
    """
    # Module import (not name import) so tests can patch the functions.
    import company_api.infrastructure.database.session as db_session

    settings = get_settings()
    logger.info("bootstrap_start", extra={"extra": {"environment": settings.environment.value}})
    db_session.init_engine_and_sessionmaker(settings)
    state = BootstrapState(settings=settings)
    try:
        if settings.seed_on_startup:
            state.seeded = await _seed()
            logger.info("bootstrap_seeded", extra={"extra": {"count": state.seeded}})
        yield state
    finally:
        try:
            await db_session.dispose_engine()
        except Exception:
            logger.exception("bootstrap_db_dispose_failed")
        logger.info("bootstrap_stop")
