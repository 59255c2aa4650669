# src/company_api/infrastructure/database/session.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Process-wide async engine and session factory.

The lifespan calls :func:`init_engine_and_sessionmaker` on startup and
:func:`dispose_engine` on shutdown. Code running without a lifespan (the
CLI, tests using ``TestClient`` without a context) gets a lazily built
factory from :func:`get_sessionmaker`.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager, suppress
from dataclasses import dataclass

from sqlalchemy.exc import IllegalStateChangeError, InvalidRequestError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from company_api.config.settings import Settings, get_settings


@dataclass
class _Database:
    engine: AsyncEngine | None = None
    sessionmaker: async_sessionmaker[AsyncSession] | None = None


_db = _Database()


def build_engine(database_url: str, *, echo: bool = False) -> AsyncEngine:
    """Create an async engine that pings pooled connections before use."""
    return create_async_engine(database_url, pool_pre_ping=True, echo=echo)


def init_engine_and_sessionmaker(settings: Settings) -> None:
    """Build the global engine and session factory once.

    Raises:
        ValueError: If ``settings.database_url`` is empty.
    """
    if not settings.database_url:
        raise ValueError("database_url must be configured")
    if _db.engine is not None:
        return
    _db.engine = build_engine(settings.database_url, echo=settings.db_echo)
    _db.sessionmaker = async_sessionmaker(_db.engine, expire_on_commit=False)


async def dispose_engine() -> None:
    """Close pooled connections and forget the engine."""
    engine, _db.engine, _db.sessionmaker = _db.engine, None, None
    if engine is not None:
        await engine.dispose()


def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    """Return the session factory, building it from settings on first use."""
    if _db.sessionmaker is None:
        init_engine_and_sessionmaker(get_settings())
    if _db.sessionmaker is None:
        raise RuntimeError("session factory was not initialized")
    return _db.sessionmaker


@asynccontextmanager
async def get_db_session() -> AsyncIterator[AsyncSession]:
    """Yield a short-lived session; any open transaction is rolled back on exit."""
    session = get_sessionmaker()()
    try:
        yield session
    finally:
        # The session may still be acquiring a connection when cancelled.
        with suppress(InvalidRequestError, IllegalStateChangeError):
            if session.in_transaction():
                await session.rollback()
        with suppress(InvalidRequestError, IllegalStateChangeError):
            await session.close()
