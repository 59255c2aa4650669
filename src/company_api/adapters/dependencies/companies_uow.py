# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Company UnitOfWork dependency wiring.

Purpose:
    Provide a SQLAlchemy-backed UnitOfWork for the company use cases. Tests
    override ``get_companies_uow`` through ``app.dependency_overrides``.

Layer:
    adapters/dependencies
"""

from __future__ import annotations

from company_api.adapters.uow import SqlAlchemyUnitOfWork
from company_api.application.uow import UnitOfWork
from company_api.infrastructure.database.session import get_sessionmaker


def get_companies_uow() -> UnitOfWork:
    """Return a fresh UnitOfWork bound to the global async_sessionmaker."""
    return SqlAlchemyUnitOfWork(session_factory=get_sessionmaker())
