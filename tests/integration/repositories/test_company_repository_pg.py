# tests/integration/repositories/test_company_repository_pg.py
"""Postgres-backed repository tests; skipped unless TEST_DATABASE_URL is set."""

from __future__ import annotations

import os
from collections.abc import AsyncIterator
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from company_api.adapters.uow.sqlalchemy_uow import SqlAlchemyUnitOfWork
from company_api.application.use_cases.companies.create_company import (
    CreateCompanyRequest,
    CreateCompanyUseCase,
)
from company_api.application.use_cases.companies.list_companies import ListCompaniesUseCase
from company_api.application.use_cases.companies.update_company import (
    UpdateCompanyRequest,
    UpdateCompanyUseCase,
)
from company_api.domain.entities.company import Company
from company_api.domain.exceptions.company import BusinessRuleError, EntityNotFoundError
from company_api.domain.interfaces.repositories.company_repository import CompanyRepository
from company_api.infrastructure.database.models.base import metadata
from company_api.infrastructure.database.models.company import CompanyModel

DB_URL = os.getenv("TEST_DATABASE_URL")

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not DB_URL, reason="TEST_DATABASE_URL not set"),
]


@pytest_asyncio.fixture
async def session_factory() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    assert DB_URL is not None
    engine = create_async_engine(DB_URL)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all, tables=[CompanyModel.__table__])
        await conn.execute(text(f"DELETE FROM {CompanyModel.__table__.fullname}"))
    try:
        yield async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
    finally:
        await engine.dispose()


def _uow(factory: async_sessionmaker[AsyncSession]) -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(session_factory=factory)


@pytest.mark.asyncio
async def test_create_then_list(session_factory) -> None:
    created = await CreateCompanyUseCase(_uow(session_factory)).execute(
        CreateCompanyRequest("Apple Inc.", "aapl", "NASDAQ", "us0378331005")
    )
    assert created.is_success

    listed = await ListCompaniesUseCase(_uow(session_factory)).execute()
    assert [c.isin for c in listed] == ["US0378331005"]
    assert listed[0].ticker == "AAPL"


@pytest.mark.asyncio
async def test_duplicate_isin_is_rejected(session_factory) -> None:
    req = CreateCompanyRequest("Apple Inc.", "AAPL", "NASDAQ", "US0378331005")
    await CreateCompanyUseCase(_uow(session_factory)).execute(req)

    with pytest.raises(BusinessRuleError) as ex:
        await CreateCompanyUseCase(_uow(session_factory)).execute(req)
    assert ex.value.code == "UniqueISIN"


@pytest.mark.asyncio
async def test_unique_constraint_backs_the_precheck(session_factory) -> None:
    first = Company.create("Apple Inc.", "AAPL", "NASDAQ", "US0378331005").unwrap()
    second = Company.create("Copy", "CPY", "NYSE", "US0378331005").unwrap()

    async with _uow(session_factory) as tx:
        await tx.get_repository(CompanyRepository).add(first)
        await tx.commit()

    with pytest.raises(BusinessRuleError) as ex:
        async with _uow(session_factory) as tx:
            # Skips is_isin_unique to exercise the storage constraint directly.
            await tx.get_repository(CompanyRepository).add(second)
    assert ex.value.code == "UniqueISIN"


@pytest.mark.asyncio
async def test_update_persists_and_missing_raises(session_factory) -> None:
    created = (
        await CreateCompanyUseCase(_uow(session_factory)).execute(
            CreateCompanyRequest("Apple Inc.", "AAPL", "NASDAQ", "US0378331005")
        )
    ).unwrap()

    updated = await UpdateCompanyUseCase(_uow(session_factory)).execute(
        UpdateCompanyRequest(created.id, "Apple", "AAPL", "NYSE", "US0378331005")
    )
    assert updated.unwrap().exchange == "NYSE"

    with pytest.raises(EntityNotFoundError):
        await UpdateCompanyUseCase(_uow(session_factory)).execute(
            UpdateCompanyRequest(uuid4(), "X", "X", "X", "US0000000001")
        )
