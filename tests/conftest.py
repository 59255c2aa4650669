# tests/conftest.py
from __future__ import annotations

import copy
import os
from collections.abc import Callable, Iterator, Sequence
from uuid import UUID

# Settings are read at import time by the ORM base; pin the environment first.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH_ENABLED", "false")

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from company_api.adapters.dependencies.companies_uow import get_companies_uow  # noqa: E402
from company_api.config.settings import get_settings  # noqa: E402
from company_api.domain.entities.company import Company  # noqa: E402

AUTH_SECRET = "test-secret-that-is-long-enough-for-hs256"


class FakeCompanyRepository:
    """In-memory CompanyRepository; stores copies so callers cannot mutate rows."""

    def __init__(self) -> None:
        self.rows: dict[UUID, Company] = {}

    async def get_by_id(self, company_id: UUID) -> Company | None:
        row = self.rows.get(company_id)
        return copy.copy(row) if row is not None else None

    async def get_by_isin(self, isin: str) -> Company | None:
        for row in self.rows.values():
            if row.isin == isin:
                return copy.copy(row)
        return None

    async def list_all(self) -> Sequence[Company]:
        return [copy.copy(r) for r in sorted(self.rows.values(), key=lambda c: (c.name, str(c.id)))]

    async def add(self, company: Company) -> Company:
        self.rows[company.id] = copy.copy(company)
        return company

    async def update(self, company: Company) -> Company:
        self.rows[company.id] = copy.copy(company)
        return company

    async def is_isin_unique(self, isin: str, exclude_id: UUID | None = None) -> bool:
        return not any(r.isin == isin and r.id != exclude_id for r in self.rows.values())


class FakeUnitOfWork:
    """UnitOfWork stand-in that hands out a single shared repository."""

    def __init__(self, repo: FakeCompanyRepository) -> None:
        self.repo = repo
        self.commits = 0
        self.rollbacks = 0
        self.entered = 0

    async def __aenter__(self) -> FakeUnitOfWork:
        self.entered += 1
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # type: ignore[no-untyped-def]
        if exc_type is not None:
            self.rollbacks += 1
        return None

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1

    def get_repository(self, repo_type: type) -> FakeCompanyRepository:
        return self.repo


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Drop the cached Settings so env changes made in a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def company_repo() -> FakeCompanyRepository:
    return FakeCompanyRepository()


@pytest.fixture
def fake_uow(company_repo: FakeCompanyRepository) -> FakeUnitOfWork:
    return FakeUnitOfWork(company_repo)


@pytest.fixture
def make_app(fake_uow: FakeUnitOfWork) -> Callable[[], FastAPI]:
    """Build a fresh app wired to the in-memory unit of work (no lifespan, no DB)."""
    from company_api.main import create_app

    def _make() -> FastAPI:
        app = create_app()
        app.dependency_overrides[get_companies_uow] = lambda: fake_uow
        return app

    return _make


@pytest.fixture
def client(make_app: Callable[[], FastAPI]) -> TestClient:
    return TestClient(make_app(), raise_server_exceptions=False)


@pytest.fixture
def enable_auth(monkeypatch: pytest.MonkeyPatch) -> str:
    """Turn bearer auth on with a valid secret; returns the secret."""
    monkeypatch.setenv("AUTH_ENABLED", "true")
    monkeypatch.setenv("AUTH_HS256_SECRET", AUTH_SECRET)
    return AUTH_SECRET
