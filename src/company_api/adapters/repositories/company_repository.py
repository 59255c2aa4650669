# src/company_api/adapters/repositories/company_repository.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""SQLAlchemy company repository (Adapters Layer).

Purpose:
    Persist Company aggregates in the ``companies`` table and map rows to
    domain entities. Implements the domain ``CompanyRepository`` protocol.

Layer:
    adapters/repositories

Notes:
    - ISIN uniqueness is enforced by ``uq_companies_isin``; a violation that
      slips past the use case pre-check surfaces as the same
      ``BusinessRuleError`` (``UniqueISIN``).
    - ORM rows never leave this module.
"""

from __future__ import annotations

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from company_api.adapters.repositories.base_repository import BaseRepository
from company_api.domain.entities.company import Company
from company_api.domain.exceptions.company import (
    BusinessRuleError,
    EntityNotFoundError,
    IsinFormatError,
)
from company_api.infrastructure.database.models.company import (
    ISIN_UNIQUE_CONSTRAINT,
    CompanyModel,
)
from company_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)

_ISIN_CHECK_CONSTRAINT = "ck_companies_isin_format"


def _to_entity(row: CompanyModel) -> Company:
    return Company(
        id=row.id,
        name=row.name,
        ticker=row.ticker,
        exchange=row.exchange,
        isin=row.isin,
        website=row.website,
    )


class SqlAlchemyCompanyRepository(BaseRepository[CompanyModel]):
    """Company repository backed by an ``AsyncSession``."""

    # Last ISIN written; used to build the duplicate error message.
    _pending_isin: str = ""

    async def get_by_id(self, company_id: UUID) -> Company | None:
        row = await self._session.get(CompanyModel, company_id)
        return _to_entity(row) if row is not None else None

    async def get_by_isin(self, isin: str) -> Company | None:
        row = await self.fetch_optional(select(CompanyModel).where(CompanyModel.isin == isin))
        return _to_entity(row) if row is not None else None

    async def list_all(self) -> Sequence[Company]:
        stmt = self.order_by_with_pk(select(CompanyModel), CompanyModel.name, CompanyModel.id)
        return [_to_entity(row) for row in await self.fetch_all(stmt)]

    async def add(self, company: Company) -> Company:
        self._session.add(
            CompanyModel(
                id=company.id,
                name=company.name,
                ticker=company.ticker,
                exchange=company.exchange,
                isin=company.isin,
                website=company.website,
            )
        )
        self._pending_isin = company.isin
        await self.flush()
        return company

    async def update(self, company: Company) -> Company:
        row = await self._session.get(CompanyModel, company.id)
        if row is None:
            raise EntityNotFoundError("Company", company.id)

        row.name = company.name
        row.ticker = company.ticker
        row.exchange = company.exchange
        row.isin = company.isin
        row.website = company.website
        self._pending_isin = company.isin
        await self.flush()
        return company

    async def is_isin_unique(self, isin: str, exclude_id: UUID | None = None) -> bool:
        criteria = [CompanyModel.isin == isin]
        if exclude_id is not None:
            criteria.append(CompanyModel.id != exclude_id)
        return not await self.exists_where(*criteria)

    def translate_integrity_error(self, exc: IntegrityError) -> Exception | None:
        message = str(exc.orig)
        if ISIN_UNIQUE_CONSTRAINT in message:
            logger.warning(
                "company_isin_unique_violation",
                extra={"extra": {"isin": self._pending_isin}},
            )
            return BusinessRuleError.unique_constraint_violation("ISIN", self._pending_isin)
        if _ISIN_CHECK_CONSTRAINT in message:
            return IsinFormatError.invalid_format(self._pending_isin)
        return None
