# src/company_api/application/use_cases/companies/create_company.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Use case: Create a company.

Purpose:
    Normalize the input, validate it through the entity factory, enforce ISIN
    uniqueness, and persist the new company.

Layer:
    application

Notes:
    - Format failures come back as a failed ``Result``.
    - A duplicate ISIN raises ``BusinessRuleError`` (``UniqueISIN``).
    - The uniqueness pre-check is backed by the storage unique constraint;
      repositories translate a late violation into the same error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from company_api.application.schemas.dto.companies import CompanyDTO
from company_api.application.uow import UnitOfWork
from company_api.application.use_cases.companies.common import get_company_repository
from company_api.domain.entities.company import Company
from company_api.domain.exceptions.company import BusinessRuleError
from company_api.domain.value_objects.result import Result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateCompanyRequest:
    """Raw input for company creation.

    Attributes:
        name: Company name.
        ticker: Ticker symbol.
        exchange: Listing exchange.
        isin: ISIN; normalized before validation.
        website: Optional website URL.
    """

    name: str
    ticker: str
    exchange: str
    isin: str
    website: str | None = None


class CreateCompanyUseCase:
    """Create a company when its fields are valid and its ISIN is free.

    Args:
        uow: Unit-of-work used to access the company repository.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def execute(self, req: CreateCompanyRequest) -> Result[CompanyDTO]:
        """Validate and persist a new company.

        Returns:
            Result[CompanyDTO]: The created company, or a failure carrying the
            first validation message.

        Raises:
            BusinessRuleError: If another company already holds the ISIN.
        """
        created = Company.create(req.name, req.ticker, req.exchange, req.isin, req.website)
        if created.is_failure:
            logger.info(
                "company_create_rejected",
                extra={"extra": {"reason": created.error, "code": created.code}},
            )
            return Result.failure(created.error or "Invalid company", code=created.code)

        company = created.unwrap()

        async with self._uow as tx:
            repo = get_company_repository(tx)
            if not await repo.is_isin_unique(company.isin):
                logger.info("company_isin_conflict", extra={"extra": {"isin": company.isin}})
                raise BusinessRuleError.unique_constraint_violation("ISIN", company.isin)

            await repo.add(company)
            await tx.commit()

        logger.info(
            "company_created",
            extra={"extra": {"company_id": str(company.id), "isin": company.isin}},
        )
        return Result.success(CompanyDTO.from_entity(company))
