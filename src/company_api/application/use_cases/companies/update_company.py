# src/company_api/application/use_cases/companies/update_company.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Use case: Update a company.

Purpose:
    Load an existing company, enforce ISIN uniqueness when the ISIN changes,
    re-validate every field, and persist the result.

Layer:
    application

Notes:
    - A missing company raises ``EntityNotFoundError``.
    - A duplicate ISIN raises ``BusinessRuleError`` (``UniqueISIN``).
    - Format failures come back as a failed ``Result`` and nothing is written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from company_api.application.schemas.dto.companies import CompanyDTO
from company_api.application.uow import UnitOfWork
from company_api.application.use_cases.companies.common import get_company_repository
from company_api.domain.exceptions.company import BusinessRuleError, EntityNotFoundError
from company_api.domain.value_objects.isin import normalize_isin
from company_api.domain.value_objects.result import Result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateCompanyRequest:
    """Raw input for a company update.

    Attributes:
        id: Identifier of the company to update.
        name: New company name.
        ticker: New ticker symbol.
        exchange: New listing exchange.
        isin: New ISIN; normalized before comparison and validation.
        website: New optional website URL.
    """

    id: UUID
    name: str
    ticker: str
    exchange: str
    isin: str
    website: str | None = None


class UpdateCompanyUseCase:
    """Apply a full update to an existing company.

    Args:
        uow: Unit-of-work used to access the company repository.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def execute(self, req: UpdateCompanyRequest) -> Result[CompanyDTO]:
        """Validate and persist the update.

        Returns:
            Result[CompanyDTO]: The updated company, or a failure carrying the
            first validation message.

        Raises:
            EntityNotFoundError: If no company has ``req.id``.
            BusinessRuleError: If another company already holds the new ISIN.
        """
        new_isin = normalize_isin(req.isin)

        async with self._uow as tx:
            repo = get_company_repository(tx)
            company = await repo.get_by_id(req.id)
            if company is None:
                raise EntityNotFoundError("Company", req.id)

            if new_isin != company.isin and not await repo.is_isin_unique(
                new_isin, exclude_id=company.id
            ):
                logger.info("company_isin_conflict", extra={"extra": {"isin": new_isin}})
                raise BusinessRuleError.unique_constraint_violation("ISIN", new_isin)

            updated = company.update(req.name, req.ticker, req.exchange, req.isin, req.website)
            if updated.is_failure:
                logger.info(
                    "company_update_rejected",
                    extra={
                        "extra": {
                            "company_id": str(req.id),
                            "reason": updated.error,
                            "code": updated.code,
                        }
                    },
                )
                return Result.failure(updated.error or "Invalid company", code=updated.code)

            await repo.update(company)
            await tx.commit()

        logger.info(
            "company_updated",
            extra={"extra": {"company_id": str(company.id), "isin": company.isin}},
        )
        return Result.success(CompanyDTO.from_entity(company))
