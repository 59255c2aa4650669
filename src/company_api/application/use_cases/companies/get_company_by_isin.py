# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Use case: Fetch a company by ISIN.

Purpose:
    Normalize the supplied ISIN (trim, upper-case) and look the company up.

Layer:
    application

Notes:
    - A blank ISIN is a business-rule violation, not a miss.
    - A malformed but non-blank ISIN is simply not found.
"""

from __future__ import annotations

from company_api.application.schemas.dto.companies import CompanyDTO
from company_api.application.uow import UnitOfWork
from company_api.application.use_cases.companies.common import get_company_repository
from company_api.domain.exceptions.company import BusinessRuleError
from company_api.domain.value_objects.isin import normalize_isin


class GetCompanyByIsinUseCase:
    """Look up a single company by its ISIN."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def execute(self, isin: str) -> CompanyDTO | None:
        """Return the company holding ``isin``, or ``None``.

        Raises:
            BusinessRuleError: If ``isin`` is blank.
        """
        normalized = normalize_isin(isin)
        if not normalized:
            raise BusinessRuleError("ISIN cannot be empty", rule="RequiredISIN")

        async with self._uow as tx:
            company = await get_company_repository(tx).get_by_isin(normalized)
        return CompanyDTO.from_entity(company) if company is not None else None
