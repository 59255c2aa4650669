# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Use case: Fetch a company by identifier.

Layer:
    application
"""

from __future__ import annotations

from uuid import UUID

from company_api.application.schemas.dto.companies import CompanyDTO
from company_api.application.uow import UnitOfWork
from company_api.application.use_cases.companies.common import get_company_repository


class GetCompanyUseCase:
    """Look up a single company by id.

    Args:
        uow: Unit-of-work used to access the company repository.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def execute(self, company_id: UUID) -> CompanyDTO | None:
        """Return the company, or ``None`` when no company has ``company_id``."""
        async with self._uow as tx:
            company = await get_company_repository(tx).get_by_id(company_id)
        return CompanyDTO.from_entity(company) if company is not None else None
