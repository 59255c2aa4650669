# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Use case: List all companies.

Layer:
    application
"""

from __future__ import annotations

import logging

from company_api.application.schemas.dto.companies import CompanyDTO
from company_api.application.uow import UnitOfWork
from company_api.application.use_cases.companies.common import get_company_repository

logger = logging.getLogger(__name__)


class ListCompaniesUseCase:
    """Return every company ordered by name."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def execute(self) -> list[CompanyDTO]:
        async with self._uow as tx:
            companies = await get_company_repository(tx).list_all()

        logger.debug("companies_listed", extra={"extra": {"count": len(companies)}})
        return [CompanyDTO.from_entity(c) for c in companies]
