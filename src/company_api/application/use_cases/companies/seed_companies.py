# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Use case: Seed reference companies.

Purpose:
    Populate an empty store with a small set of well-known listed companies
    for local development and demos.

Layer:
    application

Notes:
    - Seeding is a no-op when any company already exists.
    - Every seed passes through ``Company.create``, so seeds are normalized
      and validated exactly like API input.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from company_api.application.uow import UnitOfWork
from company_api.application.use_cases.companies.common import get_company_repository
from company_api.application.use_cases.companies.create_company import CreateCompanyRequest
from company_api.domain.entities.company import Company

logger = logging.getLogger(__name__)

DEFAULT_SEED_COMPANIES: tuple[CreateCompanyRequest, ...] = (
    CreateCompanyRequest("Apple Inc.", "AAPL", "NASDAQ", "US0378331005", "http://www.apple.com"),
    CreateCompanyRequest("British Airways Plc", "BAIRY", "Pink Sheets", "US1104193065"),
    CreateCompanyRequest("Heineken NV", "HEIA", "Euronext Amsterdam", "NL0000009165"),
    CreateCompanyRequest(
        "Panasonic Corp", "6752", "Tokyo Stock Exchange", "JP3866800000", "http://www.panasonic.co.jp"
    ),
    CreateCompanyRequest(
        "Porsche Automobil", "PAH3", "Deutsche Börse", "DE000PAH0038", "https://www.porsche.com/"
    ),
)


class SeedCompaniesUseCase:
    """Insert seed companies into an empty store.

    Args:
        uow: Unit-of-work used to access the company repository.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def execute(self, seeds: Sequence[CreateCompanyRequest] = DEFAULT_SEED_COMPANIES) -> int:
        """Insert ``seeds`` when the store is empty.

        Returns:
            int: Number of companies inserted (0 when the store was not empty).

        Raises:
            ValueError: If a seed fails validation.
        """
        async with self._uow as tx:
            repo = get_company_repository(tx)
            if await repo.list_all():
                logger.info("company_seed_skipped", extra={"extra": {"reason": "not_empty"}})
                return 0

            for seed in seeds:
                result = Company.create(
                    seed.name, seed.ticker, seed.exchange, seed.isin, seed.website
                )
                if result.is_failure:
                    raise ValueError(f"Invalid seed company {seed.isin!r}: {result.error}")
                await repo.add(result.unwrap())

            await tx.commit()

        logger.info("company_seed_completed", extra={"extra": {"inserted": len(seeds)}})
        return len(seeds)
