# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Company repository interface (Domain Layer).

Purpose:
    Persistence contract for Company aggregates. Implementations live in the
    adapters layer and must not leak ORM types.

Layer:
    domain/interfaces/repositories
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol
from uuid import UUID

from company_api.domain.entities.company import Company


class CompanyRepository(Protocol):
    """Abstract persistence interface for companies."""

    async def get_by_id(self, company_id: UUID) -> Company | None:
        """Return the company with ``company_id``, or ``None``."""
        ...

    async def get_by_isin(self, isin: str) -> Company | None:
        """Return the company with the normalized ``isin``, or ``None``."""
        ...

    async def list_all(self) -> Sequence[Company]:
        """Return every company, ordered by name."""
        ...

    async def add(self, company: Company) -> Company:
        """Persist a new company.

        Raises:
            BusinessRuleError: If storage rejects a duplicate ISIN.
        """
        ...

    async def update(self, company: Company) -> Company:
        """Persist changes to an existing company.

        Raises:
            EntityNotFoundError: If the company no longer exists.
            BusinessRuleError: If storage rejects a duplicate ISIN.
        """
        ...

    async def is_isin_unique(self, isin: str, exclude_id: UUID | None = None) -> bool:
        """Return True when no company (other than ``exclude_id``) holds ``isin``."""
        ...
