# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Company DTOs (Application Layer).

Purpose:
    Transport-agnostic read model returned by the company use cases.

Layer: application/schemas/dto
"""

from __future__ import annotations

from uuid import UUID

from pydantic import ConfigDict

from company_api.application.schemas.dto.base import BaseDTO
from company_api.domain.entities.company import Company


class CompanyDTO(BaseDTO):
    """Read model for a company."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    ticker: str
    exchange: str
    isin: str
    website: str | None = None

    @classmethod
    def from_entity(cls, company: Company) -> CompanyDTO:
        return cls(
            id=company.id,
            name=company.name,
            ticker=company.ticker,
            exchange=company.exchange,
            isin=company.isin,
            website=company.website,
        )
