# src/company_api/infrastructure/database/models/company.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""ORM model for the ``companies`` table.

Storage-level invariants:
    * ``uq_companies_isin``: ISIN is unique across rows.
    * ``ck_companies_isin_format``: ISIN matches the 2+9+1 pattern.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import CheckConstraint, String, UniqueConstraint
from sqlalchemy.orm import Mapped, declared_attr, mapped_column

from company_api.domain.entities.company import MAX_LENGTHS
from company_api.domain.value_objects.isin import ISIN_LENGTH
from company_api.infrastructure.database.models.base import (
    DEFAULT_DB_SCHEMA,
    Base,
    IdentityMixin,
    TimestampMixin,
)

ISIN_CHECK_SQL = "isin ~ '^[A-Z]{2}[A-Z0-9]{9}[0-9]$'"
ISIN_UNIQUE_CONSTRAINT = "uq_companies_isin"


class CompanyModel(IdentityMixin, TimestampMixin, Base):
    """A listed company row."""

    __tablename__ = "companies"

    @declared_attr.directive
    def __table_args__(cls) -> tuple[Any, ...]:
        args: tuple[Any, ...] = (
            UniqueConstraint("isin"),
            CheckConstraint(ISIN_CHECK_SQL, name="isin_format"),
        )
        if DEFAULT_DB_SCHEMA:
            return (*args, {"schema": DEFAULT_DB_SCHEMA})
        return args

    name: Mapped[str] = mapped_column(String(MAX_LENGTHS["Name"]), nullable=False)
    ticker: Mapped[str] = mapped_column(String(MAX_LENGTHS["Ticker"]), nullable=False)
    exchange: Mapped[str] = mapped_column(String(MAX_LENGTHS["Exchange"]), nullable=False)
    isin: Mapped[str] = mapped_column(String(ISIN_LENGTH), nullable=False)
    website: Mapped[str | None] = mapped_column(String(MAX_LENGTHS["Website"]), nullable=True)
