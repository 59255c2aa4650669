# src/company_api/infrastructure/database/models/base.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Declarative base, shared metadata and column mixins.

Constraint names are generated from :data:`NAMING_CONVENTIONS` so that
migrations and the ORM agree on them (``pk_companies``, ``uq_companies_isin``,
``ck_companies_isin_format``).
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from sqlalchemy import DateTime, MetaData, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from company_api.config.settings import get_settings

#: Schema for all tables; ``None`` uses the connection's search path.
DEFAULT_DB_SCHEMA: str | None = get_settings().db_schema or None

NAMING_CONVENTIONS: dict[str, str] = {
    "pk": "pk_%(table_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "ix": "ix_%(column_0_label)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
}

metadata = MetaData(naming_convention=NAMING_CONVENTIONS)


class Base(DeclarativeBase):
    metadata = metadata


def _now() -> datetime:
    return datetime.now(UTC)


class IdentityMixin:
    """UUID primary key generated client-side."""

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)


class TimestampMixin:
    """``created_at``/``updated_at`` in UTC; ``updated_at`` moves on every UPDATE."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_now, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_now, onupdate=_now, server_default=func.now()
    )
