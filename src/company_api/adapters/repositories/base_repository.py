# src/company_api/adapters/repositories/base_repository.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Query and flush helpers shared by SQLAlchemy repositories.

Repositories never commit; the unit of work does. They do flush, so storage
constraint violations surface inside the repository call where
:meth:`BaseRepository.translate_integrity_error` can turn them into domain
errors.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import Select, exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import ColumnElement

TModel = TypeVar("TModel")


class BaseRepository(Generic[TModel]):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @staticmethod
    def order_by_with_pk(stmt: Select[Any], sort_col: Any, pk_col: Any) -> Select[Any]:
        """Sort ascending by ``sort_col``; ties fall back to the primary key."""
        return stmt.order_by(sort_col.asc(), pk_col.asc())

    async def fetch_optional(self, stmt: Select[Any]) -> TModel | None:
        return (await self._session.execute(stmt)).scalars().first()

    async def fetch_all(self, stmt: Select[Any]) -> list[TModel]:
        return list((await self._session.execute(stmt)).scalars())

    async def exists_where(self, *criteria: ColumnElement[bool]) -> bool:
        return bool((await self._session.execute(select(exists().where(*criteria)))).scalar())

    async def flush(self) -> None:
        try:
            await self._session.flush()
        except IntegrityError as exc:
            domain_error = self.translate_integrity_error(exc)
            if domain_error is None:
                raise
            raise domain_error from exc

    def translate_integrity_error(self, exc: IntegrityError) -> Exception | None:
        """Map a constraint violation to a domain error; ``None`` re-raises as is."""
        return None
