# src/company_api/adapters/uow/sqlalchemy_uow.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""SQLAlchemy Unit of Work.

One ``AsyncSession`` per ``async with`` block. Repositories resolved inside
the block share it, so a use case's reads and writes run in one transaction.
Anything not committed when the block exits is rolled back.

Layer:
    adapters/uow
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import TracebackType
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from company_api.adapters.repositories.company_repository import SqlAlchemyCompanyRepository
from company_api.application.uow import UnitOfWork
from company_api.domain.interfaces.repositories.company_repository import CompanyRepository

RepoFactory = Callable[[AsyncSession], Any]

_DEFAULT_REPOSITORIES: dict[type[Any], RepoFactory] = {
    CompanyRepository: SqlAlchemyCompanyRepository,
    SqlAlchemyCompanyRepository: SqlAlchemyCompanyRepository,
}


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Unit of work over an ``async_sessionmaker``.

    Example::

        async with SqlAlchemyUnitOfWork(session_factory=factory) as tx:
            repo = tx.get_repository(CompanyRepository)
            await repo.add(company)
            await tx.commit()

    Args:
        session_factory: Produces a fresh ``AsyncSession`` on each entry.
        repo_factories: Extra or replacement repository factories keyed by
            protocol or class. The company repository is always registered.
    """

    def __init__(
        self,
        *,
        session_factory: async_sessionmaker[AsyncSession],
        repo_factories: Mapping[type[Any], RepoFactory] | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._factories = {**_DEFAULT_REPOSITORIES, **(repo_factories or {})}
        self._session: AsyncSession | None = None
        self._repos: dict[type[Any], Any] = {}
        self._finished = False

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        if self._session is not None:
            raise RuntimeError("UnitOfWork is already active; nested usage is not supported.")
        self._session = self._session_factory()
        self._finished = False
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        session, self._session = self._session, None
        self._repos.clear()
        if session is None:
            return
        try:
            if not self._finished:
                await session.rollback()
        finally:
            await session.close()

    def _active(self, action: str) -> AsyncSession:
        if self._session is None:
            raise RuntimeError(f"Cannot {action} outside 'async with' on the UnitOfWork.")
        return self._session

    async def commit(self) -> None:
        """Commit once; later calls in the same scope are no-ops."""
        session = self._active("commit")
        if not self._finished:
            await session.commit()
            self._finished = True

    async def rollback(self) -> None:
        """Roll back once; a no-op outside a scope or after commit."""
        if self._session is None or self._finished:
            return
        await self._session.rollback()
        self._finished = True

    def get_repository(self, repo_type: type[Any]) -> Any:
        """Return the repository for ``repo_type``, cached for this scope.

        Raises:
            RuntimeError: Outside an active scope.
            KeyError: If nothing is registered for ``repo_type``.
        """
        session = self._active("resolve repositories")
        if repo_type not in self._repos:
            if repo_type not in self._factories:
                raise KeyError(f"No repository factory registered for {repo_type!r}.")
            self._repos[repo_type] = self._factories[repo_type](session)
        return self._repos[repo_type]
