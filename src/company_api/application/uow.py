# src/company_api/application/uow.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Unit of Work contract (Application Layer).

Use cases open one unit of work per operation, resolve the company repository
from it, and decide whether to commit. Implementations live in
``company_api.adapters.uow``; nothing here knows about SQLAlchemy.

Layer:
    application
"""

from __future__ import annotations

from types import TracebackType
from typing import Any, Protocol, Self, runtime_checkable


@runtime_checkable
class UnitOfWork(Protocol):
    """Transactional scope shared by the repositories resolved inside it.

    Leaving the ``async with`` block without calling :meth:`commit` discards
    the pending changes.
    """

    async def __aenter__(self) -> Self: ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool | None: ...

    async def commit(self) -> None:
        """Make the pending changes durable."""
        ...

    async def rollback(self) -> None:
        """Discard the pending changes."""
        ...

    def get_repository(self, repo_type: type[Any]) -> Any:
        """Return the repository registered under ``repo_type`` for this scope.

        Args:
            repo_type: Repository protocol (e.g. ``CompanyRepository``) or a
                concrete repository class.
        """
        ...
