# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Shared helpers for the company use cases."""

from __future__ import annotations

from typing import cast

from company_api.application.uow import UnitOfWork
from company_api.domain.interfaces.repositories.company_repository import CompanyRepository


def get_company_repository(tx: UnitOfWork) -> CompanyRepository:
    """Resolve the company repository bound to the active UnitOfWork."""
    return cast(CompanyRepository, tx.get_repository(CompanyRepository))
