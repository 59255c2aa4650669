# src/company_api/adapters/uow/__init__.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""
Unit of Work implementations (Adapters Layer)

Exports:
    - SqlAlchemyUnitOfWork: SQLAlchemy-backed UnitOfWork for FastAPI
      dependencies and CLI wiring. Application code depends only on
      `company_api.application.uow.UnitOfWork`.
"""

from __future__ import annotations

from .sqlalchemy_uow import SqlAlchemyUnitOfWork

__all__ = ["SqlAlchemyUnitOfWork"]
