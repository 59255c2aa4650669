# src/company_api/domain/exceptions/base.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Root of the domain exception hierarchy.

The HTTP layer maps any :class:`DomainError` to the error envelope using its
``code``, ``message`` and ``details``; nothing here knows about status codes.
"""

from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """A failure the caller can act on.

    Subclasses set a class-level ``code``; an instance may override it.
    ``message`` is shown to clients verbatim.
    """

    code: str = "DOMAIN_ERROR"

    def __init__(
        self,
        message: str = "",
        *,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})
        if code:
            self.code = code

    def __str__(self) -> str:
        return self.message
