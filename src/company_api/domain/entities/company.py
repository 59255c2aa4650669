# src/company_api/domain/entities/company.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Company entity.

Purpose:
    The single aggregate of the service: a listed company identified by its
    ISIN, with name, ticker, exchange, and an optional website.

Layer:
    domain

Notes:
    - Construction and update are all-or-nothing: every field is normalized
      and validated before any attribute is assigned.
    - ``Company.create`` and ``Company.update`` report bad input as a failed
      ``Result``; direct construction raises ``DomainError``.
    - Website format is validated at the HTTP boundary, not here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID, uuid4

from company_api.domain.exceptions.base import DomainError
from company_api.domain.exceptions.company import BusinessRuleError
from company_api.domain.value_objects.isin import normalize_isin, upper_invariant, validate_isin
from company_api.domain.value_objects.result import Result

# Column sizes of the companies table.
MAX_LENGTHS = {"Name": 100, "Ticker": 10, "Exchange": 20, "Website": 255}


def _required(value: str, field_name: str) -> str:
    if not value:
        raise BusinessRuleError.required_field(field_name)
    return value


def _within_max_length(value: str | None, field_name: str) -> None:
    limit = MAX_LENGTHS[field_name]
    if value is not None and len(value) > limit:
        raise BusinessRuleError.max_length_exceeded(field_name, limit)


def normalize_company_fields(
    name: str | None,
    ticker: str | None,
    exchange: str | None,
    isin: str | None,
    website: str | None = None,
) -> dict[str, Any]:
    """Trim every field and upper-case ticker, exchange, and ISIN.

    A blank website collapses to ``None``.
    """
    return {
        "name": (name or "").strip(),
        "ticker": upper_invariant((ticker or "").strip()),
        "exchange": upper_invariant((exchange or "").strip()),
        "isin": normalize_isin(isin),
        "website": (website or "").strip() or None,
    }


def _validated_fields(
    name: str | None,
    ticker: str | None,
    exchange: str | None,
    isin: str | None,
    website: str | None,
) -> dict[str, Any]:
    """Normalize then validate; the first failure wins.

    Raises:
        BusinessRuleError: If a required field is empty or longer than its column.
        IsinFormatError: If the ISIN is malformed.
    """
    fields = normalize_company_fields(name, ticker, exchange, isin, website)
    _required(fields["name"], "Name")
    _required(fields["ticker"], "Ticker")
    _required(fields["exchange"], "Exchange")
    _required(fields["isin"], "ISIN")
    validate_isin(fields["isin"])
    for key in ("name", "ticker", "exchange", "website"):
        _within_max_length(fields[key], key.capitalize())
    return fields


@dataclass(slots=True)
class Company:
    """A listed company.

    Args:
        name: Company name (trimmed).
        ticker: Ticker symbol (trimmed, upper case).
        exchange: Listing exchange (trimmed, upper case).
        isin: 12-character ISIN (trimmed, upper case). Unique across companies.
        website: Optional absolute http/https URL (trimmed).
        id: Identifier assigned at creation; never reassigned.

    Raises:
        DomainError: If any field is invalid.
    """

    name: str
    ticker: str
    exchange: str
    isin: str
    website: str | None = None
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        """Validate and normalize all fields."""
        fields = _validated_fields(self.name, self.ticker, self.exchange, self.isin, self.website)
        self._assign(fields)

    @classmethod
    def create(
        cls,
        name: str | None,
        ticker: str | None,
        exchange: str | None,
        isin: str | None,
        website: str | None = None,
    ) -> Result[Company]:
        """Build a new company with a fresh identifier.

        Returns:
            Result[Company]: The entity, or a failure carrying the first
            validation message and its code.
        """
        try:
            company = cls(
                name=name or "",
                ticker=ticker or "",
                exchange=exchange or "",
                isin=isin or "",
                website=website,
            )
        except DomainError as exc:
            return Result.failure(exc.message, code=exc.code)
        return Result.success(company)

    def update(
        self,
        name: str | None,
        ticker: str | None,
        exchange: str | None,
        isin: str | None,
        website: str | None = None,
    ) -> Result[Company]:
        """Replace every mutable field, or none of them.

        Returns:
            Result[Company]: ``self`` on success; otherwise a failure and the
            entity is left untouched.
        """
        try:
            fields = _validated_fields(name, ticker, exchange, isin, website)
        except DomainError as exc:
            return Result.failure(exc.message, code=exc.code)
        self._assign(fields)
        return Result.success(self)

    def _assign(self, fields: dict[str, Any]) -> None:
        self.name = fields["name"]
        self.ticker = fields["ticker"]
        self.exchange = fields["exchange"]
        self.isin = fields["isin"]
        self.website = fields["website"]
