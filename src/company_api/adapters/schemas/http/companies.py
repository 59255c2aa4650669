# src/company_api/adapters/schemas/http/companies.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Company HTTP schemas (Adapters Layer).

Purpose:
    Request and response contracts for ``/api/companies``.

Notes:
    - Required company fields default to ``""`` so an empty or missing value
      reaches the domain factory and produces its "field is required" message.
    - ``website`` must be an absolute http/https URL when supplied.
    - Length caps mirror the ``companies`` column sizes; ISIN length is
      left to the domain rules so clients get the ISIN-specific message.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import AnyHttpUrl, Field, TypeAdapter, ValidationError, field_validator

from company_api.adapters.schemas.http.base import BaseHTTPSchema

__all__ = ["CompanyHTTP", "CreateCompanyHTTPRequest", "UpdateCompanyHTTPRequest"]


_HTTP_URL = TypeAdapter(AnyHttpUrl)


def _validate_website(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    website = value.strip()
    try:
        _HTTP_URL.validate_python(website)
    except ValidationError as exc:
        raise ValueError("Website must be a valid absolute http or https URL") from exc
    # The caller's spelling is stored, not pydantic's normalized form.
    return website


class CreateCompanyHTTPRequest(BaseHTTPSchema):
    """Body of ``POST /api/companies``."""

    name: str = Field(default="", max_length=100, examples=["Apple Inc."])
    ticker: str = Field(default="", max_length=10, examples=["AAPL"])
    exchange: str = Field(default="", max_length=20, examples=["NASDAQ"])
    isin: str = Field(default="", examples=["US0378331005"])
    website: str | None = Field(default=None, max_length=255, examples=["http://www.apple.com"])

    @field_validator("website")
    @classmethod
    def _website_is_absolute_url(cls, value: str | None) -> str | None:
        return _validate_website(value)


class UpdateCompanyHTTPRequest(CreateCompanyHTTPRequest):
    """Body of both update routes; under ``/{id}`` the ``id`` must match the path."""

    id: UUID = Field(..., description="Identifier of the company being updated.")


class CompanyHTTP(BaseHTTPSchema):
    """Company resource as returned by the API."""

    id: UUID
    name: str
    ticker: str
    exchange: str
    isin: str
    website: str | None = None
