# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Company presenter.

Maps application DTOs to ``CompanyHTTP`` and attaches ``ETag``,
``X-Request-ID`` and (for creations) ``Location`` headers.

Layer:
    adapters/presenters
"""

from __future__ import annotations

from collections.abc import Sequence

from company_api.adapters.presenters.base_presenter import (
    BasePresenter,
    PresentResult,
    compute_quoted_etag,
)
from company_api.adapters.schemas.http.companies import CompanyHTTP
from company_api.application.schemas.dto.companies import CompanyDTO


def to_http(dto: CompanyDTO) -> CompanyHTTP:
    return CompanyHTTP(
        id=dto.id,
        name=dto.name,
        ticker=dto.ticker,
        exchange=dto.exchange,
        isin=dto.isin,
        website=dto.website,
    )


class CompaniesPresenter(BasePresenter):
    """Presenter for company resources."""

    def present_company(
        self,
        dto: CompanyDTO,
        *,
        request_id: str | None = None,
        status_code: int | None = None,
        location: str | None = None,
    ) -> PresentResult[CompanyHTTP]:
        body = to_http(dto)
        headers = self._correlation_headers(request_id)
        headers["ETag"] = compute_quoted_etag(body.model_dump_http())
        if location is not None:
            headers["Location"] = location
        return PresentResult(body=body, headers=headers, status_code=status_code)

    def present_companies(
        self,
        dtos: Sequence[CompanyDTO],
        *,
        request_id: str | None = None,
    ) -> PresentResult[list[CompanyHTTP]]:
        body = [to_http(d) for d in dtos]
        headers = self._correlation_headers(request_id)
        headers["ETag"] = compute_quoted_etag([c.model_dump_http() for c in body])
        return PresentResult(body=body, headers=headers)
