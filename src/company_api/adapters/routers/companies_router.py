# src/company_api/adapters/routers/companies_router.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""
Companies Router.

Summary:
    CRUD-style endpoints (no delete) for companies under ``/api/companies``.
    Every route requires a bearer token carrying the API scope.

Errors:
    * Soft validation failures from the use cases   -> 400 VALIDATION_ERROR
    * Path/body id mismatch on update                -> 400 ID_MISMATCH
    * Lookups that find nothing                      -> 404 NOT_FOUND
    * Business-rule and not-found exceptions raised by the use cases are
      rendered by the global domain error handler.

Layer:
    adapters/routers
"""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Request, Response, status
from fastapi.responses import JSONResponse

from company_api.adapters.dependencies.companies_uow import get_companies_uow
from company_api.adapters.presenters.companies_presenter import CompaniesPresenter
from company_api.adapters.routers.base_router import BaseRouter
from company_api.adapters.schemas.http.companies import (
    CompanyHTTP,
    CreateCompanyHTTPRequest,
    UpdateCompanyHTTPRequest,
)
from company_api.application.schemas.dto.companies import CompanyDTO
from company_api.application.uow import UnitOfWork
from company_api.application.use_cases.companies.create_company import (
    CreateCompanyRequest,
    CreateCompanyUseCase,
)
from company_api.application.use_cases.companies.get_company import GetCompanyUseCase
from company_api.application.use_cases.companies.get_company_by_isin import (
    GetCompanyByIsinUseCase,
)
from company_api.application.use_cases.companies.list_companies import ListCompaniesUseCase
from company_api.application.use_cases.companies.update_company import (
    UpdateCompanyRequest,
    UpdateCompanyUseCase,
)
from company_api.domain.value_objects.result import Result
from company_api.infrastructure.auth.jwt_dependency import auth_required

AUTH_DEP = auth_required()

router = BaseRouter(
    resource="companies",
    tags=["Companies"],
    dependencies=[Depends(AUTH_DEP)],
)
presenter = CompaniesPresenter()

UowDep = Annotated[UnitOfWork, Depends(get_companies_uow)]


def _error(
    request: Request,
    *,
    code: str,
    http_status: int,
    message: str,
    details: dict[str, str] | None = None,
) -> JSONResponse:
    result = presenter.present_error(
        code=code,
        http_status=http_status,
        message=message,
        request_id=router.request_id(request),
        trace_id=router.trace_id(request),
        details=details,
    )
    return presenter.to_error_response(result)


def _validation_failed(request: Request, result: Result[CompanyDTO]) -> JSONResponse:
    return _error(
        request,
        code="VALIDATION_ERROR",
        http_status=status.HTTP_400_BAD_REQUEST,
        message=result.error or "Invalid company",
        details={"rule": result.code} if result.code else None,
    )


@router.get(
    "",
    response_model=list[CompanyHTTP],
    status_code=status.HTTP_200_OK,
    responses=BaseRouter.std_error_responses(),
)
async def list_companies(request: Request, response: Response, uow: UowDep) -> list[CompanyHTTP]:
    """Return all companies ordered by name."""
    dtos = await ListCompaniesUseCase(uow).execute()
    result = presenter.present_companies(dtos, request_id=router.request_id(request))
    presenter.apply_headers(result, response)
    return result.body


@router.get(
    "/isin/{isin}",
    response_model=CompanyHTTP,
    status_code=status.HTTP_200_OK,
    responses=BaseRouter.std_error_responses(),
)
async def get_company_by_isin(
    isin: str, request: Request, response: Response, uow: UowDep
) -> CompanyHTTP | JSONResponse:
    """Return the company holding ``isin`` (trimmed, case-insensitive)."""
    dto = await GetCompanyByIsinUseCase(uow).execute(isin)
    if dto is None:
        return _error(
            request,
            code="NOT_FOUND",
            http_status=status.HTTP_404_NOT_FOUND,
            message=f"No company found with ISIN: {isin}",
        )
    result = presenter.present_company(dto, request_id=router.request_id(request))
    presenter.apply_headers(result, response)
    return result.body


@router.get(
    "/{company_id}",
    response_model=CompanyHTTP,
    status_code=status.HTTP_200_OK,
    responses=BaseRouter.std_error_responses(),
)
async def get_company(
    company_id: UUID, request: Request, response: Response, uow: UowDep
) -> CompanyHTTP | JSONResponse:
    """Return a single company by id."""
    dto = await GetCompanyUseCase(uow).execute(company_id)
    if dto is None:
        return _error(
            request,
            code="NOT_FOUND",
            http_status=status.HTTP_404_NOT_FOUND,
            message=f"Company with identifier '{company_id}' was not found",
        )
    result = presenter.present_company(dto, request_id=router.request_id(request))
    presenter.apply_headers(result, response)
    return result.body


@router.post(
    "",
    response_model=CompanyHTTP,
    status_code=status.HTTP_201_CREATED,
    responses=BaseRouter.std_error_responses(),
)
async def create_company(
    body: CreateCompanyHTTPRequest, request: Request, response: Response, uow: UowDep
) -> CompanyHTTP | JSONResponse:
    """Create a company; responds 201 with a ``Location`` header."""
    outcome = await CreateCompanyUseCase(uow).execute(
        CreateCompanyRequest(
            name=body.name,
            ticker=body.ticker,
            exchange=body.exchange,
            isin=body.isin,
            website=body.website,
        )
    )
    if outcome.is_failure:
        return _validation_failed(request, outcome)

    dto = outcome.unwrap()
    result = presenter.present_company(
        dto,
        request_id=router.request_id(request),
        status_code=status.HTTP_201_CREATED,
        location=str(request.url_for("get_company", company_id=str(dto.id))),
    )
    presenter.apply_headers(result, response)
    return result.body


@router.put(
    "/{company_id}",
    response_model=CompanyHTTP,
    status_code=status.HTTP_200_OK,
    responses=BaseRouter.std_error_responses(),
)
async def update_company(
    company_id: UUID,
    body: UpdateCompanyHTTPRequest,
    request: Request,
    response: Response,
    uow: UowDep,
) -> CompanyHTTP | JSONResponse:
    """Replace a company's fields; the body ``id`` must match the path."""
    if body.id != company_id:
        return _error(
            request,
            code="ID_MISMATCH",
            http_status=status.HTTP_400_BAD_REQUEST,
            message="ID mismatch between URL and request body",
        )

    return await _apply_update(body, request, response, uow)


@router.put(
    "",
    response_model=CompanyHTTP,
    status_code=status.HTTP_200_OK,
    responses=BaseRouter.std_error_responses(),
)
async def update_company_from_body(
    body: UpdateCompanyHTTPRequest,
    request: Request,
    response: Response,
    uow: UowDep,
) -> CompanyHTTP | JSONResponse:
    """Replace the fields of the company named by the body ``id``."""
    return await _apply_update(body, request, response, uow)


async def _apply_update(
    body: UpdateCompanyHTTPRequest, request: Request, response: Response, uow: UnitOfWork
) -> CompanyHTTP | JSONResponse:
    outcome = await UpdateCompanyUseCase(uow).execute(
        UpdateCompanyRequest(
            id=body.id,
            name=body.name,
            ticker=body.ticker,
            exchange=body.exchange,
            isin=body.isin,
            website=body.website,
        )
    )
    if outcome.is_failure:
        return _validation_failed(request, outcome)

    result = presenter.present_company(outcome.unwrap(), request_id=router.request_id(request))
    presenter.apply_headers(result, response)
    return result.body
