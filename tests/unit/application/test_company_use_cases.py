# tests/unit/application/test_company_use_cases.py
from __future__ import annotations

from uuid import uuid4

import pytest

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
from company_api.domain.exceptions.company import BusinessRuleError, EntityNotFoundError

APPLE = CreateCompanyRequest("Apple Inc.", "AAPL", "NASDAQ", "US0378331005", "http://www.apple.com")
HEINEKEN = CreateCompanyRequest("Heineken NV", "HEIA", "Euronext Amsterdam", "NL0000009165")


@pytest.mark.asyncio
async def test_create_persists_and_commits(fake_uow, company_repo) -> None:
    result = await CreateCompanyUseCase(fake_uow).execute(APPLE)

    assert result.is_success
    dto = result.unwrap()
    assert dto.isin == "US0378331005"
    assert dto.id in company_repo.rows
    assert fake_uow.commits == 1


@pytest.mark.asyncio
async def test_create_invalid_input_returns_failure_without_touching_storage(
    fake_uow, company_repo
) -> None:
    result = await CreateCompanyUseCase(fake_uow).execute(
        CreateCompanyRequest("", "TEST", "NYSE", "US0000000001")
    )

    assert result.is_failure
    assert result.error == "The Name field is required for Company"
    assert company_repo.rows == {}
    assert fake_uow.entered == 0


@pytest.mark.asyncio
async def test_create_duplicate_isin_raises_unique_violation(fake_uow, company_repo) -> None:
    uc = CreateCompanyUseCase(fake_uow)
    assert (await uc.execute(APPLE)).is_success

    with pytest.raises(BusinessRuleError) as ex:
        await uc.execute(
            CreateCompanyRequest("Other", "OTH", "NYSE", " us0378331005 ")
        )

    assert ex.value.code == "UniqueISIN"
    assert ex.value.message == "The ISIN 'US0378331005' already exists and must be unique"
    assert len(company_repo.rows) == 1
    assert fake_uow.commits == 1


@pytest.mark.asyncio
async def test_get_and_list(fake_uow) -> None:
    created = (await CreateCompanyUseCase(fake_uow).execute(HEINEKEN)).unwrap()
    await CreateCompanyUseCase(fake_uow).execute(APPLE)

    assert await GetCompanyUseCase(fake_uow).execute(created.id) == created
    assert await GetCompanyUseCase(fake_uow).execute(uuid4()) is None

    names = [c.name for c in await ListCompaniesUseCase(fake_uow).execute()]
    assert names == ["Apple Inc.", "Heineken NV"]


@pytest.mark.asyncio
async def test_get_by_isin_normalizes_lookup(fake_uow) -> None:
    created = (await CreateCompanyUseCase(fake_uow).execute(APPLE)).unwrap()

    found = await GetCompanyByIsinUseCase(fake_uow).execute("  us0378331005 ")
    assert found == created
    assert await GetCompanyByIsinUseCase(fake_uow).execute("NL0000009165") is None


@pytest.mark.asyncio
async def test_get_by_isin_rejects_blank(fake_uow) -> None:
    with pytest.raises(BusinessRuleError) as ex:
        await GetCompanyByIsinUseCase(fake_uow).execute("   ")
    assert ex.value.message == "ISIN cannot be empty"
    assert ex.value.code == "RequiredISIN"


def _update(company_id, req: CreateCompanyRequest) -> UpdateCompanyRequest:  # type: ignore[no-untyped-def]
    return UpdateCompanyRequest(
        id=company_id,
        name=req.name,
        ticker=req.ticker,
        exchange=req.exchange,
        isin=req.isin,
        website=req.website,
    )


@pytest.mark.asyncio
async def test_update_replaces_fields(fake_uow, company_repo) -> None:
    created = (await CreateCompanyUseCase(fake_uow).execute(APPLE)).unwrap()

    result = await UpdateCompanyUseCase(fake_uow).execute(
        _update(created.id, CreateCompanyRequest("Apple", "aapl", "nyse", "us0378331005"))
    )

    assert result.is_success
    stored = company_repo.rows[created.id]
    assert (stored.name, stored.exchange, stored.website) == ("Apple", "NYSE", None)


@pytest.mark.asyncio
async def test_update_missing_company_raises_not_found(fake_uow) -> None:
    missing = uuid4()
    with pytest.raises(EntityNotFoundError) as ex:
        await UpdateCompanyUseCase(fake_uow).execute(_update(missing, APPLE))
    assert ex.value.message == f"Company with identifier '{missing}' was not found"


@pytest.mark.asyncio
async def test_update_to_taken_isin_raises(fake_uow) -> None:
    apple = (await CreateCompanyUseCase(fake_uow).execute(APPLE)).unwrap()
    await CreateCompanyUseCase(fake_uow).execute(HEINEKEN)

    with pytest.raises(BusinessRuleError) as ex:
        await UpdateCompanyUseCase(fake_uow).execute(
            _update(apple.id, CreateCompanyRequest("Apple", "AAPL", "NASDAQ", "nl0000009165"))
        )
    assert ex.value.code == "UniqueISIN"


@pytest.mark.asyncio
async def test_update_invalid_fields_returns_failure_and_keeps_row(fake_uow, company_repo) -> None:
    apple = (await CreateCompanyUseCase(fake_uow).execute(APPLE)).unwrap()
    commits_before = fake_uow.commits

    result = await UpdateCompanyUseCase(fake_uow).execute(
        _update(apple.id, CreateCompanyRequest("Apple", "", "NASDAQ", "US0378331005"))
    )

    assert result.is_failure
    assert result.code == "RequiredTicker"
    assert company_repo.rows[apple.id].ticker == "AAPL"
    assert fake_uow.commits == commits_before
