# tests/unit/domain/test_company_entity.py
from __future__ import annotations

from uuid import UUID

import pytest

from company_api.domain.entities.company import MAX_LENGTHS, Company, normalize_company_fields
from company_api.domain.exceptions.base import DomainError


def _apple() -> Company:
    return Company.create("Apple Inc.", "AAPL", "NASDAQ", "US0378331005", "http://www.apple.com").unwrap()


def test_create_with_valid_fields_succeeds() -> None:
    result = Company.create("Test", "TEST", "NYSE", "US0000000001", "http://x.com")

    assert result.is_success
    company = result.unwrap()
    assert isinstance(company.id, UUID)
    assert company.website == "http://x.com"


def test_create_normalizes_fields() -> None:
    company = Company.create("  Acme  ", " acme ", " nyse ", " us0000000001 ", "  ").unwrap()

    assert company.name == "Acme"
    assert company.ticker == "ACME"
    assert company.exchange == "NYSE"
    assert company.isin == "US0000000001"
    assert company.website is None


def test_create_with_empty_name_fails_with_required_message() -> None:
    result = Company.create("", "TEST", "NYSE", "US0000000001")

    assert result.is_failure
    assert result.error == "The Name field is required for Company"
    assert result.code == "RequiredName"


@pytest.mark.parametrize(
    ("kwargs", "code"),
    [
        ({"ticker": "  "}, "RequiredTicker"),
        ({"exchange": ""}, "RequiredExchange"),
        ({"isin": None}, "RequiredISIN"),
        ({"isin": "US00"}, "IsinInvalidLength"),
    ],
)
def test_create_reports_first_failure(kwargs: dict[str, str | None], code: str) -> None:
    fields: dict[str, str | None] = {
        "name": "Test",
        "ticker": "TEST",
        "exchange": "NYSE",
        "isin": "US0000000001",
    }
    fields.update(kwargs)
    result = Company.create(**fields)  # type: ignore[arg-type]
    assert result.is_failure
    assert result.code == code


def test_each_create_assigns_distinct_ids() -> None:
    a = Company.create("A", "A", "X", "US0000000001").unwrap()
    b = Company.create("B", "B", "X", "US0000000002").unwrap()
    assert a.id != b.id


def test_direct_construction_raises_domain_error() -> None:
    with pytest.raises(DomainError):
        Company(name="X", ticker="X", exchange="X", isin="bad")


def test_update_replaces_all_fields_and_keeps_id() -> None:
    company = _apple()
    original_id = company.id

    result = company.update("Apple", "aapl2", "nyse", "us0378331005", None)

    assert result.is_success
    assert company.id == original_id
    assert (company.name, company.ticker, company.exchange) == ("Apple", "AAPL2", "NYSE")
    assert company.website is None


def test_failed_update_leaves_entity_untouched() -> None:
    company = _apple()
    before = (company.name, company.ticker, company.exchange, company.isin, company.website)

    result = company.update("New Name", "NEW", "NYSE", "XX12", None)

    assert result.is_failure
    assert result.code == "IsinInvalidLength"
    assert (company.name, company.ticker, company.exchange, company.isin, company.website) == before


def test_normalize_company_fields_handles_none() -> None:
    assert normalize_company_fields(None, None, None, None) == {
        "name": "",
        "ticker": "",
        "exchange": "",
        "isin": "",
        "website": None,
    }


def test_exchange_of_eszetts_keeps_its_length() -> None:
    company = Company.create("Apple", "AAPL", "ß" * 20, "US0378331005").unwrap()
    assert len(company.exchange) == 20


@pytest.mark.parametrize(
    ("field", "kwargs"),
    [
        ("Name", {"name": "n" * 101}),
        ("Ticker", {"ticker": "T" * 11}),
        ("Exchange", {"exchange": "E" * 21}),
        ("Website", {"website": "http://x.com/" + "p" * 250}),
    ],
)
def test_fields_longer_than_their_column_fail(field: str, kwargs: dict[str, str]) -> None:
    args = {"name": "Apple", "ticker": "AAPL", "exchange": "NASDAQ", "isin": "US0378331005"}
    result = Company.create(**{**args, **kwargs})

    assert result.is_failure
    assert result.code == f"MaxLength{field}"
    assert result.error == f"The {field} field of Company must be at most {MAX_LENGTHS[field]} characters"
