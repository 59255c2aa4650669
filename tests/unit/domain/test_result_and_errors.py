# tests/unit/domain/test_result_and_errors.py
from __future__ import annotations

from uuid import uuid4

import pytest

from company_api.domain.exceptions.base import DomainError
from company_api.domain.exceptions.company import BusinessRuleError, EntityNotFoundError
from company_api.domain.value_objects.result import Result


def test_success_result_unwraps() -> None:
    result = Result.success(42)
    assert result.is_success and not result.is_failure
    assert result.unwrap() == 42


def test_failure_result_refuses_unwrap() -> None:
    result: Result[int] = Result.failure("nope", code="X")
    assert result.is_failure
    assert result.code == "X"
    with pytest.raises(ValueError):
        result.unwrap()


def test_failure_requires_message() -> None:
    with pytest.raises(ValueError):
        Result.failure("")


def test_unique_constraint_violation_message_and_code() -> None:
    err = BusinessRuleError.unique_constraint_violation("ISIN", "US0378331005")
    assert str(err) == "The ISIN 'US0378331005' already exists and must be unique"
    assert err.code == "UniqueISIN"
    assert err.details == {"property": "ISIN", "value": "US0378331005"}


def test_required_field_rule() -> None:
    err = BusinessRuleError.required_field("Ticker")
    assert err.message == "The Ticker field is required for Company"
    assert err.rule == "RequiredTicker"
    assert isinstance(err, DomainError)


def test_entity_not_found_message() -> None:
    cid = uuid4()
    err = EntityNotFoundError("Company", cid)
    assert err.message == f"Company with identifier '{cid}' was not found"
    assert err.code == "NOT_FOUND"


def test_domain_error_code_override_is_per_instance() -> None:
    err = DomainError("boom", code="CUSTOM")
    assert err.code == "CUSTOM"
    assert DomainError("plain").code == "DOMAIN_ERROR"
