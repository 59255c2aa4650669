# src/company_api/domain/exceptions/company.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""
Company domain exceptions.

Purpose:
    Typed errors raised by the Company entity, the ISIN rules, and the company
    use cases. Each carries a stable ``code`` that the HTTP boundary copies
    into the error envelope.

Layer:
    domain/exceptions

Notes:
    - ``BusinessRuleError`` covers required fields, field lengths and uniqueness.
    - ``IsinFormatError`` covers the three ISIN format checks.
    - ``EntityNotFoundError`` is the only error mapped to 404.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from company_api.domain.exceptions.base import DomainError

__all__ = ["BusinessRuleError", "EntityNotFoundError", "IsinFormatError"]


class BusinessRuleError(DomainError):
    """Raised when an application-level business rule is violated.

    Args:
        message: Human-readable error message.
        rule: Name of the violated rule; also used as the error code.
        details: Optional machine-readable diagnostic payload.
    """

    code = "BUSINESS_RULE_VIOLATION"

    def __init__(self, message: str, *, rule: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, code=rule, details=details)
        self.rule = rule

    @classmethod
    def required_field(cls, field: str, entity: str = "Company") -> BusinessRuleError:
        """Build the error raised when a required field is empty."""
        return cls(
            f"The {field} field is required for {entity}",
            rule=f"Required{field}",
            details={"field": field},
        )

    @classmethod
    def max_length_exceeded(cls, field: str, limit: int, entity: str = "Company") -> BusinessRuleError:
        """Build the error raised when a normalized field exceeds its storage size."""
        return cls(
            f"The {field} field of {entity} must be at most {limit} characters",
            rule=f"MaxLength{field}",
            details={"field": field, "max_length": limit},
        )

    @classmethod
    def unique_constraint_violation(cls, prop: str, value: str) -> BusinessRuleError:
        """Build the error raised when a unique property value is already taken."""
        return cls(
            f"The {prop} '{value}' already exists and must be unique",
            rule=f"Unique{prop}",
            details={"property": prop, "value": value},
        )


class IsinFormatError(DomainError):
    """Raised when an ISIN fails one of the format checks."""

    code = "IsinInvalidFormat"

    @classmethod
    def invalid_length(cls, isin: str) -> IsinFormatError:
        return cls(
            "ISIN must be exactly 12 characters long",
            code="IsinInvalidLength",
            details={"isin": isin, "length": len(isin)},
        )

    @classmethod
    def invalid_country_code(cls, isin: str) -> IsinFormatError:
        return cls(
            "The first 2 characters of ISIN must be uppercase alphabetic characters (A-Z)",
            code="IsinInvalidCountryCode",
            details={"isin": isin},
        )

    @classmethod
    def invalid_format(cls, isin: str) -> IsinFormatError:
        return cls(
            "ISIN must start with 2 alphabetic characters (A-Z), followed by 9 "
            "alphanumeric characters, and end with a numeric check digit",
            code="IsinInvalidFormat",
            details={"isin": isin},
        )


class EntityNotFoundError(DomainError):
    """Raised when an entity looked up by identifier does not exist.

    Args:
        entity_type: Logical entity name (e.g., "Company").
        entity_id: Identifier that was looked up.
    """

    code = "NOT_FOUND"

    def __init__(self, entity_type: str, entity_id: UUID | str) -> None:
        super().__init__(
            f"{entity_type} with identifier '{entity_id}' was not found",
            details={"entity_type": entity_type, "id": str(entity_id)},
        )
        self.entity_type = entity_type
        self.entity_id = entity_id
