# src/company_api/domain/value_objects/isin.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""ISIN rules.

Purpose:
    Normalize and validate International Securities Identification Numbers:
    two alphabetic country characters, nine alphanumerics, one numeric check
    digit.

Layer:
    domain/value_objects

Notes:
    The check digit is only required to be numeric; its Luhn value is not
    verified.
"""

from __future__ import annotations

import re

from company_api.domain.exceptions.company import IsinFormatError

ISIN_LENGTH = 12
ISIN_PATTERN = re.compile(r"^[A-Z]{2}[A-Z0-9]{9}[0-9]$")
_COUNTRY_CODE_PATTERN = re.compile(r"^[A-Z]{2}")


def upper_invariant(value: str) -> str:
    """Upper-case ``value`` one character at a time without changing its length.

    Characters whose upper-case form is longer than one character (``"ß"``
    becomes ``"SS"``) are kept as they are.
    """
    return "".join(_upper_char(c) for c in value)


def _upper_char(char: str) -> str:
    upper = char.upper()
    return upper if len(upper) == 1 else char


def normalize_isin(raw: str | None) -> str:
    """Return ``raw`` trimmed and upper-cased (empty string for ``None``)."""
    return upper_invariant((raw or "").strip())


def validate_isin(isin: str) -> None:
    """Validate an already-normalized ISIN.

    Checks run in order and the first failure wins: length, country code,
    full pattern.

    Args:
        isin: Normalized ISIN.

    Raises:
        IsinFormatError: If any check fails.
    """
    if len(isin) != ISIN_LENGTH:
        raise IsinFormatError.invalid_length(isin)
    if not _COUNTRY_CODE_PATTERN.match(isin):
        raise IsinFormatError.invalid_country_code(isin)
    if not ISIN_PATTERN.match(isin):
        raise IsinFormatError.invalid_format(isin)
