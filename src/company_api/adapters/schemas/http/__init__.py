# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""HTTP Schemas package (Adapters Layer).

Purpose:
    Public, adapter-facing HTTP schema surface re-exported for routers and
    presenters. BaseHTTPSchema stays internal to this package.

Layer:
    adapters/schemas/http
"""

from __future__ import annotations

from company_api.adapters.schemas.http.auth import OAuthErrorResponse, TokenResponse
from company_api.adapters.schemas.http.companies import (
    CompanyHTTP,
    CreateCompanyHTTPRequest,
    UpdateCompanyHTTPRequest,
)
from company_api.adapters.schemas.http.envelopes import ErrorEnvelope, ErrorObject

__all__ = [
    # Envelopes
    "ErrorObject",
    "ErrorEnvelope",
    # Companies
    "CompanyHTTP",
    "CreateCompanyHTTPRequest",
    "UpdateCompanyHTTPRequest",
    # Auth
    "TokenResponse",
    "OAuthErrorResponse",
]
