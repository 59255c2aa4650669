# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""OAuth2 token endpoint schemas (Adapters Layer)."""

from __future__ import annotations

from pydantic import Field

from company_api.adapters.schemas.http.base import BaseHTTPSchema


class TokenResponse(BaseHTTPSchema):
    """Successful client-credentials grant (RFC 6749 §5.1)."""

    access_token: str
    token_type: str = Field(default="Bearer")
    expires_in: int = Field(..., ge=1)
    scope: str


class OAuthErrorResponse(BaseHTTPSchema):
    """Token endpoint error (RFC 6749 §5.2)."""

    error: str
    error_description: str | None = None
