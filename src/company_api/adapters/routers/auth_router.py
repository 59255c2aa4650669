# src/company_api/adapters/routers/auth_router.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""OAuth2 token endpoint (client credentials).

Summary:
    ``POST /connect/token`` exchanges the registered client's credentials for
    an HS256 bearer token accepted by the protected company routes.

Request:
    ``application/x-www-form-urlencoded`` (RFC 6749 §4.4) or a JSON object
    with ``grant_type``, ``client_id``, ``client_secret`` and optional
    ``scope``. Client credentials may also arrive via HTTP Basic.

Errors (400, RFC 6749 §5.2):
    unsupported_grant_type, invalid_request, invalid_client, invalid_scope.

Layer:
    adapters/routers
"""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any
from urllib.parse import parse_qsl

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from company_api.adapters.schemas.http.auth import OAuthErrorResponse, TokenResponse
from company_api.config.features.auth import get_auth_settings
from company_api.infrastructure.auth.token_service import (
    TokenError,
    authenticate_client,
    issue_access_token,
)
from company_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)
router = APIRouter(prefix="/connect", tags=["Auth"])

_GRANT_TYPE = "client_credentials"


def _oauth_error(error: str, description: str) -> JSONResponse:
    body = OAuthErrorResponse(error=error, error_description=description)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump_http(),
        headers={"Cache-Control": "no-store"},
    )


async def _read_params(request: Request) -> dict[str, str]:
    raw = await request.body()
    content_type = request.headers.get("content-type", "")
    if "application/json" in content_type:
        try:
            parsed: Any = json.loads(raw or b"{}")
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise TokenError("invalid_request", "Malformed JSON body") from exc
        if not isinstance(parsed, dict):
            raise TokenError("invalid_request", "Body must be a JSON object")
        return {str(k): str(v) for k, v in parsed.items() if v is not None}
    try:
        form = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TokenError("invalid_request", "Form body is not valid UTF-8") from exc
    return dict(parse_qsl(form, keep_blank_values=True))


def _basic_credentials(request: Request) -> tuple[str, str] | None:
    header = request.headers.get("Authorization", "")
    if not header.lower().startswith("basic "):
        return None
    try:
        decoded = base64.b64decode(header.split(" ", 1)[1].strip()).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise TokenError("invalid_client", "Malformed Basic credentials") from exc
    client_id, _, client_secret = decoded.partition(":")
    return client_id, client_secret


@router.post(
    "/token",
    response_model=TokenResponse,
    responses={400: {"model": OAuthErrorResponse, "description": "OAuth2 error."}},
)
async def issue_token(request: Request) -> TokenResponse | JSONResponse:
    """Issue an access token for the client-credentials grant."""
    cfg = get_auth_settings()
    try:
        params = await _read_params(request)
        if params.get("grant_type") != _GRANT_TYPE:
            raise TokenError("unsupported_grant_type", "Only client_credentials is supported")

        creds = _basic_credentials(request) or (
            params.get("client_id", ""),
            params.get("client_secret", ""),
        )
        authenticate_client(cfg, *creds)
        issued = issue_access_token(cfg, client_id=creds[0], scope=params.get("scope"))
    except TokenError as exc:
        logger.info("token_request_rejected", extra={"extra": {"error": exc.error}})
        return _oauth_error(exc.error, exc.description)

    logger.info(
        "token_issued",
        extra={"extra": {"client_id": creds[0], "scope": issued.scope}},
    )
    return TokenResponse(
        access_token=issued.access_token,
        token_type=issued.token_type,
        expires_in=issued.expires_in,
        scope=issued.scope,
    )
