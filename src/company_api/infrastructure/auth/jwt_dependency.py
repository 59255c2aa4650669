# src/company_api/infrastructure/auth/jwt_dependency.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Bearer-token guard for protected routes.

``auth_required()`` builds a FastAPI dependency. With ``AUTH_ENABLED`` off it
admits everyone as ``dev-user``. With it on, the request needs an HS256 JWT
whose signature, ``exp``, ``aud`` and ``iss`` verify and whose scopes cover
the required set (by default the API audience, ``companyapi``).

Status codes: 401 for a missing or invalid token, 403 for missing scopes,
500 if auth is on but no secret is configured.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any

import jwt
from fastapi import HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field

from company_api.config.features.auth import AuthSettings, get_auth_settings
from company_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)

_REQUIRED_CLAIMS = ["exp", "aud", "iss"]


class Principal(BaseModel):
    """The caller behind a verified token."""

    model_config = ConfigDict(frozen=True)

    sub: str = ""
    scopes: tuple[str, ...] = ()
    claims: Mapping[str, Any] = Field(default_factory=dict)


def _extract_bearer_token(source: Any) -> str:
    """Pull the token out of a request (or a raw ``Authorization`` value).

    Raises:
        HTTPException: 401 when the header is absent, not a Bearer header, or empty.
    """
    if source is None or isinstance(source, str):
        header = source
    else:
        header = source.headers.get("Authorization")
    scheme, _, token = (header or "").strip().partition(" ")
    if scheme.lower() != "bearer":
        raise HTTPException(status_code=401, detail="Missing bearer token")
    token = token.strip()
    if not token:
        raise HTTPException(status_code=401, detail="Missing token")
    return token


def _decode_hs256(token: str, cfg: AuthSettings) -> Mapping[str, Any]:
    if not cfg.hs256_secret:
        raise HTTPException(status_code=500, detail="Auth misconfigured (missing HS256 secret)")
    try:
        return jwt.decode(
            token,
            cfg.hs256_secret,
            algorithms=[cfg.algorithm],
            audience=cfg.audience,
            issuer=cfg.issuer,
            options={"require": _REQUIRED_CLAIMS},
        )
    except jwt.PyJWTError as exc:
        logger.info("auth_token_rejected", extra={"extra": {"reason": type(exc).__name__}})
        raise HTTPException(status_code=401, detail="Invalid token") from exc


def _claim_scopes(claims: Mapping[str, Any]) -> set[str]:
    """Scopes from ``scope`` (space separated) or ``scopes`` (list)."""
    raw = claims.get("scopes", claims.get("scope"))
    if isinstance(raw, str):
        return set(raw.split())
    if isinstance(raw, list | tuple | set):
        return {str(s) for s in raw if s}
    return set()


def _as_scope_set(scopes: str | Iterable[str] | None) -> frozenset[str] | None:
    if scopes is None:
        return None
    return frozenset(scopes.split() if isinstance(scopes, str) else scopes)


def auth_required(
    required_scopes: str | Iterable[str] | None = None,
) -> Callable[[Request], Awaitable[Principal]]:
    """Return a dependency that authenticates the request.

    Args:
        required_scopes: Scopes the token must carry. ``None`` means the
            configured audience.
    """
    fixed = _as_scope_set(required_scopes)

    async def _dependency(request: Request) -> Principal:
        cfg = get_auth_settings()
        if not cfg.enabled:
            return Principal(sub="dev-user", scopes=(cfg.audience,))

        claims = _decode_hs256(_extract_bearer_token(request), cfg)
        granted = _claim_scopes(claims)
        if not (fixed if fixed is not None else {cfg.audience}) <= granted:
            raise HTTPException(status_code=403, detail="Forbidden")
        return Principal(
            sub=str(claims.get("sub", "")), scopes=tuple(sorted(granted)), claims=claims
        )

    return _dependency
