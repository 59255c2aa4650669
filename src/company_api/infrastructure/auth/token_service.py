# src/company_api/infrastructure/auth/token_service.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""OAuth2 client-credentials token issuance.

Purpose:
    Authenticate the single registered API client and mint HS256 access
    tokens that `auth_required()` accepts.

Notes:
    * Client secrets are compared in constant time.
    * Requested scopes must be a subset of the API scope; an empty request
      grants the full API scope.
"""

from __future__ import annotations

import hmac
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt

from company_api.config.features.auth import AuthSettings

__all__ = ["IssuedToken", "TokenError", "authenticate_client", "issue_access_token"]


class TokenError(Exception):
    """OAuth2 token endpoint error.

    Attributes:
        error: RFC 6749 error code (e.g., ``invalid_client``).
        description: Human-readable description.
    """

    def __init__(self, error: str, description: str) -> None:
        super().__init__(description)
        self.error = error
        self.description = description


@dataclass(frozen=True)
class IssuedToken:
    """A freshly minted access token."""

    access_token: str
    expires_in: int
    scope: str
    token_type: str = "Bearer"


def authenticate_client(cfg: AuthSettings, client_id: str, client_secret: str) -> None:
    """Verify client credentials.

    Raises:
        TokenError: ``invalid_client`` if the id or secret does not match.
    """
    id_ok = hmac.compare_digest(client_id.encode(), cfg.client_id.encode())
    secret_ok = hmac.compare_digest(client_secret.encode(), cfg.client_secret.encode())
    if not (id_ok and secret_ok):
        raise TokenError("invalid_client", "Client authentication failed")


def _granted_scopes(cfg: AuthSettings, requested: str | None) -> list[str]:
    allowed = {cfg.audience}
    wanted = [s for s in (requested or "").split() if s]
    if not wanted:
        return sorted(allowed)
    unknown = [s for s in wanted if s not in allowed]
    if unknown:
        raise TokenError("invalid_scope", f"Unknown scope: {' '.join(unknown)}")
    return sorted(set(wanted))


def issue_access_token(
    cfg: AuthSettings,
    *,
    client_id: str,
    scope: str | None = None,
    now: datetime | None = None,
) -> IssuedToken:
    """Mint an HS256 access token for an authenticated client.

    Args:
        cfg: Auth settings providing secret, issuer, audience and lifetime.
        client_id: Authenticated client; becomes the ``sub`` claim.
        scope: Space-separated requested scopes, if any.
        now: Issue time override (tests).

    Returns:
        IssuedToken: The encoded token and its metadata.

    Raises:
        TokenError: ``invalid_scope`` for unknown scopes.
        RuntimeError: If no signing secret is configured.
    """
    if not cfg.hs256_secret:
        raise RuntimeError("AUTH_HS256_SECRET is required to issue tokens")

    scopes = _granted_scopes(cfg, scope)
    issued_at = now or datetime.now(UTC)
    claims = {
        "iss": cfg.issuer,
        "aud": cfg.audience,
        "sub": client_id,
        "client_id": client_id,
        "scope": " ".join(scopes),
        "iat": issued_at,
        "exp": issued_at + timedelta(seconds=cfg.token_ttl_seconds),
    }
    token = jwt.encode(claims, cfg.hs256_secret, algorithm=cfg.algorithm)
    return IssuedToken(
        access_token=token,
        expires_in=cfg.token_ttl_seconds,
        scope=" ".join(scopes),
    )
