# src/company_api/config/features/auth.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Auth slice of the settings.

The JWT guard, the token service and the token endpoint only see
:class:`AuthSettings`. ``AUTH_ENABLED`` and ``AUTH_HS256_SECRET`` are re-read
from the environment whenever ``AUTH_ENABLED`` is exported, so toggling auth
does not require clearing the cached :class:`~company_api.config.settings.Settings`.
Everything else (issuer, audience, lifetime, client) comes from the cached
settings.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel

import company_api.config.settings as _settings_module

__all__ = ["AuthSettings", "get_auth_settings"]

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class AuthSettings(BaseModel):
    enabled: bool = False
    hs256_secret: str | None = None
    algorithm: str = "HS256"
    issuer: str = "company-api"
    audience: str = "companyapi"
    token_ttl_seconds: int = 86_400
    client_id: str = "swagger"
    client_secret: str = "secret"


def get_settings() -> Any:
    """Indirection over the settings accessor, patched in tests."""
    return _settings_module.get_settings()


def get_auth_settings() -> AuthSettings:
    s = get_settings()
    enabled, secret = s.auth_enabled, s.auth_hs256_secret
    if (raw := os.getenv("AUTH_ENABLED")) is not None:
        enabled = raw.strip().lower() in _TRUTHY
        secret = os.getenv("AUTH_HS256_SECRET")

    return AuthSettings(
        enabled=enabled,
        hs256_secret=secret,
        algorithm=s.auth_algorithm,
        issuer=s.auth_issuer,
        audience=s.auth_audience,
        token_ttl_seconds=s.auth_token_ttl_seconds,
        client_id=s.auth_client_id,
        client_secret=s.auth_client_secret,
    )
