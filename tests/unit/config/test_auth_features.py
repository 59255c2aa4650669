# tests/unit/config/test_auth_features.py
from __future__ import annotations

from types import SimpleNamespace

import pytest

import company_api.config.features.auth as auth_features


def _settings(**overrides: object) -> SimpleNamespace:
    base: dict[str, object] = {
        "auth_enabled": False,
        "auth_hs256_secret": None,
        "auth_algorithm": "HS256",
        "auth_issuer": "company-api",
        "auth_audience": "companyapi",
        "auth_token_ttl_seconds": 3600,
        "auth_client_id": "swagger",
        "auth_client_secret": "secret",
    }
    base.update(overrides)
    return SimpleNamespace(**base)


def test_values_come_from_settings_without_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AUTH_ENABLED", raising=False)
    monkeypatch.setattr(
        auth_features,
        "get_settings",
        lambda: _settings(auth_enabled=True, auth_hs256_secret="from-settings"),
    )

    cfg = auth_features.get_auth_settings()

    assert cfg.enabled is True
    assert cfg.hs256_secret == "from-settings"
    assert cfg.token_ttl_seconds == 3600


def test_env_override_replaces_enabled_and_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(auth_features, "get_settings", lambda: _settings(auth_hs256_secret="x"))
    monkeypatch.setenv("AUTH_ENABLED", "yes")
    monkeypatch.setenv("AUTH_HS256_SECRET", "from-env")

    cfg = auth_features.get_auth_settings()

    assert cfg.enabled is True
    assert cfg.hs256_secret == "from-env"
    assert cfg.audience == "companyapi"
