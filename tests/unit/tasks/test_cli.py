# tests/unit/tasks/test_cli.py
from __future__ import annotations

import jwt
import pytest
from typer.testing import CliRunner

from company_api.tasks.cli import app

runner = CliRunner()
SECRET = "cli-test-secret-with-at-least-32-characters"


def test_token_command_prints_a_valid_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUTH_ENABLED", "true")
    monkeypatch.setenv("AUTH_HS256_SECRET", SECRET)

    result = runner.invoke(app, ["token"])

    assert result.exit_code == 0, result.output
    token = result.output.strip().splitlines()[-1]
    claims = jwt.decode(token, SECRET, algorithms=["HS256"], audience="companyapi")
    assert claims["sub"] == "swagger"


def test_token_command_without_secret_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUTH_ENABLED", "false")
    monkeypatch.delenv("AUTH_HS256_SECRET", raising=False)

    result = runner.invoke(app, ["token"])

    assert result.exit_code == 1


def test_token_command_rejects_unknown_scope(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUTH_ENABLED", "true")
    monkeypatch.setenv("AUTH_HS256_SECRET", SECRET)

    result = runner.invoke(app, ["token", "--scope", "admin"])

    assert result.exit_code == 2
