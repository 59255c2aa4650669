# tests/integration/routers/test_auth_router.py
from __future__ import annotations

import base64

import jwt
from fastapi.testclient import TestClient

FORM = {"grant_type": "client_credentials", "client_id": "swagger", "client_secret": "secret"}


def test_form_grant_issues_token(enable_auth: str, client: TestClient) -> None:
    r = client.post("/connect/token", data=FORM)

    assert r.status_code == 200, r.text
    body = r.json()
    assert body["token_type"] == "Bearer"
    assert body["scope"] == "companyapi"
    assert body["expires_in"] == 86_400
    claims = jwt.decode(body["access_token"], enable_auth, algorithms=["HS256"], audience="companyapi")
    assert claims["sub"] == "swagger"


def test_json_grant_is_accepted(enable_auth: str, client: TestClient) -> None:
    r = client.post("/connect/token", json={**FORM, "scope": "companyapi"})
    assert r.status_code == 200


def test_basic_auth_credentials_are_accepted(enable_auth: str, client: TestClient) -> None:
    basic = base64.b64encode(b"swagger:secret").decode()
    r = client.post(
        "/connect/token",
        data={"grant_type": "client_credentials"},
        headers={"Authorization": f"Basic {basic}"},
    )
    assert r.status_code == 200


def test_wrong_secret_is_invalid_client(enable_auth: str, client: TestClient) -> None:
    r = client.post("/connect/token", data={**FORM, "client_secret": "nope"})

    assert r.status_code == 400
    assert r.json()["error"] == "invalid_client"


def test_unsupported_grant_type(enable_auth: str, client: TestClient) -> None:
    r = client.post("/connect/token", data={**FORM, "grant_type": "password"})

    assert r.status_code == 400
    assert r.json()["error"] == "unsupported_grant_type"


def test_unknown_scope_is_invalid_scope(enable_auth: str, client: TestClient) -> None:
    r = client.post("/connect/token", data={**FORM, "scope": "admin"})

    assert r.status_code == 400
    assert r.json()["error"] == "invalid_scope"


def test_form_body_that_is_not_utf8_is_invalid_request(enable_auth: str, client: TestClient) -> None:
    r = client.post(
        "/connect/token",
        content=b"grant_type=client_credentials&client_id=\xff",
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )

    assert r.status_code == 400
    assert r.json()["error"] == "invalid_request"


def test_json_body_that_is_not_utf8_is_invalid_request(enable_auth: str, client: TestClient) -> None:
    r = client.post(
        "/connect/token",
        content=b'{"grant_type": "\xff"}',
        headers={"Content-Type": "application/json"},
    )

    assert r.status_code == 400
    assert r.json()["error"] == "invalid_request"
