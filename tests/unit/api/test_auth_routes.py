"""
Name: Login and Auth Gate HTTP Tests

Responsibilities:
  - POST /login outcomes (200 / 400 / 401 / 404)
  - Protected routes: 401 without a token, 403 with a bad or expired one

Notes:
  - Real app, in-memory repositories (APP_ENV=test)
"""

from datetime import datetime, timezone

import pytest

from leavedesk.identity.tokens import TokenService, TokenSettings

pytestmark = pytest.mark.unit

PROTECTED = [
    ("get", "/users"),
    ("get", "/users/1"),
    ("put", "/users/1"),
    ("delete", "/users/1"),
    ("get", "/leaves"),
    ("post", "/leaves"),
    ("get", "/leaves/1"),
    ("put", "/leaves/1"),
    ("delete", "/leaves/1"),
]


def test_login_returns_bearer_token(client, seeded_profile):
    res = client.post("/login", json={"userId": 1, "password": "testpassword"})

    assert res.status_code == 200
    body = res.json()
    assert body["tokenType"] == "bearer"
    assert body["expiresIn"] == 48 * 3600

    me = client.get(
        "/users/1", headers={"Authorization": f"Bearer {body['token']}"}
    )
    assert me.status_code == 200
    assert me.json()["userId"] == 1


def test_login_wrong_password(client, seeded_profile):
    res = client.post("/login", json={"userId": 1, "password": "nope"})

    assert res.status_code == 401
    assert res.json()["code"] == "INVALID_CREDENTIAL"
    assert res.json()["error"] == "Invalid password"


def test_login_unknown_user(client, seeded_profile):
    res = client.post("/login", json={"userId": 42, "password": "testpassword"})

    assert res.status_code == 404
    assert res.json()["error"] == "User not found"


@pytest.mark.parametrize(
    "payload",
    [
        {"userId": 1},
        {"password": "testpassword"},
        {"userId": 1, "password": ""},
        {},
    ],
)
def test_login_missing_fields(client, seeded_profile, payload):
    res = client.post("/login", json=payload)

    assert res.status_code == 400
    assert res.json()["code"] == "VALIDATION_ERROR"
    assert res.json()["error"] == "Missing userId or password"


def test_login_without_body(client):
    res = client.post("/login")

    assert res.status_code == 400
    assert res.json()["error"] == "Missing userId or password"


@pytest.mark.parametrize("method, path", PROTECTED)
def test_protected_routes_require_a_token(client, method, path):
    res = client.request(method, path)

    assert res.status_code == 401
    assert res.json()["code"] == "MISSING_TOKEN"
    assert res.json()["error"] == "Token missing"


def test_non_bearer_scheme_counts_as_missing(client):
    res = client.get("/users", headers={"Authorization": "Basic dXNlcjpwYXNz"})

    assert res.status_code == 401


@pytest.mark.parametrize("method, path", PROTECTED)
def test_invalid_token_is_forbidden(client, method, path):
    res = client.request(
        method, path, headers={"Authorization": "Bearer not-a-real-token"}
    )

    assert res.status_code == 403
    assert res.json()["code"] == "INVALID_TOKEN"
    assert res.json()["error"] == "Invalid token"


def test_expired_token_is_forbidden(client, seeded_profile):
    past = TokenService(
        TokenSettings(secret="test-secret"),
        clock=lambda: datetime(2000, 1, 1, tzinfo=timezone.utc),
    )
    token = past.issue(1).token

    res = client.get("/users", headers={"Authorization": f"Bearer {token}"})

    assert res.status_code == 403


def test_token_signed_with_another_secret_is_forbidden(client, seeded_profile):
    token = TokenService(TokenSettings(secret="someone-else")).issue(1).token

    res = client.get("/leaves", headers={"Authorization": f"Bearer {token}"})

    assert res.status_code == 403


def test_registration_is_public(client, profile_fields):
    res = client.post(
        "/users",
        json={
            "userId": 7,
            "firstName": "Ann",
            "lastName": "Lee",
            "email": "ann@example.com",
            "designation": "Engineer",
            "dateOfBirth": "1992-02-02",
            "supervisor": "Test User",
            "password": "s3cret",
        },
    )

    assert res.status_code == 201
    login = client.post("/login", json={"userId": 7, "password": "s3cret"})
    assert login.status_code == 200
