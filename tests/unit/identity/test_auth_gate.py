"""
Name: Auth Gate Tests

Responsibilities:
  - Bearer extraction (scheme, whitespace, empty token)
  - Decisions: MISSING_TOKEN vs INVALID_TOKEN vs Authenticated
  - HTTP mapping: 401 for missing, 403 for invalid/expired
  - FastAPI dependency attaches the identity to request.state
"""

from datetime import timedelta

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

from leavedesk.api.exception_handlers import register_exception_handlers
from leavedesk.identity.auth_gate import (
    AuthGate,
    GateDecision,
    Identity,
    RejectionReason,
    extract_bearer_token,
    rejection_to_http,
    require_identity,
)
from leavedesk.identity.tokens import TokenService, TokenSettings

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "header, expected",
    [
        ("Bearer abc", "abc"),
        ("bearer abc", "abc"),
        ("  Bearer   abc  ", "abc"),
        ("Bearer ", None),
        ("Bearer", None),
        ("Basic abc", None),
        ("abc", None),
        ("", None),
        (None, None),
    ],
)
def test_extract_bearer_token(header, expected):
    assert extract_bearer_token(header) == expected


def test_missing_header_is_missing_token(token_service):
    decision = AuthGate(token_service).evaluate(None)

    assert not decision.authenticated
    assert decision.reason == RejectionReason.MISSING_TOKEN


def test_wrong_scheme_is_missing_token(token_service):
    decision = AuthGate(token_service).evaluate("Token abc")
    assert decision.reason == RejectionReason.MISSING_TOKEN


def test_bad_token_is_invalid_token(token_service):
    decision = AuthGate(token_service).evaluate("Bearer not-a-jwt")

    assert not decision.authenticated
    assert decision.reason == RejectionReason.INVALID_TOKEN


def test_expired_token_is_invalid_token(token_service, clock):
    token = token_service.issue(1).token
    clock.now = clock.now + timedelta(hours=49)

    decision = AuthGate(token_service).evaluate(f"Bearer {token}")
    assert decision.reason == RejectionReason.INVALID_TOKEN


def test_valid_token_authenticates(token_service):
    token = token_service.issue(5).token

    decision = AuthGate(token_service).evaluate(f"Bearer {token}")

    assert decision.authenticated
    assert decision.identity == Identity(user_id=5)
    assert decision.reason is None


def test_rejection_to_http_status_codes():
    missing = rejection_to_http(
        GateDecision(reason=RejectionReason.MISSING_TOKEN, message="Token missing")
    )
    invalid = rejection_to_http(
        GateDecision(reason=RejectionReason.INVALID_TOKEN, message="Invalid token")
    )

    assert missing.status_code == 401
    assert missing.detail == "Token missing"
    assert invalid.status_code == 403
    assert invalid.detail == "Invalid token"


def _build_protected_app(gate: AuthGate) -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    require = require_identity(lambda: gate)

    @app.get("/whoami")
    def whoami(request: Request, identity: Identity = Depends(require)):
        assert request.state.identity is identity
        return {"userId": identity.user_id}

    return app


def test_dependency_rejects_and_accepts(token_service):
    client = TestClient(_build_protected_app(AuthGate(token_service)))

    missing = client.get("/whoami")
    assert missing.status_code == 401
    assert missing.json()["error"] == "Token missing"
    assert missing.json()["code"] == "MISSING_TOKEN"

    invalid = client.get("/whoami", headers={"Authorization": "Bearer nope"})
    assert invalid.status_code == 403
    assert invalid.json()["error"] == "Invalid token"

    token = token_service.issue(9).token
    ok = client.get("/whoami", headers={"Authorization": f"Bearer {token}"})
    assert ok.status_code == 200
    assert ok.json() == {"userId": 9}


def test_dependency_rejects_token_signed_elsewhere(token_service):
    client = TestClient(_build_protected_app(AuthGate(token_service)))
    foreign = TokenService(TokenSettings(secret="someone-else")).issue(1).token

    response = client.get("/whoami", headers={"Authorization": f"Bearer {foreign}"})
    assert response.status_code == 403
