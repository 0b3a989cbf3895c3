"""
Name: Token Service Tests

Responsibilities:
  - Issue/verify round-trip returns the subject id
  - Expired after the validity window (injected clock)
  - InvalidSignature when the token is altered or signed with another secret
  - Malformed for unparseable tokens or bad claims
"""

import base64
import json
from datetime import timedelta

import jwt
import pytest

from leavedesk.identity.tokens import (
    JWT_ALGORITHM,
    Expired,
    InvalidSignature,
    Malformed,
    TokenError,
    TokenService,
    TokenSettings,
)

pytestmark = pytest.mark.unit


def _b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64url_decode(segment: str) -> bytes:
    return base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))


def test_roundtrip_returns_subject(token_service):
    issued = token_service.issue(42)

    assert token_service.verify(issued.token) == 42
    assert issued.expires_in == 48 * 3600


def test_claims_are_minimal(token_service, clock):
    issued = token_service.issue(7)
    claims = jwt.decode(
        issued.token,
        "unit-test-secret",
        algorithms=[JWT_ALGORITHM],
        options={"verify_exp": False},
    )

    assert claims["sub"] == "7"
    assert claims["typ"] == "access"
    assert claims["iat"] == int(clock.now.timestamp())
    assert claims["exp"] == int((clock.now + timedelta(hours=48)).timestamp())


def test_still_valid_just_before_expiry(token_service, clock):
    issued = token_service.issue(1)
    clock.now = clock.now + timedelta(hours=48)

    assert token_service.verify(issued.token) == 1


def test_expired_after_validity_window(token_service, clock):
    issued = token_service.issue(1)
    clock.now = clock.now + timedelta(hours=48, seconds=1)

    with pytest.raises(Expired):
        token_service.verify(issued.token)


def test_custom_ttl_is_honoured(clock):
    service = TokenService(
        TokenSettings(secret="s", access_ttl=timedelta(minutes=5)), clock=clock
    )
    issued = service.issue(3)
    assert issued.expires_in == 300

    clock.now = clock.now + timedelta(minutes=6)
    with pytest.raises(Expired):
        service.verify(issued.token)


def test_signature_from_other_secret_is_rejected(token_service):
    other = TokenService(TokenSettings(secret="another-secret"))
    forged = other.issue(1).token

    with pytest.raises(InvalidSignature):
        token_service.verify(forged)


def test_tampered_payload_is_rejected(token_service):
    header, payload, signature = token_service.issue(1).token.split(".")
    claims = json.loads(_b64url_decode(payload))
    claims["sub"] = "2"
    tampered_payload = _b64url(json.dumps(claims).encode("utf-8"))

    with pytest.raises(InvalidSignature):
        token_service.verify(f"{header}.{tampered_payload}.{signature}")


def test_tampered_signature_is_rejected(token_service):
    header, payload, signature = token_service.issue(1).token.split(".")
    middle = len(signature) // 2
    flipped = "A" if signature[middle] != "A" else "B"
    tampered = signature[:middle] + flipped + signature[middle + 1 :]

    with pytest.raises(InvalidSignature):
        token_service.verify(f"{header}.{payload}.{tampered}")


def test_unsigned_token_is_rejected(token_service):
    unsigned = jwt.encode({"sub": "1", "exp": 9999999999}, None, algorithm="none")

    with pytest.raises(TokenError):
        token_service.verify(unsigned)


@pytest.mark.parametrize("token", ["", "garbage", "a.b", "not.a.jwt"])
def test_garbage_is_malformed(token_service, token):
    with pytest.raises(Malformed):
        token_service.verify(token)


def test_missing_subject_is_malformed(token_service, clock):
    token = jwt.encode(
        {"exp": int(clock.now.timestamp()) + 60},
        "unit-test-secret",
        algorithm=JWT_ALGORITHM,
    )
    with pytest.raises(Malformed):
        token_service.verify(token)


def test_non_numeric_subject_is_malformed(token_service, clock):
    token = jwt.encode(
        {"sub": "alice", "exp": int(clock.now.timestamp()) + 60},
        "unit-test-secret",
        algorithm=JWT_ALGORITHM,
    )
    with pytest.raises(Malformed):
        token_service.verify(token)


def test_wrong_token_type_is_malformed(token_service, clock):
    token = jwt.encode(
        {"sub": "1", "exp": int(clock.now.timestamp()) + 60, "typ": "refresh"},
        "unit-test-secret",
        algorithm=JWT_ALGORITHM,
    )
    with pytest.raises(Malformed):
        token_service.verify(token)


def test_empty_secret_is_refused():
    with pytest.raises(ValueError):
        TokenService(TokenSettings(secret=""))


def test_error_reasons_are_distinct():
    reasons = {InvalidSignature.reason, Expired.reason, Malformed.reason}
    assert len(reasons) == 3
