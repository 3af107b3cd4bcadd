"""Bearer Tokens — issuance and verification."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from movie_club.core.errors import AuthenticationError
from movie_club.infrastructure.tokens import TokenService


@pytest.fixture
def service() -> TokenService:
    return TokenService("unit-secret", expires_days=7)


def test_issue_then_verify_returns_claims(service):
    now = datetime.now(timezone.utc)
    token = service.issue("alice1", "user-id-1", now=now)
    claims = service.verify(token)
    assert claims.username == "alice1"
    assert claims.user_id == "user-id-1"
    assert claims.expires_at - now < timedelta(days=7, seconds=1)
    assert claims.expires_at - now > timedelta(days=6, hours=23)


def test_expired_token_raises(service):
    token = service.issue("alice1", "id", now=datetime.now(timezone.utc) - timedelta(days=8))
    with pytest.raises(AuthenticationError, match="expired"):
        service.verify(token)


def test_wrong_secret_raises(service):
    token = TokenService("other-secret").issue("alice1", "id")
    with pytest.raises(AuthenticationError):
        service.verify(token)


def test_token_missing_id_claim_raises(service):
    token = jwt.encode(
        {"sub": "alice1", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        "unit-secret", algorithm="HS256",
    )
    with pytest.raises(AuthenticationError):
        service.verify(token)


def test_garbage_raises(service):
    with pytest.raises(AuthenticationError):
        service.verify("abc.def.ghi")
