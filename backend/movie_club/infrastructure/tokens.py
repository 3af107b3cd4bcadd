"""Bearer Tokens — JWT issuance and verification.

Invariants:
    - Claims: sub (Username), _id (user id as str), iat, exp
    - Every verification failure (signature, expiry, shape) raises AuthenticationError
    - Stateless: nothing about issued tokens is kept server-side
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt

from movie_club.config import Settings
from movie_club.core.errors import AuthenticationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenClaims:
    """Verified identity carried by a bearer token."""
    username: str
    user_id: str
    expires_at: datetime


class TokenService:
    """Signs and verifies HS256 (by default) bearer tokens."""

    def __init__(
        self, secret: str, algorithm: str = "HS256", expires_days: int = 7,
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._lifetime = timedelta(days=expires_days)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            settings.jwt_secret, settings.jwt_algorithm, settings.jwt_expires_days,
        )

    def issue(self, username: str, user_id: str, now: datetime | None = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": username,
            "_id": user_id,
            "iat": issued_at,
            "exp": issued_at + self._lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Decode and check the token. Raises AuthenticationError on any failure."""
        try:
            payload = jwt.decode(
                token, self._secret, algorithms=[self._algorithm],
                options={"require": ["exp", "sub", "_id"]},
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token has expired")
        except jwt.InvalidTokenError as e:
            logger.warning(f"Rejected bearer token: {e}")
            raise AuthenticationError("Invalid token")
        return TokenClaims(
            username=payload["sub"],
            user_id=str(payload["_id"]),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
