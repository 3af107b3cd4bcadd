"""Authentication Guard — bearer-token dependency for protected routes.

Invariants:
    - Missing header, wrong scheme, bad signature, expired token, or a token
      whose _id no longer resolves to a user → AuthenticationError (401)
    - Runs before the route body, so a rejected request never reaches the store
      for writes
    - On success the resolved User is returned; request.state.username holds
      the plain Username string for the access log
    - No server-side session state
"""

import logging
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from movie_club.config import get_settings
from movie_club.core.errors import AuthenticationError
from movie_club.infrastructure.database import get_db, store_errors
from movie_club.infrastructure.tokens import TokenService
from movie_club.models.user import User
from movie_club.services.user_store import UserStore

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_token_service() -> TokenService:
    return TokenService.from_settings(get_settings())


async def require_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Resolve the bearer token to a stored user or reject with 401."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError("Missing bearer token")

    claims = tokens.verify(credentials.credentials)
    try:
        user_id = UUID(claims.user_id)
    except ValueError:
        raise AuthenticationError("Invalid token")

    async with store_errors():
        user = await UserStore(db).find_by_id(user_id)
    if user is None:
        logger.warning(
            f"Token for unknown user {claims.username}",
            extra={"username": claims.username, "path": request.url.path},
        )
        raise AuthenticationError("Unauthorized")

    request.state.username = user.username
    return user
