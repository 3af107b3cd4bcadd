"""Login — exchanges Username/Password for a bearer token.

Invariants:
    - Credentials come from the JSON body, or from query parameters when no
      body is sent
    - Unknown username and wrong password produce the same 400 response
    - Issued token's _id claim is the user's id; the guard resolves it per request
"""

import logging

from fastapi import APIRouter, Body, Depends, Query
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from movie_club.api.auth_guard import get_token_service
from movie_club.core.errors import InvalidCredentialsError
from movie_club.infrastructure.database import get_db, store_errors
from movie_club.infrastructure.passwords import check_password
from movie_club.infrastructure.tokens import TokenService
from movie_club.schemas.user import LoginRequest, LoginResponse, UserOut
from movie_club.services.user_store import UserStore

logger = logging.getLogger(__name__)
router = APIRouter(tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    body: dict | None = Body(None),
    username: str | None = Query(None, alias="Username"),
    password: str | None = Query(None, alias="Password"),
    tokens: TokenService = Depends(get_token_service),
    db: AsyncSession = Depends(get_db),
):
    """Verify credentials and issue a bearer token."""
    try:
        creds = LoginRequest.model_validate(
            body if body else {"Username": username, "Password": password},
        )
    except ValidationError:
        raise InvalidCredentialsError()

    async with store_errors():
        user = await UserStore(db).find_by_username(creds.username)
    if user is None or not await run_in_threadpool(
        check_password, creds.password, user.password,
    ):
        raise InvalidCredentialsError()

    logger.info(f"Login: {user.username}", extra={"username": user.username})
    return LoginResponse(
        user=UserOut.model_validate(user),
        token=tokens.issue(user.username, str(user.id)),
    )
