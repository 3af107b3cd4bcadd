"""Users — account signup, profile updates, favorites, and removal.

Invariants:
    - POST /users is the only unauthenticated route here; it validates every
      field before any store access and answers 201 / 400 (duplicate) / 422
    - GET /users answers 201 on success and 400 on a store failure
    - All other store failures answer 500 with "Error: <detail>"
    - Updates and favorite changes on an unknown Username answer 200 with null
    - Password is hashed before it is written, on signup and on update, in
      the threadpool
    - /{username}/unregister is declared before /{username}/{movie_id} so the
      literal segment wins
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from movie_club.api.auth_guard import require_user
from movie_club.config import get_settings
from movie_club.core.errors import (
    DuplicateUsernameError, SignupValidationError, UserNotFoundError,
)
from movie_club.core.validate_signup import validate_signup
from movie_club.infrastructure.database import get_db, store_errors
from movie_club.infrastructure.passwords import hash_password
from movie_club.schemas.user import UserCreate, UserOut, UserUpdate
from movie_club.services.user_store import UserStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])

protected = [Depends(require_user)]


@router.get(
    "", response_model=list[UserOut],
    status_code=status.HTTP_201_CREATED, dependencies=protected,
)
async def list_users(db: AsyncSession = Depends(get_db)):
    """All users, stored hashes included."""
    async with store_errors(status.HTTP_400_BAD_REQUEST):
        return await UserStore(db).find_all()


@router.get("/{username}", response_model=UserOut | None, dependencies=protected)
async def get_user(username: str, db: AsyncSession = Depends(get_db)):
    async with store_errors():
        return await UserStore(db).find_by_username(username)


@router.post(
    "", response_model=UserOut, status_code=status.HTTP_201_CREATED,
)
async def create_user(body: UserCreate, db: AsyncSession = Depends(get_db)):
    """Signup: validate, hash, reject a taken Username, then create."""
    violations = validate_signup(body.username, body.password, body.email)
    if violations:
        raise SignupValidationError(violations)

    password_hash = await run_in_threadpool(
        hash_password, body.password, get_settings().bcrypt_rounds,
    )
    users = UserStore(db)
    async with store_errors():
        if await users.find_by_username(body.username) is not None:
            raise DuplicateUsernameError(body.username)
        return await users.create(
            username=body.username,
            password_hash=password_hash,
            email=body.email,
            birthday=body.birthday,
        )


@router.put("/{username}", response_model=UserOut | None, dependencies=protected)
async def update_user(
    username: str, body: UserUpdate, db: AsyncSession = Depends(get_db),
):
    """Set whichever of Password/Email/Birthday the body carries."""
    fields = body.changed_fields()
    if "password" in fields:
        fields["password"] = await run_in_threadpool(
            hash_password,
            fields["password"], get_settings().bcrypt_rounds,
        )
    async with store_errors():
        return await UserStore(db).update_profile(username, fields)


@router.post(
    "/{username}/{movie_id}", response_model=UserOut | None, dependencies=protected,
)
async def add_favorite_movie(
    username: str, movie_id: str, db: AsyncSession = Depends(get_db),
):
    async with store_errors():
        return await UserStore(db).add_favorite(username, movie_id)


@router.delete(
    "/{username}/unregister",
    response_class=PlainTextResponse, dependencies=protected,
)
async def unregister_user(username: str, db: AsyncSession = Depends(get_db)):
    """Remove the account. 400 text when no such user exists."""
    async with store_errors():
        removed = await UserStore(db).remove(username)
    if removed is None:
        raise UserNotFoundError(username)
    return f"{username} was deleted."


@router.delete(
    "/{username}/{movie_id}", response_model=UserOut | None, dependencies=protected,
)
async def remove_favorite_movie(
    username: str, movie_id: str, db: AsyncSession = Depends(get_db),
):
    async with store_errors():
        return await UserStore(db).remove_favorite(username, movie_id)
