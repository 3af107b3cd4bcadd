"""User Store — queries and single-document updates over the users collection.

Invariants:
    - Every mutating method commits exactly one document change
    - Mutations on a missing user return None (no error, no write)
    - Favorite add/remove read the row FOR UPDATE and assign a new list in the
      same transaction; add appends (duplicates allowed), remove drops every
      occurrence
    - create() expects an already-hashed password; hashing is the caller's job
    - Username uniqueness is check-then-create: a concurrent signup can still
      lose on the unique constraint, which surfaces as a store error
"""

import logging
from datetime import date
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from movie_club.models.user import User

logger = logging.getLogger(__name__)


class UserStore:
    """Queries and updates against the users collection."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self) -> list[User]:
        result = await self.db.execute(select(User))
        return list(result.scalars().all())

    async def find_by_username(self, username: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.username == username),
        )
        return result.scalar_one_or_none()

    async def find_by_id(self, user_id: UUID) -> User | None:
        return await self.db.get(User, user_id)

    async def create(
        self,
        username: str,
        password_hash: str,
        email: str,
        birthday: date | None = None,
    ) -> User:
        user = User(
            username=username,
            password=password_hash,
            email=email,
            birthday=birthday,
            favorite_movies=[],
        )
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)
        logger.info(f"User created: {username}", extra={"username": username})
        return user

    async def update_profile(self, username: str, fields: dict) -> User | None:
        """Set the given columns (password must already be hashed)."""
        user = await self._find_for_update(username)
        if user is None:
            return None
        for name, value in fields.items():
            setattr(user, name, value)
        await self.db.commit()
        await self.db.refresh(user)
        return user

    async def add_favorite(self, username: str, movie_id: str) -> User | None:
        user = await self._find_for_update(username)
        if user is None:
            return None
        user.favorite_movies = [*user.favorite_movies, movie_id]
        await self.db.commit()
        await self.db.refresh(user)
        return user

    async def remove_favorite(self, username: str, movie_id: str) -> User | None:
        user = await self._find_for_update(username)
        if user is None:
            return None
        user.favorite_movies = [m for m in user.favorite_movies if m != movie_id]
        await self.db.commit()
        await self.db.refresh(user)
        return user

    async def remove(self, username: str) -> User | None:
        """Delete the user and return the removed document, or None."""
        user = await self._find_for_update(username)
        if user is None:
            return None
        await self.db.delete(user)
        await self.db.commit()
        logger.info(f"User removed: {username}", extra={"username": username})
        return user

    async def _find_for_update(self, username: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.username == username).with_for_update(),
        )
        return result.scalar_one_or_none()
