"""Movie Store — read operations over the movies collection.

Invariants:
    - Read-only: no method writes to movies
    - Single-document lookups return None when nothing matches (never raise)
    - Genre/Director lookups match the embedded document's Name exactly and
      return the first match in store order
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from movie_club.models.movie import Movie

logger = logging.getLogger(__name__)


class MovieStore:
    """Queries against the movies collection."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self) -> list[Movie]:
        result = await self.db.execute(select(Movie))
        return list(result.scalars().all())

    async def find_by_title(self, title: str) -> Movie | None:
        result = await self.db.execute(
            select(Movie).where(Movie.title == title),
        )
        return result.scalar_one_or_none()

    async def find_by_genre_name(self, name: str) -> Movie | None:
        """First movie whose embedded Genre.Name equals name."""
        result = await self.db.execute(
            select(Movie).where(Movie.genre["Name"].as_string() == name).limit(1),
        )
        return result.scalars().first()

    async def find_by_director_name(self, name: str) -> Movie | None:
        """First movie whose embedded Director.Name equals name."""
        result = await self.db.execute(
            select(Movie).where(Movie.director["Name"].as_string() == name).limit(1),
        )
        return result.scalars().first()
