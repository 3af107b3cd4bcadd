"""User ORM — the users collection.

Invariants:
    - username is unique
    - password only ever holds a bcrypt hash
    - favorite_movies is an ordered list of movie id strings; duplicates allowed,
      no foreign key to movies
    - favorite_movies is replaced, never mutated in place (JSON change tracking)
"""

import uuid
from datetime import date

from sqlalchemy import Date, JSON, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from movie_club.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    birthday: Mapped[date | None] = mapped_column(Date, nullable=True)
    favorite_movies: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )

    def __repr__(self) -> str:
        return f"<User {self.username!r}>"
