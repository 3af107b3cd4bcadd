"""Movie ORM — the movies collection; read-only from the API's perspective.

Invariants:
    - id is a UUID primary key, exposed on the wire as _id
    - title is unique (lookup key for GET /movies/{title})
    - genre and director are embedded documents stored as JSON:
      genre = {Name, Description}, director = {Name, Bio, Birth, Death}

Design Decisions:
    - JSON columns keep the embedded-document shape; lookups by Genre.Name /
      Director.Name filter on the JSON path instead of joining a side table
"""

import uuid

from sqlalchemy import Boolean, JSON, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from movie_club.db.base import Base


class Movie(Base):
    __tablename__ = "movies"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    image_path: Mapped[str | None] = mapped_column(String(500), nullable=True)
    genre: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    director: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)

    def __repr__(self) -> str:
        return f"<Movie {self.title!r}>"
