"""Director ORM — standalone directors collection, filled by the seed command only.

Birth and Death are kept as the free-form strings the catalog supplies.
"""

import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from movie_club.db.base import Base


class Director(Base):
    __tablename__ = "directors"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    birth: Mapped[str | None] = mapped_column(String(50), nullable=True)
    death: Mapped[str | None] = mapped_column(String(50), nullable=True)
