"""ORM Models — one SQLAlchemy model per collection.

Invariants:
    - All models inherit from Base (db/base.py)
    - Embedded sub-documents (Movie.genre, Movie.director) are JSON columns

Design Decisions:
    - One file per collection for locality
    - All models imported here so Base.metadata is complete before create_all
      or alembic autogenerate runs
"""

from movie_club.models.movie import Movie  # noqa: F401
from movie_club.models.user import User  # noqa: F401
from movie_club.models.genre import Genre  # noqa: F401
from movie_club.models.director import Director  # noqa: F401
