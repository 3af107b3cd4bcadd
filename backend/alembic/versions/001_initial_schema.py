"""Initial schema — movies, users, genres, directors.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "movies",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("title", sa.String(200), nullable=False, unique=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("featured", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("image_path", sa.String(500), nullable=True),
        sa.Column("genre", sa.JSON, nullable=False),
        sa.Column("director", sa.JSON, nullable=False),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("username", sa.String(100), nullable=False, unique=True),
        sa.Column("password", sa.String(100), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("birthday", sa.Date, nullable=True),
        sa.Column("favorite_movies", sa.JSON, nullable=False),
    )

    op.create_table(
        "genres",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
        sa.Column("description", sa.Text, nullable=True),
    )

    op.create_table(
        "directors",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("name", sa.String(200), nullable=False, unique=True),
        sa.Column("bio", sa.Text, nullable=True),
        sa.Column("birth", sa.String(50), nullable=True),
        sa.Column("death", sa.String(50), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("directors")
    op.drop_table("genres")
    op.drop_table("users")
    op.drop_table("movies")
