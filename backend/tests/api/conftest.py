"""API test fixtures — in-memory store + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - app.state.db is swapped for a manager bound to the test engine, the
      same slot the lifespan fills in production
    - Reads made by assertions use a fresh session (no stale identity map)

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares one connection,
      so data written by the client is visible to assertions
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

import movie_club.models  # noqa: F401
from movie_club.config import get_settings
from movie_club.db.base import Base
from movie_club.infrastructure.database import DatabaseSessionManager
from movie_club.infrastructure.passwords import hash_password
from movie_club.infrastructure.tokens import TokenService
from movie_club.main import app
from movie_club.models.movie import Movie
from movie_club.models.user import User


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with app.state.db bound to the test engine."""
    original_manager = getattr(app.state, "db", None)
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.state.db = original_manager


@pytest.fixture
def tokens() -> TokenService:
    return TokenService.from_settings(get_settings())


@pytest.fixture
def fetch_user(test_session_factory):
    """Read a user straight from the store, bypassing the API."""
    async def _fetch(username: str) -> User | None:
        async with test_session_factory() as db:
            result = await db.execute(select(User).where(User.username == username))
            return result.scalar_one_or_none()
    return _fetch


@pytest.fixture
def count_users(test_session_factory):
    async def _count() -> int:
        async with test_session_factory() as db:
            result = await db.execute(select(User))
            return len(result.scalars().all())
    return _count


@pytest.fixture
def make_user(test_session_factory):
    """Insert a user with a hashed password and return it."""
    async def _make(
        username: str, password: str = "secret", email: str | None = None,
        favorite_movies: list[str] | None = None,
    ) -> User:
        async with test_session_factory() as db:
            user = User(
                username=username,
                password=hash_password(password, rounds=4),
                email=email or f"{username}@example.com",
                favorite_movies=favorite_movies or [],
            )
            db.add(user)
            await db.commit()
            await db.refresh(user)
            return user
    return _make


@pytest.fixture
async def alice(make_user) -> User:
    return await make_user("alice1", "secret")


@pytest.fixture
def auth_headers(alice, tokens) -> dict:
    token = tokens.issue(alice.username, str(alice.id))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def seed_movies(test_session_factory) -> list[Movie]:
    movies = [
        Movie(
            title="Inception",
            description="Dreams within dreams.",
            featured=True,
            image_path="https://example.com/inception.jpg",
            genre={"Name": "Science Fiction", "Description": "Imagined science."},
            director={
                "Name": "Christopher Nolan", "Bio": "British-American filmmaker.",
                "Birth": "1970", "Death": None,
            },
        ),
        Movie(
            title="Psycho",
            description="A motel with a secret.",
            featured=False,
            image_path="https://example.com/psycho.jpg",
            genre={"Name": "Thriller", "Description": "Suspense."},
            director={
                "Name": "Alfred Hitchcock", "Bio": "Master of Suspense.",
                "Birth": "1899", "Death": "1980",
            },
        ),
        Movie(
            title="Spirited Away",
            description="A girl in the spirit world.",
            featured=False,
            image_path="https://example.com/spirited.jpg",
            genre={"Name": "Animation", "Description": "Drawn frames."},
            director={
                "Name": "Hayao Miyazaki", "Bio": "Studio Ghibli co-founder.",
                "Birth": "1941", "Death": None,
            },
        ),
    ]
    async with test_session_factory() as db:
        db.add_all(movies)
        await db.commit()
    return movies
