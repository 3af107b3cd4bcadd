"""Movies — read-only routes over the movies collection.

Invariants:
    - Every route requires a valid bearer token (require_user)
    - GET /movies answers 201 on success and 400 on a store failure
    - Single-movie lookups answer 200 with the document or null (never 404),
      and 500 on a store failure
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from movie_club.api.auth_guard import require_user
from movie_club.infrastructure.database import get_db, store_errors
from movie_club.schemas.movie import MovieOut
from movie_club.services.movie_store import MovieStore

router = APIRouter(
    prefix="/movies", tags=["movies"], dependencies=[Depends(require_user)],
)


@router.get(
    "", response_model=list[MovieOut], status_code=status.HTTP_201_CREATED,
)
async def list_movies(db: AsyncSession = Depends(get_db)):
    """All movies."""
    async with store_errors(status.HTTP_400_BAD_REQUEST):
        return await MovieStore(db).find_all()


@router.get("/genre/{name}", response_model=MovieOut | None)
async def get_movie_by_genre(name: str, db: AsyncSession = Depends(get_db)):
    """First movie whose Genre.Name matches."""
    async with store_errors():
        return await MovieStore(db).find_by_genre_name(name)


@router.get("/director/{name}", response_model=MovieOut | None)
async def get_movie_by_director(name: str, db: AsyncSession = Depends(get_db)):
    """First movie whose Director.Name matches."""
    async with store_errors():
        return await MovieStore(db).find_by_director_name(name)


@router.get("/{title}", response_model=MovieOut | None)
async def get_movie(title: str, db: AsyncSession = Depends(get_db)):
    """Movie by exact title."""
    async with store_errors():
        return await MovieStore(db).find_by_title(title)
