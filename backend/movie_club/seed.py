"""Catalog Seeding — loads movies (and their genres/directors) into an empty store.

Usage: python -m movie_club.seed [catalog.json]

Invariants:
    - Runs only when the movies collection is empty; otherwise a no-op
    - Genres and directors are upserted by Name into their own collections
    - The whole load is one transaction
"""

import argparse
import asyncio
import json
import logging
from pathlib import Path

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from movie_club.config import get_settings
from movie_club.db.session import script_session
from movie_club.infrastructure.observability import setup_logging
from movie_club.models.director import Director
from movie_club.models.genre import Genre
from movie_club.models.movie import Movie
from movie_club.schemas.movie import MovieSeed

logger = logging.getLogger(__name__)

DEFAULT_CATALOG = Path(__file__).parent / "data" / "movies.json"


def load_catalog(path: Path) -> list[MovieSeed]:
    with open(path, encoding="utf-8") as fh:
        return [MovieSeed.model_validate(entry) for entry in json.load(fh)]


async def seed_catalog(db: AsyncSession, catalog: list[MovieSeed]) -> dict:
    """Insert the catalog if no movies exist yet. Returns a summary dict."""
    count = await db.scalar(select(func.count()).select_from(Movie))
    if count:
        return {"message": "Catalog already seeded", "count": count}

    genres: dict[str, Genre] = {}
    directors: dict[str, Director] = {}
    for entry in catalog:
        db.add(Movie(
            title=entry.title,
            description=entry.description,
            featured=entry.featured,
            image_path=entry.image_path,
            genre=entry.genre.model_dump(by_alias=True),
            director=entry.director.model_dump(by_alias=True),
        ))
        if entry.genre.name and entry.genre.name not in genres:
            genres[entry.genre.name] = await _upsert_genre(db, entry)
        if entry.director.name and entry.director.name not in directors:
            directors[entry.director.name] = await _upsert_director(db, entry)

    await db.commit()
    return {
        "message": "Seeded",
        "inserted": len(catalog),
        "genres": len(genres),
        "directors": len(directors),
    }


async def _upsert_genre(db: AsyncSession, entry: MovieSeed) -> Genre:
    genre = await db.scalar(select(Genre).where(Genre.name == entry.genre.name))
    if genre is None:
        genre = Genre(name=entry.genre.name)
        db.add(genre)
    genre.description = entry.genre.description
    return genre


async def _upsert_director(db: AsyncSession, entry: MovieSeed) -> Director:
    director = await db.scalar(
        select(Director).where(Director.name == entry.director.name),
    )
    if director is None:
        director = Director(name=entry.director.name)
        db.add(director)
    director.bio = entry.director.bio
    director.birth = entry.director.birth
    director.death = entry.director.death
    return director


async def _run(catalog_path: Path) -> dict:
    async with script_session(get_settings().database_url) as db:
        return await seed_catalog(db, load_catalog(catalog_path))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Seed the movie catalog.")
    parser.add_argument(
        "catalog", nargs="?", type=Path, default=DEFAULT_CATALOG,
        help="JSON array of movies (default: bundled catalog)",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    summary = asyncio.run(_run(args.catalog))
    logger.info(f"Seed finished: {summary}")


if __name__ == "__main__":
    main()
