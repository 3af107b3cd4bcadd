"""Movie Club API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MovieClubError → JSON or plain-text responses
    - CORS configured from settings (not hardcoded)
    - Store manager built on startup via lifespan and kept on app.state.db
    - Every request passes through the access-log middleware

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Static assets mounted AFTER API routes so API paths take precedence
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from movie_club import __version__
from movie_club.api.error_handlers import register_error_handlers
from movie_club.api.routes import auth, health, home, movies, users
from movie_club.config import get_settings
from movie_club.infrastructure.database import DatabaseSessionManager
from movie_club.infrastructure.observability import (
    access_log_middleware, setup_logging,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"Movie Club API started, listening on port {settings.port}")
    yield
    await app.state.db.dispose()
    logger.info("Movie Club API shutting down")


app = FastAPI(
    title="Movie Club API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(access_log_middleware)

app.include_router(home.router)
app.include_router(auth.router)
app.include_router(health.router)
app.include_router(movies.router)
app.include_router(users.router)

register_error_handlers(app)

if os.path.isdir(settings.static_dir):
    app.mount("/", StaticFiles(directory=settings.static_dir), name="static")
