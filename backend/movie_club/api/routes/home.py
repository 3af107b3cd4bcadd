"""Home — unauthenticated welcome text and documentation page."""

import os

from fastapi import APIRouter
from fastapi.responses import FileResponse, PlainTextResponse

from movie_club.config import get_settings

router = APIRouter(tags=["home"])

WELCOME_TEXT = "Welcome to my movie club!"


@router.get("/", response_class=PlainTextResponse)
async def welcome():
    return WELCOME_TEXT


@router.get("/documentation", response_class=FileResponse)
async def documentation():
    """Serve the static API documentation page."""
    return FileResponse(
        os.path.join(get_settings().static_dir, "documentation.html"),
        media_type="text/html",
    )
