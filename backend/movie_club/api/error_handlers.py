"""Error Handlers — global exception handlers for the Movie Club API.

Invariants:
    - MovieClubError → JSON envelope, or plain text for TextBodyError subclasses
    - AuthenticationError responses carry WWW-Authenticate: Bearer
    - RequestValidationError → 422 with the same {"errors": [...]} list as signup
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (MovieClubError), validation (Pydantic), catch-all (Exception)
    - Kept out of main.py so the app module only wires things together
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from movie_club.core.errors import (
    AuthenticationError, ErrorSeverity, MovieClubError, TextBodyError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register Movie Club domain/infrastructure error handler."""

    @app.exception_handler(MovieClubError)
    async def movie_club_error_handler(request: Request, exc: MovieClubError):
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        if isinstance(exc, TextBodyError):
            return PlainTextResponse(exc.to_text(), status_code=exc.http_status)
        headers = (
            {"WWW-Authenticate": "Bearer"}
            if isinstance(exc, AuthenticationError) else None
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(), headers=headers,
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=422,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "Something broke!",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build the {"errors": [...]} list from Pydantic's error report."""
    return {
        "errors": [
            {
                "field": ".".join(str(loc) for loc in e["loc"][1:]) or str(e["loc"][0]),
                "message": e["msg"],
                "location": str(e["loc"][0]),
            }
            for e in exc.errors()
        ],
    }
