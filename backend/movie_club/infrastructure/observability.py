"""Structured Logging — JSON formatter, setup, and HTTP access log.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (error_code, path, status_code, ...) surfaced when present
    - JSON format in production, human-readable in development
    - Exactly one access-log line per request, on the movie_club.access logger
    - Passwords and bearer tokens never reach a log record

Design Decisions:
    - setup_logging called once on startup via lifespan; repeated calls replace
      the handler instead of stacking a second one
    - Access line is Common Log Format text; the same values ride along as
      extras so the JSON formatter can emit them as fields
"""

import json
import logging
import time
from datetime import datetime, timezone

from fastapi import Request

access_logger = logging.getLogger("movie_club.access")

_EXTRA_FIELDS = (
    "error_code", "path", "method", "status_code",
    "duration_ms", "client", "username",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    handler.set_name("movie_club")
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if existing.get_name() == "movie_club":
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))


def format_access_line(
    client: str, method: str, target: str, http_version: str,
    status_code: int, when: datetime,
) -> str:
    """Render one request in Common Log Format (no response size)."""
    stamp = when.strftime("%d/%b/%Y:%H:%M:%S %z")
    return (
        f'{client} - - [{stamp}] "{method} {target} HTTP/{http_version}" '
        f"{status_code} -"
    )


async def access_log_middleware(request: Request, call_next):
    """HTTP middleware — logs method, path, status and latency for each request."""
    started = time.perf_counter()
    response = await call_next(request)
    duration_ms = round((time.perf_counter() - started) * 1000, 2)

    client = request.client.host if request.client else "-"
    # Query string omitted: /login accepts credentials there.
    target = request.url.path
    username = getattr(request.state, "username", None)

    access_logger.info(
        format_access_line(
            client, request.method, target,
            request.scope.get("http_version", "1.1"),
            response.status_code, datetime.now(timezone.utc),
        ),
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
            "client": client,
            "username": username,
        },
    )
    return response
