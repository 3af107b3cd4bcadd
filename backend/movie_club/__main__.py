"""Run the API server: python -m movie_club"""

import uvicorn

from movie_club.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "movie_club.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
