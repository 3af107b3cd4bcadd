"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded in deployments)
    - get_settings() is cached (lru_cache) — single instance per process
    - The store connection string is accepted as DATABASE_URL or CONNECTION_URI

Design Decisions:
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Document store
    database_url: str = Field(
        "postgresql+asyncpg://movieclub:movieclub@db:5432/movieclub",
        validation_alias=AliasChoices("database_url", "connection_uri"),
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Auth
    jwt_secret: str = "movie-club-dev-secret"
    jwt_algorithm: str = "HS256"
    jwt_expires_days: int = 7
    bcrypt_rounds: int = 10

    # API
    cors_origins: list[str] = ["*"]
    static_dir: str = str(Path(__file__).parent / "public")

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
