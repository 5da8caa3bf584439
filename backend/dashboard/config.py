"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables; session_secret_key has no default,
      so a deployment without it fails at startup instead of signing cookies with a
      public key
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
    - POSTGRES_URL accepted as an alias for DATABASE_URL (hosted Postgres providers export it)
"""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = Field(
        "postgresql+asyncpg://dashboard:dashboard@db:5432/dashboard",
        validation_alias=AliasChoices("database_url", "postgres_url"),
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Providers hand out postgres:// URLs but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str):
            for prefix in ("postgres://", "postgresql://"):
                if v.startswith(prefix):
                    return v.replace(prefix, "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_ssl: bool = False

    # Login session (signed cookie)
    session_secret_key: str = Field(min_length=32)
    session_max_age_seconds: int = 14 * 24 * 3600

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
