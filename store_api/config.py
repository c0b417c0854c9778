"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - The database URL and the token secret have no defaults: startup fails without them
    - get_settings() is cached (lru_cache), one Settings per process
    - postgresql:// URLs are always run through the asyncpg driver

Design Decisions:
    - DB_URL accepted alongside DATABASE_URL: existing deployments export the former
    - normalize_database_url is shared with the Alembic env, which must not require
      the token secret just to run migrations
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ASYNC_POSTGRES_SCHEME = "postgresql+asyncpg://"


def normalize_database_url(url: str) -> str:
    for scheme in ("postgresql://", "postgres://"):
        if url.startswith(scheme):
            return ASYNC_POSTGRES_SCHEME + url[len(scheme):]
    return url


class Settings(BaseSettings):
    """Store API settings, read from the environment and an optional .env file."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    database_url: str = Field(
        validation_alias=AliasChoices("DATABASE_URL", "DB_URL"),
    )
    database_pool_size: int = 20
    database_max_overflow: int = 10

    access_token_secret: str = Field(min_length=1)
    access_token_expire_minutes: int = 60

    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["http://localhost:5173"]

    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("database_url", mode="before")
    @classmethod
    def use_async_driver(cls, value):
        if isinstance(value, str):
            return normalize_database_url(value)
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
