# ABOUTME: Configuration module for application settings.
# ABOUTME: Uses pydantic-settings for environment variable overrides and provides cached access.

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden via environment variables with the
    PORTFOLIO_ prefix (e.g., PORTFOLIO_DB_PATH). The listening port also
    honours the bare SERVER_PORT variable.
    """

    model_config = SettingsConfigDict(
        env_prefix="PORTFOLIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    db_path: Annotated[Path, Field(description="Path to SQLite database file")] = (
        Path.home() / ".portfolio-showcase" / "data.db"
    )

    host: Annotated[str, Field(description="Interface the API server binds to")] = "0.0.0.0"

    port: Annotated[
        int,
        Field(
            description="Port the API server listens on",
            ge=1,
            le=65535,
            validation_alias=AliasChoices("PORTFOLIO_PORT", "SERVER_PORT"),
        ),
    ] = 2022

    cors_origins: Annotated[
        list[str], Field(description="Origins allowed to call the API cross-origin")
    ] = ["*"]

    log_level: Annotated[str, Field(description="Logging level for the server")] = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings.

    Returns a cached Settings instance. Use get_settings.cache_clear()
    to clear the cache if needed.

    Returns:
        Cached Settings instance.
    """
    return Settings()


def ensure_data_dir() -> Path:
    """Ensure the data directory exists.

    Creates the directory containing the database file if it doesn't exist.

    Returns:
        Path to the data directory.
    """
    settings = get_settings()
    data_dir = settings.db_path.parent
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir
