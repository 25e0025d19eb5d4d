"""
Configuration settings for TurboQuery.

Uses Pydantic Settings to load the connection string, the pagination procedure
name and logging options from environment variables (or a `.env` file). The
resulting `Settings` object is passed explicitly to every executor; nothing in
the library reads configuration from module-level state.
"""
from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseEngine(str, Enum):
    """Supported database engines."""

    POSTGRESQL = "postgresql"


class Settings(BaseSettings):
    # Database
    connection_string: str = Field("", alias="TURBOQUERY_CONNECTION_STRING")
    batch_procedure_name: str = Field("", alias="TURBOQUERY_BATCH_PROCEDURE")
    database_engine: DatabaseEngine = Field(
        DatabaseEngine.POSTGRESQL, alias="TURBOQUERY_DATABASE_ENGINE"
    )
    autocommit: bool = Field(True, alias="TURBOQUERY_AUTOCOMMIT")
    connect_timeout: Optional[int] = Field(None, alias="TURBOQUERY_CONNECT_TIMEOUT", ge=0)
    connect_attempts: int = Field(1, alias="TURBOQUERY_CONNECT_ATTEMPTS", ge=1)

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        validate_assignment=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["DatabaseEngine", "Settings", "get_settings"]
