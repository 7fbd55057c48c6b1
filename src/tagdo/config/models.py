"""Configuration models using Pydantic."""

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from tagdo.config.paths import get_database_path

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Configuration error."""

    pass


class DatabaseConfig(BaseModel):
    """Configuration for the repository backend.

    backend = "sql" stores data through SQLAlchemy (SQLite by default);
    backend = "memory" keeps everything in process memory.
    """

    backend: Literal["sql", "memory"] = "sql"
    # Full async SQLAlchemy URL; overrides path when set
    url: str | None = None
    path: Path = Field(default_factory=get_database_path)
    echo: bool = False

    @model_validator(mode="after")
    def _warn_unused_url(self) -> "DatabaseConfig":
        if self.backend == "memory" and self.url:
            logger.warning("database.url is ignored with the memory backend")
        return self


class ServerConfig(BaseModel):
    """Configuration for HTTP server."""

    host: str = "127.0.0.1"
    port: int = 3000


class LoggingConfig(BaseModel):
    """Configuration for log output."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None
    rich: bool = False


class TagdoConfig(BaseModel):
    """Root configuration model."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
