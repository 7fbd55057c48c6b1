"""Configuration module."""

from tagdo.config.loader import find_config_path, get_default_config, load_config
from tagdo.config.models import (
    ConfigError,
    DatabaseConfig,
    LoggingConfig,
    ServerConfig,
    TagdoConfig,
)
from tagdo.config.paths import get_config_path, get_database_path, get_tagdo_home

__all__ = [
    "ConfigError",
    "DatabaseConfig",
    "LoggingConfig",
    "ServerConfig",
    "TagdoConfig",
    "find_config_path",
    "get_config_path",
    "get_database_path",
    "get_default_config",
    "get_tagdo_home",
    "load_config",
]
