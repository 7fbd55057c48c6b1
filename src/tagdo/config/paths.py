"""Centralized path management for tagdo.

All local state (config, SQLite database) lives under a single base
directory, overridable with the TAGDO_HOME environment variable.

Default location: ~/.tagdo
"""

import os
from functools import lru_cache
from pathlib import Path

ENV_VAR = "TAGDO_HOME"


@lru_cache(maxsize=1)
def get_tagdo_home() -> Path:
    """Get the base directory for all tagdo data.

    Resolution order:
    1. TAGDO_HOME environment variable (if set)
    2. Platform default (~/.tagdo)
    """
    if env_home := os.environ.get(ENV_VAR):
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".tagdo"


def get_config_path() -> Path:
    """Get the default config file path."""
    return get_tagdo_home() / "config.toml"


def get_database_path() -> Path:
    """Get the default SQLite database path."""
    return get_tagdo_home() / "tagdo.db"
