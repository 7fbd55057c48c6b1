"""Configuration loading from TOML files and environment variables."""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from tagdo.config.models import ConfigError, TagdoConfig
from tagdo.config.paths import get_config_path

logger = logging.getLogger(__name__)

# Environment variable -> (section, key)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "TAGDO_DATABASE_URL": ("database", "url"),
    "TAGDO_BACKEND": ("database", "backend"),
}


def _get_default_config_paths() -> list[Path]:
    """Get ordered list of default config file locations."""
    return [
        Path("config.toml"),  # Current directory
        get_config_path(),  # ~/.tagdo/config.toml (or TAGDO_HOME)
    ]


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Overlay values from environment variables onto the raw config."""
    for env_var, (section_key, key) in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            section = config.setdefault(section_key, {})
            section[key] = value
    return config


def find_config_path(path: Path | None = None) -> Path | None:
    """Resolve which config file to read.

    Raises:
        FileNotFoundError: If an explicit path does not exist.
    """
    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return config_path

    for default_path in _get_default_config_paths():
        expanded = default_path.expanduser()
        if expanded.exists():
            return expanded
    return None


def load_config(path: Path | None = None) -> TagdoConfig:
    """Load configuration from a TOML file.

    Without an explicit path, the default locations are searched; when none
    exists the built-in defaults are used.

    Args:
        path: Explicit path to config file.

    Returns:
        Validated TagdoConfig instance.

    Raises:
        FileNotFoundError: If an explicit config file is missing.
        ConfigError: If the config file is invalid.
    """
    config_path = find_config_path(path)

    raw_config: dict[str, Any] = {}
    if config_path is not None:
        try:
            with config_path.open("rb") as f:
                raw_config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e
    else:
        logger.debug("No config file found, using defaults")

    raw_config = _apply_env_overrides(raw_config)

    try:
        return TagdoConfig.model_validate(raw_config)
    except ValidationError as e:
        raise ConfigError(f"Config validation failed: {e}") from e


def get_default_config() -> TagdoConfig:
    """Get a default configuration for development/testing."""
    return TagdoConfig()
