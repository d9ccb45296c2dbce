"""Configuration loader for clipp.

Loads an optional JSON file and returns a validated ClippConfig instance.
Uses module-level caching so a file is only parsed once per process.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import platformdirs
from pydantic import ValidationError

from clipp.config.models import ClippConfig
from clipp.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

_APP_NAME = "clipp"
_CONFIG_FILENAME = "config.json"

# Module-level cache
_config_cache: dict[str, ClippConfig] = {}


def user_config_path() -> Path:
    """Path of the per-user config file (which may not exist)."""
    return Path(platformdirs.user_config_dir(_APP_NAME)) / _CONFIG_FILENAME


def load_config(path: Optional[Path] = None) -> ClippConfig:
    """Load and validate clipp config from a JSON file.

    Parameters
    ----------
    path : Path | None
        Path to a JSON config file. If ``None``, the per-user file is used
        when it exists, otherwise the built-in defaults.

    Returns
    -------
    ClippConfig
        Validated configuration instance.

    Raises
    ------
    FileNotFoundError
        If an explicit path does not exist.
    ConfigurationError
        If the file is not JSON or does not match the schema.
    """
    if path is None:
        candidate = user_config_path()
        if not candidate.exists():
            return _config_cache.setdefault("<defaults>", ClippConfig())
        path = candidate

    config_path = Path(path)
    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
        config = ClippConfig.model_validate(raw)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigurationError(f"Invalid config file {config_path}: {exc}") from exc

    logger.debug("Loaded configuration from %s", config_path)
    _config_cache[cache_key] = config
    return config


def get_config() -> ClippConfig:
    """Get the active clipp configuration (cached).

    This is the main entry point used by the rest of the package.
    """
    return load_config()


def clear_cache() -> None:
    """Clear the config cache — useful for testing."""
    _config_cache.clear()
