"""clipp configuration package."""

from clipp.config.loader import clear_cache, get_config, load_config, user_config_path
from clipp.config.models import ClippConfig

__all__ = ["ClippConfig", "clear_cache", "get_config", "load_config", "user_config_path"]
