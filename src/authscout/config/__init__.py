"""
Configuration management for authscout.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. Project .env file (.authscout/.env)
3. Global config file (~/.authscout/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import (
    get_global_config_dir,
    load_env_file,
    load_global_config,
    load_project_config,
)
from .getters import (
    DEFAULT_MIN_BODY_LENGTH,
    DEFAULT_RELAY_TIMEOUT,
    get_config,
    get_history_path,
    get_min_body_length,
    get_relay_timeout,
    get_scan_timeout,
    is_verbose,
)

__all__ = [
    # env_loader
    "get_global_config_dir",
    "load_env_file",
    "load_global_config",
    "load_project_config",
    # getters
    "DEFAULT_MIN_BODY_LENGTH",
    "DEFAULT_RELAY_TIMEOUT",
    "get_config",
    "get_history_path",
    "get_min_body_length",
    "get_relay_timeout",
    "get_scan_timeout",
    "is_verbose",
]
