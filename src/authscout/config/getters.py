"""Configuration getter functions."""

import logging
import os
from pathlib import Path
from typing import Any

from .env_loader import get_global_config_dir, load_global_config, load_project_config

logger = logging.getLogger(__name__)

DEFAULT_RELAY_TIMEOUT = 15.0
DEFAULT_MIN_BODY_LENGTH = 100

_TRUE_VALUES = {"1", "true", "yes", "on"}


def get_config(key: str, project_dir: Path | None = None, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. Project .env file
    3. Global config file
    4. Default value

    Args:
        key: Configuration key
        project_dir: Optional project directory
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    # 1. Check environment variable
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    # 2. Check project .env file
    project_config = load_project_config(project_dir)
    if key in project_config:
        return project_config[key]

    # 3. Check global config
    global_config = load_global_config()
    if key in global_config:
        return global_config[key]

    # 4. Return default
    return default


def _get_float(key: str, default: float | None, project_dir: Path | None) -> float | None:
    raw = get_config(key, project_dir)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid %s value %r; using %s", key, raw, default)
        return default


def get_relay_timeout(project_dir: Path | None = None) -> float:
    """Per-relay attempt timeout in seconds (default: 15)."""
    value = _get_float("AUTHSCOUT_RELAY_TIMEOUT", DEFAULT_RELAY_TIMEOUT, project_dir)
    if value is None or value <= 0:
        return DEFAULT_RELAY_TIMEOUT
    return value


def get_scan_timeout(project_dir: Path | None = None) -> float | None:
    """Overall scan deadline in seconds, or None when disabled."""
    value = _get_float("AUTHSCOUT_SCAN_TIMEOUT", None, project_dir)
    if value is None or value <= 0:
        return None
    return value


def get_min_body_length(project_dir: Path | None = None) -> int:
    """Minimum relay body length that counts as a successful fetch."""
    raw = get_config("AUTHSCOUT_MIN_BODY_LENGTH", project_dir)
    if raw is None or raw == "":
        return DEFAULT_MIN_BODY_LENGTH
    try:
        return max(int(raw), 0)
    except (TypeError, ValueError):
        logger.warning(
            "Ignoring invalid AUTHSCOUT_MIN_BODY_LENGTH value %r; using %d",
            raw,
            DEFAULT_MIN_BODY_LENGTH,
        )
        return DEFAULT_MIN_BODY_LENGTH


def get_history_path(project_dir: Path | None = None) -> Path:
    """Location of the recent-scans JSON file."""
    configured = get_config("AUTHSCOUT_HISTORY_PATH", project_dir)
    if configured:
        return Path(str(configured)).expanduser()
    return get_global_config_dir() / "recent_scans.json"


def is_verbose(project_dir: Path | None = None) -> bool:
    """Whether verbose debug output is enabled."""
    value = get_config("AUTHSCOUT_VERBOSE", project_dir, default="")
    return str(value).strip().lower() in _TRUE_VALUES
