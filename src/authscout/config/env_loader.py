"""Environment variable and configuration file loading."""

from pathlib import Path
from typing import Any

import yaml

CONFIG_DIR_NAME = ".authscout"


def get_global_config_dir() -> Path:
    """Return the global ~/.authscout directory."""
    return Path.home() / CONFIG_DIR_NAME


def load_env_file(env_path: Path) -> dict[str, str]:
    """Load environment variables from .env file."""
    env_vars = {}
    if env_path.exists():
        with open(env_path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    # Remove quotes if present
                    value = value.strip().strip("\"'")
                    env_vars[key.strip()] = value
    return env_vars


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.authscout/config.yml."""
    config_path = get_global_config_dir() / "config.yml"
    if config_path.exists():
        with open(config_path) as f:
            return yaml.safe_load(f) or {}
    return {}


def load_project_config(project_dir: Path | None = None) -> dict[str, str]:
    """Load project-specific configuration from .authscout/.env."""
    if project_dir is None:
        project_dir = Path.cwd()

    env_path = project_dir / CONFIG_DIR_NAME / ".env"
    if env_path.is_file():
        return load_env_file(env_path)
    return {}
