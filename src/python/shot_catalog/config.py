"""
Configuration management for shot_catalog.

Example config.yaml:

    remote:
      base_url: http://localhost:3001/api
      timeout: 10
    state_path: ~/.shot_catalog/state.json
    log_level: INFO
    log_file: ~/.shot_catalog/shot_catalog.log
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

# Default locations to search for config.yaml
CONFIG_SEARCH_PATHS = [
    Path("config.yaml"),
    Path("src/python/config.yaml"),
    Path.home() / ".shot_catalog" / "config.yaml",
]

DEFAULT_REMOTE_CONFIG = {
    "base_url": "http://localhost:3001/api",
    "timeout": 10.0,
}

DEFAULT_STATE_PATH = Path.home() / ".shot_catalog" / "state.json"


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Specific path to config file. If None, searches default
            locations and falls back to an empty configuration.

    Returns:
        Dictionary containing configuration.

    Raises:
        FileNotFoundError: If ``config_path`` is given but does not exist.
    """
    path_to_load = None

    if config_path:
        if config_path.exists():
            path_to_load = config_path
        else:
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        for path in CONFIG_SEARCH_PATHS:
            if path.exists():
                path_to_load = path
                break

    if not path_to_load:
        logger.debug("No config file found, using defaults")
        return {}

    logger.info("Loading config from %s", path_to_load)

    with open(path_to_load, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f)

    if config is not None and not isinstance(config, dict):
        raise ValueError(f"Config file {path_to_load} must contain a mapping")

    return config or {}


def get_remote_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Get the remote service settings, filled in with defaults.

    Args:
        config: Configuration dictionary

    Returns:
        Dictionary with ``base_url`` and ``timeout``
    """
    remote_config = dict(DEFAULT_REMOTE_CONFIG)
    remote_config.update(config.get("remote") or {})
    remote_config["timeout"] = float(remote_config["timeout"])
    return remote_config


def get_state_path(config: Dict[str, Any]) -> Path:
    """Get the path of the local state file."""
    path_str = config.get("state_path")
    if not path_str:
        return DEFAULT_STATE_PATH
    return Path(path_str).expanduser()


def get_log_level(config: Dict[str, Any]) -> str:
    """Get the configured log level name."""
    return str(config.get("log_level", "INFO")).upper()


def get_log_file(config: Dict[str, Any]) -> Optional[Path]:
    """Get the optional log file path."""
    path_str = config.get("log_file")
    return Path(path_str).expanduser() if path_str else None
