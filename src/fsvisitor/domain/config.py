from __future__ import annotations

"""
Configuration Domain Management.

Provides the default export settings and their JSON persistence in the
user data directory. Missing or corrupted files fall back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from fsvisitor.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_EXPORTER_KEY,
    DEFAULT_PREVIEW_LENGTH,
)
from fsvisitor.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


def get_config_path() -> str:
    """Return the absolute path of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)

# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default export configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "exporter": DEFAULT_EXPORTER_KEY,
        "preview_length": DEFAULT_PREVIEW_LENGTH,
        "xml_close_tags": False,
        "output_path": "",
        "log_level": "INFO",
        "log_file": "",
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the persisted configuration merged over the defaults.

    Args:
        path: Optional explicit config file. Defaults to the user data dir.

    Returns:
        Dict[str, Any]: Loaded configuration, or defaults on failure.
    """
    config_path = path or get_config_path()
    config = get_default_config()

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found at {config_path}. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    data.pop("version", None)
    config.update(data)
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist the configuration as JSON.

    Args:
        config: Configuration dictionary to store.
        path: Optional explicit config file. Defaults to the user data dir.

    Returns:
        bool: True when the file was written.
    """
    config_path = path or get_config_path()
    payload = dict(config)
    payload["version"] = CURRENT_CONFIG_VERSION

    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False

    logger.debug(f"Configuration saved to {config_path}")
    return True
