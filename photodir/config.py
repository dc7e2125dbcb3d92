"""
Configuration

Loads the YAML configuration file shared by the CLI and the ``from_config``
constructors.

Example config.yaml:
    extraction:
      exiftool_path: /usr/local/bin/exiftool
    album:
      metadata_file: _metadata.json
      allowed_extensions: [jpg, jpeg, png, webp]
    resize:
      large_side_max: 2048
      quality: 80
"""

import os
import logging
from typing import Any, Dict, Optional

import yaml

from photodir.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = 'config.yaml'


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file.

    An explicitly requested file must exist. When no path is given the default
    ``config.yaml`` is read if present, otherwise an empty configuration is
    returned.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Configuration dictionary (possibly empty)
    """
    path = config_path or DEFAULT_CONFIG_PATH
    if config_path is None and not os.path.exists(path):
        logger.debug(f"No {DEFAULT_CONFIG_PATH} found, using defaults")
        return {}

    with open(path, 'r') as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(f"Configuration in {path} must be a mapping")
    return config


def section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Return a config section as a dict, treating a missing or empty one as {}."""
    return config.get(name) or {}
