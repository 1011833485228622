"""Configuration loading with environment variable substitution."""

import os
import sys
from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic_core import ValidationError

from envdeploy.runtime.config.config_data import ConfigData
from envdeploy.runtime.config.config_utils import substitute_env_vars

CONFIG_PATH = Path("envdeploy.yaml")
LOG_LEVEL_VARIABLE = "ENVDEPLOY_LOG_LEVEL"


def load_config(file_path: Path = CONFIG_PATH) -> ConfigData:
    """
    Load an envdeploy YAML file with environment variable substitution.

    Args:
        file_path: Path to the YAML file (default: envdeploy.yaml)

    Returns:
        Validated ConfigData. A missing file yields the defaults.

    Raises:
        ValueError: If required environment variables are missing, validation fails,
                   or YAML structure is invalid (missing 'config' key)

    YAML Structure Requirements:
        The YAML file must have a top-level 'config:' key containing configuration data.
    """
    if not file_path.exists():
        logger.debug(f"No configuration file at {file_path}, using defaults")
        return ConfigData()

    with open(file_path) as f:
        content = f.read()

    logger.debug(f"Loading configuration from {file_path}")
    content = substitute_env_vars(content)

    # Parse YAML
    try:
        loaded: dict[str, Any] = yaml.safe_load(content)
        if not loaded:
            raise ValueError("Failed to parse YAML")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    # Validate and return as ConfigData
    try:
        # Extract the 'config' section from the YAML structure
        if "config" not in loaded:
            raise ValueError("Invalid YAML structure: missing 'config' key")
        return ConfigData(**(loaded["config"] or {}))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e


def configure_logging(level: str | None = None) -> None:
    """Route loguru output to stderr at the requested level.

    Args:
        level: Log level name; defaults to $ENVDEPLOY_LOG_LEVEL or WARNING
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or os.getenv(LOG_LEVEL_VARIABLE, "WARNING")).upper(),
        format="<dim>{time:HH:mm:ss}</dim> <level>{level: <8}</level> {message}",
    )
