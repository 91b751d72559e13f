"""Configuration file loader."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from hl.config.schema import Config
from hl.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "hl" / "config.yaml"


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file, returning empty dict if not found."""
    if not path.exists():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read configuration {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration {path} must be a mapping")
    return data


def build_config(data: dict[str, Any], source: str = "<string>") -> Config:
    """Validate raw configuration data into a Config model."""
    try:
        return Config(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {source}: {e}") from e


def load_config(config_path: Path | str | None = None) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (default: ~/.config/hl/config.yaml).
            An explicitly given path must exist; the default one may not.

    Returns:
        Configuration object
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    else:
        config_path = Path(config_path)
        if not config_path.is_file():
            raise ConfigError(f"Configuration file not found: {config_path}")

    logger.debug("Loading configuration from %s", config_path)
    return build_config(load_yaml_file(config_path), str(config_path))


def load_config_from_string(yaml_string: str) -> Config:
    """Load configuration from a YAML string (useful for testing)."""
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}") from e
    if data is not None and not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")
    return build_config(data if data else {})
