"""
Configuration Loader

Loads YAML config files into ConfigurationSection trees.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Union

import yaml

from .config_section import ConfigurationSection

logger = logging.getLogger(__name__)

# Pattern: ${VAR} or ${VAR:-default}
_ENV_PATTERN = re.compile(r'\$\{([A-Z_][A-Z0-9_]*)(?::-([^}]*))?\}')


class ConfigError(Exception):
    """Raised when a config file cannot be read or is not valid YAML"""


def substitute_env_vars(config: Any) -> Any:
    """
    Substitute environment variables in config values

    Handles patterns like:
    - ${ENV_VAR}
    - ${ENV_VAR:-default_value}

    Args:
        config: Parsed YAML data (dict, list or scalar)

    Returns:
        Data with environment variables substituted in every string
    """
    def replacer(match):
        var_name = match.group(1)
        default_value = match.group(2) or ""
        return os.environ.get(var_name, default_value)

    if isinstance(config, str):
        return _ENV_PATTERN.sub(replacer, config)
    elif isinstance(config, dict):
        return {k: substitute_env_vars(v) for k, v in config.items()}
    elif isinstance(config, list):
        return [substitute_env_vars(item) for item in config]
    else:
        return config


def load_config_text(text: str, source: str = "<string>") -> ConfigurationSection:
    """
    Parse YAML text into a root section

    Args:
        text: YAML document
        source: Where the text came from, used in messages

    Returns:
        Root ConfigurationSection (empty if the document is empty)

    Raises:
        ConfigError: If the text is not valid YAML or its top level is not a mapping
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing YAML config {source}: {e}") from e

    if data is None:
        logger.warning(f"Config {source} is empty")
        return ConfigurationSection()

    if not isinstance(data, dict):
        raise ConfigError(f"Config {source} must be a mapping at the top level, found {type(data).__name__}")

    return ConfigurationSection(substitute_env_vars(data))


def load_config(config_path: Union[str, Path]) -> ConfigurationSection:
    """
    Load configuration from a YAML file

    Args:
        config_path: Path to the config file

    Returns:
        Root ConfigurationSection of the file

    Raises:
        ConfigError: If the file is missing, unreadable or invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    logger.info(f"Loading configuration from: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error reading config {config_path}: {e}") from e

    return load_config_text(text, source=str(config_path))
