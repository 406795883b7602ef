"""Configuration loading with environment variable substitution."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic_core import ValidationError

from dealdesk.runtime.config.config_data import ConfigData


def substitute_env_vars(text: str) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - optional with default value
    - ${VAR_NAME:?error_message} - required with custom error message
    """
    def replacer(match):
        var_expr = match.group(1)

        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return os.getenv(var_name, default)

        elif ":?" in var_expr:
            var_name, error_msg = var_expr.split(":?", 1)
            value = os.getenv(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name}: {error_msg}")
            return value

        else:
            var_name = var_expr
            value = os.getenv(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name} not set")
            return value

    pattern = r'\$\{([^}]+)\}'
    return re.sub(pattern, replacer, text)


def load_templated_config(file_path: Path) -> ConfigData:
    """
    Load a JSON or YAML configuration file with environment variable substitution.

    JSON documents are parsed by the YAML loader as well, so ``config.json``
    and ``config.yaml`` are handled the same way.

    Args:
        file_path: Path to the configuration file

    Returns:
        The validated configuration

    Raises:
        ValueError: If the file is malformed, invalid, or references a
            missing required environment variable
        FileNotFoundError: If the file doesn't exist
    """
    logger.info("Loading configuration from {}", file_path)
    with open(file_path, encoding="utf-8") as f:
        content = f.read()

    substituted_content = substitute_env_vars(content)

    try:
        loaded = yaml.safe_load(substituted_content)
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing {file_path}: {e}") from e

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Error parsing {file_path}: top level must be a mapping")

    try:
        config = ConfigData.model_validate(loaded)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    logger.debug("Configured connection strings: {}", sorted(config.connection_strings))
    return config
