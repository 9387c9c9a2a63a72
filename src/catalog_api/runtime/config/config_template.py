"""Configuration template substitution utilities."""

import os
import re
from collections.abc import Mapping
from pathlib import Path

import yaml
from loguru import logger
from pydantic_core import ValidationError

from src.catalog_api.runtime.config.config_data import ConfigData

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def substitute_env_vars(text: str, env: Mapping[str, str] | None = None) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - optional with default value
    - ${VAR_NAME:?error_message} - required with custom error message
    """
    source = os.environ if env is None else env

    def replacer(match: re.Match[str]) -> str:
        var_expr = match.group(1)

        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return source.get(var_name, default)

        if ":?" in var_expr:
            var_name, error_msg = var_expr.split(":?", 1)
            value = source.get(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name}: {error_msg}")
            return value

        value = source.get(var_expr)
        if value is None:
            raise ValueError(f"Required environment variable {var_expr} not set")
        return value

    return _PLACEHOLDER.sub(replacer, text)


def environment_overrides(
    env_mode: str, env: Mapping[str, str] | None = None
) -> dict[str, str]:
    """Return the environment with ``<ENV_MODE>_`` prefixed variables promoted.

    With ``env_mode="production"``, ``PRODUCTION_DATABASE_URL`` shadows
    ``DATABASE_URL`` during substitution. The process environment is not
    modified.
    """
    source = dict(os.environ if env is None else env)
    prefix = f"{env_mode.upper()}_"
    promoted = {
        name[len(prefix):]: value
        for name, value in source.items()
        if name.startswith(prefix) and len(name) > len(prefix)
    }
    if promoted:
        logger.info(
            "Applying {} environment overrides: {}", env_mode, sorted(promoted)
        )
    source.update(promoted)
    return source


def load_templated_yaml(file_path: Path, env_mode: str = "development") -> ConfigData:
    """
    Load a YAML file with environment variable substitution.

    Args:
        file_path: Path to the YAML file
        env_mode: Active environment, used to select prefixed overrides

    Returns:
        Parsed and validated configuration

    Raises:
        ValueError: If required environment variables are missing or the
            YAML does not describe a valid configuration
        FileNotFoundError: If the YAML file doesn't exist
    """
    with open(file_path) as f:
        content = f.read()

    logger.info("Loading configuration from {} for environment: {}", file_path, env_mode)
    substituted_content = substitute_env_vars(content, environment_overrides(env_mode))

    try:
        loaded = yaml.safe_load(substituted_content)
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    if not isinstance(loaded, dict):
        raise ValueError("Failed to parse YAML")

    try:
        return ConfigData(**(loaded.get("config") or {}))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
