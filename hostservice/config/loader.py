"""Configuration loading utilities."""

import os
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from hostservice.config.schema import ServiceConfig, Settings
from hostservice.errors import ConfigError

CONFIG_ENV_VAR = "HOSTSERVICE_CONFIG"

# camelCase spellings accepted alongside the snake_case field names
_ALIASES = {
    "displayName": "display_name",
    "workingDirectory": "working_directory",
    "chRoot": "chroot",
    "userName": "user_name",
    "userService": "user_service",
}

_FIELDS = {
    "name",
    "display_name",
    "description",
    "arguments",
    "working_directory",
    "chroot",
    "user_name",
    "user_service",
}


def get_config_path() -> Path:
    """Get the default configuration file path."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".hostservice" / "service.yaml"


def load_settings(config_path: Path | None = None) -> Settings:
    """
    Load service settings from a YAML file.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded settings.

    Raises:
        ConfigError: If the file is missing, unparsable or malformed.
    """
    path = config_path or get_config_path()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config from {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config {path} is not valid UTF-8: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping")

    service = data.get("service")
    if not isinstance(service, dict):
        raise ConfigError(f"Config {path} has no 'service' mapping")

    program = data.get("program")
    if program is not None and not isinstance(program, str):
        raise ConfigError("program must be a 'module:attribute' string")

    logger.debug(f"Loaded service config from {path}")
    return Settings(service=_build_service(service), program=program)


def load_config(config_path: Path | None = None) -> ServiceConfig:
    """Load only the service description from a YAML file."""
    return load_settings(config_path).service


def _build_service(raw: dict[str, Any]) -> ServiceConfig:
    """Convert a raw mapping into a ServiceConfig."""
    kwargs: dict[str, Any] = {}
    for key, value in raw.items():
        field_name = _ALIASES.get(key, key)
        if field_name not in _FIELDS:
            raise ConfigError(f"Unknown service setting: {key}")
        if value is None:
            continue
        kwargs[field_name] = value

    if "name" not in kwargs:
        raise ConfigError("Service name is required")
    if "arguments" in kwargs:
        arguments = kwargs["arguments"]
        if not isinstance(arguments, list):
            raise ConfigError("arguments must be a list of strings")
        kwargs["arguments"] = tuple(str(a) if isinstance(a, (int, float)) else a for a in arguments)

    return ServiceConfig(**kwargs)
