"""Configuration module for hostservice."""

from hostservice.config.loader import get_config_path, load_config, load_settings
from hostservice.config.schema import ServiceConfig, Settings

__all__ = ["ServiceConfig", "Settings", "get_config_path", "load_config", "load_settings"]
