"""
hostservice - install, control and run a program as a host service.
"""

__version__ = "0.1.0"
__logo__ = "⚙"

from hostservice.config import ServiceConfig, load_config
from hostservice.daemon import Program, ServiceAdapter, SystemdService, new_service
from hostservice.errors import (
    AlreadyInstalled,
    CommandError,
    ConfigError,
    DefinitionIOError,
    PathResolutionError,
    RenderError,
    ServiceError,
    UnsupportedPlatform,
    UnsupportedScope,
)

__all__ = [
    "AlreadyInstalled",
    "CommandError",
    "ConfigError",
    "DefinitionIOError",
    "PathResolutionError",
    "Program",
    "RenderError",
    "ServiceAdapter",
    "ServiceConfig",
    "ServiceError",
    "SystemdService",
    "UnsupportedPlatform",
    "UnsupportedScope",
    "load_config",
    "new_service",
]
