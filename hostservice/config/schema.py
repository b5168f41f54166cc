"""Service description passed to lifecycle adapters."""

import re
from dataclasses import dataclass, field
from typing import Sequence

from hostservice.errors import ConfigError

# Characters systemd accepts in a unit name prefix. "@" marks a template
# instance and needs text on both sides.
_NAME_RE = re.compile(r"[A-Za-z0-9_:][A-Za-z0-9_.:-]*(?:@[A-Za-z0-9_.:-]+)?")


@dataclass(frozen=True)
class ServiceConfig:
    """
    Immutable description of a managed service.

    ``name`` keys both the definition file and the unit known to the
    service manager, so it is restricted to filesystem-safe characters.
    """

    name: str
    display_name: str = ""
    description: str = ""
    arguments: Sequence[str] = field(default_factory=tuple)
    working_directory: str = ""
    chroot: str = ""
    user_name: str = ""
    user_service: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not _NAME_RE.fullmatch(self.name):
            raise ConfigError(f"Invalid service name: {self.name!r}")
        if isinstance(self.arguments, str):
            raise ConfigError("arguments must be a list of strings, not a string")
        arguments = tuple(self.arguments)
        for arg in arguments:
            if not isinstance(arg, str):
                raise ConfigError(f"Service argument must be a string: {arg!r}")
        # Frozen dataclass: bypass __setattr__ to store the normalized tuple.
        object.__setattr__(self, "arguments", arguments)

        for attr in ("display_name", "description", "working_directory", "chroot", "user_name"):
            if not isinstance(getattr(self, attr), str):
                raise ConfigError(f"{attr} must be a string")
        if not isinstance(self.user_service, bool):
            raise ConfigError("user_service must be a boolean")

    @property
    def label(self) -> str:
        """Human readable name, falling back to ``name``."""
        return self.display_name or self.name

    @property
    def unit_name(self) -> str:
        return f"{self.name}.service"


@dataclass(frozen=True)
class Settings:
    """Everything read from a config file: the service plus the program to run."""

    service: ServiceConfig
    program: str | None = None  # "module:attribute"
