"""Exceptions raised by service lifecycle operations."""

from pathlib import Path
from typing import Sequence


class ServiceError(Exception):
    """Base class for every error raised by hostservice."""


class ConfigError(ServiceError):
    """The service configuration is invalid or could not be loaded."""


class AlreadyInstalled(ServiceError):
    """A definition file already exists for the service."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Init already exists: {path}")


class UnsupportedScope(ServiceError):
    """Per-user services were requested from a manager that only does system scope."""


class UnsupportedPlatform(ServiceError):
    """No service manager adapter is available for this host."""


class PathResolutionError(ServiceError):
    """The path of the running executable could not be determined."""


class RenderError(ServiceError):
    """A value cannot be represented in the unit definition."""


class DefinitionIOError(ServiceError, OSError):
    """The definition file could not be created or removed."""


class CommandError(ServiceError):
    """A service manager command failed or could not be launched."""

    def __init__(self, command: Sequence[str], returncode: int | None, output: str = ""):
        self.command = list(command)
        self.returncode = returncode
        self.output = output
        joined = " ".join(self.command)
        if returncode is None:
            message = f"{joined} could not be launched"
        else:
            message = f"{joined} failed with exit status {returncode}"
        if output:
            message = f"{message}: {output}"
        super().__init__(message)
