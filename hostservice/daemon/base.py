"""Abstract base for service manager adapters."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from hostservice.config.schema import ServiceConfig

if TYPE_CHECKING:
    from loguru import Logger

    from hostservice.daemon.logs import ErrorSink


class Program(Protocol):
    """The managed program: callbacks invoked by the foreground run loop."""

    def start(self, service: "ServiceAdapter") -> Any:
        """Begin work. Must not block; raise to abort the run."""

    def stop(self, service: "ServiceAdapter") -> Any:
        """Finish work after a termination signal."""


class ServiceAdapter(ABC):
    """ABC that each service manager backend implements."""

    def __init__(self, program: Program, config: ServiceConfig):
        self.program = program
        self.config = config

    def __str__(self) -> str:
        return self.config.label

    @abstractmethod
    def install(self) -> Path:
        """Write the service definition and register it. Returns its path."""

    @abstractmethod
    def uninstall(self, strict: bool = False) -> None:
        """Unregister the service and remove its definition."""

    @abstractmethod
    def start(self) -> None:
        """Start the service via the OS service manager."""

    @abstractmethod
    def stop(self) -> None:
        """Stop the service via the OS service manager."""

    @abstractmethod
    def restart(self) -> None:
        """Stop then start the service."""

    @abstractmethod
    def run(self) -> Any:
        """Run the program in the foreground until a termination signal."""

    @abstractmethod
    def logger(self, errors: "ErrorSink | None" = None) -> "Logger":
        """Logger suited to how the process was launched."""

    @abstractmethod
    def system_logger(self, errors: "ErrorSink | None" = None) -> "Logger":
        """Logger writing to the system log."""
