"""Platform detection and adapter selection."""

from pathlib import Path
from typing import Any, Literal

from loguru import logger

from hostservice.config.schema import ServiceConfig
from hostservice.daemon.base import Program, ServiceAdapter
from hostservice.errors import UnsupportedPlatform

Platform = Literal["systemd", "unsupported"]

# Present only when systemd is running as PID 1.
SYSTEMD_RUNTIME_DIR = Path("/run/systemd/system")


def detect_platform() -> Platform:
    """Detect the service manager running on this host."""
    if SYSTEMD_RUNTIME_DIR.is_dir():
        return "systemd"
    return "unsupported"


def new_service(program: Program, config: ServiceConfig, **kwargs: Any) -> ServiceAdapter:
    """
    Build the lifecycle adapter for this host.

    The platform is probed once here; the returned adapter never re-checks.

    Args:
        program: Start/stop callbacks for the foreground run loop.
        config: Service description.
        **kwargs: Passed through to the adapter constructor.

    Raises:
        UnsupportedPlatform: If no supported service manager is running.
    """
    platform = detect_platform()
    logger.debug(f"Detected service platform: {platform}")
    if platform == "systemd":
        from hostservice.daemon.systemd import SystemdService

        return SystemdService(program, config, **kwargs)
    raise UnsupportedPlatform(
        "Service management is not supported on this platform: "
        f"{SYSTEMD_RUNTIME_DIR} not found."
    )
