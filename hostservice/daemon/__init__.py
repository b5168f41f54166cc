"""Service lifecycle management for hostservice."""

from hostservice.daemon.base import Program, ServiceAdapter
from hostservice.daemon.manager import detect_platform, new_service
from hostservice.daemon.systemd import SystemdService

__all__ = ["Program", "ServiceAdapter", "SystemdService", "detect_platform", "new_service"]
