"""Linux systemd backend."""

import time
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable

from loguru import logger

from hostservice.config.schema import ServiceConfig
from hostservice.daemon.base import Program, ServiceAdapter
from hostservice.daemon.executable import resolve_executable
from hostservice.daemon.logs import ErrorSink, select_logger, system_logger
from hostservice.daemon.render import render_unit
from hostservice.daemon.runner import CommandRunner, SystemctlRunner
from hostservice.daemon.signals import SignalSubscription
from hostservice.errors import (
    AlreadyInstalled,
    CommandError,
    DefinitionIOError,
    UnsupportedScope,
)

if TYPE_CHECKING:
    from loguru import Logger

UNIT_DIR = Path("/etc/systemd/system")

# Pause between stop and start so systemd can release the old process.
RESTART_SETTLE_DELAY = 0.05


class SystemdService(ServiceAdapter):
    """Manages a system-scope systemd unit for a program."""

    def __init__(
        self,
        program: Program,
        config: ServiceConfig,
        runner: CommandRunner | None = None,
        resolve: Callable[[], str] = resolve_executable,
        unit_dir: Path = UNIT_DIR,
    ):
        super().__init__(program, config)
        self.runner = runner or SystemctlRunner()
        self.resolve = resolve
        self.unit_dir = Path(unit_dir)

    @property
    def unit_name(self) -> str:
        return self.config.unit_name

    def config_path(self) -> Path:
        """Path of the unit file for this service."""
        if self.config.user_service:
            raise UnsupportedScope("User services are not supported on systemd.")
        return self.unit_dir / self.unit_name

    # ------------------------------------------------------------------
    # Install / Uninstall
    # ------------------------------------------------------------------

    def install(self) -> Path:
        path = self.config_path()
        if path.exists():
            raise AlreadyInstalled(path)

        content = render_unit(self.config, self.resolve())

        try:
            # "x" never overwrites a file created since the check above.
            with open(path, "x", encoding="utf-8") as f:
                f.write(content)
        except FileExistsError as e:
            raise AlreadyInstalled(path) from e
        except OSError as e:
            raise DefinitionIOError(e.errno, f"Cannot write {path}: {e.strerror}") from e

        # No rollback past this point: a failed enable leaves the unit file.
        self.runner.enable(self.unit_name)
        self.runner.daemon_reload()
        logger.info(f"Installed {self.unit_name} at {path}")
        return path

    def uninstall(self, strict: bool = False) -> None:
        path = self.config_path()
        try:
            self.runner.disable(self.unit_name)
        except CommandError as e:
            if strict:
                raise
            logger.warning(f"Ignoring failure to disable {self.unit_name}: {e}")

        try:
            path.unlink()
        except OSError as e:
            raise DefinitionIOError(e.errno, f"Cannot remove {path}: {e.strerror}") from e
        logger.info(f"Uninstalled {self.unit_name}")

    # ------------------------------------------------------------------
    # Start / Stop
    # ------------------------------------------------------------------

    def start(self) -> None:
        self.runner.start(self.unit_name)

    def stop(self) -> None:
        self.runner.stop(self.unit_name)

    def restart(self) -> None:
        self.stop()
        time.sleep(RESTART_SETTLE_DELAY)
        self.start()

    # ------------------------------------------------------------------
    # Foreground
    # ------------------------------------------------------------------

    def run(self) -> Any:
        self.program.start(self)

        with SignalSubscription() as signals:
            signals.wait()

        return self.program.stop(self)

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def logger(self, errors: ErrorSink | None = None) -> "Logger":
        return select_logger(self.config.name, errors)

    def system_logger(self, errors: ErrorSink | None = None) -> "Logger":
        return system_logger(self.config.name, errors)
