"""Invocation of the native service manager's command line tool."""

import subprocess
from typing import Protocol

from loguru import logger

from hostservice.errors import CommandError


class CommandRunner(Protocol):
    """The service manager actions a lifecycle adapter needs."""

    def enable(self, unit: str) -> None: ...

    def disable(self, unit: str) -> None: ...

    def start(self, unit: str) -> None: ...

    def stop(self, unit: str) -> None: ...

    def daemon_reload(self) -> None: ...


class SystemctlRunner:
    """
    Runs ``systemctl`` synchronously.

    No timeout is applied: a hung systemctl hangs the caller.
    """

    def __init__(self, binary: str = "systemctl"):
        self.binary = binary

    def enable(self, unit: str) -> None:
        self._run("enable", unit)

    def disable(self, unit: str) -> None:
        self._run("disable", unit)

    def start(self, unit: str) -> None:
        self._run("start", unit)

    def stop(self, unit: str) -> None:
        self._run("stop", unit)

    def daemon_reload(self) -> None:
        self._run("daemon-reload")

    def _run(self, *args: str) -> str:
        """Run ``systemctl <args>`` and return its combined output."""
        cmd = [self.binary, *args]
        logger.debug(f"Running {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            )
        except OSError as e:
            raise CommandError(cmd, None, str(e)) from e

        output = (result.stdout or "").strip()
        if result.returncode != 0:
            raise CommandError(cmd, result.returncode, output)
        return output
