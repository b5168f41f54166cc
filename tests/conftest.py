"""Shared fixtures for hostservice tests."""

import pytest

from hostservice.config import ServiceConfig
from hostservice.daemon.systemd import SystemdService
from hostservice.errors import CommandError


class FakeRunner:
    """CommandRunner that records actions instead of calling systemctl."""

    def __init__(self, fail: set[str] | None = None):
        self.calls: list[tuple[str, ...]] = []
        self.fail = fail or set()

    def _record(self, action: str, *args: str) -> None:
        self.calls.append((action, *args))
        if action in self.fail:
            raise CommandError(["systemctl", action, *args], 1, f"{action} refused")

    def enable(self, unit: str) -> None:
        self._record("enable", unit)

    def disable(self, unit: str) -> None:
        self._record("disable", unit)

    def start(self, unit: str) -> None:
        self._record("start", unit)

    def stop(self, unit: str) -> None:
        self._record("stop", unit)

    def daemon_reload(self) -> None:
        self._record("daemon-reload")


class RecordingProgram:
    """Program that records how the run loop drove it."""

    def __init__(self, start_error: Exception | None = None, stop_result=None):
        self.events: list[str] = []
        self.start_error = start_error
        self.stop_result = stop_result

    def start(self, service):
        self.events.append("start")
        if self.start_error:
            raise self.start_error

    def stop(self, service):
        self.events.append("stop")
        return self.stop_result


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def config():
    return ServiceConfig(
        name="worker",
        display_name="Worker",
        description="Background worker",
        arguments=["run", "--port", "8080"],
    )


@pytest.fixture
def make_service(tmp_path, runner):
    """Build a SystemdService writing its unit into a temporary directory."""

    def _make(config, program=None, runner_=None, resolve=None):
        return SystemdService(
            program or RecordingProgram(),
            config,
            runner=runner_ or runner,
            resolve=resolve or (lambda: "/usr/local/bin/worker"),
            unit_dir=tmp_path,
        )

    return _make


@pytest.fixture
def make_runner():
    return FakeRunner


@pytest.fixture
def make_program():
    return RecordingProgram
