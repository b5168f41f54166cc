"""Tests for SystemctlRunner."""

import subprocess

import pytest

from hostservice.daemon import runner as runner_module
from hostservice.daemon.runner import SystemctlRunner
from hostservice.errors import CommandError


@pytest.fixture
def fake_run(monkeypatch):
    """Replace subprocess.run, recording argv and returning a preset result."""
    calls = []
    result = {"returncode": 0, "stdout": ""}

    def run(cmd, **kwargs):
        calls.append((cmd, kwargs))
        return subprocess.CompletedProcess(cmd, result["returncode"], stdout=result["stdout"])

    monkeypatch.setattr(runner_module.subprocess, "run", run)
    return calls, result


class TestSystemctlRunner:
    """Tests for the systemctl command runner."""

    @pytest.mark.parametrize(
        "method, expected",
        [
            ("enable", ["systemctl", "enable", "worker.service"]),
            ("disable", ["systemctl", "disable", "worker.service"]),
            ("start", ["systemctl", "start", "worker.service"]),
            ("stop", ["systemctl", "stop", "worker.service"]),
        ],
    )
    def test_unit_actions(self, fake_run, method, expected):
        calls, _ = fake_run

        getattr(SystemctlRunner(), method)("worker.service")

        assert calls[0][0] == expected
        assert calls[0][1]["stderr"] == subprocess.STDOUT
        assert "timeout" not in calls[0][1]

    def test_daemon_reload(self, fake_run):
        calls, _ = fake_run

        SystemctlRunner().daemon_reload()

        assert calls[0][0] == ["systemctl", "daemon-reload"]

    def test_non_zero_exit(self, fake_run):
        _, result = fake_run
        result.update(returncode=5, stdout="Unit worker.service not found.\n")

        with pytest.raises(CommandError) as exc_info:
            SystemctlRunner().start("worker.service")

        error = exc_info.value
        assert error.returncode == 5
        assert error.output == "Unit worker.service not found."
        assert error.command == ["systemctl", "start", "worker.service"]

    def test_binary_missing(self):
        runner = SystemctlRunner(binary="/nonexistent/systemctl")

        with pytest.raises(CommandError) as exc_info:
            runner.stop("worker.service")

        assert exc_info.value.returncode is None
        assert isinstance(exc_info.value.__cause__, OSError)
