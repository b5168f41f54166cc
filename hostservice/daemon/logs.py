"""Logger selection for interactive and managed runs."""

import os
import sys
from logging.handlers import SysLogHandler
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from loguru import logger

if TYPE_CHECKING:
    from logging import LogRecord

    from loguru import Logger

SYSLOG_SOCKET = Path("/dev/log")

_system_sinks: dict[str, int] = {}


class ErrorSink(Protocol):
    """Receives errors raised while delivering log records, e.g. a queue."""

    def put(self, item: BaseException) -> None: ...


class _ForwardingSysLogHandler(SysLogHandler):
    """SysLogHandler that hands emit failures to an ErrorSink."""

    def __init__(self, errors: ErrorSink | None, **kwargs):
        super().__init__(**kwargs)
        self.errors = errors

    def handleError(self, record: "LogRecord") -> None:
        if self.errors is None:
            super().handleError(record)
            return
        self.errors.put(sys.exc_info()[1])


def is_interactive() -> bool:
    """
    Check whether the process was started from a session rather than a manager.

    systemd sets ``INVOCATION_ID`` for every unit it spawns; daemons
    reparented to init are treated as managed too.
    """
    if os.environ.get("INVOCATION_ID"):
        return False
    return os.getppid() != 1


def console_logger(name: str) -> "Logger":
    """Logger writing to the console through loguru's stderr sink."""
    return logger.bind(service=name)


def system_logger(name: str, errors: ErrorSink | None = None) -> "Logger":
    """
    Logger writing to the system log, tagged with the service name.

    loguru's default stderr sink is left in place. Under systemd, stderr is
    also captured by the journal, so each record appears there twice unless
    the caller removes that sink (``logger.remove(0)``).

    Args:
        name: Service name used as the syslog identifier.
        errors: Where delivery failures go. Printed to stderr when omitted.
            Only the first call for a given name registers a sink.

    Raises:
        OSError: If the local syslog socket cannot be opened.
    """
    if name not in _system_sinks:
        address: str | tuple[str, int]
        if SYSLOG_SOCKET.exists():
            address = str(SYSLOG_SOCKET)
        else:
            address = ("localhost", 514)
        handler = _ForwardingSysLogHandler(
            errors, address=address, facility=SysLogHandler.LOG_DAEMON
        )
        handler.ident = f"{name}: "
        _system_sinks[name] = logger.add(
            handler,
            level="INFO",
            format="{message}",
            filter=lambda record: record["extra"].get("service") == name,
        )
    return logger.bind(service=name)


def select_logger(name: str, errors: ErrorSink | None = None) -> "Logger":
    """Console logger for interactive sessions, system logger otherwise."""
    if is_interactive():
        return console_logger(name)
    return system_logger(name, errors)


def remove_system_logger(name: str) -> None:
    """Detach the system log sink registered for ``name``, if any."""
    sink_id = _system_sinks.pop(name, None)
    if sink_id is not None:
        logger.remove(sink_id)
