"""Rendering of systemd unit files from a ServiceConfig."""

from hostservice.config.schema import ServiceConfig
from hostservice.daemon.templates import (
    RESTART_SEC,
    START_LIMIT_BURST,
    START_LIMIT_INTERVAL,
    SYSTEMD_UNIT,
)
from hostservice.errors import RenderError

_C_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\v": "\\v",
    # Specifier and environment variable markers.
    "%": "%%",
    "$": "$$",
}


def escape(value: str) -> str:
    """
    Quote a single command line word for ``ExecStart=``.

    The result is always double-quoted so that whitespace, quotes and
    semicolons stay inside the word when systemd splits the line.

    Args:
        value: The raw argument.

    Returns:
        The quoted word.
    """
    if "\x00" in value:
        raise RenderError(f"argument contains a NUL character: {value!r}")

    out = []
    for ch in value:
        if ch in _C_ESCAPES:
            out.append(_C_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\x{ord(ch):02x}")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


def escape_path(value: str) -> str:
    """
    Escape a path for a single-value directive such as ``WorkingDirectory=``.

    These directives are not unquoted by systemd, so only specifiers are
    escaped; characters that cannot be represented raise RenderError. Only
    absolute paths are accepted, which also excludes the "-" and "~"
    prefixes systemd interprets.
    """
    _check_line(value, "path")
    if value != value.strip():
        raise RenderError(f"path has leading or trailing whitespace: {value!r}")
    if not value.startswith("/"):
        raise RenderError(f"path must be absolute: {value!r}")
    return value.replace("%", "%%")


def render_unit(config: ServiceConfig, executable: str) -> str:
    """
    Render the unit file for ``config`` running ``executable``.

    Output depends only on the arguments, so the same input always yields
    the same text.

    Raises:
        RenderError: If a value cannot be written into the unit.
    """
    if not executable.startswith("/"):
        raise RenderError(f"executable path must be absolute: {executable!r}")

    description = config.description or config.label
    _check_line(description, "description")

    exec_start = " ".join([escape(executable), *(escape(arg) for arg in config.arguments)])

    optional = []
    if config.chroot:
        optional.append(f"RootDirectory={escape_path(config.chroot)}")
    if config.working_directory:
        optional.append(f"WorkingDirectory={escape_path(config.working_directory)}")
    if config.user_name:
        _check_line(config.user_name, "user name")
        if any(ch.isspace() for ch in config.user_name):
            raise RenderError(f"user name contains whitespace: {config.user_name!r}")
        optional.append(f"User={config.user_name.replace('%', '%%')}")

    return SYSTEMD_UNIT.format(
        description=description.replace("%", "%%"),
        path=escape_path(executable),
        start_limit_interval=START_LIMIT_INTERVAL,
        start_limit_burst=START_LIMIT_BURST,
        exec_start=exec_start,
        optional_lines="".join(f"{line}\n" for line in optional),
        restart_sec=RESTART_SEC,
    )


def _check_line(value: str, what: str) -> None:
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in value):
        raise RenderError(f"{what} contains control characters: {value!r}")
    # An odd number of trailing backslashes continues the line in systemd.
    trailing = len(value) - len(value.rstrip("\\"))
    if trailing % 2:
        raise RenderError(f"{what} ends with a line continuation: {value!r}")
