"""Resolution of the path of the running program."""

import os
import shutil
import sys
from pathlib import Path

from hostservice.errors import PathResolutionError


def resolve_executable() -> str:
    """
    Return the absolute path of the program currently running.

    Console scripts installed by pip are executables in their own right, so
    ``sys.argv[0]`` is preferred; it is looked up on PATH when it is a bare
    command name.

    Raises:
        PathResolutionError: If no executable file can be found.
    """
    argv0 = sys.argv[0] if sys.argv else ""
    if not argv0 or argv0 == "-c":
        raise PathResolutionError("Cannot determine the running executable")

    candidate = Path(argv0)
    if os.sep not in argv0:
        found = shutil.which(argv0)
        if found:
            candidate = Path(found)

    try:
        resolved = candidate.resolve(strict=True)
    except OSError as e:
        raise PathResolutionError(f"Cannot resolve executable {argv0}: {e}") from e

    if not resolved.is_file() or not os.access(resolved, os.X_OK):
        raise PathResolutionError(f"{resolved} is not an executable file")
    return str(resolved)
