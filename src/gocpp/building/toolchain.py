from logging import getLogger
from pathlib import Path
from shutil import which
from subprocess import PIPE, STDOUT, CalledProcessError, run

from ..exceptions import ToolchainNotFoundError
from ..models import UNKNOWN_VERSION

_logger = getLogger(__name__)
_version_field = 3


def locate(tool: str) -> Path:
    """Find `tool` in the directories of the search path.

    Args:
        tool: Name of the executable to look for.

    Raises:
        ToolchainNotFoundError: Raised if `tool` cannot be found.

    Returns:
        Path of the executable.
    """
    path = which(tool)
    if path is None:
        msg = f"{tool} compiler is not installed. Please install it first"
        raise ToolchainNotFoundError(msg)
    return Path(path)


def inspect_version(tool: str, version_flag: str = "--version") -> str:
    """Extract the version of `tool` from the first line it prints.

    The version is the fourth whitespace-separated field of that line, as in \
    `g++ (Ubuntu 13.2.0-4ubuntu3) 13.2.0`. Failing to run the tool or to parse its \
    output is not an error: the version is only displayed.

    Args:
        tool: Name or path of the compiler.
        version_flag: Flag making the compiler print its version.

    Returns:
        The version, or `UNKNOWN_VERSION` if it could not be determined.
    """
    try:
        completed_process = run(
            [tool, version_flag],
            stdout=PIPE,
            stderr=STDOUT,
            encoding="utf8",
            errors="replace",
            check=True,
        )
    except (OSError, CalledProcessError) as e:
        _logger.debug(f"Could not get the version of {tool}: {e}")
        return UNKNOWN_VERSION
    lines = completed_process.stdout.splitlines()
    if not lines:
        return UNKNOWN_VERSION
    fields = lines[0].split()
    if len(fields) <= _version_field:
        return UNKNOWN_VERSION
    return fields[_version_field]
