"""Open a directory in the platform's file manager."""

import logging
import shlex
import subprocess
import sys
from typing import Optional


logger = logging.getLogger(__name__)

OPEN_TIMEOUT = 10.0


def file_manager_command(path: str, override: Optional[str] = None, platform: Optional[str] = None) -> list[str]:
    """Build the command line that opens ``path``.

    Args:
        path: Directory to open.
        override: User-configured command, e.g. "thunar" or "code -n".
        platform: Value to use instead of ``sys.platform``.
    """
    if override:
        return [*shlex.split(override), path]

    platform = platform or sys.platform
    if platform.startswith("win"):
        return ["explorer", path]
    if platform == "darwin":
        return ["open", path]
    return ["xdg-open", path]


def open_in_file_manager(path: str, override: Optional[str] = None, timeout: float = OPEN_TIMEOUT) -> bool:
    """Launch the file manager on ``path`` and wait for the launcher to exit.

    Output goes to the null device so a file manager left running by the
    launcher cannot hold the call open.

    Returns:
        True if the launcher ran, False if it could not be started or hung.
    """
    cmd = file_manager_command(path, override)
    try:
        # explorer.exe exits 1 even on success, so the code is not checked
        subprocess.run(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        logger.warning("File manager did not return within %ss: %s", timeout, " ".join(cmd))
        return False
    except OSError as e:
        logger.warning("Could not launch file manager %s: %s", cmd[0], e)
        return False
    return True
