"""Git synchronization probe for a single project root.

The probe is best effort: it shells out to the ``git`` CLI a bounded number
of times and treats any failure as "no data". It never looks below the
directory it is given.
"""

import logging
import os
import subprocess
from typing import Optional

from roster.models import GitStatus
from roster.scanner.markers import VCS_DIR


logger = logging.getLogger(__name__)

DEFAULT_GIT_TIMEOUT = 10.0


class GitTimeoutError(Exception):
    """A git command did not finish within its timeout."""

    def __init__(self, args: list[str], cwd: str, timeout: float) -> None:
        self.command = args
        self.cwd = cwd
        self.timeout = timeout
        super().__init__(f"git {' '.join(args)} timed out after {timeout}s in {cwd}")


def run_git(args: list[str], cwd: str, timeout: float = DEFAULT_GIT_TIMEOUT) -> Optional[str]:
    """Run a read-only git command in ``cwd``.

    Returns:
        The command's stdout, or None if git is missing or exited non-zero.

    Raises:
        GitTimeoutError: The command ran longer than ``timeout`` seconds.
    """
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise GitTimeoutError(args, cwd, timeout) from e
    except OSError as e:
        logger.debug("git %s failed in %s: %s", " ".join(args), cwd, e)
        return None

    if result.returncode != 0:
        logger.debug("git %s exited %d in %s", " ".join(args), result.returncode, cwd)
        return None
    return result.stdout


def probe_status(path: str, timeout: float = DEFAULT_GIT_TIMEOUT) -> GitStatus:
    """Classify the git synchronization state of ``path``.

    Checks run in order and stop at the first decisive answer:

    1. No ``.git`` entry -> NOT_VERSIONED
    2. HEAD does not resolve -> NO_COMMITS
    3. Uncommitted, untracked or staged changes -> UNCOMMITTED
    4. No remote configured -> NO_REMOTE
    5. Otherwise -> SYNCED

    A timeout in any command aborts the probe with NOT_VERSIONED.
    """
    if not os.path.exists(os.path.join(path, VCS_DIR)):
        return GitStatus.NOT_VERSIONED

    try:
        if run_git(["rev-parse", "--verify", "HEAD"], path, timeout) is None:
            return GitStatus.NO_COMMITS

        remotes = run_git(["remote"], path, timeout) or ""
        changes = run_git(["status", "--short"], path, timeout) or ""
    except GitTimeoutError as e:
        logger.warning("%s; reporting %s as not versioned", e, path)
        return GitStatus.NOT_VERSIONED

    if changes.strip():
        return GitStatus.UNCOMMITTED
    if not remotes.strip():
        return GitStatus.NO_REMOTE
    return GitStatus.SYNCED
