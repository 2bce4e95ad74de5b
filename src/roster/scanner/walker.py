"""Directory tree scanner that finds and measures project roots."""

import logging
import os
from typing import Callable, Optional

from roster.models import Project
from roster.scanner.git import DEFAULT_GIT_TIMEOUT, probe_status
from roster.scanner.markers import detect_marker, is_pruned


logger = logging.getLogger(__name__)


def _log_walk_error(error: OSError) -> None:
    logger.debug("Skipping unreadable entry %s: %s", error.filename, error.strerror)


def scan_projects(
    root: str,
    timeout: float = DEFAULT_GIT_TIMEOUT,
    on_project: Optional[Callable[[Project], None]] = None,
) -> list[Project]:
    """Find every project root under ``root``.

    A directory becomes a project root when one of its entries is a known
    marker. Nothing below a project root is searched for further projects,
    and pruned directories are never entered. The root directory itself is
    always searched, whatever its name.

    Args:
        root: Directory to scan.
        timeout: Per-command timeout for the git probe.
        on_project: Called with each project as soon as it is measured.

    Returns:
        Projects in discovery order.
    """
    root = os.path.abspath(root)
    if not os.path.isdir(root):
        logger.debug("Scan root is not a directory: %s", root)
        return []

    projects: list[Project] = []
    seen: set[str] = set()

    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        marker = detect_marker([*dirnames, *filenames])
        if marker is not None:
            dirnames[:] = []
            if dirpath in seen:
                continue
            seen.add(dirpath)
            logger.debug("Found %s project at %s", marker, dirpath)
            project = analyze_project(dirpath, marker, timeout=timeout)
            projects.append(project)
            if on_project is not None:
                on_project(project)
            continue

        dirnames[:] = sorted(name for name in dirnames if not is_pruned(name))

    logger.debug("Found %d projects under %s", len(projects), root)
    return projects


def measure_tree(path: str) -> tuple[int, int]:
    """Count files and total bytes under ``path``, skipping pruned directories.

    Sizes come from ``lstat`` so symlinks count as themselves. A symlink to a
    directory is counted as one file and never followed. A file whose size
    cannot be read still counts toward the file total.

    Returns:
        (file_count, size)
    """
    file_count = 0
    size = 0
    for dirpath, dirnames, filenames in os.walk(path, onerror=_log_walk_error):
        links = [name for name in dirnames if os.path.islink(os.path.join(dirpath, name))]
        dirnames[:] = [name for name in dirnames if name not in links and not is_pruned(name)]
        for filename in [*filenames, *links]:
            file_count += 1
            try:
                size += os.lstat(os.path.join(dirpath, filename)).st_size
            except OSError as e:
                logger.debug("Cannot stat %s: %s", filename, e)
    return file_count, size


def analyze_project(path: str, marker: str, timeout: float = DEFAULT_GIT_TIMEOUT) -> Project:
    """Build the Project record for a declared root."""
    file_count, size = measure_tree(path)
    return Project(
        name=os.path.basename(path) or path,
        marker=marker,
        path=path,
        size=size,
        file_count=file_count,
        status=probe_status(path, timeout=timeout),
    )
