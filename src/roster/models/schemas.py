"""Data models for scanned projects."""

from dataclasses import dataclass
from enum import Enum


class GitStatus(str, Enum):
    """Git synchronization state of a project root.

    The value doubles as the label shown in the table.
    """

    NOT_VERSIONED = "—"  # No .git entry at the project root
    NO_COMMITS = "No Commits"  # HEAD does not resolve
    UNCOMMITTED = "Uncommitted"  # Working tree has changes
    NO_REMOTE = "No Remote"  # Clean, but nothing to push to
    SYNCED = "Synced"  # Clean with at least one remote

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class Project:
    """A discovered project root."""

    name: str
    marker: str
    path: str
    size: int = 0
    file_count: int = 0
    status: GitStatus = GitStatus.NOT_VERSIONED


def format_size(size: int) -> str:
    """Format a byte count for display.

    Examples:
        512 -> "512 B"
        2048 -> "2.0 KB"
        5 * 1024 * 1024 -> "5.0 MB"
    """
    if size < 1024:
        return f"{size} B"
    if size < 1024 ** 2:
        return f"{size / 1024:.1f} KB"
    if size < 1024 ** 3:
        return f"{size / 1024 ** 2:.1f} MB"
    return f"{size / 1024 ** 3:.1f} GB"
