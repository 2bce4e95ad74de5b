"""Data models for Roster."""

from .schemas import GitStatus, Project, format_size

__all__ = [
    "GitStatus",
    "Project",
    "format_size",
]
