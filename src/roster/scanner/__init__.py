"""Project discovery for Roster."""

from .git import DEFAULT_GIT_TIMEOUT, GitTimeoutError, probe_status, run_git
from .markers import BLACKLIST, MARKERS, classify, detect_marker, is_pruned
from .walker import analyze_project, measure_tree, scan_projects

__all__ = [
    "BLACKLIST",
    "DEFAULT_GIT_TIMEOUT",
    "GitTimeoutError",
    "MARKERS",
    "analyze_project",
    "classify",
    "detect_marker",
    "is_pruned",
    "measure_tree",
    "probe_status",
    "run_git",
    "scan_projects",
]
