"""Project root markers and the directory pruning rule."""

from typing import Iterable, Optional


# Marker basename -> ecosystem tag. Order is the priority used when a
# directory holds more than one marker: ecosystem manifests win over .git,
# which only says the directory is versioned.
MARKERS: dict[str, str] = {
    "go.mod": "Go",
    "Cargo.toml": "Rust",
    "package.json": "JS",
    "pyproject.toml": "Py",
    "setup.py": "Py",
    "requirements.txt": "Py",
    "pom.xml": "Java",
    "build.gradle": "Java",
    "composer.json": "PHP",
    "Gemfile": "Ruby",
    ".git": "Git",
}

VCS_DIR = ".git"

# Directories never descended into, neither for discovery nor for sizing
BLACKLIST = frozenset({
    "node_modules",
    "venv",
    ".venv",
    ".git",
    "dist",
    "build",
    "vendor",
    "target",
    "__pycache__",
})

_PRIORITY = {name: rank for rank, name in enumerate(MARKERS)}


def classify(name: str) -> tuple[str, bool]:
    """Look up the ecosystem tag for a directory entry basename.

    Exact match only: "package.json.bak" is not a marker.
    """
    marker = MARKERS.get(name)
    if marker is None:
        return "", False
    return marker, True


def detect_marker(names: Iterable[str]) -> Optional[str]:
    """Pick the marker for a directory from its entry names.

    Returns the tag of the highest-priority marker present, or None.
    """
    found = [name for name in names if name in MARKERS]
    if not found:
        return None
    best = min(found, key=_PRIORITY.__getitem__)
    return MARKERS[best]


def is_pruned(name: str) -> bool:
    """Check whether a directory with this basename should be skipped."""
    if name in BLACKLIST:
        return True
    return name.startswith(".") and name != VCS_DIR
