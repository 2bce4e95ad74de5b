"""Roster configuration management.

Handles persistent settings stored in ~/.roster/config.json
"""

import json
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

from roster.scanner.git import DEFAULT_GIT_TIMEOUT


# Default configuration values
DEFAULT_THEME = "textual-dark"

# Accepted JSON types per field; a value of any other type falls back to the default
FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "theme": (str,),
    "git_timeout": (int, float),
    "file_manager": (str, type(None)),
}


def _valid_value(name: str, value: object) -> bool:
    if isinstance(value, bool):
        # bool is an int subclass; no field takes a bool
        return False
    if not isinstance(value, FIELD_TYPES[name]):
        return False
    if name == "git_timeout":
        return value > 0
    return True


@dataclass
class RosterConfig:
    """Roster application configuration."""

    # Appearance
    theme: str = DEFAULT_THEME

    # Seconds allowed per git command while probing status
    git_timeout: float = DEFAULT_GIT_TIMEOUT

    # Command used instead of the platform file manager, e.g. "thunar"
    file_manager: Optional[str] = None

    @classmethod
    def get_config_path(cls) -> Path:
        """Get the path to the config file."""
        return Path.home() / ".roster" / "config.json"

    @classmethod
    def load(cls) -> "RosterConfig":
        """Load configuration from file, or return defaults if not found.

        Unknown keys and values of the wrong type are ignored, so each such
        field keeps its default.
        """
        config_path = cls.get_config_path()

        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                # Only use known fields to avoid issues with old config versions
                filtered_data = {
                    k: v for k, v in data.items()
                    if k in FIELD_TYPES and _valid_value(k, v)
                }
                return cls(**filtered_data)
            except (json.JSONDecodeError, AttributeError, TypeError, ValueError):
                # Invalid config, return defaults
                pass

        return cls()

    def save(self) -> None:
        """Save configuration to file."""
        config_path = self.get_config_path()

        # Ensure directory exists
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent=2)

    def reset(self) -> None:
        """Reset configuration to defaults."""
        self.theme = DEFAULT_THEME
        self.git_timeout = DEFAULT_GIT_TIMEOUT
        self.file_manager = None
