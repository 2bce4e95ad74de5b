"""Shared fixtures for Roster tests."""

import shutil
import subprocess
from pathlib import Path
from typing import Callable

import pytest

from roster.config import RosterConfig


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch) -> Path:
    """Point the config file at a temp directory so tests never touch ~/.roster."""
    config_path = tmp_path_factory.mktemp("config") / "config.json"
    monkeypatch.setattr(RosterConfig, "get_config_path", classmethod(lambda cls: config_path))
    return config_path


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[..., Path]:
    """Create a file under tmp_path, with parents, holding ``size`` bytes."""

    def _make(relative: str, size: int = 0) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"x" * size)
        return path

    return _make


requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def git(cwd: Path, *args: str) -> None:
    """Run git in ``cwd`` with a throwaway identity."""
    subprocess.run(
        [
            "git",
            "-c", "user.name=Roster Test",
            "-c", "user.email=test@example.com",
            "-c", "commit.gpgsign=false",
            "-c", "init.defaultBranch=main",
            *args,
        ],
        cwd=cwd,
        check=True,
        capture_output=True,
    )
