"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temp dir so tests never read real user config."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.delenv("SLATE_LOG", raising=False)
    return config_home / "slate"


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """Empty directory standing in for the user's home."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def make_vault(home_dir: Path) -> Callable[..., Path]:
    """Build a vault under the fake home from a list of relative file paths.

    Paths ending in "/" create empty directories instead of files.
    """

    def _make(files: list[str], name: str = "Vault") -> Path:
        root = home_dir / name
        root.mkdir(parents=True, exist_ok=True)
        for rel in files:
            target = root / rel
            if rel.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(f"# {target.stem}\n")
        return root

    return _make


@pytest.fixture
def deny_stat_under() -> Callable[[str], Any]:
    """Make ``Path.exists`` raise PermissionError for paths below a named directory.

    Mirrors Python 3.12, where ``exists()`` propagates EACCES instead of
    returning False. Other paths keep the real behavior.
    """
    real_exists = Path.exists

    def _deny(directory: str) -> Any:
        def exists(self: Path, *args: object, **kwargs: object) -> bool:
            if directory in self.parts:
                raise PermissionError(13, "Permission denied", str(self))
            return real_exists(self, *args, **kwargs)

        return patch.object(Path, "exists", autospec=True, side_effect=exists)

    return _deny
