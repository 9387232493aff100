"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config never leaks in."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Create files under a fresh output root.

    Returns a factory taking root-relative file paths. Each file is
    created with its own path as content. The factory returns the root.
    """

    def _make(*files: str) -> Path:
        root = tmp_path / "out"
        root.mkdir(exist_ok=True)
        for rel in files:
            target = root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(rel)
        return root

    return _make
