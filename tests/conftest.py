"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """An empty directory to scaffold into."""
    d = tmp_path / "proto"
    d.mkdir()
    return d


@pytest.fixture
def git_env(tmp_path: Path, monkeypatch) -> None:
    """Isolate git from the user's config and give it an identity."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Rigid Test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "rigid@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Rigid Test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "rigid@example.com")
