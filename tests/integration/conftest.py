"""Shared fixtures for integration tests that drive the real git binary."""

from __future__ import annotations

import subprocess

from collections.abc import Callable
from pathlib import Path

import pytest

from promptlog.application.dto import PersisterConfig


@pytest.fixture(autouse=True)
def isolated_git(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep user and system git configuration out of the tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for name in (
        "GIT_DIR",
        "GIT_WORK_TREE",
        "GIT_INDEX_FILE",
        "GIT_AUTHOR_NAME",
        "GIT_AUTHOR_EMAIL",
        "GIT_COMMITTER_NAME",
        "GIT_COMMITTER_EMAIL",
        "GIT_CONFIG_GLOBAL",
        "XDG_CONFIG_HOME",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    return tmp_path / "prompt-repo"


@pytest.fixture
def config(repo_root: Path) -> PersisterConfig:
    return PersisterConfig(
        repo_path=repo_root,
        author_name="Prompt Tester",
        author_email="tester@example.com",
    )


def git(cwd: Path, *args: str) -> str:
    """Run a git command for assertions and return stripped stdout."""
    completed = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return completed.stdout.strip()


@pytest.fixture
def run_git() -> Callable[..., str]:
    return git
