"""Fixtures for application-layer tests."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest

from promptlog.application.dto import PersisterConfig


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    return tmp_path / "repo"


@pytest.fixture
def config(repo_root: Path) -> PersisterConfig:
    return PersisterConfig(
        repo_path=repo_root,
        author_name="Test Author",
        author_email="author@example.com",
    )


@pytest.fixture
def fixed_clock() -> datetime:
    return datetime(2025, 8, 24, 12, 0, 0, 500000, tzinfo=UTC)
