"""Fixtures for prompts domain tests."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest


@pytest.fixture
def moment() -> datetime:
    return datetime(2025, 8, 24, 9, 5, 7, 123456, tzinfo=UTC)
