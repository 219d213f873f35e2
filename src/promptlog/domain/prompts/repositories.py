"""Version-control port used by the prompt persistence workflow."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from promptlog.shared.types import CommitSHA, RelativePath


class VersionControl(Protocol):
    """Narrow capability set over a version-control tool.

    Every method raises ``GitCommandError`` on failure.
    """

    def is_repository(self, root: Path) -> bool:
        """Return True if ``root`` holds version-control metadata."""
        ...

    def init(self, root: Path) -> None:
        """Initialize a new repository in place."""
        ...

    def clone(self, remote_url: str, root: Path) -> None:
        """Clone ``remote_url`` into ``root``."""
        ...

    def add_remote(self, root: Path, name: str, url: str) -> None:
        """Register ``url`` as remote ``name``."""
        ...

    def set_config(self, root: Path, key: str, value: str) -> None:
        """Set a repository-local configuration value."""
        ...

    def stage_and_commit(self, root: Path, path: RelativePath, message: str) -> None:
        """Stage exactly ``path`` and commit it with ``message``."""
        ...

    def current_commit_id(self, root: Path) -> CommitSHA:
        """Return the commit SHA that HEAD points to."""
        ...

    def push(self, root: Path, remote: str) -> None:
        """Push HEAD to ``remote``."""
        ...
