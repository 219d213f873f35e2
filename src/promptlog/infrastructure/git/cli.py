"""Subprocess-backed git adapter.

Each operation is one blocking ``git`` child process with a bounded wait.
Nothing is retried; a timeout is reported the same way as a non-zero exit.
"""

from __future__ import annotations

import logging
import subprocess

from dataclasses import dataclass
from pathlib import Path

from promptlog.shared.constants import (
    DEFAULT_GIT_TIMEOUT_SECONDS,
    GIT_METADATA_DIR,
    NETWORK_GIT_TIMEOUT_SECONDS,
)
from promptlog.shared.exceptions import GitCommandError
from promptlog.shared.types import CommitSHA, RelativePath

logger = logging.getLogger(__name__)


@dataclass
class GitCli:
    """Implements VersionControl by invoking the ``git`` executable."""

    executable: str = "git"
    timeout: float = DEFAULT_GIT_TIMEOUT_SECONDS
    network_timeout: float = NETWORK_GIT_TIMEOUT_SECONDS

    def is_repository(self, root: Path) -> bool:
        """Return True if ``root`` contains a ``.git`` entry.

        Worktrees and submodules use a ``.git`` file instead of a
        directory, so any entry counts.
        """
        return (root / GIT_METADATA_DIR).exists()

    def init(self, root: Path) -> None:
        self._run(["init"], cwd=root)

    def clone(self, remote_url: str, root: Path) -> None:
        self._run(
            ["clone", remote_url, str(root)],
            cwd=root.parent,
            timeout=self.network_timeout,
        )

    def add_remote(self, root: Path, name: str, url: str) -> None:
        self._run(["remote", "add", name, url], cwd=root)

    def set_config(self, root: Path, key: str, value: str) -> None:
        self._run(["config", key, value], cwd=root)

    def stage_and_commit(self, root: Path, path: RelativePath, message: str) -> None:
        """Stage ``path`` and commit only that path.

        If the commit fails the path is removed from the index again so a
        later save does not pick it up.
        """
        self._run(["add", "--", path], cwd=root)
        try:
            self._run(["commit", "-m", message, "--", path], cwd=root)
        except GitCommandError:
            self._unstage(root, path)
            raise

    def current_commit_id(self, root: Path) -> CommitSHA:
        return CommitSHA(self._run(["rev-parse", "HEAD"], cwd=root).strip())

    def push(self, root: Path, remote: str) -> None:
        self._run(["push", remote, "HEAD"], cwd=root, timeout=self.network_timeout)

    def _unstage(self, root: Path, path: RelativePath) -> None:
        try:
            self._run(
                ["rm", "--cached", "--quiet", "--ignore-unmatch", "--", path],
                cwd=root,
            )
        except GitCommandError as e:
            logger.warning("Could not unstage %s: %s", path, e)

    def _run(
        self,
        args: list[str],
        cwd: Path,
        timeout: float | None = None,
    ) -> str:
        """Run ``git <args>`` in ``cwd`` and return its stdout.

        Raises:
            GitCommandError: On non-zero exit, timeout, or missing executable.
        """
        effective_timeout = timeout if timeout is not None else self.timeout
        logger.debug("git %s (cwd=%s)", " ".join(args), cwd)
        try:
            completed = subprocess.run(
                [self.executable, *args],
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=effective_timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            msg = f"timed out after {effective_timeout}s"
            raise GitCommandError(args, None, msg) from None
        except FileNotFoundError as e:
            raise GitCommandError(args, None, str(e)) from e

        if completed.returncode != 0:
            raise GitCommandError(
                args,
                completed.returncode,
                completed.stderr or completed.stdout,
            )
        return completed.stdout
