"""Save Prompt use case."""

from __future__ import annotations

import logging

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

from promptlog.application.dto import PersisterConfig, SavePromptCommand, SaveResult
from promptlog.domain.prompts.repositories import VersionControl
from promptlog.domain.prompts.services import create_record, render_document
from promptlog.domain.prompts.value_objects import Advisory, PromptRecord
from promptlog.shared.constants import COMMIT_MESSAGE_TEMPLATE, DEFAULT_REMOTE_NAME
from promptlog.shared.exceptions import (
    EmptyInputError,
    GitCommandError,
    InvalidPromptError,
    PromptLogError,
    PushMisconfiguredError,
    RepositoryNotFoundError,
)
from promptlog.shared.types import AdvisoryStep, CommitSHA, ErrorKind, PushStatus

logger = logging.getLogger(__name__)

_ERROR_KINDS: dict[type[PromptLogError], ErrorKind] = {
    EmptyInputError: ErrorKind.EMPTY_INPUT,
    InvalidPromptError: ErrorKind.INVALID_INPUT,
    RepositoryNotFoundError: ErrorKind.REPOSITORY_NOT_FOUND,
    GitCommandError: ErrorKind.GIT_COMMAND_FAILED,
}


def _utc_now() -> datetime:
    return datetime.now(UTC)


# =============================================================================
# USE CASE
# =============================================================================


@dataclass
class SavePrompt:
    """Write a prompt as a Markdown file into a git repository and commit it.

    The pipeline is linear: resolve (or bootstrap) the repository, apply
    the author identity, write the file, commit it, then optionally push.
    Identity, remote registration, clone and push are best-effort; their
    failures are collected as advisories on a successful result.
    """

    config: PersisterConfig
    vcs: VersionControl
    clock: Callable[[], datetime] = _utc_now
    _advisories: list[Advisory] = field(default_factory=list[Advisory], init=False)

    def execute(self, cmd: SavePromptCommand) -> SaveResult:
        """Execute the save workflow.

        Never raises: every failure is converted into a failed ``SaveResult``.

        Args:
            cmd: The command carrying the raw prompt text.

        Returns:
            Success with the committed path, or failure with an error message.
        """
        self._advisories = []
        try:
            return self._save(cmd.text)
        except PromptLogError as e:
            kind = _ERROR_KINDS.get(type(e), ErrorKind.INTERNAL)
            logger.error("Saving prompt failed (%s): %s", kind, e)
            return SaveResult.fail(kind, str(e))
        except OSError as e:
            logger.error("Saving prompt failed on filesystem access: %s", e)
            return SaveResult.fail(ErrorKind.IO_FAILURE, str(e))
        except Exception as e:
            logger.exception("Unexpected error while saving prompt")
            return SaveResult.fail(ErrorKind.INTERNAL, str(e))

    def _save(self, text: str) -> SaveResult:
        if not text.strip():
            raise EmptyInputError
        try:
            text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidPromptError(e.reason) from e

        root = self.config.repo_path
        self._ensure_repository(root)
        self._configure_identity(root)

        record, target = self._write_record(text, root)
        logger.debug("Wrote %s", record.relative_path)

        self._commit(root, record, target)
        commit_sha = self._current_commit_id(root)
        push_status = self._push(root)

        logger.info(
            "Saved prompt %s (commit=%s, push=%s)",
            record.relative_path,
            commit_sha,
            push_status,
        )
        return SaveResult.ok(
            relative_path=record.relative_path,
            commit_sha=commit_sha,
            push_status=push_status,
            warnings=tuple(self._advisories),
        )

    # -------------------------------------------------------------------------
    # Repository bootstrap
    # -------------------------------------------------------------------------

    def _ensure_repository(self, root: Path) -> None:
        """Make sure ``root`` is a repository, cloning or initializing it."""
        if self.vcs.is_repository(root):
            return
        if not self.config.auto_init:
            raise RepositoryNotFoundError(root)

        root.mkdir(parents=True, exist_ok=True)
        remote = self.config.remote_url

        if remote and not any(root.iterdir()):
            try:
                self.vcs.clone(remote, root)
                logger.info("Cloned %s into %s", remote, root)
            except GitCommandError as e:
                self._advise(AdvisoryStep.CLONE, f"Clone failed, initializing: {e}")

        if self.vcs.is_repository(root):
            return

        self.vcs.init(root)
        logger.info("Initialized repository at %s", root)
        if remote:
            try:
                self.vcs.add_remote(root, DEFAULT_REMOTE_NAME, remote)
            except GitCommandError as e:
                self._advise(AdvisoryStep.REMOTE, str(e))

    def _configure_identity(self, root: Path) -> None:
        identity = {
            "user.name": self.config.author_name,
            "user.email": self.config.author_email,
        }
        for key, value in identity.items():
            if not value:
                continue
            try:
                self.vcs.set_config(root, key, value)
            except GitCommandError as e:
                self._advise(AdvisoryStep.IDENTITY, str(e))

    # -------------------------------------------------------------------------
    # Write / commit / push
    # -------------------------------------------------------------------------

    def _write_record(self, text: str, root: Path) -> tuple[PromptRecord, Path]:
        """Create the prompt file exclusively, taking the next free suffix.

        The file is opened with ``O_EXCL`` semantics, so a concurrent writer
        that claims the same name first pushes this save to ``-2``, ``-3``...
        instead of being overwritten.
        """
        moment = self.clock()
        sequence = 1
        while True:
            record = create_record(text, moment, self.config.prompts_folder, sequence)
            data = render_document(record).encode("utf-8")
            target = root / record.relative_path
            target.parent.mkdir(parents=True, exist_ok=True)
            try:
                fh = target.open("xb")
            except FileExistsError:
                logger.debug("%s already exists, trying next suffix", record.filename)
                sequence += 1
                continue
            try:
                with fh:
                    fh.write(data)
            except OSError:
                target.unlink(missing_ok=True)
                raise
            return record, target

    def _commit(self, root: Path, record: PromptRecord, target: Path) -> None:
        message = COMMIT_MESSAGE_TEMPLATE.format(filename=record.filename)
        try:
            self.vcs.stage_and_commit(root, record.relative_path, message)
        except GitCommandError:
            # Uncommitted files must not look persisted.
            target.unlink(missing_ok=True)
            raise

    def _current_commit_id(self, root: Path) -> CommitSHA | None:
        try:
            return self.vcs.current_commit_id(root)
        except GitCommandError as e:
            self._advise(AdvisoryStep.COMMIT_ID, str(e))
            return None

    def _push(self, root: Path) -> PushStatus:
        if not self.config.push:
            return PushStatus.DISABLED
        if not self.config.remote_url:
            self._advise(AdvisoryStep.PUSH, str(PushMisconfiguredError()))
            return PushStatus.MISCONFIGURED
        try:
            self.vcs.push(root, DEFAULT_REMOTE_NAME)
        except GitCommandError as e:
            self._advise(AdvisoryStep.PUSH, str(e))
            return PushStatus.FAILED
        return PushStatus.PUSHED

    def _advise(self, step: AdvisoryStep, message: str) -> None:
        logger.warning("Best-effort step %s failed: %s", step, message)
        self._advisories.append(Advisory(step=step, message=message))
