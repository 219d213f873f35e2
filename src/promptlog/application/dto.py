"""Application-layer command, configuration and result DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from promptlog.domain.prompts.value_objects import Advisory
from promptlog.shared.constants import DEFAULT_PROMPTS_FOLDER
from promptlog.shared.types import CommitSHA, ErrorKind, PushStatus, RelativePath

# =============================================================================
# SAVE PROMPT
# =============================================================================


@dataclass(frozen=True)
class SavePromptCommand:
    """Command to persist one prompt."""

    text: str


@dataclass(frozen=True)
class PersisterConfig:
    """Everything the save workflow needs to know about its repository.

    Built once at the call boundary and passed in; the workflow never
    reads the process environment itself.
    """

    repo_path: Path
    prompts_folder: str = DEFAULT_PROMPTS_FOLDER
    author_name: str | None = None
    author_email: str | None = None
    remote_url: str | None = None
    push: bool = False
    auto_init: bool = True


@dataclass(frozen=True)
class SaveResult:
    """Outcome of a save.

    A successful result always names a committed file. Push outcome is
    reported separately through ``push_status`` and never turns a
    committed save into a failure.
    """

    success: bool
    relative_path: RelativePath | None = None
    commit_sha: CommitSHA | None = None
    pushed: bool = False
    push_status: PushStatus = PushStatus.DISABLED
    error: str | None = None
    error_kind: ErrorKind | None = None
    warnings: tuple[Advisory, ...] = field(default_factory=tuple)

    @classmethod
    def ok(
        cls,
        relative_path: RelativePath,
        commit_sha: CommitSHA | None,
        push_status: PushStatus,
        warnings: tuple[Advisory, ...] = (),
    ) -> SaveResult:
        return cls(
            success=True,
            relative_path=relative_path,
            commit_sha=commit_sha,
            pushed=push_status is PushStatus.PUSHED,
            push_status=push_status,
            warnings=warnings,
        )

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> SaveResult:
        return cls(success=False, error=message or kind.value, error_kind=kind)
