"""Newtypes and enums shared across layers."""

from __future__ import annotations

from enum import StrEnum

# =============================================================================
# NEWTYPES
# =============================================================================


class CommitSHA(str):
    """A git commit SHA."""


class RelativePath(str):
    """A POSIX path relative to the repository root."""


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(StrEnum):
    """Why a save failed."""

    EMPTY_INPUT = "empty_input"
    INVALID_INPUT = "invalid_input"
    REPOSITORY_NOT_FOUND = "repository_not_found"
    GIT_COMMAND_FAILED = "git_command_failed"
    IO_FAILURE = "io_failure"
    INTERNAL = "internal"


class PushStatus(StrEnum):
    """Outcome of the optional push step."""

    DISABLED = "disabled"
    PUSHED = "pushed"
    FAILED = "failed"
    MISCONFIGURED = "misconfigured"


class AdvisoryStep(StrEnum):
    """Best-effort steps whose failure degrades but does not fail a save."""

    CLONE = "clone"
    REMOTE = "remote"
    IDENTITY = "identity"
    COMMIT_ID = "commit_id"
    PUSH = "push"
