"""Typed exception hierarchy for promptlog."""

from __future__ import annotations

from pathlib import Path

# =============================================================================
# BASE
# =============================================================================


class PromptLogError(Exception):
    """Base exception for all promptlog errors."""


# =============================================================================
# INPUT
# =============================================================================


class EmptyInputError(PromptLogError):
    """Prompt text is empty or whitespace only."""

    def __init__(self) -> None:
        super().__init__("Prompt is empty")


class InvalidPromptError(PromptLogError):
    """Prompt text cannot be stored as UTF-8 (e.g. lone surrogates)."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Prompt is not valid UTF-8 text: {reason}")


# =============================================================================
# REPOSITORY
# =============================================================================


class RepositoryNotFoundError(PromptLogError):
    """No git repository at the configured root and bootstrap is disabled."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"No git repository found at REPO_PATH='{path}'. "
            "Please clone or provide a local repo path."
        )


class GitCommandError(PromptLogError):
    """A git invocation exited non-zero, timed out, or could not start."""

    def __init__(self, args: list[str], returncode: int | None, stderr: str) -> None:
        self.args_ = args
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or f"exit code {returncode}"
        super().__init__(f"git {' '.join(args)} failed: {detail}")


class PushMisconfiguredError(PromptLogError):
    """Push is enabled but no remote URL is configured."""

    def __init__(self) -> None:
        super().__init__(
            "GIT_PUSH enabled but no GIT_REMOTE / PROMPT_REPO_URL configured."
        )


# =============================================================================
# CONFIGURATION
# =============================================================================


class ConfigurationError(PromptLogError):
    """Invalid or missing configuration."""
