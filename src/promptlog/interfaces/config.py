"""Configuration assembly from environment variables."""

from __future__ import annotations

import os

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from promptlog.application.dto import PersisterConfig
from promptlog.shared.constants import (
    DEFAULT_GIT_TIMEOUT_SECONDS,
    DEFAULT_PROMPTS_FOLDER,
    DEFAULT_REPO_DIR,
    FALSY_VALUES,
    TRUTHY_VALUES,
)
from promptlog.shared.exceptions import ConfigurationError


def _optional(environ: Mapping[str, str], name: str) -> str | None:
    """Return the stripped value of ``name``, or None if unset or blank."""
    value = environ.get(name, "").strip()
    return value or None


def _parse_flag(raw: str | None, default: bool) -> bool:
    """Parse a ``true``/``1`` style flag; anything unrecognised is the default."""
    if raw is None:
        return default
    lowered = raw.lower()
    if lowered in TRUTHY_VALUES:
        return True
    if lowered in FALSY_VALUES:
        return False
    return default


def _parse_positive_int(name: str, raw: str) -> int:
    """Parse a positive integer env var or raise with a clear message."""
    try:
        value = int(raw)
    except ValueError:
        msg = f"Invalid integer for {name}: {raw!r}"
        raise ConfigurationError(msg) from None
    if value <= 0:
        msg = f"{name} must be positive, got {value}"
        raise ConfigurationError(msg)
    return value


@dataclass(frozen=True)
class PromptRepoConfig:
    """Typed configuration for the prompt repository."""

    repo_path: Path
    prompts_folder: str = DEFAULT_PROMPTS_FOLDER
    author_name: str | None = None
    author_email: str | None = None
    remote_url: str | None = None
    push: bool = False
    auto_init: bool = True
    git_timeout: int = DEFAULT_GIT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> PromptRepoConfig:
        """Build config from environment variables.

        Called on every tool invocation so that changes apply without a
        restart.

        Optional (with defaults):
            REPO_PATH, PROMPTS_FOLDER, GIT_AUTHOR_NAME, GIT_AUTHOR_EMAIL,
            GIT_REMOTE / PROMPT_REPO_URL, GIT_PUSH, PROMPTLOG_AUTO_INIT,
            GIT_TIMEOUT_SECONDS

        Raises:
            ConfigurationError: If a numeric value does not parse.
        """
        env = os.environ if environ is None else environ

        raw_repo = _optional(env, "REPO_PATH")
        repo_path = Path(raw_repo) if raw_repo else Path.cwd() / DEFAULT_REPO_DIR

        raw_timeout = _optional(env, "GIT_TIMEOUT_SECONDS")
        git_timeout = (
            _parse_positive_int("GIT_TIMEOUT_SECONDS", raw_timeout)
            if raw_timeout
            else DEFAULT_GIT_TIMEOUT_SECONDS
        )

        remote_url = _optional(env, "GIT_REMOTE") or _optional(env, "PROMPT_REPO_URL")

        return cls(
            repo_path=repo_path.expanduser().absolute(),
            prompts_folder=_optional(env, "PROMPTS_FOLDER") or DEFAULT_PROMPTS_FOLDER,
            author_name=_optional(env, "GIT_AUTHOR_NAME"),
            author_email=_optional(env, "GIT_AUTHOR_EMAIL"),
            remote_url=remote_url,
            push=_parse_flag(_optional(env, "GIT_PUSH"), default=False),
            auto_init=_parse_flag(_optional(env, "PROMPTLOG_AUTO_INIT"), default=True),
            git_timeout=git_timeout,
        )

    def to_persister_config(self) -> PersisterConfig:
        return PersisterConfig(
            repo_path=self.repo_path,
            prompts_folder=self.prompts_folder,
            author_name=self.author_name,
            author_email=self.author_email,
            remote_url=self.remote_url,
            push=self.push,
            auto_init=self.auto_init,
        )
