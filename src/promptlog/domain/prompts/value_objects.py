"""Value objects for the Prompts bounded context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from promptlog.shared.types import AdvisoryStep, RelativePath


@dataclass(frozen=True)
class PromptRecord:
    """A single prompt as it is written to the repository.

    Records are append-only: each save produces a new record and a new
    file, never an edit of an existing one.
    """

    text: str
    created_at: datetime
    filename: str
    relative_path: RelativePath

    def __post_init__(self) -> None:
        if self.created_at.tzinfo is None:
            msg = "created_at must be timezone-aware"
            raise ValueError(msg)
        if not self.relative_path.endswith(self.filename):
            msg = (
                f"relative_path {self.relative_path!r} "
                f"does not end with {self.filename!r}"
            )
            raise ValueError(msg)


@dataclass(frozen=True)
class Advisory:
    """A non-fatal failure in a best-effort step."""

    step: AdvisoryStep
    message: str
