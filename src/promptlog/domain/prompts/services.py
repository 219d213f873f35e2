"""Domain services for the Prompts bounded context.

Pure functions: slug derivation, filename synthesis and the Markdown
frontmatter document format. Nothing here touches the filesystem.
"""

from __future__ import annotations

import re

from datetime import UTC, datetime
from posixpath import join as posix_join
from typing import Any

import yaml

from promptlog.domain.prompts.value_objects import PromptRecord
from promptlog.shared.constants import (
    FILENAME_PREFIX,
    FILENAME_SUFFIX,
    SLUG_MAX_LENGTH,
)
from promptlog.shared.types import RelativePath

_WHITESPACE_RE = re.compile(r"\s+")
_UNSAFE_RE = re.compile(r"[^a-z0-9_-]")
_HYPHEN_RUN_RE = re.compile(r"-{2,}")

FRONTMATTER_DELIMITER = "---"

# =============================================================================
# SLUG / FILENAME
# =============================================================================


def slugify(text: str, max_length: int = SLUG_MAX_LENGTH) -> str:
    """Derive a filename-safe slug from the first non-blank line of ``text``.

    Returns an empty string when nothing safe survives (e.g. ``"!!!"``).
    """
    first_line = next((line for line in text.splitlines() if line.strip()), "")
    slug = first_line.strip().lower()
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _UNSAFE_RE.sub("", slug)
    slug = _HYPHEN_RUN_RE.sub("-", slug)
    slug = slug.strip("-")
    return slug[:max_length].rstrip("-")


def format_timestamp(moment: datetime) -> str:
    """Format ``moment`` as ``yyyyMMdd_HHmmssfff`` in UTC."""
    utc = moment.astimezone(UTC)
    return f"{utc:%Y%m%d_%H%M%S}{utc.microsecond // 1000:03d}"


def format_created_at(moment: datetime) -> str:
    """Format ``moment`` as an ISO-8601 UTC timestamp with a ``Z`` suffix."""
    return moment.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def build_filename(moment: datetime, slug: str, sequence: int = 1) -> str:
    """Compose ``prompt-<timestamp>[-<slug>][-<sequence>].md``.

    ``sequence`` greater than one disambiguates a filename that is
    already taken.
    """
    parts = [FILENAME_PREFIX, format_timestamp(moment)]
    if slug:
        parts.append(slug)
    if sequence > 1:
        parts.append(str(sequence))
    return "-".join(parts) + FILENAME_SUFFIX


def create_record(
    text: str,
    moment: datetime,
    prompts_folder: str,
    sequence: int = 1,
) -> PromptRecord:
    """Build the record for ``text`` saved at ``moment``."""
    filename = build_filename(moment, slugify(text), sequence)
    folder = prompts_folder.replace("\\", "/").strip("/")
    return PromptRecord(
        text=text,
        created_at=moment.astimezone(UTC),
        filename=filename,
        relative_path=RelativePath(posix_join(folder, filename)),
    )


# =============================================================================
# DOCUMENT FORMAT
# =============================================================================


def render_document(record: PromptRecord) -> str:
    """Render the Markdown file body: frontmatter, blank line, prompt text."""
    return (
        f"{FRONTMATTER_DELIMITER}\n"
        f"created_at: {format_created_at(record.created_at)}\n"
        f"{FRONTMATTER_DELIMITER}\n"
        "\n"
        f"{record.text}\n"
    )


def parse_document(content: str) -> tuple[dict[str, Any], str]:
    """Split a rendered document into its frontmatter fields and body.

    The frontmatter block is loaded with ``yaml.safe_load``, so
    ``created_at`` comes back as a timezone-aware ``datetime``.

    Raises:
        ValueError: If ``content`` has no frontmatter block or the block is
            not a YAML mapping.
    """
    lines = content.split("\n")
    if not lines or lines[0] != FRONTMATTER_DELIMITER:
        msg = "Document does not start with a frontmatter block"
        raise ValueError(msg)
    try:
        end = lines.index(FRONTMATTER_DELIMITER, 1)
    except ValueError:
        msg = "Unterminated frontmatter block"
        raise ValueError(msg) from None

    try:
        fields = yaml.safe_load("\n".join(lines[1:end])) or {}
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in frontmatter: {e}"
        raise ValueError(msg) from e
    if not isinstance(fields, dict):
        msg = "Frontmatter is not a mapping"
        raise ValueError(msg)

    body_lines = lines[end + 1 :]
    if body_lines and body_lines[0] == "":
        body_lines = body_lines[1:]
    body = "\n".join(body_lines)
    if body.endswith("\n"):
        body = body[:-1]
    return fields, body
