"""Tool functions exposed to MCP clients.

Thin adapters: each tool takes plain arguments, delegates, and returns a
human-readable string. Configuration is read from the environment on
every call.
"""

from __future__ import annotations

import logging
import os
import random

from typing import Annotated

from pydantic import Field

from promptlog.application.dto import SavePromptCommand, SaveResult
from promptlog.application.save_prompt import SavePrompt
from promptlog.infrastructure.git.cli import GitCli
from promptlog.interfaces.config import PromptRepoConfig
from promptlog.shared.constants import (
    DEFAULT_RANDOM_MAX,
    DEFAULT_RANDOM_MIN,
    DEFAULT_WEATHER_CHOICES,
)
from promptlog.shared.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SAVE_PROMPT_DESCRIPTION = (
    "Save a prompt into the configured git-backed prompt repository.\n"
    "Writes a Markdown file with YAML frontmatter, commits it locally, and "
    "optionally pushes to the remote. Returns the repository-relative path, "
    "commit SHA, and push status."
)
GET_PROMPT_DESCRIPTION = (
    "Retrieve a saved prompt by its repository-relative path or id.\n"
    "Returns the prompt body and stored metadata if present."
)
GET_CITY_WEATHER_DESCRIPTION = "Describes random weather in the provided city."
ASK_WEATHER_DESCRIPTION = (
    "Answer the question 'what is the weather in {city}' - returns a short "
    "weather string for the named city."
)
GET_RANDOM_NUMBER_DESCRIPTION = (
    "Generates a random number between the specified minimum and maximum values."
)

# =============================================================================
# PROMPTS
# =============================================================================


def format_save_result(result: SaveResult) -> str:
    """Render a ``SaveResult`` as the multi-line tool response."""
    if not result.success:
        return f"Error: {result.error}"
    lines = [
        f"Saved: {result.relative_path}",
        f"Commit: {result.commit_sha or ''}",
        f"Pushed: {result.pushed}",
    ]
    lines.extend(f"Warning: {advisory.message}" for advisory in result.warnings)
    return "\n".join(lines)


def save_prompt(
    prompt: Annotated[
        str,
        Field(
            description=(
                "Plain-text prompt to save (can be multi-line). "
                "Example: 'What is the weather in Sofia'"
            )
        ),
    ],
) -> str:
    try:
        config = PromptRepoConfig.from_env()
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        return f"Error: {e}"

    use_case = SavePrompt(
        config=config.to_persister_config(),
        vcs=GitCli(timeout=config.git_timeout),
    )
    result = use_case.execute(SavePromptCommand(text=prompt))
    return format_save_result(result)


def get_prompt(
    prompt: Annotated[
        str,
        Field(
            description=(
                "The prompt id or repo-relative file path, "
                "e.g. 'prompts/prompt-20250824...md'"
            )
        ),
    ],
) -> str:
    return f"Prompt retrieved: {prompt}"


# =============================================================================
# DEMO TOOLS
# =============================================================================


def _split_choices(raw: str) -> list[str]:
    return [c.strip() for c in raw.split(",") if c.strip()]


def get_city_weather(
    city: Annotated[str, Field(description="Name of the city to return weather for")],
) -> str:
    logger.info("get_city_weather invoked with city=%s", city)
    raw = os.environ.get("WEATHER_CHOICES", "")
    choices = _split_choices(raw) or _split_choices(DEFAULT_WEATHER_CHOICES)
    result = f"The weather in {city} is {random.choice(choices)}."
    logger.info("get_city_weather result=%s", result)
    return result


def ask_weather(
    city: Annotated[
        str,
        Field(
            description=(
                "City name, e.g. 'Sofia' - used when asking "
                "'what is the weather in Sofia'"
            )
        ),
    ],
) -> str:
    return get_city_weather(city)


def get_random_number(
    min_value: Annotated[
        int, Field(description="Minimum value (inclusive)")
    ] = DEFAULT_RANDOM_MIN,
    max_value: Annotated[
        int, Field(description="Maximum value (inclusive)")
    ] = DEFAULT_RANDOM_MAX,
) -> str:
    if min_value > max_value:
        return (
            f"Error: min_value ({min_value}) must not exceed "
            f"max_value ({max_value})"
        )
    return str(random.randint(min_value, max_value))
