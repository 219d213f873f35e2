"""Tests for the MCP tool functions."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from promptlog.application.dto import SaveResult
from promptlog.domain.prompts.value_objects import Advisory
from promptlog.interfaces.tools import (
    ask_weather,
    format_save_result,
    get_city_weather,
    get_prompt,
    get_random_number,
    save_prompt,
)
from promptlog.shared.types import (
    AdvisoryStep,
    CommitSHA,
    ErrorKind,
    PushStatus,
    RelativePath,
)

# =============================================================================
# Formatting
# =============================================================================


class TestFormatSaveResult:
    def test_success(self) -> None:
        result = SaveResult.ok(
            RelativePath("prompts/p.md"), CommitSHA("abc123"), PushStatus.PUSHED
        )

        assert format_save_result(result) == (
            "Saved: prompts/p.md\nCommit: abc123\nPushed: True"
        )

    def test_success_without_push(self) -> None:
        result = SaveResult.ok(
            RelativePath("notes/p.md"), CommitSHA("def"), PushStatus.DISABLED
        )

        assert format_save_result(result).endswith("Pushed: False")

    def test_warnings_are_appended(self) -> None:
        result = SaveResult.ok(
            RelativePath("prompts/p.md"),
            None,
            PushStatus.MISCONFIGURED,
            warnings=(Advisory(step=AdvisoryStep.PUSH, message="no remote"),),
        )

        assert format_save_result(result).splitlines() == [
            "Saved: prompts/p.md",
            "Commit: ",
            "Pushed: False",
            "Warning: no remote",
        ]

    def test_failure(self) -> None:
        result = SaveResult.fail(ErrorKind.EMPTY_INPUT, "Prompt is empty")

        assert format_save_result(result) == "Error: Prompt is empty"


# =============================================================================
# save_prompt / get_prompt
# =============================================================================


class TestSavePrompt:
    @patch("promptlog.interfaces.tools.SavePrompt")
    def test_reads_config_on_every_call(
        self,
        mock_use_case_cls: MagicMock,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        mock_use_case_cls.return_value.execute.return_value = SaveResult.ok(
            RelativePath("a/p.md"), CommitSHA("1"), PushStatus.DISABLED
        )
        monkeypatch.setenv("REPO_PATH", str(tmp_path / "one"))
        save_prompt("first")
        monkeypatch.setenv("REPO_PATH", str(tmp_path / "two"))
        save_prompt("second")

        configs = [c.kwargs["config"] for c in mock_use_case_cls.call_args_list]
        assert [c.repo_path for c in configs] == [tmp_path / "one", tmp_path / "two"]
        commands = [
            c.args[0] for c in mock_use_case_cls.return_value.execute.call_args_list
        ]
        assert [c.text for c in commands] == ["first", "second"]

    @patch("promptlog.interfaces.tools.SavePrompt")
    def test_returns_formatted_result(
        self, mock_use_case_cls: MagicMock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("GIT_TIMEOUT_SECONDS", raising=False)
        mock_use_case_cls.return_value.execute.return_value = SaveResult.fail(
            ErrorKind.GIT_COMMAND_FAILED, "git commit failed: boom"
        )

        assert save_prompt("text") == "Error: git commit failed: boom"

    def test_invalid_config_is_reported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GIT_TIMEOUT_SECONDS", "soon")

        output = save_prompt("text")

        assert output.startswith("Error: ")
        assert "GIT_TIMEOUT_SECONDS" in output

    def test_empty_prompt_is_rejected(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        repo = tmp_path / "repo"
        monkeypatch.setenv("REPO_PATH", str(repo))

        assert save_prompt("   ") == "Error: Prompt is empty"
        assert not repo.exists()


def test_get_prompt_echoes_identifier() -> None:
    assert get_prompt("prompts/p.md") == "Prompt retrieved: prompts/p.md"


# =============================================================================
# Demo tools
# =============================================================================


def test_weather_uses_configured_choices(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEATHER_CHOICES", "foggy")

    assert get_city_weather("Sofia") == "The weather in Sofia is foggy."
    assert ask_weather("Plovdiv") == "The weather in Plovdiv is foggy."


def test_weather_default_choices(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("WEATHER_CHOICES", raising=False)

    answer = get_city_weather("Sofia")

    assert answer.removeprefix("The weather in Sofia is ").rstrip(".") in {
        "balmy",
        "rainy",
        "stormy",
    }


@pytest.mark.parametrize("raw", ["", " , ,", ",,"])
def test_weather_blank_choices_fall_back_to_defaults(
    monkeypatch: pytest.MonkeyPatch, raw: str
) -> None:
    monkeypatch.setenv("WEATHER_CHOICES", raw)

    answer = get_city_weather("Sofia")

    assert answer.removeprefix("The weather in Sofia is ").rstrip(".") in {
        "balmy",
        "rainy",
        "stormy",
    }


def test_random_number_in_range() -> None:
    for _ in range(20):
        assert 3 <= int(get_random_number(3, 7)) <= 7


def test_random_number_single_value() -> None:
    assert get_random_number(5, 5) == "5"


def test_random_number_rejects_inverted_range() -> None:
    assert get_random_number(10, 1).startswith("Error:")
