"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

from pathlib import Path

import pytest
import typer

from elevenlabs_ttd.catalog import tts_models, voices
from elevenlabs_ttd.cli_rendering import (
    echo_audio_summary,
    echo_model_table,
    echo_voice_table,
    exit_with_command_error,
)
from elevenlabs_ttd.errors import (
    AuthenticationError,
    CommandStageError,
    RateLimitError,
    TransportError,
)


def test_exit_with_command_error_renders_stage_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print stage diagnostics and hint before exiting with code 1."""

    error = CommandStageError(
        stage="config",
        detail="Config file not found: `missing.yaml`.",
        hint="Provide an existing path via `--config <path.yaml>`.",
    )

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("dialogue", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "dialogue failed at stage `config`" in captured.err
    assert "Hint: Provide an existing path via `--config <path.yaml>`." in captured.err


def test_exit_with_command_error_renders_non_stage_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print fallback exception text for non-stage failures."""

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("dialogue", RuntimeError("unexpected failure"))

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "dialogue failed: unexpected failure" in captured.err
    assert "Hint:" not in captured.err


@pytest.mark.parametrize(
    ("error", "hint"),
    [
        (AuthenticationError(message="invalid key"), "ELEVENLABS_API_KEY"),
        (RateLimitError(message="slow down", retry_after=12), "Retry in 12s."),
        (RateLimitError(message="slow down"), "Wait a moment and retry."),
        (TransportError("connection reset"), "--timeout"),
    ],
)
def test_exit_with_command_error_adds_hints_for_client_errors(
    capsys: pytest.CaptureFixture[str], error: Exception, hint: str
) -> None:
    """Well-known client failures should come with an actionable hint."""

    with pytest.raises(typer.Exit):
        exit_with_command_error("dialogue", error)

    captured = capsys.readouterr()
    assert "Hint:" in captured.err
    assert hint in captured.err


def test_echo_voice_table_sorts_by_name(capsys: pytest.CaptureFixture[str]) -> None:
    """Voice rows should be sorted by display name."""

    echo_voice_table([voices.RACHEL, voices.ANTONI])

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Antoni")
    assert "21m00Tcm4TlvDq8ikWAM" in lines[1]
    assert lines[1].endswith("female")


def test_echo_model_table_marks_dialogue_models(capsys: pytest.CaptureFixture[str]) -> None:
    """Dialogue-capable models should be marked in the listing."""

    echo_model_table([tts_models.ELEVEN_V3])

    output = capsys.readouterr().out
    assert "eleven_v3" in output
    assert "dialogue" in output


def test_echo_audio_summary_reports_counts_and_path(
    capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    """Summary should mention line count, byte count and the output path."""

    output_path = tmp_path / "dialogue.mp3"
    echo_audio_summary(output_path, byte_count=1024, line_count=3)

    output = capsys.readouterr().out
    assert "Dialogue lines: 3" in output
    assert "Audio bytes: 1024" in output
    assert f"Audio saved to {output_path}" in output
