"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and catalog listings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, NoReturn

import typer

from .catalog.tts_models import StaticModel
from .catalog.voices import StaticVoice
from .errors import (
    AuthenticationError,
    CommandStageError,
    QuotaExceededError,
    RateLimitError,
    TransportError,
)


def _hint_for(exc: Exception) -> str | None:
    """Return an actionable hint for well-known failures."""

    if isinstance(exc, AuthenticationError):
        return "Check `ELEVENLABS_API_KEY`, `--api-key`, or the stored credential."
    if isinstance(exc, QuotaExceededError):
        return "Top up account credits or shorten the dialogue."
    if isinstance(exc, RateLimitError):
        if exc.retry_after is not None:
            return f"Retry in {exc.retry_after}s."
        return "Wait a moment and retry."
    if isinstance(exc, TransportError):
        return "Check network connectivity, or raise `--timeout`."
    return None


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        hint = exc.hint
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
        hint = _hint_for(exc)
    if hint:
        typer.secho(f"Hint: {hint}", fg=typer.colors.YELLOW, err=True)
    raise typer.Exit(code=1) from exc


def echo_voice_table(voices: Iterable[StaticVoice]) -> None:
    """Print `name voice_id gender` rows sorted by name."""

    for voice in sorted(voices, key=lambda item: item.name):
        typer.echo(f"{voice.name:<10} {voice.voice_id}  {voice.gender}")


def echo_model_table(models: Iterable[StaticModel]) -> None:
    """Print model rows, marking dialogue-capable models."""

    for model in models:
        marker = "dialogue" if model.supports_dialogue else "-"
        typer.echo(f"{model.model_id:<24} {marker:<9} {model.name}")


def echo_audio_summary(output_path: Path, byte_count: int, line_count: int) -> None:
    """Print a short summary of a written dialogue audio file."""

    typer.echo(f"Dialogue lines: {line_count}")
    typer.echo(f"Audio bytes: {byte_count}")
    typer.echo(f"Audio saved to {output_path}")
