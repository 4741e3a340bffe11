"""Command-line interface for elevenlabs-ttd.

Responsibilities:
- Render dialogue scripts to audio files through the text-to-dialogue client.
- List the static voice, model and output-format catalogs.
- Manage the securely stored API key.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
import time
from typing import Annotated, Optional

from loguru import logger
import typer

from .catalog import output_formats, tts_models, voices
from .cli_rendering import (
    echo_audio_summary,
    echo_model_table,
    echo_voice_table,
    exit_with_command_error,
)
from .client import ElevenLabsTTDClient
from .config import ClientConfig, ConfigLoader, RuntimeConfigSources
from .credentials import create_credential_store
from .errors import CommandStageError
from .models.datatypes import DialogueInput, DialogueSettings, PronunciationDictionaryLocator
from .parsing import normalize_optional_string, parse_dialogue_line, parse_locator_token
from .telemetry.logger import configure_console_logging

app = typer.Typer(
    name="elevenlabs-ttd",
    no_args_is_help=True,
    help="ElevenLabs text-to-dialogue CLI.",
)


def _load_yaml_config(config_path: Path | None) -> ClientConfig:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return ClientConfig()

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc


def _resolve_client_config(
    config_path: Path | None,
    api_key: str | None,
    base_url: str | None,
    timeout_seconds: float | None,
) -> ClientConfig:
    """Resolve effective client config from file, secure storage, env and CLI."""

    base_config = _load_yaml_config(config_path)

    runtime_cli_values: dict[str, str] = {}
    for key, value in (
        ("api_key", api_key),
        ("base_url", base_url),
        ("timeout_seconds", None if timeout_seconds is None else str(timeout_seconds)),
    ):
        normalized = normalize_optional_string(value)
        if normalized is not None:
            runtime_cli_values[key] = normalized

    runtime_secure_values: dict[str, str] = {}
    if "api_key" not in runtime_cli_values:
        try:
            stored_api_key = create_credential_store().get_api_key()
        except RuntimeError as exc:
            raise CommandStageError(
                stage="credentials",
                detail=str(exc),
                hint="Pass `--api-key` or set `ELEVENLABS_API_KEY` instead.",
            ) from exc
        if stored_api_key is not None:
            runtime_secure_values["api_key"] = stored_api_key

    try:
        resolved = base_config.resolved(
            RuntimeConfigSources(
                cli=runtime_cli_values,
                secure=runtime_secure_values,
                env=os.environ,
            )
        )
        resolved.validate()
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=str(exc),
            hint="Set `ELEVENLABS_API_KEY`, pass `--api-key`, or run "
            "`elevenlabs-ttd credentials --set-api-key`.",
        ) from exc
    return resolved


def _parse_dialogue_inputs(lines: list[str]) -> list[DialogueInput]:
    """Parse `VOICE=TEXT` options into dialogue inputs, resolving catalog names."""

    inputs: list[DialogueInput] = []
    for line in lines:
        try:
            voice, text = parse_dialogue_line(line)
        except ValueError as exc:
            raise CommandStageError(
                stage="input",
                detail=str(exc),
                hint="Pass lines as `--line Rachel=\"Hello there.\"`.",
            ) from exc
        inputs.append(DialogueInput(text=text, voice_id=voices.resolve_voice_id(voice)))
    return inputs


def _parse_locators(tokens: list[str]) -> list[PronunciationDictionaryLocator]:
    """Parse `DICTIONARY_ID:VERSION_ID` options into locators."""

    locators: list[PronunciationDictionaryLocator] = []
    for token in tokens:
        try:
            dictionary_id, version_id = parse_locator_token(token)
        except ValueError as exc:
            raise CommandStageError(stage="input", detail=str(exc)) from exc
        locators.append(
            PronunciationDictionaryLocator(dictionary_id=dictionary_id, version_id=version_id)
        )
    return locators


def _default_output_path(output_format: str) -> Path:
    return Path("outputs") / f"{int(time.time())}.{output_formats.file_extension(output_format)}"


@app.command("dialogue")
def dialogue_command(
    line: Annotated[
        list[str],
        typer.Option(
            "--line",
            "-l",
            help="Dialogue line as `VOICE=TEXT`; VOICE is a catalog name or a voice id. "
            "Repeat for each line.",
        ),
    ],
    out: Annotated[
        Optional[Path],
        typer.Option("--out", "-o", help="Output audio file (default `outputs/<ts>.<ext>`)."),
    ] = None,
    model: Annotated[
        Optional[str], typer.Option("--model", help="Model id, e.g. `eleven_v3`.")
    ] = None,
    output_format: Annotated[
        Optional[str], typer.Option("--format", help="Output format, e.g. `mp3_44100_128`.")
    ] = None,
    seed: Annotated[Optional[int], typer.Option("--seed", help="Determinism seed.")] = None,
    stability: Annotated[
        Optional[float], typer.Option("--stability", help="Stability in [0.0, 1.0].")
    ] = None,
    speaker_boost: Annotated[
        Optional[bool],
        typer.Option("--speaker-boost/--no-speaker-boost", help="Toggle speaker boost."),
    ] = None,
    dictionary: Annotated[
        Optional[list[str]],
        typer.Option(
            "--dictionary",
            help="Pronunciation dictionary as `DICTIONARY_ID:VERSION_ID`. Repeatable.",
        ),
    ] = None,
    config_file: Annotated[
        Optional[Path], typer.Option("--config", help="YAML client config file.")
    ] = None,
    api_key: Annotated[
        Optional[str], typer.Option("--api-key", help="API key (overrides env/storage).")
    ] = None,
    base_url: Annotated[Optional[str], typer.Option("--base-url", help="API base URL.")] = None,
    timeout_seconds: Annotated[
        Optional[float], typer.Option("--timeout", help="Request timeout in seconds.")
    ] = None,
) -> None:
    """Render a multi-speaker dialogue to an audio file."""

    handler_id = configure_console_logging()
    try:
        config = _resolve_client_config(config_file, api_key, base_url, timeout_seconds)
        inputs = _parse_dialogue_inputs(line)

        client = ElevenLabsTTDClient.from_config(config)
        builder = client.text_to_dialogue(inputs)
        resolved_model = model or config.model_id
        if resolved_model is not None:
            builder = builder.model(resolved_model)
        resolved_format = output_format or config.output_format
        if resolved_format is not None:
            builder = builder.output_format(resolved_format)
        if stability is not None or speaker_boost is not None:
            settings = DialogueSettings()
            if stability is not None:
                settings = settings.with_stability(stability)
            if speaker_boost is not None:
                settings = settings.with_speaker_boost(speaker_boost)
            builder = builder.settings(settings)
        if dictionary:
            builder = builder.pronunciation_dictionary_locators(_parse_locators(dictionary))
        if seed is not None:
            builder = builder.seed(seed)

        audio = asyncio.run(builder.execute())

        output_path = (
            out
            if out is not None
            else _default_output_path(resolved_format or output_formats.DEFAULT_OUTPUT_FORMAT)
        )
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(audio)
    except Exception as exc:
        exit_with_command_error("dialogue", exc)
    finally:
        logger.remove(handler_id)

    echo_audio_summary(output_path, len(audio), len(inputs))


@app.command("voices")
def voices_command(
    gender: Annotated[
        Optional[str], typer.Option("--gender", help="Filter by `male` or `female`.")
    ] = None,
) -> None:
    """List premade voices."""

    normalized = normalize_optional_string(gender)
    if normalized is None:
        echo_voice_table(voices.all_voices())
        return
    normalized = normalized.lower()
    if normalized == "male":
        echo_voice_table(voices.male())
    elif normalized == "female":
        echo_voice_table(voices.female())
    else:
        exit_with_command_error(
            "voices",
            CommandStageError(
                stage="input",
                detail=f"Unknown gender filter `{gender}`.",
                hint="Use `--gender male` or `--gender female`.",
            ),
        )


@app.command("models")
def models_command(
    dialogue_only: Annotated[
        bool,
        typer.Option("--dialogue-only", help="Only list models usable for dialogue."),
    ] = False,
) -> None:
    """List known model identifiers."""

    if dialogue_only:
        echo_model_table(tts_models.dialogue_models())
        return
    echo_model_table(tts_models.all_models())


@app.command("formats")
def formats_command() -> None:
    """List supported output formats."""

    for output_format in sorted(output_formats.SUPPORTED_OUTPUT_FORMATS):
        marker = " (default)" if output_format == output_formats.DEFAULT_OUTPUT_FORMAT else ""
        typer.echo(f"{output_format}{marker}")


@app.command("credentials")
def credentials_command(
    set_api_key: Annotated[
        bool,
        typer.Option(
            "--set-api-key",
            help="Prompt for API key with hidden input and store it securely.",
        ),
    ] = False,
    clear_api_key: Annotated[
        bool,
        typer.Option(
            "--clear-api-key",
            help="Clear stored API key from secure credential storage.",
        ),
    ] = False,
) -> None:
    """Manage the securely stored API key."""

    if set_api_key and clear_api_key:
        exit_with_command_error(
            "credentials",
            CommandStageError(
                stage="credentials",
                detail="`--set-api-key` and `--clear-api-key` cannot be used together.",
                hint="Run one credentials action per command invocation.",
            ),
        )

    credential_store = create_credential_store()
    if set_api_key:
        prompted_api_key = normalize_optional_string(
            typer.prompt(
                "ElevenLabs API key (hidden input)",
                default="",
                hide_input=True,
                show_default=False,
            )
        )
        if prompted_api_key is None:
            exit_with_command_error(
                "credentials",
                CommandStageError(
                    stage="credentials",
                    detail="No API key entered.",
                    hint="Provide a non-empty API key when using `--set-api-key`.",
                ),
            )
        try:
            credential_store.set_api_key(prompted_api_key)
        except (RuntimeError, ValueError) as exc:
            exit_with_command_error(
                "credentials",
                CommandStageError(
                    stage="credentials",
                    detail=f"Failed to store API key securely: {exc}",
                    hint="Install and configure a keyring backend and retry.",
                ),
            )
        typer.echo("API key stored in secure credential storage.")
        return

    if clear_api_key:
        try:
            removed = credential_store.clear_api_key()
        except RuntimeError as exc:
            exit_with_command_error(
                "credentials",
                CommandStageError(stage="credentials", detail=str(exc)),
            )
        if removed:
            typer.echo("Stored API key cleared from secure credential storage.")
        else:
            typer.echo("No stored API key found in secure credential storage.")
        return

    availability = "available" if credential_store.is_available() else "unavailable"
    try:
        has_stored_key = credential_store.get_api_key() is not None
    except RuntimeError as exc:
        exit_with_command_error(
            "credentials",
            CommandStageError(stage="credentials", detail=str(exc)),
        )
    status = "present" if has_stored_key else "not set"
    typer.echo(f"Secure credential storage: {availability}")
    typer.echo(f"Stored ElevenLabs API key: {status}")


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
