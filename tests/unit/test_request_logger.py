"""Unit tests for structured request logging."""

from __future__ import annotations

import io
from typing import Any, Callable, Iterator

import pytest
from loguru import logger

from elevenlabs_ttd.client import ElevenLabsTTDClient
from elevenlabs_ttd.telemetry.logger import RequestLogger, configure_console_logging


@pytest.fixture
def log_sink() -> Iterator[io.StringIO]:
    """Route package logs into an in-memory buffer for one test."""

    sink = io.StringIO()
    handler_id = configure_console_logging(sink=sink, level="DEBUG")
    try:
        yield sink
    finally:
        logger.remove(handler_id)
        logger.disable("elevenlabs_ttd")


def test_request_logger_emits_sorted_sanitized_context(log_sink: io.StringIO) -> None:
    """Context keys are sorted and values reduced to shell-safe tokens."""

    request_logger = RequestLogger("https://api.example.test/v1/text-to-dialogue")

    request_logger.log_request_start(model="eleven_v3", inputs=2, note="two words")

    assert log_sink.getvalue().strip() == (
        "[request] level=INFO endpoint=https://api.example.test/v1/text-to-dialogue "
        "event=start inputs=2 model=eleven_v3 note=two_words"
    )


def test_request_logger_failure_includes_status_only_when_known(
    log_sink: io.StringIO,
) -> None:
    """Failure lines carry the error type and, when present, the HTTP status."""

    request_logger = RequestLogger("endpoint")

    request_logger.log_request_failure("TransportError")
    request_logger.log_request_failure("ApiError", status=404)

    lines = log_sink.getvalue().splitlines()
    assert lines == [
        "[request] level=ERROR endpoint=endpoint event=failure error_type=TransportError",
        "[request] level=ERROR endpoint=endpoint event=failure error_type=ApiError status=404",
    ]


def test_package_logs_are_silent_until_enabled() -> None:
    """Library records are disabled at import time."""

    sink = io.StringIO()
    handler_id = logger.add(sink, format="{message}")
    try:
        RequestLogger("endpoint").log_request_complete(200, 10)
    finally:
        logger.remove(handler_id)

    assert sink.getvalue() == ""


@pytest.mark.asyncio
async def test_execute_logs_lifecycle_without_secrets_or_text(
    log_sink: io.StringIO,
    make_client: Callable[..., ElevenLabsTTDClient],
    audio_handler: Any,
    audio_bytes: bytes,
) -> None:
    """Request logs must never contain the API key or dialogue text."""

    client = make_client(audio_handler, api_key="sk_secretvalue0123456789")

    await client.text_to_dialogue([("Top secret line.", "v1")]).model("eleven_v3").execute()

    output = log_sink.getvalue()
    assert "event=start" in output
    assert f"event=complete bytes={len(audio_bytes)} status=200" in output
    assert "sk_secretvalue0123456789" not in output
    assert "Top secret" not in output
