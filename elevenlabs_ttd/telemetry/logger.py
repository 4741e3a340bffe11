"""Structured request logging utilities.

Responsibilities:
- Emit concise, deterministic request-level log lines through `loguru`.
- Keep secrets and dialogue text out of every emitted line.

The package disables its `loguru` records at import time; applications opt in
with `configure_console_logging` (the CLI does) or `logger.enable`.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

_PACKAGE_NAME = "elevenlabs_ttd"


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


def configure_console_logging(sink: TextIO | None = None, level: str = "INFO") -> int:
    """Enable package logs and route them to `sink` (stderr by default).

    Returns the `loguru` handler id so callers can remove it again.
    """

    logger.enable(_PACKAGE_NAME)
    return logger.add(
        sink or sys.stderr,
        format="{message}",
        level=level,
        colorize=False,
        filter=_PACKAGE_NAME,
    )


class RequestLogger:
    """Emit deterministic lifecycle logs for one API endpoint."""

    def __init__(self, endpoint: str) -> None:
        self._endpoint = endpoint

    def _emit(self, level: str, event: str, **context: object) -> None:
        """Emit one structured request log line."""

        line = (
            f"[request] level={level} endpoint={self._endpoint} "
            f"event={event}{_format_context(context)}"
        )
        logger.log(level, line)

    def log_request_start(self, **context: object) -> None:
        """Emit a request-start event."""

        self._emit("INFO", "start", **context)

    def log_request_complete(self, status: int, byte_count: int) -> None:
        """Emit a request-complete event with response size."""

        self._emit("INFO", "complete", status=status, bytes=byte_count)

    def log_request_failure(self, error_type: str, status: int | None = None) -> None:
        """Emit a request-failure event without sensitive payload details."""

        if status is None:
            self._emit("ERROR", "failure", error_type=error_type)
            return
        self._emit("ERROR", "failure", error_type=error_type, status=status)
