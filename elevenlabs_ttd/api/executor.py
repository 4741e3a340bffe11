"""HTTP execution of text-to-dialogue requests.

Responsibilities:
- POST serialized dialogue requests to the provider over `httpx`.
- Return audio bytes verbatim on success.
- Map HTTP, transport and payload failures to typed client errors.
"""

from __future__ import annotations

import json
import re
from typing import Any

import httpx

from ..errors import (
    ApiError,
    AuthenticationError,
    ClientError,
    DecodeError,
    QuotaExceededError,
    RateLimitError,
    TransportError,
)
from ..models.datatypes import DialogueRequest
from ..telemetry.logger import RequestLogger

DEFAULT_BASE_URL = "https://api.elevenlabs.io/v1"
TEXT_TO_DIALOGUE_PATH = "/text-to-dialogue"

_NON_AUDIO_CONTENT_TYPES = ("application/json", "text/")


class DialogueExecutor:
    """Send one validated `DialogueRequest` and interpret the response.

    When `http_client` is given it is used as-is and never closed here, so
    its timeouts and connection pool belong to the caller. Otherwise a
    short-lived `httpx.AsyncClient` is opened per call with `timeout_seconds`
    (`None` means no timeout).
    """

    _MAX_PROVIDER_MESSAGE_CHARS = 180

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        http_client: httpx.AsyncClient | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._http_client = http_client
        self.timeout_seconds = timeout_seconds
        self._logger = RequestLogger("text-to-dialogue")

    def __repr__(self) -> str:
        return f"DialogueExecutor(base_url={self.base_url!r})"

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}{TEXT_TO_DIALOGUE_PATH}"

    def _headers(self) -> dict[str, str]:
        return {
            "xi-api-key": self._api_key,
            "Content-Type": "application/json",
            "Accept": "audio/*",
        }

    async def execute(self, request: DialogueRequest) -> bytes:
        """Execute the request and return the raw audio payload."""

        self._logger.log_request_start(
            inputs=len(request.inputs),
            model=request.model_id or "default",
            output_format=request.output_format or "default",
        )
        try:
            response = await self._send(request)
            audio = self._interpret_response(response)
        except ClientError as exc:
            self._logger.log_request_failure(
                type(exc).__name__, status=_status_of(exc)
            )
            raise
        self._logger.log_request_complete(response.status_code, len(audio))
        return audio

    async def _send(self, request: DialogueRequest) -> httpx.Response:
        """Issue the POST and map network and body-decoding failures to typed errors."""

        try:
            if self._http_client is not None:
                return await self._post(self._http_client, request)
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                return await self._post(client, request)
        except httpx.TimeoutException as exc:
            raise TransportError(
                "Text-to-dialogue request timed out.",
                cause=exc,
                failure_kind="timeout",
            ) from exc
        except httpx.TransportError as exc:
            raise TransportError(
                f"Text-to-dialogue request transport error: {self._short_message(str(exc))}",
                cause=exc,
            ) from exc
        except httpx.DecodingError as exc:
            raise DecodeError(
                f"Text-to-dialogue response body could not be decoded: "
                f"{self._short_message(str(exc))}",
                reason="malformed_body",
                status_code=None,
            ) from exc
        except httpx.RequestError as exc:
            raise TransportError(
                f"Text-to-dialogue request failed: {self._short_message(str(exc))}",
                cause=exc,
            ) from exc

    async def _post(self, client: httpx.AsyncClient, request: DialogueRequest) -> httpx.Response:
        return await client.post(
            self.endpoint,
            params=request.query_params(),
            headers=self._headers(),
            json=request.to_payload(),
        )

    def _interpret_response(self, response: httpx.Response) -> bytes:
        """Return body bytes for 2xx responses or raise the mapped error."""

        status_code = response.status_code
        if response.is_success:
            return self._audio_payload(response)
        if 400 <= status_code < 500:
            raise self._api_error(response)
        if status_code < 500:
            raise TransportError(
                f"Text-to-dialogue returned unexpected HTTP {status_code}.",
                status_code=status_code,
                failure_kind="unexpected_status",
            )
        raise TransportError(
            f"Text-to-dialogue server error (HTTP {status_code}): "
            f"{self._response_message(response)}",
            status_code=status_code,
            failure_kind="server_error",
        )

    @staticmethod
    def _audio_payload(response: httpx.Response) -> bytes:
        """Validate that a successful response carries a binary audio body."""

        content_type = response.headers.get("content-type")
        body = response.content
        if not body:
            raise DecodeError(
                "Text-to-dialogue response body is empty.",
                reason="empty_body",
                status_code=response.status_code,
                content_type=content_type,
            )
        normalized_type = (content_type or "").split(";", 1)[0].strip().lower()
        if normalized_type.startswith(_NON_AUDIO_CONTENT_TYPES):
            raise DecodeError(
                f"Text-to-dialogue response is `{normalized_type}`, expected audio.",
                reason="unexpected_content_type",
                status_code=response.status_code,
                content_type=content_type,
            )
        return bytes(body)

    @classmethod
    def _api_error(cls, response: httpx.Response) -> ApiError:
        """Convert a 4xx response into the matching `ApiError` subclass."""

        status_code = response.status_code
        message = cls._response_message(response)
        if status_code == 401:
            return AuthenticationError(status=status_code, message=message)
        if status_code == 402:
            return QuotaExceededError(status=status_code, message=message)
        if status_code == 429:
            if "quota" in message.lower():
                return QuotaExceededError(status=status_code, message=message)
            return RateLimitError(
                status=status_code,
                message=message,
                retry_after=_parse_retry_after(response.headers.get("retry-after")),
            )
        return ApiError(status=status_code, message=message)

    @classmethod
    def _response_message(cls, response: httpx.Response) -> str:
        """Extract a concise provider message, falling back to the reason phrase."""

        body = response.content.decode("utf-8", errors="replace").strip()
        message = cls._extract_provider_message(body)
        if message:
            return message
        return response.reason_phrase or f"HTTP {response.status_code}"

    @classmethod
    def _extract_provider_message(cls, body: str) -> str:
        """Pull the human-readable message out of a JSON or plain-text error body."""

        if not body:
            return ""
        try:
            payload = json.loads(body)
        except json.JSONDecodeError:
            return cls._short_message(cls._redact_sensitive_tokens(body))

        message = _find_message(payload)
        if message is None:
            message = body
        return cls._short_message(cls._redact_sensitive_tokens(message))

    @classmethod
    def _redact_sensitive_tokens(cls, text: str) -> str:
        """Redact API-key-like tokens from provider error content."""

        redacted = re.sub(r"\bsk_[A-Za-z0-9]{16,}\b", "[redacted-key]", text)
        redacted = re.sub(
            r"(?i)xi-api-key[\"']?\s*[:=]\s*[\"']?[A-Za-z0-9_-]{8,}",
            "xi-api-key: [redacted-key]",
            redacted,
        )
        return redacted

    @classmethod
    def _short_message(cls, text: str) -> str:
        """Normalize and cap user-facing provider message length."""

        compact = " ".join(text.split())
        if len(compact) <= cls._MAX_PROVIDER_MESSAGE_CHARS:
            return compact
        return f"{compact[: cls._MAX_PROVIDER_MESSAGE_CHARS - 1]}..."


def _find_message(payload: Any) -> str | None:
    """Return the first non-blank message in the provider's error shapes.

    Handles `{"detail": {"message": ...}}`, `{"detail": "..."}`,
    `{"message": ...}` and `{"error": {"message": ...}}`.
    """

    if not isinstance(payload, dict):
        return None
    for key in ("detail", "error"):
        nested = payload.get(key)
        if isinstance(nested, str) and nested.strip():
            return nested.strip()
        if isinstance(nested, dict):
            found = _find_message(nested)
            if found is not None:
                return found
    value = payload.get("message")
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _parse_retry_after(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        seconds = int(value.strip())
    except ValueError:
        return None
    return seconds if seconds >= 0 else None


def _status_of(exc: ClientError) -> int | None:
    if isinstance(exc, ApiError):
        return exc.status
    if isinstance(exc, (TransportError, DecodeError)):
        return exc.status_code
    return None
