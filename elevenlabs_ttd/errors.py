"""Typed exceptions for request validation and API client failures.

Responsibilities:
- Separate local pre-flight validation failures from remote/transport failures.
- Carry structured metadata (`failure_kind`, status, field bounds) for callers.

Key types:
- `ValidationError`: raised before any network call when inputs are invalid.
- `ClientError`: raised by request execution (`ApiError`, `TransportError`,
  `DecodeError`).
"""

from __future__ import annotations


class ElevenLabsTTDError(Exception):
    """Base class for every error raised by `elevenlabs_ttd`."""

    def __init__(self, message: str, *, failure_kind: str = "unknown") -> None:
        """Initialize error message and its diagnostic kind."""

        super().__init__(message)
        self.message = message
        self.failure_kind = failure_kind


class ValidationError(ElevenLabsTTDError, ValueError):
    """Raised when request inputs or settings are invalid before sending."""

    def __init__(
        self,
        message: str,
        *,
        failure_kind: str = "invalid_value",
        field: str | None = None,
    ) -> None:
        """Initialize a validation error scoped to an optional field name."""

        super().__init__(message, failure_kind=failure_kind)
        self.field = field


class EmptyInputsError(ValidationError):
    """Raised when a dialogue request has no inputs."""

    def __init__(self) -> None:
        super().__init__(
            "Dialogue request requires at least one input.",
            failure_kind="empty_inputs",
            field="inputs",
        )


class EmptyTextError(ValidationError):
    """Raised when a dialogue input has blank text."""

    def __init__(self, index: int | None = None) -> None:
        location = "" if index is None else f" at position {index}"
        super().__init__(
            f"Dialogue input{location} has empty `text`.",
            failure_kind="empty_text",
            field="text",
        )
        self.index = index


class EmptyVoiceIdError(ValidationError):
    """Raised when a dialogue input has a blank voice identifier."""

    def __init__(self, index: int | None = None) -> None:
        location = "" if index is None else f" at position {index}"
        super().__init__(
            f"Dialogue input{location} has empty `voice_id`.",
            failure_kind="empty_voice_id",
            field="voice_id",
        )
        self.index = index


class SettingOutOfRangeError(ValidationError):
    """Raised when a numeric setting falls outside its closed interval."""

    def __init__(
        self,
        *,
        field: str,
        value: object,
        minimum: float | int,
        maximum: float | int,
    ) -> None:
        """Initialize out-of-range metadata for the offending field."""

        super().__init__(
            f"`{field}` must be between {minimum} and {maximum}, got {value!r}.",
            failure_kind="out_of_range",
            field=field,
        )
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class IncompleteLocatorError(ValidationError):
    """Raised when a pronunciation dictionary locator lacks one of its ids."""

    def __init__(self, missing_field: str) -> None:
        super().__init__(
            "Pronunciation dictionary locator requires both `dictionary_id` and "
            f"`version_id`; `{missing_field}` is missing.",
            failure_kind="incomplete_locator",
            field=missing_field,
        )


class TooManyLocatorsError(ValidationError):
    """Raised when a request carries more locators than the API accepts."""

    def __init__(self, count: int, limit: int) -> None:
        super().__init__(
            f"At most {limit} pronunciation dictionary locators are allowed, got {count}.",
            failure_kind="too_many_locators",
            field="pronunciation_dictionary_locators",
        )
        self.count = count
        self.limit = limit


class UnsupportedOutputFormatError(ValidationError):
    """Raised when an output format is not one of the provider's formats."""

    def __init__(self, output_format: str) -> None:
        super().__init__(
            f"Unsupported output format `{output_format}`.",
            failure_kind="unsupported_output_format",
            field="output_format",
        )
        self.output_format = output_format


class ClientError(ElevenLabsTTDError, RuntimeError):
    """Raised when executing a request against the API fails."""


class ApiError(ClientError):
    """Raised when the API rejects a request with a 4xx status."""

    def __init__(
        self,
        *,
        status: int,
        message: str,
        failure_kind: str = "http_error",
    ) -> None:
        """Initialize API rejection metadata."""

        super().__init__(f"API error ({status}): {message}", failure_kind=failure_kind)
        self.status = status
        self.message = message


class AuthenticationError(ApiError):
    """Raised when the API key is missing, invalid or revoked (HTTP 401)."""

    def __init__(self, *, status: int = 401, message: str) -> None:
        super().__init__(status=status, message=message, failure_kind="invalid_api_key")


class QuotaExceededError(ApiError):
    """Raised when the account has insufficient credits for the request."""

    def __init__(self, *, status: int = 402, message: str) -> None:
        super().__init__(status=status, message=message, failure_kind="quota_exceeded")


class RateLimitError(ApiError):
    """Raised when the API throttles the caller (HTTP 429)."""

    def __init__(
        self,
        *,
        status: int = 429,
        message: str,
        retry_after: int | None = None,
    ) -> None:
        super().__init__(status=status, message=message, failure_kind="rate_limited")
        self.retry_after = retry_after


class TransportError(ClientError):
    """Raised for network failures and 5xx server responses.

    `cause` holds the underlying transport exception when there is one; for
    5xx responses it is `None` and `status_code` is set instead.
    """

    def __init__(
        self,
        message: str,
        *,
        cause: BaseException | None = None,
        status_code: int | None = None,
        failure_kind: str = "transport",
    ) -> None:
        super().__init__(message, failure_kind=failure_kind)
        self.cause = cause
        self.status_code = status_code


class DecodeError(ClientError):
    """Raised when a successful response does not carry an audio payload.

    `reason` is one of:

    - `empty_body`: a 2xx response with no body.
    - `unexpected_content_type`: a 2xx response carrying JSON or text.
    - `malformed_body`: the body could not be content-decoded (for example a
      corrupt gzip stream); `status_code` is `None` because the failure
      surfaces while the body is read.
    """

    def __init__(
        self,
        message: str,
        *,
        reason: str,
        status_code: int | None,
        content_type: str | None = None,
    ) -> None:
        super().__init__(message, failure_kind="decode")
        self.reason = reason
        self.status_code = status_code
        self.content_type = content_type


class CommandStageError(ElevenLabsTTDError, RuntimeError):
    """Raised by CLI commands when a specific command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail, failure_kind=stage)
        self.stage = stage
        self.detail = detail
        self.hint = hint
