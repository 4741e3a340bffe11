"""Text-to-dialogue API client.

Responsibilities:
- Hold the API credential, target base URL and optional shared transport.
- Create independent request builders via `text_to_dialogue`.
- Delegate validated requests to the HTTP executor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

import httpx

from .api.executor import DEFAULT_BASE_URL, DialogueExecutor
from .dialogue import DialogueDraft, DialogueInputLike, TextToDialogueBuilder
from .errors import ValidationError
from .models.datatypes import DialogueRequest

if TYPE_CHECKING:
    from .config import ClientConfig


class ElevenLabsTTDClient:
    """Read-only client for the text-to-dialogue endpoint.

    The client keeps no per-request state, so one instance can serve many
    concurrent `execute()` calls. The library imposes no request timeout:
    pass `timeout_seconds`, or an `httpx.AsyncClient` configured with one.
    """

    __slots__ = ("_api_key", "_base_url", "_executor")

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        http_client: httpx.AsyncClient | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        normalized_key = api_key.strip() if isinstance(api_key, str) else ""
        if not normalized_key:
            raise ValidationError(
                "Missing API key. Set `ELEVENLABS_API_KEY`, use `--api-key`, or store "
                "one with `elevenlabs-ttd credentials --set-api-key`.",
                failure_kind="missing_api_key",
                field="api_key",
            )
        self._api_key = normalized_key
        self._base_url = base_url.rstrip("/")
        self._executor = DialogueExecutor(
            api_key=normalized_key,
            base_url=self._base_url,
            http_client=http_client,
            timeout_seconds=timeout_seconds,
        )

    @classmethod
    def with_base_url(
        cls,
        api_key: str,
        base_url: str,
        **kwargs: object,
    ) -> ElevenLabsTTDClient:
        """Create a client targeting a custom (enterprise or test) base URL."""

        return cls(api_key, base_url=base_url, **kwargs)  # type: ignore[arg-type]

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        http_client: httpx.AsyncClient | None = None,
    ) -> ElevenLabsTTDClient:
        """Create a client from resolved runtime configuration."""

        return cls(
            config.api_key or "",
            base_url=config.base_url,
            http_client=http_client,
            timeout_seconds=config.timeout_seconds,
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    def __repr__(self) -> str:
        return f"ElevenLabsTTDClient(base_url={self._base_url!r})"

    def text_to_dialogue(
        self, inputs: Iterable[DialogueInputLike]
    ) -> TextToDialogueBuilder:
        """Start a new text-to-dialogue request builder.

        Empty inputs are accepted here and rejected when the request is built.
        """

        return TextToDialogueBuilder(self, DialogueDraft(inputs=tuple(inputs)))

    async def execute_dialogue(self, request: DialogueRequest) -> bytes:
        """Send a validated request and return the audio bytes."""

        return await self._executor.execute(request)
