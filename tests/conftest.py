"""Shared pytest fixtures for the full elevenlabs-ttd test suite."""

from __future__ import annotations

import json
from typing import AsyncIterator, Callable

import httpx
import pytest
import pytest_asyncio

from elevenlabs_ttd.client import ElevenLabsTTDClient

AUDIO_BYTES = b"ID3\x04\x00fake-mp3-frames\xff\xfb\x90\x00"


class RecordingHandler:
    """`httpx.MockTransport` handler that records requests and replays one response."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]) -> None:
        """Initialize the handler with a response factory."""

        self._respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        """Record the request and return the configured response."""

        self.requests.append(request)
        return self._respond(request)

    @property
    def last_payload(self) -> dict[str, object]:
        """Return the JSON body of the most recent request."""

        return json.loads(self.requests[-1].content)


@pytest.fixture
def audio_bytes() -> bytes:
    """Provide a deterministic binary audio payload."""

    return AUDIO_BYTES


@pytest.fixture
def audio_handler(audio_bytes: bytes) -> RecordingHandler:
    """Provide a handler answering every request with `200 audio/mpeg`."""

    return RecordingHandler(
        lambda _request: httpx.Response(
            200,
            content=audio_bytes,
            headers={"content-type": "audio/mpeg"},
        )
    )


@pytest_asyncio.fixture
async def make_client() -> AsyncIterator[Callable[..., ElevenLabsTTDClient]]:
    """Provide a factory building clients backed by an `httpx.MockTransport`.

    Every HTTP client the factory opens is closed when the test finishes.
    """

    http_clients: list[httpx.AsyncClient] = []

    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
        api_key: str = "test-key",
        **kwargs: object,
    ) -> ElevenLabsTTDClient:
        """Build a client whose shared HTTP client routes to `handler`."""

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        http_clients.append(http_client)
        return ElevenLabsTTDClient(api_key, http_client=http_client, **kwargs)  # type: ignore[arg-type]

    yield _make
    for http_client in http_clients:
        await http_client.aclose()


@pytest.fixture
def make_handler() -> Callable[[Callable[[httpx.Request], httpx.Response]], RecordingHandler]:
    """Provide a factory wrapping a response function in a `RecordingHandler`."""

    return RecordingHandler
