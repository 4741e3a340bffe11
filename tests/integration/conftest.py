"""Integration-test fixtures for deterministic CLI behavior."""

from __future__ import annotations

import pytest

_ENV_VARS = (
    "ELEVENLABS_API_KEY",
    "ELEVENLABS_BASE_URL",
    "ELEVENLABS_TIMEOUT_SECONDS",
    "ELEVENLABS_MODEL_ID",
    "ELEVENLABS_OUTPUT_FORMAT",
)


class InMemoryCredentialStore:
    """Simple in-memory credential store used for CLI tests."""

    def __init__(self, initial_api_key: str | None = None, available: bool = True) -> None:
        """Initialize the store with an optional pre-seeded API key."""

        self._api_key = initial_api_key
        self._available = available

    def is_available(self) -> bool:
        """Return availability flag expected by the CLI status command."""

        return self._available

    def get_api_key(self) -> str | None:
        """Return currently stored API key value."""

        return self._api_key

    def set_api_key(self, api_key: str) -> None:
        """Persist a normalized API key value or fail when unavailable."""

        if not self._available:
            raise RuntimeError("no keyring backend")
        self._api_key = api_key.strip()

    def clear_api_key(self) -> bool:
        """Clear API key and return whether one existed."""

        existed = self._api_key is not None
        self._api_key = None
        return existed


@pytest.fixture
def credential_store() -> InMemoryCredentialStore:
    """Provide an empty in-memory credential store."""

    return InMemoryCredentialStore()


@pytest.fixture(autouse=True)
def _isolate_cli_environment(
    monkeypatch: pytest.MonkeyPatch, credential_store: InMemoryCredentialStore
) -> None:
    """Keep CLI tests away from the real keyring and the caller's environment."""

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(
        "elevenlabs_ttd.cli.create_credential_store",
        lambda: credential_store,
    )


@pytest.fixture
def make_credential_store() -> type[InMemoryCredentialStore]:
    """Provide the in-memory store class for tests needing custom instances."""

    return InMemoryCredentialStore
