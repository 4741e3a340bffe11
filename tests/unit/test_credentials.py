"""Unit tests for keyring-backed API key storage."""

from __future__ import annotations

import contextlib
from typing import Iterator

import keyring
import pytest
from keyring.backend import KeyringBackend
from keyring.backends import fail as keyring_fail_backend
from keyring.errors import KeyringLocked, PasswordDeleteError

from elevenlabs_ttd.credentials import (
    KEYRING_ACCOUNT,
    KEYRING_SERVICE,
    KeyringCredentialStore,
    create_credential_store,
)


class MemoryKeyring(KeyringBackend):
    """Keyring backend holding passwords in a dictionary."""

    priority = 1  # type: ignore[assignment]

    def __init__(self) -> None:
        super().__init__()
        self.passwords: dict[tuple[str, str], str] = {}

    def get_password(self, service: str, username: str) -> str | None:
        return self.passwords.get((service, username))

    def set_password(self, service: str, username: str, password: str) -> None:
        self.passwords[(service, username)] = password

    def delete_password(self, service: str, username: str) -> None:
        if self.passwords.pop((service, username), None) is None:
            raise PasswordDeleteError(username)


class LockedKeyring(MemoryKeyring):
    """Backend whose vault refuses every read."""

    def get_password(self, service: str, username: str) -> str | None:
        raise KeyringLocked("vault is locked")


@contextlib.contextmanager
def _use_backend(backend: KeyringBackend) -> Iterator[KeyringBackend]:
    previous = keyring.get_keyring()
    keyring.set_keyring(backend)
    try:
        yield backend
    finally:
        keyring.set_keyring(previous)


@pytest.fixture
def memory_keyring() -> Iterator[MemoryKeyring]:
    """Install an in-memory keyring backend for one test."""

    with _use_backend(MemoryKeyring()) as backend:
        yield backend


@pytest.fixture
def fail_keyring() -> Iterator[KeyringBackend]:
    """Install keyring's fail backend, as found on headless hosts."""

    with _use_backend(keyring_fail_backend.Keyring()) as backend:
        yield backend


def test_store_writes_under_project_service_and_account(memory_keyring: MemoryKeyring) -> None:
    """The key is stored trimmed under `elevenlabs-ttd`/`elevenlabs_api_key`."""

    store = create_credential_store()

    store.set_api_key("  sk_abc123  ")

    assert (KEYRING_SERVICE, KEYRING_ACCOUNT) == ("elevenlabs-ttd", "elevenlabs_api_key")
    assert memory_keyring.passwords == {("elevenlabs-ttd", "elevenlabs_api_key"): "sk_abc123"}
    assert store.get_api_key() == "sk_abc123"


def test_store_clear_reports_whether_a_key_existed(memory_keyring: MemoryKeyring) -> None:
    """Clearing twice removes the key once and then reports nothing to remove."""

    store = KeyringCredentialStore()
    store.set_api_key("sk_abc123")

    assert store.clear_api_key() is True
    assert store.clear_api_key() is False
    assert store.get_api_key() is None


def test_store_ignores_blank_stored_values_and_rejects_blank_input(
    memory_keyring: MemoryKeyring,
) -> None:
    """Whitespace-only keys are never treated as credentials."""

    memory_keyring.set_password(KEYRING_SERVICE, KEYRING_ACCOUNT, "   ")
    store = KeyringCredentialStore()

    assert store.get_api_key() is None
    with pytest.raises(ValueError, match="non-empty"):
        store.set_api_key("   ")


def test_store_accounts_are_isolated(memory_keyring: MemoryKeyring) -> None:
    """Stores with different account names do not see each other's keys."""

    KeyringCredentialStore(account_name="staging").set_api_key("staging-key")

    assert KeyringCredentialStore().get_api_key() is None
    assert KeyringCredentialStore(account_name="staging").get_api_key() == "staging-key"


@pytest.mark.usefixtures("fail_keyring")
def test_store_is_unavailable_on_fail_backend() -> None:
    """keyring's fail backend means no secure storage: reads are empty, writes raise."""

    store = KeyringCredentialStore()

    assert store.is_available() is False
    assert store.get_api_key() is None
    assert store.clear_api_key() is False
    with pytest.raises(RuntimeError, match="no keyring backend"):
        store.set_api_key("sk_abc123")


def test_store_maps_backend_errors_to_runtime_error() -> None:
    """Backend failures surface as `RuntimeError` with the cause chained."""

    store = KeyringCredentialStore()

    with _use_backend(LockedKeyring()):
        with pytest.raises(RuntimeError, match="Could not read") as exc_info:
            store.get_api_key()

    assert isinstance(exc_info.value.__cause__, KeyringLocked)
