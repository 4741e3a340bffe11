"""API key storage in the operating system keyring.

The CLI treats the stored key as its "secure" configuration source, ranked
below `--api-key` and above `ELEVENLABS_API_KEY`. Key values are never
echoed or logged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import keyring
from keyring.backends import fail as keyring_fail_backend
from keyring.errors import KeyringError, PasswordDeleteError

from .parsing import normalize_optional_string

KEYRING_SERVICE = "elevenlabs-ttd"
KEYRING_ACCOUNT = "elevenlabs_api_key"


class CredentialStore(Protocol):
    """What the CLI needs from an API key store."""

    def is_available(self) -> bool: ...

    def get_api_key(self) -> str | None: ...

    def set_api_key(self, api_key: str) -> None: ...

    def clear_api_key(self) -> bool: ...


@dataclass(frozen=True, slots=True)
class KeyringCredentialStore:
    """Keep one API key under `service_name`/`account_name` in the keyring.

    When `keyring` resolves to its fail backend (headless hosts, CI) the store
    reports itself unavailable: reads yield `None`, clears yield `False`, and
    writes raise `RuntimeError`. Backend errors surface as `RuntimeError`.
    """

    service_name: str = KEYRING_SERVICE
    account_name: str = KEYRING_ACCOUNT

    def is_available(self) -> bool:
        return not isinstance(keyring.get_keyring(), keyring_fail_backend.Keyring)

    def get_api_key(self) -> str | None:
        if not self.is_available():
            return None
        try:
            stored = keyring.get_password(self.service_name, self.account_name)
        except KeyringError as exc:
            raise RuntimeError(f"Could not read the stored API key: {exc}") from exc
        return normalize_optional_string(stored)

    def set_api_key(self, api_key: str) -> None:
        normalized = normalize_optional_string(api_key)
        if normalized is None:
            raise ValueError("API key must be a non-empty string.")
        if not self.is_available():
            raise RuntimeError(
                "Secure credential storage is unavailable because no keyring backend "
                "is configured on this system."
            )
        try:
            keyring.set_password(self.service_name, self.account_name, normalized)
        except KeyringError as exc:
            raise RuntimeError(f"Could not store the API key: {exc}") from exc

    def clear_api_key(self) -> bool:
        """Delete the stored key; `False` when there was nothing to delete."""

        if not self.is_available():
            return False
        try:
            keyring.delete_password(self.service_name, self.account_name)
        except PasswordDeleteError:
            return False
        except KeyringError as exc:
            raise RuntimeError(f"Could not clear the stored API key: {exc}") from exc
        return True


def create_credential_store() -> CredentialStore:
    """Create the credential store used by the CLI."""

    return KeyringCredentialStore()
