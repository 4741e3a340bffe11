"""Configuration model and loaders for the text-to-dialogue client.

Responsibilities:
- Define client configuration as a typed, immutable dataclass.
- Provide deterministic precedence resolution for runtime values.
- Provide loader entry points for YAML- and environment-based configuration.

Key types:
- `ClientConfig`: normalized connection and request defaults.
- `RuntimeConfigSources`: optional value sources for precedence resolution.
- `ConfigLoader`: static construction helpers for `ClientConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .api.executor import DEFAULT_BASE_URL
from .catalog.output_formats import is_supported_output_format
from .parsing import normalize_optional_string, parse_optional_positive_float

_ENV_KEYS = {
    "api_key": "ELEVENLABS_API_KEY",
    "base_url": "ELEVENLABS_BASE_URL",
    "timeout_seconds": "ELEVENLABS_TIMEOUT_SECONDS",
    "model_id": "ELEVENLABS_MODEL_ID",
    "output_format": "ELEVENLABS_OUTPUT_FORMAT",
}
_ALLOWED_FILE_KEYS = frozenset(_ENV_KEYS)


@dataclass(frozen=True, slots=True)
class RuntimeConfigSources:
    """Source mappings used for deterministic runtime value precedence.

    Attributes:
        cli: Values explicitly provided by CLI arguments.
        secure: Values loaded from secure local credential storage.
        env: Values loaded from environment variables.
    """

    cli: Mapping[str, str] = field(default_factory=dict)
    secure: Mapping[str, str] = field(default_factory=dict)
    env: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Connection settings and request defaults for one client.

    Attributes:
        api_key: Provider API key; never logged or persisted by this package.
        base_url: API base URL including the version path.
        timeout_seconds: Per-request timeout; `None` disables it.
        model_id: Default model applied by the CLI when none is given.
        output_format: Default output format applied by the CLI.
    """

    api_key: str | None = field(default=None, repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float | None = None
    model_id: str | None = None
    output_format: str | None = None

    def validate(self) -> None:
        """Validate configuration values before a client is created."""

        if normalize_optional_string(self.api_key) is None:
            raise ValueError("`api_key` is required.")
        if normalize_optional_string(self.base_url) is None:
            raise ValueError("`base_url` must be a non-empty string.")
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError("`base_url` must start with `http://` or `https://`.")
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError("`timeout_seconds` must be a positive number.")
        if self.output_format is not None and not is_supported_output_format(
            self.output_format
        ):
            raise ValueError(f"`output_format` `{self.output_format}` is not supported.")

    def resolved(self, sources: RuntimeConfigSources | None = None) -> ClientConfig:
        """Resolve values with deterministic source precedence.

        Precedence for each key is:
        `cli` > `secure` > `env` > config field value.
        """

        resolved_sources = sources if sources is not None else RuntimeConfigSources()
        resolved_timeout = self._resolve_runtime_value("timeout_seconds", resolved_sources)
        return replace(
            self,
            api_key=self._resolve_runtime_value("api_key", resolved_sources),
            base_url=self._resolve_runtime_value("base_url", resolved_sources)
            or DEFAULT_BASE_URL,
            timeout_seconds=parse_optional_positive_float(
                resolved_timeout, "timeout_seconds"
            ),
            model_id=self._resolve_runtime_value("model_id", resolved_sources),
            output_format=self._resolve_runtime_value("output_format", resolved_sources),
        )

    def _resolve_runtime_value(self, key: str, sources: RuntimeConfigSources) -> str | None:
        """Resolve one key from CLI, secure storage, env, then this config."""

        for mapping, lookup_key in (
            (sources.cli, key),
            (sources.secure, key),
            (sources.env, _ENV_KEYS[key]),
        ):
            value = normalize_optional_string(mapping.get(lookup_key))
            if value is not None:
                return value
        return normalize_optional_string(getattr(self, key))


class ConfigLoader:
    """Factory methods for loading `ClientConfig` from files or environment."""

    @staticmethod
    def from_yaml(path: Path) -> ClientConfig:
        """Load configuration from a YAML mapping file."""

        raw_text = path.read_text(encoding="utf-8")
        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping.")
        return ConfigLoader._build_config_from_mapping(payload, f"YAML config `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ClientConfig:
        """Load configuration from environment variables."""

        source = env if env is not None else os.environ
        payload = {
            key: source[env_key] for key, env_key in _ENV_KEYS.items() if env_key in source
        }
        return ConfigLoader._build_config_from_mapping(payload, "Environment")

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> ClientConfig:
        """Normalize a raw key/value mapping into `ClientConfig`."""

        unknown_keys = sorted(str(key) for key in payload if key not in _ALLOWED_FILE_KEYS)
        if unknown_keys:
            joined = ", ".join(f"`{key}`" for key in unknown_keys)
            raise ValueError(f"{source_label} contains unsupported keys: {joined}.")

        try:
            timeout_seconds = parse_optional_positive_float(
                payload.get("timeout_seconds"), "timeout_seconds"
            )
        except ValueError as exc:
            raise ValueError(f"{source_label} field {exc}") from exc

        output_format = normalize_optional_string(payload.get("output_format"))
        if output_format is not None and not is_supported_output_format(output_format):
            raise ValueError(
                f"{source_label} field `output_format` has unsupported value "
                f"`{output_format}`."
            )

        return ClientConfig(
            api_key=normalize_optional_string(payload.get("api_key")),
            base_url=normalize_optional_string(payload.get("base_url")) or DEFAULT_BASE_URL,
            timeout_seconds=timeout_seconds,
            model_id=normalize_optional_string(payload.get("model_id")),
            output_format=output_format,
        )
