"""Shared parsing helpers for configuration and CLI value normalization."""

from __future__ import annotations

import math


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_optional_positive_float(value: object, field_name: str) -> float | None:
    """Parse an optional strictly positive float; blank values yield `None`.

    Raises:
        ValueError: If the value is present but not a finite positive number.
    """

    if isinstance(value, bool):
        raise ValueError(f"`{field_name}` must be a positive number.")
    if isinstance(value, (int, float)):
        parsed = float(value)
    else:
        normalized = normalize_optional_string(value)
        if normalized is None:
            return None
        try:
            parsed = float(normalized)
        except ValueError as exc:
            raise ValueError(f"`{field_name}` must be a positive number.") from exc
    if not math.isfinite(parsed) or parsed <= 0:
        raise ValueError(f"`{field_name}` must be a positive number.")
    return parsed


def parse_dialogue_line(value: str) -> tuple[str, str]:
    """Split a `VOICE=TEXT` token into `(voice, text)`.

    Only the first `=` separates; the text may itself contain `=`.

    Raises:
        ValueError: If the separator is missing or either side is blank.
    """

    if "=" not in value:
        raise ValueError(f"Dialogue line `{value}` must use the `VOICE=TEXT` form.")
    voice, text = value.split("=", 1)
    voice = voice.strip()
    text = text.strip()
    if not voice:
        raise ValueError(f"Dialogue line `{value}` is missing a voice.")
    if not text:
        raise ValueError(f"Dialogue line `{value}` is missing text.")
    return voice, text


def parse_locator_token(value: str) -> tuple[str, str]:
    """Split a `DICTIONARY_ID:VERSION_ID` token into its two identifiers."""

    if ":" not in value:
        raise ValueError(
            f"Pronunciation dictionary `{value}` must use the `DICTIONARY_ID:VERSION_ID` form."
        )
    dictionary_id, version_id = (part.strip() for part in value.split(":", 1))
    if not dictionary_id or not version_id:
        raise ValueError(
            f"Pronunciation dictionary `{value}` requires both a dictionary id and a version id."
        )
    return dictionary_id, version_id
