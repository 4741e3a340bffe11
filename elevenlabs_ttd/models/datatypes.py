"""Core request datatypes for the text-to-dialogue endpoint.

Responsibilities:
- Represent immutable dialogue inputs, settings and dictionary locators.
- Validate values so that no invalid request descriptor is ever constructed.
- Serialize request descriptors to the provider's JSON wire schema.

Key types:
- `DialogueInput`, `DialogueSettings`, `PronunciationDictionaryLocator`,
  and `DialogueRequest`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ..catalog.output_formats import is_supported_output_format
from ..errors import (
    EmptyInputsError,
    EmptyTextError,
    EmptyVoiceIdError,
    IncompleteLocatorError,
    SettingOutOfRangeError,
    TooManyLocatorsError,
    UnsupportedOutputFormatError,
    ValidationError,
)

STABILITY_MIN = 0.0
STABILITY_MAX = 1.0
SEED_MIN = 0
SEED_MAX = 4_294_967_295
MAX_PRONUNCIATION_DICTIONARY_LOCATORS = 3


@dataclass(frozen=True, slots=True)
class DialogueInput:
    """One line of a multi-speaker script.

    Attributes:
        text: Text to be spoken.
        voice_id: Provider voice identifier used to render `text`.
    """

    text: str
    voice_id: str

    def validate(self, index: int | None = None) -> None:
        """Raise when text or voice id is blank."""

        if not isinstance(self.text, str) or not self.text.strip():
            raise EmptyTextError(index)
        if not isinstance(self.voice_id, str) or not self.voice_id.strip():
            raise EmptyVoiceIdError(index)

    def to_payload(self) -> dict[str, str]:
        """Return the wire representation of this input."""

        return {"text": self.text, "voice_id": self.voice_id}


@dataclass(frozen=True, slots=True)
class DialogueSettings:
    """Optional synthesis tuning for a dialogue request.

    Lower stability broadens emotional range; higher stability sounds more
    monotonous. Speaker boost increases similarity to the original speaker at
    some latency cost. Fields left as `None` fall back to provider defaults.

    Attributes:
        stability: Value in the closed interval `[0.0, 1.0]`.
        use_speaker_boost: Whether speaker boost is enabled.
    """

    stability: float | None = None
    use_speaker_boost: bool | None = None

    def __post_init__(self) -> None:
        if self.stability is not None:
            _require_unit_interval("stability", self.stability)
        if self.use_speaker_boost is not None and not isinstance(
            self.use_speaker_boost, bool
        ):
            raise ValidationError(
                "`speaker_boost` must be a boolean.",
                field="speaker_boost",
            )

    @classmethod
    def defaults(cls) -> DialogueSettings:
        """Return the provider's documented defaults made explicit."""

        return cls(stability=0.5, use_speaker_boost=True)

    def with_stability(self, stability: float) -> DialogueSettings:
        """Return a copy with `stability` set, failing immediately when out of range."""

        return replace(self, stability=stability)

    def with_speaker_boost(self, enabled: bool) -> DialogueSettings:
        """Return a copy with speaker boost toggled."""

        return replace(self, use_speaker_boost=enabled)

    def to_payload(self) -> dict[str, Any]:
        """Return the wire representation, omitting unset fields."""

        payload: dict[str, Any] = {}
        if self.stability is not None:
            payload["stability"] = float(self.stability)
        if self.use_speaker_boost is not None:
            payload["use_speaker_boost"] = self.use_speaker_boost
        return payload


@dataclass(frozen=True, slots=True)
class PronunciationDictionaryLocator:
    """Reference to a provider-hosted pronunciation dictionary version.

    Both identifiers are required; a partial locator raises on construction.
    """

    dictionary_id: str
    version_id: str

    def __post_init__(self) -> None:
        if not isinstance(self.dictionary_id, str) or not self.dictionary_id.strip():
            raise IncompleteLocatorError("dictionary_id")
        if not isinstance(self.version_id, str) or not self.version_id.strip():
            raise IncompleteLocatorError("version_id")

    def to_payload(self) -> dict[str, str]:
        return {
            "pronunciation_dictionary_id": self.dictionary_id,
            "version_id": self.version_id,
        }


@dataclass(frozen=True, slots=True)
class DialogueRequest:
    """Validated, immutable text-to-dialogue request descriptor.

    Attributes:
        inputs: Ordered dialogue lines; at least one is required.
        model_id: Optional model identifier.
        output_format: Optional audio format identifier.
        settings: Optional synthesis settings.
        pronunciation_dictionary_locators: Optional ordered locators, applied in order.
        seed: Optional best-effort determinism seed in `[0, 4294967295]`.
    """

    inputs: tuple[DialogueInput, ...]
    model_id: str | None = None
    output_format: str | None = None
    settings: DialogueSettings | None = None
    pronunciation_dictionary_locators: tuple[PronunciationDictionaryLocator, ...] | None = None
    seed: int | None = None

    def __post_init__(self) -> None:
        if not self.inputs:
            raise EmptyInputsError()
        for index, dialogue_input in enumerate(self.inputs):
            dialogue_input.validate(index)

        if self.model_id is not None and (
            not isinstance(self.model_id, str) or not self.model_id.strip()
        ):
            raise ValidationError("`model_id` must be a non-empty string.", field="model_id")
        if self.output_format is not None and not isinstance(self.output_format, str):
            raise ValidationError(
                "`output_format` must be a string.", field="output_format"
            )
        if self.output_format is not None and not is_supported_output_format(
            self.output_format
        ):
            raise UnsupportedOutputFormatError(self.output_format)

        locators = self.pronunciation_dictionary_locators
        if locators is not None and len(locators) > MAX_PRONUNCIATION_DICTIONARY_LOCATORS:
            raise TooManyLocatorsError(len(locators), MAX_PRONUNCIATION_DICTIONARY_LOCATORS)

        if self.seed is not None:
            if isinstance(self.seed, bool) or not isinstance(self.seed, int):
                raise ValidationError("`seed` must be an integer.", field="seed")
            if not SEED_MIN <= self.seed <= SEED_MAX:
                raise SettingOutOfRangeError(
                    field="seed", value=self.seed, minimum=SEED_MIN, maximum=SEED_MAX
                )

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON body, leaving absent optional fields out."""

        payload: dict[str, Any] = {
            "inputs": [dialogue_input.to_payload() for dialogue_input in self.inputs],
        }
        if self.model_id is not None:
            payload["model_id"] = self.model_id
        if self.output_format is not None:
            payload["output_format"] = self.output_format
        if self.settings is not None:
            payload["settings"] = self.settings.to_payload()
        if self.pronunciation_dictionary_locators is not None:
            payload["pronunciation_dictionary_locators"] = [
                locator.to_payload() for locator in self.pronunciation_dictionary_locators
            ]
        if self.seed is not None:
            payload["seed"] = self.seed
        return payload

    def query_params(self) -> dict[str, str]:
        """Return URL query parameters; the provider reads `output_format` there."""

        if self.output_format is None:
            return {}
        return {"output_format": self.output_format}


def _require_unit_interval(field_name: str, value: object) -> None:
    """Raise `SettingOutOfRangeError` unless `value` is a real number in `[0, 1]`."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SettingOutOfRangeError(
            field=field_name, value=value, minimum=STABILITY_MIN, maximum=STABILITY_MAX
        )
    # NaN fails every comparison, so it lands here too.
    if not STABILITY_MIN <= value <= STABILITY_MAX:
        raise SettingOutOfRangeError(
            field=field_name, value=value, minimum=STABILITY_MIN, maximum=STABILITY_MAX
        )
