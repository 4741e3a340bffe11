"""Provider model identifiers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StaticModel:
    """One provider speech model.

    Attributes:
        model_id: Provider-native model identifier sent on the wire.
        name: Human-readable display name.
        supports_dialogue: Whether the text-to-dialogue endpoint accepts it.
    """

    model_id: str
    name: str
    supports_dialogue: bool = False


ELEVEN_V3 = StaticModel("eleven_v3", "Eleven v3", supports_dialogue=True)
ELEVEN_MULTILINGUAL_V2 = StaticModel("eleven_multilingual_v2", "Eleven Multilingual v2")
ELEVEN_FLASH_V2_5 = StaticModel("eleven_flash_v2_5", "Eleven Flash v2.5")
ELEVEN_FLASH_V2 = StaticModel("eleven_flash_v2", "Eleven Flash v2")
ELEVEN_TURBO_V2_5 = StaticModel("eleven_turbo_v2_5", "Eleven Turbo v2.5")
ELEVEN_TURBO_V2 = StaticModel("eleven_turbo_v2", "Eleven Turbo v2")
ELEVEN_MONOLINGUAL_V1 = StaticModel("eleven_monolingual_v1", "Eleven English v1")
ELEVEN_MULTILINGUAL_V1 = StaticModel("eleven_multilingual_v1", "Eleven Multilingual v1")

DEFAULT_DIALOGUE_MODEL = ELEVEN_V3

_ALL_MODELS: tuple[StaticModel, ...] = (
    ELEVEN_V3,
    ELEVEN_MULTILINGUAL_V2,
    ELEVEN_FLASH_V2_5,
    ELEVEN_FLASH_V2,
    ELEVEN_TURBO_V2_5,
    ELEVEN_TURBO_V2,
    ELEVEN_MONOLINGUAL_V1,
    ELEVEN_MULTILINGUAL_V1,
)


def all_models() -> tuple[StaticModel, ...]:
    """Return every known model, newest first."""

    return _ALL_MODELS


def dialogue_models() -> tuple[StaticModel, ...]:
    """Return models accepted by the text-to-dialogue endpoint."""

    return tuple(model for model in _ALL_MODELS if model.supports_dialogue)


def find_by_id(model_id: str) -> StaticModel | None:
    """Find a known model by exact identifier."""

    wanted = model_id.strip()
    for model in _ALL_MODELS:
        if model.model_id == wanted:
            return model
    return None
