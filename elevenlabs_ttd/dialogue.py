"""Fluent builder for text-to-dialogue requests.

Responsibilities:
- Accumulate dialogue inputs and optional configuration immutably.
- Coerce loose input shapes into typed request models at build time.
- Hand the validated request descriptor to the client's executor.

Key types:
- `TextToDialogueBuilder`: chainable builder returned by
  `ElevenLabsTTDClient.text_to_dialogue`.
- `DialogueDraft`: the builder's unvalidated, immutable field snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Union

from .catalog.tts_models import StaticModel
from .catalog.voices import StaticVoice
from .errors import ValidationError
from .models.datatypes import (
    DialogueInput,
    DialogueRequest,
    DialogueSettings,
    PronunciationDictionaryLocator,
)

if TYPE_CHECKING:
    from .client import ElevenLabsTTDClient

DialogueInputLike = Union[DialogueInput, tuple[str, Any], Mapping[str, Any]]
LocatorLike = Union[PronunciationDictionaryLocator, tuple[str, str], Mapping[str, str]]


@dataclass(frozen=True, slots=True)
class DialogueDraft:
    """Unvalidated builder state; every optional field is last-write-wins."""

    inputs: tuple[DialogueInputLike, ...]
    model_id: str | StaticModel | None = None
    output_format: str | None = None
    settings: DialogueSettings | None = None
    pronunciation_dictionary_locators: tuple[LocatorLike, ...] | None = None
    seed: int | None = None


class TextToDialogueBuilder:
    """Chainable text-to-dialogue request builder.

    Each setter returns a new builder; the original is left untouched, so a
    partially configured builder can be shared and branched safely.
    """

    __slots__ = ("_client", "_draft")

    def __init__(self, client: ElevenLabsTTDClient, draft: DialogueDraft) -> None:
        self._client = client
        self._draft = draft

    def __repr__(self) -> str:
        return f"TextToDialogueBuilder(draft={self._draft!r})"

    @property
    def draft(self) -> DialogueDraft:
        """Return the current unvalidated field snapshot."""

        return self._draft

    def _with(self, **changes: Any) -> TextToDialogueBuilder:
        return TextToDialogueBuilder(self._client, replace(self._draft, **changes))

    def model(self, model_id: str | StaticModel) -> TextToDialogueBuilder:
        """Set the model by identifier or catalog entry (e.g. `tts_models.ELEVEN_V3`)."""

        return self._with(model_id=model_id)

    def output_format(self, output_format: str) -> TextToDialogueBuilder:
        """Set the audio output format (e.g. `mp3_44100_128`)."""

        return self._with(output_format=output_format)

    def settings(self, settings: DialogueSettings) -> TextToDialogueBuilder:
        """Set synthesis settings."""

        return self._with(settings=settings)

    def pronunciation_dictionary_locators(
        self,
        locators: LocatorLike | Iterable[LocatorLike],
    ) -> TextToDialogueBuilder:
        """Set pronunciation dictionary locators, replacing any previous list.

        A single locator, mapping or `(dictionary_id, version_id)` string pair
        is treated as a one-element list.
        """

        if isinstance(locators, (PronunciationDictionaryLocator, Mapping)) or _is_id_pair(
            locators
        ):
            return self._with(pronunciation_dictionary_locators=(locators,))
        return self._with(pronunciation_dictionary_locators=tuple(locators))

    def seed(self, seed: int) -> TextToDialogueBuilder:
        """Set the determinism seed."""

        return self._with(seed=seed)

    def build_request(self) -> DialogueRequest:
        """Validate the draft and return the immutable request descriptor."""

        draft = self._draft
        if draft.settings is not None and not isinstance(draft.settings, DialogueSettings):
            raise ValidationError(
                "`settings` must be a `DialogueSettings` instance.", field="settings"
            )
        model_id = draft.model_id
        if isinstance(model_id, StaticModel):
            model_id = model_id.model_id
        locators = None
        if draft.pronunciation_dictionary_locators is not None:
            locators = tuple(
                _coerce_locator(locator) for locator in draft.pronunciation_dictionary_locators
            )
        return DialogueRequest(
            inputs=tuple(
                _coerce_input(item, index) for index, item in enumerate(draft.inputs)
            ),
            model_id=model_id,
            output_format=draft.output_format,
            settings=draft.settings,
            pronunciation_dictionary_locators=locators,
            seed=draft.seed,
        )

    async def execute(self) -> bytes:
        """Validate, send exactly one request and return the raw audio bytes.

        No retries are attempted; retry policy belongs to the caller.
        """

        request = self.build_request()
        return await self._client.execute_dialogue(request)


def _coerce_input(item: DialogueInputLike, index: int) -> DialogueInput:
    """Convert a loose input shape into a `DialogueInput`."""

    if isinstance(item, DialogueInput):
        return item
    if isinstance(item, Mapping):
        text = item.get("text")
        voice = item.get("voice_id")
    elif isinstance(item, tuple) and len(item) == 2:
        text, voice = item
    else:
        raise ValidationError(
            f"Dialogue input at position {index} must be a `DialogueInput`, "
            "a `(text, voice_id)` pair, or a mapping.",
            field="inputs",
        )
    if isinstance(voice, StaticVoice):
        voice = voice.voice_id
    return DialogueInput(
        text=text if isinstance(text, str) else "",
        voice_id=voice if isinstance(voice, str) else "",
    )


def _is_id_pair(value: object) -> bool:
    return (
        isinstance(value, tuple)
        and len(value) == 2
        and all(isinstance(part, str) for part in value)
    )


def _coerce_locator(locator: LocatorLike) -> PronunciationDictionaryLocator:
    """Convert a loose locator shape into a `PronunciationDictionaryLocator`."""

    if isinstance(locator, PronunciationDictionaryLocator):
        return locator
    if isinstance(locator, Mapping):
        dictionary_id = locator.get("dictionary_id") or locator.get(
            "pronunciation_dictionary_id"
        )
        return PronunciationDictionaryLocator(
            dictionary_id=dictionary_id or "",
            version_id=locator.get("version_id") or "",
        )
    if isinstance(locator, tuple) and len(locator) == 2:
        dictionary_id, version_id = locator
        return PronunciationDictionaryLocator(
            dictionary_id=dictionary_id or "",
            version_id=version_id or "",
        )
    raise ValidationError(
        "Pronunciation dictionary locators must be locator objects, "
        "`(dictionary_id, version_id)` pairs, or mappings.",
        field="pronunciation_dictionary_locators",
    )
