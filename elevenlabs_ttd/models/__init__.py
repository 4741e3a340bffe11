"""Typed request models for the text-to-dialogue endpoint."""

from .datatypes import (
    DialogueInput,
    DialogueRequest,
    DialogueSettings,
    PronunciationDictionaryLocator,
)

__all__ = [
    "DialogueInput",
    "DialogueRequest",
    "DialogueSettings",
    "PronunciationDictionaryLocator",
]
