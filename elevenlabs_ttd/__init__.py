"""Async client for the ElevenLabs text-to-dialogue API.

Build a request from dialogue lines, optionally tune it, and await the audio:

    client = ElevenLabsTTDClient("your-api-key")
    audio = await (
        client.text_to_dialogue(
            [
                DialogueInput("I saw the sky this morning.", voices.ARNOLD.voice_id),
                DialogueInput("I noticed that too.", voices.ALICE.voice_id),
            ]
        )
        .model(tts_models.ELEVEN_V3.model_id)
        .execute()
    )

The main entry point is `ElevenLabsTTDClient`.
"""

from loguru import logger

from .catalog import output_formats, tts_models, voices
from .client import ElevenLabsTTDClient
from .config import ClientConfig, ConfigLoader
from .dialogue import TextToDialogueBuilder
from .errors import (
    ApiError,
    AuthenticationError,
    ClientError,
    DecodeError,
    ElevenLabsTTDError,
    QuotaExceededError,
    RateLimitError,
    TransportError,
    ValidationError,
)
from .models.datatypes import (
    DialogueInput,
    DialogueRequest,
    DialogueSettings,
    PronunciationDictionaryLocator,
)

logger.disable(__name__)

__all__ = [
    "ApiError",
    "AuthenticationError",
    "ClientConfig",
    "ClientError",
    "ConfigLoader",
    "DecodeError",
    "DialogueInput",
    "DialogueRequest",
    "DialogueSettings",
    "ElevenLabsTTDClient",
    "ElevenLabsTTDError",
    "PronunciationDictionaryLocator",
    "QuotaExceededError",
    "RateLimitError",
    "TextToDialogueBuilder",
    "TransportError",
    "ValidationError",
    "__version__",
    "output_formats",
    "tts_models",
    "voices",
]

__version__ = "0.1.0"
