"""Static provider catalogs.

This package holds read-only tables of premade voices, model identifiers and
output formats accepted by the text-to-dialogue endpoint.
"""

from . import output_formats, tts_models, voices
from .tts_models import StaticModel
from .voices import StaticVoice

__all__ = ["StaticModel", "StaticVoice", "output_formats", "tts_models", "voices"]
