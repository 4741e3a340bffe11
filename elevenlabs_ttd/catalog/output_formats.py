"""Audio output formats accepted by the provider.

Format identifiers follow `codec_samplerate[_bitrate]`, e.g. `mp3_22050_32` is
MP3 at 22.05kHz and 32kbps. Higher tiers (MP3 192kbps, PCM 44.1kHz) require a
matching subscription; that is enforced remotely, not here.
"""

from __future__ import annotations

MP3_22050_32 = "mp3_22050_32"
MP3_44100_32 = "mp3_44100_32"
MP3_44100_64 = "mp3_44100_64"
MP3_44100_96 = "mp3_44100_96"
MP3_44100_128 = "mp3_44100_128"
MP3_44100_192 = "mp3_44100_192"
PCM_8000 = "pcm_8000"
PCM_16000 = "pcm_16000"
PCM_22050 = "pcm_22050"
PCM_24000 = "pcm_24000"
PCM_44100 = "pcm_44100"
PCM_48000 = "pcm_48000"
ULAW_8000 = "ulaw_8000"
ALAW_8000 = "alaw_8000"
OPUS_48000_32 = "opus_48000_32"
OPUS_48000_64 = "opus_48000_64"
OPUS_48000_96 = "opus_48000_96"

DEFAULT_OUTPUT_FORMAT = MP3_44100_128

SUPPORTED_OUTPUT_FORMATS = frozenset(
    {
        MP3_22050_32,
        MP3_44100_32,
        MP3_44100_64,
        MP3_44100_96,
        MP3_44100_128,
        MP3_44100_192,
        PCM_8000,
        PCM_16000,
        PCM_22050,
        PCM_24000,
        PCM_44100,
        PCM_48000,
        ULAW_8000,
        ALAW_8000,
        OPUS_48000_32,
        OPUS_48000_64,
        OPUS_48000_96,
    }
)

_FILE_EXTENSIONS = {
    "mp3": "mp3",
    "pcm": "pcm",
    "ulaw": "ulaw",
    "alaw": "alaw",
    "opus": "opus",
}


def is_supported_output_format(output_format: str) -> bool:
    """Return whether `output_format` is a known provider format identifier."""

    return output_format in SUPPORTED_OUTPUT_FORMATS


def file_extension(output_format: str) -> str:
    """Return a file extension for a format identifier, `bin` when unknown."""

    codec = output_format.split("_", 1)[0]
    return _FILE_EXTENSIONS.get(codec, "bin")
