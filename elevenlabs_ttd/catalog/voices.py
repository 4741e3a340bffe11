"""Premade voice catalog.

Responsibilities:
- Map human-friendly premade voice names to provider voice identifiers.
- Provide lookup and gender filters for CLI listings and voice resolution.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StaticVoice:
    """One premade provider voice.

    Attributes:
        voice_id: Provider-native voice identifier sent on the wire.
        name: Human-readable display name.
        gender: `male` or `female`.
    """

    voice_id: str
    name: str
    gender: str

    def id(self) -> str:
        """Return the voice identifier used in API calls."""

        return self.voice_id


ADAM = StaticVoice("pNInz6obpgDQGcFmaJgB", "Adam", "male")
ALICE = StaticVoice("Xb7hH8MSUJpSbSDYk0k2", "Alice", "female")
ANTONI = StaticVoice("ErXwobaYiN019PkySvjV", "Antoni", "male")
ARIA = StaticVoice("9BWtsMINqrJLrRacOk9x", "Aria", "female")
ARNOLD = StaticVoice("VR6AewLTigWG4xSOukaG", "Arnold", "male")
BILL = StaticVoice("pqHfZKP75CvOlQylNhV4", "Bill", "male")
BRIAN = StaticVoice("nPczCjzI2devNBz1zQrb", "Brian", "male")
CALLUM = StaticVoice("N2lVS1w4EtoT3dr4eOWO", "Callum", "male")
CHARLIE = StaticVoice("IKne3meq5aSn9XLyUdCD", "Charlie", "male")
CHARLOTTE = StaticVoice("XB0fDUnXU5powFXDhCwa", "Charlotte", "female")
CHRIS = StaticVoice("iP95p4xoKVk53GoZ742B", "Chris", "male")
CLYDE = StaticVoice("2EiwWnXFnvU5JabPnv8n", "Clyde", "male")
DANIEL = StaticVoice("onwK4e9ZLuTAKqWW03F9", "Daniel", "male")
DAVE = StaticVoice("CYw3kZ02Hs0563khs1Fj", "Dave", "male")
DOMI = StaticVoice("AZnzlk1XvdvUeBnXmlld", "Domi", "female")
DOROTHY = StaticVoice("ThT5KcBeYPX3keUQqHPh", "Dorothy", "female")
DREW = StaticVoice("29vD33N1CtxCmqQRPOHJ", "Drew", "male")
ELLI = StaticVoice("MF3mGyEYCl7XYWbV9V6O", "Elli", "female")
EMILY = StaticVoice("LcfcDJNUP1GQjkzn1xUU", "Emily", "female")
ERIC = StaticVoice("cjVigY5qzO86Huf0OWal", "Eric", "male")
ETHAN = StaticVoice("g5CIjZEefAph4nQFvHAz", "Ethan", "male")
FIN = StaticVoice("D38z5RcWu1voky8WS1ja", "Fin", "male")
FREYA = StaticVoice("jsCqWAovK2LkecY7zXl4", "Freya", "female")
GEORGE = StaticVoice("JBFqnCBsd6RMkjVDRZzb", "George", "male")
GIGI = StaticVoice("jBpfuIE2acCO8z3wKNLl", "Gigi", "female")
GIOVANNI = StaticVoice("zcAOhNBS3c14rBihAFp1", "Giovanni", "male")
GLINDA = StaticVoice("z9fAnlkpzviPz146aGWa", "Glinda", "female")
GRACE = StaticVoice("oWAxZDx7w5VEj9dCyTzz", "Grace", "female")
HARRY = StaticVoice("SOYHLrjzK2X1ezoPC6cr", "Harry", "male")
JAMES = StaticVoice("ZQe5CZNOzWyzPSCn5a3c", "James", "male")
JEREMY = StaticVoice("bVMeCyTHy58xNoL34h3p", "Jeremy", "male")
JESSICA = StaticVoice("cgSgspJ2msm6clMCkdW9", "Jessica", "female")
JOSEPH = StaticVoice("Zlb1dXrP4e1RZQmNGDrb", "Joseph", "male")
JOSH = StaticVoice("TxGEqnHWrfWFTfGW9XjX", "Josh", "male")
LAURA = StaticVoice("FGY2WhTYpPnrIDTdsKH5", "Laura", "female")
LIAM = StaticVoice("TX3LPaxmHKxFdv7VOQHJ", "Liam", "male")
LILY = StaticVoice("pFZP5JQG7iQjIQuC4Bku", "Lily", "female")
MATILDA = StaticVoice("XrExE9yKIg1WjnnlVkGX", "Matilda", "female")
MICHAEL = StaticVoice("flq6f7yk4E4fJM5XTYuZ", "Michael", "male")
MIMI = StaticVoice("zrHiDhphv9ZnVXBqCLjz", "Mimi", "female")
NICOLE = StaticVoice("piTKgcLEGmPE4e6mEKli", "Nicole", "female")
PATRICK = StaticVoice("ODq5zmih8GrVes37Dizd", "Patrick", "male")
PAUL = StaticVoice("5Q0t7uMcjvnagumLfvZi", "Paul", "male")
RACHEL = StaticVoice("21m00Tcm4TlvDq8ikWAM", "Rachel", "female")
ROGER = StaticVoice("CwhRBWXzGAHq8TQ4Fs17", "Roger", "male")
SAM = StaticVoice("yoZ06aMxZJJ28mfd3POQ", "Sam", "male")
SARAH = StaticVoice("EXAVITQu4vr4xnSDxMaL", "Sarah", "female")
SERENA = StaticVoice("pMsXgVXv3BLzUgSXRplE", "Serena", "female")
THOMAS = StaticVoice("GBv7mTt0atIp3Br8iCZE", "Thomas", "male")
WILL = StaticVoice("bIHbv24MWmeRgasZH58o", "Will", "male")

_ALL_VOICES: tuple[StaticVoice, ...] = (
    ADAM,
    ALICE,
    ANTONI,
    ARIA,
    ARNOLD,
    BILL,
    BRIAN,
    CALLUM,
    CHARLIE,
    CHARLOTTE,
    CHRIS,
    CLYDE,
    DANIEL,
    DAVE,
    DOMI,
    DOROTHY,
    DREW,
    ELLI,
    EMILY,
    ERIC,
    ETHAN,
    FIN,
    FREYA,
    GEORGE,
    GIGI,
    GIOVANNI,
    GLINDA,
    GRACE,
    HARRY,
    JAMES,
    JEREMY,
    JESSICA,
    JOSEPH,
    JOSH,
    LAURA,
    LIAM,
    LILY,
    MATILDA,
    MICHAEL,
    MIMI,
    NICOLE,
    PATRICK,
    PAUL,
    RACHEL,
    ROGER,
    SAM,
    SARAH,
    SERENA,
    THOMAS,
    WILL,
)


def all_voices() -> tuple[StaticVoice, ...]:
    """Return every premade voice in alphabetical name order."""

    return _ALL_VOICES


def male() -> tuple[StaticVoice, ...]:
    """Return premade voices tagged as male."""

    return tuple(voice for voice in _ALL_VOICES if voice.gender == "male")


def female() -> tuple[StaticVoice, ...]:
    """Return premade voices tagged as female."""

    return tuple(voice for voice in _ALL_VOICES if voice.gender == "female")


def find_by_name(name: str) -> StaticVoice | None:
    """Find a premade voice by case-insensitive display name."""

    wanted = name.strip().casefold()
    for voice in _ALL_VOICES:
        if voice.name.casefold() == wanted:
            return voice
    return None


def resolve_voice_id(name_or_id: str) -> str:
    """Return the voice id for a catalog name, or the stripped value itself.

    Unknown values are passed through so custom and cloned voices keep working.
    """

    normalized = name_or_id.strip()
    voice = find_by_name(normalized)
    if voice is not None:
        return voice.voice_id
    return normalized
