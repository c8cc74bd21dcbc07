"""Local audio server collection records for Yomichan-style dictionaries."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional

from .core import (
    NormString,
    _as_int,
    _as_str,
    _coerce_norm,
    _expect_object,
    _opt_norm,
    _require,
)


class AudioFormat(enum.Enum):
    """File type of audio data."""

    OPUS = "Opus"


@dataclass
class Audio:
    """Audio file data, base64-encoded."""

    format: AudioFormat
    data: str

    def to_json(self) -> dict:
        return {"format": self.format.value, "data": self.data}

    @classmethod
    def from_json(cls, value: Any) -> Audio:
        obj = _expect_object(value, "audio")
        raw_format = _as_str(_require(obj, "format", "audio"), "format")
        try:
            audio_format = AudioFormat(raw_format)
        except ValueError:
            raise ValueError(f"unknown audio format {raw_format!r}") from None
        return cls(audio_format, _as_str(_require(obj, "data", "audio"), "data"))


def _audio_field(obj: dict, what: str) -> Audio:
    return Audio.from_json(_require(obj, "audio", what))


@dataclass
class Forvo:
    """Forvo audio, with the speaker's username."""

    username: str
    audio: Audio

    def to_json(self) -> dict:
        return {"username": self.username, "audio": self.audio.to_json()}

    @classmethod
    def from_json(cls, value: Any) -> Forvo:
        obj = _expect_object(value, "forvo")
        return cls(
            username=_as_str(_require(obj, "username", "forvo"), "username"),
            audio=_audio_field(obj, "forvo"),
        )


@dataclass
class Jpod:
    """JapanesePod101 audio."""

    audio: Audio

    def to_json(self) -> dict:
        return {"audio": self.audio.to_json()}

    @classmethod
    def from_json(cls, value: Any) -> Jpod:
        return cls(_audio_field(_expect_object(value, "jpod"), "jpod"))


@dataclass
class Nhk16:
    """NHK audio."""

    audio: Audio

    def to_json(self) -> dict:
        return {"audio": self.audio.to_json()}

    @classmethod
    def from_json(cls, value: Any) -> Nhk16:
        return cls(_audio_field(_expect_object(value, "nhk16"), "nhk16"))


@dataclass
class Shinmeikai8:
    """Shin Meikai 8th edition audio, with optional pitch information."""

    audio: Audio
    pitch_number: Optional[int] = None
    pitch_pattern: Optional[NormString] = None

    def __post_init__(self) -> None:
        self.pitch_pattern = _coerce_norm(self.pitch_pattern)

    def to_json(self) -> dict:
        return {
            "audio": self.audio.to_json(),
            "pitch_number": self.pitch_number,
            "pitch_pattern": None if self.pitch_pattern is None else str(self.pitch_pattern),
        }

    @classmethod
    def from_json(cls, value: Any) -> Shinmeikai8:
        obj = _expect_object(value, "shinmeikai8")
        raw_number = obj.get("pitch_number")
        pitch_number = None
        if raw_number is not None:
            pitch_number = _as_int(raw_number, "pitch_number")
            if pitch_number < 0:
                raise ValueError("`pitch_number` must not be negative")
        return cls(
            audio=_audio_field(obj, "shinmeikai8"),
            pitch_number=pitch_number,
            pitch_pattern=_opt_norm(obj, "pitch_pattern"),
        )