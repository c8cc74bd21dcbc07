"""Core dictionary, term and profile types, with their JSON forms."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional


def _expect_object(value: Any, what: str) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"{what} must be a JSON object")
    return value


def _deny_unknown(obj: dict, allowed: set, what: str) -> None:
    unknown = set(obj) - allowed
    if unknown:
        raise ValueError(f"unknown field(s) in {what}: {', '.join(sorted(unknown))}")


def _require(obj: dict, key: str, what: str) -> Any:
    if key not in obj:
        raise ValueError(f"missing field `{key}` in {what}")
    return obj[key]


def _as_int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"`{key}` must be an integer")
    return value


def _as_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"`{key}` must be a string")
    return value


def _opt_str(obj: dict, key: str) -> Optional[str]:
    value = obj.get(key)
    return None if value is None else _as_str(value, key)


def _opt_int(obj: dict, key: str) -> Optional[int]:
    value = obj.get(key)
    return None if value is None else _as_int(value, key)


def _opt_norm(obj: dict, key: str) -> Optional[NormString]:
    value = obj.get(key)
    return None if value is None else NormString.from_json(value)


def _coerce_norm(value: Any) -> Optional[NormString]:
    if value is None or isinstance(value, NormString):
        return value
    return NormString(value)


class NormString(str):
    """Non-empty string with no leading or trailing whitespace."""

    __slots__ = ()

    def __new__(cls, string: str) -> NormString:
        if not isinstance(string, str):
            raise TypeError("NormString requires a str")
        trimmed = string.strip()
        if not trimmed:
            raise ValueError("string must be non-empty")
        return super().__new__(cls, trimmed)

    @classmethod
    def new(cls, string: str) -> Optional[NormString]:
        """Return the trimmed string, or None if nothing is left after trimming."""
        if isinstance(string, cls):
            return string
        if not string.strip():
            return None
        return cls(string)

    @classmethod
    def from_json(cls, value: Any) -> NormString:
        if not isinstance(value, str):
            raise ValueError("expected a non-empty string")
        normalized = cls.new(value)
        if normalized is None:
            raise ValueError("string must be non-empty")
        return normalized


def _term_part(value: Optional[str]) -> Optional[NormString]:
    if value is None:
        return None
    return NormString.new(value)


@dataclass
class Term:
    """Dictionary key made of a headword, a reading, or both."""

    headword: Optional[NormString] = None
    reading: Optional[NormString] = None

    def __post_init__(self) -> None:
        self.headword = _coerce_norm(self.headword)
        self.reading = _coerce_norm(self.reading)
        if self.headword is None and self.reading is None:
            raise ValueError("term must have at least one of headword or reading")

    @classmethod
    def new(cls, headword: Optional[str], reading: Optional[str]) -> Optional[Term]:
        """Build a term, or return None if both parts are missing or blank."""
        head = _term_part(headword)
        read = _term_part(reading)
        if head is None and read is None:
            return None
        return cls(head, read)

    @classmethod
    def from_headword(cls, headword: Optional[str]) -> Optional[Term]:
        return cls.new(headword, None)

    @classmethod
    def from_reading(cls, reading: Optional[str]) -> Optional[Term]:
        return cls.new(None, reading)

    def set_headword(self, new: str) -> Optional[NormString]:
        """Set the headword and return the previous one, if any."""
        old = self.headword
        self.headword = NormString(new)
        return old

    def set_reading(self, new: str) -> Optional[NormString]:
        """Set the reading and return the previous one, if any."""
        old = self.reading
        self.reading = NormString(new)
        return old

    def __str__(self) -> str:
        if self.headword is not None and self.reading is not None:
            return f"{self.headword} ({self.reading})"
        return str(self.headword if self.headword is not None else self.reading)

    def to_json(self) -> dict:
        out = {}
        if self.headword is not None:
            out["headword"] = str(self.headword)
        if self.reading is not None:
            out["reading"] = str(self.reading)
        return out

    @classmethod
    def from_json(cls, value: Any) -> Term:
        obj = _expect_object(value, "term")
        _deny_unknown(obj, {"headword", "reading"}, "term")
        if not obj:
            raise ValueError("term must have at least one of headword or reading")
        headword = NormString.from_json(obj["headword"]) if "headword" in obj else None
        reading = NormString.from_json(obj["reading"]) if "reading" in obj else None
        return cls(headword, reading)


class FrequencyKind(enum.Enum):
    """Whether a lower frequency value means more frequent (rank) or less."""

    RANK = "Rank"
    OCCURRENCE = "Occurrence"


@dataclass(frozen=True)
class FrequencyValue:
    """How often a term appears in one specific dictionary."""

    kind: FrequencyKind
    value: int

    @classmethod
    def rank(cls, value: int) -> FrequencyValue:
        return cls(FrequencyKind.RANK, value)

    @classmethod
    def occurrence(cls, value: int) -> FrequencyValue:
        return cls(FrequencyKind.OCCURRENCE, value)

    def to_json(self) -> dict:
        return {self.kind.value: self.value}

    @classmethod
    def from_json(cls, value: Any) -> FrequencyValue:
        obj = _expect_object(value, "frequency value")
        if len(obj) != 1:
            raise ValueError("frequency value must have exactly one variant")
        ((tag, raw),) = obj.items()
        try:
            kind = FrequencyKind(tag)
        except ValueError:
            raise ValueError(f"unknown frequency variant `{tag}`") from None
        return cls(kind, _as_int(raw, tag))


class DictionaryKind(enum.Enum):
    """Kind of dictionary that can be imported."""

    YOMITAN = "Yomitan"
    YOMICHAN_AUDIO = "YomichanAudio"


class RecordKind(enum.Enum):
    """Kind of record a dictionary can contain."""

    YOMITAN_GLOSSARY = "YomitanGlossary"
    YOMITAN_FREQUENCY = "YomitanFrequency"
    YOMITAN_PITCH = "YomitanPitch"
    YOMICHAN_AUDIO_FORVO = "YomichanAudioForvo"
    YOMICHAN_AUDIO_JPOD = "YomichanAudioJpod"
    YOMICHAN_AUDIO_NHK16 = "YomichanAudioNhk16"
    YOMICHAN_AUDIO_SHINMEIKAI8 = "YomichanAudioShinmeikai8"

    def dictionary_kind(self) -> DictionaryKind:
        """The dictionary kind this record kind belongs to."""
        return _RECORD_DICTIONARY[self]


_RECORD_DICTIONARY = {
    RecordKind.YOMITAN_GLOSSARY: DictionaryKind.YOMITAN,
    RecordKind.YOMITAN_FREQUENCY: DictionaryKind.YOMITAN,
    RecordKind.YOMITAN_PITCH: DictionaryKind.YOMITAN,
    RecordKind.YOMICHAN_AUDIO_FORVO: DictionaryKind.YOMICHAN_AUDIO,
    RecordKind.YOMICHAN_AUDIO_JPOD: DictionaryKind.YOMICHAN_AUDIO,
    RecordKind.YOMICHAN_AUDIO_NHK16: DictionaryKind.YOMICHAN_AUDIO,
    RecordKind.YOMICHAN_AUDIO_SHINMEIKAI8: DictionaryKind.YOMICHAN_AUDIO,
}


def _dictionary_kind_from_json(value: Any) -> DictionaryKind:
    try:
        return DictionaryKind(_as_str(value, "kind"))
    except ValueError:
        raise ValueError(f"unknown dictionary kind {value!r}") from None


@dataclass
class DictionaryMeta:
    """Metadata describing a dictionary."""

    kind: DictionaryKind
    name: str
    version: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    attribution: Optional[str] = None

    def to_json(self) -> dict:
        return {
            "kind": self.kind.value,
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "url": self.url,
            "attribution": self.attribution,
        }

    @classmethod
    def from_json(cls, value: Any) -> DictionaryMeta:
        obj = _expect_object(value, "dictionary meta")
        return cls(
            kind=_dictionary_kind_from_json(_require(obj, "kind", "dictionary meta")),
            name=_as_str(_require(obj, "name", "dictionary meta"), "name"),
            version=_opt_str(obj, "version"),
            description=_opt_str(obj, "description"),
            url=_opt_str(obj, "url"),
            attribution=_opt_str(obj, "attribution"),
        )


@dataclass
class Dictionary:
    """A dictionary that has been imported into the engine."""

    id: int
    meta: DictionaryMeta
    position: int

    def to_json(self) -> dict:
        return {"id": self.id, "meta": self.meta.to_json(), "position": self.position}

    @classmethod
    def from_json(cls, value: Any) -> Dictionary:
        obj = _expect_object(value, "dictionary")
        _deny_unknown(obj, {"id", "meta", "position"}, "dictionary")
        return cls(
            id=_as_int(_require(obj, "id", "dictionary"), "id"),
            meta=DictionaryMeta.from_json(_require(obj, "meta", "dictionary")),
            position=_as_int(_require(obj, "position", "dictionary"), "position"),
        )


def _accent_from_json(value: Any) -> Optional[tuple]:
    if value is None:
        return None
    if not isinstance(value, list) or len(value) != 3:
        raise ValueError("`accent_color` must be a list of three numbers")
    for component in value:
        if isinstance(component, bool) or not isinstance(component, (int, float)):
            raise ValueError("`accent_color` must be a list of three numbers")
    return tuple(float(component) for component in value)


@dataclass
class ProfileConfig:
    """User-specified settings for a profile."""

    name: Optional[NormString] = None
    accent_color: Optional[tuple] = None
    sorting_dictionary: Optional[int] = None
    font_family: Optional[NormString] = None
    anki_deck: Optional[NormString] = None
    anki_model: Optional[NormString] = None

    def __post_init__(self) -> None:
        self.name = _coerce_norm(self.name)
        self.font_family = _coerce_norm(self.font_family)
        self.anki_deck = _coerce_norm(self.anki_deck)
        self.anki_model = _coerce_norm(self.anki_model)
        if self.accent_color is not None:
            if len(self.accent_color) != 3:
                raise ValueError("accent_color must have three components")
            self.accent_color = tuple(float(c) for c in self.accent_color)

    def merge_from(self, src: ProfileConfig) -> None:
        """Overwrite each setting with the one from `src` where that is set."""
        for name in (
            "name",
            "accent_color",
            "sorting_dictionary",
            "font_family",
            "anki_deck",
            "anki_model",
        ):
            value = getattr(src, name)
            if value is not None:
                setattr(self, name, value)

    def to_json(self) -> dict:
        return {
            "name": None if self.name is None else str(self.name),
            "accent_color": None if self.accent_color is None else list(self.accent_color),
            "sorting_dictionary": self.sorting_dictionary,
            "font_family": None if self.font_family is None else str(self.font_family),
            "anki_deck": None if self.anki_deck is None else str(self.anki_deck),
            "anki_model": None if self.anki_model is None else str(self.anki_model),
        }

    @classmethod
    def from_json(cls, value: Any) -> ProfileConfig:
        obj = _expect_object(value, "profile config")
        return cls(
            name=_opt_norm(obj, "name"),
            accent_color=_accent_from_json(obj.get("accent_color")),
            sorting_dictionary=_opt_int(obj, "sorting_dictionary"),
            font_family=_opt_norm(obj, "font_family"),
            anki_deck=_opt_norm(obj, "anki_deck"),
            anki_model=_opt_norm(obj, "anki_model"),
        )


@dataclass
class Profile:
    """A collection of user settings stored in the engine."""

    id: int
    config: ProfileConfig
    enabled_dictionaries: list = field(default_factory=list)

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "config": self.config.to_json(),
            "enabled_dictionaries": list(self.enabled_dictionaries),
        }

    @classmethod
    def from_json(cls, value: Any) -> Profile:
        obj = _expect_object(value, "profile")
        enabled = _require(obj, "enabled_dictionaries", "profile")
        if not isinstance(enabled, list):
            raise ValueError("`enabled_dictionaries` must be a list")
        return cls(
            id=_as_int(_require(obj, "id", "profile"), "id"),
            config=ProfileConfig.from_json(_require(obj, "config", "profile")),
            enabled_dictionaries=[_as_int(v, "enabled_dictionaries") for v in enabled],
        )