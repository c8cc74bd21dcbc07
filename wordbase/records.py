"""Records stored in dictionaries, and the results of lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from .core import (
    FrequencyValue,
    RecordKind,
    Term,
    _as_int,
    _as_str,
    _expect_object,
    _opt_str,
    _require,
)
from .yomichan_audio import Forvo, Jpod, Nhk16, Shinmeikai8
from .yomitan import Frequency, Glossary, Pitch

Record = Union[Glossary, Frequency, Pitch, Forvo, Jpod, Nhk16, Shinmeikai8]

_RECORD_TYPES = {
    RecordKind.YOMITAN_GLOSSARY: Glossary,
    RecordKind.YOMITAN_FREQUENCY: Frequency,
    RecordKind.YOMITAN_PITCH: Pitch,
    RecordKind.YOMICHAN_AUDIO_FORVO: Forvo,
    RecordKind.YOMICHAN_AUDIO_JPOD: Jpod,
    RecordKind.YOMICHAN_AUDIO_NHK16: Nhk16,
    RecordKind.YOMICHAN_AUDIO_SHINMEIKAI8: Shinmeikai8,
}
_RECORD_KINDS = {record_type: kind for kind, record_type in _RECORD_TYPES.items()}


def record_kind(record: Record) -> RecordKind:
    """The kind of a record value."""
    try:
        return _RECORD_KINDS[type(record)]
    except KeyError:
        raise TypeError(f"{type(record).__name__} is not a record type") from None


def record_to_json(record: Record) -> dict:
    """JSON form of a record, tagged by its kind."""
    return {record_kind(record).value: record.to_json()}


def record_from_json(value: Any) -> Record:
    """Parse a record from its kind-tagged JSON form."""
    obj = _expect_object(value, "record")
    if len(obj) != 1:
        raise ValueError("record must have exactly one kind")
    ((tag, body),) = obj.items()
    try:
        kind = RecordKind(tag)
    except ValueError:
        raise ValueError(f"unknown record kind `{tag}`") from None
    return _RECORD_TYPES[kind].from_json(body)


def _opt_frequency(obj: dict, key: str) -> Optional[FrequencyValue]:
    value = obj.get(key)
    return None if value is None else FrequencyValue.from_json(value)


@dataclass
class RecordLookup:
    """A single record returned in response to a lookup."""

    bytes_scanned: int
    source: int
    term: Term
    record_id: int
    record: Record
    profile_sorting_frequency: Optional[FrequencyValue] = None
    source_sorting_frequency: Optional[FrequencyValue] = None

    def to_json(self) -> dict:
        return {
            "bytes_scanned": self.bytes_scanned,
            "source": self.source,
            "term": self.term.to_json(),
            "record_id": self.record_id,
            "record": record_to_json(self.record),
            "profile_sorting_frequency": None
            if self.profile_sorting_frequency is None
            else self.profile_sorting_frequency.to_json(),
            "source_sorting_frequency": None
            if self.source_sorting_frequency is None
            else self.source_sorting_frequency.to_json(),
        }

    @classmethod
    def from_json(cls, value: Any) -> RecordLookup:
        what = "record lookup"
        obj = _expect_object(value, what)
        bytes_scanned = _as_int(_require(obj, "bytes_scanned", what), "bytes_scanned")
        if bytes_scanned < 0:
            raise ValueError("`bytes_scanned` must not be negative")
        return cls(
            bytes_scanned=bytes_scanned,
            source=_as_int(_require(obj, "source", what), "source"),
            term=Term.from_json(_require(obj, "term", what)),
            record_id=_as_int(_require(obj, "record_id", what), "record_id"),
            record=record_from_json(_require(obj, "record", what)),
            profile_sorting_frequency=_opt_frequency(obj, "profile_sorting_frequency"),
            source_sorting_frequency=_opt_frequency(obj, "source_sorting_frequency"),
        )


@dataclass
class WindowFilter:
    """Identifies a window on the user's window manager."""

    id: Optional[int] = None
    title: Optional[str] = None
    wm_class: Optional[str] = None

    def to_json(self) -> dict:
        return {"id": self.id, "title": self.title, "wm_class": self.wm_class}

    @classmethod
    def from_json(cls, value: Any) -> WindowFilter:
        obj = _expect_object(value, "window filter")
        raw_id = obj.get("id")
        window_id = None
        if raw_id is not None:
            window_id = _as_int(raw_id, "id")
            if window_id < 0:
                raise ValueError("`id` must not be negative")
        return cls(
            id=window_id,
            title=_opt_str(obj, "title"),
            wm_class=_opt_str(obj, "wm_class"),
        )


@dataclass
class TexthookerSentence:
    """A sentence captured from a running process."""

    process_path: str = ""
    sentence: str = ""

    def to_json(self) -> dict:
        return {"process_path": self.process_path, "sentence": self.sentence}

    @classmethod
    def from_json(cls, value: Any) -> TexthookerSentence:
        what = "texthooker sentence"
        obj = _expect_object(value, what)
        return cls(
            process_path=_as_str(_require(obj, "process_path", what), "process_path"),
            sentence=_as_str(_require(obj, "sentence", what), "sentence"),
        )