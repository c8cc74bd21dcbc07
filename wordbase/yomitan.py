"""Yomitan dictionary records: glossaries, frequencies and pitch accents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .core import (
    FrequencyValue,
    _as_int,
    _as_str,
    _deny_unknown,
    _expect_object,
    _opt_str,
    _require,
)
from .structured import dump_content, parse_content


def _as_uint(value: Any, key: str) -> int:
    number = _as_int(value, key)
    if number < 0:
        raise ValueError(f"`{key}` must not be negative")
    return number


def _uint_list(value: Any, key: str) -> list:
    if not isinstance(value, list):
        raise ValueError(f"`{key}` must be a list")
    return [_as_uint(item, key) for item in value]


@dataclass
class GlossaryTag:
    """Categorises a glossary entry for a term."""

    name: str
    category: str
    description: str
    order: int

    def to_json(self) -> dict:
        return {
            "name": self.name,
            "category": self.category,
            "description": self.description,
            "order": self.order,
        }

    @classmethod
    def from_json(cls, value: Any) -> GlossaryTag:
        what = "glossary tag"
        obj = _expect_object(value, what)
        _deny_unknown(obj, {"name", "category", "description", "order"}, what)
        return cls(
            name=_as_str(_require(obj, "name", what), "name"),
            category=_as_str(_require(obj, "category", what), "category"),
            description=_as_str(_require(obj, "description", what), "description"),
            order=_as_int(_require(obj, "order", what), "order"),
        )


@dataclass
class Glossary:
    """What a term means, written in the dictionary's source language."""

    popularity: int
    tags: list = field(default_factory=list)
    content: list = field(default_factory=list)

    def to_json(self) -> dict:
        return {
            "popularity": self.popularity,
            "tags": [tag.to_json() for tag in self.tags],
            "content": [dump_content(item) for item in self.content],
        }

    @classmethod
    def from_json(cls, value: Any) -> Glossary:
        what = "glossary"
        obj = _expect_object(value, what)
        _deny_unknown(obj, {"popularity", "tags", "content"}, what)
        tags = _require(obj, "tags", what)
        content = _require(obj, "content", what)
        if not isinstance(tags, list):
            raise ValueError("`tags` must be a list")
        if not isinstance(content, list):
            raise ValueError("`content` must be a list")
        return cls(
            popularity=_as_int(_require(obj, "popularity", what), "popularity"),
            tags=[GlossaryTag.from_json(tag) for tag in tags],
            content=[parse_content(item) for item in content],
        )


@dataclass
class Frequency:
    """How often a term appears in the dictionary's corpus."""

    value: Optional[FrequencyValue] = None
    display: Optional[str] = None

    def to_json(self) -> dict:
        return {
            "value": None if self.value is None else self.value.to_json(),
            "display": self.display,
        }

    @classmethod
    def from_json(cls, value: Any) -> Frequency:
        what = "frequency"
        obj = _expect_object(value, what)
        _deny_unknown(obj, {"value", "display"}, what)
        raw = obj.get("value")
        return cls(
            value=None if raw is None else FrequencyValue.from_json(raw),
            display=_opt_str(obj, "display"),
        )


@dataclass
class Pitch:
    """Japanese pitch accent information."""

    position: int
    nasal: list = field(default_factory=list)
    devoice: list = field(default_factory=list)

    def to_json(self) -> dict:
        return {
            "position": self.position,
            "nasal": list(self.nasal),
            "devoice": list(self.devoice),
        }

    @classmethod
    def from_json(cls, value: Any) -> Pitch:
        what = "pitch"
        obj = _expect_object(value, what)
        _deny_unknown(obj, {"position", "nasal", "devoice"}, what)
        return cls(
            position=_as_uint(_require(obj, "position", what), "position"),
            nasal=_uint_list(_require(obj, "nasal", what), "nasal"),
            devoice=_uint_list(_require(obj, "devoice", what), "devoice"),
        )