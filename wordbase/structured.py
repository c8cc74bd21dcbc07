"""Structured glossary content: elements, styles and their JSON forms."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, fields
from typing import Any, Callable, ClassVar, NamedTuple, Optional, Union

from .core import _deny_unknown, _expect_object


class _KebabEnum(enum.Enum):
    """Enum whose JSON and display form is its kebab-case value."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _from_json(cls, value: Any, key: str):
        if not isinstance(value, str):
            raise ValueError(f"`{key}` must be a string")
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"unknown `{key}` value {value!r}") from None


class VerticalAlign(_KebabEnum):
    BASELINE = "baseline"
    SUB = "sub"
    SUPER = "super"
    TEXT_TOP = "text-top"
    TEXT_BOTTOM = "text-bottom"
    MIDDLE = "middle"
    TOP = "top"
    BOTTOM = "bottom"


class TextDecorationLine(_KebabEnum):
    UNDERLINE = "underline"
    OVERLINE = "overline"
    LINE_THROUGH = "line-through"


class TextDecorationStyle(_KebabEnum):
    SOLID = "solid"
    DOUBLE = "double"
    DOTTED = "dotted"
    DASHED = "dashed"
    WAVY = "wavy"


class FontStyle(_KebabEnum):
    NORMAL = "normal"
    ITALIC = "italic"


class FontWeight(_KebabEnum):
    NORMAL = "normal"
    BOLD = "bold"


class WordBreak(_KebabEnum):
    NORMAL = "normal"
    BREAK_ALL = "break-all"
    KEEP_ALL = "keep-all"


class TextAlign(_KebabEnum):
    START = "start"
    END = "end"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    JUSTIFY = "justify"


class SizeUnits(_KebabEnum):
    PX = "px"
    EM = "em"


class ImageRendering(_KebabEnum):
    AUTO = "auto"
    PIXELATED = "pixelated"
    CRISP_EDGES = "crisp-edges"


class ImageAppearance(_KebabEnum):
    AUTO = "auto"
    MONOCHROME = "monochrome"


class ElementTag(_KebabEnum):
    """The `tag` that selects an element variant."""

    BR = "br"
    RUBY = "ruby"
    RT = "rt"
    RP = "rp"
    TABLE = "table"
    THEAD = "thead"
    TBODY = "tbody"
    TFOOT = "tfoot"
    TR = "tr"
    TD = "td"
    TH = "th"
    SPAN = "span"
    DIV = "div"
    OL = "ol"
    UL = "ul"
    LI = "li"
    DETAILS = "details"
    SUMMARY = "summary"
    IMG = "img"
    A = "a"


# Content is a string, an Element, or a list of content.
Content = Union[str, "Element", list]


# field codecs


class _Codec(NamedTuple):
    parse: Callable[[Any, str], Any]
    dump: Callable[[Any], Any]
    required: bool = False
    nullable: bool = True


def _identity(value: Any) -> Any:
    return value


def _parse_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"`{key}` must be a string")
    return value


def _parse_int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"`{key}` must be an integer")
    return value


def _parse_float(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"`{key}` must be a number")
    return float(value)


def _parse_bool(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"`{key}` must be a boolean")
    return value


def _parse_data(value: Any, key: str) -> dict:
    if not isinstance(value, dict) or not all(
        isinstance(v, str) for v in value.values()
    ):
        raise ValueError(f"`{key}` must be an object of strings")
    return dict(value)


def _parse_number_or_string(value: Any, key: str) -> Union[float, str]:
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"`{key}` must be a number or a string")
    return float(value)


def _enum_codec(enum_type: type) -> _Codec:
    return _Codec(enum_type._from_json, lambda member: member.value)


def _parse_decoration_lines(value: Any, key: str) -> list:
    if not isinstance(value, list):
        raise ValueError(f"`{key}` must be a list")
    return [TextDecorationLine._from_json(item, key) for item in value]


_STR = _Codec(_parse_str, _identity)
_INT = _Codec(_parse_int, _identity)
_FLOAT = _Codec(_parse_float, _identity)
_BOOL = _Codec(_parse_bool, _identity)
_DATA = _Codec(_parse_data, dict)
_NUMBER_OR_STRING = _Codec(_parse_number_or_string, _identity)
_CONTENT = _Codec(lambda value, key: parse_content(value), lambda c: dump_content(c))
_STYLE = _Codec(
    lambda value, key: ContentStyle.from_json(value), lambda s: s.to_json()
)
_REQUIRED_STR = _Codec(_parse_str, _identity, required=True, nullable=False)
_DECORATION_LINES = _Codec(
    _parse_decoration_lines, lambda lines: [line.value for line in lines], nullable=False
)


def _opt(codec: _Codec) -> Any:
    return field(default=None, metadata={"codec": codec})


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


class _JsonFields:
    """JSON conversion driven by each dataclass field's codec."""

    _deny_unknown_fields: ClassVar[bool] = True

    def _fields_to_json(self) -> dict:
        out = {}
        for f in fields(self):
            value = getattr(self, f.name)
            out[_camel(f.name)] = None if value is None else f.metadata["codec"].dump(value)
        return out

    @classmethod
    def _fields_from_json(cls, obj: dict, what: str):
        known = {_camel(f.name): f for f in fields(cls)}
        if cls._deny_unknown_fields:
            _deny_unknown(obj, set(known), what)
        kwargs = {}
        for key, f in known.items():
            codec = f.metadata["codec"]
            if key not in obj:
                if codec.required:
                    raise ValueError(f"missing field `{key}` in {what}")
                continue
            raw = obj[key]
            if raw is None:
                if not codec.nullable:
                    raise ValueError(f"`{key}` in {what} must not be null")
                kwargs[f.name] = None
                continue
            kwargs[f.name] = codec.parse(raw, key)
        return cls(**kwargs)


@dataclass
class ContentStyle(_JsonFields):
    """CSS-like styling applied to structured content."""

    font_style: Optional[FontStyle] = _opt(_enum_codec(FontStyle))
    font_weight: Optional[FontWeight] = _opt(_enum_codec(FontWeight))
    font_size: Optional[str] = _opt(_STR)
    color: Optional[str] = _opt(_STR)
    background: Optional[str] = _opt(_STR)
    background_color: Optional[str] = _opt(_STR)
    text_decoration_line: list = field(
        default_factory=list, metadata={"codec": _DECORATION_LINES}
    )
    text_decoration_style: Optional[TextDecorationStyle] = _opt(
        _enum_codec(TextDecorationStyle)
    )
    text_decoration_color: Optional[str] = _opt(_STR)
    border_color: Optional[str] = _opt(_STR)
    border_style: Optional[str] = _opt(_STR)
    border_radius: Optional[str] = _opt(_STR)
    border_width: Optional[str] = _opt(_STR)
    clip_path: Optional[str] = _opt(_STR)
    vertical_align: Optional[VerticalAlign] = _opt(_enum_codec(VerticalAlign))
    text_align: Optional[TextAlign] = _opt(_enum_codec(TextAlign))
    text_emphasis: Optional[str] = _opt(_STR)
    text_shadow: Optional[str] = _opt(_STR)
    margin: Optional[str] = _opt(_STR)
    margin_top: Optional[Union[float, str]] = _opt(_NUMBER_OR_STRING)
    margin_left: Optional[Union[float, str]] = _opt(_NUMBER_OR_STRING)
    margin_right: Optional[Union[float, str]] = _opt(_NUMBER_OR_STRING)
    margin_bottom: Optional[Union[float, str]] = _opt(_NUMBER_OR_STRING)
    padding: Optional[str] = _opt(_STR)
    padding_top: Optional[str] = _opt(_STR)
    padding_left: Optional[str] = _opt(_STR)
    padding_right: Optional[str] = _opt(_STR)
    padding_bottom: Optional[str] = _opt(_STR)
    word_break: Optional[WordBreak] = _opt(_enum_codec(WordBreak))
    white_space: Optional[str] = _opt(_STR)
    cursor: Optional[str] = _opt(_STR)
    list_style_type: Optional[str] = _opt(_STR)

    def to_json(self) -> dict:
        return self._fields_to_json()

    @classmethod
    def from_json(cls, value: Any) -> ContentStyle:
        return cls._fields_from_json(_expect_object(value, "style"), "style")


@dataclass
class LineBreakElement(_JsonFields):
    data: Optional[dict] = _opt(_DATA)


@dataclass
class UnstyledElement(_JsonFields):
    content: Optional[Content] = _opt(_CONTENT)
    data: Optional[dict] = _opt(_DATA)
    lang: Optional[str] = _opt(_STR)


@dataclass
class TableElement(_JsonFields):
    content: Optional[Content] = _opt(_CONTENT)
    data: Optional[dict] = _opt(_DATA)
    col_span: Optional[int] = _opt(_INT)
    row_span: Optional[int] = _opt(_INT)
    style: Optional[ContentStyle] = _opt(_STYLE)
    lang: Optional[str] = _opt(_STR)


@dataclass
class StyledElement(_JsonFields):
    content: Optional[Content] = _opt(_CONTENT)
    data: Optional[dict] = _opt(_DATA)
    style: Optional[ContentStyle] = _opt(_STYLE)
    title: Optional[str] = _opt(_STR)
    open: Optional[bool] = _opt(_BOOL)
    lang: Optional[str] = _opt(_STR)


@dataclass
class ImageElement(_JsonFields):
    """Image element; unknown fields are tolerated when parsing."""

    _deny_unknown_fields: ClassVar[bool] = False

    data: Optional[dict] = _opt(_DATA)
    path: str = field(default="", metadata={"codec": _REQUIRED_STR})
    width: Optional[float] = _opt(_FLOAT)
    height: Optional[float] = _opt(_FLOAT)
    preferred_width: Optional[float] = _opt(_FLOAT)
    preferred_height: Optional[float] = _opt(_FLOAT)
    title: Optional[str] = _opt(_STR)
    alt: Optional[str] = _opt(_STR)
    description: Optional[str] = _opt(_STR)
    pixelated: Optional[bool] = _opt(_BOOL)
    image_rendering: Optional[ImageRendering] = _opt(_enum_codec(ImageRendering))
    image_appearance: Optional[ImageAppearance] = _opt(_enum_codec(ImageAppearance))
    background: Optional[bool] = _opt(_BOOL)
    collapsed: Optional[bool] = _opt(_BOOL)
    collapsible: Optional[bool] = _opt(_BOOL)
    vertical_align: Optional[VerticalAlign] = _opt(_enum_codec(VerticalAlign))
    border: Optional[str] = _opt(_STR)
    border_radius: Optional[str] = _opt(_STR)
    size_units: Optional[SizeUnits] = _opt(_enum_codec(SizeUnits))


@dataclass
class LinkElement(_JsonFields):
    content: Optional[Content] = _opt(_CONTENT)
    href: str = field(default="", metadata={"codec": _REQUIRED_STR})
    lang: Optional[str] = _opt(_STR)


_TAG_TYPES = {
    ElementTag.BR: LineBreakElement,
    ElementTag.RUBY: UnstyledElement,
    ElementTag.RT: UnstyledElement,
    ElementTag.RP: UnstyledElement,
    ElementTag.TABLE: UnstyledElement,
    ElementTag.THEAD: UnstyledElement,
    ElementTag.TBODY: UnstyledElement,
    ElementTag.TFOOT: UnstyledElement,
    ElementTag.TR: UnstyledElement,
    ElementTag.TD: TableElement,
    ElementTag.TH: TableElement,
    ElementTag.SPAN: StyledElement,
    ElementTag.DIV: StyledElement,
    ElementTag.OL: StyledElement,
    ElementTag.UL: StyledElement,
    ElementTag.LI: StyledElement,
    ElementTag.DETAILS: StyledElement,
    ElementTag.SUMMARY: StyledElement,
    ElementTag.IMG: ImageElement,
    ElementTag.A: LinkElement,
}


@dataclass
class Element:
    """A tagged structured-content element."""

    tag: ElementTag
    body: Union[
        LineBreakElement,
        UnstyledElement,
        TableElement,
        StyledElement,
        ImageElement,
        LinkElement,
    ]

    def __post_init__(self) -> None:
        expected = _TAG_TYPES[self.tag]
        if not isinstance(self.body, expected):
            raise TypeError(
                f"`{self.tag.value}` element needs a {expected.__name__} body"
            )

    def to_json(self) -> dict:
        return {"tag": self.tag.value, **self.body._fields_to_json()}

    @classmethod
    def from_json(cls, value: Any) -> Element:
        obj = _expect_object(value, "element")
        if "tag" not in obj:
            raise ValueError("missing field `tag` in element")
        tag = ElementTag._from_json(obj["tag"], "tag")
        rest = {key: val for key, val in obj.items() if key != "tag"}
        body = _TAG_TYPES[tag]._fields_from_json(rest, f"`{tag.value}` element")
        return cls(tag, body)


def parse_content(value: Any) -> Content:
    """Parse JSON content: a string, an element object, or a list of content."""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return Element.from_json(value)
    if isinstance(value, list):
        return [parse_content(item) for item in value]
    raise ValueError("content must be a string, an element or a list of content")


def dump_content(content: Content) -> Any:
    """Convert content back into its JSON form."""
    if isinstance(content, str):
        return content
    if isinstance(content, Element):
        return content.to_json()
    if isinstance(content, list):
        return [dump_content(item) for item in content]
    raise TypeError("content must be a str, an Element or a list of content")