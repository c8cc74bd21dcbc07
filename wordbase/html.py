"""HTML rendering of structured glossary content."""

from __future__ import annotations

import enum
import math
from decimal import Decimal
from typing import Any, Optional

from .structured import (
    Content,
    ContentStyle,
    Element,
    ElementTag,
    ImageElement,
    LinkElement,
    StyledElement,
    TableElement,
    UnstyledElement,
)

_MARKUP_ESCAPES = str.maketrans(
    {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;"}
)
_SAFE_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#x27;",
        "/": "&#x2F;",
    }
)

_CSS_PROPERTIES = (
    ("font_style", "font-style"),
    ("font_weight", "font-weight"),
    ("font_size", "font-size"),
    ("color", "color"),
    ("background", "background"),
    ("background_color", "background-color"),
    ("text_decoration_style", "text-decoration-style"),
    ("text_decoration_color", "text-decoration-color"),
    ("border_color", "border-color"),
    ("border_style", "border-style"),
    ("border_radius", "border-radius"),
    ("border_width", "border-width"),
    ("clip_path", "clip-path"),
    ("vertical_align", "vertical-align"),
    ("text_align", "text-align"),
    ("text_emphasis", "text-emphasis"),
    ("text_shadow", "text-shadow"),
    ("margin", "margin"),
    ("margin_top", "margin-top"),
    ("margin_left", "margin-left"),
    ("margin_right", "margin-right"),
    ("margin_bottom", "margin-bottom"),
    ("padding", "padding"),
    ("padding_top", "padding-top"),
    ("padding_left", "padding-left"),
    ("padding_right", "padding-right"),
    ("padding_bottom", "padding-bottom"),
    ("word_break", "word-break"),
    ("white_space", "white-space"),
    ("cursor", "cursor"),
    ("list_style_type", "list-style-type"),
)


def _escape(text: str) -> str:
    return text.translate(_MARKUP_ESCAPES)


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


def _display(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_number(value)
    if isinstance(value, enum.Enum):
        return str(value.value)
    return str(value)


def _attr(name: str, value: Any) -> str:
    if value is None:
        return ""
    return f' {name}="{_escape(_display(value))}"'


def _lines(text: str) -> list:
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def render_content(content: Content) -> str:
    """Render content as HTML; newlines in text become line breaks."""
    if isinstance(content, str):
        return "<br>".join(_escape(line) for line in _lines(content))
    if isinstance(content, Element):
        return render_element(content)
    return "".join(render_content(child) for child in content)


def _style_attr(style: Optional[ContentStyle]) -> str:
    return _attr("style", None if style is None else style_css(style))


def _wrap(tag: str, attrs: str, content: Optional[Content]) -> str:
    inner = "" if content is None else render_content(content)
    return f"<{tag}{attrs}>{inner}</{tag}>"


def _render_image(body: ImageElement) -> str:
    attrs = "".join(
        (
            _attr("path", body.path),
            _attr("width", body.width),
            _attr("height", body.height),
            _attr("preferred-width", body.preferred_width),
            _attr("preferred-height", body.preferred_height),
            _attr("title", body.title),
            _attr("alt", body.alt),
            _attr("description", body.description),
            _attr("pixelated", body.pixelated),
            _attr("image-rendering", body.image_rendering),
            _attr("image-appearance", body.image_appearance),
            _attr("background", body.background),
            _attr("collapsed", body.collapsed),
            _attr("collapsible", body.collapsible),
            _attr("vertical-align", body.vertical_align),
            _attr("border", body.border),
            _attr("border-radius", body.border_radius),
            _attr("size-units", body.size_units),
        )
    )
    return f"<img{attrs}>"


def render_element(element: Element) -> str:
    """Render a single element as HTML."""
    tag, body = element.tag, element.body
    if tag is ElementTag.BR:
        return "<br>"
    if isinstance(body, ImageElement):
        return _render_image(body)
    if isinstance(body, UnstyledElement):
        attrs = _attr("lang", body.lang)
    elif isinstance(body, TableElement):
        attrs = (
            _style_attr(body.style)
            + _attr("col-span", body.col_span)
            + _attr("row_span", body.row_span)
            + _attr("lang", body.lang)
        )
    elif isinstance(body, StyledElement):
        attrs = (
            _style_attr(body.style)
            + _attr("title", body.title)
            + _attr("open", body.open)
            + _attr("lang", body.lang)
        )
    elif isinstance(body, LinkElement):
        attrs = _attr("href", body.href) + _attr("lang", body.lang)
    else:
        raise TypeError(f"cannot render element body {type(body).__name__}")
    return _wrap(tag.value, attrs, body.content)


def style_css(style: ContentStyle) -> str:
    """Inline CSS declarations for the set properties of a style."""
    declarations = []
    for attr, prop in _CSS_PROPERTIES:
        value = getattr(style, attr)
        if value is not None:
            declarations.append(f"{prop}:{_display(value).translate(_SAFE_ESCAPES)};")
    return "".join(declarations)