import pytest

from wordbase.structured import (
    ContentStyle,
    Element,
    ElementTag,
    FontStyle,
    FontWeight,
    ImageAppearance,
    ImageElement,
    ImageRendering,
    LineBreakElement,
    LinkElement,
    SizeUnits,
    StyledElement,
    TableElement,
    TextAlign,
    TextDecorationLine,
    TextDecorationStyle,
    UnstyledElement,
    VerticalAlign,
    WordBreak,
    dump_content,
    parse_content,
)

STYLE_ENUMS = [
    ("fontStyle", "font_style", FontStyle),
    ("fontWeight", "font_weight", FontWeight),
    ("textDecorationStyle", "text_decoration_style", TextDecorationStyle),
    ("verticalAlign", "vertical_align", VerticalAlign),
    ("textAlign", "text_align", TextAlign),
    ("wordBreak", "word_break", WordBreak),
]

IMAGE_ENUMS = [
    ("imageRendering", "image_rendering", ImageRendering),
    ("imageAppearance", "image_appearance", ImageAppearance),
    ("sizeUnits", "size_units", SizeUnits),
    ("verticalAlign", "vertical_align", VerticalAlign),
]

REQUIRED_TAG_FIELDS = {
    "img": {"path": "p.png"},
    "a": {"href": "h"},
}

SAMPLE = [
    "plain",
    {
        "tag": "span",
        "content": ["a", {"tag": "br"}],
        "style": {"fontWeight": "bold", "marginTop": 2},
        "lang": "ja",
    },
    {"tag": "td", "content": "cell", "colSpan": 2},
    {"tag": "img", "path": "pic.png", "width": 10},
    {"tag": "a", "href": "?query=x", "content": "link"},
]


@pytest.mark.parametrize("key,attr,enum_type", STYLE_ENUMS)
def test_style_enum_values_parse_and_display(key, attr, enum_type):
    for member in enum_type:
        style = ContentStyle.from_json({key: member.value})
        assert getattr(style, attr) is member
        assert style.to_json()[key] == member.value
        assert str(member) == member.value
        assert "_" not in member.value


def test_decoration_line_values_parse_and_display():
    for member in TextDecorationLine:
        style = ContentStyle.from_json({"textDecorationLine": [member.value]})
        assert style.text_decoration_line == [member]
        assert style.to_json()["textDecorationLine"] == [member.value]
        assert str(member) == member.value
        assert "_" not in member.value


@pytest.mark.parametrize("key,attr,enum_type", IMAGE_ENUMS)
def test_image_enum_values_parse_and_display(key, attr, enum_type):
    for member in enum_type:
        elem = Element.from_json({"tag": "img", "path": "p.png", key: member.value})
        assert getattr(elem.body, attr) is member
        assert elem.to_json()[key] == member.value
        assert str(member) == member.value
        assert "_" not in member.value


def test_every_tag_parses_and_displays():
    for member in ElementTag:
        value = {"tag": member.value, **REQUIRED_TAG_FIELDS.get(member.value, {})}
        elem = Element.from_json(value)
        assert elem.tag is member
        assert elem.to_json()["tag"] == member.value
        assert str(member) == member.value
        assert "_" not in member.value


def test_content_round_trip():
    parsed = parse_content(SAMPLE)
    dumped = dump_content(parsed)
    assert parse_content(dumped) == parsed
    assert dumped[0] == "plain"


def test_parsed_structure():
    parsed = parse_content(SAMPLE)
    span = parsed[1]
    assert span.tag is ElementTag.SPAN
    assert span.body.lang == "ja"
    assert span.body.style.font_weight is FontWeight.BOLD
    assert span.body.style.margin_top == 2.0
    assert span.body.content[1] == Element(ElementTag.BR, LineBreakElement())
    assert parsed[2].body.col_span == 2
    assert parsed[3].body.path == "pic.png"
    assert parsed[3].body.width == 10.0
    assert parsed[4].body.href == "?query=x"


def test_to_json_keeps_every_field():
    elem = Element(ElementTag.RUBY, UnstyledElement(content="x"))
    assert elem.to_json() == {"tag": "ruby", "content": "x", "data": None, "lang": None}


def test_table_uses_camel_case_keys():
    out = Element(ElementTag.TD, TableElement(col_span=3)).to_json()
    assert out["colSpan"] == 3
    assert "col_span" not in out


def test_unknown_field_rejected():
    with pytest.raises(ValueError):
        Element.from_json({"tag": "span", "bogus": 1})


def test_unknown_tag_rejected():
    with pytest.raises(ValueError):
        Element.from_json({"tag": "blink"})


def test_missing_tag_rejected():
    with pytest.raises(ValueError):
        Element.from_json({"content": "x"})


def test_image_tolerates_unknown_fields():
    elem = Element.from_json({"tag": "img", "path": "p.png", "extra": True})
    assert elem.body == ImageElement(path="p.png")


def test_image_requires_path():
    with pytest.raises(ValueError):
        Element.from_json({"tag": "img"})


def test_link_requires_href():
    with pytest.raises(ValueError):
        Element.from_json({"tag": "a", "content": "x"})


def test_bad_enum_value_rejected():
    with pytest.raises(ValueError):
        ContentStyle.from_json({"fontStyle": "oblique-ish"})


def test_style_round_trip():
    style = ContentStyle(
        font_weight=FontWeight.BOLD,
        text_decoration_line=[TextDecorationLine.UNDERLINE],
        margin_left="1em",
        word_break=WordBreak.KEEP_ALL,
    )
    assert ContentStyle.from_json(style.to_json()) == style


def test_style_decoration_line_defaults_to_empty():
    style = ContentStyle.from_json({})
    assert style.text_decoration_line == []
    assert style.to_json()["textDecorationLine"] == []


def test_style_decoration_line_not_nullable():
    with pytest.raises(ValueError):
        ContentStyle.from_json({"textDecorationLine": None})


def test_number_or_string():
    assert ContentStyle.from_json({"marginTop": 3}).margin_top == 3.0
    assert ContentStyle.from_json({"marginTop": "1em"}).margin_top == "1em"
    with pytest.raises(ValueError):
        ContentStyle.from_json({"marginTop": True})


def test_data_parsing():
    elem = Element.from_json({"tag": "div", "data": {"k": "v"}})
    assert elem.body.data == {"k": "v"}
    with pytest.raises(ValueError):
        Element.from_json({"tag": "div", "data": {"k": 1}})


def test_null_optional_fields():
    elem = Element.from_json({"tag": "li", "content": None, "open": None})
    assert elem.body == StyledElement()


def test_body_must_match_tag():
    with pytest.raises(TypeError):
        Element(ElementTag.SPAN, LinkElement(href="x"))


def test_invalid_content_rejected():
    with pytest.raises(ValueError):
        parse_content(5)
    with pytest.raises(TypeError):
        dump_content(5)