import pytest

from wordbase.core import FrequencyValue
from wordbase.structured import Element
from wordbase.yomitan import Frequency, Glossary, GlossaryTag, Pitch


def _tag():
    return GlossaryTag(name="n", category="partOfSpeech", description="noun", order=1)


def test_glossary_tag_round_trip():
    tag = _tag()
    assert GlossaryTag.from_json(tag.to_json()) == tag


def test_glossary_tag_unknown_field_rejected():
    data = _tag().to_json()
    data["extra"] = 1
    with pytest.raises(ValueError):
        GlossaryTag.from_json(data)


def test_glossary_tag_missing_field_rejected():
    data = _tag().to_json()
    del data["order"]
    with pytest.raises(ValueError):
        GlossaryTag.from_json(data)


def test_glossary_round_trip_with_structured_content():
    span = Element.from_json({"tag": "span", "content": "to read"})
    glossary = Glossary(popularity=3, tags=[_tag()], content=["plain", span, ["a", "b"]])
    again = Glossary.from_json(glossary.to_json())
    assert again == glossary
    assert again.content[0] == "plain"
    assert again.content[1].body.content == "to read"


def test_glossary_requires_content():
    with pytest.raises(ValueError):
        Glossary.from_json({"popularity": 0, "tags": []})


def test_glossary_rejects_bad_content():
    with pytest.raises(ValueError):
        Glossary.from_json({"popularity": 0, "tags": [], "content": [5]})


def test_frequency_json_form():
    freq = Frequency(FrequencyValue.rank(10), "10")
    assert freq.to_json() == {"value": {"Rank": 10}, "display": "10"}
    assert Frequency.from_json(freq.to_json()) == freq


def test_frequency_defaults_from_empty_object():
    freq = Frequency.from_json({})
    assert freq == Frequency()
    assert freq.value is None and freq.display is None


def test_frequency_unknown_field_rejected():
    with pytest.raises(ValueError):
        Frequency.from_json({"value": None, "rank": 1})


def test_pitch_round_trip():
    pitch = Pitch(position=1, nasal=[2], devoice=[1, 3])
    assert Pitch.from_json(pitch.to_json()) == pitch


def test_pitch_negative_position_rejected():
    with pytest.raises(ValueError):
        Pitch.from_json({"position": -1, "nasal": [], "devoice": []})


def test_pitch_nasal_must_be_list():
    with pytest.raises(ValueError):
        Pitch.from_json({"position": 0, "nasal": 1, "devoice": []})