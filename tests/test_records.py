import pytest

from wordbase.core import FrequencyValue, RecordKind, Term
from wordbase.records import (
    RecordLookup,
    TexthookerSentence,
    WindowFilter,
    record_from_json,
    record_kind,
    record_to_json,
)
from wordbase.yomichan_audio import Audio, AudioFormat, Forvo, Jpod, Nhk16, Shinmeikai8
from wordbase.yomitan import Frequency, Glossary, Pitch

AUDIO = Audio(AudioFormat.OPUS, "AAAA")


@pytest.mark.parametrize(
    "record, kind",
    [
        (Glossary(popularity=0), RecordKind.YOMITAN_GLOSSARY),
        (Frequency(), RecordKind.YOMITAN_FREQUENCY),
        (Pitch(position=0), RecordKind.YOMITAN_PITCH),
        (Forvo("speaker", AUDIO), RecordKind.YOMICHAN_AUDIO_FORVO),
        (Jpod(AUDIO), RecordKind.YOMICHAN_AUDIO_JPOD),
        (Nhk16(AUDIO), RecordKind.YOMICHAN_AUDIO_NHK16),
        (Shinmeikai8(AUDIO), RecordKind.YOMICHAN_AUDIO_SHINMEIKAI8),
    ],
)
def test_record_kind_and_round_trip(record, kind):
    assert record_kind(record) == kind
    data = record_to_json(record)
    assert list(data) == [kind.value]
    assert record_from_json(data) == record


def test_record_json_is_tagged_by_kind():
    pitch = Pitch(position=2, nasal=[], devoice=[])
    assert record_to_json(pitch) == {"YomitanPitch": pitch.to_json()}


def test_record_kind_rejects_non_record():
    with pytest.raises(TypeError):
        record_kind("text")


def test_record_from_json_unknown_kind():
    with pytest.raises(ValueError):
        record_from_json({"Unknown": {}})


def test_record_from_json_needs_single_kind():
    with pytest.raises(ValueError):
        record_from_json({})


def _lookup():
    return RecordLookup(
        bytes_scanned=6,
        source=1,
        term=Term.new("読む", "よむ"),
        record_id=42,
        record=Frequency(FrequencyValue.rank(100), "100"),
        profile_sorting_frequency=FrequencyValue.occurrence(7),
    )


def test_record_lookup_round_trip():
    lookup = _lookup()
    again = RecordLookup.from_json(lookup.to_json())
    assert again == lookup
    assert again.source_sorting_frequency is None


def test_record_lookup_optional_frequencies_may_be_missing():
    data = _lookup().to_json()
    del data["profile_sorting_frequency"]
    del data["source_sorting_frequency"]
    lookup = RecordLookup.from_json(data)
    assert lookup.profile_sorting_frequency is None
    assert lookup.term.headword == "読む"


def test_record_lookup_missing_record_rejected():
    data = _lookup().to_json()
    del data["record"]
    with pytest.raises(ValueError):
        RecordLookup.from_json(data)


def test_window_filter_defaults_from_empty_object():
    assert WindowFilter.from_json({}) == WindowFilter()


def test_window_filter_round_trip():
    window = WindowFilter(id=5, title="Player", wm_class="mpv")
    assert WindowFilter.from_json(window.to_json()) == window


def test_window_filter_negative_id_rejected():
    with pytest.raises(ValueError):
        WindowFilter.from_json({"id": -1})


def test_texthooker_sentence_round_trip():
    sentence = TexthookerSentence("/usr/bin/game", "本を読む")
    assert TexthookerSentence.from_json(sentence.to_json()) == sentence


def test_texthooker_sentence_requires_fields():
    with pytest.raises(ValueError):
        TexthookerSentence.from_json({"sentence": "本"})