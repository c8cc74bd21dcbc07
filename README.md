# wordbase

Data types for a dictionary and word lookup service: terms, dictionaries,
profiles, lookup records, and the Yomitan and Yomichan audio record formats.
Every type converts to and from plain JSON-compatible values (`to_json` /
`from_json`), and Yomitan structured glossary content can be rendered to HTML.

Parsing is strict. Missing required fields, values of the wrong type, unknown
enum values and, for most types, unknown fields raise `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Terms

A term has a headword, a reading, or both. Each part is a `NormString`: a
non-empty string with no leading or trailing whitespace.

```python
from wordbase.core import NormString, Term

term = Term.from_headword("読む")
term.set_reading(NormString.new("よむ"))
print(term)            # 読む (よむ)
print(term.to_json())  # {'headword': '読む', 'reading': 'よむ'}

Term.from_headword("   ")  # None: blank strings do not make a term
```

`NormString.new` returns `None` for a blank string, while
`NormString.from_json` raises `ValueError`.

## Profiles and dictionaries

```python
from wordbase.core import ProfileConfig

config = ProfileConfig.from_json({"name": "Reading"})
config.merge_from(ProfileConfig.from_json({"anki_deck": "Mining"}))
```

`merge_from` copies over only the settings that are set in the other config.
`Dictionary`, `DictionaryMeta`, `Profile` and `FrequencyValue` follow the same
`to_json` / `from_json` pattern. `DictionaryKind` and `RecordKind` list the
supported dictionary and record kinds; `RecordKind.dictionary_kind()` gives the
dictionary kind a record kind belongs to.

## Records

Records are values from `wordbase.yomitan` (`Glossary`, `Frequency`, `Pitch`)
and `wordbase.yomichan_audio` (`Forvo`, `Jpod`, `Nhk16`, `Shinmeikai8`).
`wordbase.records` tells their kind and moves them to and from JSON, tagged by
kind:

```python
from wordbase.records import record_from_json, record_kind, record_to_json

record = record_from_json({"YomitanPitch": {"position": 0, "nasal": [], "devoice": []}})
record_kind(record)    # RecordKind.YOMITAN_PITCH
record_to_json(record)
```

`RecordLookup` describes a single lookup result; `WindowFilter` and
`TexthookerSentence` are small message types with the same JSON methods.

## Rendering structured content

`wordbase.structured` parses glossary content (`parse_content`,
`dump_content`, `Element`, `ContentStyle` and the element body types), and
`wordbase.html` renders it:

```python
from wordbase.structured import parse_content
from wordbase.html import render_content

content = parse_content({"tag": "span", "content": "line one\nline two"})
render_content(content)  # '<span>line one<br>line two</span>'
```

`render_element` renders a single `Element`, and `style_css` turns a
`ContentStyle` into inline CSS declarations.

## What this package does not do

This package holds the data types only. It has no lookup engine, no
dictionary importer, no database or other storage, no HTTP server and no
command-line program. Lookups, deinflection, profile storage and Anki
integration must be provided by the application that uses these types.