# tests/test_payload_validation.py
import json

import jsonschema
import pytest

from manuscript_ingest.models import Chapter, IngestResult, ParsedNovel, ValidationResult
from manuscript_ingest.pipeline import count_words, slugify_title, to_payload
from novel_import_cli.utils.validate import validate_export, validate_payload


def _result(**kw):
    novel = ParsedNovel(
        title="The Night Market!",
        genre="Paranormal",
        blurb="A food stall that only opens for ghosts.",
        tags=["ghosts", "food"],
        chapters=[Chapter(number=1, title="First Night", content="Granny Liu set out 十二 bowls.")],
    )
    base = dict(folder_name="night_market", layout="individual", cover="cover.jpg",
                novel=novel, validation=ValidationResult.from_findings([], []))
    base.update(kw)
    return IngestResult(**base)


def test_payload_matches_schema():
    payload = to_payload(_result())
    validate_payload(payload)
    assert payload["slug"] == "the-night-market"
    assert payload["contentRating"] == "ALL_AGES"
    assert payload["chapters"][0] == {
        "number": 1, "title": "First Night", "content": "Granny Liu set out 十二 bowls.",
    }


def test_export_file_roundtrip():
    text = json.dumps({"novels": [to_payload(_result())]})
    validate_export(text)


def test_schema_rejects_bad_payload():
    payload = to_payload(_result())
    payload["tags"] = ["dup", "dup"]
    with pytest.raises(jsonschema.ValidationError):
        validate_payload(payload)


def test_invalid_result_not_exportable():
    bad = _result(validation=ValidationResult.from_findings(["nope"], []))
    with pytest.raises(ValueError):
        to_payload(bad)


def test_slugify_title():
    assert slugify_title("  Hello,   World -- Again! ") == "hello-world-again"
    assert len(slugify_title("x" * 300)) == 100


def test_count_words_mixes_cjk_and_latin():
    chapters = [Chapter(number=1, title="t", content="Hello brave world 你好")]
    assert count_words(chapters) == 5
