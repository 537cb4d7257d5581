# tests/test_models.py
import pytest
from pydantic import ValidationError

from manuscript_ingest.models import Chapter, ContentRating, ParsedNovel, ValidationResult


def test_chapter_number_positive():
    with pytest.raises(ValidationError):
        Chapter(number=0, title="Zero", content="text")


def test_parsed_novel_frozen():
    novel = ParsedNovel(
        title="Demo",
        genre="Fantasy",
        blurb="Demo blurb text",
        chapters=[Chapter(number=1, title="Arrival", content="Hook")],
        content_rating=ContentRating.TEEN_13,
    )
    with pytest.raises(ValidationError):
        novel.title = "Other"
    assert novel.model_dump()["content_rating"] is ContentRating.TEEN_13


def test_validation_result_merge():
    a = ValidationResult.from_findings([], ["w1"])
    b = ValidationResult.from_findings(["e1"], ["w2"])
    merged = ValidationResult.merge(a, b)
    assert not merged.valid
    assert merged.errors == ["e1"]
    assert merged.warnings == ["w1", "w2"]
    assert ValidationResult.merge(a).valid
