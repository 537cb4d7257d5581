# tests/test_tags.py
import pytest

from manuscript_ingest.tags import normalize_tag, split_tags


@pytest.mark.parametrize("raw,expected", [
    ("ROMANCE", "romance"),
    ("  romance  ", "romance"),
    ("high   school", "high-school"),
    ("sci-fi@#$", "sci-fi"),
    ("romance!", "romance"),
    ("#high school", "#high-school"),
    ("#", ""),
    ("---", ""),
    ("", ""),
])
def test_normalize_tag(raw, expected):
    assert normalize_tag(raw) == expected


def test_split_drops_empties_and_duplicates():
    assert split_tags("Romance, , ROMANCE,fantasy,  ,romance!") == ["romance", "fantasy"]


def test_split_caps_at_twenty():
    tags = split_tags(", ".join(f"tag{i}" for i in range(30)))
    assert len(tags) == 20
    assert tags[0] == "tag0" and tags[-1] == "tag19"


def test_split_none():
    assert split_tags(None) == []
