# tests/test_sequencer.py
import pytest

from manuscript_ingest.errors import ChapterSequenceError
from manuscript_ingest.sequencer import ChapterDraft, check_contiguity, sort_chapters


def _drafts(*numbers):
    return [ChapterDraft(n, f"t{n}", "body") for n in numbers]


def test_sort_by_declared_number():
    assert [c.number for c in sort_chapters(_drafts(3, 1, 2))] == [1, 2, 3]


def test_contiguous_ok():
    check_contiguity(_drafts(1, 2, 3))


@pytest.mark.parametrize("numbers,expected,actual", [
    ((1, 3), 2, 3),
    ((2, 3), 1, 2),
    ((1, 1), 2, 1),
    ((0, 1), 1, 0),
])
def test_first_break_reported(numbers, expected, actual):
    with pytest.raises(ChapterSequenceError) as exc:
        check_contiguity(_drafts(*numbers))
    assert (exc.value.expected, exc.value.actual) == (expected, actual)


def test_freeze_builds_chapter():
    ch = ChapterDraft(1, "One", "text").freeze()
    assert (ch.number, ch.title, ch.content) == (1, "One", "text")
