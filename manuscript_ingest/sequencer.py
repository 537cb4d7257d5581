"""
sequencer.py – order chapters by declared number and enforce 1..N.

Works on drafts (plain tuples) so a bad declared number such as 0 is
reported as a numbering problem before any `Chapter` model is built.
"""

from __future__ import annotations

from typing import List, NamedTuple, Sequence

from .errors import ChapterSequenceError
from .models import Chapter


class ChapterDraft(NamedTuple):
    number: int
    title: str
    content: str

    def freeze(self) -> Chapter:
        return Chapter(number=self.number, title=self.title, content=self.content)


# ----------------------------------------------------------------------
def sort_chapters(chapters: Sequence[ChapterDraft]) -> List[ChapterDraft]:
    return sorted(chapters, key=lambda c: c.number)


# ----------------------------------------------------------------------
def check_contiguity(chapters: Sequence[ChapterDraft | Chapter]) -> None:
    """Raise ChapterSequenceError at the first position whose number is not i+1."""
    for i, ch in enumerate(chapters, 1):
        if ch.number != i:
            raise ChapterSequenceError(expected=i, actual=ch.number)
