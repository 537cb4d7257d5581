"""
content_file.py – parse the single-file bundle layout (content.txt).

    Tags: tag1, tag2
          tag3                (continuation lines allowed before Title:)
    Title: <single line>
    Genre: <single line>
    Blurb: <line 1>
           <line 2>           (continuation lines allowed before first Chapter)

    Chapter 1: <chapter title>
    <body>

    Chapter 2: <chapter title>
    <body>

Two passes: `locate_fields` finds the label lines and checks their order,
`parse_content_file` then slices values between the validated boundaries.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Tuple

from .errors import EmptyChapterError, FieldOrderError, MissingFieldError, NoChaptersError
from .formatter import normalize_content, unify_eol
from .models import ParsedNovel
from .sequencer import ChapterDraft, check_contiguity
from .tags import split_tags

logger = logging.getLogger(__name__)

LABELS = ("Tags:", "Title:", "Genre:", "Blurb:")

CHAPTER_RE = re.compile(r"^Chapter\s+(\d+)[：:]\s*(.*)$", re.I)


# ─── pass 1 ──────────────────────────────────────────────────────────────
def locate_fields(lines: List[str]) -> Tuple[Dict[str, int], int | None]:
    """
    Return ({label: line index}, first chapter header index).

    Scanning stops at the first chapter header, so labels placed inside the
    chapters are reported as missing.
    """
    found: Dict[str, int] = {}
    first_chapter: int | None = None
    for i, line in enumerate(lines):
        s = line.strip()
        if CHAPTER_RE.match(s):
            first_chapter = i
            break
        for label in LABELS:
            if label not in found and s.startswith(label):
                found[label] = i
                break

    for label in LABELS:
        if label not in found:
            raise MissingFieldError(label[:-1])

    positions = [found[label] for label in LABELS]
    if positions != sorted(positions):
        raise FieldOrderError([l[:-1] for l in sorted(LABELS, key=found.__getitem__)])

    return found, first_chapter


# ─── pass 2 helpers ──────────────────────────────────────────────────────
def _value(line: str, label: str) -> str:
    return line.strip()[len(label):].strip()


def _continuation(lines: List[str], start: int, end: int) -> List[str]:
    return [l.strip() for l in lines[start:end] if l.strip()]


def _chapters(lines: List[str], start: int) -> List[ChapterDraft]:
    drafts: List[ChapterDraft] = []
    current: Tuple[int, str, List[str]] | None = None

    def flush() -> None:
        num, title, body = current
        content = normalize_content("\n".join(body))
        if not content:
            raise EmptyChapterError(num)
        drafts.append(ChapterDraft(num, title, content))

    for line in lines[start:]:
        m = CHAPTER_RE.match(line.strip())
        if m:
            if current:
                flush()
            current = (int(m.group(1)), m.group(2).strip(), [])
        elif current:
            current[2].append(line)
    if current:
        flush()
    return drafts


# ─── public API ──────────────────────────────────────────────────────────
def parse_content_file(
    text: str, log: logging.Logger | logging.LoggerAdapter = logger
) -> ParsedNovel:
    lines = unify_eol(text).split("\n")
    log.info("content.txt scan lines=%d", len(lines))

    idx, first_chapter = locate_fields(lines)
    tags_i, title_i, genre_i, blurb_i = (idx[l] for l in LABELS)
    log.debug(
        "content.txt fields tags=%d title=%d genre=%d blurb=%d first_chapter=%s",
        tags_i, title_i, genre_i, blurb_i, first_chapter,
    )

    tags_raw = ", ".join(
        [_value(lines[tags_i], "Tags:"), *_continuation(lines, tags_i + 1, title_i)]
    )
    tags = split_tags(tags_raw)

    title = _value(lines[title_i], "Title:")
    genre = _value(lines[genre_i], "Genre:")

    blurb_end = first_chapter if first_chapter is not None else len(lines)
    blurb = "\n".join(
        [_value(lines[blurb_i], "Blurb:"), *_continuation(lines, blurb_i + 1, blurb_end)]
    ).strip()

    for field, value in (("Title", title), ("Genre", genre), ("Blurb", blurb)):
        if not value:
            raise MissingFieldError(field, f'field "{field}:" is empty')

    drafts = _chapters(lines, blurb_end)
    if not drafts:
        raise NoChaptersError()
    check_contiguity(drafts)

    log.info(
        "content.txt parsed title=%r genre=%r tags=%d blurb_chars=%d chapters=%d",
        title, genre, len(tags), len(blurb), len(drafts),
    )
    return ParsedNovel(
        title=title,
        genre=genre,
        blurb=blurb,
        tags=tags,
        chapters=[d.freeze() for d in drafts],
    )
