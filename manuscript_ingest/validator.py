"""
validator.py – soft checks on a parsed novel.

Every rule runs and appends to `errors` or `warnings`; nothing here raises,
so one pass shows the writer everything that needs fixing.
"""

from __future__ import annotations

import logging
from typing import List

from .limits import (
    BLURB_LEN,
    CONTENT_FILE_NAME,
    LONG_CHAPTER_CHARS,
    MAX_CHAPTERS,
    MAX_CONTENT_BYTES,
    MAX_TAGS,
    MIN_CHAPTER_CHARS,
    MIN_CHAPTERS,
    TITLE_LEN,
)
from .models import ParsedNovel, ValidationResult

logger = logging.getLogger(__name__)


def _bounds(label: str, value: str, lo: int, hi: int, errors: List[str]) -> None:
    n = len(value or "")
    if n < lo:
        errors.append(f"{label} must be at least {lo} characters (got {n})")
    if n > hi:
        errors.append(f"{label} must be at most {hi} characters (got {n})")


def validate_novel(
    novel: ParsedNovel, log: logging.Logger | logging.LoggerAdapter = logger
) -> ValidationResult:
    errors: List[str] = []
    warnings: List[str] = []

    _bounds("title", novel.title, *TITLE_LEN, errors)
    _bounds("blurb", novel.blurb, *BLURB_LEN, errors)

    if not novel.tags:
        warnings.append("no tags: add at least 1 tag")
    if len(novel.tags) > MAX_TAGS:
        errors.append(f"at most {MAX_TAGS} tags allowed (got {len(novel.tags)})")

    n = len(novel.chapters)
    if n < MIN_CHAPTERS:
        errors.append(f"at least {MIN_CHAPTERS} chapter required")
    if n > MAX_CHAPTERS:
        errors.append(f"at most {MAX_CHAPTERS} chapters allowed (got {n})")

    for ch in novel.chapters:
        if not ch.title.strip():
            errors.append(f"chapter {ch.number}: title is empty")
        if len(ch.content.strip()) < MIN_CHAPTER_CHARS:
            errors.append(
                f"chapter {ch.number}: content too short (at least {MIN_CHAPTER_CHARS} characters)"
            )
        if len(ch.content) > LONG_CHAPTER_CHARS:
            warnings.append(
                f"chapter {ch.number}: content is long ({len(ch.content):,} characters), "
                "may slow down loading"
            )

    result = ValidationResult.from_findings(errors, warnings)
    log.info(
        "validated title=%r valid=%s errors=%d warnings=%d",
        novel.title, result.valid, len(errors), len(warnings),
    )
    return result


def validate_content_text(name: str, text: str) -> ValidationResult:
    """File-level checks on content.txt before it is parsed."""
    errors: List[str] = []
    if name != CONTENT_FILE_NAME:
        errors.append(f"content file must be named {CONTENT_FILE_NAME} (got {name})")
    size = len(text.encode("utf-8"))
    if size == 0:
        errors.append("content file is empty")
    if size > MAX_CONTENT_BYTES:
        errors.append(
            f"content file exceeds {MAX_CONTENT_BYTES // (1024 * 1024)}MB (got {size:,} bytes)"
        )
    return ValidationResult.from_findings(errors, [])
