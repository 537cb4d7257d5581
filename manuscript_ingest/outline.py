"""
outline.py – pull fallback metadata out of `_full_outline.txt`.

Format:

    ===== TITLE =====
    Title text
    ===== BLURB =====
    Blurb text...
    ===== CATEGORY =====
    Romance
    ===== AGE_CATEGORY =====
    Mature 16+
    ===== TAGS =====
    tag1, tag2, tag3

Only the sections below are kept; anything else (e.g. CHAPTER_OUTLINE) is
ignored. A repeated section overwrites the earlier one.
"""

from __future__ import annotations

import logging
import re

from .models import OutlineFields

logger = logging.getLogger(__name__)

SECTION_RE = re.compile(r"=====\s*([A-Za-z_]+)\s*=====(.*?)(?======|\Z)", re.S)

SECTION_FIELDS = {
    "TITLE":        "title",
    "BLURB":        "blurb",
    "CATEGORY":     "category",
    "AGE_CATEGORY": "age_category",
    "TAGS":         "tags",
}


def parse_outline(text: str | None, log: logging.Logger | logging.LoggerAdapter = logger) -> OutlineFields:
    found: dict[str, str] = {}
    for m in SECTION_RE.finditer(text or ""):
        name = m.group(1).upper()
        field = SECTION_FIELDS.get(name)
        if field is None:
            log.debug("outline section ignored name=%s", name)
            continue
        found[field] = m.group(2).strip()
        log.debug("outline section name=%s chars=%d", name, len(found[field]))

    log.info("outline parsed fields=%s", ",".join(sorted(found)) or "-")
    return OutlineFields(**found)
