# manuscript_ingest/tags.py
from __future__ import annotations

import re
from typing import List

from .limits import MAX_TAGS

_DISALLOWED = re.compile(r"[^\w\s-]")
_SEPARATORS = re.compile(r"[\s_]+")
_HYPHENS    = re.compile(r"-{2,}")


def normalize_tag(raw: str) -> str:
    """
    Canonical tag form: lower-case, whitespace -> '-', punctuation dropped,
    leading '#' preserved.  Returns "" when nothing usable is left.

        normalize_tag("  High School ") -> "high-school"
        normalize_tag("#sci-fi@#$")     -> "#sci-fi"
    """
    t = raw.strip().lower()
    hashtag = t.startswith("#")
    t = _DISALLOWED.sub("", t)
    t = _SEPARATORS.sub("-", t)
    t = _HYPHENS.sub("-", t).strip("-")
    if not t:
        return ""
    return f"#{t}" if hashtag else t


def split_tags(raw: str | None, limit: int = MAX_TAGS) -> List[str]:
    """Comma-split, normalise, drop empties and duplicates, keep the first *limit*."""
    out: List[str] = []
    for piece in (raw or "").split(","):
        tag = normalize_tag(piece)
        if tag and tag not in out:
            out.append(tag)
    return out[:limit]
