"""
age_rating.py – map free-form age text (age.txt / AGE_CATEGORY) to a ContentRating.

Substring heuristic: the table is scanned top to bottom and the first rating
with a keyword contained in the text wins, so "Mature 16+ but Explicit"
resolves to EXPLICIT_18.
"""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

from .models import ContentRating

logger = logging.getLogger(__name__)

AgeRule = Tuple[ContentRating, Tuple[str, ...]]

# highest severity first
AGE_RATING_RULES: Tuple[AgeRule, ...] = (
    (ContentRating.EXPLICIT_18, ("explicit", "18+", "18", "adult")),
    (ContentRating.MATURE_16,   ("mature", "16+", "16")),
    (ContentRating.TEEN_13,     ("teen", "13+", "13")),
    (ContentRating.ALL_AGES,    ("all ages", "all")),
)

DEFAULT_RATING = ContentRating.ALL_AGES


def classify_age_rating(
    text: str | None,
    rules: Sequence[AgeRule] = AGE_RATING_RULES,
    default: ContentRating = DEFAULT_RATING,
    log: logging.Logger | logging.LoggerAdapter = logger,
) -> ContentRating:
    normalized = (text or "").lower().strip()
    for rating, keywords in rules:
        hit = next((k for k in keywords if k in normalized), None)
        if hit is not None:
            log.debug("age_rating matched=%s keyword=%r", rating.value, hit)
            return rating
    log.info("age_rating unrecognised text=%r default=%s", text, default.value)
    return default
