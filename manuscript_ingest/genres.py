# manuscript_ingest/genres.py
from __future__ import annotations

import logging
from typing import NamedTuple, Sequence, Tuple

logger = logging.getLogger(__name__)


class Category(NamedTuple):
    name: str
    slug: str
    aliases: Tuple[str, ...] = ()


# seeded catalog categories, in display order
CATEGORIES: Tuple[Category, ...] = (
    Category("Fantasy",    "fantasy",    ("xianxia", "wuxia", "magic")),
    Category("Urban",      "urban",      ("city", "modern")),
    Category("Romance",    "romance",    ("love", "ceo", "billionaire")),
    Category("Sci-Fi",     "sci-fi",     ("science fiction", "scifi", "space")),
    Category("Mystery",    "mystery",    ("detective", "thriller")),
    Category("Historical", "historical", ("history",)),
    Category("Adventure",  "adventure",  ()),
    Category("Horror",     "horror",     ()),
    Category("Crime",      "crime",      ()),
    Category("LGBTQ+",     "lgbtq",      ("queer",)),
    Category("Paranormal", "paranormal", ("supernatural",)),
    Category("System",     "system",     ("litrpg", "game")),
    Category("Reborn",     "reborn",     ("rebirth", "reincarnation", "transmigration")),
    Category("Revenge",    "revenge",    ()),
    Category("Fanfiction", "fanfiction", ("fan fiction", "fanfic")),
    Category("Humor",      "humor",      ("comedy", "humour")),
    Category("Werewolf",   "werewolf",   ("wolf", "alpha")),
    Category("Vampire",    "vampire",    ()),
)


def match_category(
    text: str | None,
    categories: Sequence[Category] = CATEGORIES,
    log: logging.Logger | logging.LoggerAdapter = logger,
) -> Category | None:
    """
    Best-effort genre -> category lookup.

    Exact slug / name first, then substring match (either direction) against
    names and aliases in table order.  Never raises.
    """
    normalized = (text or "").lower().strip()
    if not normalized:
        return None

    for cat in categories:
        if normalized in (cat.slug, cat.name.lower()):
            return cat

    for cat in categories:
        for key in (cat.name.lower(), *cat.aliases):
            if key in normalized or normalized in key:
                log.debug("genre partial match text=%r key=%r slug=%s", text, key, cat.slug)
                return cat

    log.info("genre unmatched text=%r", text)
    return None
