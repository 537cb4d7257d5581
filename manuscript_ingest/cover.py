# manuscript_ingest/cover.py
from __future__ import annotations

import logging
from typing import Iterable, Sequence, TypeVar

from .limits import COVER_PRIORITY

logger = logging.getLogger(__name__)

F = TypeVar("F")


def resolve_cover(
    files: Iterable[F],
    priority: Sequence[str] = COVER_PRIORITY,
    log: logging.Logger | logging.LoggerAdapter = logger,
) -> F | None:
    """Pick the cover by name priority; None if the folder has none."""
    by_name: dict[str, F] = {}
    for f in files:
        by_name.setdefault(f.name, f)
    for name in priority:
        if name in by_name:
            log.debug("cover found=%s", name)
            return by_name[name]
    log.info("cover missing candidates=%s", ", ".join(priority))
    return None
