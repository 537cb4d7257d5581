"""
individual_files.py – parse the multi-file bundle layout.

    title.txt  blurb.txt  category.txt  tags.txt  age.txt
    _full_outline.txt                 (optional fallback for every field above)
    chapter_1_Baton_Pass.txt          -> Chapter 1 "Baton Pass"
    chapter_1_prompt.txt              (ignored)

Field resolution:

* title, blurb, tags, age : own file first, outline second
* category                : outline first, category.txt second

The category order is the reverse of the others on purpose: category.txt is
often a placeholder ("unknown") while the outline carries the real genre.
"""

from __future__ import annotations

import logging
import re
from typing import List, NamedTuple, Optional

from .age_rating import classify_age_rating
from .bundle import BundleFile, UploadBundle
from .errors import EmptyChapterError, MissingFieldError, NoChaptersError
from .formatter import normalize_content
from .models import ContentRating, OutlineFields, ParsedNovel
from .outline import parse_outline
from .sequencer import ChapterDraft, check_contiguity, sort_chapters
from .tags import split_tags

logger = logging.getLogger(__name__)

CHAPTER_FILE_RE = re.compile(r"^chapter_(\d+)_(.+)\.txt$", re.I)
PROMPT_FILE_RE  = re.compile(r"^chapter_\d+_prompt\.txt$", re.I)


class ChapterInfo(NamedTuple):
    number: int
    title: str


# ----------------------------------------------------------------------
def is_prompt_file(filename: str) -> bool:
    return PROMPT_FILE_RE.match(filename) is not None


def extract_chapter_info(filename: str) -> ChapterInfo | None:
    """chapter_1_Baton_Pass.txt -> ChapterInfo(1, "Baton Pass")"""
    m = CHAPTER_FILE_RE.match(filename)
    if not m:
        return None
    return ChapterInfo(int(m.group(1)), m.group(2).replace("_", " "))


async def _read(f: Optional[BundleFile]) -> str:
    return (await f.read_text()).strip() if f is not None else ""


# ----------------------------------------------------------------------
async def _chapters(files: List[BundleFile], log) -> List[ChapterDraft]:
    drafts: List[ChapterDraft] = []
    for f in files:
        if is_prompt_file(f.name):
            log.debug("chapter file ignored (prompt) file=%s", f.name)
            continue
        info = extract_chapter_info(f.name)
        if info is None:
            log.warning("chapter file skipped (unrecognised name) file=%s", f.name)
            continue

        content = normalize_content(await f.read_text())
        if not content:
            raise EmptyChapterError(info.number)
        log.debug("chapter file=%s number=%d title=%r", f.name, info.number, info.title)
        drafts.append(ChapterDraft(info.number, info.title, content))
    return drafts


async def parse_individual_files(
    bundle: UploadBundle, log: logging.Logger | logging.LoggerAdapter = logger
) -> ParsedNovel:
    log.info("individual files parse start chapter_files=%d", len(bundle.chapter_files))

    outline = OutlineFields()
    if bundle.outline_file is not None:
        outline = parse_outline(await bundle.outline_file.read_text(), log)

    # ① title
    title = await _read(bundle.title_file)
    if not title and outline.title:
        log.info("field fallback field=title source=_full_outline.txt")
        title = outline.title
    if not title:
        raise MissingFieldError("Title", "title is empty (no title.txt and no TITLE in _full_outline.txt)")

    # ② blurb
    blurb = await _read(bundle.blurb_file)
    if not blurb and outline.blurb:
        log.info("field fallback field=blurb source=_full_outline.txt")
        blurb = outline.blurb
    if not blurb:
        raise MissingFieldError("Blurb", "blurb is empty (no blurb.txt and no BLURB in _full_outline.txt)")

    # ③ category – outline preferred
    if outline.category:
        genre = outline.category
        log.info("field source field=category source=_full_outline.txt")
    else:
        genre = await _read(bundle.category_file)
        log.info("field source field=category source=category.txt")
    if not genre:
        raise MissingFieldError("Category", "category is empty (no category.txt and no CATEGORY in _full_outline.txt)")

    # ④ tags (optional)
    tags_raw = await _read(bundle.tags_file)
    if not tags_raw and outline.tags:
        log.info("field fallback field=tags source=_full_outline.txt")
        tags_raw = outline.tags
    tags = split_tags(tags_raw)
    if not tags:
        log.info("no tags found")

    # ⑤ age rating (optional)
    age_raw = await _read(bundle.age_file)
    if not age_raw and outline.age_category:
        log.info("field fallback field=age source=_full_outline.txt")
        age_raw = outline.age_category
    if age_raw:
        rating = classify_age_rating(age_raw, log=log)
    else:
        log.info("no age rating found, default=%s", ContentRating.ALL_AGES.value)
        rating = ContentRating.ALL_AGES

    # ⑥ chapters
    drafts = sort_chapters(await _chapters(bundle.chapter_files, log))
    if not drafts:
        raise NoChaptersError()
    check_contiguity(drafts)

    log.info(
        "individual files parsed title=%r genre=%r tags=%d rating=%s chapters=%d",
        title, genre, len(tags), rating.value, len(drafts),
    )
    return ParsedNovel(
        title=title,
        genre=genre,
        blurb=blurb,
        tags=tags,
        chapters=[d.freeze() for d in drafts],
        content_rating=rating,
    )
