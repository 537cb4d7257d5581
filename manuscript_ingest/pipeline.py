"""
pipeline.py – drive bundles end to end: pre-checks, parse, validate.

    results = await ingest_all(discover_bundles(root), batch_size=6)
    payloads = [to_payload(r) for r in results if r.validation.valid]

Bundles share no state, so a batch is just `asyncio.gather`; the batch size
only bounds how many folders are read at once.
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Any, Dict, List, Sequence

from .bundle import INDIVIDUAL, UploadBundle
from .content_file import parse_content_file
from .cover import resolve_cover
from .errors import BundleParseError
from .genres import match_category
from .individual_files import parse_individual_files
from .limits import BATCH_SIZE, COVER_PRIORITY, MAX_COVER_BYTES
from .logconf import for_bundle
from .models import Chapter, ContentRating, IngestResult, ParsedNovel, ValidationResult
from .validator import validate_content_text, validate_novel

logger = logging.getLogger(__name__)

_CJK_RE   = re.compile(r"[一-龥]")
_LATIN_RE = re.compile(r"[a-zA-Z]+")


# ─── pre-parse checks ────────────────────────────────────────────────────
def _precheck_individual(bundle: UploadBundle) -> ValidationResult:
    errors: List[str] = []
    warnings: List[str] = []
    has_outline = bundle.outline_file is not None
    for attr, fname in (("title_file", "title.txt"), ("blurb_file", "blurb.txt"), ("category_file", "category.txt")):
        if getattr(bundle, attr) is None and not has_outline:
            errors.append(f"missing {fname} (or _full_outline.txt)")
    if not bundle.chapter_files:
        errors.append("at least 1 chapter file required (chapter_1_XXX.txt)")
    if has_outline:
        warnings.append("_full_outline.txt will be used as fallback metadata source")
    return ValidationResult.from_findings(errors, warnings)


def _cover_check(cover, size: int | None) -> ValidationResult:
    if cover is None:
        return ValidationResult.from_findings(
            [f"missing cover image ({' / '.join(COVER_PRIORITY)})"], []
        )
    if size is not None and size > MAX_COVER_BYTES:
        return ValidationResult.from_findings(
            [f"cover image exceeds {MAX_COVER_BYTES // (1024 * 1024)}MB (got {size:,} bytes)"], []
        )
    return ValidationResult.from_findings([], [])


def _genre_check(novel: ParsedNovel, log) -> ValidationResult:
    if match_category(novel.genre, log=log) is None:
        return ValidationResult.from_findings(
            [], [f'genre "{novel.genre}" does not match a known category']
        )
    return ValidationResult.from_findings([], [])


def _read_failed(exc: OSError, log) -> ValidationResult:
    log.error("read failed: %s", exc)
    return ValidationResult.from_findings([f"read failed: {exc}"], [])


# ─── single bundle ───────────────────────────────────────────────────────
async def ingest_bundle(bundle: UploadBundle) -> IngestResult:
    """
    Check, parse and validate one folder.

    Never raises for a bad folder; unreadable files and parse errors become
    errors on the returned result.
    """
    log = for_bundle(bundle.folder_name)
    layout = bundle.layout

    if layout is None:
        log.warning("incomplete folder skipped files=%d", len(bundle.all_files))
        return IngestResult(
            folder_name=bundle.folder_name,
            validation=ValidationResult.from_findings(
                ["incomplete folder: needs content.txt or title.txt / blurb.txt / category.txt"], []
            ),
        )

    log.info("ingest start layout=%s", layout)
    cover = resolve_cover(bundle.all_files, log=log)
    checks: List[ValidationResult] = []
    try:
        checks.append(_cover_check(cover, await cover.size() if cover is not None else None))
    except OSError as exc:
        checks.append(_read_failed(exc, log))
    text = ""

    if layout == INDIVIDUAL:
        checks.append(_precheck_individual(bundle))
    else:
        try:
            text = await bundle.content_file.read_text()
        except OSError as exc:
            checks.append(_read_failed(exc, log))
        else:
            checks.append(validate_content_text(bundle.content_file.name, text))

    pre = ValidationResult.merge(*checks)
    novel: ParsedNovel | None = None
    findings = [pre]

    if pre.valid:
        try:
            if layout == INDIVIDUAL:
                novel = await parse_individual_files(bundle, log)
            else:
                novel = parse_content_file(text, log)
        except BundleParseError as exc:
            log.error("parse failed: %s", exc)
            findings.append(ValidationResult.from_findings([f"parse failed: {exc}"], []))
        except OSError as exc:
            findings.append(_read_failed(exc, log))
        else:
            findings.append(validate_novel(novel, log))
            findings.append(_genre_check(novel, log))

    result = IngestResult(
        folder_name=bundle.folder_name,
        layout=layout,
        cover=cover.name if cover is not None else None,
        novel=novel,
        validation=ValidationResult.merge(*findings),
    )
    log.info(
        "ingest done valid=%s errors=%d warnings=%d",
        result.validation.valid, len(result.validation.errors), len(result.validation.warnings),
    )
    return result


# ─── many bundles ────────────────────────────────────────────────────────
async def ingest_all(bundles: Sequence[UploadBundle], batch_size: int = BATCH_SIZE) -> List[IngestResult]:
    if batch_size < 1:
        raise ValueError("batch_size must be >= 1")
    results: List[IngestResult] = []
    for i in range(0, len(bundles), batch_size):
        batch = bundles[i : i + batch_size]
        logger.info("batch %d: %d bundles", i // batch_size + 1, len(batch))
        results.extend(await asyncio.gather(*(ingest_bundle(b) for b in batch)))
    return results


# ─── payload helpers ─────────────────────────────────────────────────────
def slugify_title(title: str) -> str:
    s = title.lower().strip()
    s = re.sub(r"[^\w\s-]", "", s)
    s = re.sub(r"\s+", "-", s)
    s = re.sub(r"-+", "-", s).strip("-")
    return s[:100]


def count_words(chapters: Sequence[Chapter]) -> int:
    """CJK ideographs count one each, latin words one each."""
    return sum(
        len(_CJK_RE.findall(ch.content)) + len(_LATIN_RE.findall(ch.content))
        for ch in chapters
    )


def to_payload(result: IngestResult) -> Dict[str, Any]:
    """Upload form fields for a valid result."""
    if result.novel is None or not result.validation.valid:
        raise ValueError(f"{result.folder_name}: only valid results can be exported")
    novel = result.novel
    return {
        "folderName": result.folder_name,
        "title": novel.title,
        "slug": slugify_title(novel.title),
        "genre": novel.genre,
        "blurb": novel.blurb,
        "tags": list(novel.tags),
        "contentRating": (novel.content_rating or ContentRating.ALL_AGES).value,
        "cover": result.cover,
        "wordCount": count_words(novel.chapters),
        "chapters": [
            {"number": ch.number, "title": ch.title, "content": ch.content}
            for ch in novel.chapters
        ],
    }
