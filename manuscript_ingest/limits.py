"""
limits.py  –  bounds shared by the parsers, the validator and the CLI
"""

from __future__ import annotations

# --------------------------------------------------------------------------
MAX_NOVELS       = 100                 # bundles per import run
BATCH_SIZE       = 6                   # bundles ingested concurrently

MAX_TAGS         = 20

MIN_CHAPTERS     = 1
MAX_CHAPTERS     = 200

TITLE_LEN        = (2, 200)
BLURB_LEN        = (10, 3_000)

MIN_CHAPTER_CHARS   = 10
LONG_CHAPTER_CHARS  = 50_000           # warn above this, reader load time

MAX_CONTENT_BYTES   = 10 * 1024 * 1024 # content.txt
CONTENT_FILE_NAME   = "content.txt"
MAX_COVER_BYTES     = 5 * 1024 * 1024  # cover image

# --------------------------------------------------------------------------
COVER_PRIORITY = (
    "cover_300x400.jpg",
    "cover.png",
    "cover.jpg",
)

METADATA_FILES = {
    "title.txt":         "title_file",
    "blurb.txt":         "blurb_file",
    "category.txt":      "category_file",
    "tags.txt":          "tags_file",
    "age.txt":           "age_file",
    "_full_outline.txt": "outline_file",
}
