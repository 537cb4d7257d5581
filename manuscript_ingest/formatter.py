"""
formatter.py – chapter text normaliser

Library only; the `novel-import normalize FILE` command wraps it for files:

    from manuscript_ingest.formatter import normalize_content
"""

from __future__ import annotations

import re

__all__ = ["normalize_content", "unify_eol"]

_TRAILING_WS = re.compile(r"[ \t]+$", re.M)
_BLANK_RUN   = re.compile(r"\n{3,}")


# ----------------------------------------------------------------------
def unify_eol(t: str) -> str:
    return t.replace("\r\n", "\n").replace("\r", "\n")


# ----------------------------------------------------------------------
def normalize_content(raw: str | None) -> str:
    """
    Return *raw* chapter text in canonical form.

    Rules applied (in order):

    1. Convert CR/LF variants to `\\n`.
    2. Strip trailing spaces / tabs from every line.
    3. Collapse 3+ consecutive newlines -> 2 (one blank line between paragraphs).
    4. Trim the whole string.

    Idempotent; empty input yields "".
    """
    if not raw:
        return ""
    txt = unify_eol(raw)
    txt = _TRAILING_WS.sub("", txt)
    txt = _BLANK_RUN.sub("\n\n", txt)
    return txt.strip()

