# tests/test_formatter.py
import pytest

from manuscript_ingest.formatter import normalize_content


def test_line_endings_unified():
    assert normalize_content("a\r\nb\rc") == "a\nb\nc"


def test_trailing_whitespace_stripped_per_line():
    assert normalize_content("one  \t\ntwo\t\nthree") == "one\ntwo\nthree"


def test_blank_runs_collapse_to_one_blank_line():
    assert normalize_content("p1\n\n\n\n\np2") == "p1\n\np2"
    assert normalize_content("p1\n\np2") == "p1\n\np2"
    assert normalize_content("line1\nline2") == "line1\nline2"


def test_whitespace_only_lines_count_as_blank():
    assert normalize_content("p1\n  \n\t\n\np2") == "p1\n\np2"


def test_whole_string_trimmed_but_inner_indent_kept():
    assert normalize_content("\n\n  first\n    indented\n\n") == "first\n    indented"


@pytest.mark.parametrize("raw", ["", None, "   \n\r\n\t"])
def test_empty_inputs(raw):
    assert normalize_content(raw) == ""


@pytest.mark.parametrize("raw", [
    "a\r\n\r\n\r\n\r\nb  ",
    " x \n \n \n y ",
    "“Hi,” she said.\r\r\r\rHe nodded.\t\n",
    "第一段。\r\n\r\n\r\n第二段。",
    "\u3000\u3000第一段。\u3000\n\n\n\u3000\u3000第二段。\u3000",
    "\ufeffTitle line\r\n\r\n\r\n\ufeffbody",
    "p1\n \n\t\n\n \n\n\np2\n\t \n",
    "a \u3000\n\u3000\n\n\n\u3000 \nb",
])
def test_idempotent(raw):
    once = normalize_content(raw)
    assert normalize_content(once) == once


def test_whitespace_only_lines_between_blank_runs():
    assert normalize_content("p1\n\n \n\n\t\n\np2") == "p1\n\np2"


def test_unicode_spaces_inside_text_kept():
    assert normalize_content("第一段\u3000。\n\n\n第二段") == "第一段\u3000。\n\n第二段"


def test_paragraphs_split_cleanly():
    raw = "He waved.\r\n\r\n\r\n“Wait!” she called.   \r\n\r\nHe didn't."
    paragraphs = normalize_content(raw).split("\n\n")
    assert paragraphs == ["He waved.", "“Wait!” she called.", "He didn't."]
