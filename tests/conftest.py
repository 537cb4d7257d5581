# tests/conftest.py
import pytest

from tests.samples import GOOD_CONTENT, write_folder


@pytest.fixture
def library(tmp_path):
    """Three novel folders: one per layout plus one broken."""
    write_folder(tmp_path, "summer_rain", {
        "content.txt": GOOD_CONTENT,
        "cover.jpg": b"\xff\xd8\xff",
    })
    write_folder(tmp_path, "night_market", {
        "title.txt": "Night Market",
        "blurb.txt": "A food stall that only opens for ghosts.",
        "category.txt": "unknown",
        "tags.txt": "Paranormal, Food, food",
        "age.txt": "Teen 13+",
        "_full_outline.txt": "===== CATEGORY =====\nParanormal\n",
        "cover_300x400.jpg": b"\xff\xd8\xff",
        "chapter_2_Second_Night.txt": "The lanterns came back on at midnight.",
        "chapter_1_First_Night.txt": "Granny Liu set out twelve bowls of noodles.",
        "chapter_1_prompt.txt": "write chapter one",
    })
    write_folder(tmp_path, "broken", {
        "content.txt": "Title: Oops\nTags: x\nGenre: y\nBlurb: z\n\nChapter 1: a\nbody text here",
        "cover.png": b"\x89PNG",
    })
    return tmp_path
