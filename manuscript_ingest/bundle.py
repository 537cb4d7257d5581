"""
bundle.py – one candidate novel folder and the file handles in it.

Parsers only ever see the `BundleFile` protocol (a name plus an async text
read), so local folders, in-memory uploads and test doubles are
interchangeable.
"""

from __future__ import annotations

import asyncio
import logging
import pathlib
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Protocol

from .limits import CONTENT_FILE_NAME, METADATA_FILES

logger = logging.getLogger(__name__)

INDIVIDUAL = "individual"
CONTENT = "content"


class BundleFile(Protocol):
    name: str

    async def read_text(self) -> str: ...

    async def size(self) -> int: ...


@dataclass(frozen=True)
class LocalFile:
    path: pathlib.Path

    @property
    def name(self) -> str:
        return self.path.name

    async def read_text(self) -> str:
        raw = await asyncio.to_thread(self.path.read_bytes)
        return raw.decode("utf-8-sig", errors="replace")

    async def size(self) -> int:
        st = await asyncio.to_thread(self.path.stat)
        return st.st_size


@dataclass(frozen=True)
class MemoryFile:
    name: str
    text: str = ""

    async def read_text(self) -> str:
        return self.text

    async def size(self) -> int:
        return len(self.text.encode("utf-8"))


@dataclass
class UploadBundle:
    folder_name: str
    content_file: Optional[BundleFile] = None
    title_file: Optional[BundleFile] = None
    blurb_file: Optional[BundleFile] = None
    category_file: Optional[BundleFile] = None
    tags_file: Optional[BundleFile] = None
    age_file: Optional[BundleFile] = None
    outline_file: Optional[BundleFile] = None
    chapter_files: List[BundleFile] = field(default_factory=list)
    all_files: List[BundleFile] = field(default_factory=list)

    @property
    def layout(self) -> str | None:
        """`individual` wins over `content` when a folder carries both."""
        if self.title_file or self.blurb_file or self.category_file:
            return INDIVIDUAL
        if self.content_file:
            return CONTENT
        return None


# ----------------------------------------------------------------------
def route_files(folder_name: str, files: Iterable[BundleFile]) -> UploadBundle:
    bundle = UploadBundle(folder_name=folder_name)
    for f in files:
        bundle.all_files.append(f)
        if f.name == CONTENT_FILE_NAME:
            bundle.content_file = f
        elif f.name in METADATA_FILES:
            setattr(bundle, METADATA_FILES[f.name], f)
        elif f.name.lower().startswith("chapter") and f.name.lower().endswith(".txt"):
            bundle.chapter_files.append(f)
    return bundle


def discover_bundles(root: str | pathlib.Path) -> List[UploadBundle]:
    """
    Group every file under *root* by its parent folder, one bundle per folder.

    Hidden files and anything under a hidden directory (`.git/`, `.cache/`)
    are ignored.
    """
    root = pathlib.Path(root)
    groups: dict[pathlib.Path, List[BundleFile]] = {}
    for p in sorted(root.rglob("*")):
        if not p.is_file():
            continue
        if any(part.startswith(".") for part in p.relative_to(root).parts):
            continue
        groups.setdefault(p.parent, []).append(LocalFile(p))

    bundles = [route_files(folder.name, files) for folder, files in groups.items()]
    logger.info("discovered bundles=%d root=%s", len(bundles), root)
    return bundles
