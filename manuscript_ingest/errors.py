"""
errors.py – hard parse failures.

A raised `BundleParseError` means "this bundle cannot be processed at all".
Soft findings (bounds, missing optional data) never raise; they end up in
a `ValidationResult` instead.
"""

from __future__ import annotations


class IngestError(Exception):
    """Base exception for the ingestion pipeline."""


class BundleParseError(IngestError, ValueError):
    """A bundle violates a structural precondition and was rejected."""


class MissingFieldError(BundleParseError):
    def __init__(self, field: str, detail: str | None = None):
        self.field = field
        super().__init__(detail or f'missing field "{field}:"')


class FieldOrderError(BundleParseError):
    def __init__(self, found: list[str]):
        self.found = found
        super().__init__(
            "fields out of order: expected Tags -> Title -> Genre -> Blurb, "
            f"found {' -> '.join(found)}"
        )


class NoChaptersError(BundleParseError):
    def __init__(self) -> None:
        super().__init__("at least one chapter required")


class EmptyChapterError(BundleParseError):
    def __init__(self, number: int):
        self.number = number
        super().__init__(f"chapter {number} content is empty")


class ChapterSequenceError(BundleParseError):
    """Declared chapter numbers are not exactly 1..N."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"chapter numbering is not contiguous: expected chapter {expected}, "
            f"got chapter {actual}"
        )
