# manuscript_ingest/models.py
from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ContentRating(str, Enum):
    ALL_AGES = "ALL_AGES"
    TEEN_13 = "TEEN_13"
    MATURE_16 = "MATURE_16"
    EXPLICIT_18 = "EXPLICIT_18"


class Chapter(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: int = Field(..., ge=1)
    title: str
    content: str


class ParsedNovel(BaseModel):
    # length/count bounds are reported by validator.validate_novel, not enforced here
    model_config = ConfigDict(frozen=True)

    title: str
    genre: str
    blurb: str
    tags: List[str] = []
    chapters: List[Chapter]
    content_rating: ContentRating | None = None


class OutlineFields(BaseModel):
    title: str | None = None
    blurb: str | None = None
    category: str | None = None
    age_category: str | None = None
    tags: str | None = None


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: bool
    errors: List[str] = []
    warnings: List[str] = []

    @classmethod
    def from_findings(cls, errors: List[str], warnings: List[str]) -> "ValidationResult":
        return cls(valid=not errors, errors=list(errors), warnings=list(warnings))

    @classmethod
    def merge(cls, *results: "ValidationResult") -> "ValidationResult":
        errors: List[str] = []
        warnings: List[str] = []
        for r in results:
            errors.extend(r.errors)
            warnings.extend(r.warnings)
        return cls(
            valid=all(r.valid for r in results) and not errors,
            errors=errors,
            warnings=warnings,
        )


class IngestResult(BaseModel):
    folder_name: str
    layout: str | None = None
    cover: str | None = None
    novel: ParsedNovel | None = None
    validation: ValidationResult
