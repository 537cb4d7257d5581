"""
Settings for an import run.

Precedence (low -> high): defaults, JSON file given with --config,
NOVEL_IMPORT_* environment variables (a local .env is honoured), CLI flags.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict

import dotenv
from pydantic import BaseModel, Field

from manuscript_ingest.limits import BATCH_SIZE, MAX_NOVELS

ENV_PREFIX = "NOVEL_IMPORT_"


class ImportSettings(BaseModel):
    batch_size: int = Field(BATCH_SIZE, ge=1)
    max_novels: int = Field(MAX_NOVELS, ge=1)
    log_level: str = "INFO"
    log_dir: Path | None = None


def _from_env() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for name in ImportSettings.model_fields:
        val = os.getenv(ENV_PREFIX + name.upper())
        if val:
            out[name] = val
    return out


def load_settings(config: Path | None = None, **overrides: Any) -> ImportSettings:
    dotenv.load_dotenv()
    data: Dict[str, Any] = json.loads(config.read_text("utf-8")) if config else {}
    data.update(_from_env())
    data.update({k: v for k, v in overrides.items() if v is not None})
    return ImportSettings(**data)
