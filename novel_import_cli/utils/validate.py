"""
Schema-validation helpers for exported novel payloads.

Usage (inside other modules):
    from novel_import_cli.utils.validate import validate_payload, validate_payloads
    validate_payload(payload)        # raises jsonschema.ValidationError on failure
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable

import jsonschema
from importlib import resources as pkg


# ─── internal helper ─────────────────────────────────────────────────────
def _load_schema(name: str) -> Dict[str, Any]:
    text = pkg.files("novel_import_cli.schemas").joinpath(name).read_text(encoding="utf-8")
    return json.loads(text)


# ─── public API ──────────────────────────────────────────────────────────
_payload_schema = _load_schema("novel_payload.schema.json")


def validate_payload(payload: Dict[str, Any]) -> None:
    jsonschema.validate(payload, _payload_schema)


def validate_payloads(payloads: Iterable[Dict[str, Any]]) -> None:
    for p in payloads:
        validate_payload(p)


def validate_export(json_text: str) -> None:
    """Validate a file written by `novel-import scan --export`."""
    data = json.loads(json_text)
    validate_payloads(data["novels"])
