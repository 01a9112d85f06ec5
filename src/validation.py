"""Strict schema validation for submitted receipt payloads."""

import json
from functools import lru_cache
from pathlib import Path

import jsonschema

SCHEMAS_DIR = Path(__file__).resolve().parent.parent / "schemas"


@lru_cache(maxsize=None)
def _load_schema(name: str) -> dict:
    path = SCHEMAS_DIR / f"{name}.schema.json"
    return json.loads(path.read_text(encoding="utf-8"))


def validate_receipt_payload(data: dict) -> None:
    """Validate a decoded receipt against schema. Raises jsonschema.ValidationError if invalid.

    Unknown fields, missing fields and non-string values all fail here.
    """
    schema = _load_schema("receipt")
    jsonschema.validate(data, schema, cls=jsonschema.Draft202012Validator)
