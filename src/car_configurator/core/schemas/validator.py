"""
Schema Validation Utilities

Validates car configuration requests (JSON) before they reach the builder.

The schema only checks shape: which keys exist and that values are
strings or lists of strings. Missing mandatory fields and catalog
compatibility are left to CarBuilder so there is one source of truth
for those rules.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_car_request(data: Any) -> None:
    """
    Validate a car request dict against the request schema.

    Every schema violation is collected, not just the first.

    Args:
        data: Parsed JSON request

    Raises:
        ValidationError: If data does not match the schema
    """
    schema = _load_schema("car_request")
    validator = jsonschema.Draft7Validator(schema)
    problems = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
    if not problems:
        return

    errors = []
    for problem in problems:
        location = ".".join(str(p) for p in problem.absolute_path) or "<root>"
        errors.append(f"{location}: {problem.message}")

    first = problems[0]
    raise ValidationError(
        f"Invalid car request: {'; '.join(errors)}",
        path=".".join(str(p) for p in first.absolute_path),
        errors=errors,
    )
