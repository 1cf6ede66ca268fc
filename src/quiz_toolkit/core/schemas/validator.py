"""
Schema Validation Utilities

Validates serialized quiz payloads (the JSON hand-off format consumed by the
persistence layer) before they are turned back into models.

Two levels:
- Basic structural checks, always run, fail fast with a precise path
- Full JSON Schema validation via jsonschema when strict=True
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Schema version constants
QUIZ_SCHEMA_VERSION = 1


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
    """Raised when a serialized payload fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_quiz_payload(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate serialized quiz data.

    Args:
        data: Quiz dictionary as produced by serialize_quiz()
        strict: If True, also validate against parsed_quiz.schema.json

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("Quiz payload must be a JSON object")

    required = ["schema_version", "title", "description", "category", "questions"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )

    version = data.get("schema_version")
    if version != QUIZ_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported quiz schema version: {version} (expected {QUIZ_SCHEMA_VERSION})",
            path="schema_version"
        )

    questions = data.get("questions")
    if not isinstance(questions, list):
        raise ValidationError("questions must be a list", path="questions")

    for i, question in enumerate(questions):
        _validate_question(question, f"questions[{i}]")

    if strict:
        schema = _load_schema("parsed_quiz")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message]
            ) from e


def _validate_question(data: Any, path: str) -> None:
    """Validate one serialized question."""
    if not isinstance(data, dict):
        raise ValidationError("question must be a dict", path=path)

    required = ["order", "text", "options"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Question missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing]
        )

    order = data.get("order")
    if not isinstance(order, int) or order < 1:
        raise ValidationError(
            f"Invalid order: {order!r} (must be a positive integer)",
            path=f"{path}.order"
        )

    options = data.get("options")
    if not isinstance(options, list):
        raise ValidationError("options must be a list", path=f"{path}.options")
    for j, option in enumerate(options):
        _validate_option(option, f"{path}.options[{j}]")

    statements = data.get("statements", [])
    if not isinstance(statements, list):
        raise ValidationError("statements must be a list", path=f"{path}.statements")


def _validate_option(data: Any, path: str) -> None:
    """Validate one serialized option."""
    if not isinstance(data, dict) or "label" not in data:
        raise ValidationError("option must be a dict with a label", path=path)

    label = data["label"]
    if not (isinstance(label, str) and len(label) == 1 and "A" <= label <= "Z"):
        raise ValidationError(
            f"Invalid option label: {label!r} (must be one uppercase letter)",
            path=f"{path}.label"
        )

    if not isinstance(data.get("is_correct", False), bool):
        raise ValidationError(
            "is_correct must be a boolean",
            path=f"{path}.is_correct"
        )
