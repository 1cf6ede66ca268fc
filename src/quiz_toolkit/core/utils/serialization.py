"""
Serialization Utilities

Provides to/from JSON utilities for parsed quizzes.

The serialized quiz is the hand-off format for the persistence layer: each
question carries its 1-based order and each option its label, text and
is_correct flag. Payloads are validated before deserialization.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..models.quiz import ParsedQuiz
from ..schemas.validator import QUIZ_SCHEMA_VERSION, ValidationError, validate_quiz_payload


# ─────────────────────────────────────────────────────────────────────────────
# Quiz Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_quiz(quiz: ParsedQuiz) -> dict[str, Any]:
    """
    Serialize a ParsedQuiz to a dictionary.

    The output can be written to JSON and will pass schema validation.

    Args:
        quiz: ParsedQuiz instance to serialize

    Returns:
        Dictionary suitable for JSON serialization, tagged with schema_version
    """
    return {"schema_version": QUIZ_SCHEMA_VERSION, **quiz.to_dict()}


def deserialize_quiz(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
) -> ParsedQuiz:
    """
    Deserialize a ParsedQuiz from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate the payload first
        strict: Run full JSON Schema validation (implies validate)

    Returns:
        ParsedQuiz instance

    Raises:
        ValidationError: If validation is enabled and data is invalid
        ValueError: If data cannot be turned into models
    """
    if validate or strict:
        validate_quiz_payload(data, strict=strict)

    return ParsedQuiz.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# JSON File Utilities
# ─────────────────────────────────────────────────────────────────────────────

def save_quiz_json(quiz: ParsedQuiz, path: Path) -> None:
    """
    Save a quiz to a JSON file.

    Args:
        quiz: ParsedQuiz to save
        path: Output path, parent directories are created
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(serialize_quiz(quiz), f, indent=2, ensure_ascii=False)


def load_quiz_json(path: Path, *, validate: bool = True, strict: bool = False) -> ParsedQuiz:
    """
    Load a quiz from a JSON file.

    Args:
        path: Path to a file written by save_quiz_json()
        validate: Whether to validate the payload
        strict: Run full JSON Schema validation

    Returns:
        ParsedQuiz instance

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the file is not valid JSON or fails validation
    """
    if not path.exists():
        raise FileNotFoundError(f"Quiz file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(
            f"Invalid JSON in {path.name}: {e}",
            path=str(path),
            errors=[str(e)]
        ) from e

    return deserialize_quiz(data, validate=validate, strict=strict)
