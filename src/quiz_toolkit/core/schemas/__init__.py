"""
Schemas Package

JSON schema definition and validation for serialized quizzes.
"""

from .validator import (
    validate_quiz_payload,
    ValidationError,
    QUIZ_SCHEMA_VERSION,
)

__all__ = [
    "validate_quiz_payload",
    "ValidationError",
    "QUIZ_SCHEMA_VERSION",
]
