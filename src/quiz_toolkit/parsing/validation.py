"""Parsed quiz validation.

Checks a finished ParsedQuiz and reports every problem as a human-readable
string. Never raises: callers show the errors to the user verbatim and
refuse to persist the quiz while ``is_valid`` is False.

The checks are independent of normalization, so a quiz validated before
normalize_quiz() (or after a partial normalization) is still reported
accurately.
"""

from __future__ import annotations

import logging
from typing import List

from quiz_toolkit.core.models import ParsedQuestion, ParsedQuiz, ValidationResult

logger = logging.getLogger(__name__)

MIN_OPTIONS = 2

NO_QUESTIONS_ERROR = "No questions were detected in the text"


def validate_parsed_quiz(quiz: ParsedQuiz) -> ValidationResult:
    """Validate a parsed quiz.

    Questions are referred to by their 1-based position in the quiz.

    Args:
        quiz: Parser output (normalized or not).

    Returns:
        ValidationResult with one error string per violation, in question order.
    """
    errors: List[str] = []

    if not quiz.questions:
        errors.append(NO_QUESTIONS_ERROR)

    for position, question in enumerate(quiz.questions, 1):
        errors.extend(_question_errors(question, position))

    result = ValidationResult.from_errors(errors)
    if not result.is_valid:
        logger.info(f"Quiz validation failed with {len(errors)} error(s)")
    return result


def _question_errors(question: ParsedQuestion, position: int) -> List[str]:
    errors: List[str] = []

    if not question.text.strip():
        errors.append(f"Question {position} is empty")

    if len(question.options) < MIN_OPTIONS:
        errors.append(f"Question {position} must have at least {MIN_OPTIONS} options")

    if len(question.correct_options) != 1:
        errors.append(f"Question {position} must have exactly 1 correct option")

    for option in question.options:
        if not option.text.strip():
            errors.append(f"Option {option.label} of question {position} is empty")

    # Explicit labels may collide ("A) x" twice); the parser keeps both
    for label in question.duplicate_labels:
        errors.append(f"Question {position} has duplicate option label {label}")

    return errors
