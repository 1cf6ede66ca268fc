"""
Module: quiz

Purpose:
    Provides the ParsedQuiz container (metadata + ordered questions) and the
    ValidationResult returned by the validator.

Key Functions:
    - ParsedQuiz.with_questions(): Copy with a new question tuple
    - ParsedQuiz.to_dict() / ParsedQuiz.from_dict(): Serialization
    - ValidationResult.from_errors(): Build a result from an error list

Dependencies:
    - dataclasses (std)
    - .questions.ParsedQuestion

Used By:
    - parsing.pipeline: Produces ParsedQuiz
    - parsing.validation: Produces ValidationResult
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Sequence

from .questions import ParsedQuestion


@dataclass(frozen=True)
class ParsedQuiz:
    """
    Parse output: defaulted metadata plus the ordered question list.

    Attributes:
        title: Quiz title (defaulted by the parser, e.g. "Quiz 19/10/2026").
        description: Short description (defaulted by the parser).
        category: Category name (defaults to "General").
        questions: Ordered questions, already capped by the parser.
    """

    title: str
    description: str
    category: str
    questions: tuple[ParsedQuestion, ...] = ()

    @property
    def question_count(self) -> int:
        return len(self.questions)

    def with_questions(self, questions: Iterable[ParsedQuestion]) -> ParsedQuiz:
        questions = tuple(questions)
        if questions == self.questions:
            return self
        return replace(self, questions=questions)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "questions": [q.to_dict() for q in self.questions],
        }

    @classmethod
    def from_dict(cls, data: dict) -> ParsedQuiz:
        return cls(
            title=data.get("title", ""),
            description=data.get("description", ""),
            category=data.get("category", ""),
            questions=tuple(ParsedQuestion.from_dict(q) for q in data.get("questions", [])),
        )

    def __repr__(self) -> str:
        return f"ParsedQuiz({self.title!r}, questions={self.question_count}, category={self.category!r})"


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating a ParsedQuiz.

    Errors are human-readable strings meant to be shown to the user verbatim.
    """

    is_valid: bool
    errors: tuple[str, ...] = ()

    @classmethod
    def from_errors(cls, errors: Sequence[str]) -> ValidationResult:
        return cls(is_valid=len(errors) == 0, errors=tuple(errors))

    def __bool__(self) -> bool:
        return self.is_valid
