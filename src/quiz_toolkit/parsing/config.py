"""
Module: parsing.config

Purpose:
    Configuration dataclass for the quiz text parser. Provides immutable
    settings for the question cap and the metadata defaults written into
    every ParsedQuiz.

Key Classes:
    - ParserConfig: Main configuration for parsing

Dependencies:
    - dataclasses: For frozen dataclass support
    - datetime: Default title date

Used By:
    - parsing.pipeline: Uses ParserConfig for cap and metadata
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

MAX_QUESTIONS = 20  # Hard cap, a quiz never holds more questions
DEFAULT_CATEGORY = "General"


@dataclass(frozen=True)
class ParserConfig:
    """
    Configuration for the quiz text parser.

    Attributes:
        max_questions: Requested question limit (default 20). Values above
            MAX_QUESTIONS are clamped to it; values below 1 are rejected.
        title: Quiz title. None means "Quiz DD/MM/YYYY" for today's date.
        description: Quiz description. None means an automatic summary
            mentioning the number of parsed questions.
        category: Quiz category (default "General").
    """
    max_questions: int = MAX_QUESTIONS
    title: Optional[str] = None
    description: Optional[str] = None
    category: str = DEFAULT_CATEGORY

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.max_questions < 1:
            raise ValueError(f"max_questions must be at least 1: {self.max_questions}")

    @property
    def question_limit(self) -> int:
        """Effective cap applied to the assembled questions."""
        return min(self.max_questions, MAX_QUESTIONS)

    def resolve_title(self, today: Optional[date] = None) -> str:
        if self.title is not None:
            return self.title
        today = today or date.today()
        return f"Quiz {today.strftime('%d/%m/%Y')}"

    def resolve_description(self, question_count: int) -> str:
        if self.description is not None:
            return self.description
        return f"Automatically generated quiz with {question_count} question(s)"
