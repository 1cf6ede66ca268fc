"""
Module: parsing.detection.roles

Purpose:
    Shared vocabulary of the line classifier: the role a line can play,
    the structured match a matcher returns, and the immutable snapshot of
    assembler state matchers are allowed to look at.

Key Classes:
    - LineRole: QUESTION_START, STATEMENT, OPTION_START, CONTINUATION
    - LineMatch: Immutable match result for one line
    - MatchContext: Immutable view of the assembler state
    - LabelScheme: How a question labels its options (letters or numbers)

Dependencies:
    - dataclasses, enum (std)

Used By:
    - parsing.detection.* matchers
    - parsing.structuring.assembler
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

LETTERS = string.ascii_uppercase


class LineRole(str, Enum):
    """Structural role of a classified line."""
    QUESTION_START = "question_start"
    STATEMENT = "statement"
    OPTION_START = "option_start"
    CONTINUATION = "continuation"


class LabelScheme(str, Enum):
    """Labelling used by the explicit option labels of a question."""
    LETTER = "letter"
    NUMBER = "number"


@dataclass(frozen=True)
class LineMatch:
    """
    Result of classifying one line.

    Attributes:
        role: Structural role of the line.
        text: Line text without its label or marker.
        label: Question number as text, statement numeral or option letter;
            None for continuations and unlabelled options.
        number: Question number for QUESTION_START (letters map A=1, B=2...).
        marked: True when an option line ends with a correctness marker.
        scheme: Explicit option label scheme, None when the label was synthesized.
        lettered: True when a question start used a letter instead of a number.
        style: Opening bracket plus separator of an explicit label (".", ")", "()"),
            None for keyword questions and unlabelled options.
    """
    role: LineRole
    text: str
    label: Optional[str] = None
    number: Optional[int] = None
    marked: bool = False
    scheme: Optional[LabelScheme] = None
    lettered: bool = False
    style: Optional[str] = None


@dataclass(frozen=True)
class MatchContext:
    """
    What a matcher may know about the question under construction.

    Attributes:
        in_question: A question is open (assembler is not Idle).
        question_number: Number of the open question, 0 when Idle.
        question_lettered: The open question was started by a letter label.
        option_scheme: Scheme of the first explicit option label, if any.
        question_style: Label style of the open question, None for the keyword form.
        option_style: Label style of the first explicit option, if any.
        option_count: Options seen so far for the open question.
        next_label: Next unused letter for an unlabelled option.
    """
    in_question: bool = False
    question_number: int = 0
    question_lettered: bool = False
    option_scheme: Optional[LabelScheme] = None
    question_style: Optional[str] = None
    option_style: Optional[str] = None
    option_count: int = 0
    next_label: str = "A"


IDLE = MatchContext()

Matcher = Callable[[str, MatchContext], Optional[LineMatch]]


def letter_to_ordinal(letter: str) -> int:
    """Alphabetic position of a letter: A=1, B=2... (case-insensitive)."""
    return LETTERS.index(letter.upper()) + 1


def ordinal_to_letter(ordinal: int) -> Optional[str]:
    """Letter for an ordinal: 1=A, 2=B... None outside 1-26."""
    if 1 <= ordinal <= len(LETTERS):
        return LETTERS[ordinal - 1]
    return None
