"""
Module: parsing.detection.numerals

Purpose:
    Question start detection - identifies lines that open a new question:
    "1. ...", "2 - ...", "(3) ...", "B) ..." or "Questão 4: ...".
    Numbered and lettered labels are shared with answer options, so the
    matcher looks at the open question before claiming a line.

Key Functions:
    - match_question_start(): Matcher for question-start lines
    - label_style(): Bracket and separator style of a label

Dependencies:
    - re (std)
    - .roles: LineMatch, MatchContext

Used By:
    - parsing.detection.classifier: First matcher in precedence order
"""

from __future__ import annotations

import re
from typing import Optional

from .roles import LabelScheme, LineMatch, LineRole, MatchContext, letter_to_ordinal

# Label separators shared by questions, statements and options.
# A dot directly followed by a digit is a decimal ("3.5"), not a separator.
SEPARATOR = r"(?:\.(?!\d)|[-–)\]}])"

QUESTION_LABEL_PATTERN = re.compile(
    rf"^([(\[{{]?)\s*(\d{{1,3}}|[A-Za-z])\s*({SEPARATOR})\s*(.*)$"
)
QUESTION_KEYWORD_PATTERN = re.compile(
    r"^(?:quest(?:ão|ao|ion)|pergunta)\s*(?:n[º°o]\.?\s*)?(\d{1,3})\s*"
    r"(?:[:.)\-–]\s*(.*))?$",
    re.IGNORECASE,
)


def label_style(opening: str, separator: str) -> str:
    """
    Typographic style of a label: its opening bracket plus its separator.

    "1." -> ".", "(2)" -> "()", "3 -" and "3 –" -> "-". Used to tell a
    question label apart from a numbered option written another way.
    """
    if separator == "–":
        separator = "-"
    return f"{opening}{separator}"


def match_question_start(line: str, context: MatchContext) -> Optional[LineMatch]:
    """
    Match a question-start line.

    While Idle every numbered or lettered line opens a question, even a
    bare label ("1.") whose text follows on the next lines. Inside a
    question the same shapes may be answer options, so:

    - a numbered line continuing the question's numeric option sequence
      (or a "1)" before any option) is left to the option matcher, unless
      it is written in the question's label style and not in the options'
      style ("5." after options "1)".."4)" under "4.");
    - any other numbered line opens a question only if its number is
      greater than the open question's number;
    - a lettered line opens a question only when questions are lettered,
      options are numbered and the letter is the next question letter.

    The keyword form ("Questão 3:", "Question 3:") always opens a question.

    Args:
        line: Normalized line
        context: Snapshot of the assembler state

    Returns:
        LineMatch with role QUESTION_START, or None

    Example:
        >>> match_question_start("2 - Q2", MatchContext()).number
        2
    """
    keyword = QUESTION_KEYWORD_PATTERN.match(line)
    if keyword:
        number = int(keyword.group(1))
        return LineMatch(
            role=LineRole.QUESTION_START,
            text=(keyword.group(2) or "").strip(),
            label=keyword.group(1),
            number=number,
        )

    match = QUESTION_LABEL_PATTERN.match(line)
    if not match:
        return None

    label, text = match.group(2), match.group(4).strip()
    style = label_style(match.group(1), match.group(3))

    if label.isdigit():
        number = int(label)
        if context.in_question and not _opens_numbered_question(number, style, context):
            return None
        return LineMatch(
            role=LineRole.QUESTION_START,
            text=text,
            label=label,
            number=number,
            style=style,
        )

    number = letter_to_ordinal(label)
    if context.in_question and not _opens_lettered_question(number, context):
        return None
    return LineMatch(
        role=LineRole.QUESTION_START,
        text=text,
        label=label.upper(),
        number=number,
        lettered=True,
        style=style,
    )


def _opens_numbered_question(number: int, style: str, context: MatchContext) -> bool:
    """Whether a numbered line inside an open question starts a new one."""
    if context.option_scheme == LabelScheme.NUMBER and number == context.option_count + 1:
        return (
            number > context.question_number
            and style == context.question_style
            and style != context.option_style
        )
    if context.option_count == 0 and number == 1:
        return False
    return number > context.question_number


def _opens_lettered_question(number: int, context: MatchContext) -> bool:
    """Whether a lettered line inside an open question starts a new one."""
    return (
        context.question_lettered
        and context.option_scheme == LabelScheme.NUMBER
        and number == context.question_number + 1
    )
