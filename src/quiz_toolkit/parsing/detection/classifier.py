"""
Module: parsing.detection.classifier

Purpose:
    Line classification - runs the ordered matchers against one line and
    returns the first structured match. Lines no matcher claims are
    continuations of whatever is open.

Key Functions:
    - classify_line(): Classify one normalized line

Dependencies:
    - .numerals, .statements, .options: Individual matchers

Used By:
    - parsing.structuring.assembler: Classifies each line during the fold
"""

from __future__ import annotations

from typing import Sequence

from .numerals import match_question_start
from .options import match_option
from .roles import LineMatch, LineRole, MatchContext, Matcher
from .statements import match_statement


# Precedence order: the first matcher returning a match wins
MATCHERS: tuple[Matcher, ...] = (
    match_question_start,
    match_statement,
    match_option,
)


def classify_line(
    line: str,
    context: MatchContext,
    matchers: Sequence[Matcher] = MATCHERS,
) -> LineMatch:
    """
    Classify a line against the current assembler state.

    Args:
        line: Normalized, non-empty line
        context: Snapshot of the assembler state
        matchers: Matchers in precedence order (defaults to MATCHERS)

    Returns:
        The first matcher result, or a CONTINUATION match carrying the line

    Example:
        >>> classify_line("A) Rio", MatchContext(in_question=True)).role
        <LineRole.OPTION_START: 'option_start'>
    """
    for matcher in matchers:
        match = matcher(line, context)
        if match is not None:
            return match
    return LineMatch(role=LineRole.CONTINUATION, text=line)
