"""
Module: parsing.detection.statements

Purpose:
    Statement detection - identifies Roman numeral assertions (I, II ... X)
    listed under a question before or between its options, e.g.
    "I. A água ferve a 100 ºC" / "II- O gelo é mais denso que a água".

Key Functions:
    - match_statement(): Matcher for statement lines

Dependencies:
    - re (std)
    - .numerals.SEPARATOR: Shared label separators

Used By:
    - parsing.detection.classifier: Second matcher in precedence order
"""

from __future__ import annotations

import re
from typing import Optional

from .numerals import SEPARATOR
from .roles import LineMatch, LineRole, MatchContext

# Uppercase only: lowercase "i)" / "v)" stay available as option labels
ROMAN_PATTERN = re.compile(rf"^((?:X|IX|IV|VI{{0,3}}|I{{1,3}}))\s*{SEPARATOR}\s*(.+)$")


def match_statement(line: str, context: MatchContext) -> Optional[LineMatch]:
    """
    Match a Roman numeral statement while a question is open.

    Args:
        line: Normalized line
        context: Snapshot of the assembler state

    Returns:
        LineMatch with role STATEMENT, or None

    Example:
        >>> match_statement("II- Second", MatchContext(in_question=True)).label
        'II'
    """
    if not context.in_question:
        return None
    match = ROMAN_PATTERN.match(line)
    if not match:
        return None
    return LineMatch(role=LineRole.STATEMENT, text=match.group(2).strip(), label=match.group(1))
