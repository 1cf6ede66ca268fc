"""
Module: parsing.utils.text

Purpose:
    Line normalization for pasted quiz text. Splits raw text on any line
    ending, collapses whitespace and repairs vertical-bar characters that
    stand in for Roman numeral statement markers ("|| - ..." -> "II - ...").

Key Functions:
    - normalize_line(): Normalize one raw line
    - split_lines(): Normalize a whole text into non-empty lines

Dependencies:
    - re (std)

Used By:
    - parsing.pipeline: First step of every parse
"""

from __future__ import annotations

import re
from typing import List

# Characters seen in pasted text where a capital I was intended
BAR_CHARS = "|｜│ǀ¦"

WHITESPACE_PATTERN = re.compile(r"\s+")
# Leading bar run (optionally with a trailing V/X, e.g. "|V") that sits
# where a Roman numeral label would, i.e. right before a label separator.
LEADING_BAR_NUMERAL = re.compile(
    rf"^([{re.escape(BAR_CHARS)}]{{1,3}})([VX]?)(?=\s*[.\-–)\]}}:])"
)
BAR_TO_I = str.maketrans({ch: "I" for ch in BAR_CHARS})


def normalize_line(line: str) -> str:
    """
    Normalize one line of pasted text.

    Trims the line, collapses internal whitespace runs to one space and
    rewrites a leading run of bar characters to the Roman numeral it
    replaced. Bars elsewhere in the line are left alone.

    Args:
        line: Raw line, may contain tabs or non-breaking spaces

    Returns:
        Normalized line, empty string for blank input

    Example:
        >>> normalize_line("  ||-   Second   statement ")
        'II- Second statement'
    """
    line = WHITESPACE_PATTERN.sub(" ", line).strip()
    if not line:
        return ""

    match = LEADING_BAR_NUMERAL.match(line)
    if match:
        numeral = match.group(1).translate(BAR_TO_I) + match.group(2)
        line = numeral + line[match.end():]
    return line


def split_lines(text: str) -> List[str]:
    """
    Split text into normalized, non-empty lines.

    Accepts "\\n", "\\r\\n" and "\\r" line endings. Order is preserved.

    Args:
        text: Raw pasted text

    Returns:
        List of normalized lines with blank lines removed
    """
    if not text:
        return []
    lines = (normalize_line(raw) for raw in text.splitlines())
    return [line for line in lines if line]
