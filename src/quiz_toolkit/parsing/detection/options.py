"""
Module: parsing.detection.options

Purpose:
    Answer option detection. Recognizes, while a question is open:
    - labelled options: "a) ...", "B. ...", "(c) ...", "1) ...", "2 - ..."
    - bulleted options: "- ...", "* ...", "• ..."
    - marker-only options: "Brasília ✓" (no label, ends with a marker)

    Numeric labels are remapped to letters by position (1 -> A, 2 -> B) so a
    question always uses one labelling scheme. Unlabelled options take the
    next unused letter of the question, supplied through MatchContext.

Key Functions:
    - match_option(): Matcher for option lines

Dependencies:
    - re (std)
    - .markers.split_marker: Trailing correctness markers

Used By:
    - parsing.detection.classifier: Third matcher in precedence order
"""

from __future__ import annotations

import re
from typing import Optional

from .markers import split_marker
from .numerals import SEPARATOR, label_style
from .roles import LabelScheme, LineMatch, LineRole, MatchContext, ordinal_to_letter

OPTION_LABEL_PATTERN = re.compile(
    rf"^([(\[{{]?)\s*([A-Za-z]|\d{{1,2}})\s*({SEPARATOR}|:)\s*(.*)$"
)
BULLET_PATTERN = re.compile(r"^[-*•·●▪◦]\s+(.*)$")


def match_option(line: str, context: MatchContext) -> Optional[LineMatch]:
    """
    Match an answer option while a question is open.

    Args:
        line: Normalized line
        context: Snapshot of the assembler state (next_label is used for
            unlabelled options)

    Returns:
        LineMatch with role OPTION_START, or None

    Example:
        >>> ctx = MatchContext(in_question=True)
        >>> m = match_option("2) Opt2 ✓", ctx)
        >>> (m.label, m.text, m.marked)
        ('B', 'Opt2', True)
    """
    if not context.in_question:
        return None

    text, marked = split_marker(line)

    labelled = OPTION_LABEL_PATTERN.match(text)
    if labelled:
        raw_label, body = labelled.group(2), labelled.group(4).strip()
        if raw_label.isdigit():
            label = ordinal_to_letter(int(raw_label))
            scheme = LabelScheme.NUMBER
        else:
            label = raw_label.upper()
            scheme = LabelScheme.LETTER
        if label is not None:
            return LineMatch(
                role=LineRole.OPTION_START,
                text=body,
                label=label,
                marked=marked,
                scheme=scheme,
                style=label_style(labelled.group(1), labelled.group(3)),
            )

    bullet = BULLET_PATTERN.match(text)
    if bullet:
        return LineMatch(
            role=LineRole.OPTION_START,
            text=bullet.group(1).strip(),
            label=context.next_label,
            marked=marked,
        )

    if marked and text:
        return LineMatch(
            role=LineRole.OPTION_START,
            text=text,
            label=context.next_label,
            marked=True,
        )

    return None
