"""
Module: parsing.detection

Purpose:
    Line classification subpackage. Each matcher takes a normalized line
    and a MatchContext and returns an optional LineMatch.

Key Modules:
    - roles: LineRole, LineMatch, MatchContext
    - numerals: Question starts ("1.", "B)", "Questão 3:")
    - statements: Roman numeral statements ("I.", "II-")
    - options: Answer options and unlabelled/marker-only options
    - markers: Trailing correctness markers
    - classifier: Ordered matcher dispatch

Used By:
    - parsing.structuring.assembler
"""

from .classifier import MATCHERS, classify_line
from .roles import LabelScheme, LineMatch, LineRole, MatchContext

__all__ = [
    "MATCHERS",
    "classify_line",
    "LabelScheme",
    "LineMatch",
    "LineRole",
    "MatchContext",
]
