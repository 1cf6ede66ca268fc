"""
Module: parsing

Purpose:
    Free-text to structured quiz parser. Converts pasted study text
    (numbered or lettered questions, options, Roman numeral statements,
    an optional answer key) into an immutable ParsedQuiz, and validates it.

Key Functions:
    - parse_quiz_text(): Main entry point for parsing
    - parse_quiz_text_with_report(): Parsing plus diagnostics
    - validate_parsed_quiz(): Human-readable validation errors
    - normalize_quiz(): Single-correct-option / true-false normalization

Key Classes:
    - ParserConfig: Question cap and metadata defaults
    - ParseResult: Quiz, answer key and diagnostics

Used By:
    - scripts/parse_quiz_text.py
"""

from .config import MAX_QUESTIONS, ParserConfig
from .correctness import normalize_quiz
from .pipeline import ParseResult, parse_quiz_text, parse_quiz_text_with_report
from .validation import validate_parsed_quiz

__all__ = [
    "parse_quiz_text",
    "parse_quiz_text_with_report",
    "validate_parsed_quiz",
    "normalize_quiz",
    "ParserConfig",
    "ParseResult",
    "MAX_QUESTIONS",
]
