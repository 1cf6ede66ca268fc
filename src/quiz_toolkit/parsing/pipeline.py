"""
Module: parsing.pipeline

Purpose:
    Entry point of the quiz text parser. Runs the full chain on one raw
    text: line normalization -> answer key pre-pass -> classification and
    assembly -> correctness resolution -> invariant normalization.

Key Functions:
    - parse_quiz_text(): Raw text -> ParsedQuiz
    - parse_quiz_text_with_report(): Raw text -> ParseResult (quiz + diagnostics)

Key Classes:
    - ParseResult: Container for parser output

Dependencies:
    - quiz_toolkit.core.models: ParsedQuiz
    - .config.ParserConfig

Used By:
    - Callers that then run parsing.validation.validate_parsed_quiz()
    - scripts/parse_quiz_text.py

Concurrency:
    Every call owns its state; nothing is shared between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from quiz_toolkit.core.models import ParsedQuiz
from .answer_key.extractor import AnswerKey, extract_answer_key
from .config import ParserConfig
from .correctness import normalize_quiz, resolve_correctness
from .diagnostics import ParseDiagnostics
from .structuring.assembler import assemble
from .utils.text import split_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    """
    Result of a parse call.

    Attributes:
        quiz: Normalized, capped quiz.
        answer_key: Answer key found in the text (plus any supplied key).
        diagnostics: Content skipped or accepted with reservations.
    """
    quiz: ParsedQuiz
    answer_key: AnswerKey
    diagnostics: ParseDiagnostics


def parse_quiz_text_with_report(
    raw_text: str,
    *,
    answer_key: Optional[str] = None,
    config: Optional[ParserConfig] = None,
) -> ParseResult:
    """
    Parse pasted quiz text and keep the parser diagnostics.

    Args:
        raw_text: Pasted text, any line-ending convention
        answer_key: Optional key supplied separately, e.g. "1-C, 2-A".
            Its entries override key lines found in the text.
        config: Parser settings (question cap, metadata defaults)

    Returns:
        ParseResult with the normalized quiz

    Example:
        >>> result = parse_quiz_text_with_report("1. Q?\\nA) x\\nB) y\\nGabarito: 1-B")
        >>> result.quiz.questions[0].correct_option.label
        'B'
    """
    config = config or ParserConfig()

    lines = split_lines(raw_text or "")
    key, structural_lines = extract_answer_key(lines, extra_key=answer_key)

    state = assemble(structural_lines)
    diagnostics = state.diagnostics

    builders = state.questions
    limit = config.question_limit
    if len(builders) > limit:
        diagnostics.truncated_questions = len(builders) - limit
        logger.info(f"Keeping first {limit} of {len(builders)} questions")
        builders = builders[:limit]

    questions = resolve_correctness(builders, key)
    quiz = normalize_quiz(ParsedQuiz(
        title=config.resolve_title(),
        description=config.resolve_description(len(questions)),
        category=config.category,
        questions=tuple(questions),
    ))

    logger.info(
        f"Parsed {quiz.question_count} question(s) from {len(lines)} line(s) "
        f"({len(key)} answer key entr{'y' if len(key) == 1 else 'ies'})"
    )
    if diagnostics.has_issues:
        logger.info(f"Parser notes: {diagnostics.summary()}")

    return ParseResult(quiz=quiz, answer_key=key, diagnostics=diagnostics)


def parse_quiz_text(
    raw_text: str,
    *,
    answer_key: Optional[str] = None,
    config: Optional[ParserConfig] = None,
) -> ParsedQuiz:
    """
    Parse pasted quiz text into a ParsedQuiz.

    Never raises for malformed input; run validate_parsed_quiz() on the
    result to decide whether it is usable.

    Args:
        raw_text: Pasted text
        answer_key: Optional separately supplied answer key
        config: Parser settings

    Returns:
        Normalized quiz with at most config.question_limit questions
    """
    return parse_quiz_text_with_report(raw_text, answer_key=answer_key, config=config).quiz
