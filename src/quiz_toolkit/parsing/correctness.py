"""
Module: parsing.correctness

Purpose:
    Decide which option of each question is correct and enforce the
    single-correct-option invariant.

    Resolution (builders -> models):
        - options with an inline marker are correct;
        - if no option of the question is marked, the option whose label
          matches the answer key entry for the question number is correct;
        - a question with at least one marker ignores the answer key, so an
          inline marker always wins over a conflicting key entry.

    Normalization (models -> models, pure and idempotent):
        1. True/false questions are truncated to their first two options.
        2. Zero correct options -> the first option becomes correct.
           Several correct options -> only the first one stays correct.

Key Functions:
    - resolve_correctness(): Convert builders to ParsedQuestion models
    - normalize_question(): Enforce invariants on one question
    - normalize_quiz(): Enforce invariants on every question of a quiz
    - is_true_false_question(): True/false detection

Dependencies:
    - quiz_toolkit.core.models: Option, Statement, ParsedQuestion, ParsedQuiz
    - .structuring.assembler.QuestionBuilder

Used By:
    - parsing.pipeline
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Sequence

from quiz_toolkit.core.models import Option, ParsedQuestion, ParsedQuiz, Statement
from .structuring.assembler import QuestionBuilder

logger = logging.getLogger(__name__)

TRUE_FALSE_WORDS = frozenset({
    "verdadeiro", "falso",
    "true", "false",
    "certo", "errado",
    "correto", "incorreto",
    "v", "f",
})
TRUE_FALSE_OPTION_COUNT = 2


# ─────────────────────────────────────────────────────────────────────────────
# Resolution
# ─────────────────────────────────────────────────────────────────────────────

def resolve_correctness(
    builders: Sequence[QuestionBuilder],
    answer_key: Mapping[int, str],
) -> List[ParsedQuestion]:
    """
    Build ParsedQuestion models with correctness decided per option.

    Args:
        builders: Closed question builders in output order
        answer_key: Question number -> correct letter

    Returns:
        Un-normalized questions, order assigned 1..n
    """
    questions: List[ParsedQuestion] = []
    for order, builder in enumerate(builders, 1):
        options = builder.all_options
        has_marker = any(opt.marked for opt in options)
        key_label = None if has_marker else answer_key.get(builder.number)

        if has_marker and builder.number in answer_key:
            logger.debug(f"Question {builder.number}: inline marker overrides answer key")

        questions.append(ParsedQuestion(
            text=builder.text.strip(),
            options=tuple(
                Option(
                    label=opt.label,
                    text=opt.text.strip(),
                    is_correct=opt.marked or (key_label is not None and opt.label == key_label),
                )
                for opt in options
            ),
            statements=tuple(Statement(label, text) for label, text in builder.statements),
            order=order,
            number=builder.number,
        ))
    return questions


# ─────────────────────────────────────────────────────────────────────────────
# Normalization
# ─────────────────────────────────────────────────────────────────────────────

def is_true_false_question(question: ParsedQuestion) -> bool:
    """
    Whether a question looks like a true/false question.

    True when any option text is a true/false word ("Verdadeiro", "F",
    "false"...) or the question has exactly two options.
    """
    if len(question.options) == TRUE_FALSE_OPTION_COUNT:
        return True
    return any(_is_true_false_word(opt.text) for opt in question.options)


def normalize_question(question: ParsedQuestion) -> ParsedQuestion:
    """
    Enforce the option invariants on one question.

    Args:
        question: Question as resolved (or already normalized)

    Returns:
        Question with at most two options if true/false and exactly one
        correct option whenever it has options. Returns the same instance
        when nothing changes.

    Example:
        >>> q = ParsedQuestion("Q?", (Option("A", "x"), Option("B", "y")))
        >>> normalize_question(q).correct_option.label
        'A'
    """
    options = list(question.options)

    if len(options) > TRUE_FALSE_OPTION_COUNT and is_true_false_question(question):
        logger.debug(
            f"Question {question.order}: true/false, dropping "
            f"{len(options) - TRUE_FALSE_OPTION_COUNT} extra option(s)"
        )
        options = options[:TRUE_FALSE_OPTION_COUNT]

    if options:
        correct_indexes = [i for i, opt in enumerate(options) if opt.is_correct]
        if not correct_indexes:
            logger.debug(f"Question {question.order}: no correct option, using first")
            keep = 0
        else:
            keep = correct_indexes[0]
            if len(correct_indexes) > 1:
                logger.debug(f"Question {question.order}: {len(correct_indexes)} correct options, keeping first")
        options = [opt.with_correct(i == keep) for i, opt in enumerate(options)]

    return question.with_options(tuple(options))


def normalize_quiz(quiz: ParsedQuiz) -> ParsedQuiz:
    """
    Enforce the option invariants on every question.

    Pure and idempotent: normalize_quiz(normalize_quiz(q)) == normalize_quiz(q).
    """
    return quiz.with_questions(normalize_question(q) for q in quiz.questions)


def _is_true_false_word(text: str) -> bool:
    return text.strip().rstrip(".!").strip().lower() in TRUE_FALSE_WORDS
