"""
Module: parsing.structuring.assembler

Purpose:
    Question assembly state machine. Folds the classified line stream into
    mutable question builders: Idle until the first question start, then
    InQuestion, accumulating text, statements and options until the next
    question start or the end of input closes the question.

Key Functions:
    - assemble(): Fold all lines and close the last question
    - advance(): Classify one line against the state and apply it
    - apply_match(): Apply an already classified line to the state
    - finish(): Close the open question at end of input
    - context_for(): MatchContext snapshot of a state

Key Classes:
    - AssemblerState: Explicit fold state
    - QuestionBuilder / OptionBuilder: Mutable builders, converted to
      immutable models by parsing.correctness

Dependencies:
    - ..detection: classify_line, LineMatch, MatchContext
    - ..diagnostics: ParseDiagnostics

Used By:
    - parsing.pipeline: Builds the question list from normalized lines
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import reduce
from typing import Iterable, List, Optional

from ..detection.classifier import classify_line
from ..detection.roles import LETTERS, LabelScheme, LineMatch, LineRole, MatchContext
from ..diagnostics import ParseDiagnostics

logger = logging.getLogger(__name__)


class ParserInvariantError(RuntimeError):
    """Raised when the assembler reaches a state the matchers should prevent.

    This signals a bug in the parser, never a problem with the input text.
    """


@dataclass
class OptionBuilder:
    """
    Mutable option under construction.

    Attributes:
        label: Uppercase letter (explicit, remapped or synthesized).
        text: Option text, extended by continuation lines.
        marked: Line carried an inline correctness marker.
        scheme: Explicit label scheme, None when synthesized.
        style: Label style (bracket and separator), None when synthesized.
    """
    label: str
    text: str
    marked: bool = False
    scheme: Optional[LabelScheme] = None
    style: Optional[str] = None

    def extend(self, text: str) -> None:
        self.text = _join(self.text, text)


@dataclass
class QuestionBuilder:
    """
    Mutable question under construction.

    Options are appended to ``options`` when closed. An option without a
    marker stays in ``open_option`` so continuation lines can extend it;
    a marked option is closed immediately.
    """
    number: int
    text: str = ""
    lettered: bool = False
    style: Optional[str] = None
    statements: List[tuple[str, str]] = field(default_factory=list)
    options: List[OptionBuilder] = field(default_factory=list)
    open_option: Optional[OptionBuilder] = None

    @property
    def all_options(self) -> List[OptionBuilder]:
        """Closed options followed by the open one, if any."""
        if self.open_option is None:
            return list(self.options)
        return [*self.options, self.open_option]

    @property
    def used_labels(self) -> List[str]:
        return [opt.label for opt in self.all_options]

    @property
    def option_scheme(self) -> Optional[LabelScheme]:
        for opt in self.all_options:
            if opt.scheme is not None:
                return opt.scheme
        return None

    @property
    def option_style(self) -> Optional[str]:
        for opt in self.all_options:
            if opt.scheme is not None:
                return opt.style
        return None

    @property
    def next_label(self) -> str:
        """First letter not yet used by an option of this question."""
        used = set(self.used_labels)
        for letter in LETTERS:
            if letter not in used:
                return letter
        return LETTERS[-1]

    @property
    def last_option(self) -> Optional[OptionBuilder]:
        if self.open_option is not None:
            return self.open_option
        return self.options[-1] if self.options else None

    @property
    def is_complete(self) -> bool:
        return bool(self.text.strip()) and bool(self.statements or self.all_options)

    def close_open_option(self) -> None:
        if self.open_option is not None:
            self.options.append(self.open_option)
            self.open_option = None


@dataclass
class AssemblerState:
    """
    Explicit state threaded through the fold over lines.

    Attributes:
        questions: Closed, kept questions in source order.
        current: Question under construction; None means Idle.
        diagnostics: Skipped content and oddities for this parse call.
    """
    questions: List[QuestionBuilder] = field(default_factory=list)
    current: Optional[QuestionBuilder] = None
    diagnostics: ParseDiagnostics = field(default_factory=ParseDiagnostics)

    @property
    def is_idle(self) -> bool:
        return self.current is None


def context_for(state: AssemblerState) -> MatchContext:
    """Build the immutable snapshot matchers are allowed to see."""
    question = state.current
    if question is None:
        return MatchContext()
    return MatchContext(
        in_question=True,
        question_number=question.number,
        question_lettered=question.lettered,
        option_scheme=question.option_scheme,
        question_style=question.style,
        option_style=question.option_style,
        option_count=len(question.all_options),
        next_label=question.next_label,
    )


def advance(state: AssemblerState, line: str) -> AssemblerState:
    """
    Classify one line against the state and apply the transition.

    Args:
        state: Current fold state
        line: Normalized, non-empty line

    Returns:
        The updated state
    """
    match = classify_line(line, context_for(state))
    logger.debug(f"{match.role.value:<14} {line!r}")
    return apply_match(state, match)


def apply_match(state: AssemblerState, match: LineMatch) -> AssemblerState:
    """
    Apply a classified line to the state.

    Transitions:
        Idle --question start--> InQuestion
        InQuestion --statement/option/continuation--> InQuestion
        InQuestion --question start--> close current, InQuestion (new)

    Args:
        state: Current fold state
        match: Classification of the next line

    Returns:
        The updated state

    Raises:
        ParserInvariantError: Statement or option while Idle
    """
    if match.role == LineRole.QUESTION_START:
        _close_current(state)
        state.current = QuestionBuilder(
            number=match.number or 0,
            text=match.text,
            lettered=match.lettered,
            style=match.style,
        )
        return state

    question = state.current

    if match.role == LineRole.CONTINUATION:
        if question is None:
            state.diagnostics.add_orphan_line(match.text)
        elif question.last_option is not None:
            question.last_option.extend(match.text)
        else:
            question.text = _join(question.text, match.text)
        return state

    if question is None:
        raise ParserInvariantError(f"{match.role.value} line outside a question: {match.text!r}")

    if match.role == LineRole.STATEMENT:
        question.close_open_option()
        question.statements.append((match.label or "", match.text))
        return state

    if match.role == LineRole.OPTION_START:
        label = match.label or question.next_label
        if match.scheme is not None and label in question.used_labels:
            state.diagnostics.add_duplicate_label(question.number, label)
        option = OptionBuilder(
            label=label,
            text=match.text,
            marked=match.marked,
            scheme=match.scheme,
            style=match.style,
        )
        question.close_open_option()
        if option.marked:
            question.options.append(option)
        else:
            question.open_option = option
        return state

    raise ParserInvariantError(f"Unknown line role: {match.role!r}")


def finish(state: AssemblerState) -> AssemblerState:
    """Close the open question at end of input."""
    _close_current(state)
    return state


def assemble(lines: Iterable[str]) -> AssemblerState:
    """
    Run the state machine over all lines.

    Args:
        lines: Normalized lines with answer key lines already removed

    Returns:
        Final state; ``questions`` holds every kept question in order

    Example:
        >>> state = assemble(["1. Q?", "A) yes", "B) no *"])
        >>> [o.label for o in state.questions[0].options]
        ['A', 'B']
    """
    return finish(reduce(advance, lines, AssemblerState()))


def _close_current(state: AssemblerState) -> None:
    """Close the open question, keeping it only if it has text and items."""
    question = state.current
    if question is None:
        return
    question.close_open_option()
    state.current = None

    if question.is_complete:
        state.questions.append(question)
        logger.debug(
            f"Closed question {question.number}: "
            f"{len(question.statements)} statement(s), {len(question.options)} option(s)"
        )
        return

    reason = "no question text" if not question.text.strip() else "no statements or options"
    state.diagnostics.add_discarded_question(question.number, question.text, reason)


def _join(existing: str, addition: str) -> str:
    if not existing:
        return addition
    if not addition:
        return existing
    return f"{existing} {addition}"
