"""
Module: questions

Purpose:
    Provides the ParsedQuestion dataclass - one assembled quiz question with
    its ordered statements and options. Immutable; correctness changes are
    made by building a new instance (see parsing.correctness).

Key Functions:
    - ParsedQuestion.correct_options: Options currently marked correct
    - ParsedQuestion.correct_option: The single correct option, if exactly one
    - ParsedQuestion.duplicate_labels: Explicit labels used more than once
    - ParsedQuestion.to_dict() / ParsedQuestion.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - .options.Option, .options.Statement

Used By:
    - core.models.quiz.ParsedQuiz
    - parsing.correctness
    - parsing.validation
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .options import Option, Statement


@dataclass(frozen=True)
class ParsedQuestion:
    """
    A single parsed question (immutable).

    Attributes:
        text: Question text, continuation lines joined with spaces.
        options: Ordered answer choices.
        statements: Ordered Roman-numeral statements (display only).
        order: 1-based position in the parsed quiz output.
        number: Question number as read from the source text. Used to look up
            the answer key; may differ from order when the source skips
            numbers or uses letters (A=1, B=2...).

    Invariants:
        - order >= 1
        - After normalization, exactly one option is correct whenever the
          question has at least one option (not enforced here so the
          validator can inspect un-normalized questions).

    Example:
        >>> q = ParsedQuestion(
        ...     text="Capital of Brazil?",
        ...     options=(Option("A", "Rio"), Option("B", "Brasília", True)),
        ...     order=1,
        ...     number=1,
        ... )
        >>> q.correct_option.label
        'B'
    """

    text: str
    options: tuple[Option, ...] = ()
    statements: tuple[Statement, ...] = ()
    order: int = 1
    number: int = 1

    def __post_init__(self) -> None:
        """Validate ordering on construction."""
        if self.order < 1:
            raise ValueError(f"order must be 1-based: {self.order}")
        if self.number < 0:
            raise ValueError(f"number cannot be negative: {self.number}")

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def correct_options(self) -> tuple[Option, ...]:
        return tuple(opt for opt in self.options if opt.is_correct)

    @property
    def correct_option(self) -> Optional[Option]:
        """
        The correct option when exactly one is marked.

        Returns:
            The only option with is_correct=True, or None if zero or several
        """
        correct = self.correct_options
        return correct[0] if len(correct) == 1 else None

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(opt.label for opt in self.options)

    @property
    def duplicate_labels(self) -> tuple[str, ...]:
        """Labels appearing on more than one option, in first-seen order."""
        seen: set[str] = set()
        duplicates: list[str] = []
        for label in self.labels:
            if label in seen and label not in duplicates:
                duplicates.append(label)
            seen.add(label)
        return tuple(duplicates)

    def with_options(self, options: tuple[Option, ...]) -> ParsedQuestion:
        """Return a copy with a different option tuple."""
        if options == self.options:
            return self
        return replace(self, options=tuple(options))

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """
        Serialize to dictionary for JSON storage.

        Returns:
            Dict representation; statements omitted when empty
        """
        d = {
            "order": self.order,
            "number": self.number,
            "text": self.text,
            "options": [opt.to_dict() for opt in self.options],
        }
        if self.statements:
            d["statements"] = [st.to_dict() for st in self.statements]
        return d

    @classmethod
    def from_dict(cls, data: dict) -> ParsedQuestion:
        """
        Deserialize from dictionary.

        Args:
            data: Dict representation

        Returns:
            ParsedQuestion instance
        """
        order = data.get("order", 1)
        return cls(
            text=data.get("text", ""),
            options=tuple(Option.from_dict(o) for o in data.get("options", [])),
            statements=tuple(Statement.from_dict(s) for s in data.get("statements", [])),
            order=order,
            number=data.get("number", order),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        preview = self.text if len(self.text) <= 40 else self.text[:37] + "..."
        return (
            f"ParsedQuestion(#{self.order} n={self.number}, {preview!r}, "
            f"options={''.join(self.labels)}, statements={len(self.statements)})"
        )
