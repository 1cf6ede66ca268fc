"""
Module: options

Purpose:
    Provides the Option and Statement dataclasses - the leaf items attached
    to a parsed question. Options are the scored answer choices; statements
    are the Roman-numeral assertions shown above the options and never
    affect correctness.

Key Functions:
    - Option.to_dict() / Option.from_dict(): Serialization
    - Option.with_correct(flag): Copy with a different correctness flag
    - Statement.to_dict() / Statement.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - re (std)

Used By:
    - core.models.questions.ParsedQuestion
    - parsing.correctness
    - parsing.validation
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

OPTION_LABEL_PATTERN = re.compile(r"^[A-Z]$")


@dataclass(frozen=True, slots=True)
class Option:
    """
    A single answer choice of a question (immutable).

    Attributes:
        label: Single uppercase letter (A, B, C...). Numeric source labels
            are remapped to letters before an Option is built.
        text: Option text, possibly empty if the source line had none.
        is_correct: Whether this option is the marked-correct answer.

    Invariants:
        - label is exactly one uppercase ASCII letter

    Example:
        >>> opt = Option("C", "Brasília", is_correct=True)
        >>> opt.label
        'C'
    """

    label: str
    text: str
    is_correct: bool = False

    def __post_init__(self) -> None:
        """Validate label on construction."""
        if not OPTION_LABEL_PATTERN.match(self.label or ""):
            raise ValueError(f"Option label must be a single uppercase letter: {self.label!r}")

    def with_correct(self, is_correct: bool) -> Option:
        """Return a copy with the given correctness flag."""
        if is_correct == self.is_correct:
            return self
        return replace(self, is_correct=is_correct)

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON storage."""
        return {
            "label": self.label,
            "text": self.text,
            "is_correct": self.is_correct,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Option:
        """Deserialize from dictionary."""
        return cls(
            label=data["label"],
            text=data.get("text", ""),
            is_correct=bool(data.get("is_correct", False)),
        )

    def __repr__(self) -> str:
        mark = " ✓" if self.is_correct else ""
        return f"Option({self.label}) {self.text!r}{mark}"


@dataclass(frozen=True, slots=True)
class Statement:
    """
    Roman-numeral assertion attached to a question, e.g. "II. Water boils at 100ºC".

    Attributes:
        label: Roman numeral as written in the source ("I", "II", "IV"...).
        text: Statement text without the numeral.
    """

    label: str
    text: str

    def to_dict(self) -> dict:
        return {"label": self.label, "text": self.text}

    @classmethod
    def from_dict(cls, data: dict) -> Statement:
        return cls(label=data["label"], text=data.get("text", ""))
