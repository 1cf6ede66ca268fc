"""
Module: parsing.diagnostics

Records content the parser skipped or accepted with reservations while
assembling questions, so callers can explain a short or odd result.

Structure:
- orphan_lines: text seen before the first question start
- discarded_questions: question starts closed without text or items
- duplicate_labels: (question number, label) for repeated explicit labels
- truncated_questions: questions dropped by the question cap
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

logger = logging.getLogger(__name__)


@dataclass
class DiscardedQuestion:
    """A question start that never became a ParsedQuestion."""
    number: int
    text: str
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return {"number": self.number, "text": self.text, "reason": self.reason}


@dataclass
class ParseDiagnostics:
    """
    Collector owned by a single parse call.

    Not shared between calls, so it needs no locking.
    """
    orphan_lines: List[str] = field(default_factory=list)
    discarded_questions: List[DiscardedQuestion] = field(default_factory=list)
    duplicate_labels: List[Tuple[int, str]] = field(default_factory=list)
    truncated_questions: int = 0

    def add_orphan_line(self, line: str) -> None:
        logger.debug(f"Ignoring text before first question: {line!r}")
        self.orphan_lines.append(line)

    def add_discarded_question(self, number: int, text: str, reason: str) -> None:
        logger.warning(f"Discarding question {number}: {reason}")
        self.discarded_questions.append(DiscardedQuestion(number, text, reason))

    def add_duplicate_label(self, number: int, label: str) -> None:
        logger.warning(f"Question {number}: option label {label} used more than once")
        self.duplicate_labels.append((number, label))

    @property
    def has_issues(self) -> bool:
        return bool(
            self.orphan_lines
            or self.discarded_questions
            or self.duplicate_labels
            or self.truncated_questions
        )

    def summary(self) -> str:
        """One-line human summary for logs and the CLI."""
        if not self.has_issues:
            return "no parser issues"
        parts = []
        if self.orphan_lines:
            parts.append(f"{len(self.orphan_lines)} line(s) before the first question ignored")
        if self.discarded_questions:
            parts.append(f"{len(self.discarded_questions)} incomplete question(s) discarded")
        if self.duplicate_labels:
            parts.append(f"{len(self.duplicate_labels)} duplicate option label(s)")
        if self.truncated_questions:
            parts.append(f"{self.truncated_questions} question(s) over the limit dropped")
        return "; ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "orphan_lines": list(self.orphan_lines),
            "discarded_questions": [d.to_dict() for d in self.discarded_questions],
            "duplicate_labels": [
                {"question_number": number, "label": label}
                for number, label in self.duplicate_labels
            ],
            "truncated_questions": self.truncated_questions,
        }
