"""
Module: parsing.answer_key.extractor

Purpose:
    Find answer key lines ("Gabarito: 1-C, 2-A", "Answer key: 1.B 2.D") in
    the normalized lines and turn them into a question number -> letter map.
    Key lines are removed from the stream handed to the line classifier.

Key Functions:
    - extract_answer_key(): Split lines into (AnswerKey, remaining lines)
    - parse_answer_pairs(): Parse "number-letter" pairs from a string
    - is_answer_key_line(): Whether a line introduces an answer key

Key Classes:
    - AnswerKey: Immutable question number -> letter mapping

Dependencies:
    - re (std)

Used By:
    - parsing.pipeline: Pre-pass before structural parsing
    - parsing.correctness: Looks up the key per question number
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

# "Gabarito:", "Resposta:", "Respostas:", "Answer key:" (any case)
ANSWER_KEY_LINE = re.compile(r"^(?:gabarito|respostas?|answer\s*key)\s*:\s*", re.IGNORECASE)
# "1-A", "2.b", "3 - C", "4D"; the letter must not start a longer word
ANSWER_PAIR = re.compile(r"(\d+)\s*[-.]?\s*([A-Za-z])(?![A-Za-z])")


@dataclass(frozen=True)
class AnswerKey(Mapping[int, str]):
    """
    Question number -> correct option letter.

    Behaves as a read-only mapping. Letters are always uppercase.

    Example:
        >>> key = AnswerKey.from_pairs([(1, "c"), (2, "A")])
        >>> key[1]
        'C'
    """
    answers: Dict[int, str] = field(default_factory=dict)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[int, str]]) -> AnswerKey:
        """Build a key; a repeated number keeps its last letter."""
        answers: Dict[int, str] = {}
        for number, letter in pairs:
            answers[int(number)] = letter.upper()
        return cls(answers=answers)

    def merged(self, other: Mapping[int, str]) -> AnswerKey:
        """Return a new key where entries of other override this key."""
        answers = dict(self.answers)
        answers.update({number: letter.upper() for number, letter in other.items()})
        return AnswerKey(answers=answers)

    def __getitem__(self, number: int) -> str:
        return self.answers[number]

    def __iter__(self) -> Iterator[int]:
        return iter(self.answers)

    def __len__(self) -> int:
        return len(self.answers)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.answers.items())))


def is_answer_key_line(line: str) -> bool:
    return bool(ANSWER_KEY_LINE.match(line))


def parse_answer_pairs(text: str) -> List[Tuple[int, str]]:
    """
    Parse repeated number/letter pairs.

    Args:
        text: Text after the key keyword, e.g. "1-A, 2.b 3 C"

    Returns:
        List of (number, uppercase letter) in source order

    Example:
        >>> parse_answer_pairs("1-A, 2.b 3 C")
        [(1, 'A'), (2, 'B'), (3, 'C')]
    """
    return [
        (int(match.group(1)), match.group(2).upper())
        for match in ANSWER_PAIR.finditer(text)
    ]


def extract_answer_key(
    lines: Iterable[str],
    *,
    extra_key: Optional[str] = None,
) -> Tuple[AnswerKey, List[str]]:
    """
    Extract the answer key from normalized lines.

    Every line introduced by a key keyword is consumed. When several key
    lines exist their pairs are merged in order, so a number declared twice
    keeps its last letter.

    Args:
        lines: Normalized lines (see parsing.utils.text.split_lines)
        extra_key: Optional key supplied separately from the text (with or
            without the keyword). Applied after the in-text key lines.

    Returns:
        Tuple of (AnswerKey, lines without the key lines)

    Example:
        >>> key, rest = extract_answer_key(["1. Q?", "A) x", "Gabarito: 1-A"])
        >>> dict(key), rest
        ({1: 'A'}, ['1. Q?', 'A) x'])
    """
    pairs: List[Tuple[int, str]] = []
    remaining: List[str] = []

    for line in lines:
        match = ANSWER_KEY_LINE.match(line)
        if not match:
            remaining.append(line)
            continue
        found = parse_answer_pairs(line[match.end():])
        logger.debug(f"Answer key line with {len(found)} pair(s): {line!r}")
        pairs.extend(found)

    if extra_key and extra_key.strip():
        extra = extra_key.strip()
        match = ANSWER_KEY_LINE.match(extra)
        if match:
            extra = extra[match.end():]
        pairs.extend(parse_answer_pairs(extra))

    key = AnswerKey.from_pairs(pairs)
    if key:
        logger.debug(f"Answer key covers {len(key)} question(s)")
    return key, remaining
