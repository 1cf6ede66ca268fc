"""
Core Models Package

Immutable data models for parsed quizzes.

All models in this package are frozen dataclasses. This ensures:
1. A parse result cannot be mutated after the parser returns it
2. Safe to share between concurrent parse calls
3. Value equality, so normalization can be checked for idempotence
"""

from .options import Option, Statement
from .questions import ParsedQuestion
from .quiz import ParsedQuiz, ValidationResult

__all__ = [
    "Option",
    "Statement",
    "ParsedQuestion",
    "ParsedQuiz",
    "ValidationResult",
]
