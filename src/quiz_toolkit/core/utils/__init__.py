"""
Core utilities: quiz serialization helpers.
"""

from .serialization import (
    serialize_quiz,
    deserialize_quiz,
    save_quiz_json,
    load_quiz_json,
)

__all__ = [
    "serialize_quiz",
    "deserialize_quiz",
    "save_quiz_json",
    "load_quiz_json",
]
