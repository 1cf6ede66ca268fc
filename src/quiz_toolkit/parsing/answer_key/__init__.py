"""
Module: parsing.answer_key

Purpose:
    Answer key ("gabarito") extraction from pasted quiz text.
"""

from .extractor import AnswerKey, extract_answer_key, parse_answer_pairs

__all__ = ["AnswerKey", "extract_answer_key", "parse_answer_pairs"]
