#!/usr/bin/env python3
"""
Parse a pasted quiz text file and print the structured result.

Reads the text from a file (or stdin), runs the parser and the validator,
prints the quiz as JSON and lists validation errors on stderr.

Usage:
    python scripts/parse_quiz_text.py quiz.txt
    python scripts/parse_quiz_text.py quiz.txt --answer-key "1-C, 2-A" -o quiz.json
    cat quiz.txt | python scripts/parse_quiz_text.py -

Exit codes:
    0  quiz is valid
    1  quiz parsed but failed validation
    2  input could not be read
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add src to path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root / "src"))

from quiz_toolkit.core.utils.serialization import save_quiz_json, serialize_quiz
from quiz_toolkit.parsing import (
    MAX_QUESTIONS,
    ParserConfig,
    parse_quiz_text_with_report,
    validate_parsed_quiz,
)

logger = logging.getLogger("parse_quiz_text")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Parse pasted quiz text into structured questions",
    )
    parser.add_argument("input", help="Text file to parse, or '-' for stdin")
    parser.add_argument("--answer-key", "-k", help='Answer key given separately, e.g. "1-C, 2-A"')
    parser.add_argument("--max-questions", "-n", type=int, default=MAX_QUESTIONS,
                        help=f"Maximum number of questions to keep (at most {MAX_QUESTIONS})")
    parser.add_argument("--title", help="Quiz title (default: 'Quiz <date>')")
    parser.add_argument("--category", default="General", help="Quiz category")
    parser.add_argument("--output", "-o", type=Path, help="Write JSON here instead of stdout")
    parser.add_argument("--diagnostics", action="store_true",
                        help="Include parser diagnostics in the printed JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        raw_text = read_input(args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Cannot read {args.input}: {e}", file=sys.stderr)
        return 2

    try:
        config = ParserConfig(
            max_questions=args.max_questions,
            title=args.title,
            category=args.category,
        )
    except ValueError as e:
        print(f"Invalid option: {e}", file=sys.stderr)
        return 2

    result = parse_quiz_text_with_report(raw_text, answer_key=args.answer_key, config=config)
    validation = validate_parsed_quiz(result.quiz)

    if args.output:
        save_quiz_json(result.quiz, args.output)
        print(f"Saved {result.quiz.question_count} question(s) to {args.output}")
    else:
        payload = serialize_quiz(result.quiz)
        if args.diagnostics:
            payload["diagnostics"] = result.diagnostics.to_dict()
        print(json.dumps(payload, indent=2, ensure_ascii=False))

    if result.diagnostics.has_issues:
        logger.warning(result.diagnostics.summary())

    for error in validation.errors:
        print(error, file=sys.stderr)

    return 0 if validation.is_valid else 1


if __name__ == "__main__":
    sys.exit(main())
