"""
Integration tests for parsing.pipeline

Runs whole texts through parse_quiz_text() and validate_parsed_quiz(),
checking the properties every parse result must have.
"""
import re

import pytest

from quiz_toolkit.core.models import ParsedQuiz
from quiz_toolkit.parsing import (
    ParserConfig,
    normalize_quiz,
    parse_quiz_text,
    parse_quiz_text_with_report,
    validate_parsed_quiz,
)
from quiz_toolkit.parsing.validation import NO_QUESTIONS_ERROR


def correct_labels(question):
    return [opt.label for opt in question.options if opt.is_correct]


class TestParseExamples:

    def test_parse_when_answer_key_line_then_key_sets_correct_option(self, brazil_text):
        quiz = parse_quiz_text(brazil_text)

        assert quiz.question_count == 1
        question = quiz.questions[0]
        assert question.text == "Capital of Brazil?"
        assert question.labels == ("A", "B", "C", "D")
        assert question.correct_option.text == "Brasília"
        assert validate_parsed_quiz(quiz).is_valid

    def test_parse_when_mixed_formats_then_options_relabelled(self, multi_format_text):
        quiz = parse_quiz_text(multi_format_text)

        assert [q.text for q in quiz.questions] == ["Q1", "Q2"]
        assert [correct_labels(q) for q in quiz.questions] == [["B"], ["B"]]
        assert [o.text for o in quiz.questions[1].options] == ["Opt1", "Opt2"]

    def test_parse_when_roman_statements_then_attached_to_question(self, statements_text):
        quiz = parse_quiz_text(statements_text)

        question = quiz.questions[0]
        assert [st.label for st in question.statements] == ["I", "II"]
        assert question.text == (
            "Sobre a água, considere as afirmativas: Está correto o que se afirma em:"
        )
        assert correct_labels(question) == ["C"]
        assert question.options[2].text == "I e II"

    def test_parse_when_windows_line_endings_then_same_result(self, brazil_text):
        assert parse_quiz_text(brazil_text.replace("\n", "\r\n")).questions == (
            parse_quiz_text(brazil_text).questions
        )

    def test_parse_when_bars_instead_of_roman_one_then_statements(self):
        text = "1. Analise:\n|. primeira\n||. segunda\nA) só I *\nB) I e II"
        question = parse_quiz_text(text).questions[0]
        assert [st.label for st in question.statements] == ["I", "II"]

    def test_parse_when_true_false_then_two_options(self):
        text = (
            "1. A água ferve a 100 ºC ao nível do mar.\n"
            "A) Verdadeiro\nB) Falso\nC) Não sei\n"
            "Gabarito: 1-A"
        )
        question = parse_quiz_text(text).questions[0]
        assert question.labels == ("A", "B")
        assert correct_labels(question) == ["A"]

    def test_parse_when_no_marker_or_key_then_first_option_correct(self):
        quiz = parse_quiz_text("1. Q?\nA) x\nB) y")
        assert correct_labels(quiz.questions[0]) == ["A"]

    def test_parse_when_marker_conflicts_with_key_then_marker_wins(self):
        quiz = parse_quiz_text("1. Q?\nA) x\nB) y *\nGabarito: 1-A")
        assert correct_labels(quiz.questions[0]) == ["B"]


class TestAnswerKeyInput:

    def test_parse_when_key_supplied_separately_then_applied(self):
        quiz = parse_quiz_text("1. Q?\nA) x\nB) y\nC) z", answer_key="1-C")
        assert correct_labels(quiz.questions[0]) == ["C"]

    def test_parse_when_supplied_key_conflicts_with_text_key_then_supplied_wins(self):
        quiz = parse_quiz_text("1. Q?\nA) x\nB) y\nC) z\nGabarito: 1-A", answer_key="Gabarito: 1-C")
        assert correct_labels(quiz.questions[0]) == ["C"]

    def test_parse_when_key_line_then_not_part_of_any_question(self, brazil_text):
        result = parse_quiz_text_with_report(brazil_text)
        assert dict(result.answer_key) == {1: "C"}
        assert all("Gabarito" not in o.text for o in result.quiz.questions[0].options)


class TestQuestionCap:

    def test_parse_when_more_than_twenty_then_first_twenty_kept(self, questions_text):
        result = parse_quiz_text_with_report(questions_text(25))

        assert result.quiz.question_count == 20
        assert result.quiz.questions[-1].text == "Question number 20?"
        assert result.diagnostics.truncated_questions == 5

    def test_parse_when_config_limit_then_respected(self, questions_text):
        quiz = parse_quiz_text(questions_text(8), config=ParserConfig(max_questions=3))
        assert [q.order for q in quiz.questions] == [1, 2, 3]

    def test_parse_when_config_limit_above_cap_then_clamped(self, questions_text):
        quiz = parse_quiz_text(questions_text(22), config=ParserConfig(max_questions=100))
        assert quiz.question_count == 20


class TestParseProperties:

    @pytest.fixture(params=["brazil_text", "multi_format_text", "statements_text"])
    def parsed(self, request) -> ParsedQuiz:
        return parse_quiz_text(request.getfixturevalue(request.param))

    def test_every_question_has_exactly_one_correct_option(self, parsed):
        assert all(len(q.correct_options) == 1 for q in parsed.questions if q.options)

    def test_orders_are_consecutive_from_one(self, parsed):
        assert [q.order for q in parsed.questions] == list(range(1, parsed.question_count + 1))

    def test_normalization_is_idempotent(self, parsed):
        assert normalize_quiz(parsed) == parsed

    def test_metadata_defaults(self, parsed):
        assert re.fullmatch(r"Quiz \d{2}/\d{2}/\d{4}", parsed.title)
        assert parsed.description == (
            f"Automatically generated quiz with {parsed.question_count} question(s)"
        )
        assert parsed.category == "General"

    def test_parse_is_deterministic(self, brazil_text):
        assert parse_quiz_text(brazil_text) == parse_quiz_text(brazil_text)


class TestInvalidInput:

    @pytest.mark.parametrize("text", ["", "   \n\n  ", "Just some notes\nwith no questions", "Gabarito: 1-A"])
    def test_parse_when_no_questions_then_validation_reports_it(self, text):
        quiz = parse_quiz_text(text)
        assert quiz.questions == ()
        assert validate_parsed_quiz(quiz).errors == (NO_QUESTIONS_ERROR,)

    def test_parse_when_single_option_then_error_names_question(self):
        quiz = parse_quiz_text("1. Q1?\nA) only\n2. Q2?\nA) x\nB) y")
        assert validate_parsed_quiz(quiz).errors == ("Question 1 must have at least 2 options",)

    def test_parse_when_duplicate_labels_then_kept_and_reported(self):
        result = parse_quiz_text_with_report("1. Q?\nA) x\nA) y *")

        assert result.quiz.questions[0].labels == ("A", "A")
        assert result.diagnostics.duplicate_labels == [(1, "A")]
        assert validate_parsed_quiz(result.quiz).errors == (
            "Question 1 has duplicate option label A",
        )

    def test_parse_when_preamble_then_recorded_in_diagnostics(self, brazil_text):
        result = parse_quiz_text_with_report("Lista 3 - Geografia\n" + brazil_text)
        assert result.diagnostics.orphan_lines == ["Lista 3 - Geografia"]
        assert result.quiz.question_count == 1


class TestNumberedOptions:

    def test_parse_when_questions_and_options_both_numbered_then_questions_kept_apart(self):
        text = "4. Q4\n1) a\n2) b\n3) c\n4) d *\n5. Q5\n1) e\n2) f *"

        result = parse_quiz_text_with_report(text)

        quiz = result.quiz
        assert [q.text for q in quiz.questions] == ["Q4", "Q5"]
        assert [correct_labels(q) for q in quiz.questions] == [["D"], ["B"]]
        assert result.diagnostics.duplicate_labels == []
        assert validate_parsed_quiz(quiz).is_valid

    def test_parse_when_bare_question_label_then_text_on_following_line(self):
        quiz = parse_quiz_text("1.\nWhat?\nA) x\nB) y")

        assert quiz.question_count == 1
        assert quiz.questions[0].text == "What?"
        assert quiz.questions[0].labels == ("A", "B")

    def test_parse_when_markdown_bold_option_then_not_treated_as_marker(self):
        quiz = parse_quiz_text("1. Q?\nA) **Rio**\nB) Brasília *")

        question = quiz.questions[0]
        assert question.options[0].text == "**Rio**"
        assert correct_labels(question) == ["B"]


class TestMetadataOverrides:

    def test_parse_when_portuguese_metadata_configured_then_used(self, brazil_text):
        config = ParserConfig(title="Simulado 1", description="Revisão de geografia", category="Geral")

        quiz = parse_quiz_text(brazil_text, config=config)

        assert (quiz.title, quiz.description, quiz.category) == (
            "Simulado 1", "Revisão de geografia", "Geral",
        )
