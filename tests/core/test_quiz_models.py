"""
Unit Tests for Quiz Models

Tests for Option, Statement, ParsedQuestion, ParsedQuiz and ValidationResult.
"""

import pytest

from quiz_toolkit.core.models import (
    Option,
    ParsedQuestion,
    ParsedQuiz,
    Statement,
    ValidationResult,
)


class TestOption:
    """Tests for Option dataclass."""

    def test_init_when_valid_label_then_creates_option(self):
        opt = Option("C", "Brasília", is_correct=True)
        assert opt.label == "C"
        assert opt.text == "Brasília"
        assert opt.is_correct is True

    def test_init_when_default_correctness_then_false(self):
        assert Option("A", "Rio").is_correct is False

    @pytest.mark.parametrize("label", ["a", "AB", "1", "", "Á"])
    def test_init_when_invalid_label_then_raises_error(self, label):
        with pytest.raises(ValueError, match="single uppercase letter"):
            Option(label, "text")

    def test_init_when_frozen_then_immutable(self):
        opt = Option("A", "Rio")
        with pytest.raises(AttributeError):
            opt.text = "Recife"  # type: ignore

    def test_with_correct_when_same_flag_then_returns_same_instance(self):
        opt = Option("A", "Rio")
        assert opt.with_correct(False) is opt

    def test_with_correct_when_flag_changes_then_returns_copy(self):
        opt = Option("A", "Rio")
        marked = opt.with_correct(True)
        assert marked.is_correct is True
        assert opt.is_correct is False

    def test_from_dict_when_round_tripped_then_equal(self):
        opt = Option("B", "São Paulo", is_correct=True)
        assert Option.from_dict(opt.to_dict()) == opt


class TestParsedQuestion:
    """Tests for ParsedQuestion dataclass."""

    @pytest.fixture
    def question(self) -> ParsedQuestion:
        return ParsedQuestion(
            text="Capital of Brazil?",
            options=(Option("A", "Rio"), Option("B", "Brasília", True), Option("C", "Salvador")),
            statements=(Statement("I", "First"),),
            order=1,
            number=1,
        )

    def test_init_when_order_zero_then_raises_error(self):
        with pytest.raises(ValueError, match="1-based"):
            ParsedQuestion(text="Q", order=0)

    def test_correct_option_when_single_marked_then_returns_it(self, question):
        assert question.correct_option == Option("B", "Brasília", True)

    def test_correct_option_when_two_marked_then_none(self):
        q = ParsedQuestion("Q", (Option("A", "x", True), Option("B", "y", True)))
        assert q.correct_option is None
        assert len(q.correct_options) == 2

    def test_labels_when_options_present_then_in_order(self, question):
        assert question.labels == ("A", "B", "C")

    def test_duplicate_labels_when_label_repeated_then_listed_once(self):
        q = ParsedQuestion("Q", (Option("A", "x"), Option("A", "y"), Option("A", "z"), Option("B", "w")))
        assert q.duplicate_labels == ("A",)

    def test_with_options_when_unchanged_then_same_instance(self, question):
        assert question.with_options(question.options) is question

    def test_to_dict_when_no_statements_then_key_omitted(self):
        q = ParsedQuestion("Q", (Option("A", "x"),))
        assert "statements" not in q.to_dict()

    def test_from_dict_when_round_tripped_then_equal(self, question):
        assert ParsedQuestion.from_dict(question.to_dict()) == question

    def test_from_dict_when_number_missing_then_defaults_to_order(self):
        q = ParsedQuestion.from_dict({"order": 3, "text": "Q", "options": []})
        assert q.number == 3


class TestParsedQuiz:
    """Tests for ParsedQuiz dataclass."""

    def test_question_count_when_questions_present_then_counts(self):
        quiz = ParsedQuiz("T", "D", "General", (ParsedQuestion("Q1"), ParsedQuestion("Q2", order=2)))
        assert quiz.question_count == 2

    def test_with_questions_when_new_list_then_returns_copy(self):
        quiz = ParsedQuiz("T", "D", "General")
        updated = quiz.with_questions([ParsedQuestion("Q1")])
        assert updated.question_count == 1
        assert quiz.question_count == 0

    def test_from_dict_when_round_tripped_then_equal(self):
        quiz = ParsedQuiz(
            "Quiz", "Desc", "General",
            (ParsedQuestion("Q1", (Option("A", "x", True), Option("B", "y"))),),
        )
        assert ParsedQuiz.from_dict(quiz.to_dict()) == quiz


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_from_errors_when_empty_then_valid(self):
        result = ValidationResult.from_errors([])
        assert result.is_valid is True
        assert bool(result) is True

    def test_from_errors_when_errors_then_invalid(self):
        result = ValidationResult.from_errors(["Question 1 is empty"])
        assert result.is_valid is False
        assert result.errors == ("Question 1 is empty",)
