"""Tests for scripts/parse_quiz_text.py.

The script is loaded from its file path and driven through main(argv).
"""

import importlib.util
import json
from pathlib import Path

import pytest

from quiz_toolkit.core.utils.serialization import load_quiz_json

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "parse_quiz_text.py"


@pytest.fixture(scope="module")
def script():
    spec = importlib.util.spec_from_file_location("parse_quiz_text", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def quiz_file(tmp_path, brazil_text):
    path = tmp_path / "quiz.txt"
    path.write_text(brazil_text, encoding="utf-8")
    return path


class TestParseQuizTextScript:
    """End-to-end runs of the command line entry point."""

    def test_main_when_valid_quiz_then_prints_json_and_exits_zero(self, script, quiz_file, capsys):
        assert script.main([str(quiz_file)]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload["schema_version"] == 1
        assert payload["category"] == "General"
        options = payload["questions"][0]["options"]
        assert [o["label"] for o in options if o["is_correct"]] == ["C"]

    def test_main_when_answer_key_option_then_overrides_text_key(self, script, quiz_file, capsys):
        assert script.main([str(quiz_file), "--answer-key", "1-A"]) == 0

        options = json.loads(capsys.readouterr().out)["questions"][0]["options"]
        assert [o["label"] for o in options if o["is_correct"]] == ["A"]

    def test_main_when_title_and_category_then_used(self, script, quiz_file, capsys):
        script.main([str(quiz_file), "--title", "Geografia", "--category", "Capitals"])

        payload = json.loads(capsys.readouterr().out)
        assert payload["title"] == "Geografia"
        assert payload["category"] == "Capitals"

    def test_main_when_diagnostics_flag_then_included(self, script, quiz_file, capsys):
        script.main([str(quiz_file), "--diagnostics"])

        diagnostics = json.loads(capsys.readouterr().out)["diagnostics"]
        assert diagnostics["truncated_questions"] == 0
        assert diagnostics["orphan_lines"] == []

    def test_main_when_output_path_then_json_file_written(self, script, quiz_file, tmp_path, capsys):
        output = tmp_path / "out" / "quiz.json"

        assert script.main([str(quiz_file), "-o", str(output)]) == 0

        assert "Saved 1 question(s)" in capsys.readouterr().out
        quiz = load_quiz_json(output)
        assert quiz.questions[0].correct_option.label == "C"

    def test_main_when_no_questions_then_errors_on_stderr_and_exit_one(self, script, tmp_path, capsys):
        path = tmp_path / "notes.txt"
        path.write_text("Nothing to see here", encoding="utf-8")

        assert script.main([str(path)]) == 1
        assert "No questions were detected in the text" in capsys.readouterr().err

    def test_main_when_file_missing_then_exit_two(self, script, tmp_path, capsys):
        assert script.main([str(tmp_path / "missing.txt")]) == 2
        assert "Cannot read" in capsys.readouterr().err

    def test_main_when_max_questions_invalid_then_exit_two(self, script, quiz_file, capsys):
        assert script.main([str(quiz_file), "--max-questions", "0"]) == 2
        assert "max_questions" in capsys.readouterr().err

    def test_main_when_max_questions_then_capped(self, script, tmp_path, questions_text, capsys):
        path = tmp_path / "many.txt"
        path.write_text(questions_text(6), encoding="utf-8")

        assert script.main([str(path), "-n", "4"]) == 0
        assert len(json.loads(capsys.readouterr().out)["questions"]) == 4
