import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import quiz_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def brazil_text() -> str:
    """Single question resolved through a trailing answer key."""
    return (
        "1. Capital of Brazil?\n"
        "A) Rio\n"
        "B) São Paulo\n"
        "C) Brasília\n"
        "D) Salvador\n"
        "\n"
        "Gabarito: 1-C"
    )


@pytest.fixture
def multi_format_text() -> str:
    """Two questions with different label styles and inline markers."""
    return "1) Q1\na. Opt A\nb. Opt B *\n\n2 - Q2\n1) Opt1\n2) Opt2 ✓"


@pytest.fixture
def statements_text() -> str:
    """Question with Roman numeral statements before its options."""
    return (
        "1. Sobre a água, considere as afirmativas:\n"
        "I. Ferve a 100 ºC ao nível do mar\n"
        "II- Congela a 0 ºC\n"
        "Está correto o que se afirma em:\n"
        "A) Apenas I\n"
        "B) Apenas II\n"
        "C) I e II (correta)\n"
    )


def make_questions_text(count: int) -> str:
    """Build `count` well-formed questions, option B marked on each."""
    blocks = [
        f"{n}. Question number {n}?\nA) Wrong {n}\nB) Right {n} *\nC) Other {n}"
        for n in range(1, count + 1)
    ]
    return "\n\n".join(blocks)


@pytest.fixture
def questions_text():
    """Factory fixture: questions_text(25) -> text with 25 questions."""
    return make_questions_text
