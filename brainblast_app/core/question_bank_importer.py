"""Utilities for loading a question bank from a human-friendly text file.

File format (repeat blocks separated by blank lines or '---'):

    Q: Question text. Additional lines until the next marker are treated as
       part of the question.
    A: First option text
    B: Second option text
    C: Third option text
    D: Fourth option text
    CORRECT: A|B|C|D

Example:

    Q: If log₂(x) = 3, what is x?
    A: 6
    B: 7
    C: 8
    D: 9
    CORRECT: C

Unlike classroom quizzes, every question in a match bank must be graded, so
CORRECT is mandatory. The correct answer is stored as the option text since
the engine compares selected option strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from brainblast_app.core.models import Question

DEFAULT_BANK_PATH = Path(__file__).resolve().parent.parent / "data" / "default_questions.txt"


class QuestionBankImportError(Exception):
    """Raised when a question bank definition cannot be parsed."""


@dataclass(slots=True)
class ImportedQuestionBank:
    """Container for an imported bank and where it came from."""

    source_path: Path
    questions: list[Question]


_OPTION_ORDER = ["A", "B", "C", "D"]


def load_question_bank_from_file(file_path: Path) -> ImportedQuestionBank:
    text = file_path.read_text(encoding="utf-8")
    questions = parse_question_bank_text(text)
    if not questions:
        raise QuestionBankImportError("Question bank file did not contain any questions.")
    return ImportedQuestionBank(source_path=file_path, questions=questions)


def load_default_question_bank() -> list[Question]:
    """Return the math questions bundled with the application."""
    return load_question_bank_from_file(DEFAULT_BANK_PATH).questions


def parse_question_bank_text(text: str) -> list[Question]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())

    return [_parse_block(block) for block in blocks if block]


def _parse_block(block: str) -> Question:
    question_lines: list[str] = []
    options: dict[str, str] = {}
    correct_letter: str | None = None
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("CORRECT:"):
            correct_letter = line.split(":", 1)[1].strip().upper()
            current_section = None
            continue

        if len(line) > 2 and line[0].upper() in _OPTION_ORDER and line[1] == ":":
            letter = line[0].upper()
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section in _OPTION_ORDER:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuestionBankImportError(
                f"Encountered text outside of a known section: '{line}'."
            )

    if not question_lines:
        raise QuestionBankImportError("Question text missing (Q: ...)")
    if len(options) != len(_OPTION_ORDER):
        raise QuestionBankImportError("Each question must define exactly four options (A-D).")

    option_list = tuple(options[letter].strip() for letter in _OPTION_ORDER)
    if any(not opt for opt in option_list):
        raise QuestionBankImportError("Option text cannot be empty.")

    if correct_letter is None:
        raise QuestionBankImportError("CORRECT is required for every question.")
    if correct_letter not in _OPTION_ORDER:
        raise QuestionBankImportError("CORRECT must be one of A, B, C, or D.")

    question_text = "\n".join(question_lines).strip()
    if not question_text:
        raise QuestionBankImportError("Question text cannot be empty.")

    return Question(
        text=question_text,
        correct_answer=option_list[_OPTION_ORDER.index(correct_letter)],
        options=option_list,
    )
