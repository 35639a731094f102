"""Utilities for exporting a question bank to the plain-text import format."""

from __future__ import annotations

from pathlib import Path

from brainblast_app.core.models import Question

_OPTION_LETTERS = ("A", "B", "C", "D")


def save_question_bank_to_file(file_path: Path, questions: list[Question]) -> None:
    """Persist the provided questions to disk in the text import format."""

    if not questions:
        raise ValueError("Cannot export an empty question bank.")

    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(serialize_questions(questions), encoding="utf-8")


def serialize_questions(questions: list[Question]) -> str:
    blocks = [_serialize_question(question) for question in questions]
    return "\n\n---\n\n".join(blocks) + "\n"


def _serialize_question(question: Question) -> str:
    lines: list[str] = []

    question_lines = question.text.splitlines() or [question.text]
    lines.append(f"Q: {question_lines[0]}")
    lines.extend(question_lines[1:])

    for letter, option_text in zip(_OPTION_LETTERS, question.options):
        option_lines = option_text.splitlines() or [option_text]
        lines.append(f"{letter}: {option_lines[0]}")
        lines.extend(option_lines[1:])

    try:
        correct_index = list(question.options).index(question.correct_answer)
    except ValueError:
        raise ValueError(
            f"Correct answer '{question.correct_answer}' is not one of the options of '{question.text}'."
        ) from None
    lines.append(f"CORRECT: {_OPTION_LETTERS[correct_index]}")

    return "\n".join(lines)
