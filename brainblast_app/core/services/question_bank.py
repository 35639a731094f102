"""Service holding the ordered question bank used by a match."""

from __future__ import annotations

from collections.abc import Iterable

from brainblast_app.constants.match_constants import OPTIONS_PER_QUESTION
from brainblast_app.core.models import Question


class QuestionBank:
    """Validated, ordered collection of questions that cycles by round."""

    def __init__(self, questions: Iterable[Question]) -> None:
        prepared = [self._prepare_question(q) for q in questions]
        if not prepared:
            raise ValueError("Question bank must contain at least one question.")
        self._questions: tuple[Question, ...] = tuple(prepared)

    def __len__(self) -> int:
        return len(self._questions)

    def question_for_round(self, round_number: int) -> Question:
        """Return the question for a 1-based round, wrapping past the end of the bank."""
        if round_number < 1:
            raise ValueError("Round numbers start at 1.")
        return self._questions[(round_number - 1) % len(self._questions)]

    def _prepare_question(self, question: Question) -> Question:
        """Validate and normalize a question before storage."""
        options = self._validate_options(question.options)

        cleaned_text = question.text.strip()
        if not cleaned_text:
            raise ValueError("Question text must not be empty.")

        correct_answer = question.correct_answer.strip()
        if not correct_answer:
            raise ValueError("Correct answer must not be empty.")
        if options.count(correct_answer) != 1:
            raise ValueError(
                f"Correct answer '{correct_answer}' must appear exactly once among the options."
            )

        return Question(text=cleaned_text, correct_answer=correct_answer, options=options)

    @staticmethod
    def _validate_options(options: Iterable[str]) -> tuple[str, ...]:
        cleaned = tuple(option.strip() for option in options)
        if len(cleaned) != OPTIONS_PER_QUESTION:
            raise ValueError(f"Each question must have exactly {OPTIONS_PER_QUESTION} options.")
        if any(not option for option in cleaned):
            raise ValueError("Option text cannot be empty.")
        return cleaned
