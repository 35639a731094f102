"""Read models handed from the match manager to the player views."""

from __future__ import annotations

from pydantic import BaseModel

from brainblast_app.core.models import Question, RoundResult, TurnState


class QuestionView(BaseModel):
    text: str
    correct_answer: str
    options: list[str]

    @classmethod
    def from_question(cls, question: Question) -> "QuestionView":
        return cls(
            text=question.text,
            correct_answer=question.correct_answer,
            options=list(question.options),
        )


class RoundResultView(BaseModel):
    round_number: int
    question: QuestionView
    player1_answer: str
    player2_answer: str
    player1_time: float
    player2_time: float
    winner: int | None = None
    is_pending: bool = False

    @classmethod
    def from_result(cls, result: RoundResult) -> "RoundResultView":
        return cls(
            round_number=result.round_number,
            question=QuestionView.from_question(result.question),
            player1_answer=result.player1_answer,
            player2_answer=result.player2_answer,
            player1_time=result.player1_time,
            player2_time=result.player2_time,
            winner=result.winner,
            is_pending=result.is_pending,
        )


class MatchSnapshot(BaseModel):
    """Consistent copy of every observable field, taken under the manager lock."""

    current_question: QuestionView
    current_round: int
    turn_state: TurnState
    player1_score: int
    player2_score: int
    player1_round_wins: int
    player2_round_wins: int
    player1_time: float
    player2_time: float
    round_history: list[RoundResultView]
    match_winner: int | None = None

    @property
    def last_round_result(self) -> RoundResultView | None:
        return self.round_history[-1] if self.round_history else None
