"""Domain models for the two-player quiz match."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TurnState(Enum):
    """Which participant the engine currently expects an answer from."""

    PLAYER1_TURN = auto()
    WAITING_FOR_PLAYER2 = auto()
    PLAYER2_TURN = auto()
    MATCH_COMPLETE = auto()


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with exactly four options."""

    text: str
    correct_answer: str
    options: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class RoundResult:
    """Outcome of one round; provisional until player 2 has answered."""

    round_number: int
    question: Question
    player1_answer: str
    player2_answer: str
    player1_time: float
    player2_time: float
    winner: int | None = None  # None means a tie
    is_pending: bool = False
