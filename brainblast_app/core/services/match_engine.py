"""Turn state machine and scoring engine for a two-player match."""

from __future__ import annotations

from collections.abc import Iterable
import math

from brainblast_app.constants.match_constants import PLAYER_1, PLAYER_2, ROUND_WINS_TO_WIN_MATCH
from brainblast_app.core.models import Question, RoundResult, TurnState
from brainblast_app.core.services.question_bank import QuestionBank
from brainblast_app.core.services.scoreboard import Scoreboard


class InvalidStateTransition(Exception):
    """Raised when an operation is called in a turn state that does not allow it."""

    def __init__(self, operation: str, turn_state: TurnState, detail: str | None = None) -> None:
        self.operation = operation
        self.turn_state = turn_state
        message = f"Cannot {operation} while in {turn_state.name}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


def resolve_round_winner(
    player1_correct: bool,
    player2_correct: bool,
    player1_time: float,
    player2_time: float,
) -> int | None:
    """Return the round winner, or None when neither player is correct.

    When both are correct the strictly faster player wins and equal times go
    to player 2.
    """
    if player1_correct and player2_correct:
        return PLAYER_1 if player1_time < player2_time else PLAYER_2
    if player1_correct:
        return PLAYER_1
    if player2_correct:
        return PLAYER_2
    return None


class MatchEngine:
    """Owns all state of a single match.

    Not thread-safe on its own: callers that share one engine between views
    go through ``MatchManager``, which serializes every call behind a lock.
    """

    def __init__(
        self,
        questions: Iterable[Question],
        rounds_to_win: int = ROUND_WINS_TO_WIN_MATCH,
    ) -> None:
        if rounds_to_win < 1:
            raise ValueError("rounds_to_win must be at least 1.")
        self._bank = QuestionBank(questions)
        self._rounds_to_win = rounds_to_win
        self._scoreboard = Scoreboard()
        self._current_round: int = 1
        self._current_question: Question = self._bank.question_for_round(1)
        self._turn_state: TurnState = TurnState.PLAYER1_TURN
        self._round_history: list[RoundResult] = []
        self._player1_time: float = 0.0
        self._player2_time: float = 0.0

    # --- Observable state ---

    @property
    def current_question(self) -> Question:
        return self._current_question

    @property
    def current_round(self) -> int:
        return self._current_round

    @property
    def turn_state(self) -> TurnState:
        return self._turn_state

    @property
    def round_history(self) -> list[RoundResult]:
        return list(self._round_history)

    @property
    def player1_score(self) -> int:
        return self._scoreboard.get_score(PLAYER_1)

    @property
    def player2_score(self) -> int:
        return self._scoreboard.get_score(PLAYER_2)

    @property
    def player1_round_wins(self) -> int:
        return self._scoreboard.get_round_wins(PLAYER_1)

    @property
    def player2_round_wins(self) -> int:
        return self._scoreboard.get_round_wins(PLAYER_2)

    @property
    def player1_time(self) -> float:
        return self._player1_time

    @property
    def player2_time(self) -> float:
        return self._player2_time

    @property
    def rounds_to_win(self) -> int:
        return self._rounds_to_win

    @property
    def question_count(self) -> int:
        return len(self._bank)

    @property
    def match_winner(self) -> int | None:
        if self._turn_state is not TurnState.MATCH_COMPLETE:
            return None
        return self._scoreboard.get_player_with_round_wins(self._rounds_to_win)

    @property
    def last_round_result(self) -> RoundResult | None:
        return self._round_history[-1] if self._round_history else None

    # --- Transitions ---

    def submit_player1_answer(self, answer: str, time: float) -> None:
        """Record player 1's answer and hand the round over to player 2."""
        if self._turn_state is not TurnState.PLAYER1_TURN:
            raise InvalidStateTransition("submit player 1 answer", self._turn_state)
        elapsed = _validate_time(time)

        self._player1_time = elapsed
        self._round_history.append(
            RoundResult(
                round_number=self._current_round,
                question=self._current_question,
                player1_answer=answer,
                player2_answer="",
                player1_time=elapsed,
                player2_time=0.0,
                winner=None,
                is_pending=True,
            )
        )
        self._turn_state = TurnState.WAITING_FOR_PLAYER2

    def begin_player2_turn(self) -> None:
        """Mark player 2's view as active; a no-op if it already is."""
        if self._turn_state is TurnState.PLAYER2_TURN:
            return
        if self._turn_state is not TurnState.WAITING_FOR_PLAYER2:
            raise InvalidStateTransition("begin player 2 turn", self._turn_state)
        self._turn_state = TurnState.PLAYER2_TURN

    def submit_player2_answer(self, answer: str, time: float) -> RoundResult:
        """Record player 2's answer, resolve the round and advance the match.

        Every check runs before any field changes, so a rejected call leaves
        the match untouched.
        """
        if self._turn_state not in (TurnState.WAITING_FOR_PLAYER2, TurnState.PLAYER2_TURN):
            raise InvalidStateTransition("submit player 2 answer", self._turn_state)
        pending = self.last_round_result
        if pending is None or not pending.is_pending or pending.round_number != self._current_round:
            raise InvalidStateTransition(
                "submit player 2 answer",
                self._turn_state,
                f"no pending player 1 answer for round {self._current_round}",
            )
        elapsed = _validate_time(time)

        self._player2_time = elapsed
        correct_answer = self._current_question.correct_answer
        winner = resolve_round_winner(
            player1_correct=pending.player1_answer == correct_answer,
            player2_correct=answer == correct_answer,
            player1_time=pending.player1_time,
            player2_time=elapsed,
        )

        result = RoundResult(
            round_number=self._current_round,
            question=self._current_question,
            player1_answer=pending.player1_answer,
            player2_answer=answer,
            player1_time=pending.player1_time,
            player2_time=elapsed,
            winner=winner,
        )
        self._round_history[-1] = result

        if winner is not None:
            self._scoreboard.record_round_win(winner)

        if self._scoreboard.get_leader_round_wins() >= self._rounds_to_win:
            self._turn_state = TurnState.MATCH_COMPLETE
        else:
            self._current_round += 1
            self._current_question = self._bank.question_for_round(self._current_round)
            self._turn_state = TurnState.PLAYER1_TURN
        return result

    def reset_game(self) -> None:
        """Restore the construction-time state; valid from any state."""
        self._scoreboard.clear()
        self._current_round = 1
        self._current_question = self._bank.question_for_round(1)
        self._turn_state = TurnState.PLAYER1_TURN
        self._round_history = []
        self._player1_time = 0.0
        self._player2_time = 0.0


def _validate_time(time: float) -> float:
    if isinstance(time, bool) or not isinstance(time, (int, float)):
        raise ValueError(f"Elapsed time must be a number of seconds, got {time!r}.")
    elapsed = float(time)
    if not math.isfinite(elapsed) or elapsed < 0:
        raise ValueError(f"Elapsed time must be a finite, non-negative number, got {time!r}.")
    return elapsed
