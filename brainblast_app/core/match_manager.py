"""Business logic for the match state shared between both player views."""

from __future__ import annotations

from collections.abc import Iterable
import logging
from threading import Lock

from brainblast_app.constants.match_constants import (
    PLAYER_1,
    PLAYER_2,
    ROUND_WINS_TO_WIN_MATCH,
    TURN_TIME_LIMIT_SECONDS,
)
from brainblast_app.core.match_snapshot import MatchSnapshot, QuestionView, RoundResultView
from brainblast_app.core.models import Question, RoundResult, TurnState
from brainblast_app.core.question_bank_importer import load_default_question_bank
from brainblast_app.core.services.match_engine import InvalidStateTransition, MatchEngine

logger = logging.getLogger(__name__)


class MatchManager:
    """Facade over a single MatchEngine that serializes every call behind one lock.

    Both player views hold a reference to the same manager. Mutations are
    applied atomically and reads return copies, so a view never observes a
    round transition half-applied.
    """

    def __init__(
        self,
        questions: Iterable[Question] | None = None,
        rounds_to_win: int = ROUND_WINS_TO_WIN_MATCH,
    ) -> None:
        self._lock = Lock()
        if questions is None:
            questions = load_default_question_bank()
        self._engine = MatchEngine(questions, rounds_to_win=rounds_to_win)
        logger.info(
            "Match ready with %d question(s); first to %d round wins",
            self._engine.question_count,
            rounds_to_win,
        )

    # --- Turn transitions ---

    def submit_player1_answer(self, answer: str, time: float) -> None:
        with self._lock:
            try:
                self._engine.submit_player1_answer(answer, time)
            except (InvalidStateTransition, ValueError) as exc:
                logger.warning("Rejected player 1 submission: %s", exc)
                raise
            logger.debug(
                "Player 1 answered round %d in %.2fs",
                self._engine.current_round,
                self._engine.player1_time,
            )

    def begin_player2_turn(self) -> None:
        with self._lock:
            self._engine.begin_player2_turn()

    def submit_player2_answer(self, answer: str, time: float) -> RoundResult:
        with self._lock:
            try:
                result = self._engine.submit_player2_answer(answer, time)
            except (InvalidStateTransition, ValueError) as exc:
                logger.warning("Rejected player 2 submission: %s", exc)
                raise
            self._log_round_result(result)
            return result

    def submit_answer(self, player: int, answer: str, time: float) -> RoundResult | None:
        """Route a submission to the given player's operation."""
        if player == PLAYER_1:
            self.submit_player1_answer(answer, time)
            return None
        if player == PLAYER_2:
            return self.submit_player2_answer(answer, time)
        raise ValueError(f"Unknown player {player!r}.")

    def submit_timeout(self, player: int) -> RoundResult | None:
        """Submit an empty answer at the full time limit for an expired turn."""
        result = self.submit_answer(player, "", float(TURN_TIME_LIMIT_SECONDS))
        logger.info("Player %d ran out of time", player)
        return result

    def reset_game(self) -> None:
        with self._lock:
            self._engine.reset_game()
            logger.info("Match reset")

    # --- Reads ---

    def get_turn_state(self) -> TurnState:
        with self._lock:
            return self._engine.turn_state

    def get_current_question(self) -> Question:
        with self._lock:
            return self._engine.current_question

    def get_current_round(self) -> int:
        with self._lock:
            return self._engine.current_round

    def get_round_wins(self, player: int) -> int:
        with self._lock:
            if player == PLAYER_1:
                return self._engine.player1_round_wins
            if player == PLAYER_2:
                return self._engine.player2_round_wins
            raise ValueError(f"Unknown player {player!r}.")

    def get_round_history(self) -> list[RoundResult]:
        with self._lock:
            return self._engine.round_history

    def get_last_round_result(self) -> RoundResult | None:
        with self._lock:
            return self._engine.last_round_result

    def get_match_winner(self) -> int | None:
        with self._lock:
            return self._engine.match_winner

    def is_match_complete(self) -> bool:
        with self._lock:
            return self._engine.turn_state is TurnState.MATCH_COMPLETE

    def get_snapshot(self) -> MatchSnapshot:
        with self._lock:
            engine = self._engine
            return MatchSnapshot(
                current_question=QuestionView.from_question(engine.current_question),
                current_round=engine.current_round,
                turn_state=engine.turn_state,
                player1_score=engine.player1_score,
                player2_score=engine.player2_score,
                player1_round_wins=engine.player1_round_wins,
                player2_round_wins=engine.player2_round_wins,
                player1_time=engine.player1_time,
                player2_time=engine.player2_time,
                round_history=[RoundResultView.from_result(r) for r in engine.round_history],
                match_winner=engine.match_winner,
            )

    def _log_round_result(self, result: RoundResult) -> None:
        if result.winner is None:
            logger.info("Round %d tied: neither player was correct", result.round_number)
        else:
            logger.info(
                "Round %d won by player %d (%.2fs vs %.2fs)",
                result.round_number,
                result.winner,
                result.player1_time,
                result.player2_time,
            )
        if self._engine.turn_state is TurnState.MATCH_COMPLETE:
            logger.info(
                "Match complete: player %d wins %d-%d",
                self._engine.match_winner,
                self._engine.player1_round_wins,
                self._engine.player2_round_wins,
            )
