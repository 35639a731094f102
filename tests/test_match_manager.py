"""Tests for the lock-guarded match facade shared by both views."""

import logging
from threading import Thread

import pytest

from brainblast_app.constants.match_constants import PLAYER_1, PLAYER_2, TURN_TIME_LIMIT_SECONDS
from brainblast_app.core.match_manager import MatchManager
from brainblast_app.core.match_snapshot import MatchSnapshot
from brainblast_app.core.models import TurnState
from brainblast_app.core.services.match_engine import InvalidStateTransition


class TestMatchManager:
    def test_default_bank_is_loaded(self):
        manager = MatchManager()
        question = manager.get_current_question()
        assert question.text == "If 2x + 5 = 13, what is the value of x?"
        assert question.correct_answer == "4"

    def test_scenario_player2_faster(self, questions):
        manager = MatchManager(questions)
        manager.submit_player1_answer("right-0", 5.0)
        manager.begin_player2_turn()
        result = manager.submit_player2_answer("right-0", 3.0)

        assert result.winner == PLAYER_2
        snapshot = manager.get_snapshot()
        assert snapshot.player2_score == 1
        assert snapshot.current_round == 2
        assert snapshot.current_question.text == questions[1].text
        assert snapshot.turn_state is TurnState.PLAYER1_TURN

    def test_submit_answer_routes_by_player(self, questions):
        manager = MatchManager(questions)
        assert manager.submit_answer(PLAYER_1, "right-0", 2.0) is None
        result = manager.submit_answer(PLAYER_2, "wrong-0-a", 1.0)
        assert result.winner == PLAYER_1
        with pytest.raises(ValueError):
            manager.submit_answer(3, "right-1", 1.0)

    def test_submit_timeout_uses_empty_answer_and_full_time(self, questions):
        manager = MatchManager(questions)
        manager.submit_timeout(PLAYER_1)
        result = manager.submit_timeout(PLAYER_2)

        assert result.player1_answer == result.player2_answer == ""
        assert result.player1_time == result.player2_time == float(TURN_TIME_LIMIT_SECONDS)
        assert result.winner is None
        assert manager.get_current_round() == 2

    def test_rejected_submission_propagates_and_keeps_state(self, questions, caplog):
        manager = MatchManager(questions)
        before = manager.get_snapshot()
        with pytest.raises(InvalidStateTransition):
            manager.submit_player2_answer("right-0", 1.0)
        assert manager.get_snapshot() == before
        assert "Rejected player 2 submission" in caplog.text

    def test_timeout_is_logged_only_when_accepted(self, questions, caplog):
        manager = MatchManager(questions)
        caplog.set_level(logging.INFO, logger="brainblast_app")

        with pytest.raises(InvalidStateTransition):
            manager.submit_timeout(PLAYER_2)
        with pytest.raises(ValueError):
            manager.submit_timeout(3)
        assert "ran out of time" not in caplog.text

        manager.submit_timeout(PLAYER_1)
        assert "Player 1 ran out of time" in caplog.text

    def test_string_time_is_rejected_before_logging(self, questions, caplog):
        manager = MatchManager(questions)
        caplog.set_level(logging.DEBUG, logger="brainblast_app")
        with pytest.raises(ValueError):
            manager.submit_player1_answer("right-0", "5")
        assert manager.get_round_history() == []

        manager.submit_player1_answer("right-0", 4)
        assert "Player 1 answered round 1 in 4.00s" in caplog.text

    def test_snapshot_reports_winner_and_last_result(self, questions):
        manager = MatchManager(questions)
        for _ in range(3):
            question = manager.get_current_question()
            manager.submit_player1_answer(question.correct_answer, 1.0)
            manager.submit_player2_answer("", float(TURN_TIME_LIMIT_SECONDS))

        snapshot = manager.get_snapshot()
        assert isinstance(snapshot, MatchSnapshot)
        assert snapshot.turn_state is TurnState.MATCH_COMPLETE
        assert snapshot.match_winner == PLAYER_1
        assert manager.get_match_winner() == PLAYER_1
        assert manager.is_match_complete()
        assert snapshot.last_round_result.round_number == 3
        assert snapshot.last_round_result.winner == PLAYER_1
        assert [r.round_number for r in snapshot.round_history] == [1, 2, 3]

    def test_reset_game_restores_initial_snapshot(self, questions):
        manager = MatchManager(questions)
        initial = manager.get_snapshot()
        manager.submit_player1_answer("right-0", 2.0)
        manager.submit_player2_answer("right-0", 1.0)
        manager.submit_player1_answer("wrong-1-a", 4.0)

        manager.reset_game()
        assert manager.get_snapshot() == initial
        assert manager.get_last_round_result() is None

    def test_concurrent_views_never_double_submit(self, questions):
        manager = MatchManager(questions)
        errors: list[Exception] = []

        def player1_view():
            try:
                manager.submit_player1_answer("right-0", 1.0)
            except InvalidStateTransition as exc:
                errors.append(exc)

        threads = [Thread(target=player1_view) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(errors) == 7
        assert len(manager.get_round_history()) == 1
        assert manager.get_turn_state() is TurnState.WAITING_FOR_PLAYER2
