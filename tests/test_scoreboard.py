"""Tests for the per-player score and round-win counters."""

import pytest

from brainblast_app.core.services.scoreboard import Scoreboard


class TestScoreboard:
    def test_round_win_moves_both_counters(self):
        scoreboard = Scoreboard()
        scoreboard.record_round_win(1)
        scoreboard.record_round_win(1)
        scoreboard.record_round_win(2)

        assert scoreboard.get_score(1) == scoreboard.get_round_wins(1) == 2
        assert scoreboard.get_score(2) == scoreboard.get_round_wins(2) == 1
        assert scoreboard.get_leader_round_wins() == 2
        assert scoreboard.get_player_with_round_wins(2) == 1
        assert scoreboard.get_player_with_round_wins(3) is None

    def test_clear(self):
        scoreboard = Scoreboard()
        scoreboard.record_round_win(2)
        scoreboard.clear()
        assert scoreboard.get_score(2) == scoreboard.get_round_wins(2) == 0

    def test_unknown_player(self):
        with pytest.raises(ValueError):
            Scoreboard().record_round_win(3)
