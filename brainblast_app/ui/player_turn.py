"""Glue between one player's view, its countdown, and the shared match."""

from __future__ import annotations

import random

from brainblast_app.constants.match_constants import PLAYER_1, PLAYER_2
from brainblast_app.core.match_manager import MatchManager
from brainblast_app.core.models import RoundResult, TurnState
from brainblast_app.ui.hints import hint_for
from brainblast_app.ui.lifelines import fifty_fifty, is_fifty_fifty_available
from brainblast_app.ui.turn_countdown import TurnCountdown

_ACTIVE_STATE = {
    PLAYER_1: TurnState.PLAYER1_TURN,
    PLAYER_2: TurnState.PLAYER2_TURN,
}


class PlayerTurnController:
    """Runs one player's turns against the shared MatchManager.

    Each view owns its own controller and countdown, but both controllers hold
    the same manager so they always act on a single match.
    """

    def __init__(
        self,
        player: int,
        manager: MatchManager,
        countdown: TurnCountdown | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if player not in _ACTIVE_STATE:
            raise ValueError(f"Unknown player {player!r}.")
        self.player = player
        self.manager = manager
        self.countdown = countdown or TurnCountdown()
        self._rng = rng or random.Random()
        self._filtered_options: list[str] | None = None
        self._active_round: int | None = None
        self.countdown.expired.connect(self._handle_expired)

    def is_my_turn(self) -> bool:
        return self.manager.get_turn_state() is _ACTIVE_STATE[self.player]

    def activate(self) -> bool:
        """Called when this player's view becomes visible; starts the clock on their turn."""
        if self.player == PLAYER_2 and self.manager.get_turn_state() is TurnState.WAITING_FOR_PLAYER2:
            self.manager.begin_player2_turn()
        if not self.is_my_turn():
            return False
        self._filtered_options = None
        self._active_round = self.manager.get_current_round()
        self.countdown.start()
        return True

    def deactivate(self) -> None:
        self.countdown.stop()
        self._filtered_options = None
        self._active_round = None

    def _turn_is_current(self) -> bool:
        """False once the match has moved past the turn this clock was started for."""
        return self.is_my_turn() and self.manager.get_current_round() == self._active_round

    def get_displayed_options(self) -> list[str]:
        if self._filtered_options is not None:
            return list(self._filtered_options)
        return list(self.manager.get_current_question().options)

    def select_option(self, option: str) -> RoundResult | None:
        """Submit the chosen option with the time spent so far.

        A selection left over from a turn the match has already moved past
        only stops the clock.
        """
        if not self.countdown.is_running():
            raise RuntimeError(f"Player {self.player} has no running turn.")
        elapsed = self.countdown.stop()
        self._filtered_options = None
        if not self._turn_is_current():
            return None
        return self.manager.submit_answer(self.player, option, elapsed)

    def show_hint(self) -> str:
        """Pause the clock while the hint is on screen and return its text."""
        self.countdown.pause()
        return hint_for(self.manager.get_current_question().text)

    def dismiss_hint(self) -> None:
        self.countdown.resume()

    def can_use_fifty_fifty(self) -> bool:
        return (
            self._filtered_options is None
            and self.countdown.is_running()
            and is_fifty_fifty_available(self.manager.get_round_wins(self.player))
        )

    def use_fifty_fifty(self) -> list[str]:
        if not self.can_use_fifty_fifty():
            raise RuntimeError(f"50/50 is not available to player {self.player}.")
        question = self.manager.get_current_question()
        self._filtered_options = fifty_fifty(question.options, question.correct_answer, self._rng)
        return list(self._filtered_options)

    def _handle_expired(self) -> None:
        self._filtered_options = None
        if not self._turn_is_current():
            return
        self.manager.submit_timeout(self.player)


class HotSeatMatch:
    """Both player views of one local match, sharing a single manager."""

    def __init__(
        self,
        manager: MatchManager | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.manager = manager or MatchManager()
        self.player1 = PlayerTurnController(PLAYER_1, self.manager, rng=rng)
        self.player2 = PlayerTurnController(PLAYER_2, self.manager, rng=rng)

    def controller_for(self, player: int) -> PlayerTurnController:
        if player == PLAYER_1:
            return self.player1
        if player == PLAYER_2:
            return self.player2
        raise ValueError(f"Unknown player {player!r}.")

    def reset_game(self) -> None:
        """Stop both clocks, then reset the match."""
        self.player1.deactivate()
        self.player2.deactivate()
        self.manager.reset_game()

    def rematch(self) -> bool:
        """Reset and start player 1's first turn."""
        self.reset_game()
        return self.player1.activate()
