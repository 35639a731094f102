"""Service for tracking per-player scores and round wins."""

from __future__ import annotations

from dataclasses import dataclass

from brainblast_app.constants.match_constants import PLAYERS


@dataclass(slots=True)
class PlayerTally:
    """Mutable counters for one player."""

    score: int = 0
    round_wins: int = 0


class Scoreboard:
    """Keeps score and round-win counters for both players.

    Both counters are always incremented together today; they stay separate so
    that score can carry partial credit later without touching the match rules.
    """

    def __init__(self) -> None:
        self._tallies: dict[int, PlayerTally] = {player: PlayerTally() for player in PLAYERS}

    def record_round_win(self, player: int) -> None:
        """Credit a resolved round to the given player."""
        tally = self._tally(player)
        tally.score += 1
        tally.round_wins += 1

    def get_score(self, player: int) -> int:
        return self._tally(player).score

    def get_round_wins(self, player: int) -> int:
        return self._tally(player).round_wins

    def get_leader_round_wins(self) -> int:
        return max(tally.round_wins for tally in self._tallies.values())

    def get_player_with_round_wins(self, threshold: int) -> int | None:
        """Return the player who has reached the threshold, if any."""
        for player in PLAYERS:
            if self._tallies[player].round_wins >= threshold:
                return player
        return None

    def clear(self) -> None:
        """Reset all counters."""
        for tally in self._tallies.values():
            tally.score = 0
            tally.round_wins = 0

    def _tally(self, player: int) -> PlayerTally:
        try:
            return self._tallies[player]
        except KeyError:
            raise ValueError(f"Unknown player {player!r}; expected one of {PLAYERS}.") from None
