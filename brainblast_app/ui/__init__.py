"""Presentation-side helpers for the two player views."""

from .hints import hint_for
from .lifelines import fifty_fifty, is_fifty_fifty_available
from .player_turn import HotSeatMatch, PlayerTurnController
from .turn_countdown import TurnCountdown

__all__ = [
    "HotSeatMatch",
    "PlayerTurnController",
    "TurnCountdown",
    "fifty_fifty",
    "hint_for",
    "is_fifty_fifty_available",
]
