"""Match-related constants shared across UI and core layers."""

TURN_TIME_LIMIT_SECONDS: int = 30
COUNTDOWN_TICK_INTERVAL_MS: int = 1000
ROUND_WINS_TO_WIN_MATCH: int = 3
OPTIONS_PER_QUESTION: int = 4

PLAYER_1: int = 1
PLAYER_2: int = 2
PLAYERS: tuple[int, int] = (PLAYER_1, PLAYER_2)
