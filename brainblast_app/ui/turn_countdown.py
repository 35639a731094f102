"""Per-turn countdown clock driven by a Qt timer."""

from __future__ import annotations

from PySide6.QtCore import QObject, QTimer, Signal

from brainblast_app.constants.match_constants import (
    COUNTDOWN_TICK_INTERVAL_MS,
    TURN_TIME_LIMIT_SECONDS,
)


class TurnCountdown(QObject):
    """Counts a player's turn down in whole seconds.

    The match engine never measures time; the view reads ``elapsed_seconds``
    when the player answers and reacts to ``expired`` when the clock runs out.
    """

    remaining_changed = Signal(int)
    expired = Signal()

    def __init__(
        self,
        time_limit_seconds: int = TURN_TIME_LIMIT_SECONDS,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        if time_limit_seconds <= 0:
            raise ValueError("Time limit must be a positive integer.")
        self._time_limit_seconds = time_limit_seconds
        self._remaining_seconds = time_limit_seconds
        self._paused = False
        self._running = False

        self._timer = QTimer(self)
        self._timer.setInterval(COUNTDOWN_TICK_INTERVAL_MS)
        self._timer.timeout.connect(self._tick)

    @property
    def time_limit_seconds(self) -> int:
        return self._time_limit_seconds

    @property
    def remaining_seconds(self) -> int:
        return self._remaining_seconds

    @property
    def elapsed_seconds(self) -> float:
        return float(self._time_limit_seconds - self._remaining_seconds)

    def is_running(self) -> bool:
        return self._running

    def is_paused(self) -> bool:
        return self._paused

    def start(self) -> None:
        """Restart the clock from the full time limit."""
        self.stop()
        self._remaining_seconds = self._time_limit_seconds
        self._paused = False
        self._running = True
        self.remaining_changed.emit(self._remaining_seconds)
        self._timer.start()

    def stop(self) -> float:
        """Stop the clock and return the elapsed time."""
        if self._timer.isActive():
            self._timer.stop()
        self._running = False
        self._paused = False
        return self.elapsed_seconds

    def pause(self) -> None:
        if self._running:
            self._paused = True

    def resume(self) -> None:
        self._paused = False

    def _tick(self) -> None:
        if not self._running or self._paused or self._remaining_seconds <= 0:
            return
        self._remaining_seconds -= 1
        self.remaining_changed.emit(self._remaining_seconds)
        if self._remaining_seconds <= 0:
            self.stop()
            self.expired.emit()
