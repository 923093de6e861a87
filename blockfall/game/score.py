"""Running score of the current game."""

from __future__ import annotations


class ScoreTracker:
    """Accumulates points for cleared rows."""

    def __init__(self) -> None:
        self._value: int = 0

    @property
    def value(self) -> int:
        return self._value

    def update(self, delta: int) -> None:
        self._value += delta

    def restart(self) -> None:
        self._value = 0
