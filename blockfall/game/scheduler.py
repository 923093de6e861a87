"""
Tick-driven interval timers.

Nothing here reads a clock. The owner feeds elapsed milliseconds through
advance(), and the timer fires its callback once per full interval. The
game loop decides where the milliseconds come from: the pygame clock, or
a fixed step in headless runs.
"""

from __future__ import annotations

from typing import Callable


class IntervalTimer:
    """Periodic callback driven by advance(elapsed_ms).

    Attributes:
        interval_ms: Period between callback invocations.
        callback: Zero-argument callable invoked on every period.
    """

    def __init__(self, interval_ms: int, callback: Callable[[], None]) -> None:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self.callback = callback
        self._elapsed: int = 0
        self._running: bool = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Start (or restart) the timer from a zero phase."""
        self._elapsed = 0
        self._running = True

    def stop(self) -> None:
        self._running = False
        self._elapsed = 0

    def advance(self, elapsed_ms: int) -> int:
        """Advance the timer and fire the callback for each elapsed period.

        The callback may stop the timer; no further periods fire after that.

        Args:
            elapsed_ms: Milliseconds since the previous advance.

        Returns:
            Number of times the callback fired.
        """
        if not self._running:
            return 0
        self._elapsed += elapsed_ms
        fired = 0
        while self._running and self._elapsed >= self.interval_ms:
            self._elapsed -= self.interval_ms
            self.callback()
            fired += 1
        return fired
