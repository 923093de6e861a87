"""Mutable game state shared by the engine operations."""

from __future__ import annotations

from dataclasses import dataclass, field

from blockfall.game.registry import SettledRegistry
from blockfall.game.score import ScoreTracker


@dataclass
class GameState:
    """Everything the engine mutates during play.

    Attributes:
        registry: Frozen block groups forming the static board.
        score: Running score.
        paused: When True, auto-drop and input commands are no-ops.
        rows_cleared: Total rows cleared in the current game.
    """

    registry: SettledRegistry = field(default_factory=SettledRegistry)
    score: ScoreTracker = field(default_factory=ScoreTracker)
    paused: bool = True
    rows_cleared: int = 0
