"""
Game controller: spawning, freeze handling, input commands, and ticks.

TetrisGame owns the GameState and the active block group. It is the only
object the outside world talks to: the play loop and the simulator feed
it input commands and elapsed time, subscribe to its signals, and read
get_state() snapshots for drawing.
"""

from __future__ import annotations

import enum
from typing import Any, Callable

from blockfall.game.block_group import BlockGroup
from blockfall.game.cell import Cell
from blockfall.game.constants import UPDATE_INTERVAL_MS
from blockfall.game.line_clear import check_rows
from blockfall.game.registry import SettledRegistry
from blockfall.game.shapes import ShapeGenerator
from blockfall.game.state import GameState


class Action(enum.IntEnum):
    """Input commands accepted from the input layer."""
    LEFT = 0
    RIGHT = 1
    DOWN = 2
    ROTATE = 3
    NOOP = 4


class GameStatus(enum.Enum):
    IDLE = "idle"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class TetrisGame:
    """Controller for a single-player game.

    Signals are plain lists of callables; append a listener to subscribe.

    Attributes:
        state: Registry, score, and pause flag.
        status: IDLE before the first start, PLAYING, or GAME_OVER.
        current_group: The active block group, or None.
        groups_spawned: Block groups spawned in the current game.
        on_block_freeze: Listeners called with no arguments after a group
            freezes without ending the game.
        on_game_over: Listeners called with the final score.
        on_row_cleared: Listeners called with the number of rows a freeze
            cleared, cascades included.
    """

    def __init__(
        self,
        seed: int | None = None,
        board_width: int | None = None,
        board_height: int | None = None,
        drop_interval_ms: int = UPDATE_INTERVAL_MS,
    ) -> None:
        """Initialize an idle game.

        Args:
            seed: Seed for shape and colour choice; None for a random game.
            board_width: Field width override (defaults to FIELD_WIDTH).
            board_height: Field height override (defaults to FIELD_HEIGHT).
            drop_interval_ms: Auto-drop period of every spawned group.
        """
        registry = SettledRegistry()
        if board_width is not None:
            registry.width = board_width
        if board_height is not None:
            registry.height = board_height
        self.state = GameState(registry=registry)
        self.generator = ShapeGenerator(seed)
        self.drop_interval_ms = drop_interval_ms
        self.status = GameStatus.IDLE
        self.current_group: BlockGroup | None = None
        self.groups_spawned: int = 0

        self.on_block_freeze: list[Callable[[], None]] = []
        self.on_game_over: list[Callable[[int], None]] = []
        self.on_row_cleared: list[Callable[[int], None]] = []

    # ── Lifecycle ────────────────────────────────────────────────────────

    @property
    def score(self) -> int:
        return self.state.score.value

    @property
    def is_playing(self) -> bool:
        return self.status is GameStatus.PLAYING

    def start(self) -> dict[str, Any]:
        """Start a new game, discarding any previous one.

        Returns:
            Initial state snapshot (same format as get_state()).
        """
        if self.current_group is not None:
            self.current_group.drop_timer.stop()
            self.current_group = None
        self.state.registry.clear()
        self.state.score.restart()
        self.state.rows_cleared = 0
        self.state.paused = False
        self.groups_spawned = 0
        self.status = GameStatus.PLAYING
        self.spawn_next()
        return self.get_state()

    def toggle_pause(self) -> bool:
        """Pause or resume a running game.

        Returns:
            The new value of the pause flag.
        """
        if self.is_playing:
            self.state.paused = not self.state.paused
        return self.state.paused

    def spawn_next(
        self,
        shape: tuple[tuple[int, int], ...] | None = None,
        color: int | None = None,
    ) -> BlockGroup | None:
        """Spawn a new active block group.

        A missing shape or colour is picked by the shape generator. If any
        spawn coordinate is already occupied, the game ends instead.

        Args:
            shape: (x, y) spawn coordinates of the cells.
            color: Colour index shared by all cells.

        Returns:
            The new active group, or None if the spawn ended the game.
        """
        if shape is None or color is None:
            chosen_shape, chosen_color = self.generator.choose()
            shape = chosen_shape if shape is None else shape
            color = chosen_color if color is None else color

        for x, y in shape:
            if self.state.registry.is_occupied(x, y):
                self.current_group = None
                self._game_over()
                return None

        group = BlockGroup(
            [Cell(x, y, color) for x, y in shape],
            self.state,
            on_freeze=self._handle_freeze,
            drop_interval_ms=self.drop_interval_ms,
        )
        group.unfreeze()
        self.current_group = group
        self.groups_spawned += 1
        return group

    def _handle_freeze(self, group: BlockGroup) -> None:
        if self.current_group is group:
            self.current_group = None

        if self.state.registry.is_overwhelmed():
            self._game_over()
            return

        for listener in self.on_block_freeze:
            listener()

        cleared = check_rows(self.state)
        if cleared:
            for listener in self.on_row_cleared:
                listener(cleared)

        if self.is_playing:
            self.spawn_next()

    def _game_over(self) -> None:
        if self.current_group is not None:
            self.current_group.drop_timer.stop()
            self.current_group = None
        self.status = GameStatus.GAME_OVER
        self.state.paused = True
        for listener in self.on_game_over:
            listener(self.score)

    # ── Input commands ───────────────────────────────────────────────────

    def _accepts_input(self) -> bool:
        return (
            self.is_playing
            and not self.state.paused
            and self.current_group is not None
        )

    def move_left(self) -> bool:
        return self._accepts_input() and self.current_group.move_left()

    def move_right(self) -> bool:
        return self._accepts_input() and self.current_group.move_right()

    def move_down(self) -> bool:
        return self._accepts_input() and self.current_group.move_down()

    def rotate(self) -> bool:
        return self._accepts_input() and self.current_group.rotate()

    def step(self, action: int) -> tuple[dict[str, Any], int, bool]:
        """Apply one input command.

        Args:
            action: An Action value.

        Returns:
            A tuple of (state, score_gained, done):
              - state: dict from get_state()
              - score_gained: points earned by this command
              - done: True if the game is over
        """
        if not self.is_playing:
            return self.get_state(), 0, self.status is GameStatus.GAME_OVER

        score_before = self.score
        if action == Action.LEFT:
            self.move_left()
        elif action == Action.RIGHT:
            self.move_right()
        elif action == Action.DOWN:
            self.move_down()
        elif action == Action.ROTATE:
            self.rotate()

        done = self.status is GameStatus.GAME_OVER
        return self.get_state(), self.score - score_before, done

    # ── Time ─────────────────────────────────────────────────────────────

    def tick(self, elapsed_ms: int) -> None:
        """Advance the active group's auto-drop timer.

        The timer keeps running while paused; its drops are simply skipped.
        """
        if not self.is_playing or self.current_group is None:
            return
        self.current_group.drop_timer.advance(elapsed_ms)

    # ── Snapshot ─────────────────────────────────────────────────────────

    def get_state(self) -> dict[str, Any]:
        """Return a snapshot of the observable game state.

        Returns:
            Dict with keys:
              - grid: np.ndarray (height x width, int8), settled cells only
              - active_cells: list of (x, y, color) for the active group
              - score: int
              - rows_cleared: int (total for this game)
              - groups_spawned: int
              - status: GameStatus
              - paused: bool
        """
        active_cells: list[tuple[int, int, int]] = []
        if self.current_group is not None:
            active_cells = [(c.x, c.y, c.color) for c in self.current_group.cells]
        return {
            "grid": self.state.registry.get_grid(),
            "active_cells": active_cells,
            "score": self.score,
            "rows_cleared": self.state.rows_cleared,
            "groups_spawned": self.groups_spawned,
            "status": self.status,
            "paused": self.state.paused,
        }
