"""
Block group: the falling shape.

A block group owns its cells, its auto-drop timer, and the movement and
rotation rules. Movement is validated against the field bounds and the
settled registry held in the shared GameState; a blocked downward move
freezes the group and hands control to the freeze handler (the game
controller), which decides what happens next.
"""

from __future__ import annotations

import enum
from typing import Callable

from blockfall.game.cell import Cell
from blockfall.game.constants import UPDATE_INTERVAL_MS
from blockfall.game.errors import InvalidConstructionError, InvalidStateTransitionError
from blockfall.game.scheduler import IntervalTimer
from blockfall.game.state import GameState


class GroupStatus(enum.Enum):
    """Lifecycle of a block group. Transitions only move forward."""
    PENDING = "pending"
    ACTIVE = "active"
    FROZEN = "frozen"


class BlockGroup:
    """A set of same-coloured cells that move together.

    Attributes:
        cells: Member cells, in shape definition order.
        state: Shared game state (registry, pause flag).
        status: Current lifecycle status.
        drop_timer: Auto-drop timer, running only while the group is active.
    """

    def __init__(
        self,
        cells: list[Cell],
        state: GameState,
        on_freeze: Callable[[BlockGroup], None] | None = None,
        drop_interval_ms: int = UPDATE_INTERVAL_MS,
    ) -> None:
        """Create a pending block group.

        Call unfreeze() to make it active.

        Args:
            cells: Member cells; must be non-empty and share one colour.
            state: Shared game state.
            on_freeze: Called with this group right after it freezes.
            drop_interval_ms: Auto-drop period.

        Raises:
            InvalidConstructionError: If cells is empty or mixes colours.
        """
        if not cells:
            raise InvalidConstructionError("Bad construction of BlockGroup: no cells given.")
        if len({cell.color for cell in cells}) != 1:
            raise InvalidConstructionError(
                "Bad construction of BlockGroup: all cells must share one color."
            )
        self.cells = list(cells)
        self.state = state
        self.status = GroupStatus.PENDING
        self._on_freeze = on_freeze
        self.drop_timer = IntervalTimer(drop_interval_ms, self._auto_drop)

    # ── Status ───────────────────────────────────────────────────────────

    @property
    def is_frozen(self) -> bool:
        return self.status is not GroupStatus.ACTIVE

    @property
    def color(self) -> int | None:
        return self.cells[0].color if self.cells else None

    def positions(self) -> list[tuple[int, int]]:
        return [cell.position for cell in self.cells]

    def unfreeze(self) -> None:
        """Activate a freshly created group and start its auto-drop timer.

        Raises:
            InvalidStateTransitionError: If the group was already activated.
        """
        if self.status is not GroupStatus.PENDING:
            raise InvalidStateTransitionError(
                f"Attempt to unfreeze a {self.status.value} BlockGroup"
            )
        self.status = GroupStatus.ACTIVE
        self.drop_timer.start()

    def freeze(self) -> None:
        """Settle the group: stop auto-drop and append it to the registry.

        Raises:
            InvalidStateTransitionError: If the group is not active.
        """
        if self.status is not GroupStatus.ACTIVE:
            raise InvalidStateTransitionError(
                f"Attempt to freeze a {self.status.value} BlockGroup"
            )
        self.drop_timer.stop()
        self.status = GroupStatus.FROZEN
        self.state.registry.append(self)
        if self._on_freeze is not None:
            self._on_freeze(self)

    def _auto_drop(self) -> None:
        if not self.state.paused:
            self.move_down()

    # ── Bounds ───────────────────────────────────────────────────────────

    def min_x(self) -> int:
        return min(cell.x for cell in self.cells)

    def max_x(self) -> int:
        return max(cell.x for cell in self.cells)

    def min_y(self) -> int:
        return min(cell.y for cell in self.cells)

    def max_y(self) -> int:
        return max(cell.y for cell in self.cells)

    # ── Collision queries ────────────────────────────────────────────────

    def has_left_neighbor(self) -> bool:
        return self.state.registry.has_neighbor(self.cells, -1, 0)

    def has_right_neighbor(self) -> bool:
        return self.state.registry.has_neighbor(self.cells, 1, 0)

    def has_bottom_neighbor(self) -> bool:
        return self.state.registry.has_neighbor(self.cells, 0, 1)

    # ── Movement ─────────────────────────────────────────────────────────

    def _shift(self, dx: int, dy: int) -> None:
        for cell in self.cells:
            cell.move_to(cell.x + dx, cell.y + dy)

    def move_left(self) -> bool:
        """Shift one column left.

        Returns:
            True if the group moved.
        """
        if self.is_frozen:
            return False
        if self.min_x() <= 0 or self.has_left_neighbor():
            return False
        self._shift(-1, 0)
        return True

    def move_right(self) -> bool:
        """Shift one column right.

        Returns:
            True if the group moved.
        """
        if self.is_frozen:
            return False
        if self.max_x() >= self.state.registry.width - 1 or self.has_right_neighbor():
            return False
        self._shift(1, 0)
        return True

    def move_down(self) -> bool:
        """Shift one row down, or freeze if the way down is blocked.

        Returns:
            True if the group moved, False if it froze or was already frozen.
        """
        if self.is_frozen:
            return False
        if self.max_y() >= self.state.registry.height - 1 or self.has_bottom_neighbor():
            self.freeze()
            return False
        self._shift(0, 1)
        return True

    # ── Rotation ─────────────────────────────────────────────────────────

    def can_rotate(self) -> bool:
        """Conservative pre-rotation guard.

        Rotation is refused when the group touches the right wall or has a
        settled cell directly beside it on either side.
        """
        width = self.state.registry.width
        if max(cell.x + 1 for cell in self.cells) >= width:
            return False
        if min(cell.x + 1 for cell in self.cells) < 0:
            return False
        return not (self.has_right_neighbor() or self.has_left_neighbor())

    def rotate(self) -> bool:
        """Rotate the group by a quarter turn in place.

        The cells are transposed and re-anchored at the old top-left corner
        of the bounding box, then mirrored vertically. The mirror leaves the
        cells at negative rows; they are walked back with move_down(), and
        any horizontal overflow is walked back with move_left() and
        move_right(). Because the walking goes through the normal movement
        rules, the group can freeze part-way through a rotation.

        Returns:
            True if the rotation was carried out, False if it was refused.
        """
        if self.is_frozen or not self.can_rotate():
            return False

        old_x, old_y = self.min_x(), self.min_y()
        for cell in self.cells:
            cell.move_to(cell.y, cell.x)

        new_x, new_y = self.min_x(), self.min_y()
        for cell in self.cells:
            cell.move_to(cell.x - (new_x - old_x), cell.y - (new_y - old_y))

        old_max_y = self.max_y()
        for cell in self.cells:
            cell.move_to(cell.x, -cell.y)
        new_max_y = self.max_y()

        for _ in range(abs(new_max_y - old_max_y)):
            self.move_down()

        width = self.state.registry.width
        while not self.is_frozen and self.max_x() >= width:
            if not self.move_left():
                break
        while not self.is_frozen and self.min_x() < 0:
            if not self.move_right():
                break
        return True

    def __repr__(self) -> str:
        return f"BlockGroup(status={self.status.value}, cells={self.positions()})"
