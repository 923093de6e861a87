"""
A single occupied grid cell.

Cells are plain data: a position and a colour index. Drawing them is the
renderer's job.
"""

from __future__ import annotations

from blockfall.game.errors import DestroyedCellError, InvalidConstructionError


class Cell:
    """One block of a block group.

    Attributes:
        x: Column (0 = left edge).
        y: Row (0 = top row).
        destroyed: True once the cell has been cleared or discarded.
    """

    __slots__ = ("x", "y", "_color", "destroyed")

    def __init__(self, x: int, y: int, color: int) -> None:
        """Create a cell at (x, y).

        Args:
            x: Column, must be non-negative.
            y: Row, must be non-negative.
            color: Index into BLOCK_COLORS.

        Raises:
            InvalidConstructionError: If x or y is negative.
        """
        if x < 0 or y < 0:
            raise InvalidConstructionError(
                f"Bad construction of Cell({x}, {y}): x and y must be non-negative."
            )
        self.x = x
        self.y = y
        self._color = color
        self.destroyed = False

    @property
    def color(self) -> int:
        return self._color

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def move_to(self, x: int, y: int) -> None:
        """Move the cell to (x, y).

        No bounds check happens here: rotation moves cells through negative
        rows on the way to their final position.

        Raises:
            DestroyedCellError: If the cell has already been destroyed.
        """
        if self.destroyed:
            raise DestroyedCellError(f"Can't move cell at {self.position}: it is destroyed.")
        self.x = x
        self.y = y

    def destroy(self) -> None:
        self.destroyed = True

    def __repr__(self) -> str:
        return f"Cell(x={self.x}, y={self.y}, color={self._color})"
