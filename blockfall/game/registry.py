"""
Settled-block registry: every frozen block group, in freeze order.

The registry is the static board. Collision queries, line clearing, and
the game-over check all scan it directly; the grid is at most 10x15, so
brute-force scans are fine and no spatial index is kept.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator

import numpy as np

from blockfall.game.cell import Cell
from blockfall.game.constants import FIELD_HEIGHT, FIELD_WIDTH

if TYPE_CHECKING:
    from blockfall.game.block_group import BlockGroup


class SettledRegistry:
    """Append-only history of frozen block groups.

    Groups emptied by line clearing stay in the history as empty entries.

    Attributes:
        groups: Frozen groups in the order they froze.
        width: Field width in columns.
        height: Field height in rows.
    """

    def __init__(self, width: int = FIELD_WIDTH, height: int = FIELD_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.groups: list[BlockGroup] = []

    def __len__(self) -> int:
        return len(self.groups)

    def append(self, group: BlockGroup) -> None:
        self.groups.append(group)

    def cells(self) -> Iterator[Cell]:
        """Iterate over every settled cell, group by group."""
        for group in self.groups:
            yield from group.cells

    def cell_count(self) -> int:
        return sum(len(group.cells) for group in self.groups)

    def cells_in_row(self, y: int) -> list[Cell]:
        return [cell for cell in self.cells() if cell.y == y]

    def is_occupied(self, x: int, y: int) -> bool:
        for cell in self.cells():
            if cell.x == x and cell.y == y:
                return True
        return False

    def has_neighbor(self, cells: Iterable[Cell], dx: int, dy: int) -> bool:
        """Check whether any settled cell sits at offset (dx, dy) of a given cell.

        Scans every settled cell against every given cell and stops at the
        first match.

        Args:
            cells: Cells of the moving group.
            dx: Column offset to probe (-1 left, +1 right).
            dy: Row offset to probe (+1 below).

        Returns:
            True if some settled cell is exactly at (cell.x + dx, cell.y + dy).
        """
        cells = list(cells)
        for old in self.cells():
            for new in cells:
                if new.x + dx == old.x and new.y + dy == old.y:
                    return True
        return False

    def remove_cell(self, cell: Cell) -> bool:
        """Destroy a cell and remove it from its owning group.

        Returns:
            True if the cell was found in the registry.
        """
        for group in self.groups:
            if cell in group.cells:
                cell.destroy()
                group.cells.remove(cell)
                return True
        return False

    def is_overwhelmed(self) -> bool:
        """Game-over check: a settled cell rests on the topmost row."""
        return any(cell.y == 0 for cell in self.cells())

    def get_grid(self) -> np.ndarray:
        """Return a grid snapshot of the settled cells.

        Cells outside the field (possible only mid-rotation) are skipped.

        Returns:
            A numpy array of shape (height, width), dtype int8, holding 0
            for empty cells and color + 1 for occupied ones.
        """
        grid = np.zeros((self.height, self.width), dtype=np.int8)
        for cell in self.cells():
            if 0 <= cell.x < self.width and 0 <= cell.y < self.height:
                grid[cell.y, cell.x] = cell.color + 1
        return grid

    def clear(self) -> None:
        """Destroy every settled cell and forget all groups."""
        for cell in self.cells():
            cell.destroy()
        self.groups = []
