"""
Line clearing and gravity collapse.

After a group freezes, check_rows() scans the settled registry from the
bottom row up. A row holding exactly one cell per column is cleared: the
score goes up, its cells are destroyed, and every settled cell above it
falls cell by cell until it rests on something. The collapse runs a fixed
number of passes and re-scans for complete rows after each pass, so rows
completed by the collapse cascade-clear in the same freeze event.

Nothing here tracks deltas between passes: the "occupied below" test is
recomputed from the registry on every single step of every cell, and
which rows cascade depends on the resulting fall order.
"""

from __future__ import annotations

from blockfall.game.cell import Cell
from blockfall.game.constants import ROW_SCORE
from blockfall.game.registry import SettledRegistry
from blockfall.game.state import GameState


def check_rows(state: GameState) -> int:
    """Clear every complete row, cascading through collapses.

    Args:
        state: Shared game state; score and registry are updated in place.

    Returns:
        Number of rows cleared, including cascades.
    """
    registry = state.registry
    cleared = 0
    for y in range(registry.height, -1, -1):
        row = registry.cells_in_row(y)
        if len(row) == registry.width:
            state.score.update(ROW_SCORE)
            state.rows_cleared += 1
            delete_cells(registry, row)
            cleared += 1
            cleared += collapse_above(state, y)
    return cleared


def delete_cells(registry: SettledRegistry, cells: list[Cell]) -> None:
    """Destroy the given cells and drop them from their owning groups.

    Groups left without cells stay in the registry.
    """
    for cell in cells:
        registry.remove_cell(cell)


def collapse_above(state: GameState, y: int) -> int:
    """Let every settled cell above row y fall into the gap.

    Auto-drop and input are suspended for the duration through the pause
    flag, which gets its previous value back afterwards.

    Args:
        state: Shared game state.
        y: The row that was just cleared.

    Returns:
        Number of rows cleared by cascades during the collapse.
    """
    registry = state.registry
    was_paused = state.paused
    state.paused = True
    cleared = 0
    try:
        for _ in range(registry.height):
            for cell in list(registry.cells()):
                if cell.y < y:
                    _drop_cell(registry, cell)
            cleared += check_rows(state)
    finally:
        state.paused = was_paused
    return cleared


def _drop_cell(registry: SettledRegistry, cell: Cell) -> None:
    # Step down one row at a time until blocked or on the bottom row.
    for _ in range(registry.height):
        if registry.is_occupied(cell.x, cell.y + 1) or cell.y == registry.height - 1:
            break
        cell.move_to(cell.x, cell.y + 1)
