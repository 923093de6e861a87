"""Shared builders for engine tests."""

from __future__ import annotations

from blockfall.game.block_group import BlockGroup
from blockfall.game.cell import Cell
from blockfall.game.state import GameState


def settle(state: GameState, coords, color: int = 0) -> BlockGroup:
    """Put a group straight into the settled registry."""
    group = BlockGroup([Cell(x, y, color) for x, y in coords], state)
    state.registry.append(group)
    return group


def active_group(state: GameState, coords, color: int = 0, on_freeze=None) -> BlockGroup:
    """Build an activated group at the given coordinates."""
    group = BlockGroup([Cell(x, y, color) for x, y in coords], state, on_freeze=on_freeze)
    group.unfreeze()
    return group


def fill_row(state: GameState, y: int, skip: tuple[int, ...] = (), width: int = 10) -> None:
    """Settle one single-cell group per column of row y, except `skip`."""
    for x in range(width):
        if x not in skip:
            settle(state, [(x, y)], color=x % 7)
