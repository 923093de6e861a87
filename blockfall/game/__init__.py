"""Game engine: cells, block groups, settled registry, line clearing, and controller."""

from blockfall.game.block_group import BlockGroup, GroupStatus
from blockfall.game.cell import Cell
from blockfall.game.errors import (
    DestroyedCellError,
    InvalidConstructionError,
    InvalidStateTransitionError,
    TetrisError,
)
from blockfall.game.registry import SettledRegistry
from blockfall.game.shapes import SHAPES, BLOCK_COLORS, ShapeGenerator
from blockfall.game.state import GameState
from blockfall.game.tetris import TetrisGame, Action, GameStatus

__all__ = [
    "SHAPES",
    "BLOCK_COLORS",
    "ShapeGenerator",
    "Cell",
    "BlockGroup",
    "GroupStatus",
    "SettledRegistry",
    "GameState",
    "TetrisGame",
    "Action",
    "GameStatus",
    "TetrisError",
    "InvalidConstructionError",
    "InvalidStateTransitionError",
    "DestroyedCellError",
]
