"""Exception hierarchy for programmer errors inside the game engine."""

from __future__ import annotations


class TetrisError(Exception):
    """Base class for all engine errors."""


class InvalidConstructionError(TetrisError):
    """A cell or block group was built from invalid arguments."""


class InvalidStateTransitionError(TetrisError):
    """A block group was frozen or unfrozen out of order."""


class DestroyedCellError(TetrisError):
    """A cell was moved after it had been destroyed."""
