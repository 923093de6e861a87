"""
Shape catalog, colour palettes, and the random shape generator.

Coordinate convention:
  - Each shape is an ordered list of (x, y) offsets.
  - The offsets double as absolute spawn coordinates: every group spawns
    at the top-left corner of the field.
  - The order of the offsets is the order of the cells in the spawned
    block group.
"""

from __future__ import annotations

import random

# =============================================================================
# Colours (RGB)
# =============================================================================
# Block colour index -> (name, RGB). The index is what cells store.

BLOCK_COLORS: dict[int, tuple[str, tuple[int, int, int]]] = {
    0: ("red", (255, 0, 0)),
    1: ("orange", (255, 165, 0)),
    2: ("yellow", (255, 255, 0)),
    3: ("green", (0, 128, 0)),
    4: ("lightskyblue", (135, 206, 250)),
    5: ("blue", (0, 0, 255)),
    6: ("purple", (128, 0, 128)),
}

# Field background while playing, cycled by the renderer
BACKGROUND_COLORS: dict[int, tuple[str, tuple[int, int, int]]] = {
    0: ("darkred", (139, 0, 0)),
    1: ("darkgoldenrod", (184, 134, 11)),
    2: ("darkkhaki", (189, 183, 107)),
    3: ("darkgreen", (0, 100, 0)),
    4: ("lightskyblue", (135, 206, 250)),
    5: ("midnightblue", (25, 25, 112)),
    6: ("rebeccapurple", (102, 51, 153)),
}

# =============================================================================
# Shape templates
# =============================================================================

T_SHAPE: tuple[tuple[int, int], ...] = ((0, 0), (1, 0), (2, 0), (1, 1))
O_SHAPE: tuple[tuple[int, int], ...] = ((0, 0), (0, 1), (1, 0), (1, 1))
L_SHAPE: tuple[tuple[int, int], ...] = ((0, 0), (1, 0), (2, 0), (2, 1))
SLAB_SHAPE: tuple[tuple[int, int], ...] = (
    (0, 0), (1, 0), (2, 0),
    (0, 1), (1, 1), (2, 1),
)
S_SHAPE: tuple[tuple[int, int], ...] = ((0, 0), (0, 1), (1, 1), (1, 2))

SHAPES: list[tuple[tuple[int, int], ...]] = [
    T_SHAPE,
    O_SHAPE,
    L_SHAPE,
    SLAB_SHAPE,
    S_SHAPE,
]


class ShapeGenerator:
    """Uniform random choice of shape template and colour.

    Attributes:
        rng: The random source; pass a seed for reproducible games.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.rng = random.Random(seed)

    def choose(self) -> tuple[tuple[tuple[int, int], ...], int]:
        """Pick the next shape and colour.

        Returns:
            A (shape offsets, colour index) tuple.
        """
        color = self.rng.randrange(len(BLOCK_COLORS))
        shape = SHAPES[self.rng.randrange(len(SHAPES))]
        return shape, color
