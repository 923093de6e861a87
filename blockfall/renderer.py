"""
Pygame renderer for the game.

Draws the playing field from get_state() snapshots: settled cells, the
active group, a blinking effect on every block, a background colour that
cycles while a game is running, a sidebar with the score, and the
interface button / results box shown between games.
"""

from __future__ import annotations

import random
from typing import Any

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from blockfall.game.constants import BG_CHANGE_INTERVAL_MS, BLINK_INTERVAL_MS, PIXEL_SIZE
from blockfall.game.scheduler import IntervalTimer
from blockfall.game.shapes import BACKGROUND_COLORS, BLOCK_COLORS
from blockfall.game.tetris import GameStatus


# ── Color constants ───────────────────────────────────────────────────────
IDLE_BACKGROUND_COLOR = (0, 0, 0)
BLINK_COLOR = (255, 255, 255)
GRID_LINE_COLOR = (60, 60, 60)
BORDER_COLOR = (200, 200, 200)
TEXT_COLOR = (255, 255, 255)
SIDEBAR_BG_COLOR = (20, 20, 20)
BUTTON_COLOR = (70, 70, 90)

# ── Colour index -> RGB (built from BLOCK_COLORS at import) ───────────────
CELL_COLORS: dict[int, tuple[int, int, int]] = {
    index: rgb for index, (_name, rgb) in BLOCK_COLORS.items()
}


class TetrisRenderer:
    """Pygame-based renderer for game snapshots.

    Attributes:
        cell_size: Pixel size of each grid cell.
        board_width: Field width in cells.
        board_height: Field height in cells.
        board_pixel_width: Pixel width of the field.
        board_pixel_height: Pixel height of the field.
        sidebar_width: Pixel width of the sidebar.
        button_rect: Clickable area of the interface button.
        screen: Pygame display surface (created on first render).
    """

    SIDEBAR_WIDTH_CELLS: int = 5

    def __init__(
        self,
        board_width: int,
        board_height: int,
        cell_size: int = PIXEL_SIZE,
        blink: bool = True,
        background_cycle: bool = True,
        seed: int | None = None,
    ) -> None:
        """Initialize the renderer.

        Does NOT create the Pygame window yet; that happens on the first
        call to render().

        Args:
            board_width: Field width in cells.
            board_height: Field height in cells.
            cell_size: Size of each grid cell in pixels.
            blink: Whether blocks blink white.
            background_cycle: Whether the field background changes colour.
            seed: Seed for background colour choice.
        """
        if pygame is None:
            raise ImportError("pygame is required for rendering. Install it: pip install pygame")

        self.cell_size = cell_size
        self.board_width = board_width
        self.board_height = board_height
        self.board_pixel_width = cell_size * board_width
        self.board_pixel_height = cell_size * board_height
        self.sidebar_width = cell_size * self.SIDEBAR_WIDTH_CELLS
        self.window_width = self.board_pixel_width + self.sidebar_width
        self.window_height = self.board_pixel_height

        button_height = cell_size * 2
        self.button_rect = pygame.Rect(
            0,
            (self.board_pixel_height - button_height) // 2,
            self.board_pixel_width,
            button_height,
        )

        self._rng = random.Random(seed)
        self._blink_on = False
        self._background = IDLE_BACKGROUND_COLOR
        self._blink_timer = IntervalTimer(BLINK_INTERVAL_MS, self._toggle_blink)
        self._background_timer = IntervalTimer(BG_CHANGE_INTERVAL_MS, self._change_background)
        if blink:
            self._blink_timer.start()
        self._background_cycle = background_cycle

        self.screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None
        self._initialized: bool = False

    # ── Ambient animation ────────────────────────────────────────────────

    def _toggle_blink(self) -> None:
        self._blink_on = not self._blink_on

    def _change_background(self) -> None:
        _name, rgb = BACKGROUND_COLORS[self._rng.randrange(len(BACKGROUND_COLORS))]
        self._background = rgb

    def _update_animation(self, status: GameStatus, elapsed_ms: int) -> None:
        playing = status is GameStatus.PLAYING
        if playing and self._background_cycle and not self._background_timer.running:
            self._background_timer.start()
        elif not playing and self._background_timer.running:
            self._background_timer.stop()
            self._background = IDLE_BACKGROUND_COLOR
        self._background_timer.advance(elapsed_ms)
        self._blink_timer.advance(elapsed_ms)

    # ── Drawing ──────────────────────────────────────────────────────────

    def render(self, state: dict[str, Any], elapsed_ms: int = 0, fps: int = 60) -> int:
        """Draw a game snapshot to the screen.

        Initializes Pygame on the first call.

        Args:
            state: Snapshot from TetrisGame.get_state().
            elapsed_ms: Milliseconds since the previous frame, for the
                blink and background timers.
            fps: Target frames per second for the display clock.

        Returns:
            Milliseconds elapsed since the previous render call.
        """
        if not self._initialized:
            self._init_pygame()

        self._update_animation(state["status"], elapsed_ms)

        self.screen.fill(self._background, (0, 0, self.board_pixel_width, self.board_pixel_height))
        self._draw_grid(state["grid"])
        for x, y, color in state["active_cells"]:
            self._draw_cell(x, y, color)
        self._draw_sidebar(state)

        if state["status"] is not GameStatus.PLAYING:
            self._draw_interface_button(state)

        pygame.draw.rect(
            self.screen,
            BORDER_COLOR,
            (0, 0, self.board_pixel_width, self.board_pixel_height),
            2,
        )

        pygame.display.flip()
        return self._clock.tick(fps)

    def _init_pygame(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("blockfall")
        self._clock = pygame.time.Clock()
        self._font = pygame.font.SysFont("monospace", 20)
        self._initialized = True

    def _draw_grid(self, grid: Any) -> None:
        """Draw settled cells; grid holds 0 for empty and color + 1 otherwise."""
        rows, cols = grid.shape
        for row in range(rows):
            for col in range(cols):
                value = int(grid[row, col])
                if value != 0:
                    self._draw_cell(col, row, value - 1)

    def _draw_cell(self, x: int, y: int, color: int) -> None:
        if not (0 <= x < self.board_width and 0 <= y < self.board_height):
            return
        rgb = BLINK_COLOR if self._blink_on else CELL_COLORS.get(color, (128, 128, 128))
        rect = (x * self.cell_size, y * self.cell_size, self.cell_size, self.cell_size)
        pygame.draw.rect(self.screen, rgb, rect)
        pygame.draw.rect(self.screen, GRID_LINE_COLOR, rect, 1)

    def _draw_sidebar(self, state: dict[str, Any]) -> None:
        sidebar_x = self.board_pixel_width
        pygame.draw.rect(
            self.screen,
            SIDEBAR_BG_COLOR,
            (sidebar_x, 0, self.sidebar_width, self.window_height),
        )
        if state["status"] is GameStatus.PLAYING:
            self._draw_text(f"Score: {state['score']}", sidebar_x + 10, 20)
            if state["paused"]:
                self._draw_text("PAUSED", sidebar_x + 10, 50)

    def _draw_interface_button(self, state: dict[str, Any]) -> None:
        """Draw the start button, with the last results after a game."""
        pygame.draw.rect(self.screen, BUTTON_COLOR, self.button_rect)
        pygame.draw.rect(self.screen, BORDER_COLOR, self.button_rect, 1)
        self._draw_centered("Start", self.button_rect.centery)

        if state["status"] is GameStatus.GAME_OVER:
            top = self.button_rect.top - self.cell_size * 2
            self._draw_centered("Game over", top)
            self._draw_centered(f"Total score: {state['score']}", top + self.cell_size)

    def _draw_centered(self, text: str, center_y: int) -> None:
        surface = self._font.render(text, True, TEXT_COLOR)
        x = (self.board_pixel_width - surface.get_width()) // 2
        self.screen.blit(surface, (x, center_y - surface.get_height() // 2))

    def _draw_text(self, text: str, x: int, y: int, color: tuple[int, int, int] = TEXT_COLOR) -> None:
        surface = self._font.render(text, True, color)
        self.screen.blit(surface, (x, y))

    def close(self) -> None:
        """Shut down Pygame and close the window."""
        if self._initialized:
            pygame.quit()
            self._initialized = False
