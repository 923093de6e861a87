"""
Manual play mode.

Wires keyboard and mouse input to the game controller and drives it with
the pygame clock. The renderer only ever sees get_state() snapshots.
"""

from __future__ import annotations

from typing import Any

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from blockfall.game.tetris import TetrisGame, Action
from blockfall.renderer import TetrisRenderer


# ── Keyboard mapping for manual play ─────────────────────────────────────
# Arrow keys or A/S/D for movement, Space for rotation
KEY_MAP: dict[int, Action] = {}
if pygame is not None:
    KEY_MAP = {
        pygame.K_LEFT: Action.LEFT,
        pygame.K_a: Action.LEFT,
        pygame.K_RIGHT: Action.RIGHT,
        pygame.K_d: Action.RIGHT,
        pygame.K_DOWN: Action.DOWN,
        pygame.K_s: Action.DOWN,
        pygame.K_SPACE: Action.ROTATE,
    }


def play_manual(config: dict[str, Any]) -> None:
    """Run the game in manual play mode.

    Controls:
      - Left/Right arrow or A/D: move the group
      - Down arrow or S: move down
      - Space: rotate
      - Enter or clicking the Start button: start / restart
      - P: pause / resume
      - Escape / close window: quit

    Args:
        config: Config dict loaded from game.yaml.
    """
    if pygame is None:
        raise ImportError("pygame is required for play mode. Install it: pip install pygame")

    fps = config.get("fps", 60)
    seed = config.get("seed")

    game = TetrisGame(seed=seed)
    renderer = TetrisRenderer(
        game.state.registry.width,
        game.state.registry.height,
        cell_size=config.get("cell_size", 30),
        blink=config.get("blink", True),
        background_cycle=config.get("background_cycle", True),
        seed=seed,
    )

    games_played = 0

    def report(score: int) -> None:
        nonlocal games_played
        games_played += 1
        print(
            f"Game {games_played} over | Score: {score}"
            f" | Rows: {game.state.rows_cleared} | Groups: {game.groups_spawned}"
        )

    game.on_game_over.append(report)

    # Force renderer init before event loop (pygame must be initialized for event.get())
    elapsed = renderer.render(game.get_state(), 0, fps)
    running = True

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if not game.is_playing and renderer.button_rect.collidepoint(event.pos):
                    game.start()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                    break

                if not game.is_playing:
                    if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                        game.start()
                    continue

                if event.key == pygame.K_p:
                    game.toggle_pause()
                elif event.key in KEY_MAP:
                    game.step(KEY_MAP[event.key])

        if not running:
            break

        game.tick(elapsed)
        elapsed = renderer.render(game.get_state(), elapsed, fps)

    renderer.close()
