"""
Headless simulation: random input against the real engine.

Plays a number of games with a seeded random input policy and the normal
tick-driven auto-drop, then prints per-game results and aggregate
statistics. No pygame needed.
"""

from __future__ import annotations

import random
import time
from typing import Any

import numpy as np

from blockfall.game.tetris import TetrisGame, Action, GameStatus


# Relative weights of the random input policy
ACTION_WEIGHTS: dict[Action, float] = {
    Action.LEFT: 2.0,
    Action.RIGHT: 2.0,
    Action.DOWN: 3.0,
    Action.ROTATE: 1.0,
    Action.NOOP: 2.0,
}

# Simulated milliseconds between two inputs
TICK_MS = 100


def play_episode(
    game: TetrisGame,
    rng: random.Random,
    max_steps: int = 5000,
    tick_ms: int = TICK_MS,
) -> dict[str, Any]:
    """Play one game to the end (or until max_steps).

    Args:
        game: Controller to (re)start and drive.
        rng: Random source for the input policy.
        max_steps: Safety cap on inputs per game.
        tick_ms: Simulated time advanced after every input.

    Returns:
        Dict with score, rows, groups, steps, and finished (bool).
    """
    actions = list(ACTION_WEIGHTS)
    weights = list(ACTION_WEIGHTS.values())

    game.start()
    steps = 0
    while game.status is GameStatus.PLAYING and steps < max_steps:
        action = rng.choices(actions, weights=weights)[0]
        game.step(action)
        game.tick(tick_ms)
        steps += 1

    return {
        "score": game.score,
        "rows": game.state.rows_cleared,
        "groups": game.groups_spawned,
        "steps": steps,
        "finished": game.status is GameStatus.GAME_OVER,
    }


def simulate(config: dict[str, Any], episodes: int | None = None) -> list[dict[str, Any]]:
    """Run several headless games and print statistics.

    Args:
        config: Config dict loaded from game.yaml.
        episodes: Number of games; overrides config["episodes"].

    Returns:
        Per-episode result dicts from play_episode().
    """
    num_episodes = episodes or config.get("episodes", 20)
    max_steps = config.get("max_steps", 5000)
    seed = config.get("seed")

    rng = random.Random(seed)
    game = TetrisGame(seed=seed)

    print(f"Simulating {num_episodes} games with a random input policy...\n")
    start_time = time.time()

    results = []
    for ep in range(num_episodes):
        result = play_episode(game, rng, max_steps=max_steps)
        results.append(result)
        status = "over" if result["finished"] else "capped"
        print(
            f"  Game {ep + 1}/{num_episodes} {status} | Score: {result['score']}"
            f" | Rows: {result['rows']} | Groups: {result['groups']} | Steps: {result['steps']}"
        )

    elapsed = time.time() - start_time
    print(f"\nSimulation complete in {elapsed:.1f}s\n")

    print("=" * 70)
    print("AGGREGATE STATISTICS")
    print("=" * 70)
    print(f"\n{'Metric':<25} {'Mean':>8} {'Median':>8} {'Std':>8} {'Min':>8} {'Max':>8}")
    print("-" * 70)
    for name, key in [("Score", "score"), ("Rows cleared", "rows"),
                      ("Groups spawned", "groups"), ("Steps survived", "steps")]:
        arr = np.array([r[key] for r in results])
        print(f"{name:<25} {arr.mean():>8.1f} {np.median(arr):>8.1f} "
              f"{arr.std():>8.1f} {arr.min():>8.1f} {arr.max():>8.1f}")

    return results
