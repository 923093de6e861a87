"""
Entry point for blockfall.

Supports two modes:
  - play:     Play the game with keyboard/mouse controls.
  - simulate: Run headless games with a random input policy and print stats.

Usage:
    python main.py --mode play
    python main.py --mode play --config config/game.yaml --seed 7
    python main.py --mode simulate --episodes 50
"""

from __future__ import annotations

import argparse
import pathlib
import sys

import yaml


def load_config(config_path: str | pathlib.Path) -> dict:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dict of configuration key-value pairs (empty for an empty file).

    Raises:
        FileNotFoundError: If the config file does not exist.
    """
    config_path = pathlib.Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Namespace with mode, config, seed, fps, and episodes attributes.
    """
    parser = argparse.ArgumentParser(
        description="blockfall: a falling-block puzzle game.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=["play", "simulate"],
        default="play",
        help="Run mode: 'play' (manual play), 'simulate' (headless random games).",
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config/game.yaml",
        help="Path to the YAML configuration file.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for shape/colour choice (overrides the config file).",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=None,
        help="Frames per second for 'play' mode (overrides the config file).",
    )
    parser.add_argument(
        "--episodes",
        type=int,
        default=None,
        help="Number of games for 'simulate' mode (overrides the config file).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point: parse args, load config, and dispatch to the selected mode."""
    args = parse_args(argv)
    config = load_config(args.config)
    if args.seed is not None:
        config["seed"] = args.seed
    if args.fps is not None:
        config["fps"] = args.fps

    if args.mode == "play":
        from blockfall.play import play_manual
        play_manual(config)

    elif args.mode == "simulate":
        if args.episodes is not None and args.episodes <= 0:
            print("Error: --episodes must be positive.", file=sys.stderr)
            sys.exit(1)
        from blockfall.simulate import simulate
        simulate(config, episodes=args.episodes)

    else:
        print(f"Unknown mode: {args.mode}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
