#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--size N] [--bombs B] [--preset NAME] [--seed S]
    python main.py play --ask
    python main.py reveal [--size N] [--bombs B] [--seed S]
"""
import argparse
import sys

import numpy as np

from src.minesweeper import (
    Board,
    Console,
    GameSession,
    InvalidConfigurationError,
    PlacementExhaustedError,
    PRESETS,
    format_grid,
)


def play(args: argparse.Namespace) -> int:
    """Play a console game."""
    console = Console()
    rng = np.random.default_rng(args.seed)

    print("Welcome to Minesweeper!")
    if args.ask:
        session = GameSession.from_console(console, rng=rng)
    else:
        size, bombs = _board_settings(args)
        board = Board.create(size, bombs, rng=rng, diagnostics=console.write_line)
        session = GameSession(board, console)

    session.play()
    return 0


def reveal(args: argparse.Namespace) -> int:
    """Print a freshly mined board with every cell shown."""
    size, bombs = _board_settings(args)
    board = Board.create(size, bombs, rng=np.random.default_rng(args.seed))

    print(f"Board: {size}x{size} with {bombs} bombs")
    for line in format_grid(board.render_revealed_view()):
        print(line)
    return 0


def _board_settings(args: argparse.Namespace):
    """Resolve size and bomb count from a preset, overridden by flags."""
    preset = PRESETS[args.preset]
    size = args.size if args.size is not None else preset.grid_size
    bombs = args.bombs if args.bombs is not None else preset.num_bombs
    return size, bombs


def _add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default="beginner",
        help="Difficulty preset",
    )
    parser.add_argument("--size", type=int, default=None, help="Board size (NxN)")
    parser.add_argument("--bombs", type=int, default=None, help="Number of bombs")
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for bomb placement"
    )


def main() -> int:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a game")
    _add_board_arguments(play_parser)
    play_parser.add_argument(
        "--ask",
        action="store_true",
        help="Prompt for grid size and bombs number instead of using flags",
    )

    reveal_parser = subparsers.add_parser(
        "reveal", help="Print a mined board fully revealed"
    )
    _add_board_arguments(reveal_parser)

    args = parser.parse_args()

    commands = {"play": play, "reveal": reveal}
    if args.command not in commands:
        parser.print_help()
        return 0

    try:
        return commands[args.command](args)
    except (InvalidConfigurationError, PlacementExhaustedError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 2
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted")
        return 1


if __name__ == "__main__":
    sys.exit(main())
