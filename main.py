"""
Main script for console TicTacToe.

Two players share one keyboard: X and O take turns entering a row
and a column until someone gets three in a row or the board fills up.

Run this script to play!
"""

import argparse
from typing import Callable, List, Optional

from console.config import ConsoleConfig
from console.game_console import TicTacToeConsole


def build_config(args: argparse.Namespace) -> ConsoleConfig:
    """Apply command line switches on top of the default config."""
    config = ConsoleConfig()
    if args.plain:
        config.USE_EMOJI = False
    if args.no_instructions:
        config.SHOW_INSTRUCTIONS = False
    if args.debug:
        config.DEBUG_MODE = True
    return config


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Two-player console TicTacToe")
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print messages without emoji"
    )
    parser.add_argument(
        "--no-instructions",
        action="store_true",
        help="Skip the 'How to Play' text at startup"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print engine debug output"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None, input_fn: Callable[[], str] = input) -> int:
    """Main entry point."""
    args = parse_args(argv)
    game = TicTacToeConsole(build_config(args), input_fn=input_fn)

    try:
        game.run()
    except (KeyboardInterrupt, EOFError):
        print(f"\n\n{game.config.INTERRUPTED_MSG}")
    finally:
        game.say_goodbye()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
