"""
cli.py - Command-line entry point for a two-player game in the terminal

Starts one game with no arguments. The optional flags only control logging
and how the board is drawn.
"""

import argparse
import sys
from typing import Callable, List, Optional, TextIO

from fourinarow.debug import debug, DebugLevel
from fourinarow.game.errors import GameAbandoned
from fourinarow.game.rules import ConnectFourGame
from fourinarow.interfaces.renderer import PlainRenderer, Renderer, TerminalRenderer
from fourinarow.utils import Player


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='fourinarow',
        description='Two-player Connect Four in the terminal. '
                    'Players take turns entering a column number from 1 to 7.')
    parser.add_argument('--debug',
        action='store_true',
        help='Enable debug logging (equivalent to --debug_level debug)')
    parser.add_argument('--debug_level',
        choices=[level.name.lower() for level in DebugLevel],
        default='none',
        help='Log level: none (silent), error, warning, info, debug, trace')
    parser.add_argument('--log_file',
        type=str,
        help='Write log records to this file instead of stderr')
    parser.add_argument('--plain',
        action='store_true',
        help='Print the board line by line instead of drawing it in place')
    parser.add_argument('--no-animation',
        dest='animate',
        action='store_false',
        help='Skip the coin drop and end-of-game animations')
    return parser


class TerminalCLI:
    """Runs a single game between two people sharing one terminal."""

    def __init__(self, input_func: Callable[[], str] = input,
                 stream: Optional[TextIO] = None):
        self.input_func = input_func
        self.stream = stream or sys.stdout
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        self.args = build_parser().parse_args(argv)
        self.configure_debug()
        return self.args

    def configure_debug(self):
        level = 'debug' if self.args.debug else self.args.debug_level
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file, console=False)
        debug.set_from_string(level)

    def build_renderer(self) -> Renderer:
        if self.args.plain:
            return PlainRenderer(self.stream)
        return TerminalRenderer(self.stream, animate=self.args.animate)

    def request_move(self, player: Player) -> str:
        """
        Read one line of input for ``player``.

        Raises:
            GameAbandoned: If input ends or the player presses Ctrl+C
        """
        try:
            return self.input_func()
        except (EOFError, KeyboardInterrupt):
            raise GameAbandoned(f"Player {player} left the game") from None

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Play one game.

        Returns:
            Process exit code: 0 when the game ended, 1 if it was abandoned
        """
        if self.args is None:
            self.parse_args(argv)

        game = ConnectFourGame()
        renderer = self.build_renderer()
        try:
            result = game.run(self.request_move, renderer)
        except GameAbandoned as e:
            return self.abandon(str(e))
        except KeyboardInterrupt:
            # Ctrl+C while an animation is sleeping
            return self.abandon("Interrupted")

        debug.info(f"Finished with {result.name}", "cli")
        return 0

    def abandon(self, reason: str) -> int:
        """
        Report an unfinished game.

        Args:
            reason: Why the game stopped

        Returns:
            Exit code 1
        """
        debug.warning(reason, "cli")
        print(f"\n{reason}. Game abandoned.", file=self.stream)
        return 1


def main(argv: Optional[List[str]] = None):
    """Main entry point for the console script."""
    sys.exit(TerminalCLI().run(argv))


if __name__ == "__main__":
    main()
