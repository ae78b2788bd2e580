"""
cli.py - Command-line interface for playing Connect Four

Two players share the terminal and take turns entering a column number.
This module parses that input, drives the turn loop and prints the board
through the printer module.
"""

import argparse
import sys
from typing import Callable, List, Optional, Union

from connect_four.debug import debug, DebugLevel, LEVEL_NAMES
from connect_four.game.rules import ConnectFourGame
from connect_four.interfaces import printer
from connect_four.utils import COLS, GameState, PlaceResult

QUIT = "quit"

Move = Union[int, str, None]


def parse_move(text: str) -> Move:
    """
    Parse one line of player input.

    Args:
        text: Raw text typed by the player

    Returns:
        QUIT for "q"/"quit", a 0-indexed column for "1".."7", or None if
        the text is not a move
    """
    text = text.strip().lower()
    if text in ("q", "quit"):
        return QUIT

    try:
        column = int(text)
    except ValueError:
        return None

    if 1 <= column <= COLS:
        return column - 1
    return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Two-player Connect Four in the terminal')
    parser.add_argument('--debug', action='store_true',
                        help='Shortcut for --debug-level debug')
    parser.add_argument('--debug-level', choices=sorted(LEVEL_NAMES), default='warning',
                        help='Logging level (default: warning)')
    parser.add_argument('--log-file', type=str, default=None,
                        help='Also write log messages to this file')
    parser.add_argument('--no-clear', action='store_true',
                        help='Do not clear the screen between turns')
    return parser


class SimpleCLI:
    """Interactive two-player Connect Four session in the terminal."""

    def __init__(self, input_func: Optional[Callable[[str], str]] = None):
        self.game = ConnectFourGame()
        self.args = None
        self._input = input_func or input

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = build_parser().parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)

        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> Optional[GameState]:
        if self.args is None:
            self.parse_args(argv)
        return self.play_game()

    def _show(self, text: str) -> None:
        if not self.args.no_clear:
            print(printer.clear_screen(), end="")
        print(text)

    def read_move(self) -> Move:
        """
        Prompt until the player enters a column or quits.

        Returns:
            A 0-indexed column, or QUIT (also on EOF or Ctrl-C)
        """
        while True:
            try:
                text = self._input("> ")
            except (EOFError, KeyboardInterrupt):
                debug.debug("Input closed, quitting", "cli")
                return QUIT

            move = parse_move(text)
            if move is not None:
                return move
            print(f"Invalid input {text.strip()!r}. Enter a column 1-{COLS} or q to quit.")

    def play_game(self) -> Optional[GameState]:
        """
        Run the turn loop until the game ends or a player quits.

        Returns:
            The final game state, or None if a player quit
        """
        self.game.reset()
        self._show(printer.render_board(self.game.board, self.game.current_player))

        while not self.game.is_game_over():
            move = self.read_move()
            if move == QUIT:
                print("Quitting game.")
                return None

            if self.game.make_move(move) == PlaceResult.COLUMN_FULL:
                print(f"Column {move + 1} is full. Choose another column.")
                continue

            if not self.game.is_game_over():
                self._show(printer.render_board(self.game.board, self.game.current_player))

        self._show(printer.render_end(self.game.board))
        winner = self.game.get_winner()
        if winner is None:
            print("It's a tie!")
        else:
            print(f"Player {winner.value} ({printer.token(winner)}) wins!")
        return self.game.game_state


def main(argv: Optional[List[str]] = None) -> int:
    SimpleCLI().run(argv)
    return 0


if __name__ == "__main__":
    sys.exit(main())
