"""
cli.py - Command-line interface for dropfour

This module provides a CLI for playing a two-player game at one terminal and
for inspecting board positions.
"""

import argparse
import sys
from typing import Callable, List, Optional

from dropfour.debug import debug, DebugLevel
from dropfour.errors import DropError
from dropfour.game import rules
from dropfour.game.board import Board
from dropfour.game.session import DropEvent, GameSession
from dropfour.utils import ROWS, COLS, GameResult, Player

QUIT_COMMANDS = ('q', 'quit', 'exit')


def parse_position(position: str, width: int = COLS, height: int = ROWS) -> Board:
    """
    Parse a comma-separated list of cell values into a board.

    Cells are listed row by row from the top row down.

    Raises:
        ValueError: If the string has the wrong length, bad cell values or
            pieces floating above empty cells
    """
    values = [int(c) for c in position.replace(' ', '').split(',') if c]
    if len(values) != width * height:
        raise ValueError(f"Position string must have {width * height} values, got {len(values)}")

    board = Board.from_grid([values[r * width:(r + 1) * width] for r in range(height)])
    if not board.is_settled():
        raise ValueError("Position has pieces above empty cells")
    return board


class SimpleCLI:
    """Simple command-line interface for dropfour."""

    def __init__(self, input_func: Callable[[str], str] = input,
                 output: Callable[[str], None] = print):
        """
        Initialize the CLI.

        Args:
            input_func: Reads one line of player input
            output: Writes one block of text
        """
        self.args = None
        self.input = input_func
        self.output = output

    def parse_args(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments and configure logging."""
        parser = argparse.ArgumentParser(prog='dropfour', description='Four in a row, two players')
        parser.add_argument('--width', type=int, default=COLS, help='Number of columns')
        parser.add_argument('--height', type=int, default=ROWS, help='Number of rows')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level')
        parser.add_argument('--log-file', help='Also write log messages to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        subparsers.add_parser('play', help='Play a two-player game at this terminal')

        check_parser = subparsers.add_parser('check', help='Inspect a board position')
        check_parser.add_argument('--position', required=True,
                                  help='Comma-separated cell values (0, 1, 2), top row first')

        self.args = parser.parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

        return self.args

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI and return the process exit code."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            return self.play_game()
        elif self.args.command == 'check':
            return self.check_position()

        self.output("Please specify a command. Use --help for options.")
        return 1

    def play_game(self) -> int:
        """Play a game between two people taking turns at the keyboard."""
        session = GameSession(self.args.width, self.args.height)

        @session.on_drop
        def show_drop(event: DropEvent) -> None:
            self.output(f"Player {event.player.value} drops into column {event.column}")

        @session.on_game_over
        def announce(result: GameResult, message: str) -> None:
            self.output(session.render())
            self.output(message)

        self.output(f"Enter a column number (0-{session.state.width - 1}), or 'q' to quit.")
        self.output(session.render())

        while not session.state.is_game_over():
            column = self.get_move(session.state.current_player, session.state.width)
            if column is None:
                self.output("Quitting game.")
                return 0

            try:
                session.submit(column).raise_for_status()
            except DropError as e:
                self.output(f"Invalid move: {e}")
                continue

            if not session.state.is_game_over():
                self.output(session.render())

        return 0

    def get_move(self, player: Player, width: int) -> Optional[int]:
        """
        Read a column from the player.

        Returns:
            Column index, or None if the player quit
        """
        while True:
            try:
                user_input = self.input(f"Player {player.value} ({player.symbol}) move: ").strip().lower()
            except EOFError:
                return None

            if user_input in QUIT_COMMANDS:
                return None

            try:
                return int(user_input)
            except ValueError:
                self.output(f"Invalid input. Enter a column number between 0 and {width - 1}.")

    def check_position(self) -> int:
        """Report the winner, draw state and playable columns of a position."""
        try:
            board = parse_position(self.args.position, self.args.width, self.args.height)
        except ValueError as e:
            self.output(f"Error parsing position: {e}")
            return 2

        self.output("Loaded position:")
        winners = [p for p in (Player.ONE, Player.TWO) if rules.check_win(board, p)]
        line = rules.find_winning_line(board, winners[0]) if winners else None
        self.output(board.render(line))

        for player in winners:
            self.output(f"Win for player {player.value}: {rules.find_winning_line(board, player)}")
        if not winners:
            self.output("No win detected for any player")

        if rules.is_draw(board):
            self.output("Board is full: draw")
        else:
            self.output(f"Valid moves: {board.valid_moves()}")

        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
