"""
utils.py - Constants, enumerations and helpers for dropfour

This module provides the default board dimensions, the player and result
enumerations, the four direction vectors used for win checking and the ASCII
board renderer shared by the command-line interface and the environment.
"""

from enum import Enum, auto
from typing import Dict, Optional, Tuple

import numpy as np

# Default board size
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win

Coord = Tuple[int, int]


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # Moves first
    TWO = 2

    def other(self) -> 'Player':
        """Get the opposing player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    @property
    def symbol(self) -> str:
        return {Player.EMPTY: ".", Player.ONE: "X", Player.TWO: "O"}[self]

    def __str__(self):
        if self == Player.EMPTY:
            return "empty"
        return f"player {self.value}"


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        return self != GameResult.IN_PROGRESS

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None for a draw or an unfinished game."""
        if self == GameResult.PLAYER_ONE_WIN:
            return Player.ONE
        if self == GameResult.PLAYER_TWO_WIN:
            return Player.TWO
        return None

    @classmethod
    def win_for(cls, player: Player) -> 'GameResult':
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        if player == Player.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError(f"No win result for {player!r}")


class Direction(Enum):
    """Directions a run of four can extend in from its first cell."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Direction vectors (row, col); row grows downwards
DIRECTION_VECTORS: Dict[Direction, Coord] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def to_player(value) -> Player:
    """
    Coerce a player id (1, 2), a grid value or a Player to a Player.

    Raises:
        ValueError: If the value does not name a player
    """
    if isinstance(value, Player):
        return value
    return Player(int(value))


def is_valid_position(row: int, col: int, rows: int = ROWS, cols: int = COLS) -> bool:
    """Check if a position lies within a rows x cols board."""
    return 0 <= row < rows and 0 <= col < cols


def render_board_ascii(grid: np.ndarray, highlight=None) -> str:
    """
    Render a board grid as ASCII art.

    Args:
        grid: 2D array of cell values (0 empty, 1 and 2 for the players)
        highlight: Optional iterable of (row, col) cells drawn as "*", used to
            mark a winning line

    Returns:
        Multi-line string with a column index footer
    """
    rows, cols = grid.shape
    marked = set(highlight or ())
    border = "+" + "-" * (cols * 2 + 1) + "+"

    lines = [border]
    for row in range(rows):
        cells = []
        for col in range(cols):
            if (row, col) in marked:
                cells.append("*")
            else:
                cells.append(Player(int(grid[row, col])).symbol)
        lines.append("| " + " ".join(cells) + " |")
    lines.append(border)
    lines.append("  " + " ".join(str(col % 10) for col in range(cols)))

    return "\n".join(lines)
