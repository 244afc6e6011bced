"""
rules.py - Win and draw detection for dropfour

The detector works on a Board's read interface only and never mutates it.
``check_win`` enumerates every run of four on the board; ``check_win_at``
only looks at the lines through one cell and is used after each placement.
Both report the same result for the player who just moved.
"""

from typing import Iterator, List, Optional, Tuple

from dropfour.game.board import Board
from dropfour.utils import (CONNECT_N, DIRECTION_VECTORS, Coord, Player, is_valid_position,
                            to_player)

Run = Tuple[Coord, ...]


def iter_runs(rows: int, cols: int, length: int = CONNECT_N) -> Iterator[Run]:
    """
    Yield every in-bounds run of ``length`` cells on a rows x cols board.

    A run starts at each cell and steps along each direction vector; runs
    that would leave the board are skipped.
    """
    for row in range(rows):
        for col in range(cols):
            for dr, dc in DIRECTION_VECTORS.values():
                end_row = row + dr * (length - 1)
                end_col = col + dc * (length - 1)
                if 0 <= end_row < rows and 0 <= end_col < cols:
                    yield tuple((row + dr * i, col + dc * i) for i in range(length))


def find_winning_line(board: Board, player) -> Optional[List[Coord]]:
    """
    Find the first run of four owned entirely by ``player``.

    Returns:
        The run's cells in order, or None if the player has no four in a row
    """
    player = to_player(player)
    if player == Player.EMPTY:
        return None

    grid = board.grid
    for run in iter_runs(board.rows, board.cols):
        if all(grid[r, c] == player.value for r, c in run):
            return list(run)
    return None


def check_win(board: Board, player) -> bool:
    """Check the whole board for a four in a row owned by ``player``."""
    return find_winning_line(board, player) is not None


def check_win_at(board: Board, row: int, col: int) -> bool:
    """
    Check whether the piece at (row, col) is part of a four in a row.

    Counts contiguous same-owner cells on both sides of the piece along each
    direction.
    """
    grid = board.grid
    player_value = grid[row, col]
    if player_value == Player.EMPTY.value:
        return False

    for dr, dc in DIRECTION_VECTORS.values():
        count = 1

        r, c = row + dr, col + dc
        while is_valid_position(r, c, board.rows, board.cols) and grid[r, c] == player_value:
            count += 1
            r += dr
            c += dc

        r, c = row - dr, col - dc
        while is_valid_position(r, c, board.rows, board.cols) and grid[r, c] == player_value:
            count += 1
            r -= dr
            c -= dc

        if count >= CONNECT_N:
            return True

    return False


def is_draw(board: Board) -> bool:
    """A full board on which neither player has four in a row."""
    if not board.is_full():
        return False
    return not (check_win(board, Player.ONE) or check_win(board, Player.TWO))
