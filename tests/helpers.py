import numpy as np

from dropfour.game.board import Board
from dropfour.game.state import GameState

# Alternating row patterns that fill a 6x7 board with no four in a row
ROW_A = [1, 1, 2, 2, 1, 1, 2]
ROW_B = [2, 2, 1, 1, 2, 2, 1]

# Column sequence that reaches that board with the players alternating
DRAW_SEQUENCE = [2] + [0] * 6 + [1] * 6 + [4] * 6 + [5] * 6 + [2] * 5 + [3] * 6 + [6] * 6


def draw_grid() -> np.ndarray:
    return np.array([ROW_A if r % 2 == 0 else ROW_B for r in range(6)], dtype=np.int8)


def board_with(cells, player=1, rows=6, cols=7) -> Board:
    grid = np.zeros((rows, cols), dtype=np.int8)
    for r, c in cells:
        grid[r, c] = player
    return Board.from_grid(grid)


def play(state: GameState, columns):
    """Drop each column for the player to move, advancing the turn while in progress."""
    outcomes = []
    for column in columns:
        outcome = state.drop(column)
        outcomes.append(outcome)
        if outcome.placed and not state.is_game_over():
            state.advance_turn()
    return outcomes
