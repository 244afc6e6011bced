"""
state.py - Game state management for dropfour

This module provides GameState, which owns a Board together with the current
player and the game result, and the module-level functions the presentation
layers call: new_game, drop, check_win, is_draw, current_player and cell_at.

A move is processed in four steps by the caller:

    outcome = drop(state, column)      # placement
    if check_win(state): ...           # win for the player who just moved
    elif is_draw(state): ...           # full board
    else: state.advance_turn()         # next player
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import numpy as np

from dropfour.debug import debug
from dropfour.errors import ColumnFullError, DropError, GameOverError, InvalidColumnError
from dropfour.game import rules
from dropfour.game.board import Board
from dropfour.utils import ROWS, COLS, Coord, GameResult, Player, to_player


class DropStatus(Enum):
    """Outcome kinds of a drop request."""
    PLACED = "placed"
    COLUMN_FULL = "column_full"
    GAME_OVER = "game_over"
    INVALID_COLUMN = "invalid_column"
    INPUT_DISABLED = "input_disabled"  # produced by GameSession only


_STATUS_ERRORS = {
    DropStatus.COLUMN_FULL: ColumnFullError,
    DropStatus.GAME_OVER: GameOverError,
    DropStatus.INVALID_COLUMN: InvalidColumnError,
    DropStatus.INPUT_DISABLED: DropError,
}


@dataclass(frozen=True)
class DropOutcome:
    """Result of a drop request. Only PLACED outcomes changed the board."""
    status: DropStatus
    column: int
    row: Optional[int] = None
    player: Optional[Player] = None
    result: GameResult = GameResult.IN_PROGRESS

    @property
    def placed(self) -> bool:
        return self.status == DropStatus.PLACED

    def raise_for_status(self) -> 'DropOutcome':
        """Raise the matching DropError for a rejected outcome."""
        if self.placed:
            return self
        error = _STATUS_ERRORS[self.status]
        raise error(f"Drop into column {self.column} rejected: {self.status.value}", self.column)


class GameState:
    """
    A single game: board, player to move and result.

    The board is only changed through ``drop``. Once the result is a win or a
    draw, no further drops or turn changes are accepted.
    """

    def __init__(self, width: int = COLS, height: int = ROWS):
        self._board = Board(height, width)
        self._current_player = Player.ONE
        self._result = GameResult.IN_PROGRESS
        self.last_move: Optional[Coord] = None
        self.moves_made = 0
        debug.debug(f"New {height}x{width} game, {self._current_player} to move", "state")

    @property
    def width(self) -> int:
        return self._board.cols

    @property
    def height(self) -> int:
        return self._board.rows

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def board(self) -> Board:
        """Copy of the board; changes to it do not affect the game."""
        return self._board.copy()

    def get_state(self) -> np.ndarray:
        return self._board.get_state()

    def is_game_over(self) -> bool:
        return self._result.is_game_over()

    def find_drop_row(self, column: int) -> Optional[int]:
        return self._board.find_drop_row(column)

    def is_board_full(self) -> bool:
        return self._board.is_full()

    def valid_moves(self) -> List[int]:
        if self.is_game_over():
            return []
        return self._board.valid_moves()

    def cell_at(self, row: int, column: int) -> Player:
        return self._board.cell_at(row, column)

    def drop(self, column: int, player=None) -> DropOutcome:
        """
        Drop a piece into a column.

        The result is updated when the piece completes a four in a row or
        fills the board; the player to move is left unchanged.

        Args:
            column: Column index (0-indexed)
            player: The moving player; defaults to the current player

        Returns:
            DropOutcome describing the placement or why it was rejected

        Raises:
            ValueError: If ``player`` is not the player to move
        """
        player = self._current_player if player is None else to_player(player)

        if self.is_game_over():
            debug.debug(f"Rejected column {column}: game is over ({self._result.name})", "state")
            return DropOutcome(DropStatus.GAME_OVER, column, result=self._result)

        if player != self._current_player:
            raise ValueError(f"It is {self._current_player}'s turn, not {player}'s")

        try:
            row = self._board.find_drop_row(column)
        except InvalidColumnError:
            debug.debug(f"Rejected column {column}: out of range", "state")
            return DropOutcome(DropStatus.INVALID_COLUMN, column, result=self._result)

        if row is None:
            debug.debug(f"Rejected column {column}: full", "state")
            return DropOutcome(DropStatus.COLUMN_FULL, column, result=self._result)

        self._board.place(column, player)
        self.last_move = (row, column)
        self.moves_made += 1

        debug.start_timer("win_check")
        if rules.check_win_at(self._board, row, column):
            self._result = GameResult.win_for(player)
            debug.info(f"{player} wins with a piece at ({row}, {column})", "state")
        elif self._board.is_full():
            self._result = GameResult.DRAW
            debug.info("Game ends in a draw", "state")
        debug.end_timer("win_check", "state")

        return DropOutcome(DropStatus.PLACED, column, row, player, self._result)

    def advance_turn(self) -> Player:
        """
        Hand the move to the other player.

        Raises:
            GameOverError: If the game has already been won or drawn
        """
        if self.is_game_over():
            raise GameOverError(f"Cannot advance turn: game is over ({self._result.name})")

        self._current_player = self._current_player.other()
        debug.debug(f"Switching to {self._current_player}", "state")
        return self._current_player

    def winning_line(self) -> List[Coord]:
        """Cells of the winning run, or an empty list if nobody has won."""
        winner = self._result.winner
        if winner is None:
            return []
        return rules.find_winning_line(self._board, winner) or []

    def render(self, highlight=None) -> str:
        return self._board.render(highlight)

    def __str__(self) -> str:
        return self.render()


def new_game(width: int = COLS, height: int = ROWS) -> GameState:
    """Start a game on an empty width x height board with player one to move."""
    return GameState(width, height)


def drop(state: GameState, column: int) -> DropOutcome:
    """Drop a piece for the current player; see GameState.drop."""
    return state.drop(column)


def check_win(state: GameState) -> bool:
    """Whether the current player (the one who just moved) has four in a row."""
    return rules.check_win(state.board, state.current_player)


def is_draw(state: GameState) -> bool:
    """Whether the board is full without a four in a row for the current player."""
    return state.is_board_full() and not check_win(state)


def current_player(state: GameState) -> Player:
    return state.current_player


def cell_at(state: GameState, row: int, column: int) -> Player:
    return state.cell_at(row, column)
