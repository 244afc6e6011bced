"""
board.py - Board representation and gravity placement for dropfour

This module implements the Board class: a rows x cols grid of cells where a
dropped piece falls to the lowest empty row of its column. Occupied cells are
never cleared or reassigned.
"""

import operator

import numpy as np
from typing import List, Optional

from dropfour.debug import debug
from dropfour.errors import ColumnFullError, InvalidColumnError
from dropfour.utils import (ROWS, COLS, Player, render_board_ascii,
                           to_player, is_valid_position)


class Board:
    """
    Represents the game grid.

    Row 0 is the top of the board and row ``rows - 1`` the bottom, so a
    column fills from its highest row index downwards. Cell values are the
    ``Player`` enum values (0 empty, 1 and 2 for the players).
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS):
        """
        Initialize an empty board.

        Args:
            rows: Number of rows (board height)
            cols: Number of columns (board width)
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Board must have at least one row and column, got {rows}x{cols}")

        debug.trace(f"Initializing {rows}x{cols} board", "board")
        self.rows = rows
        self.cols = cols
        self._grid = np.zeros((rows, cols), dtype=np.int8)

    @classmethod
    def from_grid(cls, grid) -> 'Board':
        """
        Build a board from an existing grid of cell values.

        Args:
            grid: 2D array-like holding 0, 1 or 2 in every cell

        Returns:
            A new Board holding a copy of the grid
        """
        try:
            values = np.asarray(grid, dtype=np.int64)
        except OverflowError as e:
            raise ValueError(f"Grid cell value out of range: {e}") from e

        if values.ndim != 2:
            raise ValueError(f"Grid must be two-dimensional, got shape {values.shape}")
        if not np.isin(values, [p.value for p in Player]).all():
            raise ValueError("Grid cells must be 0 (empty), 1 or 2")

        board = cls(*values.shape)
        board._grid[:, :] = values
        return board

    @property
    def grid(self) -> np.ndarray:
        """Read-only view of the cells."""
        view = self._grid.view()
        view.flags.writeable = False
        return view

    def copy(self) -> 'Board':
        """Create an independent copy of the board."""
        new_board = Board(self.rows, self.cols)
        new_board._grid = self._grid.copy()
        return new_board

    def get_state(self) -> np.ndarray:
        """Get a writable copy of the grid."""
        return self._grid.copy()

    def _check_column(self, column: int) -> int:
        column = operator.index(column)
        if not (0 <= column < self.cols):
            raise InvalidColumnError(
                f"Column {column} out of range (0-{self.cols - 1})", column)
        return column

    def find_drop_row(self, column: int) -> Optional[int]:
        """
        Find the row a piece dropped into ``column`` would land in.

        Args:
            column: Column index (0-indexed)

        Returns:
            The lowest empty row, or None if the column is full

        Raises:
            InvalidColumnError: If the column is outside the board
            TypeError: If the column is not an integer
        """
        column = self._check_column(column)

        for row in range(self.rows - 1, -1, -1):
            if self._grid[row, column] == Player.EMPTY.value:
                return row
        return None

    def place(self, column: int, player) -> int:
        """
        Drop a piece for ``player`` into ``column``.

        Returns:
            The row the piece landed in

        Raises:
            InvalidColumnError: If the column is outside the board
            ColumnFullError: If the column has no empty row
        """
        player = to_player(player)
        if player == Player.EMPTY:
            raise ValueError("Cannot place an empty piece")

        column = self._check_column(column)
        row = self.find_drop_row(column)
        if row is None:
            raise ColumnFullError(f"Column {column} is full", column)

        self._grid[row, column] = player.value
        debug.trace(f"Placed {player} at ({row}, {column})", "board")
        return row

    def cell_at(self, row: int, column: int) -> Player:
        """
        Get the owner of a cell.

        Raises:
            IndexError: If the cell is outside the board
        """
        if not is_valid_position(row, column, self.rows, self.cols):
            raise IndexError(f"Cell ({row}, {column}) is outside the {self.rows}x{self.cols} board")
        return Player(int(self._grid[row, column]))

    def is_full(self) -> bool:
        """
        Check whether no column can take another piece.

        Gravity fills columns bottom-up, so a full top row means a full board.
        """
        return bool((self._grid[0] != Player.EMPTY.value).all())

    def is_settled(self) -> bool:
        """Check that no piece sits above an empty cell."""
        occupied = self._grid != Player.EMPTY.value
        return not (occupied[:-1] & ~occupied[1:]).any()

    def valid_moves(self) -> List[int]:
        """Columns that still have an empty row."""
        return [col for col in range(self.cols) if self._grid[0, col] == Player.EMPTY.value]

    def piece_count(self) -> int:
        return int(np.count_nonzero(self._grid))

    def render(self, highlight=None) -> str:
        return render_board_ascii(self._grid, highlight)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid.shape == other._grid.shape and bool((self._grid == other._grid).all())

    def __str__(self) -> str:
        return self.render()
