"""
errors.py - Exceptions raised by the game-state engine

Every error here means "the requested move was not applied"; none of them
leaves the board in a changed state.
"""


class DropError(Exception):
    """Base class for rejected drops."""

    def __init__(self, message: str, column=None):
        super().__init__(message)
        self.column = column


class InvalidColumnError(DropError, ValueError):
    """The column index lies outside the board."""


class ColumnFullError(DropError):
    """The target column has no empty row left."""


class GameOverError(DropError):
    """The game has already been won or drawn."""
