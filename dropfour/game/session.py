"""
session.py - Session driver for interactive dropfour games

GameSession connects an input layer to a GameState. It processes one move at
a time (placement, win check, draw check, turn switch) and keeps input
disabled while doing so, so a second submission can never be applied to the
same turn. Presentation layers subscribe to drop and game-over events.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from dropfour.debug import debug
from dropfour.game.state import (DropOutcome, DropStatus, GameState, check_win,
                                 is_draw, new_game)
from dropfour.utils import Coord, GameResult, Player


@dataclass(frozen=True)
class DropEvent:
    """A placed piece, as seen by renderers and feedback layers."""
    row: int
    column: int
    player: Player

    @property
    def cue(self) -> Tuple[int, int]:
        """
        Drop sound to play: (sample index, variant).

        The sample is keyed by the landing row, so a piece falling into an
        empty column uses the last sample; the variant is keyed by player.
        """
        return self.row, self.player.value - 1


DropListener = Callable[[DropEvent], None]
GameOverListener = Callable[[GameResult, str], None]


def result_message(result: GameResult) -> str:
    """End-of-game announcement for a terminal result."""
    if result.winner is not None:
        return f"Player {result.winner.value} won!"
    if result == GameResult.DRAW:
        return "The game ended in a draw!"
    return ""


class GameSession:
    """
    Drives one game from an input layer.

    Attributes:
        state: The game being played
        input_enabled: Whether ``submit`` currently accepts a column
    """

    def __init__(self, width: Optional[int] = None, height: Optional[int] = None,
                 state: Optional[GameState] = None):
        """
        Create a session.

        Args:
            width: Board width for a new game
            height: Board height for a new game
            state: An existing game to drive instead of a new one
        """
        if state is None:
            kwargs = {}
            if width is not None:
                kwargs['width'] = width
            if height is not None:
                kwargs['height'] = height
            state = new_game(**kwargs)

        self.state = state
        self.input_enabled = not state.is_game_over()
        self._drop_listeners: List[DropListener] = []
        self._game_over_listeners: List[GameOverListener] = []

    def on_drop(self, listener: DropListener) -> DropListener:
        """Register a listener for placed pieces. Usable as a decorator."""
        self._drop_listeners.append(listener)
        return listener

    def on_game_over(self, listener: GameOverListener) -> GameOverListener:
        """Register a listener for the end-of-game announcement."""
        self._game_over_listeners.append(listener)
        return listener

    def submit(self, column: int) -> DropOutcome:
        """
        Play ``column`` for the current player.

        Returns:
            The drop outcome; GAME_OVER once the game has ended and
            INPUT_DISABLED while a move is still being processed
        """
        if self.state.is_game_over():
            return self.state.drop(column)

        if not self.input_enabled:
            debug.debug(f"Ignoring column {column}: input disabled", "session")
            return DropOutcome(DropStatus.INPUT_DISABLED, column, result=self.state.result)

        self.input_enabled = False
        player = self.state.current_player

        outcome = self.state.drop(column)
        if not outcome.placed:
            self.input_enabled = not self.state.is_game_over()
            return outcome

        event = DropEvent(outcome.row, outcome.column, player)
        try:
            for listener in self._drop_listeners:
                listener(event)
        finally:
            finished = check_win(self.state) or is_draw(self.state)
            if not finished:
                self.state.advance_turn()
                self.input_enabled = True

        if finished:
            self._end_game()
        return outcome

    def _end_game(self) -> None:
        result = self.state.result
        message = result_message(result)
        debug.info(message, "session")
        for listener in self._game_over_listeners:
            listener(result, message)

    def hover_player(self) -> Optional[Player]:
        """Player whose preview piece should be shown over the columns."""
        if not self.input_enabled:
            return None
        return self.state.current_player

    def winning_line(self) -> List[Coord]:
        return self.state.winning_line()

    def reset(self) -> None:
        """Start a fresh game of the same size; listeners stay registered."""
        debug.debug("Resetting session", "session")
        self.state = new_game(self.state.width, self.state.height)
        self.input_enabled = True

    def render(self) -> str:
        return self.state.render(self.winning_line())
