"""
dropfour.game - Core game mechanics for dropfour

This package contains the board representation, win and draw detection,
game state management, the session driver and the Gymnasium environment.
"""

from dropfour.game.board import Board
from dropfour.game.state import (DropOutcome, DropStatus, GameState, cell_at,
                                 check_win, current_player, drop, is_draw,
                                 new_game)
from dropfour.game.session import DropEvent, GameSession

__all__ = ['Board', 'GameState', 'DropOutcome', 'DropStatus', 'GameSession',
           'DropEvent', 'new_game', 'drop', 'check_win', 'is_draw',
           'current_player', 'cell_at']
