"""
dropfour - A two-player gravity grid game (four in a row)

This package provides the game-state engine (board, gravity placement,
turn order, win and draw detection), a session driver that gates input
between moves, and thin presentation adapters: an ASCII renderer, a
Gymnasium environment and a command-line interface.
"""

# Version number
__version__ = '0.1.0'
