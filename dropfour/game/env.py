"""
env.py - Gymnasium environment for dropfour

DropFourEnv exposes a hot-seat game through the Gymnasium interface: each
step drops a piece for whichever player is to move. There is no built-in
opponent; the driver supplies the moves for both players.
"""

import numpy as np
import gymnasium as gym
from gymnasium import spaces
from typing import Any, Dict, Optional, Tuple, Union

from dropfour.debug import debug
from dropfour.game.session import GameSession
from dropfour.utils import ROWS, COLS, Player

CELL_PIXELS = 50

# RGB colours for the rgb_array render mode
BOARD_COLOR = (0, 0, 128)
PIECE_COLORS = {
    Player.EMPTY: (0, 0, 0),
    Player.ONE: (255, 0, 0),
    Player.TWO: (255, 255, 0),
}


class DropFourEnv(gym.Env):
    """
    Hot-seat game following the Gymnasium interface.

    Rewards are given to the player who made the move: ``reward_win`` for a
    winning drop, ``reward_draw`` for the drop that fills the board,
    ``reward_step`` otherwise and ``reward_rejected`` for a rejected drop.
    """

    metadata = {'render_modes': ['ascii', 'human', 'rgb_array'], 'render_fps': 4}

    def __init__(self, width: int = COLS, height: int = ROWS,
                 render_mode: Optional[str] = None):
        """
        Initialize the environment.

        Args:
            width: Number of columns
            height: Number of rows
            render_mode: One of the modes in ``metadata['render_modes']``
        """
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        debug.debug("Initializing DropFourEnv", "env")

        self.width = width
        self.height = height
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(width)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(height, width), dtype=np.int8
        )

        self.session = GameSession(width, height)

        self.reward_win = 1.0
        self.reward_draw = 0.0
        self.reward_rejected = -0.5
        self.reward_step = 0.0

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """Start a new game and return the initial observation and info."""
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)

        self.session.reset()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a piece for the player to move.

        Args:
            action: Column to drop into (0-indexed)

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        state = self.session.state
        mover = state.current_player
        outcome = self.session.submit(int(action))

        if not outcome.placed:
            debug.debug(f"Rejected action {action}: {outcome.status.value}", "env")
            info = self._get_info()
            info['rejected'] = outcome.status.name
            return self._get_observation(), self.reward_rejected, False, False, info

        terminated = state.is_game_over()
        if outcome.result.winner == mover:
            reward = self.reward_win
        elif terminated:
            reward = self.reward_draw
        else:
            reward = self.reward_step

        if self.render_mode == "human":
            self.render()

        info = self._get_info()
        info['mover'] = mover.value
        return self._get_observation(), reward, terminated, False, info

    def render(self) -> Optional[Union[str, np.ndarray]]:
        """Render the current position according to ``render_mode``."""
        if self.render_mode is None:
            return None

        if self.render_mode == "ascii":
            return self.session.render()

        if self.render_mode == "human":
            print(self.session.render())
            return None

        return self._render_rgb()

    def _render_rgb(self) -> np.ndarray:
        grid = self.session.state.get_state()
        image = np.empty((self.height * CELL_PIXELS, self.width * CELL_PIXELS, 3), dtype=np.uint8)
        image[:, :] = BOARD_COLOR

        # Disc mask shared by every cell
        radius = CELL_PIXELS * 2 // 5
        offsets = np.arange(CELL_PIXELS) - CELL_PIXELS // 2
        disc = offsets[:, None] ** 2 + offsets[None, :] ** 2 <= radius ** 2

        for row in range(self.height):
            for col in range(self.width):
                cell = image[row * CELL_PIXELS:(row + 1) * CELL_PIXELS,
                             col * CELL_PIXELS:(col + 1) * CELL_PIXELS]
                cell[disc] = PIECE_COLORS[Player(int(grid[row, col]))]

        return image

    def _get_observation(self) -> np.ndarray:
        return self.session.state.get_state()

    def _get_info(self) -> Dict[str, Any]:
        state = self.session.state
        valid_moves = state.valid_moves()

        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': state.current_player.value,
            'game_result': state.result.name,
            'moves_made': state.moves_made,
            'winning_line': state.winning_line(),
            'last_move': state.last_move,
        }

    def close(self):
        pass
