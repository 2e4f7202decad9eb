"""
Gymnasium environment wrapper for Minesweeper.

Lets automated players drive a :class:`Game` through the standard
reset/step interface.
"""
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig, initialize_from_config
from .cell import MAX_COUNT
from .engine import Game, MoveResult
from .render import render_board


# ============================================================================
# Constants
# ============================================================================

SAFE_REWARD = 1.0
WIN_REWARD = 10.0
MINE_REWARD = -10.0
INVALID_REWARD = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = unrevealed cell (mines included)
        - 0-8 = revealed cell with adjacent mine count

    Actions:
        Discrete action space of size ``size * size``.
        Action i corresponds to cell at (i // size, i % size).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for selecting an already revealed cell
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 10x10 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.game = Game(initialize_from_config(self.config, self.np_random))

        self.observation_space = spaces.Box(
            low=-1,
            high=MAX_COUNT,
            shape=(self.config.size, self.config.size),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0
        self._total_safe_cells = self.config.total_cells - self.config.num_mines

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on a freshly mined board.

        Args:
            seed: Random seed for mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.game = Game(initialize_from_config(self.config, self.np_random))
        self._steps = 0

        return self.game.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal the cell selected by ``action``.

        Args:
            action: Cell index to reveal (row * size + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        observation = self.game.board.get_observation()
        terminated = not self.game.is_playing

        if self.render_mode == "human":
            self.render()

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return divmod(int(action), self.config.size)

    def _calculate_reward(self, row: int, col: int) -> float:
        """Play the move and map its outcome to a reward."""
        board = self.game.board
        if not self.game.is_playing:
            return INVALID_REWARD
        if not board.is_mine(row, col) and not board.is_unrevealed(row, col):
            return INVALID_REWARD

        if self.game.play_move(row, col) is MoveResult.HIT_MINE:
            return MINE_REWARD
        if self.game.is_won:
            return WIN_REWARD
        return SAFE_REWARD

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.game.board
        return {
            "steps": self._steps,
            "revealed": board.revealed_count(),
            "total_safe": self._total_safe_cells,
            "game_state": self.game.state.name,
            "valid_actions": int(self.get_action_mask().sum()),
        }

    def render(self) -> Optional[str]:
        """Render the current board; mines are shown once the game ends."""
        text = render_board(self.game.board, hidden=self.game.is_playing)
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = cell not yet revealed.
        """
        return (self.game.board.get_observation() == -1).flatten()
