"""
Base agent interface for automated Minesweeper players.

Agents see only the hidden observation and choose a cell to reveal.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    All agents must implement the select_action method to choose
    which cell to reveal based on the current observation.
    """

    def __init__(self, board_size: int) -> None:
        """
        Initialize the agent.

        Args:
            board_size: Side length of the square board.
        """
        self.board_size = board_size
        self.total_cells = board_size * board_size

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index (row * size + col).
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return divmod(int(action), self.board_size)

    def position_to_action(self, row: int, col: int) -> int:
        """Convert (row, col) position to flat action index."""
        return row * self.board_size + col

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """Boolean mask of unrevealed cells (value -1)."""
        return observation.flatten() == -1

    def reset(self) -> None:
        """Reset agent state for new episode."""
