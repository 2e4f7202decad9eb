"""
Reveal engine for Minesweeper.

Implements adjacency scoring, flood reveal of zero-count regions,
move application and win detection on top of :class:`Board`.
"""
import logging
from enum import Enum, auto
from typing import List, Optional

import numpy as np

from .board import Board, BoardConfig, Position, initialize
from .cell import CellState
from .errors import GameOver, OutOfBounds

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class MoveResult(Enum):
    """Outcome of a single move."""

    SAFE = auto()
    HIT_MINE = auto()


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Scoring and Reveal
# ============================================================================

def adjacency_score(board: Board, row: int, col: int) -> int:
    """
    Count mines in the Moore neighborhood of a cell.

    Neighbors outside the grid are skipped; the cell itself is not
    counted.

    Returns:
        Number of adjacent mines (0-8).
    """
    return sum(
        1 for neighbor_row, neighbor_col in board.neighbors(row, col)
        if board.is_mine(neighbor_row, neighbor_col)
    )


def reveal(board: Board, row: int, col: int) -> List[Position]:
    """
    Reveal a cell and flood through any zero-count region.

    Each revealed cell is scored once and marked before its neighbors
    are queued, so every cell is visited at most once. Must not be
    called on a mine.

    Args:
        board: Board to mutate.
        row: Row index to reveal.
        col: Column index to reveal.

    Returns:
        Positions revealed, in reveal order. Empty when the position
        is outside the grid.
    """
    if not board.in_bounds(row, col):
        return []

    revealed = []
    pending = [(row, col)]
    while pending:
        current_row, current_col = pending.pop()
        # Queued twice through two zero neighbors.
        if revealed and not board.is_unrevealed(current_row, current_col):
            continue

        score = adjacency_score(board, current_row, current_col)
        board.set(current_row, current_col, CellState.revealed(score))
        revealed.append((current_row, current_col))

        if score == 0:
            for neighbor_row, neighbor_col in board.neighbors(
                current_row, current_col
            ):
                if board.is_unrevealed(neighbor_row, neighbor_col):
                    pending.append((neighbor_row, neighbor_col))

    if len(revealed) > 1:
        logger.debug(
            "Flood from (%d, %d) revealed %d cells", row, col, len(revealed)
        )
    return revealed


def play_move(board: Board, row: int, col: int) -> MoveResult:
    """
    Apply a player move.

    A mine leaves the board untouched so the caller can show the full
    layout. Revealed cells are left as they are.

    Returns:
        ``MoveResult.HIT_MINE`` or ``MoveResult.SAFE``.

    Raises:
        OutOfBounds: If the position is outside the grid.
    """
    if not board.in_bounds(row, col):
        raise OutOfBounds(
            f"({row}, {col}) is outside a {board.size}x{board.size} board"
        )
    if board.is_mine(row, col):
        logger.debug("Mine hit at (%d, %d)", row, col)
        return MoveResult.HIT_MINE
    if board.is_unrevealed(row, col):
        reveal(board, row, col)
    return MoveResult.SAFE


def check_winner(board: Board) -> bool:
    """Check that no safe cell is left unrevealed."""
    return board.unrevealed_count() == 0


# ============================================================================
# Game Session
# ============================================================================

class Game:
    """
    One game session over a single board.

    Tracks the PLAYING -> WON / LOST state machine around
    :func:`play_move` and :func:`check_winner`.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self._state = GameState.PLAYING
        self._moves = 0

    @classmethod
    def new(
        cls,
        size: int,
        num_mines: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> "Game":
        """
        Start a game on a freshly initialized board.

        Args:
            size: Side length of the grid.
            num_mines: Mines to place (default: 10% of cells).
            seed: Seed for mine placement.
        """
        config = BoardConfig(size, num_mines)
        rng = np.random.default_rng(seed)
        return cls(initialize(config.size, config.num_mines, rng))

    def play_move(self, row: int, col: int) -> MoveResult:
        """
        Play a move and update the game state.

        Raises:
            GameOver: If the game has already been won or lost.
            OutOfBounds: If the position is outside the grid.
        """
        if self._state is not GameState.PLAYING:
            raise GameOver(f"Game already finished ({self._state.name})")

        result = play_move(self.board, row, col)
        self._moves += 1
        if result is MoveResult.HIT_MINE:
            self._state = GameState.LOST
        elif check_winner(self.board):
            logger.debug("Board cleared after %d moves", self._moves)
            self._state = GameState.WON
        return result

    def check_winner(self) -> bool:
        """Check if every safe cell has been revealed."""
        return check_winner(self.board)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._state

    @property
    def moves(self) -> int:
        """Number of moves played."""
        return self._moves

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._state is GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._state is GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._state is GameState.LOST
