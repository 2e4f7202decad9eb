"""
Board module for Minesweeper game.

Implements the square grid storage, random mine placement and
cell accessors. Reveal rules live in :mod:`sweeper.engine`.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import MINE, CellState, MINE_CODE, UNREVEALED_CODE
from .errors import InvalidDimension, InvalidMineCount, OutOfBounds

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

MINE_DENSITY = 10  # percent of cells
HIDDEN_OBSERVATION = -1
MINE_OBSERVATION = 9


def default_mine_count(size: int) -> int:
    """Default number of mines for a ``size`` x ``size`` board (10%)."""
    return (size * size) // MINE_DENSITY


def _validate(size: int, num_mines: int) -> None:
    """Ensure size and mine count describe a playable board."""
    if size <= 0:
        raise InvalidDimension(f"Board size must be positive, got {size}")
    total = size * size
    if not 0 <= num_mines < total:
        raise InvalidMineCount(
            f"Mine count must be in [0, {total}), got {num_mines}"
        )


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        size: Side length of the square grid.
        num_mines: Total mines to place (default: 10% of cells).
    """

    size: int = 10
    num_mines: Optional[int] = None

    def __post_init__(self) -> None:
        """Fill in the default density and validate."""
        if self.num_mines is None:
            self.num_mines = default_mine_count(self.size)
        _validate(self.size, self.num_mines)

    @property
    def total_cells(self) -> int:
        return self.size * self.size


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Square Minesweeper grid.

    Cells are kept in a flat ``int8`` array indexed ``row * size + col``;
    only row/column accessors are exposed.
    """

    def __init__(self, size: int) -> None:
        """
        Create a board with every cell unrevealed and no mines.

        Args:
            size: Side length of the grid.

        Raises:
            InvalidDimension: If ``size`` is not positive.
        """
        if size <= 0:
            raise InvalidDimension(f"Board size must be positive, got {size}")
        self._size = size
        self._cells = np.full(size * size, UNREVEALED_CODE, dtype=np.int8)

    @classmethod
    def from_mines(cls, size: int, positions: Iterable[Position]) -> "Board":
        """Build a board with mines at the given (row, col) positions."""
        board = cls(size)
        for row, col in positions:
            board.set(row, col, MINE)
        return board

    def __repr__(self) -> str:
        return f"Board(size={self._size}, mines={self.mine_count()})"

    # ========================================================================
    # Mine Placement (Low-level)
    # ========================================================================

    def _place_mines(self, num_mines: int, rng: np.random.Generator) -> None:
        """
        Place mines by rejection sampling over linear indices.

        Args:
            num_mines: Number of distinct mines to place.
            rng: Random source for index draws.
        """
        total = self._size * self._size
        for _ in range(num_mines):
            index = int(rng.integers(total))
            while self._cells[index] == MINE_CODE:
                index = int(rng.integers(total))
            self._cells[index] = MINE_CODE

    # ========================================================================
    # Grid Geometry
    # ========================================================================

    @property
    def size(self) -> int:
        """Side length of the grid."""
        return self._size

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self._size and 0 <= col < self._size

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get in-bounds neighbors of a cell (Moore neighborhood).

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples, excluding the cell itself.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_bounds(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def positions(self) -> Iterator[Position]:
        """Iterate over every (row, col) in row-major order."""
        for row in range(self._size):
            for col in range(self._size):
                yield row, col

    def _index(self, row: int, col: int) -> int:
        if not self.in_bounds(row, col):
            raise OutOfBounds(
                f"({row}, {col}) is outside a {self._size}x{self._size} board"
            )
        return row * self._size + col

    # ========================================================================
    # Cell Access
    # ========================================================================

    def get(self, row: int, col: int) -> CellState:
        """
        Get the state of a cell.

        Raises:
            OutOfBounds: If the position is outside the grid.
        """
        return CellState.from_code(self._cells[self._index(row, col)])

    def set(self, row: int, col: int, state: CellState) -> None:
        """
        Overwrite the state of a cell.

        No transition rules are checked here; the reveal engine is
        responsible for never rewriting a revealed cell.

        Raises:
            OutOfBounds: If the position is outside the grid.
        """
        self._cells[self._index(row, col)] = state.to_code()

    def is_mine(self, row: int, col: int) -> bool:
        """Check if cell holds a mine."""
        return bool(self._cells[self._index(row, col)] == MINE_CODE)

    def is_unrevealed(self, row: int, col: int) -> bool:
        """Check if cell is still unrevealed (mines excluded)."""
        return bool(self._cells[self._index(row, col)] == UNREVEALED_CODE)

    # ========================================================================
    # Queries
    # ========================================================================

    def unrevealed_count(self) -> int:
        """Number of safe cells not yet revealed."""
        return int(np.count_nonzero(self._cells == UNREVEALED_CODE))

    def mine_count(self) -> int:
        """Number of cells holding a mine."""
        return int(np.count_nonzero(self._cells == MINE_CODE))

    def revealed_count(self) -> int:
        """Number of revealed cells."""
        return int(np.count_nonzero(self._cells >= 0))

    def get_observation(self, hidden: bool = True) -> np.ndarray:
        """
        Get board state as a 2D numpy array.

        Args:
            hidden: If True, mines look like unrevealed cells.

        Returns:
            Array of shape (size, size) where:
                -1 = unrevealed (and mines, when hidden)
                0-8 = revealed with adjacent count
                9 = mine (only when not hidden)
        """
        obs = self._cells.reshape(self._size, self._size).copy()
        mines = obs == MINE_CODE
        obs[mines] = HIDDEN_OBSERVATION if hidden else MINE_OBSERVATION
        return obs


# ============================================================================
# Construction
# ============================================================================

def initialize(
    size: int,
    num_mines: int,
    rng: Optional[np.random.Generator] = None,
) -> Board:
    """
    Create a new board with randomly placed mines.

    Args:
        size: Side length of the grid.
        num_mines: Number of mines, ``0 <= num_mines < size * size``.
        rng: Random source (default: a fresh unseeded generator).

    Returns:
        A board with every cell unrevealed except ``num_mines`` mines.

    Raises:
        InvalidDimension: If ``size`` is not positive.
        InvalidMineCount: If ``num_mines`` does not fit on the board.
    """
    _validate(size, num_mines)
    if rng is None:
        rng = np.random.default_rng()

    board = Board(size)
    board._place_mines(num_mines, rng)
    logger.debug("Initialized %dx%d board with %d mines", size, size, num_mines)
    return board


def initialize_from_config(
    config: BoardConfig, rng: Optional[np.random.Generator] = None
) -> Board:
    """Create a board from a validated configuration."""
    return initialize(config.size, config.num_mines, rng)
