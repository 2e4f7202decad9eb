"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, List

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import Board, BoardConfig, Game, initialize


# ============================================================================
# Layout Helpers
# ============================================================================

def board_from_layout(layout: List[str]) -> Board:
    """Build a board from rows of text where '*' marks a mine."""
    positions = [
        (row, col)
        for row, line in enumerate(layout)
        for col, char in enumerate(line)
        if char == "*"
    ]
    return Board.from_mines(len(layout), positions)


@pytest.fixture
def make_board() -> Callable[[List[str]], Board]:
    """Factory for boards described as text layouts."""
    return board_from_layout


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random source for reproducible mine placement."""
    return np.random.default_rng(1234)


@pytest.fixture
def default_board(rng: np.random.Generator) -> Board:
    """Create a 10x10 board with the default 10 mines."""
    return initialize(10, 10, rng)


@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for flood testing."""
    return Board(5)


@pytest.fixture
def scenario_board() -> Board:
    """5x5 board with mines at linear indices 0, 6 and 18."""
    return Board.from_mines(5, [divmod(index, 5) for index in (0, 6, 18)])


@pytest.fixture
def nearly_full_board() -> Board:
    """5x5 board where every cell except (2, 3) is a mine."""
    positions = [(r, c) for r in range(5) for c in range(5) if (r, c) != (2, 3)]
    return Board.from_mines(5, positions)


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def scenario_game(scenario_board: Board) -> Game:
    """Game wrapping the three-mine scenario board."""
    return Game(scenario_board)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def small_config() -> BoardConfig:
    """Small 5x5 configuration with default density."""
    return BoardConfig(5)
