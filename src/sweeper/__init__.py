"""
Text-mode Minesweeper.

Provides the board model, the reveal engine and the text front end.
"""
from .cell import CellKind, CellState, UNREVEALED, MINE
from .board import Board, BoardConfig, default_mine_count, initialize
from .engine import (
    Game,
    GameState,
    MoveResult,
    adjacency_score,
    check_winner,
    play_move,
    reveal,
)
from .errors import (
    GameOver,
    InvalidDimension,
    InvalidMineCount,
    MinesweeperError,
    OutOfBounds,
)
from .render import render_board

__all__ = [
    "CellKind",
    "CellState",
    "UNREVEALED",
    "MINE",
    "Board",
    "BoardConfig",
    "default_mine_count",
    "initialize",
    "Game",
    "GameState",
    "MoveResult",
    "adjacency_score",
    "check_winner",
    "play_move",
    "reveal",
    "GameOver",
    "InvalidDimension",
    "InvalidMineCount",
    "MinesweeperError",
    "OutOfBounds",
    "render_board",
]
