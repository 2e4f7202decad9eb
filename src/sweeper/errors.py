"""
Exceptions raised by the Minesweeper core.

Each error also derives from the closest builtin so callers can catch
``ValueError`` / ``IndexError`` without importing this module.
"""


class MinesweeperError(Exception):
    """Base class for all game errors."""


class InvalidDimension(MinesweeperError, ValueError):
    """Board size is not a positive integer."""


class InvalidMineCount(MinesweeperError, ValueError):
    """Mine count does not fit on the board."""


class OutOfBounds(MinesweeperError, IndexError):
    """Coordinates fall outside the grid."""


class GameOver(MinesweeperError, RuntimeError):
    """A move was submitted after the game ended."""
