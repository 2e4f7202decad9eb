"""
Text rendering of a Minesweeper board.

Rows and columns are labelled 1-indexed; cells are drawn with
single-character glyphs.
"""
from typing import List

from .board import Board
from .cell import CellState

UNREVEALED_GLYPH = "."
MINE_GLYPH = "*"


def cell_glyph(state: CellState, hidden: bool = True) -> str:
    """
    Get the display character for a cell.

    Args:
        state: Cell to draw.
        hidden: If True, mines are drawn as unrevealed cells.
    """
    if state.is_revealed:
        return str(state.count)
    if state.is_mine and not hidden:
        return MINE_GLYPH
    return UNREVEALED_GLYPH


def render_board(board: Board, hidden: bool = True) -> str:
    """
    Render the board as a grid with row and column headers.

    Args:
        board: Board to draw.
        hidden: Draw mines as unrevealed (for a game in progress).

    Returns:
        Multi-line string without a trailing newline.
    """
    size = board.size
    lines: List[str] = [
        "     " + "".join(f"{col + 1:2d} " for col in range(size)),
        "-----" + "---" * size,
    ]
    for row in range(size):
        glyphs = "".join(
            f"{cell_glyph(board.get(row, col), hidden):>2} "
            for col in range(size)
        )
        lines.append(f"{row + 1:2d} | {glyphs}")
    return "\n".join(lines)
