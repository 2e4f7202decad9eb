"""
Cell module for Minesweeper game.

Represents the state held by a single grid position: still unrevealed,
a mine, or a revealed safe cell annotated with its adjacent mine count.
"""
from dataclasses import dataclass
from enum import Enum, auto


# ============================================================================
# Constants
# ============================================================================

class CellKind(Enum):
    """Tag of a cell state."""

    UNREVEALED = auto()
    MINE = auto()
    REVEALED = auto()


# Integer codes used by the board's flat storage.
UNREVEALED_CODE = -1
MINE_CODE = -2
MAX_COUNT = 8


# ============================================================================
# Cell State
# ============================================================================

@dataclass(frozen=True)
class CellState:
    """
    Immutable state of one cell.

    Attributes:
        kind: Which of the three states the cell is in.
        count: Adjacent mine count (0-8); always 0 unless revealed.
    """

    kind: CellKind
    count: int = 0

    def __post_init__(self) -> None:
        """Validate the count against the kind."""
        if self.kind is CellKind.REVEALED:
            if not 0 <= self.count <= MAX_COUNT:
                raise ValueError(
                    f"Revealed count must be in [0, {MAX_COUNT}], "
                    f"got {self.count}"
                )
        elif self.count != 0:
            raise ValueError(f"{self.kind.name} cells carry no count")

    @classmethod
    def revealed(cls, count: int) -> "CellState":
        """Build the state of a revealed cell with ``count`` adjacent mines."""
        if 0 <= count <= MAX_COUNT:
            return _REVEALED[count]
        # Out of range; let validation raise.
        return cls(CellKind.REVEALED, count)

    @classmethod
    def from_code(cls, code: int) -> "CellState":
        """Decode a storage code into a cell state."""
        code = int(code)
        if code == UNREVEALED_CODE:
            return UNREVEALED
        if code == MINE_CODE:
            return MINE
        return cls.revealed(code)

    def to_code(self) -> int:
        """Encode this state as a storage code."""
        if self.kind is CellKind.UNREVEALED:
            return UNREVEALED_CODE
        if self.kind is CellKind.MINE:
            return MINE_CODE
        return self.count

    @property
    def is_unrevealed(self) -> bool:
        """Check if cell is still unrevealed."""
        return self.kind is CellKind.UNREVEALED

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self.kind is CellKind.MINE

    @property
    def is_revealed(self) -> bool:
        """Check if cell has been revealed."""
        return self.kind is CellKind.REVEALED

    def __str__(self) -> str:
        if self.is_revealed:
            return f"Revealed({self.count})"
        return self.kind.name.capitalize()


UNREVEALED = CellState(CellKind.UNREVEALED)
MINE = CellState(CellKind.MINE)
_REVEALED = tuple(
    CellState(CellKind.REVEALED, count) for count in range(MAX_COUNT + 1)
)
