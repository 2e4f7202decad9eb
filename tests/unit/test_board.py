"""
Unit tests for the Board model.

Tests configuration validation, mine placement, cell access
and observation generation.
"""
import pytest
import numpy as np
from sweeper import (
    Board,
    BoardConfig,
    CellState,
    InvalidDimension,
    InvalidMineCount,
    MINE,
    OutOfBounds,
    UNREVEALED,
    default_mine_count,
    initialize,
)


# ============================================================================
# Board Configuration Tests
# ============================================================================

class TestBoardConfig:
    """Test board configuration validation."""

    def test_default_density_is_ten_percent(self) -> None:
        """Mine count should default to size squared over ten."""
        assert BoardConfig(10).num_mines == 10
        assert BoardConfig(15).num_mines == 22
        assert BoardConfig(5).num_mines == 2

    def test_default_mine_count_floors(self) -> None:
        """Default count is the floor of 10% of the cells."""
        assert default_mine_count(99) == 980

    def test_explicit_mine_count_kept(self) -> None:
        """An explicit mine count should be kept."""
        assert BoardConfig(5, 7).num_mines == 7

    def test_zero_size_raises_error(self) -> None:
        """Size of 0 should raise InvalidDimension."""
        with pytest.raises(InvalidDimension, match="must be positive"):
            BoardConfig(0)

    def test_too_many_mines_raises_error(self) -> None:
        """A mine on every cell should be rejected."""
        with pytest.raises(InvalidMineCount, match="Mine count"):
            BoardConfig(5, 25)

    def test_errors_are_value_errors(self) -> None:
        """Config errors should be catchable as ValueError."""
        with pytest.raises(ValueError):
            BoardConfig(5, -1)


# ============================================================================
# Initialization Tests
# ============================================================================

class TestInitialize:
    """Test board creation and mine placement."""

    @pytest.mark.parametrize("size,num_mines", [(5, 0), (5, 2), (5, 24), (10, 10), (12, 100)])
    def test_places_exact_mine_count(
        self, size: int, num_mines: int, rng: np.random.Generator
    ) -> None:
        """Exactly num_mines cells should hold a mine."""
        board = initialize(size, num_mines, rng)
        assert board.mine_count() == num_mines

    def test_other_cells_unrevealed(self, default_board: Board) -> None:
        """Every non-mine cell should start unrevealed."""
        for row, col in default_board.positions():
            state = default_board.get(row, col)
            assert state.is_mine or state.is_unrevealed

    def test_same_seed_same_layout(self) -> None:
        """Seeded generators should reproduce the mine layout."""
        first = initialize(9, 20, np.random.default_rng(7))
        second = initialize(9, 20, np.random.default_rng(7))
        assert np.array_equal(
            first.get_observation(hidden=False),
            second.get_observation(hidden=False),
        )

    def test_without_rng_uses_fresh_generator(self) -> None:
        """Omitting the rng should still place all mines."""
        board = initialize(6, 5)
        assert board.mine_count() == 5

    def test_nonpositive_size_raises(self) -> None:
        """initialize should reject a non-positive size."""
        with pytest.raises(InvalidDimension):
            initialize(0, 0)
        with pytest.raises(InvalidDimension):
            initialize(-3, 0)

    def test_mine_count_must_leave_a_safe_cell(self) -> None:
        """num_mines equal to the cell count should be rejected."""
        with pytest.raises(InvalidMineCount):
            initialize(5, 25)

    def test_negative_mine_count_raises(self) -> None:
        with pytest.raises(InvalidMineCount):
            initialize(5, -1)


# ============================================================================
# Cell Access Tests
# ============================================================================

class TestCellAccess:
    """Test get/set and bounds handling."""

    def test_new_board_is_unrevealed(self, empty_board: Board) -> None:
        """A bare board should have no mines."""
        assert empty_board.size == 5
        assert empty_board.mine_count() == 0
        assert empty_board.unrevealed_count() == 25

    def test_set_then_get(self, empty_board: Board) -> None:
        """set should overwrite the cell state."""
        empty_board.set(1, 3, CellState.revealed(2))
        assert empty_board.get(1, 3) == CellState.revealed(2)
        assert empty_board.get(3, 1) == UNREVEALED

    def test_from_mines(self) -> None:
        """from_mines should place mines at the given positions."""
        board = Board.from_mines(5, [(0, 0), (4, 4)])
        assert board.get(0, 0) == MINE
        assert board.get(4, 4) == MINE
        assert board.mine_count() == 2

    def test_is_mine_and_is_unrevealed(self, scenario_board: Board) -> None:
        """Predicates should return plain booleans."""
        assert scenario_board.is_mine(0, 0) is True
        assert scenario_board.is_unrevealed(0, 0) is False
        assert scenario_board.is_unrevealed(0, 1) is True

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (5, 0), (0, 5)])
    def test_get_out_of_bounds_raises(
        self, empty_board: Board, row: int, col: int
    ) -> None:
        """Access outside the grid should raise OutOfBounds."""
        with pytest.raises(OutOfBounds):
            empty_board.get(row, col)

    def test_set_out_of_bounds_raises(self, empty_board: Board) -> None:
        with pytest.raises(IndexError):
            empty_board.set(0, 5, MINE)

    def test_non_positive_board_raises(self) -> None:
        with pytest.raises(InvalidDimension):
            Board(0)


# ============================================================================
# Geometry Tests
# ============================================================================

class TestNeighbors:
    """Test Moore neighborhood clipping."""

    def test_corner_has_three_neighbors(self, empty_board: Board) -> None:
        assert sorted(empty_board.neighbors(0, 0)) == [(0, 1), (1, 0), (1, 1)]

    def test_edge_has_five_neighbors(self, empty_board: Board) -> None:
        assert len(empty_board.neighbors(0, 2)) == 5

    def test_interior_has_eight_neighbors(self, empty_board: Board) -> None:
        neighbors = empty_board.neighbors(2, 2)
        assert len(neighbors) == 8
        assert (2, 2) not in neighbors

    def test_positions_row_major(self) -> None:
        """positions should iterate rows then columns."""
        board = Board(2)
        assert list(board.positions()) == [(0, 0), (0, 1), (1, 0), (1, 1)]


# ============================================================================
# Observation Tests
# ============================================================================

class TestObservation:
    """Test observation arrays."""

    def test_observation_shape_matches_board(self, default_board: Board) -> None:
        assert default_board.get_observation().shape == (10, 10)

    def test_hidden_observation_masks_mines(self, scenario_board: Board) -> None:
        """Hidden mode should show mines as unrevealed."""
        obs = scenario_board.get_observation()
        assert np.all(obs == -1)

    def test_revealed_observation_shows_mines(self, scenario_board: Board) -> None:
        """Revealed mode should mark mines with 9."""
        obs = scenario_board.get_observation(hidden=False)
        assert obs[0, 0] == 9
        assert obs[1, 1] == 9
        assert obs[3, 3] == 9
        assert np.count_nonzero(obs == 9) == 3

    def test_observation_is_a_copy(self, empty_board: Board) -> None:
        """Mutating the observation should not touch the board."""
        obs = empty_board.get_observation()
        obs[0, 0] = 5
        assert empty_board.get(0, 0) == UNREVEALED

    def test_revealed_count(self, empty_board: Board) -> None:
        empty_board.set(0, 0, CellState.revealed(0))
        empty_board.set(0, 1, CellState.revealed(1))
        assert empty_board.revealed_count() == 2
        assert empty_board.unrevealed_count() == 23
