"""Tests for the TileGrid class."""
import pytest

from slidingtiles.constants import NCOLS, NROWS
from slidingtiles.core.grid import TileGrid


@pytest.fixture
def grid():
    """Create an empty grid."""
    return TileGrid()


class TestGridConstruction:
    """Test grid initialization."""

    def test_default_dimensions(self, grid):
        assert grid.width == NCOLS == 5
        assert grid.height == NROWS == 4
        assert grid.values.shape == (5, 4)

    def test_starts_empty(self, grid):
        assert grid.total() == 0
        assert len(grid.empty_cells()) == NCOLS * NROWS

    def test_from_values_uses_column_row_indexing(self):
        values = [[0] * NROWS for _ in range(NCOLS)]
        values[3][1] = 8
        grid = TileGrid(values)
        assert grid.get_value(3, 1) == 8
        assert grid.rows()[1][3] == 8

    def test_wrong_shape_raises(self):
        with pytest.raises(ValueError):
            TileGrid([[0, 0], [0, 0]])


class TestGridBounds:
    """Test bounds checks."""

    @pytest.mark.parametrize("x,y", [(0, 0), (4, 3), (2, 1)])
    def test_inside(self, grid, x, y):
        assert grid.in_bounds(x, y) is True

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (5, 0), (0, 4)])
    def test_outside(self, grid, x, y):
        assert grid.in_bounds(x, y) is False


class TestGridTiles:
    """Test tile access and flag handling."""

    def test_move_tile_carries_blocked_flag(self, grid):
        grid.set_value(1, 0, 4)
        grid.blocked[1, 0] = True
        grid.move_tile((1, 0), (0, 0))
        assert grid.get_value(0, 0) == 4
        assert grid.blocked[0, 0]
        assert grid.is_empty(1, 0)
        assert not grid.blocked[1, 0]

    def test_get_tile_snapshot(self, grid):
        grid.set_value(2, 3, 16)
        grid.set_pending(2, 3)
        tile = grid.get_tile(2, 3)
        assert tile.value == 16
        assert (tile.x, tile.y) == (2, 3)
        assert tile.pending is True
        assert tile.blocked is False

    def test_display_value_uses_settled_while_pending(self, grid):
        grid.set_value(0, 0, 2)
        grid.snapshot_settled()
        grid.set_value(0, 0, 4)
        assert grid.display_value(0, 0) == 4
        grid.set_pending(0, 0)
        assert grid.display_value(0, 0) == 2
        grid.set_pending(0, 0, pending=False)
        assert grid.display_value(0, 0) == 4

    def test_clear_blocked(self, grid):
        grid.blocked[:, :] = True
        grid.clear_blocked()
        assert not grid.blocked.any()

    def test_clear_resets_everything(self, grid):
        grid.set_value(1, 1, 32)
        grid.set_pending(1, 1)
        grid.blocked[1, 1] = True
        grid.clear()
        assert grid.total() == 0
        assert not grid.has_pending()
        assert not grid.blocked.any()

    def test_iteration_covers_every_cell(self, grid):
        assert len(list(grid)) == NCOLS * NROWS


class TestGridNeighbours:
    """Test neighbour checks used by move detection."""

    def test_horizontal_pair(self, grid):
        grid.set_value(0, 2, 8)
        grid.set_value(1, 2, 8)
        assert grid.has_adjacent_pair() is True

    def test_vertical_pair(self, grid):
        grid.set_value(4, 2, 2)
        grid.set_value(4, 3, 2)
        assert grid.has_adjacent_pair() is True

    def test_empty_cells_are_not_pairs(self, grid):
        assert grid.has_adjacent_pair() is False

    def test_diagonal_is_not_a_pair(self, grid):
        grid.set_value(0, 0, 2)
        grid.set_value(1, 1, 2)
        assert grid.has_adjacent_pair() is False

    def test_wraparound_is_not_a_pair(self, grid):
        """The last column is not adjacent to the first."""
        grid.set_value(0, 0, 2)
        grid.set_value(4, 0, 2)
        grid.set_value(2, 0, 4)
        assert grid.has_adjacent_pair() is False
