"""
Unit tests for Grid class.
"""
import pytest
from minefield import Grid, OutOfBoundsError


class TestGridConstruction:
    """Test grid creation."""

    def test_grid_has_requested_dimensions(self) -> None:
        grid = Grid(4, 7)
        assert grid.rows == 4
        assert grid.cols == 7
        assert len(grid) == grid.size == 28

    def test_iteration_is_row_major(self) -> None:
        grid = Grid(2, 3)
        positions = [cell.position for cell in grid]
        assert positions == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]

    def test_new_grid_is_blank(self, easy_grid: Grid) -> None:
        for cell in easy_grid:
            assert cell.is_hidden
            assert not cell.is_mine
        assert easy_grid.mines() == []

    def test_cells_know_their_coordinates(self, easy_grid: Grid) -> None:
        cell = easy_grid.cell_at(3, 5)
        assert (cell.row, cell.col) == (3, 5)

    def test_cell_at_returns_same_object(self, easy_grid: Grid) -> None:
        assert easy_grid.cell_at(2, 2) is easy_grid.cell_at(2, 2)


class TestBounds:
    """Out-of-range coordinates are programming errors."""

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (9, 0), (0, 9)])
    def test_cell_at_out_of_bounds_raises(
        self, easy_grid: Grid, row: int, col: int
    ) -> None:
        with pytest.raises(OutOfBoundsError):
            easy_grid.cell_at(row, col)

    def test_out_of_bounds_is_an_index_error(self, easy_grid: Grid) -> None:
        with pytest.raises(IndexError):
            easy_grid.cell_at(100, 100)

    def test_in_bounds(self, easy_grid: Grid) -> None:
        assert easy_grid.in_bounds(8, 8)
        assert not easy_grid.in_bounds(9, 8)


class TestNeighbors:
    """Test neighbor lookup."""

    @pytest.mark.parametrize("row, col", [(0, 0), (0, 8), (8, 0), (8, 8)])
    def test_corner_has_three_neighbors(
        self, easy_grid: Grid, row: int, col: int
    ) -> None:
        assert len(easy_grid.neighbors_of(easy_grid.cell_at(row, col))) == 3

    @pytest.mark.parametrize("row, col", [(0, 4), (4, 0), (8, 4), (4, 8)])
    def test_edge_has_five_neighbors(
        self, easy_grid: Grid, row: int, col: int
    ) -> None:
        assert len(easy_grid.neighbors_of(easy_grid.cell_at(row, col))) == 5

    def test_interior_has_eight_neighbors(self, easy_grid: Grid) -> None:
        cell = easy_grid.cell_at(4, 4)
        neighbors = easy_grid.neighbors_of(cell)
        assert len(neighbors) == 8
        assert {n.position for n in neighbors} == {
            (r, c) for r in (3, 4, 5) for c in (3, 4, 5)
        } - {(4, 4)}

    def test_neighbors_never_include_cell_itself(self, easy_grid: Grid) -> None:
        for cell in easy_grid:
            assert cell not in easy_grid.neighbors_of(cell)

    def test_single_cell_grid_has_no_neighbors(self) -> None:
        grid = Grid(1, 1)
        assert grid.neighbors_of(grid.cell_at(0, 0)) == set()


class TestWinCheck:
    """Test the all-safe-cells-revealed check."""

    def test_blank_grid_is_not_cleared(self, corner_mine_grid: Grid) -> None:
        assert corner_mine_grid.all_safe_revealed() is False

    def test_cleared_when_every_safe_cell_revealed(
        self, corner_mine_grid: Grid
    ) -> None:
        for cell in corner_mine_grid:
            if not cell.is_mine:
                cell.reveal()
        assert corner_mine_grid.all_safe_revealed() is True

    def test_flagging_the_last_safe_cell_does_not_count(
        self, corner_mine_grid: Grid
    ) -> None:
        for cell in corner_mine_grid:
            if not cell.is_mine and cell.position != (0, 0):
                cell.reveal()
        corner_mine_grid.cell_at(0, 0).toggle_flag()
        assert corner_mine_grid.all_safe_revealed() is False
