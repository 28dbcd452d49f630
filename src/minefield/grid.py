"""
Grid module for Minefield.

Owns the two-dimensional collection of cells for one game and answers
neighbor queries.
"""
from typing import Iterator, List, Set

from .cell import Cell
from .errors import OutOfBoundsError


# ============================================================================
# Grid Class
# ============================================================================

class Grid:
    """
    Rectangular collection of cells indexed by (row, col).

    Dimensions are fixed at construction. Every cell starts hidden,
    unflagged and mine-free.
    """

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        self._cells: List[List[Cell]] = [
            [Cell(row, col) for col in range(cols)]
            for row in range(rows)
        ]

    # ========================================================================
    # Lookup
    # ========================================================================

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell_at(self, row: int, col: int) -> Cell:
        """
        Get the cell at a position.

        Raises:
            OutOfBoundsError: If the position lies outside the grid. The
                grid never clamps; that is the input translator's job.
        """
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self.rows, self.cols)
        return self._cells[row][col]

    def neighbors_of(self, cell: Cell) -> Set[Cell]:
        """
        Get every cell within one step of `cell`, diagonals included.

        Args:
            cell: A cell belonging to this grid.

        Returns:
            Set of 3 (corner), 5 (edge) or 8 (interior) neighboring cells.
        """
        assert self._cells[cell.row][cell.col] is cell, "cell not in grid"
        neighbors = set()
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = cell.row + delta_row
                new_col = cell.col + delta_col
                if self.in_bounds(new_row, new_col):
                    neighbors.add(self._cells[new_row][new_col])
        return neighbors

    # ========================================================================
    # Iteration
    # ========================================================================

    def __iter__(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in self._cells:
            yield from row

    def __len__(self) -> int:
        return self.rows * self.cols

    @property
    def size(self) -> int:
        return len(self)

    def mines(self) -> List[Cell]:
        """All cells holding a mine."""
        return [cell for cell in self if cell.is_mine]

    def all_safe_revealed(self) -> bool:
        """
        Win check: no cell may be both unrevealed and safe.

        Flags play no part; a flagged mine is simply an unrevealed mine.
        """
        for cell in self:
            if not cell.is_revealed and not cell.is_mine:
                return False
        return True
