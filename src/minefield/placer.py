"""
Deferred mine placement.

Mines are laid out only once the first target is known, keeping that
cell and its neighbors clear so the opening move always cascades.
"""
import logging
import random
from typing import List, Optional

from .cell import Cell
from .errors import PlacementExhaustionError
from .grid import Grid

logger = logging.getLogger(__name__)


class MinePlacer:
    """
    Assigns mine positions and adjacent-mine counts on a grid.

    Args:
        rng: Random source; a seeded `random.Random` gives reproducible
            layouts. Defaults to a fresh unseeded generator.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def place(self, grid: Grid, mine_count: int, excluded_cell: Cell) -> None:
        """
        Place `mine_count` mines, keeping clear of `excluded_cell`.

        Args:
            grid: Grid to mutate in place.
            mine_count: Number of distinct mine cells to choose.
            excluded_cell: The first target; neither it nor any of its
                neighbors may hold a mine.

        Raises:
            PlacementExhaustionError: If fewer than `mine_count` cells are
                eligible.
        """
        candidates = self._candidate_cells(grid, excluded_cell)
        if len(candidates) < mine_count:
            raise PlacementExhaustionError(mine_count, len(candidates))

        for cell in self.rng.sample(candidates, mine_count):
            cell.is_mine = True

        self._calculate_adjacent_mines(grid)
        logger.debug(
            "Placed %d mines avoiding (%d, %d)",
            mine_count, excluded_cell.row, excluded_cell.col,
        )

    def _candidate_cells(self, grid: Grid, excluded_cell: Cell) -> List[Cell]:
        """Cells further than one step from the excluded cell."""
        return [
            cell for cell in grid
            if abs(cell.row - excluded_cell.row) > 1
            or abs(cell.col - excluded_cell.col) > 1
        ]

    def _calculate_adjacent_mines(self, grid: Grid) -> None:
        """Count mine neighbors for every cell against the final layout."""
        for cell in grid:
            cell.adjacent_mines = sum(
                1 for neighbor in grid.neighbors_of(cell) if neighbor.is_mine
            )
