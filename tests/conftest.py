"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Iterable, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import (  # noqa: E402
    BoardConfig,
    Cell,
    Difficulty,
    GameSession,
    Grid,
    MinePlacer,
)


# ============================================================================
# Fixed Layouts
# ============================================================================

class FixedPlacer(MinePlacer):
    """Places mines at known positions, ignoring the first target."""

    def __init__(self, positions: Iterable[Tuple[int, int]]) -> None:
        super().__init__(random.Random(0))
        self.positions = list(positions)

    def place(self, grid: Grid, mine_count: int, excluded_cell: Cell) -> None:
        for row, col in self.positions:
            grid.cell_at(row, col).is_mine = True
        self._calculate_adjacent_mines(grid)


def fixed_session(width: int, height: int, mines) -> GameSession:
    """Session whose first reveal lays mines at exactly `mines`."""
    mines = list(mines)
    return GameSession(
        BoardConfig(width, height, len(mines)),
        placer=FixedPlacer(mines),
    )


def lay_mines(grid: Grid, positions) -> Grid:
    """Place mines on a bare grid and compute counts."""
    FixedPlacer(positions).place(grid, 0, grid.cell_at(0, 0))
    return grid


# ============================================================================
# Grid Fixtures
# ============================================================================

@pytest.fixture
def easy_grid() -> Grid:
    """Empty 9x9 grid."""
    return Grid(9, 9)


@pytest.fixture
def corner_mine_grid() -> Grid:
    """5x5 grid with a single mine in the bottom-right corner."""
    return lay_mines(Grid(5, 5), [(4, 4)])


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def easy_session() -> GameSession:
    """Seeded EASY session."""
    return GameSession(Difficulty.EASY.config, rng=random.Random(1234))


@pytest.fixture
def wall_session() -> GameSession:
    """
    5x5 session with mines down column 4.

    Revealing anywhere in columns 0-2 cascades to every safe cell.
    """
    return fixed_session(5, 5, [(row, 4) for row in range(5)])


@pytest.fixture
def three_count_session() -> GameSession:
    """
    5x5 session where (1, 1) touches exactly three mines.

    Mines sit at (0, 0), (0, 1) and (0, 2).
    """
    return fixed_session(5, 5, [(0, 0), (0, 1), (0, 2)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell(0, 0)


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(0, 0, is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell(2, 3, adjacent_mines=3)
    cell.reveal()
    return cell
