"""
Minefield game module.

Provides the game engine (grid, mine placement, cascading reveal and the
session state machine) plus thin adapters for front-ends.
"""
from .cell import Cell, CellState
from .config import BoardConfig, Difficulty
from .errors import MinefieldError, OutOfBoundsError, PlacementExhaustionError
from .grid import Grid
from .placer import MinePlacer
from .reveal import reveal_from
from .session import (
    CellSnapshot,
    GameController,
    GameSession,
    Phase,
    create_session,
)
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "BoardConfig",
    "Difficulty",
    "MinefieldError",
    "OutOfBoundsError",
    "PlacementExhaustionError",
    "Grid",
    "MinePlacer",
    "reveal_from",
    "CellSnapshot",
    "GameController",
    "GameSession",
    "Phase",
    "create_session",
    "MinesweeperEnv",
]
