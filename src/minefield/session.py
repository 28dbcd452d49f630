"""
Game session module for Minefield.

Implements the per-game state machine: deferred mine placement on the
first reveal, cascading reveals, flag accounting, the elapsed-time
counter and win/lose detection.
"""
import logging
import random
import threading
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Union

import numpy as np

from .cell import Cell
from .config import BoardConfig, Difficulty
from .grid import Grid
from .placer import MinePlacer
from .reveal import reveal_from

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class Phase(Enum):
    """Lifecycle of a session. WON and LOST are terminal."""

    PENDING = auto()
    ACTIVE = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (Phase.WON, Phase.LOST)


@dataclass(frozen=True)
class CellSnapshot:
    """Read-only view of one cell for renderers."""

    row: int
    col: int
    is_revealed: bool
    is_flagged: bool
    is_mine: bool
    adjacent_mines: int

    @classmethod
    def of(cls, cell: Cell) -> "CellSnapshot":
        return cls(
            row=cell.row,
            col=cell.col,
            is_revealed=cell.is_revealed,
            is_flagged=cell.is_flagged,
            is_mine=cell.is_mine,
            adjacent_mines=cell.adjacent_mines,
        )


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    One playthrough, from an untouched grid to a win or a loss.

    Coordinates passed to the actions must already be inside the grid;
    anything else raises `OutOfBoundsError`. Actions that the current
    phase does not allow are ignored.
    """

    def __init__(
        self,
        config: BoardConfig,
        rng: Optional[random.Random] = None,
        placer: Optional[MinePlacer] = None,
    ) -> None:
        """
        Create a fresh session.

        Args:
            config: Board dimensions and mine count.
            rng: Random source for mine placement.
            placer: Mine placer to use instead of a random one.
        """
        self.config = config
        self.grid = Grid(config.height, config.width)
        self._placer = placer or MinePlacer(rng)
        self._lock = threading.RLock()
        self._phase = Phase.PENDING
        self._flags_remaining = config.num_mines
        self._elapsed_seconds = 0
        self._final_cell: Optional[Cell] = None

    # ========================================================================
    # State Transitions
    # ========================================================================

    def start_with(self, row: int, col: int) -> None:
        """
        Lay out the mines around the first target and start the clock.

        Only valid while PENDING; ignored otherwise.
        """
        with self._lock:
            target = self.grid.cell_at(row, col)
            if self._phase != Phase.PENDING:
                logger.debug("Ignoring start_with in phase %s", self._phase.name)
                return
            self._placer.place(self.grid, self.config.num_mines, target)
            self._elapsed_seconds = 0
            self._phase = Phase.ACTIVE
            logger.info("Game started at (%d, %d)", row, col)

    def reveal_action(self, row: int, col: int) -> List[Cell]:
        """
        Reveal a cell (primary action).

        On first reveal, places mines avoiding this cell and its neighbors.
        A mine loses the game and exposes every mine. Anything else reveals
        the cascade from this cell, clearing flags it covers, then checks
        for a win.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Cells newly revealed by this action; empty if it was ignored.
        """
        with self._lock:
            target = self.grid.cell_at(row, col)
            if self._phase.is_terminal or target.is_revealed:
                logger.debug(
                    "Ignoring reveal at (%d, %d) in phase %s",
                    row, col, self._phase.name,
                )
                return []

            if self._phase == Phase.PENDING:
                self.start_with(row, col)

            if target.is_mine:
                return self._lose(target)

            newly_revealed = self._apply_reveals(reveal_from(self.grid, target))

            if self.grid.all_safe_revealed():
                self._finish(Phase.WON, target)

            return newly_revealed

    def flag_action(self, row: int, col: int) -> bool:
        """
        Toggle the flag on a hidden cell (secondary action).

        Allowed before the first reveal. The remaining-flag counter is not
        clamped and goes negative when the player over-flags.

        Returns:
            True if a flag was placed or removed.
        """
        with self._lock:
            target = self.grid.cell_at(row, col)
            if self._phase.is_terminal or target.is_revealed:
                logger.debug(
                    "Ignoring flag at (%d, %d) in phase %s",
                    row, col, self._phase.name,
                )
                return False

            target.toggle_flag()
            if target.is_flagged:
                self._flags_remaining -= 1
            else:
                self._flags_remaining += 1
            return True

    def tick(self) -> None:
        """Advance the timer by one second while ACTIVE."""
        with self._lock:
            if self._phase != Phase.ACTIVE:
                logger.debug("Ignoring tick in phase %s", self._phase.name)
                return
            self._elapsed_seconds += 1

    # ========================================================================
    # Internal Helpers
    # ========================================================================

    def _apply_reveals(self, cells) -> List[Cell]:
        """Turn cells face up, returning any flags they carried."""
        newly_revealed = []
        for cell in cells:
            if cell.is_revealed:
                continue
            if cell.reveal():
                self._flags_remaining += 1
            newly_revealed.append(cell)
        return newly_revealed

    def _lose(self, target: Cell) -> List[Cell]:
        """Expose every mine and end the game."""
        newly_revealed = self._apply_reveals(self.grid.mines())
        self._finish(Phase.LOST, target)
        return newly_revealed

    def _finish(self, phase: Phase, target: Cell) -> None:
        self._phase = phase
        self._final_cell = target
        logger.info(
            "Game %s after %d seconds", phase.name.lower(), self._elapsed_seconds
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def phase(self) -> Phase:
        """Get current phase."""
        return self._phase

    @property
    def mine_count(self) -> int:
        return self.config.num_mines

    @property
    def flags_remaining(self) -> int:
        """Mines minus flagged cells; may be negative."""
        return self._flags_remaining

    @property
    def elapsed_seconds(self) -> int:
        return self._elapsed_seconds

    @property
    def final_cell(self) -> Optional[Cell]:
        """The cell whose reveal ended the game, if it has ended."""
        return self._final_cell

    @property
    def is_over(self) -> bool:
        return self._phase.is_terminal

    @property
    def timer_running(self) -> bool:
        return self._phase == Phase.ACTIVE

    def snapshot(self) -> List[CellSnapshot]:
        """Row-major snapshot of every cell."""
        with self._lock:
            return [CellSnapshot.of(cell) for cell in self.grid]

    def cell_snapshot(self, row: int, col: int) -> CellSnapshot:
        return CellSnapshot.of(self.grid.cell_at(row, col))

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.grid.rows, self.grid.cols), dtype=np.int8)
        for cell in self.grid:
            obs[cell.row, cell.col] = cell.to_observation()
        return obs

    def hidden_positions(self) -> List[tuple]:
        """Positions that can still be revealed."""
        return [cell.position for cell in self.grid if not cell.is_revealed]


# ============================================================================
# Session Factory
# ============================================================================

def create_session(
    difficulty: Union[Difficulty, str],
    rng: Optional[random.Random] = None,
) -> GameSession:
    """
    Build a new session for one of the difficulty presets.

    Args:
        difficulty: A `Difficulty` or its name ("easy", "medium", "hard").
        rng: Random source for mine placement.
    """
    if isinstance(difficulty, str):
        difficulty = Difficulty.from_name(difficulty)
    return GameSession(difficulty.config, rng=rng)


class GameController:
    """
    Holds the single live session and replaces it on each new game.

    Nothing carries over between sessions; the new one starts with a
    zeroed timer and a full flag count.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng
        self.difficulty: Optional[Difficulty] = None
        self.session: Optional[GameSession] = None

    def new_game(self, difficulty: Union[Difficulty, str]) -> GameSession:
        """Discard the current session and start another."""
        if isinstance(difficulty, str):
            difficulty = Difficulty.from_name(difficulty)
        self.difficulty = difficulty
        self.session = create_session(difficulty, rng=self._rng)
        logger.info(
            "New %s game: %dx%d with %d mines",
            difficulty.name.lower(),
            difficulty.config.height,
            difficulty.config.width,
            difficulty.config.num_mines,
        )
        return self.session

    def restart(self) -> GameSession:
        """Start over with the same difficulty (EASY if none chosen yet)."""
        return self.new_game(self.difficulty or Difficulty.EASY)
