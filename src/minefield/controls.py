"""
Input translation for front-ends.

Turns raw player input into in-bounds grid positions and action kinds,
and converts wall-clock time into whole timer ticks.
"""
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from .session import GameSession


# ============================================================================
# Actions
# ============================================================================

class Action(Enum):
    """What a click does: primary button reveals, secondary flags."""

    REVEAL = "reveal"
    FLAG = "flag"

    @classmethod
    def from_button(cls, button: int) -> "Action":
        """Map a mouse button number (0 = primary) to an action."""
        return cls.REVEAL if button == 0 else cls.FLAG


@dataclass(frozen=True)
class Move:
    """A translated input event ready for the session."""

    row: int
    col: int
    action: Action

    def apply(self, session: GameSession):
        if self.action == Action.REVEAL:
            return session.reveal_action(self.row, self.col)
        return session.flag_action(self.row, self.col)


def clamp_position(
    row: int, col: int, rows: int, cols: int
) -> Tuple[int, int]:
    """Clamp a position to the nearest cell inside a rows x cols grid."""
    row = min(max(row, 0), rows - 1)
    col = min(max(col, 0), cols - 1)
    return row, col


def pixel_to_position(
    x: float, y: float, tile_size: float, rows: int, cols: int
) -> Tuple[int, int]:
    """
    Translate pointer coordinates into a grid position.

    Pointer events may land outside the board (for instance when the
    pointer leaves it), so the result is clamped.
    """
    row = int(y // tile_size)
    col = int(x // tile_size)
    return clamp_position(row, col, rows, cols)


# ============================================================================
# Text Commands
# ============================================================================

_ACTION_ALIASES = {
    "r": Action.REVEAL,
    "reveal": Action.REVEAL,
    "f": Action.FLAG,
    "flag": Action.FLAG,
}


def parse_command(text: str, rows: int, cols: int) -> Move:
    """
    Parse a text command such as ``r 4 4`` or ``flag 0 8``.

    Out-of-range coordinates are clamped onto the board.

    Raises:
        ValueError: If the command is malformed.
    """
    parts = text.split()
    if len(parts) != 3:
        raise ValueError("Expected: <r|f> <row> <col>")
    verb, row_text, col_text = parts
    action = _ACTION_ALIASES.get(verb.lower())
    if action is None:
        raise ValueError(f"Unknown action {verb!r}")
    try:
        row, col = int(row_text), int(col_text)
    except ValueError:
        raise ValueError("Row and column must be integers") from None
    row, col = clamp_position(row, col, rows, cols)
    return Move(row, col, action)


# ============================================================================
# Clock
# ============================================================================

class SecondClock:
    """
    Delivers one `tick()` per elapsed wall-clock second.

    Ticks are only delivered while the session's timer is running, and
    the clock restarts from zero whenever it is bound to a new session.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._session: Optional[GameSession] = None
        self._started_at: Optional[float] = None
        self._delivered = 0

    def bind(self, session: GameSession) -> None:
        self._session = session
        self._started_at = None
        self._delivered = 0

    def poll(self) -> int:
        """
        Deliver any ticks owed since the session went active.

        Returns:
            Number of ticks delivered by this call.
        """
        session = self._session
        if session is None or not session.timer_running:
            return 0
        now = self._clock()
        if self._started_at is None:
            self._started_at = now
            return 0
        owed = int(now - self._started_at) - self._delivered
        for _ in range(owed):
            session.tick()
        self._delivered += max(owed, 0)
        return max(owed, 0)
