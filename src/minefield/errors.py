"""
Exceptions raised by the Minefield engine.

Invalid phase transitions are not errors: the session ignores them.
"""


class MinefieldError(Exception):
    """Base class for engine errors."""


class OutOfBoundsError(MinefieldError, IndexError):
    """A coordinate outside the grid reached the engine."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside the {rows}x{cols} grid"
        )
        self.row = row
        self.col = col


class PlacementExhaustionError(MinefieldError):
    """Not enough eligible cells to hold the requested mines."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            f"Cannot place {requested} mines: only {available} eligible cells"
        )
        self.requested = requested
        self.available = available
