"""
Board configuration and difficulty presets.
"""
from dataclasses import dataclass
from enum import Enum


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minefield board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.num_mines


# ============================================================================
# Difficulty Presets
# ============================================================================

class Difficulty(Enum):
    """The three fixed difficulty levels."""

    EASY = BoardConfig(width=9, height=9, num_mines=10)
    MEDIUM = BoardConfig(width=16, height=16, num_mines=40)
    HARD = BoardConfig(width=22, height=22, num_mines=99)

    @property
    def config(self) -> BoardConfig:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        """
        Look up a preset by case-insensitive name.

        Raises:
            ValueError: If the name is not one of easy, medium, hard.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(level.name.lower() for level in cls)
            raise ValueError(
                f"Unknown difficulty {name!r} (choose from {choices})"
            ) from None
