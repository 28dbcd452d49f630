"""
Random agent for Minefield.

Serves as a baseline by revealing random hidden cells.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that reveals hidden cells uniformly at random.

    The opening move is always safe, so with `open_center` the agent
    starts in the middle of the board where the cleared region is largest.
    """

    def __init__(
        self,
        board_height: int = 9,
        board_width: int = 9,
        seed: Optional[int] = None,
        open_center: bool = True,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
            seed: Random seed for reproducibility.
            open_center: Make the first reveal at the center cell.
        """
        super().__init__(board_height, board_width)
        self.rng = np.random.default_rng(seed)
        self.open_center = open_center

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random revealable cell.

        Returns:
            Action index; 0 if nothing is left to reveal.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        if self.open_center and (observation == -1).all():
            return self.position_to_action(
                self.board_height // 2, self.board_width // 2
            )

        valid_indices = np.flatnonzero(valid_actions)
        if len(valid_indices) == 0:
            return 0

        return int(self.rng.choice(valid_indices))
