"""
Base agent interface for Minefield players.

Agents play through `MinesweeperEnv`, choosing which cell to reveal from
the observation alone.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import numpy as np


# ============================================================================
# Episode Results
# ============================================================================

@dataclass
class EpisodeResult:
    """Outcome of one played game."""

    won: bool
    steps: int
    revealed: int
    total_reward: float


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for agents.

    Subclasses implement `select_action` to pick the next cell to reveal.
    """

    def __init__(self, board_height: int, board_width: int) -> None:
        """
        Initialize the agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
        """
        self.board_height = board_height
        self.board_width = board_width

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a cell to reveal.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of revealable cells.

        Returns:
            Action index (row * width + col).
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return action // self.board_width, action % self.board_width

    def position_to_action(self, row: int, col: int) -> int:
        """Convert (row, col) position to flat action index."""
        return row * self.board_width + col

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """Hidden and flagged cells (values -1 and -2) can be revealed."""
        return observation.flatten() < 0

    def reset(self) -> None:
        """Reset agent state for a new game."""

    def play_episode(
        self,
        env,
        seed: Optional[int] = None,
        on_step: Optional[Callable[[int, dict], None]] = None,
    ) -> EpisodeResult:
        """
        Play one full game in `env`.

        Args:
            env: A `MinesweeperEnv`.
            seed: Seed for the game's mine layout.
            on_step: Called with the action and info after every step.
        """
        obs, info = env.reset(seed=seed)
        self.reset()
        total_reward = 0.0
        done = False

        while not done:
            action = self.select_action(obs, env.get_action_mask())
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += float(reward)
            done = terminated or truncated
            if on_step is not None:
                on_step(action, info)

        return EpisodeResult(
            won=info["game_state"] == "WON",
            steps=info["steps"],
            revealed=info["revealed"],
            total_reward=total_reward,
        )
