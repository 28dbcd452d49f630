"""
Gymnasium environment wrapper for Minefield.

Drives a `GameSession` through a standard RL interface so agents can
play the game headless.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .config import BoardConfig, Difficulty
from .render import render_board
from .session import GameSession, Phase


# ============================================================================
# Minefield Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment over a single game session.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size width * height.
        Action i reveals the cell at (i // width, i % width).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[Union[BoardConfig, Difficulty]] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration or preset (default: EASY).
            render_mode: How to render the environment.
        """
        super().__init__()

        if isinstance(config, Difficulty):
            config = config.config
        self.config = config or Difficulty.EASY.config
        self.render_mode = render_mode
        self._rng = random.Random()
        self.session = GameSession(self.config, rng=self._rng)

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(
            self.config.height * self.config.width
        )

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a brand-new session.

        Args:
            seed: Seed for mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self._rng.seed(seed)
        self.session = GameSession(self.config, rng=self._rng)
        self._steps = 0

        return self.session.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal one cell.

        Args:
            action: Cell index to reveal (row * width + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(int(action))
        self._steps += 1

        reward = self._calculate_reward(row, col)

        observation = self.session.get_observation()
        terminated = self.session.is_over
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return action // self.config.width, action % self.config.width

    def _calculate_reward(self, row: int, col: int) -> float:
        """Perform the reveal and score its outcome."""
        if not self.session.reveal_action(row, col):
            return -0.1
        if self.session.phase == Phase.WON:
            return 10.0
        if self.session.phase == Phase.LOST:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        revealed = sum(1 for cell in self.session.grid if cell.is_revealed)
        return {
            "steps": self._steps,
            "revealed": revealed,
            "total_safe": self.config.safe_cells,
            "game_state": self.session.phase.name,
            "flags_remaining": self.session.flags_remaining,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.session, show_axes=False)
        if self.render_mode == "human":
            print(render_board(self.session))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = cell can still be revealed.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.session.is_over:
            return mask
        for row, col in self.session.hidden_positions():
            mask[row * self.config.width + col] = True
        return mask
