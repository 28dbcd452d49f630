"""
Minefield agents module.

Provides players that drive the game through `MinesweeperEnv`:
- RandomAgent: Baseline random selection
"""
from .base_agent import BaseAgent, EpisodeResult
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "EpisodeResult",
    "RandomAgent",
]
