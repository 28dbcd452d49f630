"""
Unit tests for the gymnasium environment and the random agent.
"""
import numpy as np
import pytest
from minefield import BoardConfig, Difficulty, MinesweeperEnv

from agents import RandomAgent


@pytest.fixture
def env() -> MinesweeperEnv:
    return MinesweeperEnv(Difficulty.EASY)


class TestEnvironment:
    """Gymnasium interface."""

    def test_spaces_match_board(self, env: MinesweeperEnv) -> None:
        assert env.observation_space.shape == (9, 9)
        assert env.action_space.n == 81

    def test_reset_returns_hidden_board(self, env: MinesweeperEnv) -> None:
        obs, info = env.reset(seed=0)
        assert (obs == -1).all()
        assert info["game_state"] == "PENDING"
        assert info["total_safe"] == 71

    def test_first_step_is_safe(self, env: MinesweeperEnv) -> None:
        for seed in range(10):
            env.reset(seed=seed)
            _, reward, terminated, _, info = env.step(40)
            assert reward in (1.0, 10.0)
            assert info["game_state"] in ("ACTIVE", "WON")

    def test_repeat_step_is_penalized(self, env: MinesweeperEnv) -> None:
        env.reset(seed=1)
        env.step(40)
        _, reward, _, _, _ = env.step(40)
        assert reward == pytest.approx(-0.1)

    def test_seeded_resets_repeat_layout(self, env: MinesweeperEnv) -> None:
        layouts = []
        for _ in range(2):
            env.reset(seed=42)
            env.step(40)
            layouts.append({cell.position for cell in env.session.grid.mines()})
        assert layouts[0] == layouts[1]

    def test_action_mask_tracks_hidden_cells(self, env: MinesweeperEnv) -> None:
        env.reset(seed=3)
        assert env.get_action_mask().all()
        obs, *_ = env.step(40)
        mask = env.get_action_mask()
        np.testing.assert_array_equal(mask, obs.flatten() == -1)

    def test_accepts_plain_config(self) -> None:
        env = MinesweeperEnv(BoardConfig(4, 3, 2))
        assert env.observation_space.shape == (3, 4)

    def test_ansi_render(self) -> None:
        env = MinesweeperEnv(render_mode="ansi")
        env.reset(seed=0)
        assert env.render().splitlines()[0] == " ".join(["."] * 9)


class TestRandomAgent:
    """Baseline player."""

    def test_opens_in_center(self) -> None:
        agent = RandomAgent(9, 9, seed=0)
        obs = np.full((9, 9), -1, dtype=np.int8)
        assert agent.select_action(obs) == 40

    def test_only_picks_valid_actions(self) -> None:
        agent = RandomAgent(3, 3, seed=0, open_center=False)
        obs = np.zeros((3, 3), dtype=np.int8)
        obs[2, 1] = -1
        assert agent.select_action(obs) == 7

    @pytest.mark.parametrize("seed", range(5))
    def test_plays_to_the_end(self, seed: int) -> None:
        env = MinesweeperEnv(Difficulty.EASY)
        agent = RandomAgent(9, 9, seed=seed)
        result = agent.play_episode(env, seed=seed)
        assert env.session.is_over
        assert result.steps >= 1
        assert result.won == (env.session.phase.name == "WON")
