#!/usr/bin/env python3
"""Watch the random agent play Minefield."""
import time
import os

from src.minefield import Difficulty, MinesweeperEnv
from src.agents import RandomAgent


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, difficulty: str = "easy"):
    """Run demo games with visualization."""
    level = Difficulty.from_name(difficulty)
    env = MinesweeperEnv(level, render_mode="ansi")
    agent = RandomAgent(level.config.height, level.config.width)

    wins = 0
    for game in range(games):
        def show(action, info, game=game):
            row, col = agent.action_to_position(action)
            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {info['steps']} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({row}, {col})\n")
            print(env.render())
            time.sleep(delay)

        result = agent.play_episode(env, on_step=show)
        if result.won:
            wins += 1
            print("\n*** WIN! ***")
        else:
            print("\n*** LOST (hit mine) ***")
        time.sleep(1.0)

    print(f"\n=== Final: {wins}/{games} wins ({100 * wins / games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--difficulty", choices=["easy", "medium", "hard"], default="easy")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, difficulty=args.difficulty)
