#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--difficulty {easy,medium,hard}] [--seed N]
    python main.py evaluate [--difficulty ...] [--games N]
"""
import argparse
import logging
import random

from src.minefield import (
    Difficulty,
    GameController,
    MinesweeperEnv,
    Phase,
)
from src.minefield.controls import SecondClock, parse_command
from src.minefield.render import render_board, render_status
from src.agents import RandomAgent

HELP_TEXT = """Commands:
  r <row> <col>    reveal a cell
  f <row> <col>    toggle a flag
  new [level]      start over (easy, medium, hard)
  q                quit"""


def play(args: argparse.Namespace) -> None:
    """Play interactively in the terminal."""
    rng = random.Random(args.seed) if args.seed is not None else None
    controller = GameController(rng=rng)
    clock = SecondClock()
    session = controller.new_game(args.difficulty)
    clock.bind(session)

    print(HELP_TEXT)
    while True:
        clock.poll()
        print()
        print(render_board(session))
        print(render_status(session))

        try:
            line = input("> ").strip()
        except EOFError:
            break
        clock.poll()

        if not line:
            continue
        if line in ("q", "quit"):
            break
        if line.split()[0] == "new":
            parts = line.split()
            try:
                if len(parts) > 1:
                    session = controller.new_game(parts[1])
                else:
                    session = controller.restart()
            except ValueError as error:
                print(error)
                continue
            clock.bind(session)
            continue
        if session.phase in (Phase.WON, Phase.LOST):
            print("Game over. Type 'new' to play again.")
            continue

        try:
            move = parse_command(line, session.grid.rows, session.grid.cols)
            move.apply(session)
        except ValueError as error:
            print(error)


def evaluate(args: argparse.Namespace) -> None:
    """Let the random agent play a batch of games and report results."""
    difficulty = Difficulty.from_name(args.difficulty)
    env = MinesweeperEnv(difficulty)
    agent = RandomAgent(
        difficulty.config.height, difficulty.config.width, seed=args.seed
    )

    results = [
        agent.play_episode(env, seed=None if args.seed is None else args.seed + i)
        for i in range(args.games)
    ]
    wins = sum(1 for result in results if result.won)
    avg_steps = sum(result.steps for result in results) / len(results)
    avg_revealed = sum(result.revealed for result in results) / len(results)

    print(f"Results for Random on {difficulty.name.lower()}:")
    print(f"  Win rate: {wins / len(results):.1%}")
    print(f"  Avg steps: {avg_steps:.1f}")
    print(f"  Avg revealed: {avg_revealed:.1f} of {difficulty.config.safe_cells} cells")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minefield - a mine-clearing puzzle")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    levels = [level.name.lower() for level in Difficulty]

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--difficulty", choices=levels, default="easy")
    play_parser.add_argument("--seed", type=int, default=None, help="Mine layout seed")

    eval_parser = subparsers.add_parser("evaluate", help="Run the random agent")
    eval_parser.add_argument("--difficulty", choices=levels, default="easy")
    eval_parser.add_argument("--games", type=int, default=100, help="Number of games to play")
    eval_parser.add_argument("--seed", type=int, default=None)

    args = parser.parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.command == "play":
        play(args)
    elif args.command == "evaluate":
        evaluate(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
