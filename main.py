#!/usr/bin/env python3
"""
Minesweeper - command-line entry point.

Usage:
    python main.py stats [--mode {easy,medium,hard,custom}] [--stats-file PATH]
    python main.py demo [--mode MODE] [--games N] [--seed S] [--stats-file PATH]
"""
import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Optional

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))

from game import GameMode, GameSession, ModeId
from game.autoplay import RandomPlayer, play_game
from scoreboard import ModeStats, StatsStore


def format_stats_row(title: str, stats: ModeStats) -> str:
    """Format one aggregate as a table row."""
    best = f"{stats.best_time_seconds}s" if stats.best_time_seconds is not None else "-"
    return (
        f"{title:<10} {stats.games_played:>7} {stats.games_won:>6} "
        f"{stats.success_rate:>8.1%} {stats.average_time_seconds:>9.1f}s {best:>7}"
    )


def print_stats(store: StatsStore, mode: Optional[str] = None) -> None:
    """Print per-mode and overall aggregates."""
    mode_ids = [ModeId(mode)] if mode else list(ModeId)

    print(f"Stats file: {store.path}")
    print(f"{'Mode':<10} {'Played':>7} {'Won':>6} {'Win Rate':>8} {'Avg Time':>10} {'Best':>7}")
    print("-" * 53)
    for mode_id in mode_ids:
        print(format_stats_row(mode_id.display_name, store.stats(mode_id)))
    print("-" * 53)
    print(format_stats_row("Overall", store.overall_stats))


def stats(args: argparse.Namespace) -> None:
    """Show stored statistics."""
    store = StatsStore(args.stats_file)
    print_stats(store, args.mode)


def demo(args: argparse.Namespace) -> None:
    """Play games with a random player and record them."""
    store = StatsStore(args.stats_file)
    mode = GameMode.from_id(ModeId(args.mode))
    session = GameSession(mode, store, rng=random.Random(args.seed))
    player = RandomPlayer(args.seed)

    print(f"Playing {args.games} {mode.title} games "
          f"({mode.config.rows}x{mode.config.cols}, {mode.config.mines} mines)...")

    wins = 0
    for game in range(args.games):
        if game > 0:
            session.start_new_game()
        moves = play_game(session, player)
        if session.is_won:
            wins += 1
        print(f"Game {game + 1}: {session.result_title} "
              f"({moves} moves, {session.elapsed_seconds}s)")

    print(f"\nWins: {wins}/{args.games}\n")
    print_stats(store, args.mode)


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - inspect statistics and run demo games"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    mode_choices = [mode_id.value for mode_id in ModeId]

    # Stats command
    stats_parser = subparsers.add_parser("stats", help="Show recorded statistics")
    stats_parser.add_argument(
        "--mode", choices=mode_choices, default=None, help="Only show this mode"
    )
    stats_parser.add_argument(
        "--stats-file", type=Path, default=None, help="Stats file to read"
    )

    # Demo command
    demo_parser = subparsers.add_parser(
        "demo", help="Play games with a random player and record them"
    )
    demo_parser.add_argument(
        "--mode", choices=mode_choices, default=ModeId.EASY.value, help="Mode to play"
    )
    demo_parser.add_argument(
        "--games", type=int, default=10, help="Number of games to play"
    )
    demo_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for reproducibility"
    )
    demo_parser.add_argument(
        "--stats-file", type=Path, default=None, help="Stats file to update"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "stats":
        stats(args)
    elif args.command == "demo":
        demo(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
