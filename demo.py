#!/usr/bin/env python3
"""Watch random moves play Minesweeper."""
import argparse
import logging
import os
import random
import time

from sweeper import DIFFICULTIES, load, render_ansi, restart, reveal, toggle_flag


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def show_tween(prev_id: str, next_id: str, delay: float, rng: random.Random):
    """Show the boards produced while switching difficulty."""
    for frame, snapshot in enumerate(load(next_id, prev_id, rng=rng)):
        clear_screen()
        print(f"=== {prev_id} -> {next_id} | Frame {frame + 1} ===")
        print(f"{snapshot.columns}x{snapshot.rows}, {snapshot.bombs_count} bombs\n")
        print(render_ansi(snapshot))
        time.sleep(delay / 4)


def demo(difficulty: str = "beginner", delay: float = 0.3, games: int = 5,
         flag_odds: float = 0.1, seed: int = None):
    """Run demo games with visualization."""
    rng = random.Random(seed)
    settings = DIFFICULTIES[difficulty]
    print(f"Board: {settings.columns}x{settings.rows} with "
          f"{settings.bombs_count} bombs ({100 * settings.bomb_odds:.1f}% density)")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        snapshot = restart(difficulty, rng=rng)

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(render_ansi(snapshot))
        time.sleep(delay)

        while snapshot.is_playable:
            candidates = [
                (row, col)
                for row in range(snapshot.rows)
                for col in range(snapshot.columns)
                if not snapshot.board[row][col].is_resolved
            ]
            row, col = rng.choice(candidates)
            if snapshot.moves_count and rng.random() < flag_odds:
                snapshot = toggle_flag(snapshot, row, col)
                action = "Flag"
            else:
                snapshot = reveal(snapshot, row, col, rng=rng)
                action = "Reveal"

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Move {snapshot.moves_count} ===")
            print(f"Wins so far: {wins} | Flags: {snapshot.flags_count}")
            print(f"Last action: {action} ({row}, {col})\n")
            print(render_ansi(snapshot))

            if snapshot.is_won:
                wins += 1
                print(f"\n*** WIN in {snapshot.finished_at - snapshot.started_at:.1f}s! ***")
            elif snapshot.is_lost:
                print(f"\n*** LOST (hit bomb) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--difficulty", choices=sorted(DIFFICULTIES), default="beginner",
                        help="Difficulty to play")
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--flag-odds", type=float, default=0.1,
                        help="Chance of flagging instead of revealing")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--tween-from", choices=sorted(DIFFICULTIES), default=None,
                        help="Show the difficulty switch from this difficulty first")
    parser.add_argument("--verbose", action="store_true", help="Log game events")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.tween_from:
        show_tween(args.tween_from, args.difficulty, args.delay, random.Random(args.seed))

    demo(difficulty=args.difficulty, delay=args.delay, games=args.games,
         flag_odds=args.flag_odds, seed=args.seed)
