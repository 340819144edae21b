"""
Benchmark the computer strategies against each other.
"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from nimsticks.ai.arena import run_round_robin
from nimsticks.ai.strategies import COMPUTER_STRATEGIES
import numpy as np


def benchmark(rounds_per_match=200, seed=0):
    """Round-robin all computer strategies and print a table."""
    print(f"Benchmarking {len(COMPUTER_STRATEGIES)} strategies, "
          f"{rounds_per_match} rounds per seating...\n")

    stats = run_round_robin(COMPUTER_STRATEGIES, rounds_per_match=rounds_per_match, seed=seed)

    sorted_results = sorted(stats.values(), key=lambda s: s.win_rate, reverse=True)

    print(f"{'Strategy':<12} {'Rounds':>8} {'Wins':>8} {'Losses':>8} {'Win %':>8}")
    print("=" * 48)

    for entry in sorted_results:
        print(f"{entry.strategy:<12} {entry.rounds_played:>8} {entry.wins:>8} "
              f"{entry.losses:>8} {entry.win_rate * 100:>7.1f}%")

    print(f"\nMean win rate: {np.mean([s.win_rate for s in sorted_results]) * 100:.1f}%")
    return sorted_results


if __name__ == "__main__":
    benchmark()
