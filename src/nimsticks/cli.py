"""
Command-line entry point: run a competition between two player types.

Usage:
    nimsticks P1_TYPE P2_TYPE ROUNDS [--seed N]

Player types: 1 Random, 2 Heuristic, 3 Smart, 4 Human.
"""
import argparse
from typing import List, Optional

from .ai.arena import Competition
from .ai.player import Player
from .ai.strategies import ConsoleInputProvider, StrategyType, UnknownStrategyError


def _player_type(value: str) -> StrategyType:
    try:
        return StrategyType.from_value(value)
    except UnknownStrategyError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nimsticks",
        description="Run a Nim competition between two players.",
    )
    types = ", ".join(f"{t.value}={t.display_name}" for t in StrategyType)
    parser.add_argument("player1", type=_player_type, help=f"type of player 1 ({types})")
    parser.add_argument("player2", type=_player_type, help=f"type of player 2 ({types})")
    parser.add_argument("rounds", type=int, help="number of rounds to play")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random strategy")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.rounds < 0:
        parser.error("rounds must not be negative")

    provider = ConsoleInputProvider()
    player1 = Player(args.player1, 1, input_provider=provider, seed=args.seed)
    player2 = Player(
        args.player2, 2, input_provider=provider,
        seed=None if args.seed is None else args.seed + 1,
    )

    # Per-move messages are only useful when a person is playing
    display_messages = player1.is_human or player2.is_human
    competition = Competition(player1, player2, display_messages=display_messages)

    print(f"Starting a Nim competition of {args.rounds} rounds between a "
          f"{player1.type_name} player and a {player2.type_name} player.")
    result = competition.play_multiple_rounds(args.rounds)
    print(f"The results are {result.score1}:{result.score2}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
