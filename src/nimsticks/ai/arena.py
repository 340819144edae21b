"""
Competition between two players, and round-robin tournaments between
strategies.

A round runs as a small state machine: the active player is asked for a
move until the board accepts one, then the turn passes to the other
player. The round is over as soon as the last stick is marked.
"""
from dataclasses import dataclass, field, asdict
from enum import Enum
from itertools import combinations
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..core.board import Board
from ..core.config import DEFAULT_CONFIG, GameConfig
from ..core.move import Move
from .player import Player
from .strategies import StrategyType


class RoundPhase(Enum):
    AWAITING_MOVE = "awaiting_move"
    ROUND_OVER = "round_over"


@dataclass
class RoundResult:
    """Result of a single round."""
    winner: int
    last_mover: int
    moves: List[Move] = field(default_factory=list)
    rejected_moves: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'winner': self.winner,
            'last_mover': self.last_mover,
            'moves': [str(m) for m in self.moves],
            'rejected_moves': self.rejected_moves,
        }


@dataclass
class CompetitionResult:
    """Result of a series of rounds between two players."""
    score1: int
    score2: int
    rounds: List[RoundResult] = field(default_factory=list)

    @property
    def rounds_played(self) -> int:
        return len(self.rounds)

    @property
    def winner_id(self) -> Optional[int]:
        if self.score1 > self.score2:
            return 1
        elif self.score2 > self.score1:
            return 2
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score1': self.score1,
            'score2': self.score2,
            'rounds_played': self.rounds_played,
            'winner_id': self.winner_id,
        }


class Competition:
    """
    Plays rounds between two players and keeps count of their victories.
    """

    def __init__(
        self,
        player1: Player,
        player2: Player,
        display_messages: bool = False,
        config: Optional[GameConfig] = None,
        output_fn: Callable[[str], None] = print,
    ):
        self.player1 = player1
        self.player2 = player2
        self.display_messages = display_messages
        self.config = config or DEFAULT_CONFIG
        self.output_fn = output_fn

        self.score1 = 0
        self.score2 = 0
        self.board: Optional[Board] = None

    def get_player_score(self, player_position: int) -> int:
        """Return the number of victories of the player at position 1 or 2."""
        if player_position == 1:
            return self.score1
        if player_position == 2:
            return self.score2
        raise ValueError(f"Player position must be 1 or 2, got {player_position}")

    def play_multiple_rounds(self, number_of_rounds: int) -> CompetitionResult:
        """Run the given number of rounds and report the scores."""
        if number_of_rounds < 0:
            raise ValueError(f"Number of rounds cannot be negative: {number_of_rounds}")

        rounds = [self.play_round() for _ in range(number_of_rounds)]

        # Scores of this call only; get_player_score keeps the running total
        score1 = sum(1 for r in rounds if r.winner == self.player1.player_id)
        return CompetitionResult(score1=score1, score2=len(rounds) - score1, rounds=rounds)

    def play_round(self) -> RoundResult:
        """Play one round on a fresh board and record the winner."""
        self.board = Board(self.config.row_lengths)
        for player in (self.player1, self.player2):
            player.strategy.reset()

        self._message("Welcome to the sticks game!")

        phase = RoundPhase.AWAITING_MOVE
        active, waiting = self.player1, self.player2
        moves: List[Move] = []
        rejected = 0

        while phase is RoundPhase.AWAITING_MOVE:
            self._message(f"Player {active.player_id}, it is now your turn!")
            move = active.produce_move(self.board)
            while not self.board.apply_move(move).accepted:
                rejected += 1
                self._message("Invalid move. Enter another:")
                move = active.produce_move(self.board)

            moves.append(move)
            self._message(f"Player {active.player_id} made the move: {move}")

            if self.board.unmarked_count() == 0:
                phase = RoundPhase.ROUND_OVER
            else:
                active, waiting = waiting, active

        last_mover = active
        winner = waiting if self.config.last_stick_loses else active

        self._message(f"Player {winner.player_id} won!")
        if winner is self.player1:
            self.score1 += 1
        else:
            self.score2 += 1

        return RoundResult(
            winner=winner.player_id,
            last_mover=last_mover.player_id,
            moves=moves,
            rejected_moves=rejected,
        )

    def _message(self, text: str):
        if self.display_messages:
            self.output_fn(text)


@dataclass
class StrategyStats:
    """Accumulated statistics for a strategy across a tournament."""
    strategy: str
    rounds_played: int = 0
    wins: int = 0
    losses: int = 0

    @property
    def win_rate(self) -> float:
        return self.wins / self.rounds_played if self.rounds_played else 0

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d['win_rate'] = self.win_rate
        return d


def run_round_robin(
    strategy_types: Sequence[StrategyType],
    rounds_per_match: int = 100,
    seed: Optional[int] = None,
    config: Optional[GameConfig] = None,
) -> Dict[str, StrategyStats]:
    """
    Play every pair of strategies against each other, both seatings.

    Args:
        strategy_types: Computer strategies to compare
        rounds_per_match: Rounds for each seating of each pair
        seed: Base seed for the random strategy
        config: Board layout and last-stick convention

    Returns:
        Stats keyed by lower-case strategy name
    """
    stats = {t.name.lower(): StrategyStats(strategy=t.name.lower()) for t in strategy_types}

    for offset, (first, second) in enumerate(combinations(strategy_types, 2)):
        for seating in ((first, second), (second, first)):
            match_seed = None if seed is None else seed + offset
            player1 = Player(seating[0], 1, seed=match_seed)
            player2 = Player(seating[1], 2, seed=None if match_seed is None else match_seed + 1)
            result = Competition(player1, player2, config=config).play_multiple_rounds(rounds_per_match)

            for player, wins in ((player1, result.score1), (player2, result.score2)):
                entry = stats[player.player_type.name.lower()]
                entry.rounds_played += rounds_per_match
                entry.wins += wins
                entry.losses += rounds_per_match - wins

    return stats
