from .player import Player
from .arena import Competition, CompetitionResult, RoundPhase, RoundResult, run_round_robin

__all__ = [
    "Player",
    "Competition",
    "CompetitionResult",
    "RoundPhase",
    "RoundResult",
    "run_round_robin",
]
