"""
The sticks variant of Nim: a board of rows, a move type, and the
strategies that play it.
"""
from .core import Board, GameConfig, Move, MoveStatus, OutOfRangeError
from .ai import Competition, Player

__all__ = [
    "Board",
    "GameConfig",
    "Move",
    "MoveStatus",
    "OutOfRangeError",
    "Competition",
    "Player",
]
