from .board import Board, MoveStatus, OutOfRangeError, Run
from .config import GameConfig, DEFAULT_CONFIG
from .move import Move

__all__ = [
    "Board",
    "MoveStatus",
    "OutOfRangeError",
    "Run",
    "GameConfig",
    "DEFAULT_CONFIG",
    "Move",
]
