"""
Base strategy class for the sticks game.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

import numpy as np

from ...core.board import Board
from ...core.move import Move


class UnknownStrategyError(ValueError):
    """Raised when a strategy is requested with an unrecognized type."""


class StrategyType(Enum):
    """The player types accepted on the command line."""
    RANDOM = 1
    HEURISTIC = 2
    SMART = 3
    HUMAN = 4

    @classmethod
    def from_value(cls, value: Any) -> StrategyType:
        """
        Resolve a strategy type from its number or name.

        Raises:
            UnknownStrategyError: If the value names no strategy
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise UnknownStrategyError(f"Unknown player type: {value!r}")
        if isinstance(value, str):
            name = value.strip().upper()
            if name in cls.__members__:
                return cls[name]
            try:
                value = int(name)
            except ValueError:
                raise UnknownStrategyError(f"Unknown player type: {value!r}") from None
        try:
            return cls(value)
        except ValueError:
            raise UnknownStrategyError(f"Unknown player type: {value!r}") from None

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


@dataclass
class StrategyInfo:
    """Metadata about a strategy for display and comparison."""
    id: str
    name: str
    short_desc: str   # One-line summary
    algorithm: str    # Technical description of the algorithm

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'short_desc': self.short_desc,
            'algorithm': self.algorithm,
        }


class Strategy(ABC):
    """
    Abstract base class for all move-producing strategies.

    A strategy reads the board and proposes a move. It never mutates the
    board and keeps no game history between calls; the caller applies the
    move and asks again if the board rejects it.
    """

    # Override this in subclasses
    INFO: StrategyInfo = StrategyInfo(
        id="base",
        name="Base Strategy",
        short_desc="Abstract base class",
        algorithm="Override this in subclasses",
    )

    def __init__(self, seed: Optional[int] = None):
        """Initialize strategy with optional random seed."""
        self.rng = np.random.default_rng(seed)
        self.move_explanations: List[str] = []

    @abstractmethod
    def produce_move(self, board: Board) -> Move:
        """
        Produce the next move for the given board.

        Args:
            board: Current board, read only

        Returns:
            The proposed move
        """
        pass

    def explain_last_move(self) -> str:
        """Get explanation for the last move made."""
        if self.move_explanations:
            return self.move_explanations[-1]
        return "No moves made yet"

    def reset(self):
        """Reset strategy state for a new round."""
        self.move_explanations = []

    @classmethod
    def get_info(cls) -> StrategyInfo:
        """Get strategy metadata."""
        return cls.INFO

    def _require_sticks(self, board: Board):
        if board.unmarked_count() == 0:
            raise ValueError("Cannot produce a move: no unmarked sticks left")

    def _explain(self, move: Move, reason: str) -> Move:
        self.move_explanations.append(f"{move}: {reason}")
        return move

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.INFO.id})"
