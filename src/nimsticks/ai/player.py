"""
A player taking part in a competition.
"""
from typing import Optional

from ..core.board import Board
from ..core.move import Move
from .strategies import InputProvider, StrategyType, get_strategy


class Player:
    """
    A player id bound to the strategy of its type.

    Construction fails with UnknownStrategyError if the type is not one of
    the known strategies.
    """

    def __init__(
        self,
        player_type,
        player_id: int,
        input_provider: Optional[InputProvider] = None,
        seed: Optional[int] = None,
    ):
        self.player_type = StrategyType.from_value(player_type)
        self.player_id = player_id
        self.strategy = get_strategy(self.player_type, seed=seed, input_provider=input_provider)

    @property
    def type_name(self) -> str:
        return self.player_type.display_name

    @property
    def is_human(self) -> bool:
        return self.player_type is StrategyType.HUMAN

    def produce_move(self, board: Board) -> Move:
        return self.strategy.produce_move(board)

    def __repr__(self) -> str:
        return f"Player(id={self.player_id}, type={self.type_name})"
