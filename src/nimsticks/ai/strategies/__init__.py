"""
Strategy implementations for the sticks game.

Each strategy reads a board and proposes a move; the board alone decides
whether the move is legal.
"""
from .base import Strategy, StrategyInfo, StrategyType, UnknownStrategyError
from .human_strategy import ConsoleInputProvider, InputProvider, ScriptedInputProvider
from .registry import STRATEGIES, COMPUTER_STRATEGIES, get_strategy, list_strategies

__all__ = [
    'Strategy',
    'StrategyInfo',
    'StrategyType',
    'UnknownStrategyError',
    'InputProvider',
    'ConsoleInputProvider',
    'ScriptedInputProvider',
    'STRATEGIES',
    'COMPUTER_STRATEGIES',
    'get_strategy',
    'list_strategies',
]
