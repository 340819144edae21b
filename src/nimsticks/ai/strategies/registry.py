"""
Strategy registry - central place to access all available strategies.
"""
from typing import Dict, List, Optional, Type

from .base import Strategy, StrategyInfo, StrategyType
from .random_strategy import RandomStrategy
from .heuristic_strategy import HeuristicStrategy
from .smart_strategy import SmartStrategy
from .human_strategy import HumanStrategy, InputProvider


# One implementation per player type
STRATEGIES: Dict[StrategyType, Type[Strategy]] = {
    StrategyType.RANDOM: RandomStrategy,
    StrategyType.HEURISTIC: HeuristicStrategy,
    StrategyType.SMART: SmartStrategy,
    StrategyType.HUMAN: HumanStrategy,
}

# Computer strategies can play without a person at the keyboard
COMPUTER_STRATEGIES = [t for t in STRATEGIES if t is not StrategyType.HUMAN]


def get_strategy(
    strategy_type,
    seed: Optional[int] = None,
    input_provider: Optional[InputProvider] = None,
) -> Strategy:
    """
    Get a strategy instance by type.

    Args:
        strategy_type: A StrategyType, its number (1-4) or its name
        seed: Optional random seed
        input_provider: Where the human strategy reads moves from

    Returns:
        Strategy instance

    Raises:
        UnknownStrategyError: If strategy_type is not recognized
        ValueError: If a human strategy is requested without an input provider
    """
    strategy_type = StrategyType.from_value(strategy_type)
    if strategy_type is StrategyType.HUMAN:
        return HumanStrategy(input_provider=input_provider, seed=seed)
    return STRATEGIES[strategy_type](seed=seed)


def list_strategies() -> List[StrategyInfo]:
    """
    Get info about all available strategies.

    Returns:
        List of StrategyInfo objects
    """
    return [cls.INFO for cls in STRATEGIES.values()]
