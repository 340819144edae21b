"""
Game configuration for the sticks game.
"""
import numbers
from dataclasses import dataclass
from typing import Sequence, Tuple


def validate_row_lengths(row_lengths: Sequence[int]) -> Tuple[int, ...]:
    """
    Check a board layout and return it as a tuple of ints.

    Raises:
        ValueError: If the layout is empty or a length is not a positive integer
    """
    if len(row_lengths) == 0:
        raise ValueError("A board needs at least one row")
    for length in row_lengths:
        if isinstance(length, bool) or not isinstance(length, numbers.Integral):
            raise ValueError(f"Row lengths must be integers, got {length!r}")
        if length < 1:
            raise ValueError(f"Row lengths must be positive, got {length}")
    return tuple(int(n) for n in row_lengths)


@dataclass(frozen=True)
class GameConfig:
    """Configuration for a round of the sticks game."""
    # Number of sticks in each row, top to bottom
    row_lengths: Tuple[int, ...] = (1, 3, 5, 7)

    # Misere convention: whoever marks the last stick loses
    last_stick_loses: bool = True

    def __post_init__(self):
        # Normalise lists into tuples so the config stays hashable
        object.__setattr__(self, "row_lengths", validate_row_lengths(self.row_lengths))


DEFAULT_CONFIG = GameConfig()
