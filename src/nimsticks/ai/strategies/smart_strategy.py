"""
Smart strategy - parity play on the total number of sticks.
"""
from typing import Optional

from .base import Strategy, StrategyInfo
from ...core.board import Board
from ...core.move import Move


class SmartStrategy(Strategy):
    """
    Chooses between marking one or two sticks based on how many remain.

    With an even count, or exactly one or three sticks left, one stick is
    marked; otherwise two adjacent sticks are marked. Lookups scan rows and
    sticks in ascending order, so the choice is deterministic.
    """

    INFO = StrategyInfo(
        id="smart",
        name="Smart",
        short_desc="Marks one or two sticks depending on parity",
        algorithm=(
            "1. Count the unmarked sticks n\n"
            "2. n == 1, n even or n == 3: mark the first unmarked stick\n"
            "3. Otherwise: mark the first pair of adjacent unmarked sticks"
        ),
    )

    LAST_STICK = 1
    THREE_STICKS = 3

    def produce_move(self, board: Board) -> Move:
        self._require_sticks(board)
        num_sticks = board.unmarked_count()

        if num_sticks == self.LAST_STICK:
            return self._explain(self._first_stick(board), "last stick")
        if num_sticks % 2 == 0:
            return self._explain(self._first_stick(board), "even count, take one")
        if num_sticks == self.THREE_STICKS:
            return self._explain(self._first_stick(board), "three left, take one")

        pair = self._first_pair(board)
        if pair is None:
            # Only isolated sticks remain
            return self._explain(self._first_stick(board), "no adjacent pair, take one")
        return self._explain(pair, "odd count, take two")

    @staticmethod
    def _first_stick(board: Board) -> Move:
        for row in range(1, board.row_count() + 1):
            for stick in range(1, board.row_length(row) + 1):
                if board.is_unmarked(row, stick):
                    return Move.single(row, stick)
        raise ValueError("Board has no unmarked sticks")

    @staticmethod
    def _first_pair(board: Board) -> Optional[Move]:
        for row in range(1, board.row_count() + 1):
            for stick in range(1, board.row_length(row)):
                if board.is_unmarked(row, stick) and board.is_unmarked(row, stick + 1):
                    return Move(row, stick, stick + 1)
        return None
