"""
Random strategy - baseline for comparison.
"""
from .base import Strategy, StrategyInfo
from ...core.board import Board
from ...core.move import Move


class RandomStrategy(Strategy):
    """
    Marks a random legal range of sticks.

    Serves as a baseline: every move is legal but no position is
    evaluated.
    """

    INFO = StrategyInfo(
        id="random",
        name="Random",
        short_desc="Marks a random run of unmarked sticks",
        algorithm=(
            "1. Sample rows until one with an unmarked stick is found\n"
            "2. Sample an unmarked left bound, then an unmarked right bound after it\n"
            "3. Walk from left to right; on a marked stick, resample the left\n"
            "   bound among the unmarked sticks past it"
        ),
    )

    def produce_move(self, board: Board) -> Move:
        self._require_sticks(board)

        row = self._sample_row(board)
        length = board.row_length(row)

        left = self._sample_unmarked(board, row, 1, length)
        right = self._sample_unmarked(board, row, left, length)

        # Shift the left bound past any marked stick inside the range.
        # Right is unmarked, so a resample always has a candidate.
        stick = left + 1
        while stick < right:
            if board.is_unmarked(row, stick):
                stick += 1
            else:
                left = self._sample_unmarked(board, row, stick + 1, right)
                stick = left + 1

        return self._explain(Move(row, left, right), "random range")

    def _sample_row(self, board: Board) -> int:
        row = int(self.rng.integers(1, board.row_count(), endpoint=True))
        while board.is_row_empty(row):
            row = int(self.rng.integers(1, board.row_count(), endpoint=True))
        return row

    def _sample_unmarked(self, board: Board, row: int, low: int, high: int) -> int:
        """Sample uniformly among positions low..high until an unmarked one is hit."""
        stick = int(self.rng.integers(low, high, endpoint=True))
        while not board.is_unmarked(row, stick):
            stick = int(self.rng.integers(low, high, endpoint=True))
        return stick
