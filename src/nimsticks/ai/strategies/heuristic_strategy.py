"""
Heuristic strategy based on the binary decomposition of the position.

Every run of unmarked sticks is treated as a Nim heap. The run lengths
are written in binary, and the column-wise parity of those bits (the
nim-sum) tells which run to shorten and by how much. Because moves can
only mark a contiguous range, a run split by marked sticks cannot always
be cut to the exact size; in that case a single stick is marked instead.
"""
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .base import Strategy, StrategyInfo
from ...core.board import Board
from ...core.move import Move


@dataclass
class RunSummary:
    """Binary decomposition of a board, collected in a single scan."""
    bins: np.ndarray        # (rows, width) count of runs per row with each bit set
    binary_sum: np.ndarray  # (width,) nim-sum bit per position, MSB first
    single_runs: int = 0
    multi_runs: int = 0

    # Last run longer than one stick
    last_row: int = 0
    last_left: int = 0
    last_size: int = 0

    # Last stick of the last run scanned
    last_one_row: int = 0
    last_one_stick: int = 0

    @property
    def width(self) -> int:
        return len(self.binary_sum)


class HeuristicStrategy(Strategy):
    """
    Plays towards a zero nim-sum, with misere handling near the end.

    Decision order:
    1. Only single sticks left: mark the last one
    2. One run longer than a stick: cut it so an odd number of singles remain
    3. Nonzero high bit: shorten the first contributing row to balance the sum
    4. Only the lowest bit is set: mark one single stick
    5. Already balanced: mark one stick from the last long run
    """

    INFO = StrategyInfo(
        id="heuristic",
        name="Heuristic",
        short_desc="Balances the nim-sum of the runs",
        algorithm=(
            "1. Split every row into runs of unmarked sticks\n"
            "2. Write each run length in binary and sum the bits mod 2\n"
            "3. Remove enough sticks from one row to zero the sum\n"
            "4. Near the end, leave the opponent an odd number of single sticks"
        ),
    )

    # Bits used to encode a run length; covers runs of up to 7 sticks
    BINARY_LENGTH = 3

    def produce_move(self, board: Board) -> Move:
        self._require_sticks(board)
        summary = self.summarize(board)

        # We only have single sticks
        if summary.multi_runs == 0:
            move = Move.single(summary.last_one_row, summary.last_one_stick)
            return self._explain(move, "only single sticks left")

        # Finishing state: one long run decides the parity of the singles
        if summary.multi_runs == 1:
            end = summary.last_left + summary.last_size - 1
            if summary.single_runs % 2 == 0:
                end -= 1
            move = Move(summary.last_row, summary.last_left, end)
            return self._explain(move, "leave an odd number of single sticks")

        width = summary.width
        for bit in range(width - 1):
            if summary.binary_sum[bit] == 0:
                continue

            erase_row = self._contributing_row(summary, bit)
            num_remove = self._sticks_to_remove(summary, erase_row, bit)

            segment = self._find_segment(board, erase_row, num_remove)
            if segment is not None:
                move = Move(erase_row, segment, segment + num_remove - 1)
                return self._explain(move, f"balance nim-sum at bit {width - bit - 1}")

            # Marked sticks split the row, so no exact cut exists
            move = Move.single(summary.last_row, summary.last_left)
            return self._explain(move, "no contiguous cut available, mark one stick")

        if summary.binary_sum[width - 1] > 0:
            move = Move.single(summary.last_one_row, summary.last_one_stick)
            return self._explain(move, "balance lowest bit")

        # Already balanced; any small move will do
        move = Move.single(summary.last_row, summary.last_left)
        return self._explain(move, "position balanced, mark one stick")

    def summarize(self, board: Board) -> RunSummary:
        """
        Scan the board once and collect the binary decomposition of its runs.
        """
        num_rows = board.row_count()
        longest = max(board.row_length(row) for row in range(1, num_rows + 1))
        width = max(self.BINARY_LENGTH, longest.bit_length())

        bins = np.zeros((num_rows, width), dtype=np.int64)
        summary = RunSummary(bins=bins, binary_sum=np.zeros(width, dtype=np.int64))

        for run in board.runs():
            bins[run.row - 1] += self._encode(run.length, width)

            if run.length > 1:
                summary.multi_runs += 1
                summary.last_row = run.row
                summary.last_left = run.left
                summary.last_size = run.length
            else:
                summary.single_runs += 1

            summary.last_one_row = run.row
            summary.last_one_stick = run.right

        summary.binary_sum = bins.sum(axis=0) % 2
        return summary

    @staticmethod
    def _encode(length: int, width: int) -> np.ndarray:
        """Binary digits of length, most significant first."""
        return np.array([(length >> (width - i - 1)) & 1 for i in range(width)], dtype=np.int64)

    @staticmethod
    def _contributing_row(summary: RunSummary, bit: int) -> int:
        rows = np.nonzero(summary.bins[:, bit])[0]
        return int(rows[0]) + 1

    @staticmethod
    def _sticks_to_remove(summary: RunSummary, row: int, bit: int) -> int:
        """
        Number of sticks to take from the row so the nim-sum becomes zero.

        The row gives up the power of two at ``bit``; every lower unbalanced
        bit is then flipped: added back if the row lacks it, subtracted if
        the row already has it.
        """
        width = summary.width
        erase_size = 2 ** (width - bit - 1)
        final_sum = 0
        for lower in range(bit + 1, width):
            if summary.binary_sum[lower] > 0:
                if summary.bins[row - 1, lower] == 0:
                    final_sum += 2 ** (width - lower - 1)
                else:
                    final_sum -= 2 ** (width - lower - 1)
        return erase_size - final_sum

    @staticmethod
    def _find_segment(board: Board, row: int, size: int) -> Optional[int]:
        """Left bound of the first run of ``size`` unmarked sticks in the row."""
        count = 0
        stick = 0
        length = board.row_length(row)
        while count < size and stick < length:
            if board.is_unmarked(row, stick + 1):
                count += 1
            else:
                count = 0
            stick += 1

        if count == size:
            return stick - count + 1
        return None
