"""
Board representation for the sticks game.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

import numpy as np

from .config import DEFAULT_CONFIG, validate_row_lengths
from .move import Move


class OutOfRangeError(ValueError):
    """Raised when a row or stick index lies outside the board."""


class MoveStatus(Enum):
    """Outcome of applying a move to the board."""
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    @property
    def accepted(self) -> bool:
        return self is MoveStatus.ACCEPTED


@dataclass(frozen=True)
class Run:
    """A maximal block of contiguous unmarked sticks within one row."""
    row: int
    left: int
    length: int

    @property
    def right(self) -> int:
        return self.left + self.length - 1


class Board:
    """
    Board of the sticks game.

    Each row is a numpy array where:
    - 0 = unmarked stick
    - 1 = marked stick

    Rows and sticks are addressed with 1-based indices. The layout is
    fixed for the lifetime of the board, and the only way to change a
    stick is ``apply_move``.
    """

    UNMARKED = 0
    MARKED = 1

    def __init__(self, row_lengths: Optional[Sequence[int]] = None):
        """Initialize the board with the given layout (default 1, 3, 5, 7)."""
        if row_lengths is None:
            row_lengths = DEFAULT_CONFIG.row_lengths
        self.rows: List[np.ndarray] = [
            np.zeros(length, dtype=np.int8) for length in validate_row_lengths(row_lengths)
        ]

    def row_count(self) -> int:
        """Return the number of rows."""
        return len(self.rows)

    def row_length(self, row: int) -> int:
        """Return the number of sticks in the given row."""
        return len(self._row(row))

    def is_unmarked(self, row: int, stick: int) -> bool:
        """Check whether a single stick is still unmarked."""
        sticks = self._row(row)
        if stick < 1 or stick > len(sticks):
            raise OutOfRangeError(
                f"Stick {stick} out of range for row {row} (1-{len(sticks)})"
            )
        return bool(sticks[stick - 1] == self.UNMARKED)

    def unmarked_count(self) -> int:
        """Return the total number of unmarked sticks on the board."""
        return int(sum(np.sum(sticks == self.UNMARKED) for sticks in self.rows))

    def is_row_empty(self, row: int) -> bool:
        """Check whether every stick in the row is marked."""
        return not np.any(self._row(row) == self.UNMARKED)

    def can_apply(self, move: Move) -> bool:
        """
        Check if a move is legal on the current board.

        Args:
            move: The move to check

        Returns:
            True if the row exists, the bounds are ordered and inside the
            row, and every stick in the range is unmarked.
        """
        if move.row < 1 or move.row > self.row_count():
            return False

        sticks = self.rows[move.row - 1]
        if move.left < 1 or move.left > move.right or move.right > len(sticks):
            return False

        return not np.any(sticks[move.left - 1:move.right] == self.MARKED)

    def apply_move(self, move: Move) -> MoveStatus:
        """
        Mark the sticks of a move.

        The move is applied entirely or not at all: when validation fails
        the board is left untouched.

        Args:
            move: The move to apply

        Returns:
            MoveStatus.ACCEPTED if the sticks were marked,
            MoveStatus.REJECTED otherwise
        """
        if not self.can_apply(move):
            return MoveStatus.REJECTED

        self.rows[move.row - 1][move.left - 1:move.right] = self.MARKED
        return MoveStatus.ACCEPTED

    def runs(self) -> List[Run]:
        """
        Find all maximal runs of unmarked sticks.

        Returns:
            Runs ordered by row, then by position within the row
        """
        runs = []

        for row_idx, sticks in enumerate(self.rows, start=1):
            start = None
            for i, cell in enumerate(sticks):
                if cell == self.UNMARKED:
                    if start is None:
                        start = i
                elif start is not None:
                    runs.append(Run(row_idx, start + 1, i - start))
                    start = None
            if start is not None:
                runs.append(Run(row_idx, start + 1, len(sticks) - start))

        return runs

    def _row(self, row: int) -> np.ndarray:
        if row < 1 or row > len(self.rows):
            raise OutOfRangeError(f"Row {row} out of range (1-{len(self.rows)})")
        return self.rows[row - 1]

    def copy(self) -> Board:
        """Create a deep copy of the board."""
        board = Board.__new__(Board)
        board.rows = [sticks.copy() for sticks in self.rows]
        return board

    def to_array(self) -> np.ndarray:
        """
        Return the board as a rectangular int8 grid.

        Positions past the end of a shorter row are filled with -1.
        """
        width = max(len(sticks) for sticks in self.rows)
        grid = np.full((self.row_count(), width), -1, dtype=np.int8)
        for i, sticks in enumerate(self.rows):
            grid[i, :len(sticks)] = sticks
        return grid

    def __str__(self) -> str:
        """Return a string representation of the board."""
        lines = []
        for row_idx, sticks in enumerate(self.rows, start=1):
            row_str = " ".join("x" if cell else "|" for cell in sticks)
            lines.append(f"{row_idx}: {row_str}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        total = sum(len(sticks) for sticks in self.rows)
        return f"Board(unmarked={self.unmarked_count()}/{total})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        if self.row_count() != other.row_count():
            return False
        return all(np.array_equal(a, b) for a, b in zip(self.rows, other.rows))

    def __hash__(self) -> int:
        return hash(tuple(sticks.tobytes() for sticks in self.rows))
