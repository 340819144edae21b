"""
Move value type for the sticks game.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """
    A proposal to mark the sticks ``left`` through ``right`` (inclusive)
    of ``row``. All indices are 1-based.

    A Move is not validated on construction; the Board decides whether
    it is legal.
    """
    row: int
    left: int
    right: int

    @property
    def length(self) -> int:
        """Number of sticks the move would mark."""
        return self.right - self.left + 1

    @classmethod
    def single(cls, row: int, stick: int) -> Move:
        """A move marking exactly one stick."""
        return cls(row, stick, stick)

    def to_dict(self) -> dict:
        return {"row": self.row, "left": self.left, "right": self.right}

    def __str__(self) -> str:
        return f"{self.row}:{self.left}-{self.right}"
