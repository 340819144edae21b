"""
Unit tests for the Board class.
"""
import pytest
import numpy as np

from nimsticks.core.board import Board, MoveStatus, OutOfRangeError, Run
from nimsticks.core.config import GameConfig
from nimsticks.core.move import Move


def snapshot(board):
    return [row.copy() for row in board.rows]


class TestBoard:
    """Tests for Board class."""

    def test_init_default_layout(self):
        """Test the default board has rows of 1, 3, 5 and 7 sticks."""
        board = Board()
        assert board.row_count() == 4
        assert [board.row_length(r) for r in range(1, 5)] == [1, 3, 5, 7]
        assert board.unmarked_count() == 16

    def test_init_custom_layout(self):
        """Test creating a board with a given layout."""
        board = Board([2, 4])
        assert board.row_count() == 2
        assert board.row_length(2) == 4
        assert board.unmarked_count() == 6

    def test_init_rejects_bad_layout(self):
        """Test empty layouts and non-positive lengths are refused."""
        with pytest.raises(ValueError):
            Board([])
        with pytest.raises(ValueError):
            Board([3, 0])

    def test_init_rejects_non_integer_lengths(self):
        """Test fractional or boolean lengths are refused, not truncated."""
        with pytest.raises(ValueError):
            Board([2.5])
        with pytest.raises(ValueError):
            Board([3, True])

    def test_init_accepts_numpy_integers(self):
        """Test numpy integer lengths are accepted."""
        board = Board(np.array([2, 4]))
        assert [board.row_length(1), board.row_length(2)] == [2, 4]

    def test_all_sticks_start_unmarked(self):
        """Test every stick is unmarked on a new board."""
        board = Board()
        for row in range(1, board.row_count() + 1):
            for stick in range(1, board.row_length(row) + 1):
                assert board.is_unmarked(row, stick)

    def test_row_out_of_range(self):
        """Test queries with a bad row raise OutOfRangeError."""
        board = Board()
        with pytest.raises(OutOfRangeError):
            board.row_length(0)
        with pytest.raises(OutOfRangeError):
            board.row_length(5)
        with pytest.raises(OutOfRangeError):
            board.is_unmarked(-1, 1)

    def test_stick_out_of_range(self):
        """Test queries with a bad stick raise OutOfRangeError."""
        board = Board()
        with pytest.raises(OutOfRangeError):
            board.is_unmarked(1, 2)
        with pytest.raises(OutOfRangeError):
            board.is_unmarked(4, 0)

    def test_out_of_range_is_value_error(self):
        """Test OutOfRangeError can be caught as ValueError."""
        assert issubclass(OutOfRangeError, ValueError)

    def test_apply_move_marks_range(self):
        """Test a legal move marks exactly its range."""
        board = Board()
        status = board.apply_move(Move(4, 2, 5))

        assert status is MoveStatus.ACCEPTED
        assert status.accepted
        assert board.is_unmarked(4, 1)
        for stick in range(2, 6):
            assert not board.is_unmarked(4, stick)
        assert board.is_unmarked(4, 6)
        assert board.unmarked_count() == 12

    def test_unmarked_count_drops_by_move_length(self):
        """Test each accepted move lowers the count by its length."""
        board = Board()
        for move in [Move(3, 1, 5), Move(4, 3, 3), Move(2, 2, 3), Move(1, 1, 1)]:
            before = board.unmarked_count()
            assert board.apply_move(move) is MoveStatus.ACCEPTED
            assert board.unmarked_count() == before - move.length

    def test_reject_overlapping_marked(self):
        """Test a move over a marked stick is rejected and changes nothing."""
        board = Board()
        board.apply_move(Move(4, 4, 4))
        before = snapshot(board)

        status = board.apply_move(Move(4, 2, 6))

        assert status is MoveStatus.REJECTED
        for a, b in zip(before, board.rows):
            assert np.array_equal(a, b)
        assert board.unmarked_count() == 15

    def test_reject_bad_bounds(self):
        """Test moves with bad row or stick bounds are rejected."""
        board = Board()
        for move in [
            Move(0, 1, 1),
            Move(5, 1, 1),
            Move(3, 0, 2),
            Move(3, 4, 2),
            Move(3, 4, 6),
            Move(1, 1, 2),
        ]:
            assert board.apply_move(move) is MoveStatus.REJECTED
        assert board.unmarked_count() == 16

    def test_rejection_is_repeatable(self):
        """Test the same illegal move is rejected twice with no change."""
        board = Board()
        board.apply_move(Move(2, 1, 3))
        illegal = Move(2, 2, 2)

        assert board.apply_move(illegal) is MoveStatus.REJECTED
        first = snapshot(board)
        assert board.apply_move(illegal) is MoveStatus.REJECTED
        for a, b in zip(first, board.rows):
            assert np.array_equal(a, b)

    def test_marking_is_monotonic(self):
        """Test marked sticks stay marked."""
        board = Board([5])
        board.apply_move(Move(1, 2, 3))
        board.apply_move(Move(1, 5, 5))
        board.apply_move(Move(1, 1, 1))
        assert not board.is_unmarked(1, 2)
        assert not board.is_unmarked(1, 3)
        assert board.is_unmarked(1, 4)

    def test_is_row_empty(self):
        """Test detecting a fully marked row."""
        board = Board()
        assert not board.is_row_empty(2)
        board.apply_move(Move(2, 1, 3))
        assert board.is_row_empty(2)

    def test_runs(self):
        """Test splitting rows into runs of unmarked sticks."""
        board = Board()
        board.apply_move(Move(1, 1, 1))
        board.apply_move(Move(4, 3, 3))
        board.apply_move(Move(4, 6, 6))

        assert board.runs() == [
            Run(2, 1, 3),
            Run(3, 1, 5),
            Run(4, 1, 2),
            Run(4, 4, 2),
            Run(4, 7, 1),
        ]
        assert board.runs()[-1].right == 7

    def test_copy(self):
        """Test copying a board."""
        board = Board()
        board.apply_move(Move(3, 1, 1))

        copy = board.copy()
        assert copy == board

        # Modify copy, original should not change
        copy.apply_move(Move(4, 1, 1))
        assert board.is_unmarked(4, 1)
        assert copy != board

    def test_to_array(self):
        """Test the padded grid representation."""
        board = Board([1, 3])
        board.apply_move(Move(2, 2, 2))

        grid = board.to_array()
        assert grid.shape == (2, 3)
        assert grid.tolist() == [[0, -1, -1], [0, 1, 0]]

    def test_str_representation(self):
        """Test string representation of board."""
        board = Board([1, 3])
        board.apply_move(Move(2, 1, 1))

        assert str(board) == "1: |\n2: x | |"

    def test_repr(self):
        """Test repr shows the remaining sticks."""
        assert repr(Board()) == "Board(unmarked=16/16)"


class TestGameConfig:
    """Tests for GameConfig."""

    def test_defaults(self):
        """Test default configuration."""
        config = GameConfig()
        assert config.row_lengths == (1, 3, 5, 7)
        assert config.last_stick_loses

    def test_list_layout_becomes_tuple(self):
        """Test list layouts are normalised."""
        config = GameConfig(row_lengths=[2, 2])
        assert config.row_lengths == (2, 2)

    def test_invalid_layout(self):
        """Test invalid layouts are refused."""
        with pytest.raises(ValueError):
            GameConfig(row_lengths=())
        with pytest.raises(ValueError):
            GameConfig(row_lengths=(1, -2))
        with pytest.raises(ValueError):
            GameConfig(row_lengths=(1, 2.5))
