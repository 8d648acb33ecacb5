"""Unit tests for Sudoku board and validation."""

import pytest
import numpy as np
from sudoku_deduce.core.board import SudokuBoard
from sudoku_deduce.core.errors import InvalidInput
from sudoku_deduce.core.validator import (
    is_complete_unit,
    is_valid_board,
    is_solution,
    validate_solution,
)

from puzzles import EASY_PUZZLE, EASY_SOLUTION


def board_with(*placements):
    """Build a board from (row, col, value) placements."""
    data = [[0] * 9 for _ in range(9)]
    for row, col, value in placements:
        data[row][col] = value
    return SudokuBoard.from_2d_list(data)


class TestSudokuBoard:
    """Tests for SudokuBoard class."""

    def test_create_empty_board(self):
        """Test creating an empty 9x9 board."""
        board = SudokuBoard()
        assert board.size == 9
        assert board.box_size == 3
        assert board.count_empty() == 81
        assert board.count_filled() == 0

    def test_rejects_wrong_shape(self):
        with pytest.raises(ValueError):
            SudokuBoard(np.zeros((4, 4), dtype=np.int32))

    def test_get(self):
        """Test reading values."""
        board = board_with((0, 0, 5))
        assert board.get(0, 0) == 5
        assert not board.is_empty(0, 0)
        assert board.is_empty(0, 1)

    def test_rejects_out_of_range_values(self):
        with pytest.raises(ValueError):
            board_with((0, 0, 10))

    def test_is_valid(self):
        """Test board validation."""
        assert SudokuBoard().is_valid()  # Empty board is valid

        board = board_with((0, 0, 5), (0, 1, 5))  # Duplicate in row
        assert not board.is_valid()

    def test_box_conflict(self):
        board = board_with((0, 0, 7), (2, 2, 7))
        assert not board.is_valid()

    def test_units(self):
        board = SudokuBoard.from_string(EASY_SOLUTION)
        units = board.units()
        assert len(units) == 27
        assert all(len(unit) == 9 for unit in units)

    def test_from_string(self):
        """Test creating board from string."""
        puzzle_str = "." * 80 + "9"
        board = SudokuBoard.from_string(puzzle_str)
        assert board.get(8, 8) == 9
        assert board.count_filled() == 1

    def test_from_string_errors(self):
        with pytest.raises(InvalidInput):
            SudokuBoard.from_string("123")
        with pytest.raises(InvalidInput):
            SudokuBoard.from_string("x" * 81)

    def test_string_forms(self):
        board = SudokuBoard.from_string(EASY_PUZZLE)
        assert board.to_string() == EASY_PUZZLE
        lines = board.to_lines().split("\n")
        assert lines[0] == "53..7...."
        assert len(lines) == 9

    def test_copy(self):
        """Test board copy."""
        board = board_with((4, 4, 7))
        copy = board.copy()

        assert copy == board

        # Modify copy, original should be unchanged
        copy.grid[4, 4] = 8
        assert board.get(4, 4) == 7
        assert copy != board

    def test_pretty_print(self):
        text = str(SudokuBoard.from_string(EASY_PUZZLE))
        assert text.splitlines()[0] == "+-------+-------+-------+"
        assert text.splitlines()[1] == "| 5 3 . | . 7 . | . . . |"


class TestValidator:
    """Tests for validation utilities."""

    def test_complete_unit(self):
        assert is_complete_unit([5, 3, 4, 6, 7, 8, 9, 1, 2])
        assert not is_complete_unit([5, 3, 4, 6, 7, 8, 9, 1, 1])
        assert not is_complete_unit([5, 3, 4, 6, 7, 8, 9, 1, 0])

    def test_solution(self):
        solution = SudokuBoard.from_string(EASY_SOLUTION)
        assert is_solution(solution)
        assert is_valid_board(solution)
        assert not is_solution(SudokuBoard.from_string(EASY_PUZZLE))

    def test_validate_solution(self):
        puzzle = SudokuBoard.from_string(EASY_PUZZLE)
        solution = SudokuBoard.from_string(EASY_SOLUTION)
        assert validate_solution(puzzle, solution)

        other = board_with((0, 0, 1))
        assert not validate_solution(other, solution)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
