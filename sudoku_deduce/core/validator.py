"""Validation utilities for Sudoku puzzles and solutions."""

from __future__ import annotations
from typing import Iterable, TYPE_CHECKING

from .cell import DIGITS

if TYPE_CHECKING:
    from .board import SudokuBoard


def is_complete_unit(values: Iterable[int]) -> bool:
    """
    Check that a row, column or box holds each digit 1-9 exactly once.

    Args:
        values: The nine values of the unit.

    Returns:
        True if the values are a permutation of 1-9.
    """
    values = [int(v) for v in values]
    return len(values) == len(DIGITS) and set(values) == DIGITS


def is_valid_board(board: SudokuBoard) -> bool:
    """
    Check if the entire board state is valid (no conflicts).

    Args:
        board: The Sudoku board to validate.

    Returns:
        True if no constraints are violated.
    """
    return board.is_valid()


def is_solution(board: SudokuBoard) -> bool:
    """Check that every unit of the board is a permutation of 1-9."""
    return all(is_complete_unit(unit) for unit in board.units())


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is valid and matches puzzle clues.
    """
    # Check that solution respects original clues
    for i in range(puzzle.size):
        for j in range(puzzle.size):
            if not puzzle.is_empty(i, j):
                if puzzle.get(i, j) != solution.get(i, j):
                    return False

    return is_solution(solution)
