"""Exceptions raised while parsing or solving a Sudoku grid."""

from __future__ import annotations


class SudokuError(Exception):
    """Base class for every failure the solver can report."""


class InvalidInput(SudokuError, ValueError):
    """The puzzle text is not a 9x9 grid of digits and placeholders."""


class Contradiction(SudokuError):
    """
    Propagation reached an impossible state.

    Raised when a cell loses its last possibility, when a container holds
    the same known digit twice, or when a digit has no cell left in a
    container.
    """


class Unsolvable(SudokuError):
    """Deduction stalled before every cell was known."""

    def __init__(self, message: str, passes: int = 0):
        super().__init__(message)
        self.passes = passes
