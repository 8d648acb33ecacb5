"""Sudoku solving by constraint propagation over rows, columns and boxes."""

from .core import (
    Cell,
    Container,
    SudokuBoard,
    SudokuGrid,
    SudokuError,
    InvalidInput,
    Contradiction,
    Unsolvable,
)
from .solvers import PropagationSolver, SolverStats

__version__ = "1.0.0"

__all__ = [
    "Cell",
    "Container",
    "SudokuBoard",
    "SudokuGrid",
    "SudokuError",
    "InvalidInput",
    "Contradiction",
    "Unsolvable",
    "PropagationSolver",
    "SolverStats",
]
