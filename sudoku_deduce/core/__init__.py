"""Core module: cells, containers, the propagation grid and validation."""

from .board import SudokuBoard
from .cell import Cell, DIGITS, SUDOKU_SIZE, BOX_SIZE
from .container import Container, build_containers
from .errors import SudokuError, InvalidInput, Contradiction, Unsolvable
from .grid import SudokuGrid
from .validator import is_complete_unit, is_valid_board, is_solution, validate_solution

__all__ = [
    "SudokuBoard",
    "Cell",
    "DIGITS",
    "SUDOKU_SIZE",
    "BOX_SIZE",
    "Container",
    "build_containers",
    "SudokuError",
    "InvalidInput",
    "Contradiction",
    "Unsolvable",
    "SudokuGrid",
    "is_complete_unit",
    "is_valid_board",
    "is_solution",
    "validate_solution",
]
