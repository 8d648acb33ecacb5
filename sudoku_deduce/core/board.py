"""Value grid for puzzles and solutions."""

from __future__ import annotations
import numpy as np
from typing import List, Optional

from .cell import SUDOKU_SIZE, BOX_SIZE
from .errors import InvalidInput


class SudokuBoard:
    """
    A 9x9 grid of digits, 0 meaning empty.

    This is the plain value form of a puzzle: what goes into a solver and
    what comes back out. Possibility tracking lives in SudokuGrid.
    """

    size = SUDOKU_SIZE
    box_size = BOX_SIZE

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a board.

        Args:
            grid: Optional initial 9x9 grid. If None, creates an empty board.
        """
        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (self.size, self.size):
                raise ValueError(f"Grid shape must be ({self.size}, {self.size})")
            if grid.min() < 0 or grid.max() > self.size:
                raise ValueError(f"Values must be 0-{self.size}")
            self.grid = grid.astype(np.int32)
        else:
            self.grid = np.zeros((self.size, self.size), dtype=np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        return SudokuBoard(self.grid.copy())

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def is_empty(self, row: int, col: int) -> bool:
        return self.grid[row, col] == 0

    def get_row(self, row: int) -> np.ndarray:
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row = (row // self.box_size) * self.box_size
        box_col = (col // self.box_size) * self.box_size
        return self.grid[box_row:box_row + self.box_size,
                        box_col:box_col + self.box_size].flatten()

    def units(self) -> List[np.ndarray]:
        """All 27 rows, columns and boxes as flat arrays."""
        units = [self.get_row(i) for i in range(self.size)]
        units += [self.get_col(j) for j in range(self.size)]
        for box_row in range(0, self.size, self.box_size):
            for box_col in range(0, self.size, self.box_size):
                units.append(self.get_box(box_row, box_col))
        return units

    def count_empty(self) -> int:
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        return int(np.sum(self.grid != 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check that no row, column or box repeats a digit.
        Empty cells are ignored, so a partial board can be valid.
        """
        for unit in self.units():
            non_zero = unit[unit != 0]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False
        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_string(self) -> str:
        """Compact 81-character form, 0 for empty cells."""
        return ''.join(str(int(val)) for val in self.grid.flatten())

    def to_lines(self) -> str:
        """Nine lines of nine characters, '.' for empty cells."""
        return '\n'.join(
            ''.join(str(int(val)) if val else '.' for val in row)
            for row in self.grid
        )

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a compact string.

        Args:
            s: String of 81 characters, row by row.
               0 or . for empty, 1-9 for values.
        """
        cells = cls.size * cls.size
        if len(s) != cells:
            raise InvalidInput(f"String length must be {cells}, got {len(s)}")

        grid = np.zeros((cls.size, cls.size), dtype=np.int32)
        for idx, c in enumerate(s):
            if c in '0.':
                continue
            if c not in '123456789':
                raise InvalidInput(f"Invalid character {c!r} at position {idx}")
            grid[idx // cls.size, idx % cls.size] = int(c)

        return cls(grid)

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> SudokuBoard:
        """Create a board from a 2D list."""
        return cls(np.array(data, dtype=np.int32))

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (self.box_size * 2 + 1)) + '+') * self.box_size

        for i in range(self.size):
            if i % self.box_size == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(self.size):
                val = self.grid[i, j]
                row_str += ' .' if val == 0 else f' {val}'
                if (j + 1) % self.box_size == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)
