"""Solver facade over the constraint propagation grid."""

from __future__ import annotations
from typing import Optional

from .base_solver import BaseSolver
from ..core.board import SudokuBoard
from ..core.grid import SudokuGrid


class PropagationSolver(BaseSolver):
    """
    Sudoku solver using pure deduction.

    Each pass narrows every row, column and box with naked singles and
    hidden singles. There is no guessing: puzzles that need search end
    with an Unsolvable failure in the stats.
    """

    name = "Constraint Propagation"

    def __init__(self, max_passes: Optional[int] = None):
        """
        Args:
            max_passes: Optional cap on propagation passes.
        """
        super().__init__()
        self.max_passes = max_passes
        self.grid: Optional[SudokuGrid] = None

    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        self.grid = SudokuGrid.from_board(board)
        try:
            self.grid.solve(max_passes=self.max_passes)
        finally:
            self.stats.iterations = self.grid.passes
            self.stats.extra["cells_known"] = self.grid.count_known()
        return self.grid.to_board()
