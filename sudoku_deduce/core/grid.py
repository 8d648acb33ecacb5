"""Possibility grid and the fixed-point propagation loop."""

from __future__ import annotations
import logging
from typing import List, Optional, Tuple, FrozenSet

from .board import SudokuBoard
from .cell import Cell, SUDOKU_SIZE
from .container import Container, build_containers
from .errors import InvalidInput, Contradiction, Unsolvable

log = logging.getLogger(__name__)

Snapshot = Tuple[FrozenSet[int], ...]


class SudokuGrid:
    """
    The 81 cells of a puzzle plus the 27 containers over them.

    Solving repeatedly narrows every container until each cell is known.
    Propagation stops with Contradiction when the grid becomes impossible
    and with Unsolvable when a full pass makes no progress.
    """

    def __init__(self, text: str):
        """
        Parse a puzzle.

        Args:
            text: Nine lines of nine characters. 1-9 are clues, any other
                  printable non-digit character is a blank. A single
                  81-character line is accepted as the compact form.
                  '0' is the compact form's empty-cell marker (see
                  SudokuBoard.to_string()) and is read as a blank in
                  either layout.
        """
        self.cells: List[List[Cell]] = [
            [self._parse_cell(c, row, col) for col, c in enumerate(line)]
            for row, line in enumerate(self._split_lines(text))
        ]
        self.containers: List[Container] = build_containers()
        self.passes = 0

    @staticmethod
    def _split_lines(text: str) -> List[str]:
        lines = text.splitlines()
        if len(lines) == 1 and len(lines[0]) == SUDOKU_SIZE * SUDOKU_SIZE:
            compact = lines[0]
            lines = [compact[i:i + SUDOKU_SIZE]
                     for i in range(0, len(compact), SUDOKU_SIZE)]

        if len(lines) != SUDOKU_SIZE:
            raise InvalidInput(f"Expected {SUDOKU_SIZE} lines, got {len(lines)}")
        for row, line in enumerate(lines):
            if len(line) != SUDOKU_SIZE:
                raise InvalidInput(
                    f"Line {row + 1} has {len(line)} characters, expected {SUDOKU_SIZE}")
        return lines

    @staticmethod
    def _parse_cell(c: str, row: int, col: int) -> Cell:
        if c in "123456789":
            return Cell.given(int(c))
        if c != "0" and c.isdigit():
            raise InvalidInput(f"Unsupported digit {c!r} at ({row}, {col})")
        if not c.isprintable():
            raise InvalidInput(f"Invalid character {c!r} at ({row}, {col})")
        return Cell()

    @classmethod
    def from_board(cls, board: SudokuBoard) -> SudokuGrid:
        """Build a grid from a value board (0 = blank)."""
        return cls(board.to_lines())

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def is_solved(self) -> bool:
        """True once every cell is known."""
        return all(cell.is_known() for row in self.cells for cell in row)

    def count_known(self) -> int:
        return sum(cell.is_known() for row in self.cells for cell in row)

    def snapshot(self) -> Snapshot:
        """Frozen copy of every possibility set, row-major."""
        return tuple(frozenset(cell.get_possibilities())
                     for row in self.cells for cell in row)

    def possibility_counts(self) -> List[List[int]]:
        """Number of digits still possible in each cell."""
        return [[len(cell) for cell in row] for row in self.cells]

    def check(self) -> None:
        """Raise Contradiction if any container can no longer be completed."""
        for container in self.containers:
            container.check(self.cells)

    def narrow_all(self) -> bool:
        """
        Run one pass: narrow every container in order.

        Containers share cells, so they run one after another and each
        sees the changes made by the ones before it.

        Returns:
            True if any possibility set changed.
        """
        before = self.snapshot()
        for container in self.containers:
            container.narrow(self.cells)
        return self.snapshot() != before

    def solve(self, max_passes: Optional[int] = None) -> int:
        """
        Propagate until every cell is known.

        Args:
            max_passes: Optional cap on the number of passes.

        Returns:
            Number of passes it took.

        Raises:
            Contradiction: the puzzle has no solution.
            Unsolvable: deduction alone cannot finish the puzzle.
        """
        self.passes = 0
        self.check()

        while not self.is_solved():
            if max_passes is not None and self.passes >= max_passes:
                raise Unsolvable(
                    f"Not solved after {self.passes} passes", passes=self.passes)

            changed = self.narrow_all()
            self.passes += 1
            log.debug("Pass %d: %d/%d cells known", self.passes,
                      self.count_known(), SUDOKU_SIZE * SUDOKU_SIZE)

            try:
                self.check()
            except Contradiction as e:
                log.debug("Contradiction after pass %d: %s", self.passes, e)
                raise

            if not changed:
                log.debug("Stalled after pass %d", self.passes)
                raise Unsolvable(
                    f"No progress after {self.passes} passes; "
                    f"{self.count_known()} cells known",
                    passes=self.passes)

        return self.passes

    def to_string(self) -> str:
        """Nine lines of nine digits. Cells not yet known render as '.'."""
        return "\n".join(
            "".join(str(cell.value) if cell.is_known() else "." for cell in row)
            for row in self.cells
        )

    def to_board(self) -> SudokuBoard:
        """Value board of the known cells (0 where still undecided)."""
        return SudokuBoard.from_2d_list(
            [[cell.value or 0 for cell in row] for row in self.cells])

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"SudokuGrid(known={self.count_known()})"
