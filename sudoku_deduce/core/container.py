"""Rows, columns and boxes: the constraint groups that narrow cells."""

from __future__ import annotations
from typing import List, Sequence, Tuple

from .cell import Cell, SUDOKU_SIZE, BOX_SIZE, DIGITS
from .errors import Contradiction

Position = Tuple[int, int]
CellGrid = Sequence[Sequence[Cell]]


class Container:
    """
    A group of 9 cells that must hold each digit exactly once.

    The container only stores (row, col) positions. The cells themselves
    live in the grid and are looked up on every call.
    """

    def __init__(self, kind: str, index: int, positions: Sequence[Position]):
        if len(positions) != SUDOKU_SIZE or len(set(positions)) != SUDOKU_SIZE:
            raise ValueError(f"A container needs {SUDOKU_SIZE} distinct positions")
        self.kind = kind
        self.index = index
        self.positions: Tuple[Position, ...] = tuple(positions)

    def members(self, cells: CellGrid) -> List[Cell]:
        """Resolve this container's positions against the grid storage."""
        return [cells[row][col] for row, col in self.positions]

    def narrow(self, cells: CellGrid) -> None:
        """
        Apply one round of deduction to the member cells.

        1. Naked singles: digits of already-known cells are removed from
           every cell that is not known.
        2. Hidden singles: a digit not yet placed that only one cell can
           still hold is fixed in that cell.

        Both rules use the known digits as they were at the start of the
        call, so cells collapsed by rule 2 are picked up on a later call.
        """
        members = self.members(cells)

        solved_digits = [cell.value for cell in members if cell.is_known()]
        for cell in members:
            if not cell.is_known():
                for digit in solved_digits:
                    cell.remove_possibility(digit)

        placed = set(solved_digits)
        for digit in sorted(DIGITS - placed):
            holders = [cell for cell in members if digit in cell]
            if len(holders) == 1:
                holders[0].set_possibilities({digit})

    def check(self, cells: CellGrid) -> None:
        """
        Raise Contradiction if this container can no longer be completed.
        """
        members = self.members(cells)
        seen = set()
        for (row, col), cell in zip(self.positions, members):
            if cell.is_impossible():
                raise Contradiction(
                    f"Cell ({row}, {col}) in {self} has no possibilities left")
            if cell.is_known():
                if cell.value in seen:
                    raise Contradiction(f"Digit {cell.value} appears twice in {self}")
                seen.add(cell.value)

        for digit in DIGITS:
            if not any(digit in cell for cell in members):
                raise Contradiction(f"Digit {digit} has no place left in {self}")

    def __repr__(self) -> str:
        return f"Container({self.kind!r}, {self.index})"

    def __str__(self) -> str:
        return f"{self.kind} {self.index}"


def build_containers() -> List[Container]:
    """
    Build the 27 containers of a 9x9 grid.

    Order is the 9 columns, then the 9 rows, then the 9 boxes. Boxes are
    numbered column of boxes first (bx outer, by inner).
    """
    containers = []

    for x in range(SUDOKU_SIZE):
        containers.append(Container("column", x, [(y, x) for y in range(SUDOKU_SIZE)]))

    for y in range(SUDOKU_SIZE):
        containers.append(Container("row", y, [(y, x) for x in range(SUDOKU_SIZE)]))

    boxes_per_side = SUDOKU_SIZE // BOX_SIZE
    for bx in range(boxes_per_side):
        for by in range(boxes_per_side):
            box = []
            for x in range(BOX_SIZE):
                for y in range(BOX_SIZE):
                    box.append((by * BOX_SIZE + y, bx * BOX_SIZE + x))
            containers.append(Container("box", bx * boxes_per_side + by, box))

    return containers
