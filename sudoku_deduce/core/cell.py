"""A single grid position and the digits it may still hold."""

from __future__ import annotations
from typing import Iterable, Optional, Set

SUDOKU_SIZE = 9
BOX_SIZE = 3
DIGITS = frozenset(range(1, SUDOKU_SIZE + 1))


class Cell:
    """
    Possibility set for one cell of the grid.

    A cell with one possibility left is known; a cell with none left
    marks a contradiction.
    """

    __slots__ = ("_possibilities",)

    def __init__(self, possibilities: Iterable[int] = DIGITS):
        self._possibilities: Set[int] = set(possibilities)

    @classmethod
    def given(cls, digit: int) -> Cell:
        """Create a cell fixed to a clue digit."""
        return cls((digit,))

    def is_known(self) -> bool:
        return len(self._possibilities) == 1

    def is_impossible(self) -> bool:
        return not self._possibilities

    def get_possibilities(self) -> Set[int]:
        """Return a copy of the digits still possible here."""
        return set(self._possibilities)

    def remove_possibility(self, value: int) -> None:
        self._possibilities.discard(value)

    def set_possibilities(self, possibilities: Iterable[int]) -> None:
        self._possibilities = set(possibilities)

    @property
    def value(self) -> Optional[int]:
        """The solved digit, or None while more than one digit remains."""
        if self.is_known():
            return next(iter(self._possibilities))
        return None

    def __len__(self) -> int:
        return len(self._possibilities)

    def __contains__(self, value: object) -> bool:
        return value in self._possibilities

    def __repr__(self) -> str:
        return f"Cell({sorted(self._possibilities)})"
