"""Unit tests for the cell possibility set."""

import pytest
from sudoku_deduce.core.cell import Cell, DIGITS


class TestCell:
    """Tests for Cell."""

    def test_blank_cell_has_all_digits(self):
        cell = Cell()
        assert cell.get_possibilities() == set(range(1, 10))
        assert len(cell) == 9
        assert not cell.is_known()
        assert not cell.is_impossible()
        assert cell.value is None

    def test_given_cell_is_known(self):
        cell = Cell.given(7)
        assert cell.is_known()
        assert cell.value == 7
        assert cell.get_possibilities() == {7}

    def test_remove_possibility(self):
        cell = Cell()
        cell.remove_possibility(3)
        assert 3 not in cell
        assert len(cell) == 8

    def test_remove_is_idempotent(self):
        """Removing an absent digit is a no-op."""
        cell = Cell({1, 2})
        cell.remove_possibility(5)
        cell.remove_possibility(2)
        cell.remove_possibility(2)
        assert cell.get_possibilities() == {1}
        assert cell.is_known()

    def test_remove_last_possibility(self):
        cell = Cell.given(4)
        cell.remove_possibility(4)
        assert cell.is_impossible()
        assert not cell.is_known()
        assert cell.value is None

    def test_get_possibilities_returns_copy(self):
        """Mutating the returned set must not touch the cell."""
        cell = Cell()
        possibilities = cell.get_possibilities()
        possibilities.clear()
        assert cell.get_possibilities() == set(DIGITS)

    def test_set_possibilities(self):
        cell = Cell()
        cell.set_possibilities({6})
        assert cell.is_known()
        assert cell.value == 6

    def test_repr(self):
        assert repr(Cell({3, 1})) == "Cell([1, 3])"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
