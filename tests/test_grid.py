import pytest

from sudokusolver.core.grid import Grid
from sudokusolver.templates.example import EXAMPLE_CELLS, example_grid


def test_empty_grid():
    grid = Grid.empty()
    assert grid.cells == [0] * 81
    assert grid.is_empty()
    assert not grid.is_fully_valid()


def test_from_cells_requires_81_values():
    with pytest.raises(ValueError):
        Grid.from_cells([0] * 80)
    with pytest.raises(ValueError):
        Grid.from_cells([0] * 82)


def test_from_cells_rejects_out_of_range_values():
    with pytest.raises(ValueError):
        Grid.from_cells([10] + [0] * 80)
    with pytest.raises(ValueError):
        Grid.from_cells([-1] + [0] * 80)


def test_constructor_checks_length_and_values():
    with pytest.raises(ValueError):
        Grid([5])
    with pytest.raises(ValueError):
        Grid([0] * 80 + [12])


def test_get_and_set_use_row_major_index():
    grid = Grid.empty()
    grid.set(2, 1, 7)
    assert grid.cells[1 * 9 + 2] == 7
    assert grid.get(2, 1) == 7
    assert grid.get(1, 2) == 0


def test_get_out_of_range_returns_zero():
    grid = example_grid()
    assert grid.get(9, 0) == 0
    assert grid.get(0, 9) == 0
    assert grid.get(-1, 0) == 0


def test_row_column_group():
    grid = example_grid()
    assert grid.row(0) == [5, 3, 0, 0, 7, 0, 0, 0, 0]
    assert grid.column(0) == [5, 6, 0, 8, 4, 7, 0, 0, 0]
    assert grid.group(1, 1) == [5, 3, 0, 6, 0, 0, 0, 9, 8]
    # any cell of a block yields the same projection
    assert grid.group(8, 8) == grid.group(6, 6) == [2, 8, 0, 0, 0, 5, 0, 7, 9]


def test_can_place():
    grid = example_grid()
    assert not grid.can_place(2, 0, 5)  # row
    assert not grid.can_place(2, 0, 8)  # column
    assert not grid.can_place(2, 0, 9)  # group
    assert grid.can_place(2, 0, 4)


def test_is_fully_valid_on_example():
    grid = example_grid()
    assert grid.is_fully_valid()
    assert grid.is_fully_valid() == grid.is_fully_valid()


def test_duplicate_in_row_is_invalid():
    grid = Grid.empty()
    grid.set(0, 0, 5)
    grid.set(4, 0, 5)
    assert not grid.is_fully_valid()


def test_duplicates_in_last_row_and_column_are_found():
    grid = Grid.empty()
    grid.set(0, 8, 3)
    grid.set(5, 8, 3)
    assert not grid.is_fully_valid()

    grid = Grid.empty()
    grid.set(8, 0, 4)
    grid.set(8, 7, 4)
    assert not grid.is_fully_valid()


def test_duplicate_in_group_is_invalid():
    grid = Grid.empty()
    grid.set(3, 3, 6)
    grid.set(5, 5, 6)
    assert not grid.is_fully_valid()


def test_copy_is_independent():
    grid = example_grid()
    clone = grid.copy()
    assert clone == grid
    clone.set(2, 0, 4)
    assert grid.get(2, 0) == 0
    assert grid.cells == EXAMPLE_CELLS


def test_is_solved():
    assert not example_grid().is_solved()
