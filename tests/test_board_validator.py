from __future__ import annotations

import pytest

from contracts import rulebook
from solver import board
from solver.board import find_conflict, index, is_complete, is_valid, position

from _grids import CLASSIC, EMPTY, SOLVED, cells


def test_empty_grid_is_valid() -> None:
    assert is_valid(cells(EMPTY)) is True


def test_solved_grid_is_valid_and_complete() -> None:
    grid = cells(SOLVED)
    assert is_valid(grid) is True
    assert is_complete(grid) is True
    assert is_complete(cells(CLASSIC)) is False


def test_row_duplicate_is_rejected() -> None:
    grid = cells(EMPTY)
    grid[0] = 5
    grid[1] = 5
    assert is_valid(grid) is False
    conflict = find_conflict(grid)
    assert conflict is not None
    assert (conflict.unit, conflict.number, conflict.value, conflict.index) == ("row", 0, 5, 1)
    assert conflict.describe() == "Row 1: digit 5 is duplicated"


def test_column_duplicate_is_rejected() -> None:
    grid = cells(EMPTY)
    grid[index(0, 4)] = 7
    grid[index(8, 4)] = 7
    assert is_valid(grid) is False
    conflict = find_conflict(grid)
    assert conflict.unit == "column"
    assert conflict.number == 4
    assert conflict.index == index(8, 4)


def test_box_duplicate_is_rejected() -> None:
    # Same box, different rows and columns.
    grid = cells(EMPTY)
    grid[index(3, 6)] = 2
    grid[index(5, 8)] = 2
    assert is_valid(grid) is False
    conflict = find_conflict(grid)
    assert conflict.unit == "box"
    assert conflict.number == 5
    assert conflict.describe() == "Box 6: digit 2 is duplicated"


@pytest.mark.parametrize("bad", [10, 255, -1])
def test_out_of_range_values_are_invalid(bad: int) -> None:
    grid = [0] * 81
    grid[40] = bad
    assert is_valid(grid) is False
    conflict = find_conflict(grid)
    assert conflict.unit == "cell"
    assert conflict.index == 40


def test_wrong_length_is_invalid_without_raising() -> None:
    assert is_valid([0] * 80) is False
    assert is_valid([]) is False
    assert find_conflict([0] * 82).unit == "grid"


def test_validator_does_not_mutate() -> None:
    grid = cells(CLASSIC)
    before = bytes(grid)
    is_valid(grid)
    find_conflict(grid)
    assert bytes(grid) == before


def test_any_single_edit_of_solution_to_a_different_digit_is_rejected() -> None:
    solved = cells(SOLVED)
    for idx in (0, 13, 40, 67, 80):
        grid = bytearray(solved)
        grid[idx] = grid[idx] % 9 + 1
        assert is_valid(grid) is False


def test_index_and_position_are_row_major() -> None:
    assert index(0, 0) == 0
    assert index(1, 0) == 9
    assert index(8, 8) == 80
    assert position(40) == (4, 4)
    assert position(17) == (1, 8)


def test_board_and_rulebook_share_grid_geometry() -> None:
    assert (board.SIZE, board.BOX, board.CELLS, board.EMPTY) == (9, 3, 81, 0)
    assert board.is_cell_value is rulebook.is_cell_value
    assert rulebook.is_cell_value(9) and not rulebook.is_cell_value(True)
    assert not rulebook.check_cells(cells(SOLVED))
