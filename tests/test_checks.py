"""Tests for the completion check and given-conflict detection."""

from sudoku_checker.checks import find_conflicts, groups_valid, is_full, is_valid_solution
from sudoku_checker.grid import load_grid

from .puzzles import EASY, EASY_SOLUTION, to_rows


def test_solved_grid_is_valid():
    grid = load_grid(to_rows(EASY_SOLUTION))
    assert is_full(grid)
    assert groups_valid(grid)
    assert is_valid_solution(grid)
    assert is_valid_solution(grid) == is_valid_solution(grid)


def test_partial_grid_is_not_a_solution():
    grid = load_grid(to_rows(EASY))
    assert not is_full(grid)
    assert not is_valid_solution(grid)
    assert is_valid_solution(grid) == is_valid_solution(grid)


def test_full_grid_with_repeated_digit_is_rejected():
    rows = to_rows(EASY_SOLUTION)
    # swap two cells across boxes: rows stay valid, columns and boxes break
    rows[0][0], rows[0][5] = rows[0][5], rows[0][0]
    grid = load_grid(rows)
    assert is_full(grid)
    assert not groups_valid(grid)
    assert not is_valid_solution(grid)


def test_find_conflicts_names_group_and_digit():
    rows = to_rows(EASY)
    rows[1][1] = 9  # 9 already sits at r2c5 and r3c2
    grid = load_grid(rows)
    assert find_conflicts(grid) == [
        "Row 2 has duplicate given digit 9",
        "Column 2 has duplicate given digit 9",
        "Box 1 has duplicate given digit 9",
    ]


def test_find_conflicts_empty_for_consistent_givens():
    assert find_conflicts(load_grid(to_rows(EASY))) == []
