"""
Completion and consistency checks on a grid.

Propagation can fill every cell without proving the result is consistent,
so a filled grid is only trusted once is_valid_solution accepts it.
"""

import numpy as np

from .grid import GROUPS, SIZE, Grid, group_name


def is_full(grid: Grid) -> bool:
    return grid.is_full()


def groups_valid(grid: Grid) -> bool:
    """Every row, column and box holds each digit 1-9 exactly once."""
    for rows, cols in GROUPS:
        tally = np.bincount(grid.values[rows, cols], minlength=SIZE + 1)
        if not np.all(tally[1:] == 1):
            return False
    return True


def is_valid_solution(grid: Grid) -> bool:
    return is_full(grid) and groups_valid(grid)


def find_conflicts(grid: Grid) -> list[str]:
    """
    List groups in which a placed digit appears more than once.

    Returns:
        list[str]: one message per (group, digit) clash, empty when consistent
    """
    conflicts = []
    for group, (rows, cols) in enumerate(GROUPS):
        tally = np.bincount(grid.values[rows, cols], minlength=SIZE + 1)
        for digit in np.flatnonzero(tally[1:] > 1) + 1:
            conflicts.append(f"{group_name(group).capitalize()} has duplicate given digit {digit}")
    return conflicts
