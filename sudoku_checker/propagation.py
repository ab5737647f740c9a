"""
Constraint propagation: candidate elimination and forced placements.

Nothing in this module guesses. Every rule only removes candidates that
cannot hold in any solution, or places a digit that is the only option left,
so repeated application converges on a fixpoint.
"""

import numpy as np

from .grid import DIGITS, GROUPS, SIZE, Grid, cell_groups


def _eliminate_placed(values: np.ndarray, notes: np.ndarray) -> bool:
    """Remove digits already placed in the group from its unplaced cells."""
    used = np.zeros(SIZE, dtype=bool)
    used[values[values > 0] - 1] = True

    clash = notes & used
    clash[values > 0] = False
    if not clash.any():
        return False
    notes &= ~clash
    return True


def _eliminate_naked_subsets(values: np.ndarray, notes: np.ndarray) -> bool:
    """
    Naked pairs/triples/... restricted to identical candidate sets.

    When exactly k unplaced cells share the same k-digit candidate set, those
    digits are used up by these cells and can be removed from the rest of the
    group. Cells whose sets merely fit inside a common k-digit union are not
    matched.
    """
    counts = notes.sum(axis=1)
    shared: dict[bytes, list[int]] = {}
    for i in range(SIZE):
        if values[i] == 0 and counts[i] > 1:
            shared.setdefault(notes[i].tobytes(), []).append(i)

    changed = False
    for pattern, members in shared.items():
        digits = np.frombuffer(pattern, dtype=bool)
        if len(members) != digits.sum():
            continue
        for i in range(SIZE):
            if values[i] != 0 or i in members:
                continue
            if (notes[i] & digits).any():
                notes[i] &= ~digits
                changed = True
    return changed


def update_group(grid: Grid, group: int) -> bool:
    """Run value elimination and naked-subset elimination on one group."""
    rows, cols = GROUPS[group]
    values = grid.values[rows, cols]
    notes = grid.candidates[rows, cols]

    placed = _eliminate_placed(values, notes)
    subsets = _eliminate_naked_subsets(values, notes)
    if placed or subsets:
        grid.candidates[rows, cols] = notes
        return True
    return False


def propagate_all(grid: Grid) -> bool:
    changed = False
    for group in range(len(GROUPS)):
        if update_group(grid, group):
            changed = True
    return changed


def assign_value(grid: Grid, row: int, col: int, digit: int) -> None:
    """Place a digit and immediately update the cell's row, column and box."""
    grid.values[row, col] = digit
    grid.candidates[row, col] = False
    for group in cell_groups(row, col):
        update_group(grid, group)


def _naked_singles(grid: Grid, group: int) -> bool:
    rows, cols = GROUPS[group]
    placed = False
    for r, c in zip(rows, cols):
        r, c = int(r), int(c)
        if grid.values[r, c] == 0 and grid.candidate_count(r, c) == 1:
            assign_value(grid, r, c, grid.candidate_digits(r, c)[0])
            placed = True
    return placed


def _hidden_singles(grid: Grid, group: int) -> bool:
    rows, cols = GROUPS[group]
    placed = False
    for digit in DIGITS:
        holders = np.flatnonzero(grid.candidates[rows, cols, digit - 1])
        if len(holders) == 1:
            i = holders[0]
            assign_value(grid, int(rows[i]), int(cols[i]), digit)
            placed = True
    return placed


def solve_group(grid: Grid, group: int) -> bool:
    """
    Place naked and hidden singles in one group until neither rule fires.

    Returns:
        bool: True if at least one digit was placed
    """
    changed = False
    while _naked_singles(grid, group) or _hidden_singles(grid, group):
        changed = True
    return changed


def solve_all(grid: Grid) -> bool:
    changed = False
    for group in range(len(GROUPS)):
        if solve_group(grid, group):
            changed = True
    return changed
