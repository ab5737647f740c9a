"""
Propagation-first Sudoku solver with backtracking on stalls.
"""

from enum import Enum
from typing import NamedTuple, Sequence

import numpy as np

from .checks import find_conflicts, is_valid_solution
from .grid import Grid, load_grid
from .propagation import assign_value, propagate_all, solve_all


class Outcome(Enum):
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"


class SolveResult(NamedTuple):
    outcome: Outcome
    guesses: int


class Solver:
    """
    Runs the propagate/guess loop over one live grid.

    The guess counter lives here rather than in module state, so independent
    solves never share it.
    """

    def __init__(self, grid: Grid, debug: bool = False):
        self.grid = grid
        self.guesses = 0
        self.debug = debug

    def solve_loop(self) -> bool:
        """Propagate until the grid is full; guess whenever nothing changes."""
        while not self.grid.is_full():
            eliminated = propagate_all(self.grid)
            placed = solve_all(self.grid)
            if not eliminated and not placed:
                return self.guess()
        return True

    def best_guess(self) -> tuple[int, int] | None:
        """
        Pick the unplaced cell with the fewest candidates (first in row-major order).

        Returns None when an unplaced cell has no candidate left, which means
        the current branch cannot be completed.
        """
        open_cells = self.grid.values == 0
        counts = self.grid.counts
        if np.any(counts[open_cells] == 0):
            return None
        ranked = np.where(open_cells, counts, counts.max() + 1)
        r, c = np.unravel_index(np.argmin(ranked), ranked.shape)
        return int(r), int(c)

    def guess(self) -> bool:
        cell = self.best_guess()
        if cell is None:
            if self.debug:
                print("      Dead end: a cell has no candidates left")
            return False

        r, c = cell
        snapshot = self.grid.copy()
        for digit in snapshot.candidate_digits(r, c):
            self.guesses += 1
            if self.debug:
                print(f"      Guess #{self.guesses}: r{r + 1}c{c + 1} = {digit}")
            assign_value(self.grid, r, c, digit)
            if self.solve_loop():
                return True
            if self.debug:
                print(f"      Backtrack: r{r + 1}c{c + 1} != {digit}")
            self.grid.restore(snapshot)
        return False


def solve(grid: Grid, debug: bool = False) -> SolveResult:
    """
    Solve a grid in place.

    A filled grid only counts as solved when every group holds each digit
    once. On failure the grid is put back to the state it was passed in.

    Args:
        grid: Grid produced by load_grid
        debug: Print guesses and backtracks as they happen

    Returns:
        SolveResult: (outcome, number of guesses made)
    """
    conflicts = find_conflicts(grid)
    if conflicts:
        if debug:
            print(f"      Givens clash: {conflicts[0]}")
        return SolveResult(Outcome.UNSOLVABLE, 0)

    start = grid.copy()
    solver = Solver(grid, debug=debug)
    if solver.solve_loop() and is_valid_solution(grid):
        return SolveResult(Outcome.SOLVED, solver.guesses)

    grid.restore(start)
    return SolveResult(Outcome.UNSOLVABLE, solver.guesses)


def solve_puzzle(rows: Sequence[Sequence[int | None]], debug: bool = False) -> tuple[list[list[int]] | None, int, str]:
    """
    Return the solved rows, or (None, guesses, reason) if the puzzle has no solution.

    Raises:
        MalformedInputError: if rows is not a 9x9 grid of digits/blanks
    """
    grid = load_grid(rows)
    conflicts = find_conflicts(grid)
    if conflicts:
        return None, 0, conflicts[0]

    outcome, guesses = solve(grid, debug=debug)
    if outcome is Outcome.SOLVED:
        return grid.to_rows(), guesses, f"Solved with {guesses} guesses"
    return None, guesses, "No solution found"
